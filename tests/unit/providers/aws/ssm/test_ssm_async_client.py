"""Tests for the asynchronous SSM facade."""

import inspect
import threading
from unittest.mock import Mock

import pytest

from domain.base.exceptions import InvalidArgumentError
from infrastructure.concurrency.async_executor import AsyncHandler, AsyncOperationExecutor
from providers.aws.exceptions.aws_exceptions import AWSEntityNotFoundError
from providers.aws.ssm.async_client import (
    SimpleSystemsManagementAsync,
    SimpleSystemsManagementAsyncClient,
)
from providers.aws.ssm.client import SimpleSystemsManagement
from providers.aws.ssm.model import (
    CancelCommandRequest,
    CancelCommandResult,
    CreateDocumentRequest,
    DeleteDocumentRequest,
    DescribeDocumentRequest,
    GetDocumentRequest,
    GetDocumentResult,
    ListDocumentsRequest,
    ListDocumentsResult,
    SendCommandRequest,
)

SYNC_OPERATIONS = sorted(
    name
    for name, member in inspect.getmembers(SimpleSystemsManagement, inspect.isfunction)
    if getattr(member, "__isabstractmethod__", False)
)


class TestSimpleSystemsManagementAsyncClient:
    """Test suite for SimpleSystemsManagementAsyncClient."""

    @pytest.fixture
    def sync_client(self):
        return Mock(spec=SimpleSystemsManagement)

    @pytest.fixture
    def async_client(self, sync_client, logger):
        client = SimpleSystemsManagementAsyncClient(
            sync_client, AsyncOperationExecutor(max_workers=2, logger=logger)
        )
        yield client
        client.shutdown()

    def test_every_operation_has_an_async_variant(self):
        assert len(SYNC_OPERATIONS) == 18
        for name in SYNC_OPERATIONS:
            assert hasattr(SimpleSystemsManagementAsync, f"{name}_async")
            assert getattr(SimpleSystemsManagementAsync, f"{name}_async").__isabstractmethod__

    @pytest.mark.parametrize("operation", SYNC_OPERATIONS)
    def test_async_variant_delegates_to_sync_operation(self, operation, sync_client, async_client):
        request = object()
        expected = Mock(name=f"{operation}_result")
        getattr(sync_client, operation).return_value = expected

        future = getattr(async_client, f"{operation}_async")(request)

        assert future.result(timeout=5) is expected
        getattr(sync_client, operation).assert_called_once_with(request)

    def test_async_result_equals_sync_result(self, sync_client, async_client):
        sync_client.get_document.side_effect = lambda request: GetDocumentResult(
            name=request.name, content="{}"
        )
        request = GetDocumentRequest(name="my-doc")

        async_result = async_client.get_document_async(request).result(timeout=5)

        assert async_result == sync_client.get_document(request)

    def test_handler_receives_success_once(self, sync_client, async_client):
        result = CancelCommandResult()
        sync_client.cancel_command.return_value = result
        handler = Mock(spec=AsyncHandler)
        request = CancelCommandRequest(command_id="c-1")

        future = async_client.cancel_command_async(request, handler)

        assert future.result(timeout=5) is result
        handler.on_success.assert_called_once_with(request, result)
        handler.on_error.assert_not_called()

    def test_handler_receives_error_once(self, sync_client, async_client):
        error = AWSEntityNotFoundError("missing", error_code="InvalidDocument")
        sync_client.delete_document.side_effect = error
        handler = Mock(spec=AsyncHandler)

        future = async_client.delete_document_async(DeleteDocumentRequest(name="gone"), handler)

        assert future.exception(timeout=5) is error
        handler.on_error.assert_called_once_with(error)
        handler.on_success.assert_not_called()

    def test_list_documents_async_without_request(self, sync_client, async_client):
        sync_client.list_documents.return_value = ListDocumentsResult()

        async_client.list_documents_async().result(timeout=5)

        (request,), _ = sync_client.list_documents.call_args
        assert request == ListDocumentsRequest()

    def test_calls_run_off_the_caller_thread(self, sync_client, async_client):
        threads = []
        sync_client.send_command.side_effect = lambda request: threads.append(
            threading.current_thread()
        )

        async_client.send_command_async(SendCommandRequest(document_name="doc")).result(timeout=5)

        assert threads and threads[0] is not threading.current_thread()

    def test_exposes_sync_client(self, sync_client, async_client):
        assert async_client.client is sync_client

    def test_creates_executor_when_omitted(self, sync_client):
        with SimpleSystemsManagementAsyncClient(sync_client, max_workers=1) as client:
            sync_client.describe_document.return_value = "described"

            future = client.describe_document_async(DescribeDocumentRequest(name="doc"))

            assert future.result(timeout=5) == "described"

    def test_max_workers_with_given_executor_is_rejected(self, sync_client, logger):
        executor = AsyncOperationExecutor(max_workers=1, logger=logger)
        try:
            with pytest.raises(InvalidArgumentError, match="max_workers"):
                SimpleSystemsManagementAsyncClient(sync_client, executor, max_workers=4)
        finally:
            executor.shutdown()

    def test_shutdown_waits_for_in_flight_calls(self, sync_client, logger):
        client = SimpleSystemsManagementAsyncClient(
            sync_client, AsyncOperationExecutor(max_workers=1, logger=logger)
        )
        sync_client.create_document.return_value = "created"

        future = client.create_document_async(CreateDocumentRequest(name="doc", content="{}"))
        client.shutdown()

        assert future.done()
        assert future.result() == "created"
