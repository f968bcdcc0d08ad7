"""
Asynchronous Amazon SSM contract and its worker-pool implementation.

Every ``*_async`` method runs the synchronous operation of the same name on an
AsyncOperationExecutor and returns a Future for its result. Passing an
``async_handler`` additionally signals exactly one of its callbacks.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Optional

from domain.base.exceptions import InvalidArgumentError
from domain.base.ports import LoggingPort
from infrastructure.concurrency.async_executor import AsyncHandler, AsyncOperationExecutor
from providers.aws.ssm.client import SimpleSystemsManagement
from providers.aws.ssm.model import (
    CancelCommandRequest,
    CancelCommandResult,
    CreateAssociationRequest,
    CreateAssociationResult,
    CreateAssociationBatchRequest,
    CreateAssociationBatchResult,
    CreateDocumentRequest,
    CreateDocumentResult,
    DeleteAssociationRequest,
    DeleteAssociationResult,
    DeleteDocumentRequest,
    DeleteDocumentResult,
    DescribeAssociationRequest,
    DescribeAssociationResult,
    DescribeDocumentRequest,
    DescribeDocumentResult,
    DescribeDocumentPermissionRequest,
    DescribeDocumentPermissionResult,
    DescribeInstanceInformationRequest,
    DescribeInstanceInformationResult,
    GetDocumentRequest,
    GetDocumentResult,
    ListAssociationsRequest,
    ListAssociationsResult,
    ListCommandInvocationsRequest,
    ListCommandInvocationsResult,
    ListCommandsRequest,
    ListCommandsResult,
    ListDocumentsRequest,
    ListDocumentsResult,
    ModifyDocumentPermissionRequest,
    ModifyDocumentPermissionResult,
    SendCommandRequest,
    SendCommandResult,
    UpdateAssociationStatusRequest,
    UpdateAssociationStatusResult,
)


class SimpleSystemsManagementAsync(ABC):
    """Asynchronous interface for Amazon EC2 Simple Systems Manager."""

    @abstractmethod
    def cancel_command_async(
        self,
        request: CancelCommandRequest,
        async_handler: Optional[AsyncHandler[CancelCommandRequest, CancelCommandResult]] = None,
    ) -> "Future[CancelCommandResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.cancel_command`."""

    @abstractmethod
    def create_association_async(
        self,
        request: CreateAssociationRequest,
        async_handler: Optional[AsyncHandler[CreateAssociationRequest, CreateAssociationResult]] = None,
    ) -> "Future[CreateAssociationResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.create_association`."""

    @abstractmethod
    def create_association_batch_async(
        self,
        request: CreateAssociationBatchRequest,
        async_handler: Optional[AsyncHandler[CreateAssociationBatchRequest, CreateAssociationBatchResult]] = None,
    ) -> "Future[CreateAssociationBatchResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.create_association_batch`."""

    @abstractmethod
    def create_document_async(
        self,
        request: CreateDocumentRequest,
        async_handler: Optional[AsyncHandler[CreateDocumentRequest, CreateDocumentResult]] = None,
    ) -> "Future[CreateDocumentResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.create_document`."""

    @abstractmethod
    def delete_association_async(
        self,
        request: DeleteAssociationRequest,
        async_handler: Optional[AsyncHandler[DeleteAssociationRequest, DeleteAssociationResult]] = None,
    ) -> "Future[DeleteAssociationResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.delete_association`."""

    @abstractmethod
    def delete_document_async(
        self,
        request: DeleteDocumentRequest,
        async_handler: Optional[AsyncHandler[DeleteDocumentRequest, DeleteDocumentResult]] = None,
    ) -> "Future[DeleteDocumentResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.delete_document`."""

    @abstractmethod
    def describe_association_async(
        self,
        request: DescribeAssociationRequest,
        async_handler: Optional[AsyncHandler[DescribeAssociationRequest, DescribeAssociationResult]] = None,
    ) -> "Future[DescribeAssociationResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.describe_association`."""

    @abstractmethod
    def describe_document_async(
        self,
        request: DescribeDocumentRequest,
        async_handler: Optional[AsyncHandler[DescribeDocumentRequest, DescribeDocumentResult]] = None,
    ) -> "Future[DescribeDocumentResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.describe_document`."""

    @abstractmethod
    def describe_document_permission_async(
        self,
        request: DescribeDocumentPermissionRequest,
        async_handler: Optional[AsyncHandler[DescribeDocumentPermissionRequest, DescribeDocumentPermissionResult]] = None,
    ) -> "Future[DescribeDocumentPermissionResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.describe_document_permission`."""

    @abstractmethod
    def describe_instance_information_async(
        self,
        request: DescribeInstanceInformationRequest,
        async_handler: Optional[AsyncHandler[DescribeInstanceInformationRequest, DescribeInstanceInformationResult]] = None,
    ) -> "Future[DescribeInstanceInformationResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.describe_instance_information`."""

    @abstractmethod
    def get_document_async(
        self,
        request: GetDocumentRequest,
        async_handler: Optional[AsyncHandler[GetDocumentRequest, GetDocumentResult]] = None,
    ) -> "Future[GetDocumentResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.get_document`."""

    @abstractmethod
    def list_associations_async(
        self,
        request: ListAssociationsRequest,
        async_handler: Optional[AsyncHandler[ListAssociationsRequest, ListAssociationsResult]] = None,
    ) -> "Future[ListAssociationsResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.list_associations`."""

    @abstractmethod
    def list_command_invocations_async(
        self,
        request: ListCommandInvocationsRequest,
        async_handler: Optional[AsyncHandler[ListCommandInvocationsRequest, ListCommandInvocationsResult]] = None,
    ) -> "Future[ListCommandInvocationsResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.list_command_invocations`."""

    @abstractmethod
    def list_commands_async(
        self,
        request: ListCommandsRequest,
        async_handler: Optional[AsyncHandler[ListCommandsRequest, ListCommandsResult]] = None,
    ) -> "Future[ListCommandsResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.list_commands`."""

    @abstractmethod
    def list_documents_async(
        self,
        request: Optional[ListDocumentsRequest] = None,
        async_handler: Optional[AsyncHandler[ListDocumentsRequest, ListDocumentsResult]] = None,
    ) -> "Future[ListDocumentsResult]":
        """Asynchronous list_documents; without a request it lists every visible document."""

    @abstractmethod
    def modify_document_permission_async(
        self,
        request: ModifyDocumentPermissionRequest,
        async_handler: Optional[AsyncHandler[ModifyDocumentPermissionRequest, ModifyDocumentPermissionResult]] = None,
    ) -> "Future[ModifyDocumentPermissionResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.modify_document_permission`."""

    @abstractmethod
    def send_command_async(
        self,
        request: SendCommandRequest,
        async_handler: Optional[AsyncHandler[SendCommandRequest, SendCommandResult]] = None,
    ) -> "Future[SendCommandResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.send_command`."""

    @abstractmethod
    def update_association_status_async(
        self,
        request: UpdateAssociationStatusRequest,
        async_handler: Optional[AsyncHandler[UpdateAssociationStatusRequest, UpdateAssociationStatusResult]] = None,
    ) -> "Future[UpdateAssociationStatusResult]":
        """Asynchronous variant of :meth:`SimpleSystemsManagement.update_association_status`."""


class SimpleSystemsManagementAsyncClient(SimpleSystemsManagementAsync):
    """
    Runs a SimpleSystemsManagement client's operations on a worker pool.

    Retries and timeouts stay with the wrapped synchronous client; this layer
    only schedules calls and reports completion.
    """

    def __init__(
        self,
        client: SimpleSystemsManagement,
        executor: Optional[AsyncOperationExecutor] = None,
        max_workers: Optional[int] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        """
        Args:
            client: Synchronous client whose operations back the async methods
            executor: Executor adapter to submit to; one is created when omitted
            max_workers: Worker count for a created executor; not allowed with ``executor``
            logger: Logging port passed to a created executor

        Raises:
            InvalidArgumentError: If both ``executor`` and ``max_workers`` are given
        """
        if executor is not None and max_workers is not None:
            raise InvalidArgumentError(
                "max_workers applies only to a created executor; size the given executor instead"
            )
        self._client = client
        if executor is None:
            kwargs = {"logger": logger}
            if max_workers is not None:
                kwargs["max_workers"] = max_workers
            executor = AsyncOperationExecutor(**kwargs)
        self._executor = executor

    @property
    def client(self) -> SimpleSystemsManagement:
        """The synchronous client behind every async method."""
        return self._client

    @property
    def executor(self) -> AsyncOperationExecutor:
        return self._executor

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the worker pool; in-flight operations finish when ``wait`` is True."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "SimpleSystemsManagementAsyncClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    def cancel_command_async(
        self,
        request: CancelCommandRequest,
        async_handler: Optional[AsyncHandler[CancelCommandRequest, CancelCommandResult]] = None,
    ) -> "Future[CancelCommandResult]":
        return self._executor.submit(self._client.cancel_command, request, async_handler)

    def create_association_async(
        self,
        request: CreateAssociationRequest,
        async_handler: Optional[AsyncHandler[CreateAssociationRequest, CreateAssociationResult]] = None,
    ) -> "Future[CreateAssociationResult]":
        return self._executor.submit(self._client.create_association, request, async_handler)

    def create_association_batch_async(
        self,
        request: CreateAssociationBatchRequest,
        async_handler: Optional[AsyncHandler[CreateAssociationBatchRequest, CreateAssociationBatchResult]] = None,
    ) -> "Future[CreateAssociationBatchResult]":
        return self._executor.submit(self._client.create_association_batch, request, async_handler)

    def create_document_async(
        self,
        request: CreateDocumentRequest,
        async_handler: Optional[AsyncHandler[CreateDocumentRequest, CreateDocumentResult]] = None,
    ) -> "Future[CreateDocumentResult]":
        return self._executor.submit(self._client.create_document, request, async_handler)

    def delete_association_async(
        self,
        request: DeleteAssociationRequest,
        async_handler: Optional[AsyncHandler[DeleteAssociationRequest, DeleteAssociationResult]] = None,
    ) -> "Future[DeleteAssociationResult]":
        return self._executor.submit(self._client.delete_association, request, async_handler)

    def delete_document_async(
        self,
        request: DeleteDocumentRequest,
        async_handler: Optional[AsyncHandler[DeleteDocumentRequest, DeleteDocumentResult]] = None,
    ) -> "Future[DeleteDocumentResult]":
        return self._executor.submit(self._client.delete_document, request, async_handler)

    def describe_association_async(
        self,
        request: DescribeAssociationRequest,
        async_handler: Optional[AsyncHandler[DescribeAssociationRequest, DescribeAssociationResult]] = None,
    ) -> "Future[DescribeAssociationResult]":
        return self._executor.submit(self._client.describe_association, request, async_handler)

    def describe_document_async(
        self,
        request: DescribeDocumentRequest,
        async_handler: Optional[AsyncHandler[DescribeDocumentRequest, DescribeDocumentResult]] = None,
    ) -> "Future[DescribeDocumentResult]":
        return self._executor.submit(self._client.describe_document, request, async_handler)

    def describe_document_permission_async(
        self,
        request: DescribeDocumentPermissionRequest,
        async_handler: Optional[AsyncHandler[DescribeDocumentPermissionRequest, DescribeDocumentPermissionResult]] = None,
    ) -> "Future[DescribeDocumentPermissionResult]":
        return self._executor.submit(self._client.describe_document_permission, request, async_handler)

    def describe_instance_information_async(
        self,
        request: DescribeInstanceInformationRequest,
        async_handler: Optional[AsyncHandler[DescribeInstanceInformationRequest, DescribeInstanceInformationResult]] = None,
    ) -> "Future[DescribeInstanceInformationResult]":
        return self._executor.submit(self._client.describe_instance_information, request, async_handler)

    def get_document_async(
        self,
        request: GetDocumentRequest,
        async_handler: Optional[AsyncHandler[GetDocumentRequest, GetDocumentResult]] = None,
    ) -> "Future[GetDocumentResult]":
        return self._executor.submit(self._client.get_document, request, async_handler)

    def list_associations_async(
        self,
        request: ListAssociationsRequest,
        async_handler: Optional[AsyncHandler[ListAssociationsRequest, ListAssociationsResult]] = None,
    ) -> "Future[ListAssociationsResult]":
        return self._executor.submit(self._client.list_associations, request, async_handler)

    def list_command_invocations_async(
        self,
        request: ListCommandInvocationsRequest,
        async_handler: Optional[AsyncHandler[ListCommandInvocationsRequest, ListCommandInvocationsResult]] = None,
    ) -> "Future[ListCommandInvocationsResult]":
        return self._executor.submit(self._client.list_command_invocations, request, async_handler)

    def list_commands_async(
        self,
        request: ListCommandsRequest,
        async_handler: Optional[AsyncHandler[ListCommandsRequest, ListCommandsResult]] = None,
    ) -> "Future[ListCommandsResult]":
        return self._executor.submit(self._client.list_commands, request, async_handler)

    def list_documents_async(
        self,
        request: Optional[ListDocumentsRequest] = None,
        async_handler: Optional[AsyncHandler[ListDocumentsRequest, ListDocumentsResult]] = None,
    ) -> "Future[ListDocumentsResult]":
        return self._executor.submit(
            self._client.list_documents, request or ListDocumentsRequest(), async_handler
        )

    def modify_document_permission_async(
        self,
        request: ModifyDocumentPermissionRequest,
        async_handler: Optional[AsyncHandler[ModifyDocumentPermissionRequest, ModifyDocumentPermissionResult]] = None,
    ) -> "Future[ModifyDocumentPermissionResult]":
        return self._executor.submit(self._client.modify_document_permission, request, async_handler)

    def send_command_async(
        self,
        request: SendCommandRequest,
        async_handler: Optional[AsyncHandler[SendCommandRequest, SendCommandResult]] = None,
    ) -> "Future[SendCommandResult]":
        return self._executor.submit(self._client.send_command, request, async_handler)

    def update_association_status_async(
        self,
        request: UpdateAssociationStatusRequest,
        async_handler: Optional[AsyncHandler[UpdateAssociationStatusRequest, UpdateAssociationStatusResult]] = None,
    ) -> "Future[UpdateAssociationStatusResult]":
        return self._executor.submit(self._client.update_association_status, request, async_handler)
