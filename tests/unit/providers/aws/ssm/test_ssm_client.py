"""Tests for the boto3-backed SSM client with a mocked service client."""

from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, ParamValidationError

from domain.base.exceptions import InvalidArgumentError
from providers.aws.exceptions.aws_exceptions import (
    AWSEntityNotFoundError,
    AWSValidationError,
    NetworkError,
)
from providers.aws.infrastructure.aws_client import AWSClient
from providers.aws.ssm.client import SimpleSystemsManagementClient
from providers.aws.ssm.model import (
    CancelCommandRequest,
    CancelCommandResult,
    ListDocumentsRequest,
    ListDocumentsResult,
    SendCommandRequest,
)


class TestSimpleSystemsManagementClient:
    """Test suite for SimpleSystemsManagementClient."""

    @pytest.fixture
    def boto_ssm(self):
        return Mock()

    @pytest.fixture
    def client(self, boto_ssm, logger):
        aws_client = Mock(spec=AWSClient)
        aws_client.ssm_client = boto_ssm
        return SimpleSystemsManagementClient(aws_client, logger)

    def test_request_is_sent_as_keyword_arguments(self, client, boto_ssm):
        boto_ssm.send_command.return_value = {"Command": {"CommandId": "c-1"}}

        result = client.send_command(
            SendCommandRequest(document_name="AWS-RunShellScript", instance_ids=["i-1"])
        )

        boto_ssm.send_command.assert_called_once_with(
            DocumentName="AWS-RunShellScript", InstanceIds=["i-1"]
        )
        assert result.command == {"CommandId": "c-1"}

    def test_result_type_matches_operation(self, client, boto_ssm):
        boto_ssm.cancel_command.return_value = {"ResponseMetadata": {"RequestId": "r-1"}}

        result = client.cancel_command(CancelCommandRequest(command_id="c-1"))

        assert isinstance(result, CancelCommandResult)
        assert result.response_metadata == {"RequestId": "r-1"}

    def test_list_documents_without_request(self, client, boto_ssm):
        boto_ssm.list_documents.return_value = {
            "DocumentIdentifiers": [{"Name": "AWS-RunShellScript"}],
            "NextToken": "t-2",
        }

        result = client.list_documents()

        boto_ssm.list_documents.assert_called_once_with()
        assert isinstance(result, ListDocumentsResult)
        assert result.document_identifiers == [{"Name": "AWS-RunShellScript"}]
        assert result.next_token == "t-2"

    def test_list_documents_with_request(self, client, boto_ssm):
        boto_ssm.list_documents.return_value = {"DocumentIdentifiers": []}

        client.list_documents(ListDocumentsRequest(max_results=5, next_token="t-1"))

        boto_ssm.list_documents.assert_called_once_with(MaxResults=5, NextToken="t-1")

    def test_none_request_is_rejected(self, client, boto_ssm):
        with pytest.raises(InvalidArgumentError):
            client.cancel_command(None)

        boto_ssm.cancel_command.assert_not_called()

    def test_client_error_is_translated(self, client, boto_ssm):
        boto_ssm.cancel_command.side_effect = ClientError(
            {
                "Error": {"Code": "InvalidCommandId", "Message": "unknown command"},
                "ResponseMetadata": {"RequestId": "r-9", "HTTPStatusCode": 400},
            },
            "CancelCommand",
        )

        with pytest.raises(AWSValidationError) as exc_info:
            client.cancel_command(CancelCommandRequest(command_id="c-404"))

        assert exc_info.value.error_code == "InvalidCommandId"
        assert isinstance(exc_info.value.__cause__, ClientError)

    def test_not_found_error(self, client, boto_ssm):
        boto_ssm.cancel_command.side_effect = ClientError(
            {"Error": {"Code": "InvalidDocument", "Message": "missing"}}, "CancelCommand"
        )

        with pytest.raises(AWSEntityNotFoundError):
            client.cancel_command(CancelCommandRequest(command_id="c-1"))

    def test_param_validation_error(self, client, boto_ssm):
        boto_ssm.cancel_command.side_effect = ParamValidationError(report="bad CommandId")

        with pytest.raises(AWSValidationError, match="bad CommandId"):
            client.cancel_command(CancelCommandRequest(command_id=""))

    def test_endpoint_error(self, client, boto_ssm):
        boto_ssm.cancel_command.side_effect = EndpointConnectionError(
            endpoint_url="https://ssm.us-east-1.amazonaws.com"
        )

        with pytest.raises(NetworkError):
            client.cancel_command(CancelCommandRequest(command_id="c-1"))
