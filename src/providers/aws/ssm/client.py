"""Synchronous Amazon SSM contract and its boto3-backed implementation."""

from abc import ABC, abstractmethod
from typing import Optional, TypeVar

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    ParamValidationError,
    ReadTimeoutError,
)

from domain.base.ports import LoggingPort
from infrastructure.adapters.logging_adapter import LoggingAdapter
from providers.aws.exceptions.aws_exceptions import (
    AuthorizationError,
    AWSClientError,
    AWSValidationError,
    InvalidArgumentError,
    NetworkError,
    translate_client_error,
)
from providers.aws.infrastructure.aws_client import AWSClient
from providers.aws.ssm.model import (
    CancelCommandRequest,
    CancelCommandResult,
    CreateAssociationBatchRequest,
    CreateAssociationBatchResult,
    CreateAssociationRequest,
    CreateAssociationResult,
    CreateDocumentRequest,
    CreateDocumentResult,
    DeleteAssociationRequest,
    DeleteAssociationResult,
    DeleteDocumentRequest,
    DeleteDocumentResult,
    DescribeAssociationRequest,
    DescribeAssociationResult,
    DescribeDocumentPermissionRequest,
    DescribeDocumentPermissionResult,
    DescribeDocumentRequest,
    DescribeDocumentResult,
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
    SSMRequest,
    SSMResult,
    UpdateAssociationStatusRequest,
    UpdateAssociationStatusResult,
)

ResultT = TypeVar("ResultT", bound=SSMResult)


class SimpleSystemsManagement(ABC):
    """
    Blocking interface for Amazon EC2 Simple Systems Manager.

    SSM runs commands on managed instances from SSM documents and associates
    documents with instances so their configuration is applied continuously.
    """

    @abstractmethod
    def cancel_command(self, request: CancelCommandRequest) -> CancelCommandResult:
        """Attempt to cancel a command; cancellation is not guaranteed once it runs."""

    @abstractmethod
    def create_association(self, request: CreateAssociationRequest) -> CreateAssociationResult:
        """Associate an SSM document with an instance."""

    @abstractmethod
    def create_association_batch(
        self, request: CreateAssociationBatchRequest
    ) -> CreateAssociationBatchResult:
        """Associate documents with instances in one call."""

    @abstractmethod
    def create_document(self, request: CreateDocumentRequest) -> CreateDocumentResult:
        """Create an SSM document."""

    @abstractmethod
    def delete_association(self, request: DeleteAssociationRequest) -> DeleteAssociationResult:
        """Disassociate a document from an instance."""

    @abstractmethod
    def delete_document(self, request: DeleteDocumentRequest) -> DeleteDocumentResult:
        """Delete a document that has no remaining associations."""

    @abstractmethod
    def describe_association(
        self, request: DescribeAssociationRequest
    ) -> DescribeAssociationResult:
        """Describe the association between a document and an instance."""

    @abstractmethod
    def describe_document(self, request: DescribeDocumentRequest) -> DescribeDocumentResult:
        """Describe a document."""

    @abstractmethod
    def describe_document_permission(
        self, request: DescribeDocumentPermissionRequest
    ) -> DescribeDocumentPermissionResult:
        """List the accounts a private document is shared with."""

    @abstractmethod
    def describe_instance_information(
        self, request: DescribeInstanceInformationRequest
    ) -> DescribeInstanceInformationResult:
        """Describe managed instances."""

    @abstractmethod
    def get_document(self, request: GetDocumentRequest) -> GetDocumentResult:
        """Get the content of a document."""

    @abstractmethod
    def list_associations(self, request: ListAssociationsRequest) -> ListAssociationsResult:
        """List associations for a document or an instance."""

    @abstractmethod
    def list_command_invocations(
        self, request: ListCommandInvocationsRequest
    ) -> ListCommandInvocationsResult:
        """List per-instance invocations of commands."""

    @abstractmethod
    def list_commands(self, request: ListCommandsRequest) -> ListCommandsResult:
        """List commands requested by users of the account."""

    @abstractmethod
    def list_documents(self, request: Optional[ListDocumentsRequest] = None) -> ListDocumentsResult:
        """List documents; called without a request it lists everything visible."""

    @abstractmethod
    def modify_document_permission(
        self, request: ModifyDocumentPermissionRequest
    ) -> ModifyDocumentPermissionResult:
        """Share or stop sharing a document with other accounts."""

    @abstractmethod
    def send_command(self, request: SendCommandRequest) -> SendCommandResult:
        """Run a document on one or more instances."""

    @abstractmethod
    def update_association_status(
        self, request: UpdateAssociationStatusRequest
    ) -> UpdateAssociationStatusResult:
        """Update the status of an association."""


class SimpleSystemsManagementClient(SimpleSystemsManagement):
    """SimpleSystemsManagement implementation backed by a boto3 ``ssm`` client."""

    def __init__(self, aws_client: AWSClient, logger: Optional[LoggingPort] = None) -> None:
        self.aws_client = aws_client
        self._logger = logger or LoggingAdapter("awsbind.ssm")

    def _invoke(
        self, operation_name: str, request: SSMRequest, result_type: type[ResultT]
    ) -> ResultT:
        """
        Send one request through boto3 and wrap the response.

        Raises:
            InvalidArgumentError: If request is None
            AWSServiceError: (or a subclass) when the service returns an error
            NetworkError: If the endpoint cannot be reached
        """
        if request is None:
            raise InvalidArgumentError(f"Invalid argument passed to {operation_name}(...)")

        params = request.to_params()
        self._logger.debug("Calling ssm.%s with parameters: %s", operation_name, sorted(params))
        method = getattr(self.aws_client.ssm_client, operation_name)

        try:
            response = method(**params)
        except ClientError as e:
            error = translate_client_error(e)
            self._logger.error("ssm.%s failed: %s", operation_name, error)
            raise error from e
        except ParamValidationError as e:
            raise AWSValidationError(str(e), operation_name=operation_name) from e
        except NoCredentialsError as e:
            raise AuthorizationError(str(e), operation_name=operation_name) from e
        except (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError) as e:
            raise NetworkError(f"ssm.{operation_name} could not reach the endpoint: {e}") from e
        except BotoCoreError as e:
            raise AWSClientError(f"ssm.{operation_name} failed: {e}") from e

        return result_type.from_response(response)

    def cancel_command(self, request: CancelCommandRequest) -> CancelCommandResult:
        return self._invoke("cancel_command", request, CancelCommandResult)

    def create_association(self, request: CreateAssociationRequest) -> CreateAssociationResult:
        return self._invoke("create_association", request, CreateAssociationResult)

    def create_association_batch(
        self, request: CreateAssociationBatchRequest
    ) -> CreateAssociationBatchResult:
        return self._invoke("create_association_batch", request, CreateAssociationBatchResult)

    def create_document(self, request: CreateDocumentRequest) -> CreateDocumentResult:
        return self._invoke("create_document", request, CreateDocumentResult)

    def delete_association(self, request: DeleteAssociationRequest) -> DeleteAssociationResult:
        return self._invoke("delete_association", request, DeleteAssociationResult)

    def delete_document(self, request: DeleteDocumentRequest) -> DeleteDocumentResult:
        return self._invoke("delete_document", request, DeleteDocumentResult)

    def describe_association(
        self, request: DescribeAssociationRequest
    ) -> DescribeAssociationResult:
        return self._invoke("describe_association", request, DescribeAssociationResult)

    def describe_document(self, request: DescribeDocumentRequest) -> DescribeDocumentResult:
        return self._invoke("describe_document", request, DescribeDocumentResult)

    def describe_document_permission(
        self, request: DescribeDocumentPermissionRequest
    ) -> DescribeDocumentPermissionResult:
        return self._invoke(
            "describe_document_permission", request, DescribeDocumentPermissionResult
        )

    def describe_instance_information(
        self, request: DescribeInstanceInformationRequest
    ) -> DescribeInstanceInformationResult:
        return self._invoke(
            "describe_instance_information", request, DescribeInstanceInformationResult
        )

    def get_document(self, request: GetDocumentRequest) -> GetDocumentResult:
        return self._invoke("get_document", request, GetDocumentResult)

    def list_associations(self, request: ListAssociationsRequest) -> ListAssociationsResult:
        return self._invoke("list_associations", request, ListAssociationsResult)

    def list_command_invocations(
        self, request: ListCommandInvocationsRequest
    ) -> ListCommandInvocationsResult:
        return self._invoke("list_command_invocations", request, ListCommandInvocationsResult)

    def list_commands(self, request: ListCommandsRequest) -> ListCommandsResult:
        return self._invoke("list_commands", request, ListCommandsResult)

    def list_documents(self, request: Optional[ListDocumentsRequest] = None) -> ListDocumentsResult:
        return self._invoke("list_documents", request or ListDocumentsRequest(), ListDocumentsResult)

    def modify_document_permission(
        self, request: ModifyDocumentPermissionRequest
    ) -> ModifyDocumentPermissionResult:
        return self._invoke("modify_document_permission", request, ModifyDocumentPermissionResult)

    def send_command(self, request: SendCommandRequest) -> SendCommandResult:
        return self._invoke("send_command", request, SendCommandResult)

    def update_association_status(
        self, request: UpdateAssociationStatusRequest
    ) -> UpdateAssociationStatusResult:
        return self._invoke("update_association_status", request, UpdateAssociationStatusResult)
