"""SSM result models, one per operation."""

from typing import Any, Optional

from .base import SSMResult


class CancelCommandResult(SSMResult):
    pass


class CreateAssociationResult(SSMResult):
    association_description: Optional[dict[str, Any]] = None


class CreateAssociationBatchResult(SSMResult):
    successful: list[dict[str, Any]] = []
    failed: list[dict[str, Any]] = []


class CreateDocumentResult(SSMResult):
    document_description: Optional[dict[str, Any]] = None


class DeleteAssociationResult(SSMResult):
    pass


class DeleteDocumentResult(SSMResult):
    pass


class DescribeAssociationResult(SSMResult):
    association_description: Optional[dict[str, Any]] = None


class DescribeDocumentResult(SSMResult):
    document: Optional[dict[str, Any]] = None


class DescribeDocumentPermissionResult(SSMResult):
    account_ids: list[str] = []


class DescribeInstanceInformationResult(SSMResult):
    instance_information_list: list[dict[str, Any]] = []
    next_token: Optional[str] = None


class GetDocumentResult(SSMResult):
    name: Optional[str] = None
    content: Optional[str] = None
    document_version: Optional[str] = None
    document_type: Optional[str] = None


class ListAssociationsResult(SSMResult):
    associations: list[dict[str, Any]] = []
    next_token: Optional[str] = None


class ListCommandInvocationsResult(SSMResult):
    command_invocations: list[dict[str, Any]] = []
    next_token: Optional[str] = None


class ListCommandsResult(SSMResult):
    commands: list[dict[str, Any]] = []
    next_token: Optional[str] = None


class ListDocumentsResult(SSMResult):
    document_identifiers: list[dict[str, Any]] = []
    next_token: Optional[str] = None


class ModifyDocumentPermissionResult(SSMResult):
    pass


class SendCommandResult(SSMResult):
    command: Optional[dict[str, Any]] = None


class UpdateAssociationStatusResult(SSMResult):
    association_description: Optional[dict[str, Any]] = None
