"""SSM request models, one per operation."""

from typing import Optional

from .base import FrozenList, ParameterMap, SSMRequest
from .shapes import (
    AssociationFilter,
    AssociationStatus,
    CommandFilter,
    CreateAssociationBatchRequestEntry,
    DocumentFilter,
    DocumentKeyValuesFilter,
    DocumentPermissionType,
    InstanceInformationFilter,
)


class CancelCommandRequest(SSMRequest):
    command_id: str
    instance_ids: Optional[FrozenList[str]] = None


class CreateAssociationRequest(SSMRequest):
    name: str
    instance_id: Optional[str] = None
    parameters: Optional[ParameterMap] = None


class CreateAssociationBatchRequest(SSMRequest):
    entries: FrozenList[CreateAssociationBatchRequestEntry]


class CreateDocumentRequest(SSMRequest):
    content: str
    name: str
    document_type: Optional[str] = None
    document_format: Optional[str] = None


class DeleteAssociationRequest(SSMRequest):
    name: Optional[str] = None
    instance_id: Optional[str] = None


class DeleteDocumentRequest(SSMRequest):
    name: str


class DescribeAssociationRequest(SSMRequest):
    name: Optional[str] = None
    instance_id: Optional[str] = None


class DescribeDocumentRequest(SSMRequest):
    name: str
    document_version: Optional[str] = None


class DescribeDocumentPermissionRequest(SSMRequest):
    name: str
    permission_type: DocumentPermissionType = DocumentPermissionType.SHARE


class DescribeInstanceInformationRequest(SSMRequest):
    instance_information_filter_list: Optional[FrozenList[InstanceInformationFilter]] = None
    max_results: Optional[int] = None
    next_token: Optional[str] = None


class GetDocumentRequest(SSMRequest):
    name: str
    document_version: Optional[str] = None


class ListAssociationsRequest(SSMRequest):
    association_filter_list: Optional[FrozenList[AssociationFilter]] = None
    max_results: Optional[int] = None
    next_token: Optional[str] = None


class ListCommandInvocationsRequest(SSMRequest):
    command_id: Optional[str] = None
    instance_id: Optional[str] = None
    max_results: Optional[int] = None
    next_token: Optional[str] = None
    filters: Optional[FrozenList[CommandFilter]] = None
    details: Optional[bool] = None


class ListCommandsRequest(SSMRequest):
    command_id: Optional[str] = None
    instance_id: Optional[str] = None
    max_results: Optional[int] = None
    next_token: Optional[str] = None
    filters: Optional[FrozenList[CommandFilter]] = None


class ListDocumentsRequest(SSMRequest):
    document_filter_list: Optional[FrozenList[DocumentFilter]] = None
    filters: Optional[FrozenList[DocumentKeyValuesFilter]] = None
    max_results: Optional[int] = None
    next_token: Optional[str] = None


class ModifyDocumentPermissionRequest(SSMRequest):
    name: str
    permission_type: DocumentPermissionType = DocumentPermissionType.SHARE
    account_ids_to_add: Optional[FrozenList[str]] = None
    account_ids_to_remove: Optional[FrozenList[str]] = None


class SendCommandRequest(SSMRequest):
    document_name: str
    instance_ids: Optional[FrozenList[str]] = None
    timeout_seconds: Optional[int] = None
    comment: Optional[str] = None
    parameters: Optional[ParameterMap] = None
    output_s3_bucket_name: Optional[str] = None
    output_s3_key_prefix: Optional[str] = None


class UpdateAssociationStatusRequest(SSMRequest):
    name: str
    instance_id: str
    association_status: AssociationStatus
