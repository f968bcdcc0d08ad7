"""SSM request, result and structure models."""

from .base import SSMRequest, SSMResult
from .requests import (
    CancelCommandRequest,
    CreateAssociationBatchRequest,
    CreateAssociationRequest,
    CreateDocumentRequest,
    DeleteAssociationRequest,
    DeleteDocumentRequest,
    DescribeAssociationRequest,
    DescribeDocumentPermissionRequest,
    DescribeDocumentRequest,
    DescribeInstanceInformationRequest,
    GetDocumentRequest,
    ListAssociationsRequest,
    ListCommandInvocationsRequest,
    ListCommandsRequest,
    ListDocumentsRequest,
    ModifyDocumentPermissionRequest,
    SendCommandRequest,
    UpdateAssociationStatusRequest,
)
from .results import (
    CancelCommandResult,
    CreateAssociationBatchResult,
    CreateAssociationResult,
    CreateDocumentResult,
    DeleteAssociationResult,
    DeleteDocumentResult,
    DescribeAssociationResult,
    DescribeDocumentPermissionResult,
    DescribeDocumentResult,
    DescribeInstanceInformationResult,
    GetDocumentResult,
    ListAssociationsResult,
    ListCommandInvocationsResult,
    ListCommandsResult,
    ListDocumentsResult,
    ModifyDocumentPermissionResult,
    SendCommandResult,
    UpdateAssociationStatusResult,
)
from .shapes import (
    AssociationFilter,
    AssociationStatus,
    AssociationStatusName,
    CommandFilter,
    CreateAssociationBatchRequestEntry,
    DocumentFilter,
    DocumentKeyValuesFilter,
    DocumentPermissionType,
    InstanceInformationFilter,
)

__all__: list[str] = [
    "AssociationFilter",
    "AssociationStatus",
    "AssociationStatusName",
    "CancelCommandRequest",
    "CancelCommandResult",
    "CommandFilter",
    "CreateAssociationBatchRequest",
    "CreateAssociationBatchRequestEntry",
    "CreateAssociationBatchResult",
    "CreateAssociationRequest",
    "CreateAssociationResult",
    "CreateDocumentRequest",
    "CreateDocumentResult",
    "DeleteAssociationRequest",
    "DeleteAssociationResult",
    "DeleteDocumentRequest",
    "DeleteDocumentResult",
    "DescribeAssociationRequest",
    "DescribeAssociationResult",
    "DescribeDocumentPermissionRequest",
    "DescribeDocumentPermissionResult",
    "DescribeDocumentRequest",
    "DescribeDocumentResult",
    "DescribeInstanceInformationRequest",
    "DescribeInstanceInformationResult",
    "DocumentFilter",
    "DocumentKeyValuesFilter",
    "DocumentPermissionType",
    "GetDocumentRequest",
    "GetDocumentResult",
    "InstanceInformationFilter",
    "ListAssociationsRequest",
    "ListAssociationsResult",
    "ListCommandInvocationsRequest",
    "ListCommandInvocationsResult",
    "ListCommandsRequest",
    "ListCommandsResult",
    "ListDocumentsRequest",
    "ListDocumentsResult",
    "ModifyDocumentPermissionRequest",
    "ModifyDocumentPermissionResult",
    "SSMRequest",
    "SSMResult",
    "SendCommandRequest",
    "SendCommandResult",
    "UpdateAssociationStatusRequest",
    "UpdateAssociationStatusResult",
]
