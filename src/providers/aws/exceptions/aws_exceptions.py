"""AWS binding exceptions and botocore error translation."""

from typing import Any, Optional

from botocore.exceptions import ClientError

from domain.base.exceptions import AWSClientError, InvalidArgumentError  # noqa: F401


class AWSConfigurationError(AWSClientError):
    """Session or client configuration is unusable."""


class NetworkError(AWSClientError):
    """The service endpoint could not be reached."""


class AWSServiceError(AWSClientError):
    """The service answered with an error response."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        status_code: Optional[int] = None,
        operation_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.request_id = request_id
        self.status_code = status_code
        self.operation_name = operation_name

    def __str__(self) -> str:
        return (
            f"{self.message} (Operation: {self.operation_name}; "
            f"Error Code: {self.error_code}; Status Code: {self.status_code}; "
            f"Request ID: {self.request_id})"
        )


class AWSValidationError(AWSServiceError):
    """The service rejected the request parameters."""


class AWSEntityNotFoundError(AWSServiceError):
    """The referenced resource does not exist."""


class AuthorizationError(AWSServiceError):
    """Credentials are missing, invalid or not permitted."""


class RateLimitError(AWSServiceError):
    """The request was throttled."""


_AUTHORIZATION_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedOperation",
    "InvalidClientTokenId",
    "UnrecognizedClientException",
    "ExpiredToken",
    "ExpiredTokenException",
}

_THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "TooManyUpdates",
}

_VALIDATION_CODES = {
    "ValidationException",
    "InvalidParameterValue",
    "InvalidParameterCombination",
    "MissingParameter",
    "InvalidDocumentContent",
    "InvalidFilterKey",
    "InvalidFilterValue",
    "InvalidNextToken",
    "InvalidInstanceId",
    "InvalidCommandId",
    "DocumentAlreadyExists",
    "AssociationAlreadyExists",
}

_NOT_FOUND_CODES = {
    "AssociationDoesNotExist",
    "InvalidDocument",
    "DocumentNotFound",
    "ResourceNotFoundException",
}


def translate_client_error(error: ClientError) -> AWSServiceError:
    """
    Map a botocore ClientError to the bindings exception hierarchy.

    :param error: The error raised by a boto3 client call.
    :return: An AWSServiceError subclass chosen by error code.
    """
    response: dict[str, Any] = error.response or {}
    details = response.get("Error", {})
    metadata = response.get("ResponseMetadata", {})
    code = details.get("Code")
    kwargs = {
        "error_code": code,
        "request_id": metadata.get("RequestId"),
        "status_code": metadata.get("HTTPStatusCode"),
        "operation_name": error.operation_name,
    }
    message = details.get("Message") or str(error)

    if code in _AUTHORIZATION_CODES:
        return AuthorizationError(message, **kwargs)
    if code in _THROTTLING_CODES:
        return RateLimitError(message, **kwargs)
    if code in _NOT_FOUND_CODES or (code or "").endswith("NotFound"):
        return AWSEntityNotFoundError(message, **kwargs)
    if code in _VALIDATION_CODES:
        return AWSValidationError(message, **kwargs)
    return AWSServiceError(message, **kwargs)
