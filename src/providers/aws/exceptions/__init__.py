from .aws_exceptions import (
    AuthorizationError,
    AWSClientError,
    AWSConfigurationError,
    AWSEntityNotFoundError,
    AWSServiceError,
    AWSValidationError,
    InvalidArgumentError,
    NetworkError,
    RateLimitError,
    translate_client_error,
)

__all__: list[str] = [
    "AuthorizationError",
    "AWSClientError",
    "AWSConfigurationError",
    "AWSEntityNotFoundError",
    "AWSServiceError",
    "AWSValidationError",
    "InvalidArgumentError",
    "NetworkError",
    "RateLimitError",
    "translate_client_error",
]
