import pytest
from botocore.exceptions import ClientError

from providers.aws.exceptions.aws_exceptions import (
    AuthorizationError,
    AWSClientError,
    AWSEntityNotFoundError,
    AWSServiceError,
    AWSValidationError,
    RateLimitError,
    translate_client_error,
)


def _client_error(code: str, message: str = "failure") -> ClientError:
    return ClientError(
        {
            "Error": {"Code": code, "Message": message},
            "ResponseMetadata": {"RequestId": "req-123", "HTTPStatusCode": 400},
        },
        "DescribeDocument",
    )


@pytest.mark.parametrize(
    "code, expected",
    [
        ("AccessDeniedException", AuthorizationError),
        ("ThrottlingException", RateLimitError),
        ("InvalidDocument", AWSEntityNotFoundError),
        ("AssociationDoesNotExist", AWSEntityNotFoundError),
        ("InvalidInstanceId", AWSValidationError),
        ("InternalServerError", AWSServiceError),
    ],
)
def test_error_codes_map_to_exception_types(code, expected) -> None:
    error = translate_client_error(_client_error(code))

    assert type(error) is expected
    assert isinstance(error, AWSClientError)


def test_error_details_are_kept() -> None:
    error = translate_client_error(_client_error("InvalidInstanceId", "no such instance"))

    assert error.message == "no such instance"
    assert error.error_code == "InvalidInstanceId"
    assert error.request_id == "req-123"
    assert error.status_code == 400
    assert error.operation_name == "DescribeDocument"
    assert "Request ID: req-123" in str(error)
