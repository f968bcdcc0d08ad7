"""
AWS query bindings - request marshallers and SSM service clients.

Key Components:
    - domain: wire request shape, marshaller contract and ports
    - infrastructure: logging, configuration, worker-pool execution
    - providers.aws.rds: query-protocol request marshallers
    - providers.aws.ssm: synchronous and asynchronous SSM clients

Usage:
    >>> from awsbind import create_ssm_async_client
    >>> from providers.aws.ssm.model import ListDocumentsRequest
    >>> with create_ssm_async_client() as ssm:
    ...     future = ssm.list_documents_async(ListDocumentsRequest(max_results=10))
    ...     documents = future.result().document_identifiers
"""

__version__ = "0.1.0"

from config.loader import load_client_config
from config.schemas.client_schema import ClientConfig
from domain.wire.request import HttpMethodName, WireRequest
from infrastructure.concurrency.async_executor import (
    AsyncHandler,
    AsyncOperationExecutor,
    CallbackAsyncHandler,
)
from providers.aws.exceptions import (
    AuthorizationError,
    AWSClientError,
    AWSServiceError,
    InvalidArgumentError,
)
from providers.aws.rds.marshallers import marshaller_for
from providers.aws.ssm import (
    SimpleSystemsManagement,
    SimpleSystemsManagementAsync,
    SimpleSystemsManagementAsyncClient,
    SimpleSystemsManagementClient,
)

from .factory import configure_logging, create_ssm_async_client, create_ssm_client

__all__: list[str] = [
    "AsyncHandler",
    "AsyncOperationExecutor",
    "AuthorizationError",
    "AWSClientError",
    "AWSServiceError",
    "CallbackAsyncHandler",
    "ClientConfig",
    "HttpMethodName",
    "InvalidArgumentError",
    "SimpleSystemsManagement",
    "SimpleSystemsManagementAsync",
    "SimpleSystemsManagementAsyncClient",
    "SimpleSystemsManagementClient",
    "WireRequest",
    "configure_logging",
    "create_ssm_async_client",
    "create_ssm_client",
    "load_client_config",
    "marshaller_for",
]
