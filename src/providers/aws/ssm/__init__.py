"""Amazon EC2 Simple Systems Manager (SSM) clients."""

from .async_client import SimpleSystemsManagementAsync, SimpleSystemsManagementAsyncClient
from .client import SimpleSystemsManagement, SimpleSystemsManagementClient

__all__: list[str] = [
    "SimpleSystemsManagement",
    "SimpleSystemsManagementAsync",
    "SimpleSystemsManagementAsyncClient",
    "SimpleSystemsManagementClient",
]
