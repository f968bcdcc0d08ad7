"""Configuration loading and schemas."""

from .loader import load_client_config
from .schemas.client_schema import ClientConfig

__all__: list[str] = [
    "ClientConfig",
    "load_client_config",
]
