"""Domain port for configuration access."""

from abc import ABC, abstractmethod

from config.schemas.client_schema import ClientConfig


class ConfigurationPort(ABC):
    """Configuration contract consumed by the AWS client wrapper."""

    @abstractmethod
    def get_client_config(self) -> ClientConfig:
        """Get the validated client configuration."""
