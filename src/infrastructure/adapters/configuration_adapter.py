"""Configuration adapter implementing ConfigurationPort."""

from typing import Optional

from config.loader import load_client_config
from config.schemas.client_schema import ClientConfig
from domain.base.ports.configuration_port import ConfigurationPort


class ConfigurationAdapter(ConfigurationPort):
    """Serves a ClientConfig, loading it from settings on first use."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        settings_files: Optional[list[str]] = None,
    ) -> None:
        self._config = config
        self._settings_files = settings_files

    def get_client_config(self) -> ClientConfig:
        if self._config is None:
            self._config = load_client_config(self._settings_files)
        return self._config
