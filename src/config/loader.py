"""Load client configuration from settings files and environment."""

from typing import Any, Optional

from dynaconf import Dynaconf

from config.schemas.client_schema import ClientConfig

ENVVAR_PREFIX = "AWSBIND"


def load_client_config(
    settings_files: Optional[list[str]] = None, **overrides: Any
) -> ClientConfig:
    """
    Build a ClientConfig from settings files, AWSBIND_* variables and overrides.

    :param settings_files: Paths of settings files (json, toml, yaml) to read.
    :param overrides: Explicit values that take precedence over everything else.
    :return: The validated client configuration.
    """
    settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=settings_files or [],
        load_dotenv=False,
    )

    known_fields = set(ClientConfig.model_fields)
    data = {
        key.lower(): value
        for key, value in settings.as_dict().items()
        if key.lower() in known_fields
    }
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ClientConfig(**data)
