"""Domain ports."""

from .configuration_port import ConfigurationPort
from .logging_port import LoggingPort

__all__: list[str] = [
    "ConfigurationPort",
    "LoggingPort",
]
