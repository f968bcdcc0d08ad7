from .configuration_adapter import ConfigurationAdapter
from .logging_adapter import LoggingAdapter

__all__: list[str] = [
    "ConfigurationAdapter",
    "LoggingAdapter",
]
