"""Global test configuration and fixtures."""

import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config.schemas.client_schema import ClientConfig
from domain.base.ports import LoggingPort
from infrastructure.adapters.configuration_adapter import ConfigurationAdapter


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up fake AWS credentials so nothing reaches a real account."""
    os.environ.update(
        {
            "AWS_DEFAULT_REGION": "us-east-1",
            "AWS_ACCESS_KEY_ID": "testing",
            "AWS_SECRET_ACCESS_KEY": "testing",
            "AWS_SECURITY_TOKEN": "testing",
            "AWS_SESSION_TOKEN": "testing",
        }
    )
    for key in [key for key in os.environ if key.startswith("AWSBIND_")]:
        del os.environ[key]
    yield


@pytest.fixture
def client_config() -> ClientConfig:
    """Client configuration pointing at us-east-1 with a small worker pool."""
    return ClientConfig(region="us-east-1", max_workers=4)


@pytest.fixture
def configuration(client_config: ClientConfig) -> ConfigurationAdapter:
    return ConfigurationAdapter(client_config)


@pytest.fixture
def logger():
    """Mock logger."""
    return Mock(spec=LoggingPort)
