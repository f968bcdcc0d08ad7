from unittest.mock import patch

import pytest

from config.schemas.client_schema import ClientConfig
from infrastructure.adapters.configuration_adapter import ConfigurationAdapter
from providers.aws.exceptions.aws_exceptions import AWSConfigurationError
from providers.aws.infrastructure.aws_client import AWSClient


def test_botocore_config_follows_client_config(logger) -> None:
    config = ClientConfig(
        region="eu-west-1", max_retries=5, retry_mode="adaptive", connect_timeout=2, read_timeout=7
    )

    client = AWSClient(ConfigurationAdapter(config), logger)

    assert client.region_name == "eu-west-1"
    assert client.boto_config.region_name == "eu-west-1"
    assert client.boto_config.retries == {"max_attempts": 5, "mode": "adaptive"}
    assert client.boto_config.connect_timeout == 2
    assert client.boto_config.read_timeout == 7


def test_ssm_client_is_created_once(configuration, logger) -> None:
    client = AWSClient(configuration, logger)

    with patch.object(client.session, "client", wraps=client.session.client) as create:
        first = client.ssm_client
        second = client.ssm_client

    assert first is second
    create.assert_called_once()
    assert create.call_args.args == ("ssm",)


def test_endpoint_url_is_passed_to_client(logger) -> None:
    config = ClientConfig(endpoint_url="http://localhost:4566")
    client = AWSClient(ConfigurationAdapter(config), logger)

    assert client.ssm_client.meta.endpoint_url == "http://localhost:4566"


def test_unknown_profile(logger) -> None:
    config = ClientConfig(profile="awsbind-profile-that-does-not-exist")

    with pytest.raises(AWSConfigurationError):
        AWSClient(ConfigurationAdapter(config), logger)
