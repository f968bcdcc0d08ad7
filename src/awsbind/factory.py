"""Factory helpers that wire configuration, logging and clients together."""

from typing import Optional

from config.schemas.client_schema import ClientConfig
from domain.base.ports import ConfigurationPort, LoggingPort
from infrastructure.adapters.configuration_adapter import ConfigurationAdapter
from infrastructure.concurrency.async_executor import AsyncOperationExecutor
from infrastructure.logging.logger import setup_logging
from providers.aws.infrastructure.aws_client import AWSClient
from providers.aws.ssm.async_client import SimpleSystemsManagementAsyncClient
from providers.aws.ssm.client import SimpleSystemsManagementClient


def _configuration(config: Optional[ClientConfig | ConfigurationPort]) -> ConfigurationPort:
    if isinstance(config, ConfigurationPort):
        return config
    return ConfigurationAdapter(config)


def configure_logging(config: Optional[ClientConfig | ConfigurationPort] = None) -> None:
    """Set up logging from the configured level and format."""
    client_config = _configuration(config).get_client_config()
    setup_logging(client_config.log_level, client_config.log_format)


def create_ssm_client(
    config: Optional[ClientConfig | ConfigurationPort] = None,
    logger: Optional[LoggingPort] = None,
) -> SimpleSystemsManagementClient:
    """
    Create a synchronous SSM client.

    :param config: Client configuration or a configuration port; loaded from settings when omitted.
    :param logger: Optional logging port.
    :return: A client backed by a boto3 ``ssm`` client.
    """
    aws_client = AWSClient(_configuration(config), logger)
    return SimpleSystemsManagementClient(aws_client, logger)


def create_ssm_async_client(
    config: Optional[ClientConfig | ConfigurationPort] = None,
    logger: Optional[LoggingPort] = None,
) -> SimpleSystemsManagementAsyncClient:
    """
    Create an asynchronous SSM client whose pool size comes from ``max_workers``.

    :param config: Client configuration or a configuration port; loaded from settings when omitted.
    :param logger: Optional logging port.
    :return: An async client wrapping a new synchronous client.
    """
    configuration = _configuration(config)
    client = create_ssm_client(configuration, logger)
    executor = AsyncOperationExecutor(
        max_workers=configuration.get_client_config().max_workers, logger=logger
    )
    return SimpleSystemsManagementAsyncClient(client, executor=executor)
