"""AWS session wrapper with lazily created service clients."""

import threading
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ProfileNotFound

from domain.base.ports import ConfigurationPort, LoggingPort
from infrastructure.adapters.logging_adapter import LoggingAdapter
from providers.aws.exceptions.aws_exceptions import AWSConfigurationError


class AWSClient:
    """Wrapper for AWS service clients built from the client configuration."""

    def __init__(self, config: ConfigurationPort, logger: Optional[LoggingPort] = None) -> None:
        """
        Initialize the session and the botocore client configuration.

        Args:
            config: Configuration port for accessing the client configuration
            logger: Logger for logging messages, defaults to the package logger

        Raises:
            AWSConfigurationError: If the session cannot be created
        """
        self._logger = logger or LoggingAdapter("awsbind.aws")
        self.config = config.get_client_config()
        self.region_name = self.config.region
        self.profile_name = self.config.profile
        self.endpoint_url = self.config.endpoint_url

        # Retries and timeouts belong to botocore; nothing here retries.
        self.boto_config = Config(
            region_name=self.region_name,
            retries={
                "max_attempts": self.config.max_retries,
                "mode": self.config.retry_mode,
            },
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
        )

        self._client_lock = threading.Lock()
        self._ssm_client = None

        try:
            self.session = boto3.Session(
                region_name=self.region_name, profile_name=self.profile_name
            )
        except ProfileNotFound as e:
            raise AWSConfigurationError(f"AWS profile not found: {self.profile_name}") from e
        except BotoCoreError as e:
            raise AWSConfigurationError(f"AWS session initialization failed: {e}") from e

        self._logger.info(
            "AWS client initialized with region: %s, profile: %s, retries: %d (%s), timeouts: connect=%ds, read=%ds",
            self.region_name,
            self.profile_name or "default",
            self.config.max_retries,
            self.config.retry_mode,
            self.config.connect_timeout,
            self.config.read_timeout,
        )

    def _create_client(self, service_name: str):
        self._logger.debug("Initializing %s client on first use", service_name)
        return self.session.client(
            service_name, config=self.boto_config, endpoint_url=self.endpoint_url
        )

    @property
    def ssm_client(self):
        """Lazy initialization of SSM client."""
        if self._ssm_client is None:
            with self._client_lock:
                if self._ssm_client is None:
                    self._ssm_client = self._create_client("ssm")
        return self._ssm_client
