"""Client configuration schema."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientConfig(BaseModel):
    """Settings for the boto3 session, worker pool and logging."""

    model_config = ConfigDict(frozen=True)

    region: str = Field("us-east-1", description="AWS region for service clients")
    profile: Optional[str] = Field(None, description="Named AWS profile")
    endpoint_url: Optional[str] = Field(None, description="Override service endpoint URL")
    max_retries: int = Field(3, ge=0, description="Maximum attempts passed to botocore")
    retry_mode: Literal["legacy", "standard", "adaptive"] = Field(
        "standard", description="botocore retry mode"
    )
    connect_timeout: int = Field(5, gt=0, description="Connect timeout in seconds")
    read_timeout: int = Field(10, gt=0, description="Read timeout in seconds")
    max_workers: int = Field(50, gt=0, description="Worker threads for async operations")
    log_level: str = Field("INFO", description="Root log level")
    log_format: Literal["console", "json"] = Field("console", description="Log renderer")
