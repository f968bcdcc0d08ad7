"""RDS request models for describe operations."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .filter import Filter


class SourceType(Enum):
    DB_INSTANCE = "db-instance"
    DB_PARAMETER_GROUP = "db-parameter-group"
    DB_SECURITY_GROUP = "db-security-group"
    DB_SNAPSHOT = "db-snapshot"
    DB_CLUSTER = "db-cluster"
    DB_CLUSTER_SNAPSHOT = "db-cluster-snapshot"

    def __str__(self):
        return self.value


class RDSRequest(BaseModel):
    """
    Base for RDS requests: immutable once built, every field optional.

    Repeated fields are tuples; lists are accepted and copied on validation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class DescribeEventSubscriptionsRequest(RDSRequest):
    subscription_name: Optional[str] = None
    filters: Optional[tuple[Filter, ...]] = Field(default_factory=tuple)
    max_records: Optional[int] = None
    marker: Optional[str] = None


class DescribeDBInstancesRequest(RDSRequest):
    db_instance_identifier: Optional[str] = None
    filters: Optional[tuple[Filter, ...]] = Field(default_factory=tuple)
    max_records: Optional[int] = None
    marker: Optional[str] = None


class DescribeDBSnapshotsRequest(RDSRequest):
    db_instance_identifier: Optional[str] = None
    db_snapshot_identifier: Optional[str] = None
    snapshot_type: Optional[str] = None
    filters: Optional[tuple[Filter, ...]] = Field(default_factory=tuple)
    max_records: Optional[int] = None
    marker: Optional[str] = None
    include_shared: Optional[bool] = None
    include_public: Optional[bool] = None


class DescribeEventsRequest(RDSRequest):
    source_identifier: Optional[str] = None
    source_type: Optional[SourceType] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[int] = None
    event_categories: Optional[tuple[Optional[str], ...]] = Field(default_factory=tuple)
    filters: Optional[tuple[Filter, ...]] = Field(default_factory=tuple)
    max_records: Optional[int] = None
    marker: Optional[str] = None
