from .filter import Filter
from .requests import (
    DescribeDBInstancesRequest,
    DescribeDBSnapshotsRequest,
    DescribeEventsRequest,
    DescribeEventSubscriptionsRequest,
    RDSRequest,
    SourceType,
)

__all__: list[str] = [
    "DescribeDBInstancesRequest",
    "DescribeDBSnapshotsRequest",
    "DescribeEventsRequest",
    "DescribeEventSubscriptionsRequest",
    "Filter",
    "RDSRequest",
    "SourceType",
]
