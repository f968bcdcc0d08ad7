"""Amazon RDS query-protocol request models and marshallers."""

from .marshallers import (
    DescribeDBInstancesRequestMarshaller,
    DescribeDBSnapshotsRequestMarshaller,
    DescribeEventsRequestMarshaller,
    DescribeEventSubscriptionsRequestMarshaller,
    marshaller_for,
)
from .model import (
    DescribeDBInstancesRequest,
    DescribeDBSnapshotsRequest,
    DescribeEventsRequest,
    DescribeEventSubscriptionsRequest,
    Filter,
    SourceType,
)

__all__: list[str] = [
    "DescribeDBInstancesRequest",
    "DescribeDBInstancesRequestMarshaller",
    "DescribeDBSnapshotsRequest",
    "DescribeDBSnapshotsRequestMarshaller",
    "DescribeEventsRequest",
    "DescribeEventsRequestMarshaller",
    "DescribeEventSubscriptionsRequest",
    "DescribeEventSubscriptionsRequestMarshaller",
    "Filter",
    "SourceType",
    "marshaller_for",
]
