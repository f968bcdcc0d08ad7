"""Per-operation RDS marshallers and the request-type registry."""

from typing import Any

from domain.base.exceptions import InvalidArgumentError

from .base import QueryRequestMarshaller
from .describe_db_instances import DescribeDBInstancesRequestMarshaller
from .describe_db_snapshots import DescribeDBSnapshotsRequestMarshaller
from .describe_event_subscriptions import DescribeEventSubscriptionsRequestMarshaller
from .describe_events import DescribeEventsRequestMarshaller

_MARSHALLERS: dict[type, QueryRequestMarshaller] = {
    marshaller.request_type: marshaller
    for marshaller in (
        DescribeDBInstancesRequestMarshaller(),
        DescribeDBSnapshotsRequestMarshaller(),
        DescribeEventSubscriptionsRequestMarshaller(),
        DescribeEventsRequestMarshaller(),
    )
}


def marshaller_for(request: Any) -> QueryRequestMarshaller:
    """
    Get the marshaller registered for the request's type.

    :raises InvalidArgumentError: If no marshaller handles the request type.
    """
    marshaller = _MARSHALLERS.get(type(request))
    if marshaller is None:
        raise InvalidArgumentError(f"No marshaller for request type: {type(request).__name__}")
    return marshaller


__all__: list[str] = [
    "DescribeDBInstancesRequestMarshaller",
    "DescribeDBSnapshotsRequestMarshaller",
    "DescribeEventSubscriptionsRequestMarshaller",
    "DescribeEventsRequestMarshaller",
    "QueryRequestMarshaller",
    "marshaller_for",
]
