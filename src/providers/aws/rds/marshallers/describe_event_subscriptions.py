"""DescribeEventSubscriptions request marshaller."""

from domain.wire.request import WireRequest
from infrastructure.utilities import string_utils
from providers.aws.rds.model import DescribeEventSubscriptionsRequest

from .base import QueryRequestMarshaller, add_filters, add_scalar


class DescribeEventSubscriptionsRequestMarshaller(
    QueryRequestMarshaller[DescribeEventSubscriptionsRequest]
):
    action = "DescribeEventSubscriptions"
    request_type = DescribeEventSubscriptionsRequest

    def _marshall_fields(
        self, request: DescribeEventSubscriptionsRequest, wire_request: WireRequest
    ) -> None:
        add_scalar(wire_request, "SubscriptionName", request.subscription_name)
        add_filters(wire_request, request)
        add_scalar(wire_request, "MaxRecords", request.max_records, string_utils.from_integer)
        add_scalar(wire_request, "Marker", request.marker)
