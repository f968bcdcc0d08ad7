"""DescribeEvents request marshaller."""

from domain.wire.request import WireRequest
from infrastructure.utilities import string_utils
from providers.aws.rds.model import DescribeEventsRequest

from .base import QueryRequestMarshaller, add_filters, add_scalar, add_string_list


class DescribeEventsRequestMarshaller(QueryRequestMarshaller[DescribeEventsRequest]):
    action = "DescribeEvents"
    request_type = DescribeEventsRequest

    def _marshall_fields(self, request: DescribeEventsRequest, wire_request: WireRequest) -> None:
        add_scalar(wire_request, "SourceIdentifier", request.source_identifier)
        add_scalar(wire_request, "SourceType", request.source_type, str)
        add_scalar(wire_request, "StartTime", request.start_time, string_utils.from_date)
        add_scalar(wire_request, "EndTime", request.end_time, string_utils.from_date)
        add_scalar(wire_request, "Duration", request.duration, string_utils.from_integer)
        add_string_list(
            wire_request, "EventCategories.EventCategory", request, "event_categories"
        )
        add_filters(wire_request, request)
        add_scalar(wire_request, "MaxRecords", request.max_records, string_utils.from_integer)
        add_scalar(wire_request, "Marker", request.marker)
