"""DescribeDBInstances request marshaller."""

from domain.wire.request import WireRequest
from infrastructure.utilities import string_utils
from providers.aws.rds.model import DescribeDBInstancesRequest

from .base import QueryRequestMarshaller, add_filters, add_scalar


class DescribeDBInstancesRequestMarshaller(QueryRequestMarshaller[DescribeDBInstancesRequest]):
    action = "DescribeDBInstances"
    request_type = DescribeDBInstancesRequest

    def _marshall_fields(
        self, request: DescribeDBInstancesRequest, wire_request: WireRequest
    ) -> None:
        add_scalar(wire_request, "DBInstanceIdentifier", request.db_instance_identifier)
        add_filters(wire_request, request)
        add_scalar(wire_request, "MaxRecords", request.max_records, string_utils.from_integer)
        add_scalar(wire_request, "Marker", request.marker)
