"""DescribeDBSnapshots request marshaller."""

from domain.wire.request import WireRequest
from infrastructure.utilities import string_utils
from providers.aws.rds.model import DescribeDBSnapshotsRequest

from .base import QueryRequestMarshaller, add_filters, add_scalar


class DescribeDBSnapshotsRequestMarshaller(QueryRequestMarshaller[DescribeDBSnapshotsRequest]):
    action = "DescribeDBSnapshots"
    request_type = DescribeDBSnapshotsRequest

    def _marshall_fields(
        self, request: DescribeDBSnapshotsRequest, wire_request: WireRequest
    ) -> None:
        add_scalar(wire_request, "DBInstanceIdentifier", request.db_instance_identifier)
        add_scalar(wire_request, "DBSnapshotIdentifier", request.db_snapshot_identifier)
        add_scalar(wire_request, "SnapshotType", request.snapshot_type)
        add_filters(wire_request, request)
        add_scalar(wire_request, "MaxRecords", request.max_records, string_utils.from_integer)
        add_scalar(wire_request, "Marker", request.marker)
        add_scalar(wire_request, "IncludeShared", request.include_shared, string_utils.from_boolean)
        add_scalar(wire_request, "IncludePublic", request.include_public, string_utils.from_boolean)
