"""Query-protocol marshaller template shared by every RDS operation."""

from abc import abstractmethod
from collections.abc import Sequence
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel

from domain.base.exceptions import InvalidArgumentError
from domain.wire.marshaller import Marshaller
from domain.wire.request import HttpMethodName, WireRequest
from infrastructure.utilities import string_utils
from providers.aws.rds.model import Filter

R = TypeVar("R", bound=BaseModel)

RDS_SERVICE_NAME = "AmazonRDS"
RDS_API_VERSION = "2014-10-31"


def add_scalar(
    request: WireRequest,
    name: str,
    value: Any,
    convert: Callable[[Any], str] = string_utils.from_string,
) -> None:
    """Emit ``name=convert(value)`` unless the value is None."""
    if value is not None:
        request.add_parameter(name, convert(value))


def list_to_marshall(model: BaseModel, field_name: str) -> Optional[Sequence]:
    """
    Return the list to walk for ``field_name``, or None when nothing is emitted.

    An empty sequence is walked only when the caller set it explicitly; the
    default auto-constructed one is skipped.
    """
    values = getattr(model, field_name)
    if values is None:
        return None
    if values or field_name in model.model_fields_set:
        return values
    return None


def add_string_list(request: WireRequest, prefix: str, model: BaseModel, field_name: str) -> None:
    """Emit ``<prefix>.<n>`` for every non-None member; the index advances regardless."""
    values = list_to_marshall(model, field_name)
    if values is None:
        return
    for index, value in enumerate(values, start=1):
        add_scalar(request, f"{prefix}.{index}", value)


def add_filters(request: WireRequest, model: BaseModel, field_name: str = "filters") -> None:
    """Emit ``Filters.Filter.<i>.Name`` and ``Filters.Filter.<i>.Values.Value.<j>``."""
    filters: Optional[Sequence[Filter]] = list_to_marshall(model, field_name)
    if filters is None:
        return
    for filter_index, item in enumerate(filters, start=1):
        prefix = f"Filters.Filter.{filter_index}"
        add_scalar(request, f"{prefix}.Name", item.name)
        add_string_list(request, f"{prefix}.Values.Value", item, "values")


class QueryRequestMarshaller(Marshaller[WireRequest, R], Generic[R]):
    """
    Template for query-protocol marshallers.

    Subclasses name the action and walk their own fields in
    ``_marshall_fields``; everything else is fixed.
    """

    service_name: ClassVar[str] = RDS_SERVICE_NAME
    version: ClassVar[str] = RDS_API_VERSION
    action: ClassVar[str]
    request_type: ClassVar[type]

    def marshall(self, request: Optional[R]) -> WireRequest:
        if request is None:
            raise InvalidArgumentError("Invalid argument passed to marshall(...)")
        if not isinstance(request, self.request_type):
            raise InvalidArgumentError(
                f"{type(self).__name__} cannot marshall {type(request).__name__}; "
                f"expected {self.request_type.__name__}"
            )

        wire_request = WireRequest(service_name=self.service_name, original_request=request)
        wire_request.add_parameter("Action", self.action)
        wire_request.add_parameter("Version", self.version)
        wire_request.http_method = HttpMethodName.POST

        self._marshall_fields(request, wire_request)
        return wire_request

    @abstractmethod
    def _marshall_fields(self, request: R, wire_request: WireRequest) -> None:
        """Add the operation-specific parameters."""
