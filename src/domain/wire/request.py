"""Generic wire request handed to a transport."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional
from urllib.parse import urlencode


class HttpMethodName(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    PATCH = "PATCH"

    def __str__(self):
        return self.value


@dataclass
class WireRequest:
    """
    Flattened representation of one service call.

    Parameters and headers keep insertion order, which is the order the
    marshaller walked the request fields.
    """

    service_name: str
    original_request: Any = None
    http_method: HttpMethodName = HttpMethodName.POST
    resource_path: str = "/"
    endpoint: Optional[str] = None
    parameters: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)

    def add_parameter(self, name: str, value: str) -> None:
        self.parameters[name] = value

    def add_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def encode_parameters(self) -> str:
        """Render the parameters as an application/x-www-form-urlencoded body."""
        return urlencode(list(self.parameters.items()))

    def __str__(self) -> str:
        return f"WireRequest({self.http_method} {self.service_name} {self.parameters.get('Action')})"
