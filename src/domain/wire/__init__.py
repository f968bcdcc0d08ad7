"""Wire-level request representation and the marshaller contract."""

from .marshaller import Marshaller
from .request import HttpMethodName, WireRequest

__all__: list[str] = [
    "HttpMethodName",
    "Marshaller",
    "WireRequest",
]
