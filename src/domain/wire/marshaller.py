"""Marshaller contract."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from domain.base.exceptions import InvalidArgumentError

T = TypeVar("T")
R = TypeVar("R")

__all__: list[str] = [
    "InvalidArgumentError",
    "Marshaller",
]


class Marshaller(ABC, Generic[T, R]):
    """Converts an input object of type R into an output of type T."""

    @abstractmethod
    def marshall(self, request: R) -> T:
        """
        Marshall the request.

        :raises InvalidArgumentError: If the request is None.
        """
