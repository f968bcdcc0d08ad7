"""Base models for SSM requests and results."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, WrapSerializer
from pydantic.alias_generators import to_pascal

T = TypeVar("T")

# Repeated members are stored as tuples so a built request cannot change;
# boto3 gets them back as lists.
FrozenList = Annotated[
    tuple[T, ...],
    WrapSerializer(lambda value, handler: list(handler(value))),
]

# Document parameters: name -> values, read-only after validation.
ParameterMap = Annotated[
    Mapping[str, FrozenList[str]],
    AfterValidator(MappingProxyType),
    WrapSerializer(lambda value, handler: handler(dict(value))),
]


class SSMShape(BaseModel):
    """Structure whose aliases are the SSM API member names."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_pascal,
        use_enum_values=True,
        validate_default=True,
    )


class SSMRequest(SSMShape):
    """Request for one SSM operation."""

    def to_params(self) -> dict[str, Any]:
        """Keyword arguments for the matching boto3 client method."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SSMResult(BaseModel):
    """
    Result of one SSM operation.

    Declared members are exposed by their snake_case names; any other member of
    the service response is kept as an extra attribute under its API name.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_pascal,
    )

    response_metadata: Optional[dict[str, Any]] = None

    @classmethod
    def from_response(cls, response: Optional[dict[str, Any]]):
        return cls.model_validate(response or {})
