"""RDS describe filter."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Filter(BaseModel):
    """
    A filter name and the values to match against.

    ``values`` defaults to an auto-constructed empty tuple; passing a list
    explicitly, even an empty one, marks it as set by the caller.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = None
    values: Optional[tuple[Optional[str], ...]] = Field(default_factory=tuple)
