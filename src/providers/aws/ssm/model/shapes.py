"""Nested SSM structures used by request models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import FrozenList, ParameterMap, SSMShape


class AssociationStatusName(Enum):
    PENDING = "Pending"
    SUCCESS = "Success"
    FAILED = "Failed"


class DocumentPermissionType(Enum):
    SHARE = "Share"


class AssociationFilter(SSMShape):
    key: str = Field(alias="key")
    value: str = Field(alias="value")


class CommandFilter(SSMShape):
    key: str = Field(alias="key")
    value: str = Field(alias="value")


class DocumentFilter(SSMShape):
    key: str = Field(alias="key")
    value: str = Field(alias="value")


class InstanceInformationFilter(SSMShape):
    key: str = Field(alias="key")
    value_set: FrozenList[str] = Field(alias="valueSet")


class CreateAssociationBatchRequestEntry(SSMShape):
    name: Optional[str] = None
    instance_id: Optional[str] = None
    parameters: Optional[ParameterMap] = None


class AssociationStatus(SSMShape):
    date: datetime
    name: AssociationStatusName
    message: str
    additional_info: Optional[str] = None


class DocumentKeyValuesFilter(SSMShape):
    key: str
    values: FrozenList[str]
