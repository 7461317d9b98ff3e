from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...utils.datetime_utils import utc_now

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base DTO: snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorBody(BaseModel):
    """DTO for the error part of the response envelope"""
    code: str
    message: str


class ApiResponse(BaseModel, Generic[T]):
    """Uniform success envelope"""
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now)


class ErrorResponse(BaseModel):
    """Uniform failure envelope"""
    success: bool = False
    error: ErrorBody
    timestamp: datetime = Field(default_factory=utc_now)
