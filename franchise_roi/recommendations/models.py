from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Interval(_CamelModel):
    """Closed numeric range in Lakh, compared by overlap."""

    model_config = ConfigDict(frozen=True)

    min_value: float
    max_value: float

    @model_validator(mode="after")
    def _check_order(self) -> Interval:
        if self.min_value > self.max_value:
            raise ValueError("min_value must not exceed max_value")
        return self

    def overlaps(self, other: Interval) -> bool:
        return self.max_value >= other.min_value and self.min_value <= other.max_value


class Industry(str, Enum):
    food = "Food"
    fitness = "Fitness"
    education = "Education"
    retail = "Retail"
    salon = "Salon"


class FranchiseRecord(_CamelModel):
    model_config = ConfigDict(frozen=True)

    brand: str = Field(..., min_length=1)
    industry: Industry
    investment_range: str
    investment: Interval | None = None
    roi_percent: float = Field(..., ge=0.0, le=100.0)
    break_even_years: float = Field(..., ge=0.0)
    notes: str = ""


class ProfileRequest(BaseModel):
    """
    Inbound form body.

    Fields are left untyped so a wrong JSON type reaches
    ``validation.validate_profile`` and gets the same structured 400 as any
    other bad field.
    """

    name: Any = None
    email: Any = None
    phone: Any = None
    city: Any = None
    budget: Any = None
    industry: Any = None


class Profile(BaseModel):
    name: str
    email: str
    phone: str
    city: str
    budget: str
    industry: str


class RecommendationResponse(_CamelModel):
    success: bool = True
    user: Profile
    recommendations: list[FranchiseRecord]
    total_found: int
    generated_at: datetime


class ErrorResponse(BaseModel):
    error: str
    message: str
    code: str | None = None
