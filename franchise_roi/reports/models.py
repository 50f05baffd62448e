from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from ..finance.models import AmortizationResult, LoanParameters
from ..recommendations.models import Profile, ProfileRequest


class ReportRequest(ProfileRequest):
    loan: LoanParameters | None = None


class ReportRow(BaseModel):
    rank: int
    brand: str
    industry: str
    investment: str
    roi_percent: float
    roi: str
    break_even_years: float
    break_even: str
    city: str
    notes: str


class ReportSummary(BaseModel):
    count: int
    average_roi_percent: float
    average_break_even_years: float
    minimum_investment_lakh: float | None = None


class BreakdownSlice(BaseModel):
    name: str
    value: float


class LoanSection(BaseModel):
    parameters: LoanParameters
    result: AmortizationResult
    monthly_payment: str
    total_interest: str
    total_payment: str
    breakdown: list[BreakdownSlice] = Field(default_factory=list)


class ReportResponse(BaseModel):
    user: Profile
    rows: list[ReportRow]
    summary: ReportSummary
    loan: LoanSection | None = None
    generated_at: datetime


class EmailReportRequest(BaseModel):
    email: Any = None


class EmailReportResponse(BaseModel):
    status: str
    email: str
    message: str
