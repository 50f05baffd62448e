from __future__ import annotations

from pydantic import BaseModel, Field

MIN_PRINCIPAL = 100_000
MAX_PRINCIPAL = 10_000_000
MIN_RATE_PERCENT = 1.0
MAX_RATE_PERCENT = 20.0
MIN_TENURE_YEARS = 1
MAX_TENURE_YEARS = 30

DEFAULT_PRINCIPAL = 1_000_000
DEFAULT_RATE_PERCENT = 8.0
DEFAULT_TENURE_YEARS = 5


class LoanParameters(BaseModel):
    principal: float = Field(default=DEFAULT_PRINCIPAL, ge=MIN_PRINCIPAL, le=MAX_PRINCIPAL)
    annual_rate_percent: float = Field(
        default=DEFAULT_RATE_PERCENT, ge=MIN_RATE_PERCENT, le=MAX_RATE_PERCENT
    )
    tenure_years: int = Field(default=DEFAULT_TENURE_YEARS, ge=MIN_TENURE_YEARS, le=MAX_TENURE_YEARS)


class AmortizationResult(BaseModel):
    principal: float
    annual_rate_percent: float
    tenure_years: int
    installments: int
    monthly_payment: float
    total_interest: float
    total_payment: float
    interest_share_percent: float
