from __future__ import annotations

from .models import AmortizationResult, LoanParameters


def monthly_installment(principal: float, monthly_rate: float, installments: int) -> float:
    """EMI for an amortizing loan; straight-line when the rate is zero."""
    if monthly_rate == 0:
        return principal / installments
    growth = (1 + monthly_rate) ** installments
    return principal * monthly_rate * growth / (growth - 1)


def amortize(
    principal: float,
    annual_rate_percent: float,
    tenure_years: int,
) -> AmortizationResult:
    """
    Derive the repayment figures for a fixed-rate loan.

    Pure and deterministic. ``total_interest`` is clamped at zero so float
    rounding never reports a negative interest cost.
    """
    if tenure_years <= 0:
        raise ValueError("tenure_years must be > 0")
    if principal < 0:
        raise ValueError("principal must be >= 0")
    if annual_rate_percent < 0:
        raise ValueError("annual_rate_percent must be >= 0")

    monthly_rate = annual_rate_percent / 12 / 100
    installments = int(tenure_years * 12)

    emi = monthly_installment(principal, monthly_rate, installments)
    total_payment = emi * installments
    total_interest = max(total_payment - principal, 0.0)
    interest_share = (total_interest / principal * 100) if principal else 0.0

    return AmortizationResult(
        principal=principal,
        annual_rate_percent=annual_rate_percent,
        tenure_years=tenure_years,
        installments=installments,
        monthly_payment=emi,
        total_interest=total_interest,
        total_payment=total_payment,
        interest_share_percent=round(interest_share, 1),
    )


def amortize_parameters(params: LoanParameters) -> AmortizationResult:
    return amortize(params.principal, params.annual_rate_percent, params.tenure_years)
