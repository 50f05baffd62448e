from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from ..finance.amortization import amortize_parameters
from ..finance.models import LoanParameters
from ..recommendations.config import DEFAULT_REPORT_LIMIT
from ..recommendations.data_store import Catalog
from ..recommendations.models import FranchiseRecord, Profile
from ..recommendations.retrieval import get_recommendations
from .models import (
    BreakdownSlice,
    LoanSection,
    ReportResponse,
    ReportRow,
    ReportSummary,
)


def format_rupees(value: float) -> str:
    return f"₹{value:,.0f}"


def _format_number(value: float) -> str:
    return f"{value:g}"


def build_rows(records: Sequence[FranchiseRecord], city: str) -> list[ReportRow]:
    """One table row per ranked record; ``rank`` is 1-based and follows input order."""
    return [
        ReportRow(
            rank=i,
            brand=r.brand,
            industry=r.industry.value,
            investment=r.investment_range,
            roi_percent=r.roi_percent,
            roi=f"{_format_number(r.roi_percent)}%",
            break_even_years=r.break_even_years,
            break_even=f"{_format_number(r.break_even_years)} years",
            city=city,
            notes=r.notes,
        )
        for i, r in enumerate(records, start=1)
    ]


def summarize(records: Sequence[FranchiseRecord]) -> ReportSummary:
    if not records:
        return ReportSummary(count=0, average_roi_percent=0.0, average_break_even_years=0.0)

    roi = sum(r.roi_percent for r in records) / len(records)
    break_even = sum(r.break_even_years for r in records) / len(records)
    minimums = [r.investment.min_value for r in records if r.investment is not None]

    return ReportSummary(
        count=len(records),
        average_roi_percent=round(roi, 1),
        average_break_even_years=round(break_even, 1),
        minimum_investment_lakh=min(minimums) if minimums else None,
    )


def build_loan_section(params: LoanParameters) -> LoanSection:
    result = amortize_parameters(params)
    return LoanSection(
        parameters=params,
        result=result,
        monthly_payment=format_rupees(result.monthly_payment),
        total_interest=format_rupees(result.total_interest),
        total_payment=format_rupees(result.total_payment),
        breakdown=[
            BreakdownSlice(name="Principal", value=result.principal),
            BreakdownSlice(name="Interest", value=result.total_interest),
        ],
    )


def build_report(
    profile: Profile,
    loan: LoanParameters | None = None,
    limit: int = DEFAULT_REPORT_LIMIT,
    catalog: Catalog | None = None,
) -> ReportResponse:
    """Assemble everything the report renderer embeds for a validated profile."""
    records = get_recommendations(profile.budget, profile.industry, limit=limit, catalog=catalog)
    return ReportResponse(
        user=profile,
        rows=build_rows(records, profile.city),
        summary=summarize(records),
        loan=build_loan_section(loan) if loan is not None else None,
        generated_at=datetime.now(timezone.utc),
    )
