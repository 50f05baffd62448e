from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .config import DEFAULT_API_LIMIT
from .data_store import BUDGET_BUCKETS, Catalog, get_catalog
from .models import FranchiseRecord, Industry, Interval

logger = logging.getLogger(__name__)

# Both spellings mean "no industry filter": the form offers "Other", the API "Any".
WILDCARD_INDUSTRIES = ("Any", "Other")

IndustryFilter = Industry | None


def parse_industry_filter(value: str | None) -> IndustryFilter:
    """
    Resolve a raw industry value into a filter.

    An absent value (``None`` or blank) and the wildcard spellings both return
    ``None``, meaning no industry constraint, the same as an absent budget.
    A known tag returns its ``Industry``. Raises ``ValueError`` for anything else.
    """
    if value is None or not value.strip() or value in WILDCARD_INDUSTRIES:
        return None
    return Industry(value)


def budget_interval(label: str | None) -> Interval | None:
    """Return the interval for a budget bucket label; ``None`` (no constraint) if absent or unknown."""
    if not label:
        return None
    return BUDGET_BUCKETS.get(label)


def _industry_matches(record: FranchiseRecord, industry: Industry | str | None) -> bool:
    if industry is None:
        return True
    tag = industry.value if isinstance(industry, Industry) else industry
    return record.industry.value == tag


def match(
    catalog: Iterable[FranchiseRecord],
    budget: Interval | None,
    industry: Industry | str | None,
) -> list[FranchiseRecord]:
    """
    Select records whose investment overlaps ``budget`` and whose industry matches.

    ``budget=None`` and ``industry=None`` each lift the constraint on that axis.
    A plain string industry is compared exactly, so values outside the
    enumeration match nothing. Records without a parsed investment never match.
    """
    matched: list[FranchiseRecord] = []
    for record in catalog:
        if record.investment is None:
            continue
        if budget is not None and not record.investment.overlaps(budget):
            continue
        if not _industry_matches(record, industry):
            continue
        matched.append(record)
    return matched


def rank(matched: Sequence[FranchiseRecord], limit: int) -> list[FranchiseRecord]:
    """Order by ROI (highest first, ties keep input order) and keep the top ``limit``."""
    if limit < 1:
        raise ValueError("limit must be at least 1")
    # sorted() is stable, which keeps catalog order among equal ROI values
    ordered = sorted(matched, key=lambda r: r.roi_percent, reverse=True)
    return ordered[:limit]


def get_recommendations(
    budget: str | None,
    industry: str | None,
    limit: int = DEFAULT_API_LIMIT,
    catalog: Catalog | None = None,
) -> list[FranchiseRecord]:
    """
    Match and rank the catalog for a budget label and industry value.

    A missing budget or industry lifts that constraint. An industry outside the
    enumeration that is not a wildcard spelling matches nothing.
    """
    catalog = catalog if catalog is not None else get_catalog()

    interval = budget_interval(budget)
    try:
        industry_filter: Industry | str | None = parse_industry_filter(industry)
    except ValueError:
        industry_filter = industry

    matched = match(catalog, interval, industry_filter)
    ranked = rank(matched, limit)
    logger.debug(
        "budget=%r industry=%r matched=%d returned=%d",
        budget, industry, len(matched), len(ranked),
    )
    return ranked
