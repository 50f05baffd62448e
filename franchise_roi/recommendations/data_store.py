from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import FranchiseRecord, Industry, Interval
from .ranges import parse_range, try_parse_range

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: List[str] = [
    "brand",
    "industry",
    "investment",
    "roi_percent",
    "break_even",
    "notes",
]

BUDGET_LABELS: List[str] = [
    "₹5–10 Lakh",
    "₹10–20 Lakh",
    "₹20–50 Lakh",
    "₹50 Lakh+",
]

BUDGET_BUCKETS: dict[str, Interval] = {label: parse_range(label) for label in BUDGET_LABELS}


@dataclass(frozen=True)
class Catalog:
    """Read-only, ordered collection of franchise records."""

    records: tuple[FranchiseRecord, ...]

    def __iter__(self) -> Iterator[FranchiseRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def brands(self) -> list[str]:
        return [r.brand for r in self.records]


def _to_float(raw: str) -> float | None:
    try:
        result = float(raw)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _normalize_percent(value: float | int | str | None) -> float | None:
    """ROI as a number in [0, 100]; anything else is unreadable."""
    if value is None or pd.isna(value):
        return None
    result = _to_float(str(value).strip().rstrip("%").strip())
    if result is None or not 0.0 <= result <= 100.0:
        return None
    return result


def _normalize_years(value: float | int | str | None) -> float | None:
    if value is None or pd.isna(value):
        return None
    raw = str(value).strip().lower()
    for suffix in ("years", "year", "yrs", "yr"):
        if raw.endswith(suffix):
            raw = raw[: -len(suffix)].strip()
            break
    result = _to_float(raw)
    if result is None or result < 0:
        return None
    return result


def _parse_investment(text: str) -> Interval | None:
    interval = try_parse_range(text)
    if interval is None:
        logger.warning("Unparseable investment range %r; record will never match", text)
    return interval


def _drop_rows(df: pd.DataFrame, mask: pd.Series, reason: str) -> pd.DataFrame:
    if mask.any():
        logger.warning(
            "Dropping %d catalog rows with %s: %s",
            int(mask.sum()),
            reason,
            df.loc[mask, "brand"].tolist(),
        )
    return df.loc[~mask]


def build_catalog(df: pd.DataFrame) -> Catalog:
    """
    Turn a raw catalog table into a ``Catalog``.

    Investment ranges, ROI and break-even strings are parsed once here so the
    matcher never re-parses text per request. Rows with an unknown industry,
    or an ROI / break-even that is blank or out of range, are dropped with a
    warning. A row whose investment cannot be parsed is kept but never matches.
    """
    missing = [c for c in CATALOG_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"catalog is missing columns: {missing}")

    df = df[CATALOG_COLUMNS].copy()
    df["notes"] = df["notes"].fillna("").astype(str)
    df["industry"] = df["industry"].fillna("").astype(str).str.strip()
    df["roi_value"] = df["roi_percent"].apply(_normalize_percent)
    df["break_even_value"] = df["break_even"].apply(_normalize_years)
    df["investment"] = df["investment"].fillna("").astype(str)

    known = [i.value for i in Industry]
    df = _drop_rows(df, ~df["industry"].isin(known), "unknown industry")
    df = _drop_rows(
        df,
        df["roi_value"].isna() | df["break_even_value"].isna(),
        "unreadable or out-of-range ROI/break-even",
    )

    duplicated = df["brand"][df["brand"].duplicated()].tolist()
    if duplicated:
        raise ValueError(f"duplicate brands in catalog: {duplicated}")

    records: list[FranchiseRecord] = []
    for _, row in df.iterrows():
        records.append(FranchiseRecord(
            brand=str(row["brand"]).strip(),
            industry=Industry(row["industry"]),
            investment_range=row["investment"],
            investment=_parse_investment(row["investment"]),
            roi_percent=float(row["roi_value"]),
            break_even_years=float(row["break_even_value"]),
            notes=row["notes"],
        ))

    return Catalog(records=tuple(records))


def load_catalog(path: Path) -> Catalog:
    return build_catalog(pd.read_csv(path, dtype=str, encoding="utf-8"))


_catalog: Catalog | None = None


def get_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Catalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config.catalog_path)
        logger.info("Loaded %d franchise records from %s", len(_catalog), config.catalog_path)
    return _catalog
