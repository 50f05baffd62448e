from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Stand-in upper bound for open-ended ranges such as "₹50 Lakh+".
OPEN_ENDED_MAX = 1000.0

DEFAULT_API_LIMIT = 5
DEFAULT_REPORT_LIMIT = 3


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the packaged franchise catalog.
    """

    catalog_path: Path = Path(__file__).resolve().parent.parent / "data" / "franchises.csv"


DEFAULT_CATALOG_CONFIG = CatalogConfig()
