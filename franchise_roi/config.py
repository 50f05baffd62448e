from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class ServiceConfig:
    port: int = int(os.getenv("PORT", "3001"))
    # Pause before answering a recommendation request, for the UI loading state.
    response_delay_seconds: float = float(os.getenv("FRANCHISE_RESPONSE_DELAY_SECONDS", "1.5"))
    cors_origins: tuple[str, ...] = tuple(
        o.strip() for o in os.getenv("FRANCHISE_CORS_ORIGINS", "*").split(",") if o.strip()
    )


DEFAULT_SERVICE_CONFIG = ServiceConfig()


def get_service_config() -> ServiceConfig:
    return DEFAULT_SERVICE_CONFIG
