from __future__ import annotations

from franchise_roi.app import app
from franchise_roi.config import ServiceConfig, get_service_config

# No artificial response delay under test.
app.dependency_overrides[get_service_config] = lambda: ServiceConfig(response_delay_seconds=0.0)
