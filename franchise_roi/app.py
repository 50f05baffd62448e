from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import DEFAULT_SERVICE_CONFIG, ServiceConfig, get_service_config
from .finance import models as loan_limits
from .finance.amortization import amortize_parameters
from .finance.models import AmortizationResult, LoanParameters
from .recommendations.config import DEFAULT_API_LIMIT
from .recommendations.data_store import BUDGET_LABELS, get_catalog
from .recommendations.models import (
    ErrorResponse,
    Industry,
    ProfileRequest,
    RecommendationResponse,
)
from .recommendations.retrieval import WILDCARD_INDUSTRIES, get_recommendations
from .recommendations.validation import ProfileValidationError, validate_profile
from .reports.builder import build_report
from .reports.delivery import send_report_email
from .reports.models import (
    EmailReportRequest,
    EmailReportResponse,
    ReportRequest,
    ReportResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Franchise ROI Recommendation API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(DEFAULT_SERVICE_CONFIG.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

_INTERNAL_ERROR = ErrorResponse(
    error="Internal server error",
    message="Something went wrong. Please try again.",
)

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@app.exception_handler(ProfileValidationError)
def profile_validation_handler(request: Request, exc: ProfileValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=exc.error, message=exc.message, code=exc.code).model_dump(),
    )


# Routes whose bad input is answered with the structured 400 error body.
_PROFILE_ROUTES = {"/api/franchises", "/api/report", "/api/report/email"}


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if request.url.path not in _PROFILE_ROUTES:
        return await request_validation_exception_handler(request, exc)

    if any("loan" in err.get("loc", ()) for err in exc.errors()):
        body = ErrorResponse(
            error="Invalid loan parameters",
            message="Loan amount, interest rate or tenure is out of range",
            code="invalid_loan",
        )
    else:
        body = ErrorResponse(
            error="Invalid request body",
            message="Please send the profile fields as a JSON object",
            code="invalid_request",
        )
    return JSONResponse(status_code=400, content=body.model_dump())


def _internal_error() -> JSONResponse:
    return JSONResponse(status_code=500, content=_INTERNAL_ERROR.model_dump(exclude_none=True))


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/api/metadata")
def metadata() -> dict:
    catalog = get_catalog()
    return {
        "budgets": BUDGET_LABELS,
        "industries": [i.value for i in Industry] + ["Other"],
        "wildcard_industries": list(WILDCARD_INDUSTRIES),
        "catalog_size": len(catalog),
        "loan": {
            "principal": {
                "min": loan_limits.MIN_PRINCIPAL,
                "max": loan_limits.MAX_PRINCIPAL,
                "default": loan_limits.DEFAULT_PRINCIPAL,
            },
            "annual_rate_percent": {
                "min": loan_limits.MIN_RATE_PERCENT,
                "max": loan_limits.MAX_RATE_PERCENT,
                "default": loan_limits.DEFAULT_RATE_PERCENT,
            },
            "tenure_years": {
                "min": loan_limits.MIN_TENURE_YEARS,
                "max": loan_limits.MAX_TENURE_YEARS,
                "default": loan_limits.DEFAULT_TENURE_YEARS,
            },
        },
    }


# ── Recommendations ──────────────────────────────────────────────────────


@app.post(
    "/api/franchises",
    response_model=RecommendationResponse,
    responses=_ERROR_RESPONSES,
)
def franchises(
    body: ProfileRequest,
    config: ServiceConfig = Depends(get_service_config),
):
    profile = validate_profile(body)

    try:
        recommendations = get_recommendations(
            profile.budget, profile.industry, limit=DEFAULT_API_LIMIT,
        )
    except Exception:
        logger.exception("Error processing franchise request")
        return _internal_error()

    if config.response_delay_seconds > 0:
        time.sleep(config.response_delay_seconds)

    return RecommendationResponse(
        success=True,
        user=profile,
        recommendations=recommendations,
        total_found=len(recommendations),
        generated_at=datetime.now(timezone.utc),
    )


# ── Loan calculator ──────────────────────────────────────────────────────


@app.post("/api/loan/amortize", response_model=AmortizationResult)
def loan_amortize(body: LoanParameters) -> AmortizationResult:
    return amortize_parameters(body)


# ── Report ───────────────────────────────────────────────────────────────


@app.post("/api/report", response_model=ReportResponse, responses=_ERROR_RESPONSES)
def report(body: ReportRequest):
    profile = validate_profile(body)
    try:
        return build_report(profile, loan=body.loan)
    except Exception:
        logger.exception("Error building franchise report")
        return _internal_error()


@app.post("/api/report/email", response_model=EmailReportResponse, responses=_ERROR_RESPONSES)
def report_email(body: EmailReportRequest) -> EmailReportResponse:
    return send_report_email(body)
