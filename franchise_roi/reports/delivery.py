from __future__ import annotations

import logging

from ..recommendations.validation import EMAIL_RE, ProfileValidationError
from .models import EmailReportRequest, EmailReportResponse

logger = logging.getLogger(__name__)


def send_report_email(body: EmailReportRequest) -> EmailReportResponse:
    """
    Acknowledge a report-by-email request.

    No mail is sent; the request is only logged.
    """
    if body.email is not None and not isinstance(body.email, str):
        raise ProfileValidationError(
            "invalid_email", "Invalid email format", "Please enter a valid email address",
        )
    email = (body.email or "").strip()
    if not email:
        raise ProfileValidationError(
            "missing_fields", "Missing required fields", "Please provide an email address",
        )
    if not EMAIL_RE.match(email):
        raise ProfileValidationError(
            "invalid_email", "Invalid email format", "Please enter a valid email address",
        )

    logger.info("Report email requested for %s (delivery stubbed)", email)
    return EmailReportResponse(
        status="queued",
        email=email,
        message=f"Report has been sent to {email}",
    )
