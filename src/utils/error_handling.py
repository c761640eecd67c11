"""Error taxonomy for the admin API boundary and Lambda error responses."""

import json
from enum import Enum
from typing import Any, Dict, Optional


class FailureReason(str, Enum):
    """Distinct failure conditions the UI renders differently."""

    NOT_CONFIGURED = "not_configured"
    UNAUTHORIZED = "unauthorized"
    TRANSPORT_ERROR = "transport_error"


class AppError(Exception):
    """Base class for application errors."""

    reason: FailureReason = FailureReason.TRANSPORT_ERROR

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class NotConfiguredError(AppError):
    """Raised before any network call when no API endpoint is configured."""

    reason = FailureReason.NOT_CONFIGURED

    def __init__(self, message: str = "API URL not configured"):
        super().__init__(message, status_code=503)


class UnauthorizedError(AppError):
    """Raised when the admin API rejects the bearer token (HTTP 401)."""

    reason = FailureReason.UNAUTHORIZED

    def __init__(self, message: str = "Please log in to view customers"):
        super().__init__(message, status_code=401)


class TransportError(AppError):
    """Raised for non-2xx responses other than 401, network errors and bad JSON."""

    reason = FailureReason.TRANSPORT_ERROR

    def __init__(self, message: str = "Failed to load customers", upstream_status: Optional[int] = None):
        super().__init__(message, status_code=502)
        self.upstream_status = upstream_status


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {"message": str(error), "status": "error", "reason": error.reason.value}
        ),
    }
