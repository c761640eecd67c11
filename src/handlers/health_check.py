"""Liveness check for the dashboard backend itself."""

import os
import json
from datetime import datetime, timezone


def lambda_handler(event, context):
    """Return a simple 200 response to verify the function is alive."""
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "service": "crm-insights",
                "environment": os.environ.get("ENVIRONMENT", "dev"),
                "api_configured": bool(os.environ.get("DASHBOARD_API_URL")),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
