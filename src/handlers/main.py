"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

One function keeps the customer cache warm across both dashboard routes.
"""

from typing import Callable, Dict
import json

from . import customer_dashboard, health_check, system_health


def _response(status: int, body: Dict) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    The event carries the HTTP method and path; routes match exactly, with
    a trailing slash tolerated.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path.rstrip('/') or '/'}"

    route_table: Dict[str, Callable] = {
        "GET /dashboard/customers": customer_dashboard.lambda_handler,
        "GET /dashboard/health": system_health.lambda_handler,
        "GET /health": health_check.lambda_handler,
    }

    handler = route_table.get(route_key)
    if handler is not None:
        return handler(event, context)

    return _response(404, {"message": "Route not found", "route": route_key})
