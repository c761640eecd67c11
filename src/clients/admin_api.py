"""
Admin API client.

Thin synchronous adapter around ``GET /api/customers`` and ``GET /api/health``.
It owns transport concerns only: endpoint configuration, the bearer token,
timeouts and translating HTTP results into the error taxonomy.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

import boto3
import httpx

from config.settings import Settings
from models.health import TransportOutcome
from utils.error_handling import NotConfiguredError, TransportError, UnauthorizedError
from utils.logging_config import get_logger

logger = get_logger(__name__)

CUSTOMERS_PATH = "/api/customers"
HEALTH_PATH = "/api/health"


def _secret_to_token(secret_arn: str) -> Optional[str]:
    """Read the admin bearer token from Secrets Manager."""
    try:
        sm = boto3.client("secretsmanager")
        secret_value = sm.get_secret_value(SecretId=secret_arn)["SecretString"]
        try:
            secret = json.loads(secret_value)
        except ValueError:
            return secret_value.strip() or None
        if isinstance(secret, dict):
            return secret.get("token") or None
        return str(secret) if secret else None
    except Exception as exc:
        logger.warning("Failed to load admin token secret", extra={"error": str(exc)})
        return None


class AdminApiClient:
    """Fetches raw customer records and health payloads from the admin API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or Settings.from_environment()
        self._token = token
        self._transport = transport

    @property
    def token(self) -> Optional[str]:
        """Resolve the bearer token lazily: explicit, env, then Secrets Manager."""
        if self._token is None:
            if self.settings.admin_token:
                self._token = self.settings.admin_token
            elif self.settings.admin_token_secret_arn:
                self._token = _secret_to_token(self.settings.admin_token_secret_arn) or ""
            else:
                self._token = ""
        return self._token or None

    def _get(self, path: str) -> httpx.Response:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        with httpx.Client(
            base_url=self.settings.api_url,
            headers=headers,
            timeout=self.settings.request_timeout_seconds,
            transport=self._transport,
        ) as client:
            return client.get(path)

    def fetch_customers(self) -> List[Dict[str, Any]]:
        """Return the raw customer list. Raises NotConfigured/Unauthorized/TransportError."""
        if not self.settings.is_configured:
            raise NotConfiguredError()

        try:
            response = self._get(CUSTOMERS_PATH)
        except httpx.HTTPError as exc:
            logger.error("Customer fetch failed", extra={"error": str(exc)})
            raise TransportError("Unable to connect to API") from exc

        if response.status_code == 401:
            logger.info("Customer fetch rejected; login required")
            raise UnauthorizedError()
        if not response.is_success:
            logger.warning(
                "Customer fetch returned error status",
                extra={"status_code": response.status_code},
            )
            raise TransportError(upstream_status=response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("Customer response was not JSON", extra={"error": str(exc)})
            raise TransportError() from exc

        if isinstance(body, dict):
            records = body.get("data") or []
        elif isinstance(body, list):
            records = body
        else:
            records = []
        if not isinstance(records, list):
            records = []

        logger.info("Customers fetched", extra={"count": len(records)})
        return records

    def fetch_health(self) -> Tuple[Optional[Dict[str, Any]], TransportOutcome]:
        """Call the health endpoint. Never raises; the outcome says what happened."""
        if not self.settings.is_configured:
            return None, TransportOutcome.not_configured()

        try:
            response = self._get(HEALTH_PATH)
        except httpx.HTTPError as exc:
            logger.error("Health check failed", extra={"error": str(exc)})
            return None, TransportOutcome.network_failure(str(exc) or exc.__class__.__name__)

        if not response.is_success:
            return None, TransportOutcome.http_error(response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("Health response was not JSON", extra={"error": str(exc)})
            return None, TransportOutcome.network_failure("Health endpoint returned invalid JSON")

        payload = body if isinstance(body, dict) else {}
        return payload, TransportOutcome.ok(response.status_code)
