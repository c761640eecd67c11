"""
Environment-specific configuration settings.

Everything is read from environment variables so the same bundle runs in
every stage.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Application settings with dev-friendly defaults."""

    environment: str = "dev"

    # Admin API. Empty api_url means "not configured" and no call is made.
    api_url: str = ""
    admin_token: str = ""
    admin_token_secret_arn: str = ""
    request_timeout_seconds: float = 10.0

    # Customer record cache
    cache_ttl_seconds: int = 60
    cache_max_size: int = 32

    # Dashboard list sizes
    top_customers_limit: int = 5
    at_risk_limit: int = 4

    log_level: str = "INFO"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_url)

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        common = dict(
            environment=env,
            api_url=os.environ.get("DASHBOARD_API_URL", "").strip().rstrip("/"),
            admin_token=os.environ.get("ADMIN_TOKEN", ""),
            admin_token_secret_arn=os.environ.get("ADMIN_TOKEN_SECRET_ARN", ""),
            request_timeout_seconds=float(os.environ.get("REQUEST_TIMEOUT_SECONDS", "10")),
            cache_max_size=int(os.environ.get("CACHE_MAX_SIZE", "32")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

        # Production keeps records a little longer to spare the admin API.
        if env == "prod":
            return cls(
                cache_ttl_seconds=int(os.environ.get("CACHE_TTL_SECONDS", "300")),
                **common,
            )

        return cls(cache_ttl_seconds=int(os.environ.get("CACHE_TTL_SECONDS", "60")), **common)
