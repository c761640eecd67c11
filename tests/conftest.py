"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import health_check` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import os
import sys
from pathlib import Path

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add src/ to sys.path if missing (Lambda-style imports)."""
    repo_root = Path(__file__).resolve().parents[1]
    src_str = str(repo_root / "src")
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Offline-friendly defaults so tests never need AWS or a live admin API.
os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("ENVIRONMENT", "dev")

boto3.setup_default_session(region_name="eu-west-2")


@pytest.fixture
def settings():
    """Settings pointing at a fake admin API."""
    from config.settings import Settings

    return Settings(api_url="https://admin.example.test", admin_token="test-token")


@pytest.fixture
def sample_records():
    return [
        {"id": 1, "name": "Ada", "email": "ada@example.com", "total_spent": "100", "order_count": 4, "segment": "vip"},
        {"id": 2, "name": "Ben", "email": "ben@example.com", "total_spent": 50, "order_count": 1, "segment": "new"},
        {"id": 3, "name": "Cy", "email": "cy@example.com", "total_spent": "bad", "segment": "new"},
    ]
