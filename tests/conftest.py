"""Pytest configuration and fixtures."""

# pylint: disable=redefined-outer-name

import os
from dataclasses import dataclass, field
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from outbound_ip.core.config import Settings
from outbound_ip.dns.resolver import LookupResult

# Set test environment variables before importing application code
os.environ.setdefault("AWS_BASE_URL", "http://ec2-test.compute-1.amazonaws.com")
os.environ.setdefault("RESOLVER_BACKEND", "system")
os.environ.setdefault("SENTRY_DSN", "")

TEST_HOSTNAME = "ec2-203-0-113-7.compute-1.amazonaws.com"


@dataclass
class FakeResolver:
    """Fake resolver returning a predefined result or raising an error."""

    result: LookupResult = field(
        default_factory=lambda: LookupResult(address="203.0.113.7", family=4)
    )
    error: Optional[Exception] = None
    calls: list[str] = field(default_factory=list)

    async def lookup(self, hostname: str) -> LookupResult:
        self.calls.append(hostname)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def test_settings():
    """Create test settings with predictable values."""
    return Settings(
        aws_base_url=f"http://{TEST_HOSTNAME}",
        port=3000,
        trusted_proxy_hops=1,
        resolver_backend="system",
        log_level="INFO",
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def fake_resolver():
    """Create a fake resolver."""
    return FakeResolver()


@pytest.fixture
def app(test_settings, fake_resolver):
    """Create a test FastAPI application with injected dependencies."""
    # Imported lazily so the environment above is in place
    from outbound_ip.app import create_app  # pylint: disable=import-outside-toplevel

    return create_app(test_settings, resolver=fake_resolver)


@pytest.fixture
def client(app):
    """Create a test client."""
    with TestClient(app) as test_client:
        yield test_client
