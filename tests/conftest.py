"""Test configuration and fixtures."""

import logfire
import pytest

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _test_environment_variables(monkeypatch):
    """Run every test against the test environment with default secrets."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("IDENTITY__ALLOW_PROFILE_FALLBACK", raising=False)
