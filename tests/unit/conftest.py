"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads the project's real .env file
during unit tests. Tests control config exclusively through monkeypatch.setenv().
"""

from datetime import datetime, timezone

import pytest

from schemas.models.alert import Alert
from schemas.models.endpoint import Endpoint
from schemas.models.result import ConditionResult, Result


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-03-01 16:30:05 UTC (2024-03-02 00:30:05 in UTC+8)."""
    moment = datetime(2024, 3, 1, 16, 30, 5, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture
def endpoint():
    return Endpoint(group="infra", name="db", url="https://db.example.com")


@pytest.fixture
def alert():
    return Alert(description="database is unreachable", send_on_resolved=True)


@pytest.fixture
def mixed_result():
    return Result(
        condition_results=[
            ConditionResult(condition="status == 200", success=True),
            ConditionResult(condition="body contains ok", success=False),
        ]
    )
