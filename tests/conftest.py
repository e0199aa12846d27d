"""Test configuration and fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from releases_integration.config import IntegrationSettings

_SETTINGS_ENV = (
    "LOG_LEVEL",
    "RELEASES_DEBUG",
    "RELEASES_UTC_MODE",
    "RELEASES_FISCAL_YEAR_START_MONTH",
    "RELEASES_FIRST_AVAILABLE_YEAR",
    "RELEASES_AVAILABLE_YEARS_AHEAD",
    "RELEASES_DATE_WINDOW_DAYS",
)


@dataclass
class Value:
    amount: int | None = None
    currency: str | None = None


@dataclass
class Tender:
    value: Value | None = None
    items: list[Any] | None = None


@dataclass
class Release:
    ocid: str
    tender: Tender | None = None


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove settings variables so tests only see what they set."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(clean_env: None) -> IntegrationSettings:
    """Provide settings with defaults, ignoring any local `.env`."""
    return IntegrationSettings(_env_file=None)


@pytest.fixture
def full_release() -> Release:
    """Provide a release with every field populated."""
    return Release(
        ocid="ocds-abc-0001",
        tender=Tender(value=Value(amount=42, currency="BYN"), items=["lot-1"]),
    )


@pytest.fixture
def bare_release() -> Release:
    """Provide a release with no tender."""
    return Release(ocid="ocds-abc-0002")
