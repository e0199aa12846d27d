"""Configuration for the releases integration helpers.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from releases_integration.logging import configure_logging
from releases_integration.utils import dates


class IntegrationSettings(BaseSettings):
    """Settings for release parsing and reporting periods.

    Environment variables:
    - LOG_LEVEL                           (optional)
    - RELEASES_DEBUG                      (optional)
    - RELEASES_UTC_MODE                   (optional)
    - RELEASES_FISCAL_YEAR_START_MONTH    (optional)
    - RELEASES_FIRST_AVAILABLE_YEAR       (optional)
    - RELEASES_AVAILABLE_YEARS_AHEAD      (optional)
    - RELEASES_DATE_WINDOW_DAYS           (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `IntegrationSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )
    debug: bool = Field(
        default=False,
        validation_alias="RELEASES_DEBUG",
        description="Force DEBUG logging for the releases_integration package",
    )

    utc_mode: bool = Field(
        default=True,
        validation_alias="RELEASES_UTC_MODE",
        description="Parse dates as timezone-aware UTC",
    )
    fiscal_year_start_month: int = Field(
        default=dates.DEFAULT_FISCAL_YEAR_START_MONTH,
        validation_alias="RELEASES_FISCAL_YEAR_START_MONTH",
        description="Month (1-12) in which the fiscal year starts",
        ge=1,
        le=12,
    )
    first_available_year: int = Field(
        default=dates.DEFAULT_FIRST_AVAILABLE_YEAR,
        validation_alias="RELEASES_FIRST_AVAILABLE_YEAR",
        description="Oldest year offered for reporting",
    )
    available_years_ahead: int = Field(
        default=dates.DEFAULT_AVAILABLE_YEARS_AHEAD,
        validation_alias="RELEASES_AVAILABLE_YEARS_AHEAD",
        description="How many years past the current one are offered for reporting",
        ge=0,
    )
    date_window_days: int = Field(
        default=dates.DEFAULT_DATE_WINDOW_DAYS,
        validation_alias="RELEASES_DATE_WINDOW_DAYS",
        description="Length of the default 'recent releases' window in days",
        ge=0,
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        configure_logging(self.log_level)

        if self.debug:
            logging.getLogger("releases_integration").setLevel(logging.DEBUG)

    def available_years(self) -> list[int]:
        return dates.available_years(
            years_ahead=self.available_years_ahead,
            first_year=self.first_available_year,
        )

    def fiscal_year_to_date_range(self, year: int | str) -> tuple[str, str]:
        return dates.fiscal_year_to_date_range(year, start_month=self.fiscal_year_start_month)

    def recent_window(self) -> dict[str, str]:
        return dates.date_range_subtract_from_now(self.date_window_days)
