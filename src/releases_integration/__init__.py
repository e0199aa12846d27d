"""Releases integration helpers.

Provides:
- `resolve` and `dig` for reading optional fields from parsed release entities
- date helpers for release dates and reporting periods
- configuration loaded from `.env`
- structured logging
"""

__version__ = "0.1.0"

from releases_integration.config import IntegrationSettings
from releases_integration.utils.parse_entity import dig, resolve

__all__ = ["__version__", "IntegrationSettings", "dig", "resolve"]
