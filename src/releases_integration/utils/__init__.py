"""Parsing and date utilities."""

from releases_integration.utils.parse_entity import dig, is_null_dereference, resolve

__all__ = [
    "dig",
    "is_null_dereference",
    "resolve",
]
