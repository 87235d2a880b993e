"""Functional core - pure business logic with no I/O."""

from .entries import date_key, entry_path

__all__ = [
    "date_key",
    "entry_path",
]
