"""Timestamp helpers."""

from datetime import date, datetime


def today() -> date:
    """Current local date."""
    return date.today()


def now() -> str:
    """Compact local timestamp for directory names, e.g. ``20251114_123456``."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
