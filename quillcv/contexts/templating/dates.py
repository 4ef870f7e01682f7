"""
Date range formatting for resume entries.

Date fields arrive either as pre-formatted strings ("06/2019", "Summer 2021")
or as date values. Strings are shown verbatim; date values become MM/YYYY.
"""

from datetime import date, datetime
from typing import Optional, Union

from quillcv.contexts.templating.latex_patterns import DateSentinels

DateLike = Union[str, date, datetime, None]


def format_date_value(value: DateLike) -> str:
    """
    Normalize one side of a date range.

    Example:
        >>> format_date_value(date(2019, 6, 1))
        '06/2019'
        >>> format_date_value(" Summer 2021 ")
        'Summer 2021'
        >>> format_date_value(None)
        ''
    """
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return f"{value.month:02d}/{value.year}"
    return str(value).strip()


def build_date_range(start: DateLike = None, end: DateLike = None, is_current: bool = False) -> str:
    """
    Combine start and end into a human-readable range.

    When ``is_current`` is set the end side is always "Present", whatever
    end value was supplied.

    Example:
        >>> build_date_range("06/2019", "08/2021")
        '06/2019 -- 08/2021'
        >>> build_date_range("01/2022", None, is_current=True)
        '01/2022 -- Present'
        >>> build_date_range(None, "08/2021")
        '08/2021'
    """
    start_str = format_date_value(start)
    end_str = DateSentinels.PRESENT if is_current else format_date_value(end)

    if start_str and end_str:
        return f"{start_str}{DateSentinels.RANGE_SEPARATOR}{end_str}"
    return start_str or end_str or ""


def _parse_date_string(text: str) -> Optional[date]:
    """
    Best-effort parse of MM/YYYY or ISO YYYY-MM-DD strings.

    Returns None for anything else.
    """
    text = text.strip()
    if "/" in text:
        parts = text.split("/")
        if len(parts) != 2:
            return None
        month, year = parts
        return date(int(year), int(month), 1)
    return date.fromisoformat(text[:10])


def is_future_date(value: DateLike, today: date) -> bool:
    """
    Check whether a date lies after ``today``.

    MM/YYYY strings are read as the first day of that month. Unparseable input
    counts as a past date.

    Example:
        >>> is_future_date("05/2026", today=date(2025, 1, 1))
        True
        >>> is_future_date("Spring 2026", today=date(2025, 1, 1))
        False
    """
    if value is None:
        return False
    if isinstance(value, datetime):
        return value.date() > today
    if isinstance(value, date):
        return value > today
    try:
        parsed = _parse_date_string(str(value))
    except (ValueError, TypeError):
        return False
    return parsed is not None and parsed > today


def education_date_display(start: DateLike, graduation: DateLike, today: date) -> str:
    """
    Tense-aware date text for an education entry.

    - graduation in the future: "Graduating {graduation}"
    - graduation in the past, no start: "Graduated {graduation}"
    - graduation in the past with start: "{start} -- {graduation}"
    - no graduation, start only: "{start} -- In Progress"

    Args:
        start: Program start date
        graduation: Graduation date (callers fall back to the end date)
        today: Reference date for tense detection

    Example:
        >>> education_date_display(None, "05/2026", today=date(2025, 1, 1))
        'Graduating 05/2026'
        >>> education_date_display(None, "05/2019", today=date(2025, 1, 1))
        'Graduated 05/2019'
        >>> education_date_display("09/2024", None, today=date(2025, 1, 1))
        '09/2024 -- In Progress'
    """
    graduation_str = format_date_value(graduation)
    start_str = format_date_value(start)

    if graduation_str:
        if is_future_date(graduation, today):
            return f"{DateSentinels.GRADUATING} {graduation_str}"
        display = build_date_range(start, graduation)
        if not start_str and display:
            display = f"{DateSentinels.GRADUATED} {display}"
        return display

    if start_str:
        return f"{start_str}{DateSentinels.RANGE_SEPARATOR}{DateSentinels.IN_PROGRESS}"

    return ""
