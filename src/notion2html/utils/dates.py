#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/dates.py
"""Display formatting for date mentions."""

from __future__ import annotations

import datetime
import logging
from typing import Callable

from notion2html.ast.spans import Date

logger = logging.getLogger(__name__)


def _month_day_year(d: datetime.date) -> str:
    return f"{d:%b} {d.day}, {d.year}"


_DATE_LAYOUTS: dict[str, Callable[[datetime.date], str]] = {
    "MM/DD/YYYY": lambda d: f"{d:%m/%d/%Y}",
    "DD/MM/YYYY": lambda d: f"{d:%d/%m/%Y}",
    "YYYY/MM/DD": lambda d: f"{d:%Y/%m/%d}",
    "YYYY-MM-DD": lambda d: f"{d:%Y-%m-%d}",
    "MMM DD, YYYY": _month_day_year,
    "relative": _month_day_year,
}


def _format_time(t: datetime.time, time_format: str) -> str:
    if time_format == "H:mm":
        return f"{t.hour}:{t.minute:02d}"
    hour = t.hour % 12 or 12
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{hour}:{t.minute:02d} {suffix}"


def _format_date_time(d: Date, date_str: str, time_str: str) -> str:
    try:
        parsed = datetime.date.fromisoformat(date_str)
    except ValueError:
        logger.debug("Cannot parse date %r, using it verbatim", date_str)
        return date_str

    layout = _DATE_LAYOUTS.get(d.date_format, _month_day_year)
    result = layout(parsed)
    if "time" in d.type and time_str:
        try:
            parsed_time = datetime.time.fromisoformat(time_str)
        except ValueError:
            logger.debug("Cannot parse time %r, using it verbatim", time_str)
            return f"{result} {time_str}"
        result += " " + _format_time(parsed_time, d.time_format)
    return result


def format_date(d: Date) -> str:
    """Format a date mention for display.

    Parameters
    ----------
    d : Date
        Decoded date attribute payload

    Returns
    -------
    str
        Human readable date, ``"START → END"`` for range types

    Examples
    --------
        >>> format_date(Date(start_date="2019-03-26"))
        'Mar 26, 2019'
        >>> format_date(Date(start_date="2019-03-26", start_time="15:05", type="datetime", time_format="H:mm"))
        'Mar 26, 2019 15:05'

    """
    result = _format_date_time(d, d.start_date, d.start_time)
    if d.is_range:
        result += " → " + _format_date_time(d, d.end_date, d.end_time)
    return result
