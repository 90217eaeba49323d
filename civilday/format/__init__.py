"""Formatting for Day values.

This module provides the fixed English display formats and the
canonical key format.

Functions:
    format_description: ``4/5/2020``
    format_key: ``4:5:2020``
    format_full: ``April 5, 2020``
    format_weekday_date: ``Sunday, Apr 5``
"""

from __future__ import annotations

from civilday.format.display import (
    KEY_SEPARATOR,
    format_description,
    format_full,
    format_key,
    format_short_description,
    format_short_month,
    format_short_month_day,
    format_short_month_day_year,
    format_weekday_date,
)

__all__: list[str] = [
    "KEY_SEPARATOR",
    "format_description",
    "format_full",
    "format_key",
    "format_short_description",
    "format_short_month",
    "format_short_month_day",
    "format_short_month_day_year",
    "format_weekday_date",
]
