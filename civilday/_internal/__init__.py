"""Internal utilities for civilday.

This module contains private implementation details:
    - Calendar arithmetic on ordinal day numbers
    - Constants and name tables
    - Component validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civilday._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_year",
]
