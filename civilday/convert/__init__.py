"""Conversion functions for day values.

This module provides functions for converting Day and AnyDay to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a day value to a JSON-serializable dict
    from_json: Create a day value from a JSON dict
"""

from __future__ import annotations

from civilday.convert.json import DayValue, from_json, to_json

__all__: list[str] = [
    "DayValue",
    "from_json",
    "to_json",
]
