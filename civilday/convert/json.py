"""JSON serialization and deserialization for day values.

This module provides functions for converting Day and AnyDay to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a day value to a JSON-serializable dict.
    from_json: Create a day value from a JSON dict.

The format carries a type tag for polymorphic deserialization; a Day's
value is its canonical key:

    {"_type": "Day", "value": "4:5:2020"}
    {"_type": "AnyDay", "value": null}

Examples:
    >>> from civilday import Day
    >>> from civilday.convert import to_json, from_json
    >>> data = to_json(Day(2020, 4, 5))
    >>> data
    {'_type': 'Day', 'value': '4:5:2020'}
    >>> from_json(data) == Day(2020, 4, 5)
    True
"""

from __future__ import annotations

from typing import Any, Union

from civilday.core.any_day import ANY_DAY, AnyDay
from civilday.core.day import Day
from civilday.errors import ParseError

DayValue = Union[Day, AnyDay]


def to_json(value: DayValue) -> dict[str, Any]:
    """Convert a Day or AnyDay to a JSON-serializable dictionary.

    Raises:
        TypeError: If value is not a Day or AnyDay.
    """
    if isinstance(value, (Day, AnyDay)):
        return value.to_json()
    raise TypeError(f"expected Day or AnyDay, got {type(value).__name__}")


def from_json(data: dict[str, Any]) -> DayValue:
    """Create a Day or AnyDay from a JSON dictionary.

    The dictionary must include a ``_type`` field naming the type.

    Args:
        data: Dictionary with ``_type`` and ``value`` keys.

    Returns:
        The decoded value.

    Raises:
        ParseError: If the data is malformed or the type is unknown.

    Examples:
        >>> from_json({"_type": "AnyDay", "value": None})
        AnyDay
    """
    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_tag = data.get("_type")
    if type_tag is None:
        raise ParseError("missing '_type' field in JSON data")

    if type_tag == "Day":
        return Day.from_json(data)
    elif type_tag == "AnyDay":
        return ANY_DAY
    raise ParseError(f"unknown _type: {type_tag!r}")


__all__ = ["DayValue", "to_json", "from_json"]
