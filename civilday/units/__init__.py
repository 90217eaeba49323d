"""Unit helpers for civilday.

Timezone resolution and the instant <-> civil day conversions.
"""

from __future__ import annotations

from civilday.units.timezone import (
    UTC,
    TimezoneLike,
    compose_midnight,
    decompose,
    local_timezone,
    now,
    resolve_timezone,
)

__all__: list[str] = [
    "UTC",
    "TimezoneLike",
    "compose_midnight",
    "decompose",
    "local_timezone",
    "now",
    "resolve_timezone",
]
