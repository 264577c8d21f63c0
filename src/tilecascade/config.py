"""Board configuration: defaults, clamping and parsing of raw settings input.

Settings arrive either as integers from code or as strings from a settings
form. Out-of-range values clamp to the nearest bound; missing or unparseable
values fall back to the documented defaults. Nothing here raises for bad input.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from tilecascade.components.thresholds import GroupSizeThresholds
from tilecascade.constants import (
    DEFAULT_COLORS,
    DEFAULT_COLS,
    DEFAULT_GROUP_SIZE_A,
    DEFAULT_GROUP_SIZE_B,
    DEFAULT_GROUP_SIZE_C,
    DEFAULT_ROWS,
    MAX_COLORS,
    MAX_COLS,
    MAX_GROUP_SIZE,
    MAX_ROWS,
    MIN_COLORS,
    MIN_COLS,
    MIN_GROUP_SIZE,
    MIN_ROWS,
)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def parse_int(raw: Any, default: int) -> int:
    """Return ``raw`` as an int, or ``default`` when it is missing or malformed."""
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True, slots=True)
class BoardSettings:
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLS
    colors: int = DEFAULT_COLORS
    group_size_a: int = DEFAULT_GROUP_SIZE_A
    group_size_b: int = DEFAULT_GROUP_SIZE_B
    group_size_c: int = DEFAULT_GROUP_SIZE_C

    def clamped(self) -> "BoardSettings":
        """Return a copy with every field inside its valid range and a <= b <= c."""
        a = clamp(self.group_size_a, MIN_GROUP_SIZE, MAX_GROUP_SIZE)
        b = max(a, clamp(self.group_size_b, MIN_GROUP_SIZE, MAX_GROUP_SIZE))
        c = max(b, clamp(self.group_size_c, MIN_GROUP_SIZE, MAX_GROUP_SIZE))
        return replace(
            self,
            rows=clamp(self.rows, MIN_ROWS, MAX_ROWS),
            columns=clamp(self.columns, MIN_COLS, MAX_COLS),
            colors=clamp(self.colors, MIN_COLORS, MAX_COLORS),
            group_size_a=a,
            group_size_b=b,
            group_size_c=c,
        )

    @property
    def thresholds(self) -> GroupSizeThresholds:
        return GroupSizeThresholds(self.group_size_a, self.group_size_b, self.group_size_c)

    @classmethod
    def from_values(
        cls,
        rows: Any = None,
        columns: Any = None,
        colors: Any = None,
        group_size_a: Any = None,
        group_size_b: Any = None,
        group_size_c: Any = None,
    ) -> "BoardSettings":
        """Build clamped settings from raw values of any type."""
        return cls(
            rows=parse_int(rows, DEFAULT_ROWS),
            columns=parse_int(columns, DEFAULT_COLS),
            colors=parse_int(colors, DEFAULT_COLORS),
            group_size_a=parse_int(group_size_a, DEFAULT_GROUP_SIZE_A),
            group_size_b=parse_int(group_size_b, DEFAULT_GROUP_SIZE_B),
            group_size_c=parse_int(group_size_c, DEFAULT_GROUP_SIZE_C),
        ).clamped()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BoardSettings":
        return cls.from_values(
            rows=data.get("rows"),
            columns=data.get("columns"),
            colors=data.get("colors"),
            group_size_a=data.get("group_size_a"),
            group_size_b=data.get("group_size_b"),
            group_size_c=data.get("group_size_c"),
        )
