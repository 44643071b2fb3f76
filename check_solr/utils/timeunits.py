#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.

from __future__ import annotations

import enum
from typing import Final

# Gregorian calendar average, 400 years have 146097 days
_SECONDS_PER_YEAR: Final = 146097 / 400 * 86400


class TimeUnit(enum.Enum):
    """Unit in which age thresholds are given and age metrics are reported

    >>> TimeUnit.parse("Hours")
    <TimeUnit.HOURS: 'hours'>
    >>> TimeUnit.MINUTES.to_seconds(1.5)
    90.0
    >>> TimeUnit.DAYS.from_seconds(43200)
    0.5
    """

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    YEARS = "years"

    @classmethod
    def parse(cls, raw: str) -> TimeUnit:
        try:
            return cls(raw.lower())
        except ValueError:
            raise ValueError(
                f"invalid time unit {raw!r}, choose from {', '.join(u.value for u in cls)}"
            ) from None

    @property
    def seconds(self) -> float:
        return _UNIT_SECONDS[self]

    @property
    def perf_unit(self) -> str:
        # Only seconds have a unit of measurement in the plug-in API
        return "s" if self is TimeUnit.SECONDS else ""

    def to_seconds(self, value: float) -> float:
        return value * self.seconds

    def from_seconds(self, seconds: float) -> float:
        return seconds / self.seconds


_UNIT_SECONDS: Final = {
    TimeUnit.MILLISECONDS: 0.001,
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MINUTES: 60.0,
    TimeUnit.HOURS: 3600.0,
    TimeUnit.DAYS: 86400.0,
    TimeUnit.YEARS: _SECONDS_PER_YEAR,
}
