#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.
"""This module contains functions that transform Python values into
text representations optimized for human beings.
The resulting strings are not ment to be parsed into values again later. They
are just for optical output purposes."""

# .
#   .--Date/Time-----------------------------------------------------------.
#   |           ____        _          _______ _                           |
#   |          |  _ \  __ _| |_ ___   / /_   _(_)_ __ ___   ___            |
#   |          | | | |/ _` | __/ _ \ / /  | | | | '_ ` _ \ / _ \           |
#   |          | |_| | (_| | ||  __// /   | | | | | | | | |  __/           |
#   |          |____/ \__,_|\__\___/_/    |_| |_|_| |_| |_|\___|           |
#   |                                                                      |
#   '----------------------------------------------------------------------'


class Age:
    """Format time difference seconds into approximated human readable text

    >>> str(Age(42))
    '42 s'
    >>> str(Age(3600))
    '60 m'
    >>> str(Age(7 * 3600))
    '7 h'
    >>> str(Age(3 * 86400 + 43200))
    '3.5 d'
    >>> str(Age(-90))
    '-90 s'
    """

    def __init__(self, secs: float) -> None:
        super().__init__()
        self.__secs = secs

    def __str__(self) -> str:
        secs = self.__secs

        if secs < 0:
            return "-" + approx_age(-secs)
        if secs < 10:
            return "%s s" % drop_dotzero(secs)
        if secs < 240:
            return "%d s" % secs

        mins = int(secs / 60.0)
        if mins < 360:
            return "%d m" % mins

        hours = int(mins / 60.0)
        if hours < 48:
            return "%d h" % hours

        days = hours / 24.0
        if days < 6:
            return "%s d" % drop_dotzero(days, 1)
        if days < 999:
            return "%.0f d" % days

        years = days / 365.0
        if years < 10:
            return "%.1f y" % years
        return "%.0f y" % years

    def __float__(self) -> float:
        return float(self.__secs)


def approx_age(secs: float) -> str:
    return "%s" % Age(secs)


def fmt_latency(secs: float) -> str:
    """Request durations are shown with millisecond resolution

    >>> fmt_latency(0.1234)
    '0.123'
    >>> fmt_latency(2)
    '2'
    """
    return drop_dotzero(secs, 3)


#   .--Misc.Numbers--------------------------------------------------------.
#   |    __  __ _            _   _                 _                       |
#   |   |  \/  (_)___  ___  | \ | |_   _ _ __ ___ | |__   ___ _ __ ___     |
#   |   | |\/| | / __|/ __| |  \| | | | | '_ ` _ \| '_ \ / _ \ '__/ __|    |
#   |   | |  | | \__ \ (__ _| |\  | |_| | | | | | | |_) |  __/ |  \__ \    |
#   |   |_|  |_|_|___/\___(_)_| \_|\__,_|_| |_| |_|_.__/ \___|_|  |___/    |
#   |                                                                      |
#   '----------------------------------------------------------------------'


def drop_dotzero(v: float, digits: int = 2) -> str:
    """Renders a number as a floating point number and drops useless
    zeroes at the end of the fraction

    >>> drop_dotzero(45.1)
    '45.1'
    >>> drop_dotzero(45.0)
    '45'
    >>> drop_dotzero(45.111, 1)
    '45.1'
    >>> drop_dotzero(45.999, 1)
    '46'
    """
    t = "%.*f" % (digits, v)
    if "." in t:
        return t.rstrip("0").rstrip(".")
    return t


# Document counts with separated thousands
# 1234 -> "1,234"
# 12345678 -> "12,345,678"
def fmt_int(n: int) -> str:
    return f"{n:,d}"
