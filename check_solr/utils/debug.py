#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.
"""Process wide debug switch

With debug mode enabled, unexpected exceptions are raised instead of being
reported as UNKNOWN check result."""

import contextlib
from collections.abc import Iterator

_enabled = False


def enabled() -> bool:
    return _enabled


def enable() -> None:
    """Set by --debug, stays on until the process ends"""
    global _enabled
    _enabled = True


@contextlib.contextmanager
def debug_mode(on: bool) -> Iterator[None]:
    """Switch debug mode for the duration of the block

    >>> with debug_mode(True):
    ...     enabled()
    True
    >>> enabled()
    False
    """
    global _enabled
    previous, _enabled = _enabled, on
    try:
        yield
    finally:
        _enabled = previous
