#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.

import logging
import sys

logger = logging.getLogger("check_solr")

# Above CRITICAL, nothing passes
QUIET = logging.CRITICAL + 10


def get_formatter(
    format_str: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s",
) -> logging.Formatter:
    """Returns a new message formater instance that uses the standard
    check_solr log format by default. You can also set another format
    if you like."""
    return logging.Formatter(format_str)


def verbosity_to_log_level(verbosity: int) -> int:
    if verbosity >= 3:
        return logging.DEBUG
    if verbosity == 2:
        return logging.INFO
    if verbosity == 1:
        return logging.WARNING
    return QUIET


def setup_logging(verbosity: int) -> None:
    """Log to stderr, stdout belongs to the check result

    Without -v nothing is logged at all."""
    del logger.handlers[:]  # Remove all previously existing handlers
    logger.setLevel(verbosity_to_log_level(verbosity))
    if verbosity <= 0:
        logger.addHandler(logging.NullHandler())
        return

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(get_formatter())
    logger.addHandler(handler)
    # urllib3 is rather chatty on DEBUG, only follow it on -vvv
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbosity >= 3 else logging.WARNING)
