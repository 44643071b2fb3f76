#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.

import datetime
import logging
from collections.abc import Callable, Iterator, Mapping

import pytest

from check_solr.utils import debug
from check_solr.utils.log import logger

NOW = datetime.datetime(2023, 1, 2, tzinfo=datetime.UTC)

CoreFactory = Callable[..., Mapping[str, object]]


@pytest.fixture(autouse=True)
def enable_debug_fixture() -> Iterator[None]:
    with debug.debug_mode(True):
        yield


@pytest.fixture
def disable_debug() -> Iterator[None]:
    with debug.debug_mode(False):
        yield


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """setup_logging() replaces the handlers of our logger, restore them"""
    handlers, level = logger.handlers[:], logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logging.getLogger("urllib3").setLevel(logging.NOTSET)


@pytest.fixture(name="now")
def fixture_now() -> datetime.datetime:
    return NOW


@pytest.fixture(name="core")
def fixture_core() -> CoreFactory:
    """Build one entry of the "status" section of a core admin response"""

    def _core(
        name: str,
        num_docs: int | None = 1000,
        age: datetime.timedelta | None = datetime.timedelta(minutes=5),
    ) -> Mapping[str, object]:
        index: dict[str, object] = {}
        if num_docs is not None:
            index["numDocs"] = num_docs
        if age is not None:
            index["lastModified"] = (NOW - age).isoformat().replace("+00:00", "Z")
        return {"name": name, "index": index}

    return _core
