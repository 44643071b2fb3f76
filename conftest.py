#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.

# This file initializes the py.test environment

import pytest

from tests.testlib import skip_unwanted_test_types

#
# Each test is of one of the following types.
#
# The tests are marked using the marker pytest.marker.type("TYPE")
# which is added to the test automatically according to their location.
#
# With "-T TYPE" only the tests of that type are executed, tests of the
# other types will be skipped. Without "-T" all tests are executed.
#
test_types = ["unit"]


def pytest_addoption(parser):
    """Register the -T option to pytest"""
    parser.addoption(
        "-T",
        action="store",
        metavar="TYPE",
        default=None,
        help="Run tests of the given TYPE. Available types are: %s" % ", ".join(test_types),
    )


def pytest_configure(config):
    """Register the type marker to pytest"""
    config.addinivalue_line(
        "markers", "type(TYPE): Mark TYPE of test. Available: %s" % ", ".join(test_types)
    )


def pytest_collection_modifyitems(items):
    """Mark collected test types based on their location"""
    for item in items:
        type_marker = item.get_closest_marker("type")
        if type_marker and type_marker.args:
            continue  # Do not modify manually set marks

        file_path = "%s" % item.reportinfo()[0]
        if any(p in file_path for p in ("tests/unit", "tests/testlib", "check_solr/")):
            ty = "unit"
        else:
            raise Exception("Test not TYPE marked: %r" % item)

        item.add_marker(pytest.mark.type.with_args(ty))


def pytest_runtest_setup(item):
    """Skip tests of unwanted types"""
    skip_unwanted_test_types(item)
