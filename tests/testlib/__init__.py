#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.

import pytest


def skip_unwanted_test_types(item: pytest.Item) -> None:
    test_type = item.get_closest_marker("type")
    if test_type is None:
        raise Exception("Test is not TYPE marked: %s" % item)

    wanted = item.config.getoption("-T")
    if not wanted:
        return

    test_type_name = test_type.args[0]
    if test_type_name != wanted:
        pytest.skip("Not testing type %r" % test_type_name)
