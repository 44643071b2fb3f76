#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.

import pytest

from check_solr.solr.models import CoreStatus, parse_status_document
from check_solr.utils.exceptions import MalformedResponseError


def test_parse_full_document() -> None:
    document = parse_status_document(
        {
            "responseHeader": {"status": 0, "QTime": 2},
            "initFailures": {},
            "status": {
                "core1": {
                    "name": "core1",
                    "instanceDir": "/var/solr/data/core1",
                    "uptime": 123456,
                    "index": {
                        "numDocs": 5,
                        "maxDoc": 7,
                        "lastModified": "2023-01-01T00:00:00.000Z",
                        "sizeInBytes": 1024,
                    },
                }
            },
        }
    )
    assert document.response_status == 0
    assert document.status is not None
    core = document.status["core1"]
    assert core.index.numDocs == 5
    assert core.index.lastModified == "2023-01-01T00:00:00.000Z"


def test_parse_missing_sections() -> None:
    document = parse_status_document({})
    assert document.response_status is None
    assert document.status is None


def test_parse_core_without_index() -> None:
    document = parse_status_document({"responseHeader": {"status": 0}, "status": {"c": {}}})
    assert document.status is not None
    assert document.status["c"].index.numDocs is None
    assert document.status["c"].index.lastModified is None


def test_display_name_falls_back_to_key() -> None:
    assert CoreStatus(name="reported").display_name("key") == "reported"
    assert CoreStatus().display_name("key") == "key"


@pytest.mark.parametrize(
    "raw",
    [
        [],
        "no status",
        {"status": ["core1"]},
        {"responseHeader": {"status": "broken"}},
        {"responseHeader": 0},
    ],
)
def test_parse_malformed(raw: object) -> None:
    with pytest.raises(MalformedResponseError):
        parse_status_document(raw)


@pytest.mark.parametrize(
    "core",
    [
        None,
        "core1",
        {"index": None},
        {"index": []},
        {"index": {"numDocs": -1, "lastModified": 1672531200}},
        {"index": {"numDocs": "many", "lastModified": None}},
    ],
)
def test_parse_broken_core_reads_as_missing(core: object) -> None:
    document = parse_status_document({"responseHeader": {"status": 0}, "status": {"c": core}})
    assert document.status is not None
    assert document.status["c"].index.numDocs is None
    assert document.status["c"].index.lastModified is None


def test_parse_broken_core_keeps_other_cores() -> None:
    document = parse_status_document(
        {
            "responseHeader": {"status": 0},
            "status": {
                "broken": {"name": 42, "index": None},
                "good": {"name": "good", "index": {"numDocs": 5}},
            },
        }
    )
    assert document.status is not None
    assert document.status["broken"].display_name("broken") == "broken"
    assert document.status["good"].index.numDocs == 5
