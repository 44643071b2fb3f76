#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.

import logging
import time
from typing import Final, NamedTuple

import requests

from check_solr.utils.exceptions import (
    MalformedResponseError,
    TransportError,
    UnexpectedStatusCodeError,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_CORES_PATH: Final = "/solr/admin/cores?wt=json"


class FetchResult(NamedTuple):
    raw: object
    latency: float


def build_url(host: str, port: int | None = None, path: str | None = None) -> str:
    """
    >>> build_url("solr.example.com")
    'http://solr.example.com/solr/admin/cores?wt=json'
    >>> build_url("solr.example.com", 8983, "solr/admin/cores?action=STATUS&wt=json")
    'http://solr.example.com:8983/solr/admin/cores?action=STATUS&wt=json'
    """
    path = path or DEFAULT_CORES_PATH
    if not path.startswith("/"):
        path = f"/{path}"
    return f"http://{host}{'' if port is None else f':{port}'}{path}"


def fetch_core_status(
    url: str,
    *,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> FetchResult:
    """Issue exactly one GET and return the decoded JSON body

    No retries are done, every failure is reported right away.
    """
    LOGGER.info("Querying %s", url)
    requester = session or requests
    before = time.monotonic()
    try:
        response = requester.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        LOGGER.debug("Request failed", exc_info=True)
        raise TransportError(str(e)) from e
    latency = time.monotonic() - before
    LOGGER.debug("Got HTTP %d after %.3f seconds", response.status_code, latency)

    if response.status_code != 200:
        raise UnexpectedStatusCodeError(response.status_code)

    try:
        raw = response.json()
    except ValueError as e:
        raise MalformedResponseError(f"Unexpected solr response. Invalid JSON: {e}") from e

    return FetchResult(raw=raw, latency=latency)
