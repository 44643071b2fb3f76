#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.
"""User-defined exceptions raised while talking to Solr."""

__all__ = [
    "MalformedResponseError",
    "MKFetcherError",
    "MKSolrCheckError",
    "TransportError",
    "UnexpectedStatusCodeError",
]


# never used directly in the code. Just some wrapper to make all of our
# exceptions handleable with one call
class MKSolrCheckError(Exception):
    pass


class MKFetcherError(MKSolrCheckError):
    """An exception common to the fetcher."""


class TransportError(MKFetcherError):
    """The HTTP request did not complete (connection refused, DNS, timeout...)"""


class UnexpectedStatusCodeError(MKFetcherError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected status code. HTTP {status_code} returned.")
        self.status_code = status_code


# Raised for bodies that are no JSON at all as well as for JSON documents
# that do not look like a core admin status response.
class MalformedResponseError(MKSolrCheckError):
    pass
