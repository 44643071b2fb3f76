#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.
"""Response of the Solr core admin STATUS action

Only the fields the check is interested in are modelled, everything else
Solr reports (uptime, instanceDir, index size, ...) is ignored. Broken data
of a single core (a null index, a non numeric document count, ...) is read as
missing, only the overall structure has to be valid.

    {
      "responseHeader": {"status": 0, "QTime": 3},
      "status": {
        "core1": {
          "name": "core1",
          "index": {"numDocs": 1234, "lastModified": "2023-01-01T00:00:00.000Z"}
        }
      }
    }
"""

import logging
from collections.abc import Mapping
from typing import Annotated, Any

import pydantic

from check_solr.utils.exceptions import MalformedResponseError

LOGGER = logging.getLogger(__name__)


def _or_missing(value: Any, handler: pydantic.ValidatorFunctionWrapHandler) -> Any:
    """A broken field of one core must not hide the other cores

    Whatever cannot be validated is treated like an absent field, the
    evaluation reports it for this core only."""
    try:
        return handler(value)
    except pydantic.ValidationError as e:
        LOGGER.warning("Ignoring invalid core field %r: %s", value, e.errors()[0]["msg"])
        return None


class ResponseHeader(pydantic.BaseModel, frozen=True):
    status: int | None = None


class IndexStatus(pydantic.BaseModel, frozen=True):
    numDocs: Annotated[pydantic.NonNegativeInt | None, pydantic.WrapValidator(_or_missing)] = None
    lastModified: Annotated[str | None, pydantic.WrapValidator(_or_missing)] = None


def _index_or_empty(value: Any, handler: pydantic.ValidatorFunctionWrapHandler) -> IndexStatus:
    return _or_missing(value, handler) or IndexStatus()


class CoreStatus(pydantic.BaseModel, frozen=True):
    name: Annotated[str | None, pydantic.WrapValidator(_or_missing)] = None
    index: Annotated[IndexStatus, pydantic.WrapValidator(_index_or_empty)] = IndexStatus()

    def display_name(self, key: str) -> str:
        return self.name or key


def _core_or_empty(value: Any, handler: pydantic.ValidatorFunctionWrapHandler) -> CoreStatus:
    return _or_missing(value, handler) or CoreStatus()


_LenientCoreStatus = Annotated[CoreStatus, pydantic.WrapValidator(_core_or_empty)]


class StatusDocument(pydantic.BaseModel, frozen=True):
    responseHeader: ResponseHeader | None = None
    status: Mapping[str, _LenientCoreStatus] | None = None

    @property
    def response_status(self) -> int | None:
        return None if self.responseHeader is None else self.responseHeader.status


def parse_status_document(raw: object) -> StatusDocument:
    try:
        return StatusDocument.model_validate(raw)
    except pydantic.ValidationError as e:
        raise MalformedResponseError(
            f"Unexpected solr response. Invalid core status: {e.error_count()} validation error(s)"
        ) from e
