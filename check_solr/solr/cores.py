#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.
"""Evaluate document count and index age of Solr cores

Every core is checked twice, independently of each other:

 * the number of documents must be above the configured minimums
 * the time since the last index modification must be below the
   configured maximums

All findings are collected and aggregated into one check result, the worst
state wins.
"""

from __future__ import annotations

import dataclasses
import datetime
import logging
import re

import dateutil.parser

from check_solr.checkengine.checkresults import ActiveCheckResult, MessageCollector, Metric, State
from check_solr.utils.render import approx_age, fmt_int, fmt_latency
from check_solr.utils.timeunits import TimeUnit

from .models import CoreStatus, StatusDocument

LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Thresholds:
    """Levels for all cores, None means "not configured"

    Document counts are lower levels (a core with that many docs or less is
    affected), ages are upper levels in the configured time unit (a core that
    old or older is affected).
    """

    docs_warning: int | None = None
    docs_critical: int | None = None
    age_warning: float | None = None
    age_critical: float | None = None


@dataclasses.dataclass(frozen=True)
class _OldestCore:
    age: int
    name: str


def check_cores(
    document: StatusDocument,
    thresholds: Thresholds,
    *,
    name_filter: re.Pattern[str] | None = None,
    time_unit: TimeUnit = TimeUnit.MINUTES,
    latency: float = 0.0,
    now: datetime.datetime | None = None,
) -> ActiveCheckResult:
    now = now or datetime.datetime.now(tz=datetime.UTC)
    collector = MessageCollector()

    if document.response_status != 0:
        collector.add_message(
            State.CRITICAL,
            f"Unexpected solr status. Solr status {document.response_status} returned.",
        )

    if document.status is None:
        collector.add_message(State.CRITICAL, "Unexpected solr response. No status returned.")
        return collector.result()

    age_warning = _to_seconds(thresholds.age_warning, time_unit)
    age_critical = _to_seconds(thresholds.age_critical, time_unit)

    oldest: _OldestCore | None = None
    min_docs: int | None = None

    for key, core in document.status.items():
        name = core.display_name(key)
        if name_filter is not None and not name_filter.search(name):
            LOGGER.debug("Skipping core %s, does not match %r", name, name_filter.pattern)
            continue

        num_docs = _check_num_docs(collector, name, core, thresholds)
        if num_docs is not None:
            min_docs = num_docs if min_docs is None else min(min_docs, num_docs)

        age = _check_age(
            collector,
            name,
            core,
            now=now,
            time_unit=time_unit,
            age_warning=age_warning,
            age_critical=age_critical,
        )
        if age is not None and (oldest is None or age >= oldest.age):
            oldest = _OldestCore(age, name)

    if oldest is None:
        collector.add_message(State.CRITICAL, "No cores found.")
        return collector.result()

    LOGGER.info("Oldest core is %s (%d seconds)", oldest.name, oldest.age)
    collector.add_message(
        State.OK,
        f"Oldest core is {approx_age(oldest.age)} old. "
        f"Smallest core has {'unknown' if min_docs is None else fmt_int(min_docs)} docs. "
        f"Request completed in {fmt_latency(latency)} seconds.",
    )
    return collector.result()


def _check_num_docs(
    collector: MessageCollector,
    name: str,
    core: CoreStatus,
    thresholds: Thresholds,
) -> int | None:
    num_docs = core.index.numDocs
    if num_docs is None:
        collector.add_message(
            State.CRITICAL,
            f"Unexpected solr response. Document count was not found. Core: {name}",
        )
        return None

    if thresholds.docs_critical is not None and num_docs <= thresholds.docs_critical:
        collector.add_message(State.CRITICAL, f"Solr core {name} has {fmt_int(num_docs)} docs.")
    elif thresholds.docs_warning is not None and num_docs <= thresholds.docs_warning:
        collector.add_message(State.WARNING, f"Solr core {name} has {fmt_int(num_docs)} docs.")

    collector.add_metric(Metric(f"{name}.numDocs", num_docs, boundaries=(0, None)))
    return num_docs


def _check_age(
    collector: MessageCollector,
    name: str,
    core: CoreStatus,
    *,
    now: datetime.datetime,
    time_unit: TimeUnit,
    age_warning: float | None,
    age_critical: float | None,
) -> int | None:
    if not core.index.lastModified:
        collector.add_message(
            State.CRITICAL,
            f"Unexpected solr response. Last modified date was not found. Core: {name}",
        )
        return None

    try:
        last_modified = _parse_timestamp(core.index.lastModified)
    except ValueError:
        LOGGER.warning("Cannot parse lastModified %r of core %s", core.index.lastModified, name)
        collector.add_message(
            State.CRITICAL,
            f"Unexpected solr response. Last modified date is invalid. Core: {name}",
        )
        return None

    age = int((now - last_modified).total_seconds())
    if age < 0:
        LOGGER.warning("Core %s was modified %d seconds in the future", name, -age)
        age = 0

    if age_critical is not None and age >= age_critical:
        collector.add_message(State.CRITICAL, f"Solr core {name} is {approx_age(age)} old.")
    elif age_warning is not None and age >= age_warning:
        collector.add_message(State.WARNING, f"Solr core {name} is {approx_age(age)} old.")

    collector.add_metric(
        Metric(
            f"{name}.age",
            time_unit.from_seconds(age),
            unit=time_unit.perf_unit,
            boundaries=(0, None),
        )
    )
    return age


def _parse_timestamp(raw: str) -> datetime.datetime:
    timestamp = dateutil.parser.isoparse(raw)
    if timestamp.tzinfo is None:
        # Solr always reports UTC
        return timestamp.replace(tzinfo=datetime.UTC)
    return timestamp


def _to_seconds(value: float | None, time_unit: TimeUnit) -> float | None:
    return None if value is None else time_unit.to_seconds(value)
