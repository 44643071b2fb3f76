#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.

from __future__ import annotations

import dataclasses
import enum
import re
from collections.abc import Sequence

from check_solr.utils.render import drop_dotzero

__all__ = ["ActiveCheckResult", "MessageCollector", "Metric", "State"]


class State(enum.IntEnum):
    """Monitoring states, ordered by escalation

    >>> State.worst(State.OK, State.CRITICAL, State.WARNING)
    <State.CRITICAL: 2>
    >>> State.worst()
    <State.OK: 0>
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @classmethod
    def worst(cls, *states: State) -> State:
        return max(states, default=cls.OK)


_QUOTE_LABEL = re.compile(r"[\s='|]")


@dataclasses.dataclass(frozen=True)
class Metric:
    """A single perf data sample

    >>> Metric("core1.numDocs", 5, boundaries=(0, None)).as_perf_data()
    'core1.numDocs=5;;;0'
    >>> Metric("my core.age", 1.5, unit="s", boundaries=(0, None)).as_perf_data()
    "'my core.age'=1.5s;;;0"
    """

    name: str
    value: float
    unit: str = ""
    boundaries: tuple[float | None, float | None] = (None, None)

    def as_perf_data(self) -> str:
        # label=value[uom];[warn];[crit];[min];[max], levels are not reported
        fields = [
            f"{self._label()}={_render_value(self.value)}{self.unit}",
            "",
            "",
            *("" if v is None else _render_value(v) for v in self.boundaries),
        ]
        while not fields[-1]:
            fields.pop()
        return ";".join(fields)

    def _label(self) -> str:
        if _QUOTE_LABEL.search(self.name):
            return "'%s'" % self.name.replace("'", "''")
        return self.name


def _render_value(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return drop_dotzero(value, 6)


@dataclasses.dataclass(frozen=True, kw_only=True)
class ActiveCheckResult:
    state: State = State.OK
    summary: str = ""
    metrics: Sequence[Metric] = ()

    def as_text(self) -> str:
        safe_summary = f"{self.state.name} - {self._replace_pipe(self.summary)}"
        if not self.metrics:
            return safe_summary
        return " | ".join((safe_summary, " ".join(m.as_perf_data() for m in self.metrics)))

    @property
    def exit_code(self) -> int:
        return int(self.state)

    @staticmethod
    def _replace_pipe(txt: str) -> str:
        """The vertical bar indicates end of service output and start of metrics.
        Replace the ones in the output by a Uniocode "Light vertical bar"
        """
        return txt.replace("|", "❘")


class MessageCollector:
    """Collects messages of different states and the metrics of one check run

    The resulting state is the worst state seen, a state once raised is never
    lowered again. Only the messages of that state (or worse) make it into
    the summary.
    """

    def __init__(self) -> None:
        self._messages: list[tuple[State, str]] = []
        self._metrics: list[Metric] = []

    @property
    def messages(self) -> Sequence[tuple[State, str]]:
        return tuple(self._messages)

    @property
    def metrics(self) -> Sequence[Metric]:
        return tuple(self._metrics)

    @property
    def state(self) -> State:
        return State.worst(*(state for state, _text in self._messages))

    def add_message(self, state: State, text: str) -> None:
        self._messages.append((state, text))

    def add_metric(self, metric: Metric) -> None:
        self._metrics.append(metric)

    def check_messages(self, separator: str = " ") -> tuple[State, str]:
        state = self.state
        return state, separator.join(text for s, text in self._messages if s >= state)

    def result(self) -> ActiveCheckResult:
        state, summary = self.check_messages()
        return ActiveCheckResult(state=state, summary=summary, metrics=self.metrics)
