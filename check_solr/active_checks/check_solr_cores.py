#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.
"""check_solr - Monitor the cores of a Solr server"""

import argparse
import logging
import re
import sys
from collections.abc import Sequence

import requests
from pydantic import BaseModel

import check_solr
from check_solr.checkengine.checkresults import ActiveCheckResult, State
from check_solr.solr.cores import check_cores, Thresholds
from check_solr.solr.fetcher import build_url, DEFAULT_CORES_PATH, fetch_core_status
from check_solr.solr.models import parse_status_document
from check_solr.utils import debug
from check_solr.utils.exceptions import MalformedResponseError, MKFetcherError
from check_solr.utils.log import setup_logging
from check_solr.utils.timeunits import TimeUnit

LOGGER = logging.getLogger(__name__)


class Args(BaseModel):
    host: str
    port: int | None
    url: str
    regex: re.Pattern[str] | None
    time: TimeUnit
    age_warning: float | None
    age_critical: float | None
    docs_warning: int | None
    docs_critical: int | None
    timeout: float | None
    verbose: int
    debug: bool

    @property
    def thresholds(self) -> Thresholds:
        return Thresholds(
            docs_warning=self.docs_warning,
            docs_critical=self.docs_critical,
            age_warning=self.age_warning,
            age_critical=self.age_critical,
        )


def _regex(raw: str) -> re.Pattern[str]:
    try:
        return re.compile(raw, re.IGNORECASE)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regular expression {raw!r}: {e}") from e


def _time_unit(raw: str) -> TimeUnit:
    try:
        return TimeUnit.parse(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="check_solr",
        description="Nagios compatible checks for Apache Solr",
    )
    parser.add_argument("--version", action="version", version=check_solr.__version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Verbose mode, logs to stderr (for even more output use -vvv)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Debug mode: let Python exceptions come through.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    cores = subparsers.add_parser(
        "cores",
        help="checks the status and age of solr cores on a host",
        description="Checks the status and age of solr cores on a host.",
    )
    cores.add_argument("host", metavar="HOST", help="The host to check")
    cores.add_argument("-p", "--port", type=int, default=None, help="The port of the Solr web app.")
    cores.add_argument(
        "-u",
        "--url",
        default=DEFAULT_CORES_PATH,
        help="The url of the Solr web app end point to report on cores status in JSON. "
        f"Defaults to {DEFAULT_CORES_PATH}.",
    )
    cores.add_argument(
        "-r",
        "--regex",
        type=_regex,
        default=None,
        help="The case insensitive regex to use to match the core names. "
        "Defaults to no filter.",
    )
    cores.add_argument(
        "-t",
        "--time",
        type=_time_unit,
        default=TimeUnit.MINUTES,
        metavar="UNIT",
        help="The time measure for the age thresholds and age metrics. Can be "
        f"{', '.join(u.value for u in TimeUnit)}. Defaults to minutes.",
    )
    cores.add_argument(
        "--age-warning",
        type=float,
        default=None,
        help="The maximum age at which the cores becomes a WARNING.",
    )
    cores.add_argument(
        "--age-critical",
        type=float,
        default=None,
        help="The maximum age at which the cores becomes a CRITICAL.",
    )
    cores.add_argument(
        "--docs-warning",
        type=int,
        default=None,
        help="The minimum number of docs at which the cores becomes a WARNING.",
    )
    cores.add_argument(
        "--docs-critical",
        type=int,
        default=None,
        help="The minimum number of docs at which the cores becomes a CRITICAL.",
    )
    cores.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for Solr. Defaults to waiting forever.",
    )
    return parser


def parse_arguments(argv: Sequence[str]) -> Args | None:
    parser = _create_argument_parser()
    namespace = parser.parse_args(argv)
    if namespace.command is None:
        parser.print_help(sys.stderr)
        return None
    return Args.model_validate(vars(namespace))


def output_check_result(result: ActiveCheckResult) -> None:
    sys.stdout.write("%s\n" % result.as_text())


def check_solr_cores(args: Args, session: requests.Session | None = None) -> ActiveCheckResult:
    url = build_url(args.host, args.port, args.url)
    try:
        fetched = fetch_core_status(url, timeout=args.timeout, session=session)
        document = parse_status_document(fetched.raw)
    except (MKFetcherError, MalformedResponseError) as e:
        LOGGER.info("Fetching core status failed: %s", e)
        return ActiveCheckResult(state=State.CRITICAL, summary=str(e))

    return check_cores(
        document,
        args.thresholds,
        name_filter=args.regex,
        time_unit=args.time,
        latency=fetched.latency,
    )


def main(argv: Sequence[str] | None = None, session: requests.Session | None = None) -> int:
    args = parse_arguments(sys.argv[1:] if argv is None else argv)
    if args is None:
        return int(State.UNKNOWN)

    setup_logging(args.verbose)
    if args.debug:
        debug.enable()
    LOGGER.debug("parsed arguments: %s", args)

    try:
        result = check_solr_cores(args, session)
    except Exception as e:
        if debug.enabled():
            raise
        LOGGER.exception("Unhandled exception")
        result = ActiveCheckResult(state=State.UNKNOWN, summary=f"Unhandled exception: {e}")

    output_check_result(result)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
