#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from refbuild.app import resolve_reference_build, select_policy
from refbuild.config import ConfigurationError, configure_logging, get_reference_settings
from refbuild.domain.model import BuildResult

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve the reference build of a build")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve the reference build of a build")
    resolve.add_argument(
        "build",
        type=str,
        help="URL (absolute or relative to JENKINS_URL) of the build to resolve for",
    )
    resolve.add_argument(
        "--target-branch",
        type=str,
        help="Branch whose latest completed build is the reference (overrides PR detection)",
    )
    resolve.add_argument(
        "--require-result",
        type=str,
        help="Worst acceptable result of the reference build (e.g. SUCCESS, UNSTABLE)",
    )
    resolve.add_argument(
        "--skip-running",
        action="store_true",
        help="Skip reference candidates that are still running",
    )
    return parser.parse_args(list(argv))


def _parse_result(value: str | None) -> BuildResult | None:
    try:
        return BuildResult.parse(value)
    except ValueError as exc:
        raise ValueError(f"Invalid build result: {value}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        settings = get_reference_settings()
        required_result = _parse_result(parsed_args.require_result) or settings.required_result
        target_branch = parsed_args.target_branch or settings.target_branch
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    if parsed_args.verbose:
        configure_logging(level=logging.DEBUG, force=True)

    try:
        outcome = resolve_reference_build(
            parsed_args.build,
            policy=select_policy(
                required_result=required_result,
                skip_running=parsed_args.skip_running,
            ),
            target_branch=target_branch,
        )
    except Exception:
        log.exception("Fatal error while resolving the reference build")
        sys.exit(1)

    for message in outcome.log.info_messages:
        print(message)
    for message in outcome.log.error_report():
        print(message, file=sys.stderr)
    print(outcome.reference.reference_build_id)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
