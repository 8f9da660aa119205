# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""cmdsummary CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from ..config import OUTPUT_DIR_ENV, SummarySettings, load_http_settings, load_summary_settings
from ..errors import ConfigurationError, RemoteError, SummaryError
from ..log import setup_logging
from ..models import CombinedReport
from ..runtime import CommandSummary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Accumulate command results and render a combined markdown summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    record = subparsers.add_parser("record", help="Append result fragment files to the cumulative store")
    record.add_argument("fragments", nargs="+", type=Path, help="Fragment JSON files ({'results': [...]})")

    finalize = subparsers.add_parser("finalize", help="Generate the combined markdown summary")
    finalize.add_argument("--url", help="Platform URL used to build links (default: $JF_URL)")
    finalize.add_argument("--access-token", help="Platform access token (default: $JF_ACCESS_TOKEN)")
    finalize.add_argument("--user", help="Platform user for basic authentication")
    finalize.add_argument("--password", help="Platform password for basic authentication")
    finalize.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed servers)",
    )
    finalize.add_argument("--json", action="store_true", help="Print the outcome as JSON")

    subparsers.add_parser("reset", help="Delete the cumulative result store")
    return parser


def _apply_overrides(settings: SummarySettings, args: argparse.Namespace) -> SummarySettings:
    for attr in ("url", "access_token", "user", "password"):
        value = getattr(args, attr, None)
        if value:
            setattr(settings, "platform_url" if attr == "url" else attr, value)
    return settings


def _print_json(data: dict[str, Any]) -> None:
    json.dump(data, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _report_payload(report: CombinedReport | None) -> dict[str, Any]:
    if report is None:
        return {"written": False, "path": None, "sections": [], "failed_sections": []}
    return {
        "written": True,
        "path": str(report.path),
        "sections": report.sections,
        "failed_sections": report.failed_sections,
    }


def _pretty_print(report: CombinedReport | None) -> None:
    if report is None:
        print("[cmdsummary] No summary content generated")
        return
    print(f"[cmdsummary] Summary written to {report.path}")
    print(f"Sections: {', '.join(report.sections)}")
    if report.failed_sections:
        print(f"Failed sections: {', '.join(report.failed_sections)}")


def _run_record(args: argparse.Namespace, settings: SummarySettings) -> int:
    with CommandSummary(settings=settings) as summary:
        if not summary.should_run():
            logger.info("Command summary output directory is not set; not recording results")
            return 0
        added = summary.record(args.fragments)
    print(f"[cmdsummary] Recorded {added} result(s)")
    return 0


def _run_finalize(args: argparse.Namespace, settings: SummarySettings) -> int:
    http_settings = load_http_settings()
    if args.ignore_ssl_errors:
        http_settings.verify_ssl = False

    with CommandSummary(settings=settings, http_settings=http_settings) as summary:
        if not summary.should_run():
            raise ConfigurationError(
                "unable to generate the command summary because the output directory is not specified. "
                f"Set '{OUTPUT_DIR_ENV}' before running your commands to enable summary generation"
            )
        report = summary.finalize()

    if args.json:
        _print_json(_report_payload(report))
    else:
        _pretty_print(report)
    return 0


def _run_reset(settings: SummarySettings) -> int:
    with CommandSummary(settings=settings) as summary:
        if not summary.should_run():
            raise ConfigurationError("cannot reset the result store: the output directory is not specified")
        removed = summary.reset()
    print("[cmdsummary] Result store removed" if removed else "[cmdsummary] No result store to remove")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    settings = _apply_overrides(load_summary_settings(), args)
    try:
        if args.command == "record":
            return _run_record(args, settings)
        if args.command == "finalize":
            return _run_finalize(args, settings)
        return _run_reset(settings)
    except RemoteError as exc:
        print(f"[cmdsummary] failed to get server URL or major version: {exc}. Summary links would be invalid", file=sys.stderr)
        return 1
    except SummaryError as exc:
        print(f"[cmdsummary] {args.command} failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
