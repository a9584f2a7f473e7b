from __future__ import annotations

"""Environment doctor for the PayPal REST client.

This script performs a few fast checks before wiring the SDK into an app:
- Validate that client credentials and the deployment mode are configured.
- Show the REST endpoint the SDK resolves from the environment.
- Optionally check that the endpoint is reachable.

Usage:
    python script/doctor.py --check-network
"""

import argparse
import json
import sys
from typing import Sequence

from loguru import logger
from rich.console import Console
from rich.table import Table
from rich.text import Text

from paypal_rest.config import get_settings
from paypal_rest.preflight import (
    CheckResult,
    Status,
    check_connectivity,
    check_credentials,
    check_endpoint,
    check_mode,
)

console = Console()
log = logger.bind(module="script.doctor")


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or "INFO").upper(),
        backtrace=False,
        diagnose=False,
    )


def _status_text(status: Status) -> Text:
    styles = {"ok": "bold green", "warn": "bold yellow", "fail": "bold red"}
    return Text(status.upper(), style=styles.get(status, "bold"))


def _render_table(results: Sequence[CheckResult]) -> None:
    table = Table(title="PayPal REST doctor", show_lines=False)
    table.add_column("Check", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Details")
    for item in results:
        table.add_row(item.name, _status_text(item.status), item.details)
    console.print(table)


def _summarize(results: Sequence[CheckResult]) -> tuple[int, int, int]:
    ok = sum(1 for r in results if r.status == "ok")
    warn = sum(1 for r in results if r.status == "warn")
    fail = sum(1 for r in results if r.status == "fail")
    return ok, warn, fail


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run configuration checks for the PayPal REST client.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--check-network",
        action="store_true",
        help="Also send a HEAD request to the resolved endpoint.",
    )
    parser.add_argument(
        "--timeout-seconds",
        type=float,
        default=2.0,
        help="Network timeout used for the connectivity check.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as failures (non-zero exit code).",
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON (useful for CI).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(list(argv) if argv is not None else None)

    try:
        settings = get_settings()
    except Exception as exc:  # pragma: no cover - defensive
        console.print(
            "[bold red]Failed to load settings[/] "
            f"reason={exc}. Ensure your PAYPAL_* environment variables are valid.",
        )
        log.exception("Settings load failed")
        return 1

    _configure_logging(settings.log_level)

    results: list[CheckResult] = [
        check_credentials(settings),
        check_mode(settings),
        check_endpoint(settings),
    ]
    if args.check_network:
        timeout = float(max(0.2, args.timeout_seconds))
        results.append(check_connectivity(settings, timeout_seconds=timeout))

    if args.json_output:
        payload = [{"name": r.name, "status": r.status, "details": r.details} for r in results]
        console.print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _render_table(results)

    ok, warn, fail = _summarize(results)
    summary = f"ok={ok} warn={warn} fail={fail}"
    if fail:
        console.print(f"[bold red]Doctor failed[/] {summary}")
        return 1
    if warn and args.strict:
        console.print(f"[bold yellow]Doctor warnings (strict)[/] {summary}")
        return 2
    console.print(f"[bold green]Doctor passed[/] {summary}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
