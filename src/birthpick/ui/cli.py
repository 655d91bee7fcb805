# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from birthpick.adapters.host import HostPayload
from birthpick.app import list_month_options, render_picker_from_payload
from birthpick.config import ConfigurationError, configure_logging, get_picker_config
from birthpick.domain.dates import parse_iso_date

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute date picker options")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    view = subparsers.add_parser("view", help="Build the picker view for a selection")
    view.add_argument("--payload", type=Path, help="JSON file holding a host payload")
    view.add_argument("--today", type=str, help="Reference date (YYYY-MM-DD, defaults to today)")
    view.add_argument("--min-year", type=float, help="Earliest selectable year")
    view.add_argument("--locale", type=str, help="Locale identifier for month names, e.g. en-AU")
    view.add_argument(
        "--month-names",
        type=str,
        help="Comma separated month names overriding the locale's names",
    )
    view.add_argument("--value", type=str, help="Previously stored YYYY-MM-DD value")
    view.add_argument("--year", type=int, help="Selected year")
    view.add_argument("--month", type=int, help="Selected month (1-12)")
    view.add_argument("--day", type=int, help="Selected day")
    view.add_argument("--year-query", type=str, help="Typeahead text for the year field")
    view.add_argument("--month-query", type=str, help="Typeahead text for the month field")
    view.add_argument("--day-query", type=str, help="Typeahead text for the day field")

    months = subparsers.add_parser("months", help="List month options for a locale")
    months.add_argument("--locale", type=str, help="Locale identifier, e.g. de-DE")

    parse = subparsers.add_parser("parse", help="Parse a stored YYYY-MM-DD value")
    parse.add_argument("value", type=str)

    return parser.parse_args(list(argv))


def _load_payload_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"Cannot read payload file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in payload file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Payload file {path} must contain a JSON object")
    return data


def _build_payload(args: argparse.Namespace) -> HostPayload:
    raw: dict[str, Any] = _load_payload_file(args.payload) if args.payload else {}
    config = get_picker_config()

    overrides: dict[str, Any] = {
        "today": args.today,
        "minYear": args.min_year,
        "locale": args.locale,
        "value": args.value,
    }
    if args.month_names is not None:
        overrides["monthNames"] = [name.strip() for name in args.month_names.split(",")]
    raw.update({key: value for key, value in overrides.items() if value is not None})
    raw.setdefault("minYear", config.min_year)
    raw.setdefault("locale", config.locale)

    if any(value is not None for value in (args.year, args.month, args.day)):
        raw["selection"] = {"year": args.year, "month": args.month, "day": args.day}

    queries = {
        "year": args.year_query,
        "month": args.month_query,
        "day": args.day_query,
    }
    if any(value is not None for value in queries.values()):
        merged = dict(raw.get("queries") or {})
        merged.update({key: value for key, value in queries.items() if value is not None})
        raw["queries"] = merged

    return HostPayload.model_validate(raw)


def _emit(data: object) -> None:
    print(json.dumps(data, ensure_ascii=False))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    payload: HostPayload | None = None
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
        if parsed_args.command == "view":
            payload = _build_payload(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(1)

    try:
        if parsed_args.command == "view" and payload is not None:
            view = render_picker_from_payload(payload)
            _emit(asdict(view))
        elif parsed_args.command == "months":
            locale = parsed_args.locale or get_picker_config().locale
            _emit([asdict(option) for option in list_month_options(locale)])
        elif parsed_args.command == "parse":
            parts = parse_iso_date(parsed_args.value)
            _emit(asdict(parts) if parts is not None else None)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while computing picker options")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
