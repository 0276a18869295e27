# foodpark/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from foodpark.config import AppConfig, load_settings, load_slack_config
from foodpark.exceptions import DeliveryError, ExtractionError, FetchError
from foodpark.extract import TEMPLATES, ExtractionResult, parse_html, run_extraction
from foodpark.fetch import fetch_page
from foodpark.notify import build_message, post_webhook
from foodpark.schedule import date_token, format_date_header, parse_target_date

log = logging.getLogger("foodpark")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_EXTRACTION = 2


def _setup_logging(level: str) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(levelname)s %(message)s",
            stream=sys.stderr,
        )


def _section(title: str) -> None:
    print(f"=== {title} ===")


def _load_document(cfg: AppConfig, html_path: str | None):
    if html_path:
        log.info("Reading page from %s", html_path)
        return parse_html(Path(html_path).read_text(encoding="utf-8"))
    page = fetch_page(
        cfg.fetch.url,
        user_agent=cfg.fetch.user_agent,
        timeout_s=cfg.fetch.timeout_s,
        connect_timeout_s=cfg.fetch.connect_timeout_s,
    )
    return parse_html(page.text)


def _extract(cfg: AppConfig, args: argparse.Namespace) -> ExtractionResult:
    target = parse_target_date(args.date) if args.date else cfg.page.target_date
    doc = _load_document(cfg, args.html)
    return run_extraction(
        doc,
        target_header=format_date_header(target, cfg.page.date_format),
        date_token=date_token(target),
        location_filter=cfg.page.location_filter,
        strategy=cfg.page.strategy,
    )


def _print_result(result: ExtractionResult) -> None:
    _section(f"{result.target_date} at {result.location}")

    if not result.records:
        print("  (no vendors listed)")
        print()
        return

    header = f"{'vendor':30} order"
    print("  " + header)
    print("  " + "-" * len(header))
    for record in result.records:
        print(f"  {record.name:30} {record.order_url or '-'}")
    print()

    if result.any_walk_up_only:
        print("  * not currently taking pre-orders")
        print()


def _cmd_extract(args: argparse.Namespace) -> int:
    cfg = load_settings()
    _setup_logging(args.log_level or cfg.log_level)

    result = _extract(cfg, args)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
    else:
        _print_result(result)
    return EXIT_OK


def _cmd_run(args: argparse.Namespace) -> int:
    cfg = load_settings()
    _setup_logging(args.log_level or cfg.log_level)

    # Fail before fetching anything when delivery is impossible.
    slack = load_slack_config(require_delivery=not args.dry_run)

    result = _extract(cfg, args)
    message: dict[str, Any] = build_message(result, slack)
    print(json.dumps(message))

    if args.dry_run:
        log.info("Dry run; not posting to Slack")
        return EXIT_OK

    post_webhook(slack.webhook_url, message)
    return EXIT_OK


def _cmd_templates(args: argparse.Namespace) -> int:
    _section("Templates")
    for name, strategy in sorted(TEMPLATES.items()):
        print(f"  {name:20} container={strategy.container_selector}")
        print(f"  {'':20} anchors={strategy.anchor_selector} names={strategy.name_rule}")
    print()
    return EXIT_OK


def _add_extract_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--date",
        default=None,
        help="Trading day as YYYY-MM-DD (default: FP_TARGET_DATE or the coming Thursday).",
    )
    parser.add_argument(
        "--html",
        default=None,
        metavar="FILE",
        help="Read the page from a saved HTML file instead of fetching FP_URL.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: FP_LOG_LEVEL or INFO).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foodpark",
        description="Post the foodPark vendor list for a trading day to Slack.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run",
        help="Fetch the page, extract vendors and post the Slack message.",
    )
    _add_extract_args(run_parser)
    run_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the Slack payload without posting it.",
    )
    run_parser.set_defaults(func=_cmd_run)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract and print the vendor list only.",
    )
    _add_extract_args(extract_parser)
    extract_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of a human-readable table.",
    )
    extract_parser.set_defaults(func=_cmd_extract)

    templates_parser = subparsers.add_parser(
        "templates",
        help="List known page templates.",
    )
    templates_parser.set_defaults(func=_cmd_templates)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    func = getattr(args, "func", None)
    if func is None:
        parser.error("no command specified")
        return EXIT_FAILURE

    try:
        return int(func(args))
    except ExtractionError as exc:
        log.error("Failed to find food park options from page data: %s", exc)
        return EXIT_EXTRACTION
    except (FetchError, DeliveryError, ValueError, OSError) as exc:
        log.error("%s", exc)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
