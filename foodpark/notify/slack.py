# foodpark/notify/slack.py
"""
Slack webhook message for an extraction result.

Layout:
  - header section: "*foodPark Menus for <date> at <location>*"
  - one actions block with a button per vendor, in page order; vendors taking
    pre-orders get a primary button linking to their order page
  - a footnote explaining the walk-up marker, only when some vendor has no link
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from foodpark.config import SlackConfig
from foodpark.exceptions import DeliveryError
from foodpark.extract.pipeline import ExtractionResult

log = logging.getLogger(__name__)

WALK_UP_FOOTNOTE = "* _denotes a truck not currently taking pre-orders._"

WEBHOOK_TIMEOUT_S = 10.0


def _text(text: str, kind: str = "mrkdwn") -> dict[str, Any]:
    return {"type": kind, "text": text}


def _section(text: str) -> dict[str, Any]:
    return {"type": "section", "text": _text(text)}


def _button(name: str, url: str | None) -> dict[str, Any]:
    button: dict[str, Any] = {"type": "button", "text": _text(name, kind="plain_text")}
    if url is not None:
        button["url"] = url
        button["style"] = "primary"
    return button


def build_blocks(result: ExtractionResult) -> list[dict[str, Any]]:
    blocks = [
        _section(f"*foodPark Menus for {result.target_date} at {result.location}*"),
        {
            "type": "actions",
            "elements": [_button(r.name, r.order_url) for r in result.records],
        },
    ]
    if result.any_walk_up_only:
        blocks.append(_section(WALK_UP_FOOTNOTE))
    return blocks


def build_message(result: ExtractionResult, slack: SlackConfig) -> dict[str, Any]:
    message: dict[str, Any] = {
        "username": slack.username,
        "icon_url": slack.icon_url,
        "blocks": build_blocks(result),
    }
    if slack.channel:
        message["channel"] = slack.channel
    return message


def post_webhook(
    webhook_url: str,
    message: dict[str, Any],
    *,
    client: httpx.Client | None = None,
) -> None:
    """POST the message as JSON; raise DeliveryError on any failure."""
    own_client = client is None
    http = client or httpx.Client(timeout=WEBHOOK_TIMEOUT_S)
    try:
        resp = http.post(
            webhook_url,
            content=json.dumps(message),
            headers={"Content-Type": "application/json"},
        )
    except httpx.RequestError as exc:
        raise DeliveryError(f"Failed to send Slack message: {exc}") from exc
    finally:
        if own_client:
            http.close()

    if resp.status_code != 200:
        raise DeliveryError(
            f"Failed to send Slack message: HTTP {resp.status_code} {resp.text.strip()}"
        )
    log.info("Slack message delivered (%d blocks)", len(message.get("blocks", [])))


__all__ = [
    "WALK_UP_FOOTNOTE",
    "build_blocks",
    "build_message",
    "post_webhook",
]
