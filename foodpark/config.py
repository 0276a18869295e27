from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from foodpark.extract.strategy import DEFAULT_TEMPLATE, ExtractionStrategy, get_template
from foodpark.schedule import DEFAULT_HEADER_FORMAT, next_weekday, parse_target_date

ENV_PREFIX = "FP_"


def _env_name(name: str) -> str:
    return f"{ENV_PREFIX}{name}"


def _getenv_str(name: str, default: str) -> str:
    return os.getenv(_env_name(name), default).strip()


def _getenv_optional(name: str) -> str | None:
    raw = os.getenv(_env_name(name))
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def _getenv_float(name: str, default: float) -> float:
    v = _getenv_str(name, str(default))
    try:
        return float(v)
    except ValueError as err:
        raise ValueError(
            f"Environment variable {_env_name(name)} must be a number; got {v!r}"
        ) from err


# Load .env from project root if present
ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env", override=False)

DEFAULT_URL = "https://www.foodparkcam.com/whos-trading"
DEFAULT_LOCATION_FILTER = "Cambridge Science Park"
DEFAULT_USER_AGENT = "foodpark-menus/0.1 (+https://www.foodparkcam.com)"
DEFAULT_SLACK_USERNAME = "foodPark"
DEFAULT_SLACK_ICON = "https://foodparkcam.com/favicon.ico"


@dataclass(frozen=True)
class FetchConfig:
    url: str
    user_agent: str
    timeout_s: float
    connect_timeout_s: float


@dataclass(frozen=True)
class PageConfig:
    """
    What to look for on the page.

    `strategy` is the named template with any FP_*_SELECTOR / FP_NAME_RULE
    overrides applied.
    """

    strategy: ExtractionStrategy
    location_filter: str
    target_date: date
    date_format: str


@dataclass(frozen=True)
class SlackConfig:
    username: str
    icon_url: str
    channel: str | None
    webhook_url: str | None


@dataclass(frozen=True)
class AppConfig:
    fetch: FetchConfig
    page: PageConfig
    log_level: str


def load_strategy() -> ExtractionStrategy:
    template = get_template(_getenv_str("TEMPLATE", DEFAULT_TEMPLATE))
    return template.with_overrides(
        date_selector=_getenv_optional("DATE_SELECTOR"),
        container_selector=_getenv_optional("OUTER_CONTAINER_SELECTOR"),
        location_selector=_getenv_optional("LOCATION_SELECTOR"),
        anchor_selector=_getenv_optional("ANCHOR_SELECTOR"),
        name_rule=_getenv_optional("NAME_RULE"),
    )


def load_settings(today: date | None = None) -> AppConfig:
    """
    Build the run configuration from FP_* environment variables.

    FP_TARGET_DATE defaults to the coming Thursday (today, on a Thursday).
    """
    raw_target = _getenv_optional("TARGET_DATE")
    if raw_target is None:
        target_date = next_weekday(today or date.today())
    else:
        target_date = parse_target_date(raw_target)

    fetch = FetchConfig(
        url=_getenv_str("URL", DEFAULT_URL),
        user_agent=_getenv_str("USER_AGENT", DEFAULT_USER_AGENT),
        timeout_s=_getenv_float("FETCH_TIMEOUT_S", 10.0),
        connect_timeout_s=_getenv_float("FETCH_CONNECT_TIMEOUT_S", 5.0),
    )
    page = PageConfig(
        strategy=load_strategy(),
        location_filter=_getenv_str("LOCATION_FILTER_VALUE", DEFAULT_LOCATION_FILTER),
        target_date=target_date,
        date_format=os.getenv(_env_name("DATE_FORMAT")) or DEFAULT_HEADER_FORMAT,
    )
    return AppConfig(
        fetch=fetch,
        page=page,
        log_level=_getenv_str("LOG_LEVEL", "INFO").upper(),
    )


def load_slack_config(*, require_delivery: bool = True) -> SlackConfig:
    """
    Load Slack message settings.

    With require_delivery=True both FP_SLACK_CHANNEL and FP_SLACK_WEBHOOK
    must be set.
    """
    channel = _getenv_optional("SLACK_CHANNEL")
    webhook_url = _getenv_optional("SLACK_WEBHOOK")

    if require_delivery and (channel is None or webhook_url is None):
        raise ValueError(
            "FP_SLACK_CHANNEL or FP_SLACK_WEBHOOK missing! "
            f"FP_SLACK_CHANNEL={channel is not None}; FP_SLACK_WEBHOOK={webhook_url is not None}"
        )

    return SlackConfig(
        username=_getenv_str("SLACK_USERNAME", DEFAULT_SLACK_USERNAME),
        icon_url=_getenv_str("SLACK_ICON", DEFAULT_SLACK_ICON),
        channel=channel,
        webhook_url=webhook_url,
    )


__all__ = [
    "ENV_PREFIX",
    "FetchConfig",
    "PageConfig",
    "SlackConfig",
    "AppConfig",
    "load_strategy",
    "load_settings",
    "load_slack_config",
    "DEFAULT_URL",
    "DEFAULT_LOCATION_FILTER",
    "DEFAULT_USER_AGENT",
    "DEFAULT_SLACK_USERNAME",
    "DEFAULT_SLACK_ICON",
]
