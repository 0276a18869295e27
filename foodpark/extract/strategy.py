# foodpark/extract/strategy.py
"""
Extraction strategies: one per page-template revision.

The trading page has been rebuilt a few times. The algorithm stayed the same
but the selectors and the place the vendor name lives moved around, so each
revision is described by one ExtractionStrategy instead of its own pipeline.

Usage:
    from foodpark.extract.strategy import get_template

    strategy = get_template("squarespace-grid").with_overrides(
        anchor_selector="a.order-button",
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from bs4 import Tag

from .dom import (
    Found,
    ascend_until,
    node_text,
    previous_element_sibling,
    selector_predicate,
)

log = logging.getLogger(__name__)

WALK_UP_MARKER = "*"

# --- Name resolution rules ----------------------------------------------------

NameRule = Callable[[Tag], str | None]


def _has_labelled_previous_sibling(node: Tag) -> bool:
    sibling = previous_element_sibling(node)
    return sibling is not None and bool(node_text(sibling))


def name_from_previous_sibling(anchor: Tag) -> str | None:
    """
    Button blocks sit in their own wrapper, one or more levels below the
    block holding the vendor label. Climb until a wrapper has a labelled
    element right before it.

    A preceding element with no text does not end the climb, so a vendor
    with an empty label picks up the next label further out rather than
    becoming a bare walk-up marker.

    The climb is not bounded by the section root. On a full page it can
    pass <body>, whose previous sibling is <head>, and the page <title>
    becomes the name; NameNotFound only fires for documents without one.
    """
    result = ascend_until(anchor, _has_labelled_previous_sibling)
    if not isinstance(result, Found):
        return None
    sibling = previous_element_sibling(result.node)
    return node_text(sibling) if sibling is not None else None


def name_from_anchor_text(anchor: Tag) -> str | None:
    return node_text(anchor) or None


NAME_RULES: dict[str, NameRule] = {
    "previous-sibling": name_from_previous_sibling,
    "anchor-text": name_from_anchor_text,
}

DEFAULT_NAME_RULE = "previous-sibling"


# --- Strategy -------------------------------------------------------------------


@dataclass(frozen=True)
class ExtractionStrategy:
    """
    Everything that varies between page templates.

    Fields:
      - name: template name used for lookup and logging
      - date_selector: CSS selector for the per-day headers ("THU 04 JANUARY")
      - container_selector: CSS selector for one page section
      - location_selector: CSS selector for location headers inside a section
      - anchor_selector: CSS selector for the order buttons
      - name_rule: key into NAME_RULES
      - walk_up_marker: appended to names of vendors without an order link
    """

    name: str
    date_selector: str
    container_selector: str
    location_selector: str
    anchor_selector: str
    name_rule: str = DEFAULT_NAME_RULE
    walk_up_marker: str = WALK_UP_MARKER

    def __post_init__(self) -> None:
        if self.name_rule not in NAME_RULES:
            known = ", ".join(sorted(NAME_RULES))
            raise ValueError(f"Unknown name rule {self.name_rule!r}; expected one of: {known}")
        for field_name in (
            "date_selector",
            "container_selector",
            "location_selector",
            "anchor_selector",
        ):
            if not (getattr(self, field_name) or "").strip():
                raise ValueError(f"ExtractionStrategy.{field_name} must not be empty")

    def is_container(self, node: Tag) -> bool:
        return selector_predicate(self.container_selector)(node)

    def resolve_name(self, anchor: Tag) -> str | None:
        return NAME_RULES[self.name_rule](anchor)

    def with_overrides(self, **overrides: str | None) -> ExtractionStrategy:
        """Copy with the given fields replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        log.debug("Overriding template %s fields: %s", self.name, sorted(changes))
        return replace(self, **changes)


# --- Known templates --------------------------------------------------------------

SQUARESPACE_GRID = ExtractionStrategy(
    name="squarespace-grid",
    date_selector="h1 > strong",
    container_selector="div.sqs-layout.sqs-grid-12.columns-12[data-type=page-section]",
    location_selector="h2 > strong",
    anchor_selector=".sqs-block-button-element",
)

# Fluid-engine rebuild: sections are <section> elements and the button label
# carries the vendor name.
SQUARESPACE_FLUID = ExtractionStrategy(
    name="squarespace-fluid",
    date_selector="h1 strong",
    container_selector="section.page-section",
    location_selector="h2 strong",
    anchor_selector="a.sqs-block-button-element",
    name_rule="anchor-text",
)

TEMPLATES: dict[str, ExtractionStrategy] = {
    SQUARESPACE_GRID.name: SQUARESPACE_GRID,
    SQUARESPACE_FLUID.name: SQUARESPACE_FLUID,
}

DEFAULT_TEMPLATE = SQUARESPACE_GRID.name


def get_template(name: str) -> ExtractionStrategy:
    try:
        return TEMPLATES[name]
    except KeyError:
        known = ", ".join(sorted(TEMPLATES))
        raise ValueError(f"Unknown page template {name!r}; expected one of: {known}") from None


__all__ = [
    "ExtractionStrategy",
    "NameRule",
    "NAME_RULES",
    "DEFAULT_NAME_RULE",
    "WALK_UP_MARKER",
    "TEMPLATES",
    "DEFAULT_TEMPLATE",
    "SQUARESPACE_GRID",
    "SQUARESPACE_FLUID",
    "get_template",
    "name_from_previous_sibling",
    "name_from_anchor_text",
]
