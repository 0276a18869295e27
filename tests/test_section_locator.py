# tests/test_section_locator.py
from __future__ import annotations

import pytest

from foodpark.exceptions import LocationNotFound, TargetNotFound
from foodpark.extract import get_template, locate_section, parse_html


class TestLocateSection:
    def test_returns_nearest_container_of_location_header(self, grid_doc, grid_strategy):
        section = locate_section(
            grid_doc,
            target_header="THU 04 JANUARY",
            location_filter="Cambridge Science Park",
            strategy=grid_strategy,
        )

        # Not the day container, and not the page wrapper or document.
        assert section.root["id"] == "thu-csp"
        assert section.location == "Cambridge Science Park"

    def test_location_filter_is_case_insensitive_substring(self, grid_doc, grid_strategy):
        section = locate_section(
            grid_doc,
            target_header="THU 04 JANUARY",
            location_filter="science PARK",
            strategy=grid_strategy,
        )

        assert section.root["id"] == "thu-csp"
        assert section.location == "Cambridge Science Park"

    def test_first_location_match_wins(self, grid_doc, grid_strategy):
        section = locate_section(
            grid_doc,
            target_header="THU 04 JANUARY",
            location_filter="park",
            strategy=grid_strategy,
        )

        assert section.root["id"] == "thu-granta"
        assert section.location == "Granta Park"

    def test_location_searched_only_within_date_section(self, grid_doc, grid_strategy):
        section = locate_section(
            grid_doc,
            target_header="WED 03 JANUARY",
            location_filter="Cambridge Science Park",
            strategy=grid_strategy,
        )

        assert section.root["id"] == "wed-csp"

    def test_date_header_must_match_exactly(self, grid_doc, grid_strategy):
        with pytest.raises(TargetNotFound) as excinfo:
            locate_section(
                grid_doc,
                target_header="THU 04 JAN",
                location_filter="Cambridge Science Park",
                strategy=grid_strategy,
            )
        assert excinfo.value.header == "THU 04 JAN"

    def test_unknown_location_raises(self, grid_doc, grid_strategy):
        with pytest.raises(LocationNotFound) as excinfo:
            locate_section(
                grid_doc,
                target_header="THU 04 JANUARY",
                location_filter="Addenbrooke's",
                strategy=grid_strategy,
            )
        assert excinfo.value.location_filter == "Addenbrooke's"

    def test_location_in_sibling_section_of_date_heading(self, grid_strategy):
        section_attrs = 'class="sqs-layout sqs-grid-12 columns-12" data-type="page-section"'
        doc = parse_html(
            "<html><body>"
            f'<div {section_attrs} id="outer">'
            f'<div {section_attrs} id="hdr"><h1><strong>THU 04 JANUARY</strong></h1></div>'
            f'<div {section_attrs} id="csp"><h2><strong>Cambridge Science Park</strong></h2></div>'
            "</div></body></html>"
        )

        section = locate_section(
            doc,
            target_header="THU 04 JANUARY",
            location_filter="Cambridge Science Park",
            strategy=grid_strategy,
        )

        assert section.root["id"] == "csp"
        assert section.location == "Cambridge Science Park"

    def test_location_search_stops_at_document_root(self, grid_strategy):
        section_attrs = 'class="sqs-layout sqs-grid-12 columns-12" data-type="page-section"'
        doc = parse_html(
            "<html><body>"
            f'<div {section_attrs} id="outer">'
            f'<div {section_attrs} id="hdr"><h1><strong>THU 04 JANUARY</strong></h1></div>'
            f'<div {section_attrs} id="granta"><h2><strong>Granta Park</strong></h2></div>'
            "</div>"
            "<h2><strong>Cambridge Science Park</strong></h2>"
            "</body></html>"
        )

        with pytest.raises(LocationNotFound):
            locate_section(
                doc,
                target_header="THU 04 JANUARY",
                location_filter="Cambridge Science Park",
                strategy=grid_strategy,
            )

    def test_date_header_outside_any_container_raises(self, grid_strategy):
        doc = parse_html(
            "<html><body><div class='intro'><h1><strong>THU 04 JANUARY</strong></h1>"
            "<h2><strong>Cambridge Science Park</strong></h2></div></body></html>"
        )

        with pytest.raises(TargetNotFound):
            locate_section(
                doc,
                target_header="THU 04 JANUARY",
                location_filter="Cambridge Science Park",
                strategy=grid_strategy,
            )

    def test_first_matching_date_header_wins(self, grid_strategy):
        block = (
            '<div class="sqs-layout sqs-grid-12 columns-12" data-type="page-section" id="{id}">'
            "<h1><strong>THU 04 JANUARY</strong></h1>"
            "<h2><strong>Cambridge Science Park</strong></h2>"
            "</div>"
        )
        doc = parse_html(
            "<html><body>" + block.format(id="first") + block.format(id="second") + "</body></html>"
        )

        section = locate_section(
            doc,
            target_header="THU 04 JANUARY",
            location_filter="Cambridge Science Park",
            strategy=grid_strategy,
        )

        assert section.root["id"] == "first"

    def test_flat_section_resolves_to_date_container(self):
        doc = parse_html(
            "<html><body>"
            '<section class="page-section" id="thu">'
            "<div><h1><strong>THU 04 JANUARY</strong></h1></div>"
            "<div class='fluid-engine'><div><h2><strong>Cambridge Science Park</strong></h2></div></div>"
            "</section></body></html>"
        )

        section = locate_section(
            doc,
            target_header="THU 04 JANUARY",
            location_filter="cambridge",
            strategy=get_template("squarespace-fluid"),
        )

        assert section.root["id"] == "thu"
