"""Tests for status badge rendering."""

from __future__ import annotations

import base64

from depstatus.badge import render_badge


class TestRenderBadge:
    def test_up_to_date(self, up_to_date_outcome):
        badge = render_badge(up_to_date_outcome)
        assert (badge.subject, badge.status, badge.color) == ("dependencies", "up to date", "#4c1")

    def test_out_of_date(self, outdated_outcome):
        assert render_badge(outdated_outcome).status == "out of date"

    def test_no_outcome(self):
        badge = render_badge(None)
        assert badge.status == "unknown"
        assert badge.color == "#9f9f9f"

    def test_svg(self, up_to_date_outcome):
        svg = render_badge(up_to_date_outcome).to_svg()
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert ">dependencies</text>" in svg
        assert ">up to date</text>" in svg

    def test_data_uri(self, up_to_date_outcome):
        badge = render_badge(up_to_date_outcome)
        prefix = "data:image/svg+xml;base64,"
        uri = badge.to_svg_data_uri()
        assert uri.startswith(prefix)
        assert base64.b64decode(uri[len(prefix) :]).decode("utf-8") == badge.to_svg()
