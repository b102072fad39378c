"""Tests for HTML rendering and the debug snapshot."""

import re

from lanes.assign import assign_lanes
from lanes.debug import debug_snapshot
from lanes.editing import Interaction
from lanes.projection import Projection
from lanes.state import Item
from lanes.timeline import PALETTE, build_timeline_html, item_color
from tests.conftest import make_item


class TestBuildTimelineHtml:
    """Test the static timeline markup."""

    def test_one_row_per_lane(self, example_items: list[Item]) -> None:
        lanes = assign_lanes(example_items)
        html = build_timeline_html(lanes, Projection.for_items(example_items))
        assert html.count('class="lane"') == 2
        assert "Lane 1" in html
        assert "Lane 2" in html
        assert "Lane 3" not in html

    def test_bars_and_tooltips(self, example_items: list[Item]) -> None:
        lanes = assign_lanes(example_items)
        html = build_timeline_html(lanes, Projection.for_items(example_items))
        assert len(re.findall(r'class="bar[^"]*" data-id=', html)) == 3
        assert 'title="Item 1 (Jan 1, 2024 - Jan 10, 2024)"' in html
        assert "left:100.0px" in html

    def test_placeholders_replaced(self, example_items: list[Item]) -> None:
        html = build_timeline_html(assign_lanes(example_items), Projection.for_items(example_items))
        assert "__" not in html
        assert "width:1400px" in html

    def test_names_escaped(self) -> None:
        items = [make_item(1, "2024-01-01", "2024-01-02", name='<b>"x"</b>')]
        html = build_timeline_html(assign_lanes(items), Projection.for_items(items))
        assert "<b>" not in html
        assert "&lt;b&gt;" in html

    def test_selected_item_marked(self, example_items: list[Item]) -> None:
        html = build_timeline_html(
            assign_lanes(example_items), Projection.for_items(example_items), selected_id=3
        )
        assert 'class="bar selected" data-id="3"' in html
        assert html.count("bar selected") == 1

    def test_empty(self) -> None:
        html = build_timeline_html([], Projection.for_items([]))
        assert 'class="lane"' not in html

    def test_colors_cycle_by_id(self) -> None:
        a = make_item(1, "2024-01-01", "2024-01-02")
        b = make_item(1 + len(PALETTE), "2024-01-01", "2024-01-02")
        assert item_color(a) == item_color(b)


class TestDebugSnapshot:
    """Test the debug panel payload."""

    def test_snapshot(self, example_items: list[Item]) -> None:
        state = {"items": example_items, "zoom": 1.0, "interaction": Interaction(), "selected_item_id": None}
        snap = debug_snapshot(state, assign_lanes(example_items))
        assert snap["items"] == 3
        assert snap["lanes"] == 2
        assert snap["max_overlap"] == 2
        assert snap["lanes_check"] == "ok"
        assert snap["interaction"] == "Interaction(Idle())"
        assert snap["selected_lane"] is None

    def test_snapshot_selected_lane(self, example_items: list[Item]) -> None:
        state = {"items": example_items, "selected_item_id": 2}
        assert debug_snapshot(state, assign_lanes(example_items))["selected_lane"] == 1

    def test_snapshot_reports_overlap(self) -> None:
        a = make_item(1, "2024-01-01", "2024-01-05")
        b = make_item(2, "2024-01-04", "2024-01-06")
        snap = debug_snapshot({"items": [a, b]}, [[a, b]])
        assert snap["lanes_check"].startswith("lane 0")
