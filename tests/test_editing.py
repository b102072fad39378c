"""Tests for rename/reschedule edits and the interaction state machine."""

from datetime import date

import pytest

from lanes.assign import assign_lanes
from lanes.editing import (
    Dragging,
    Editing,
    Idle,
    Interaction,
    move_item,
    rename_item,
    shift_item,
)
from lanes.errors import InvalidItem, InvalidTransition, UnknownItem
from lanes.projection import Projection
from lanes.state import Item


class TestEdits:
    """Test the pure edit functions."""

    def test_rename(self, example_items: list[Item]) -> None:
        out = rename_item(example_items, 2, "  Renamed ")
        assert out[1].name == "Renamed"
        assert example_items[1].name == "Item 2"
        assert out[0] is example_items[0]

    def test_rename_blank(self, example_items: list[Item]) -> None:
        with pytest.raises(InvalidItem):
            rename_item(example_items, 2, "   ")

    def test_rename_unknown(self, example_items: list[Item]) -> None:
        with pytest.raises(UnknownItem) as exc_info:
            rename_item(example_items, 99, "x")
        assert exc_info.value.item_id == 99

    def test_move_keeps_duration(self, example_items: list[Item]) -> None:
        out = move_item(example_items, 1, date(2024, 2, 1))
        assert out[0].start == date(2024, 2, 1)
        assert out[0].end == date(2024, 2, 10)
        assert out[0].duration_days == example_items[0].duration_days

    def test_shift(self, example_items: list[Item]) -> None:
        out = shift_item(example_items, 3, -2)
        assert (out[2].start, out[2].end) == (date(2024, 1, 10), date(2024, 1, 18))

    def test_shift_out_of_range(self, example_items: list[Item]) -> None:
        with pytest.raises(InvalidItem, match="out of range"):
            shift_item(example_items, 1, 3_000_000)

    def test_shift_beyond_timedelta_limit(self, example_items: list[Item]) -> None:
        with pytest.raises(InvalidItem, match="out of range"):
            shift_item(example_items, 1, 10**12)

    def test_move_end_out_of_range(self, example_items: list[Item]) -> None:
        with pytest.raises(InvalidItem, match="out of range"):
            move_item(example_items, 1, date.max)

    def test_move_changes_lanes(self, example_items: list[Item]) -> None:
        # item 2 moved past item 3 now fits after item 1 in the first lane
        out = move_item(example_items, 2, date(2024, 1, 21))
        assert [[it.id for it in lane] for lane in assign_lanes(out)] == [[1, 3, 2]]


class TestInteraction:
    """Test Idle/Editing/Dragging transitions."""

    @pytest.fixture
    def proj(self, example_items: list[Item]) -> Projection:
        return Projection.for_items(example_items)

    def test_starts_idle(self) -> None:
        interaction = Interaction()
        assert interaction.mode == Idle()
        assert interaction.editing_id is None
        assert interaction.dragging_id is None

    def test_rename_save(self, example_items: list[Item]) -> None:
        interaction = Interaction()
        interaction.start_editing(example_items, 1)
        assert interaction.mode == Editing(1, "Item 1")
        interaction.update_draft("Kickoff")
        out = interaction.save(example_items)
        assert out[0].name == "Kickoff"
        assert interaction.mode == Idle()

    def test_rename_cancel(self, example_items: list[Item]) -> None:
        interaction = Interaction()
        interaction.start_editing(example_items, 1)
        interaction.update_draft("Kickoff")
        interaction.cancel()
        assert interaction.mode == Idle()

    def test_blank_save_stays_editing(self, example_items: list[Item]) -> None:
        interaction = Interaction()
        interaction.start_editing(example_items, 1)
        interaction.update_draft("")
        with pytest.raises(InvalidItem):
            interaction.save(example_items)
        assert interaction.editing_id == 1

    def test_start_editing_unknown(self, example_items: list[Item]) -> None:
        interaction = Interaction()
        with pytest.raises(UnknownItem):
            interaction.start_editing(example_items, 42)
        assert interaction.mode == Idle()

    def test_drag(self, example_items: list[Item], proj: Projection) -> None:
        interaction = Interaction()
        grab_x = proj.date_to_x(date(2024, 1, 3))  # pointer two days into item 1
        interaction.begin_drag(example_items, 1, grab_x, proj)
        assert isinstance(interaction.mode, Dragging)
        assert interaction.dragging_id == 1

        out = interaction.drag_to(example_items, proj.date_to_x(date(2024, 1, 8)), proj)
        assert (out[0].start, out[0].end) == (date(2024, 1, 6), date(2024, 1, 15))

        interaction.end_drag()
        assert interaction.mode == Idle()

    def test_editing_blocks_drag(self, example_items: list[Item], proj: Projection) -> None:
        interaction = Interaction()
        interaction.start_editing(example_items, 1)
        with pytest.raises(InvalidTransition):
            interaction.begin_drag(example_items, 1, 0.0, proj)

    def test_dragging_blocks_editing(self, example_items: list[Item], proj: Projection) -> None:
        interaction = Interaction()
        interaction.begin_drag(example_items, 2, proj.date_to_x(date(2024, 1, 5)), proj)
        with pytest.raises(InvalidTransition):
            interaction.start_editing(example_items, 2)

    @pytest.mark.parametrize("event", ["save", "cancel", "end_drag", "update_draft"])
    def test_idle_rejects(self, example_items: list[Item], event: str) -> None:
        interaction = Interaction()
        with pytest.raises(InvalidTransition, match="Idle"):
            if event == "save":
                interaction.save(example_items)
            elif event == "update_draft":
                interaction.update_draft("x")
            else:
                getattr(interaction, event)()
