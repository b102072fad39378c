"""Pytest fixtures for timeline lane tests."""

from datetime import date

import pytest

from lanes.state import Item


def make_item(item_id: int, start: str, end: str, name: str | None = None) -> Item:
    return Item(
        id=item_id,
        name=name or f"Item {item_id}",
        start=date.fromisoformat(start),
        end=date.fromisoformat(end),
    )


@pytest.fixture
def example_items() -> list[Item]:
    """Three items where 1 and 3 can share a lane and 2 overlaps both."""
    return [
        make_item(1, "2024-01-01", "2024-01-10"),
        make_item(2, "2024-01-05", "2024-01-15"),
        make_item(3, "2024-01-12", "2024-01-20"),
    ]
