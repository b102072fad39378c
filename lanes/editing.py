# lanes/editing.py - rename / reschedule edits and the interaction state machine
# • Items are immutable; every edit returns a new list with one Item replaced
# • Idle -> Editing(item) -> Idle on save/cancel
# • Idle -> Dragging(item, offset) -> Idle on end_drag; editing blocks dragging
# • Dragging is driven by pointer events; the Streamlit page has none and reschedules
#   through the sidebar form (move_item / shift_item), so only pointer frontends use it

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta

from lanes.errors import InvalidItem, InvalidTransition, UnknownItem

LOG = logging.getLogger("timeline")


def _find(items, item_id):
    for it in items:
        if it.id == item_id:
            return it
    raise UnknownItem(item_id)

def _replace_one(items, new):
    return [new if it.id == new.id else it for it in items]

def rename_item(items, item_id, name: str):
    name = (name or "").strip()
    if not name:
        raise InvalidItem("item name cannot be blank")
    old = _find(items, item_id)
    LOG.info("RENAME: item %s %r -> %r", item_id, old.name, name)
    return _replace_one(items, replace(old, name=name))

def move_item(items, item_id, new_start: date):
    """Reschedule an item to start on new_start, keeping its inclusive duration."""
    old = _find(items, item_id)
    span = old.end - old.start
    try:
        new = replace(old, start=new_start, end=new_start + span)
    except OverflowError as exc:
        raise InvalidItem(f"item {item_id}: cannot move to {new_start}, end date out of range") from exc
    LOG.info("MOVE: item %s %s..%s -> %s..%s", item_id, old.start, old.end, new.start, new.end)
    return _replace_one(items, new)

def shift_item(items, item_id, days: int):
    old = _find(items, item_id)
    try:
        new_start = old.start + timedelta(days=int(days))
    except OverflowError as exc:
        raise InvalidItem(f"item {item_id}: shift by {days} days is out of range") from exc
    return move_item(items, item_id, new_start)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Editing:
    item_id: int
    draft: str


@dataclass(frozen=True)
class Dragging:
    item_id: int
    offset: float  # px between the pointer and the bar's left edge


class Interaction:
    """
    Pointer/keyboard interaction over the item list.

    Holds only the mode; callers keep the items and pass them in, getting a
    new list back from the transitions that change it.
    """

    def __init__(self):
        self.mode = Idle()

    def __repr__(self):
        return f"Interaction({self.mode!r})"

    @property
    def editing_id(self):
        return self.mode.item_id if isinstance(self.mode, Editing) else None

    @property
    def dragging_id(self):
        return self.mode.item_id if isinstance(self.mode, Dragging) else None

    def _require(self, kind, event):
        if not isinstance(self.mode, kind):
            raise InvalidTransition(f"{event} not allowed while {type(self.mode).__name__}")

    # ---- rename ----
    def start_editing(self, items, item_id):
        self._require(Idle, "start_editing")
        it = _find(items, item_id)
        self.mode = Editing(it.id, it.name)

    def update_draft(self, text: str):
        self._require(Editing, "update_draft")
        self.mode = Editing(self.mode.item_id, text)

    def save(self, items):
        self._require(Editing, "save")
        out = rename_item(items, self.mode.item_id, self.mode.draft)
        self.mode = Idle()
        return out

    def cancel(self):
        self._require(Editing, "cancel")
        self.mode = Idle()

    # ---- drag ----
    def begin_drag(self, items, item_id, x: float, projection):
        self._require(Idle, "begin_drag")
        it = _find(items, item_id)
        self.mode = Dragging(it.id, x - projection.date_to_x(it.start))

    def drag_to(self, items, x: float, projection):
        self._require(Dragging, "drag_to")
        new_start = projection.x_to_date(x - self.mode.offset)
        return move_item(items, self.mode.item_id, new_start)

    def end_drag(self):
        self._require(Dragging, "end_drag")
        self.mode = Idle()
