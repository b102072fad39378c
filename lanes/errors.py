"""Exceptions raised by the lanes library."""


class TimelineError(ValueError):
    """Base exception for all timeline input errors."""

    pass


class InvalidDate(TimelineError):
    """Raised when a start/end value cannot be read as a calendar date."""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"{field}: cannot parse {value!r} as a calendar date (expected YYYY-MM-DD)")


class InvalidRange(TimelineError):
    """Raised when an item starts after it ends."""

    def __init__(self, item_id, start, end):
        self.item_id = item_id
        self.start = start
        self.end = end
        super().__init__(f"item {item_id}: start {start} is after end {end}")


class InvalidItem(TimelineError):
    """Raised when an item record is malformed (id, name or shape)."""

    pass


class ImportFailed(TimelineError):
    """Raised when an imported JSON document holds no usable items."""

    pass


class UnknownItem(TimelineError, LookupError):
    """Raised when an edit targets an id that is not in the item list."""

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"no item with id {item_id!r}")


class LaneOverlap(TimelineError):
    """Raised when two items placed in one lane are not strictly disjoint."""

    pass


class InvalidTransition(TimelineError):
    """Raised when an interaction event does not apply to the current state."""

    pass
