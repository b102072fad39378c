# lanes/projection.py - date <-> pixel mapping for the timeline canvas
# • Day columns spread across AVAILABLE_WIDTH * zoom, inset by TIMELINE_PADDING
# • x_to_date rounds to the nearest whole day (used by drag-to-reschedule)

from dataclasses import dataclass
from datetime import date, timedelta

LANE_HEIGHT = 70
AXIS_HEIGHT = 50
TIMELINE_PADDING = 100
AVAILABLE_WIDTH = 1200  # base width for timeline content at 100% zoom
MIN_ITEM_WIDTH = 120    # keeps short items readable

ZOOM_MIN = 0.5
ZOOM_MAX = 3.0
ZOOM_STEP = 0.2


def days_diff(start: date, end: date) -> int:
    """Inclusive number of calendar days from start to end."""
    return (end - start).days + 1

def format_date(d: date) -> str:
    return f"{d:%b} {d.day}, {d.year}"

def format_range(item) -> str:
    if item.start == item.end:
        return format_date(item.start)
    return f"{format_date(item.start)} - {format_date(item.end)}"

def clamp_zoom(level: float) -> float:
    return round(max(ZOOM_MIN, min(ZOOM_MAX, float(level))), 2)

def step_zoom(level: float, delta: float) -> float:
    return clamp_zoom(level + delta)

def canvas_height(lane_count: int) -> int:
    return lane_count * LANE_HEIGHT + 80


@dataclass(frozen=True)
class Tick:
    x: float
    date: date
    label: str


@dataclass(frozen=True)
class Projection:
    min_date: date
    max_date: date
    zoom: float = 1.0

    @classmethod
    def for_items(cls, items, zoom: float = 1.0):
        starts = [it.start for it in items]
        ends = [it.end for it in items]
        if not starts:
            today = date.today()
            return cls(today, today, clamp_zoom(zoom))
        return cls(min(starts + ends), max(starts + ends), clamp_zoom(zoom))

    @property
    def total_days(self) -> int:
        return max(days_diff(self.min_date, self.max_date), 1)

    @property
    def content_width(self) -> float:
        return AVAILABLE_WIDTH * self.zoom

    @property
    def width(self) -> float:
        return self.content_width + 2 * TIMELINE_PADDING

    @property
    def day_width(self) -> float:
        return self.content_width / self.total_days

    def date_to_x(self, d: date) -> float:
        offset = (d - self.min_date).days
        return TIMELINE_PADDING + offset / self.total_days * self.content_width

    def x_to_date(self, x: float) -> date:
        ratio = (x - TIMELINE_PADDING) / self.content_width
        return self.min_date + timedelta(days=round(ratio * self.total_days))

    def item_box(self, item):
        """Return (left, width) in px; the bar covers its end day's whole column."""
        left = self.date_to_x(item.start)
        right = self.date_to_x(item.end + timedelta(days=1))
        return left, max(right - left, MIN_ITEM_WIDTH)

    def ticks(self, target: int = 10):
        step = max(1, self.total_days // target)
        out = []
        cur = self.min_date
        while cur <= self.max_date:
            out.append(Tick(self.date_to_x(cur), cur, format_date(cur)))
            cur += timedelta(days=step)
        if not out or out[-1].date != self.max_date:
            out.append(Tick(self.date_to_x(self.max_date), self.max_date, format_date(self.max_date)))
        return out
