# lanes/assign.py - greedy lane packing for timeline items
# • Items sorted by start date (stable), each dropped into the first lane that is free
# • A lane is free when its last item ends strictly before the new item starts
# • Same-day touch counts as overlap: the two bars would share a day column
# • Dates may be date values or date strings; Items are placed as given, never copied

from datetime import timedelta

from lanes.errors import InvalidRange, LaneOverlap
from lanes.state import coerce_date


def _span(it):
    start = coerce_date(it.start, f"item {it.id} start")
    end = coerce_date(it.end, f"item {it.id} end")
    if start > end:
        raise InvalidRange(it.id, start, end)
    return start, end

def assign_lanes(items):
    """
    Partition items into the fewest lanes with no two items of a lane overlapping.

    First-fit over items sorted by start date. For interval data this uses as
    many lanes as the largest number of items active on one day, so the result
    is minimal. Items with equal start dates keep their input order, so the
    layout is deterministic for a fixed input order but not canonical across
    orderings.

    Returns a list of lanes (creation order), each a list of the same Item
    objects in start-date order. The caller's sequence is left untouched.
    Raises InvalidDate / InvalidRange before placing anything.
    """
    spans = [(_span(it), it) for it in items]

    lanes = []
    lane_ends = []
    for (start, end), it in sorted(spans, key=lambda x: x[0][0]):
        for n, last_end in enumerate(lane_ends):
            # only the newest item can still reach into start
            if last_end < start:
                lanes[n].append(it)
                lane_ends[n] = end
                break
        else:
            lanes.append([it])
            lane_ends.append(end)
    return lanes

def max_overlap(items) -> int:
    # Sweep line over day boundaries; an item occupies [start, end + 1 day)
    events = []
    for it in items:
        start, end = _span(it)
        events.append((start, +1))
        events.append((end + timedelta(days=1), -1))
    events.sort()
    cur = 0
    mx = 0
    for _, d in events:
        cur += d
        mx = max(mx, cur)
    return mx

def lane_index(lanes):
    """Map item id -> lane number."""
    return {it.id: n for n, lane in enumerate(lanes) for it in lane}

def check_lanes(lanes):
    for n, lane in enumerate(lanes):
        for prev, cur in zip(lane, lane[1:]):
            if not _span(prev)[1] < _span(cur)[0]:
                raise LaneOverlap(
                    f"lane {n}: item {prev.id} ({prev.start}..{prev.end}) "
                    f"overlaps item {cur.id} ({cur.start}..{cur.end})"
                )
