import json
import logging
from dataclasses import dataclass
from datetime import date, datetime

from lanes.errors import ImportFailed, InvalidDate, InvalidItem, InvalidRange
from lanes.ids import as_item_id, ensure_item_ids

LOG = logging.getLogger("timeline")

_DATE_FORMATS = ("%Y/%m/%d",)


@dataclass(frozen=True)
class Item:
    """One date-ranged bar on the timeline. Both ends are inclusive calendar days."""
    id: int
    name: str
    start: date
    end: date

    @property
    def duration_days(self) -> int:
        return (self.end - self.start).days + 1

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }


def coerce_date(v, field: str = "date") -> date:
    """Coerce a date, datetime or date string into a timezone-naive date()."""
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str) and v.strip():
        s = v.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            # time-of-day and offset are dropped; only the calendar day counts
            return datetime.fromisoformat(s).date()
        except ValueError:
            pass
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(s, fmt).date()
            except ValueError:
                continue
    raise InvalidDate(field, v)

def _first(raw, *keys):
    for k in keys:
        v = raw.get(k)
        if v not in (None, ""):
            return v
    return None

def normalize_item(raw) -> Item:
    """Return an Item built from a raw mapping (import payloads, sample data)."""
    if isinstance(raw, Item):
        raw = raw.to_dict()
    if not isinstance(raw, dict):
        raise InvalidItem(f"item record must be an object, got {type(raw).__name__}")
    if raw.get("id") in (None, ""):
        raise InvalidItem(f"item record has no id: {raw!r}")
    iid = as_item_id(raw["id"])
    name = str(_first(raw, "name", "content", "title") or "").strip()
    start_raw = _first(raw, "start", "startDate")
    if start_raw is None:
        raise InvalidDate(f"item {iid} start", start_raw)
    start = coerce_date(start_raw, f"item {iid} start")
    end_raw = _first(raw, "end", "endDate")
    end = coerce_date(end_raw, f"item {iid} end") if end_raw is not None else start
    if start > end:
        raise InvalidRange(iid, start, end)
    return Item(id=iid, name=name, start=start, end=end)

def normalize_items(raws):
    items = [normalize_item(x) for x in raws]
    seen = set()
    for it in items:
        if it.id in seen:
            raise InvalidItem(f"duplicate item id {it.id}")
        seen.add(it.id)
    return items

def _get_case_insensitive(d: dict, key: str):
    for k in d.keys():
        if isinstance(k, str) and k.lower() == key.lower():
            return d[k]
    return None

def load_items(text: str):
    """
    Parse an imported JSON document into Items.

    Accepts a bare list of item objects, {items:[...]}, or the same nested
    under {data:{...}}. Key lookup is case-insensitive.
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportFailed(f"not valid JSON: {exc}") from exc

    root = doc
    if isinstance(root, dict):
        nested = _get_case_insensitive(root, "data")
        if isinstance(nested, dict):
            root = nested
        root = _get_case_insensitive(root, "items")

    if not isinstance(root, list) or not root:
        raise ImportFailed("expected a JSON list of items or an object with an 'items' array")
    if not all(isinstance(x, dict) for x in root):
        raise ImportFailed("every entry of 'items' must be an object")

    raws = [dict(x) for x in root]
    if ensure_item_ids(raws):
        LOG.info("IMPORT: assigned missing item ids")
    items = normalize_items(raws)
    LOG.info("IMPORT: %d items", len(items))
    return items

def export_items(items) -> str:
    payload = {"items": [it.to_dict() for it in items]}
    return json.dumps(payload, indent=2)

def reset_defaults(state):
    from lanes.editing import Interaction
    from lanes.sample import SAMPLE_ITEMS

    state["items"] = normalize_items(SAMPLE_ITEMS)
    state["zoom"] = 1.0
    state["interaction"] = Interaction()
    state["selected_item_id"] = None
    LOG.info("RESET: %d sample items", len(state["items"]))
