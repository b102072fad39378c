import re

from lanes.errors import InvalidItem

_INT_RE = re.compile(r"-?\d+", re.ASCII)


def as_item_id(v):
    if isinstance(v, bool):
        raise InvalidItem(f"item id must be an integer, got {v!r}")
    if isinstance(v, int):
        return v
    if isinstance(v, str) and _INT_RE.fullmatch(v.strip()):
        return int(v.strip())
    raise InvalidItem(f"item id must be an integer, got {v!r}")

def next_item_id(ids) -> int:
    return max(ids, default=0) + 1

def ensure_item_ids(raws) -> bool:
    """
    Ensure every raw item record has an integer id. Records without one get the
    next free number after the largest existing id. Returns True if mutated.
    """
    changed = False
    taken = []
    for it in raws:
        if it.get("id") in (None, ""):
            continue
        iid = as_item_id(it["id"])
        if iid != it["id"]:
            it["id"] = iid
            changed = True
        taken.append(iid)
    for it in raws:
        if it.get("id") in (None, ""):
            it["id"] = next_item_id(taken)
            taken.append(it["id"])
            changed = True
    return changed
