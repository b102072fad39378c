import logging
import streamlit as st

from lanes.assign import check_lanes, lane_index, max_overlap
from lanes.errors import LaneOverlap

LOG = logging.getLogger("timeline")

def debug_snapshot(state, lanes) -> dict:
    items = state.get("items", [])
    try:
        check_lanes(lanes)
        lanes_ok = "ok"
    except LaneOverlap as exc:
        lanes_ok = str(exc)
    return {
        "items": len(items),
        "lanes": len(lanes),
        "max_overlap": max_overlap(items),
        "lanes_check": lanes_ok,
        "zoom": state.get("zoom"),
        "interaction": repr(state.get("interaction")),
        "selected_item_id": state.get("selected_item_id"),
        "selected_lane": lane_index(lanes).get(state.get("selected_item_id")),
    }

def render_debug_panel(state, lanes):
    with st.expander("🐞 Debug", expanded=False):
        snap = debug_snapshot(state, lanes)
        st.json(snap)
        if st.button("Log snapshot"):
            LOG.info("DEBUG_SNAPSHOT: %s", snap)
            st.toast("Snapshot logged", icon="🪵")
