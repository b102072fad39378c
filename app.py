# app.py - project timeline
# - Items packed into the fewest non-overlapping lanes (lanes.assign)
# - Zoom in/out, rename and reschedule from the sidebar
# - JSON import/export, reset to sample data
# - Debug expander

import logging
import streamlit as st

from lanes.assign import assign_lanes
from lanes.editing import Interaction, move_item, shift_item
from lanes.errors import TimelineError
from lanes.projection import Projection, step_zoom
from lanes.sample import SAMPLE_ITEMS
from lanes.sidebar import render_sidebar
from lanes.state import export_items, load_items, normalize_items, reset_defaults
from lanes.styles import GLOBAL_CSS
from lanes.timeline import render_timeline
from lanes.debug import render_debug_panel

# ---------- Page & logging ----------
st.set_page_config(page_title="Timeline", page_icon="📅", layout="wide")
st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
LOG = logging.getLogger("timeline")

# ---------- Session ----------
ss = st.session_state
if "items" not in ss:
    ss["items"] = normalize_items(SAMPLE_ITEMS)
ss.setdefault("zoom", 1.0)
ss.setdefault("interaction", Interaction())
ss.setdefault("selected_item_id", None)
ss.setdefault("_last_import_hash", "")

# ---------- Sidebar actions ----------
actions = render_sidebar(ss, export_items)
interaction = ss["interaction"]

try:
    if "zoom" in actions:
        ss["zoom"] = step_zoom(ss["zoom"], actions["zoom"])
        st.rerun()

    if "rename_start" in actions:
        interaction.start_editing(ss["items"], actions["rename_start"])
        ss["rename_draft"] = interaction.mode.draft
        st.rerun()

    if "rename_save" in actions:
        interaction.update_draft(actions["rename_save"])
        ss["items"] = interaction.save(ss["items"])
        st.rerun()

    if "rename_cancel" in actions:
        interaction.cancel()
        st.rerun()

    if "move" in actions:
        item_id, new_start = actions["move"]
        ss["items"] = move_item(ss["items"], item_id, new_start)
        st.rerun()

    if "shift" in actions:
        item_id, days = actions["shift"]
        ss["items"] = shift_item(ss["items"], item_id, days)
        st.rerun()

    if "import" in actions:
        ss["items"] = load_items(actions["import"])
        ss["interaction"] = Interaction()
        ss["selected_item_id"] = None
        st.rerun()

    if actions.get("reset"):
        reset_defaults(ss)
        st.rerun()
except TimelineError as exc:
    LOG.warning("ACTION_FAILED: %s", exc)
    st.error(str(exc))

# ---------- Page ----------
items = ss["items"]
lanes = assign_lanes(items)
projection = Projection.for_items(items, ss["zoom"])

st.title("📅 Project Timeline")
st.markdown(f'<p class="summary">{len(items)} items across {len(lanes)} lanes</p>', unsafe_allow_html=True)

if items:
    render_timeline(lanes, projection, selected_id=ss.get("selected_item_id"))
else:
    st.info("No items. Import a JSON file or reset to the sample data.")

st.markdown(
    """
<div class="howto">
  <b>How to use:</b>
  <ul>
    <li>Use the zoom controls to adjust the timeline scale</li>
    <li>Pick an item in the sidebar to rename or reschedule it</li>
    <li>Items are automatically arranged in compact lanes</li>
    <li>Scroll horizontally to see the full timeline</li>
  </ul>
</div>
""",
    unsafe_allow_html=True,
)

# ---- Debug ----
render_debug_panel(ss, lanes)
