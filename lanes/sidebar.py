import hashlib
import streamlit as st

from lanes.projection import ZOOM_STEP, format_range


def _item_label(it):
    return f"{it.name or '(untitled)'} · {format_range(it)} · #{it.id}"

def render_sidebar(state, export_items):
    """Draw the sidebar controls. Returns a dict of requested actions for app.py to apply."""
    actions = {}
    items = state["items"]
    interaction = state["interaction"]
    item_by_id = {it.id: it for it in items}

    with st.sidebar:
        # --- Zoom ---
        st.header("🔍 Zoom")
        z1, z2, z3 = st.columns([2, 1, 2])
        if z1.button("Zoom out", use_container_width=True):
            actions["zoom"] = -ZOOM_STEP
        z2.markdown(f"**{round(state['zoom'] * 100)}%**")
        if z3.button("Zoom in", use_container_width=True):
            actions["zoom"] = ZOOM_STEP

        # --- Item picker ---
        st.header("✏️ Edit item")
        options = [None] + list(item_by_id.keys())
        current = state.get("selected_item_id")
        if current not in options:
            current = None
        selected = st.selectbox(
            "Select item",
            options=options,
            index=options.index(current),
            format_func=lambda v: "(none)" if v is None else _item_label(item_by_id[v]),
            disabled=interaction.editing_id is not None,
        )
        state["selected_item_id"] = selected

        if selected is not None:
            item = item_by_id[selected]

            # --- Rename (Editing mode) ---
            if interaction.editing_id == selected:
                with st.form("rename_form", clear_on_submit=False):
                    st.text_input("Name", key="rename_draft")
                    b1, b2 = st.columns(2)
                    save = b1.form_submit_button("✔ Save", type="primary", use_container_width=True)
                    cancel = b2.form_submit_button("✖ Cancel", use_container_width=True)
                if save:
                    actions["rename_save"] = state.get("rename_draft", "")
                if cancel:
                    actions["rename_cancel"] = True
            else:
                if st.button("Rename", use_container_width=True):
                    actions["rename_start"] = selected

            # --- Reschedule (form version of dragging the bar) ---
            with st.form("move_form", clear_on_submit=False):
                how = st.radio("Reschedule by", ["New start date", "Shift by days"], horizontal=True)
                new_start = st.date_input("New start", value=item.start)
                shift = st.number_input("Shift by days", value=0, step=1, min_value=-3650, max_value=3650)
                st.caption(f"Only the chosen option applies. Duration stays {item.duration_days} day(s).")
                moved = st.form_submit_button(
                    "Reschedule",
                    use_container_width=True,
                    disabled=interaction.editing_id is not None,
                )
            if moved:
                if how == "Shift by days":
                    actions["shift"] = (selected, int(shift))
                else:
                    actions["move"] = (selected, new_start)

        # --- Utilities ---
        st.divider()
        st.subheader("🧰 Utilities")
        if st.button("Reset (sample data)", type="secondary"):
            actions["reset"] = True

        st.download_button("⬇️ Export JSON", data=export_items(items),
                           file_name="timeline.json", mime="application/json")

        uploaded = st.file_uploader("Import JSON", type=["json"])
        if uploaded is not None:
            text = uploaded.read().decode("utf-8", errors="replace")
            h = hashlib.sha256(text.encode("utf-8")).hexdigest()
            if h != state.get("_last_import_hash", ""):
                state["_last_import_hash"] = h
                actions["import"] = text

    return actions
