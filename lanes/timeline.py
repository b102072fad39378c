# lanes/timeline.py - lane-packed timeline rendered as static HTML
# • One row per lane from assign_lanes, bars placed by Projection
# • Axis ticks + grid lines, "Lane N" labels on the left
# • Colors cycle by item id, names escaped, selected item outlined

import html as _html
import streamlit.components.v1 as components

from lanes.projection import AXIS_HEIGHT, LANE_HEIGHT, canvas_height, format_date, format_range

PALETTE = [
    "#3B82F6",  # blue
    "#10B981",  # green
    "#8B5CF6",  # purple
    "#F97316",  # orange
    "#EC4899",  # pink
    "#6366F1",  # indigo
    "#EF4444",  # red
    "#EAB308",  # yellow
]

def item_color(item) -> str:
    return PALETTE[item.id % len(PALETTE)]

def _tick_html(tick):
    return (
        f'<div class="tick" style="left:{tick.x:.1f}px">'
        f'<div class="tick-mark"></div><span>{_html.escape(tick.label)}</span></div>'
    )

def _grid_html(tick, lane_count):
    h = lane_count * LANE_HEIGHT + 20
    return f'<div class="grid" style="left:{tick.x:.1f}px; height:{h}px"></div>'

def _item_html(item, projection, selected_id):
    left, width = projection.item_box(item)
    name = _html.escape(item.name)
    span = _html.escape(format_range(item))
    title = _html.escape(f"{item.name} ({format_date(item.start)} - {format_date(item.end)})", quote=True)
    cls = "bar selected" if item.id == selected_id else "bar"
    return (
        f'<div class="{cls}" data-id="{item.id}" title="{title}" '
        f'style="left:{left:.1f}px; width:{width:.1f}px; height:{LANE_HEIGHT - 15}px; '
        f'background:{item_color(item)}">'
        f'<div class="ttl">{name}</div><div class="sub">{span}</div></div>'
    )

def build_timeline_html(lanes, projection, selected_id=None) -> str:
    ticks = projection.ticks()
    rows = []
    for n, lane in enumerate(lanes):
        bars = "".join(_item_html(it, projection, selected_id) for it in lane)
        rows.append(
            f'<div class="lane" style="top:{AXIS_HEIGHT + n * LANE_HEIGHT}px; height:{LANE_HEIGHT}px">'
            f'<div class="lane-label">Lane {n + 1}</div>{bars}</div>'
        )

    doc = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=Montserrat:wght@400;600;700&display=swap" rel="stylesheet">
  <style>
    :root { --font: 'Montserrat', ui-sans-serif, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; }
    html, body { background: transparent; margin:0; padding:0; font-family: var(--font); }
    #scroll { overflow:auto; border:1px solid #e5e7eb; border-radius:12px; background:#f9fafb; }
    #canvas { position:relative; width:__WIDTH__px; min-width:__WIDTH__px; height:__HEIGHT__px; }
    .axis { position:absolute; top:0; left:0; height:48px; width:__WIDTH__px; background:#fff; border-bottom:1px solid #e5e7eb; }
    .tick { position:absolute; top:0; transform:translateX(-50%); display:flex; flex-direction:column; align-items:center; }
    .tick-mark { width:1px; height:12px; background:#9ca3af; margin-bottom:4px; }
    .tick span { font-size:11px; color:#4b5563; white-space:nowrap; }
    .grid { position:absolute; top:48px; width:1px; background:#e5e7eb; }
    .lane { position:absolute; left:0; width:__WIDTH__px; }
    .lane-label { position:absolute; left:8px; top:0; height:100%; display:flex; align-items:center; font-size:11px; font-weight:600; color:#6b7280; }
    .bar { position:absolute; top:7px; box-sizing:border-box; padding:6px 10px; border-radius:8px; color:#fff;
           box-shadow:0 1px 3px rgba(0,0,0,.15); overflow:hidden; }
    .bar.selected { outline:3px solid #111827; outline-offset:1px; z-index:10; }
    .ttl { font-weight:600; font-size:13px; white-space:nowrap; overflow:hidden; text-overflow:ellipsis; }
    .sub { font-size:11px; opacity:.9; white-space:nowrap; overflow:hidden; text-overflow:ellipsis; }
  </style>
</head>
<body>
  <div id="scroll">
    <div id="canvas">
      <div class="axis">__TICKS__</div>
      __GRID__
      __LANES__
    </div>
  </div>
</body>
</html>
    """
    return doc.replace("__WIDTH__", f"{projection.width:.0f}") \
              .replace("__HEIGHT__", str(canvas_height(len(lanes)))) \
              .replace("__TICKS__", "".join(_tick_html(t) for t in ticks)) \
              .replace("__GRID__", "".join(_grid_html(t, len(lanes)) for t in ticks)) \
              .replace("__LANES__", "".join(rows))

def render_timeline(lanes, projection, selected_id=None):
    H = canvas_height(len(lanes))
    html = build_timeline_html(lanes, projection, selected_id=selected_id)
    # room for the horizontal scrollbar
    components.html(html, height=H + 24, scrolling=False)
