"""Generate the tilting glass SVG: open glass (left) and sealed glass (right).

Runs the equal-volume bisection from the configured interval, draws both
glasses at the final midpoint and prints the volumes and search trace.

Outputs glass/glass.svg.
"""
import os, sys, datetime

# Ensure project root is on sys.path for package imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from shared.types import Point, Polygon
from shared.geometry import fmt_volume, fmt_angle, volume_value
from shared.svg import make_canvas_transform, svg_points
from glass.container import make_container
from glass.volume import evaluate
from glass.search import run_bisection, sweep_volumes, sign_changes
from glass.constants import (
    BASE_AREA_CM, HEIGHT_RATIO,
    CANVAS_SIZE_PX, BASE_DIAM_PX, CANVAS_PAD_PX, CANVAS_GAP_PX, LABEL_H_PX,
    DEFAULT_ANGLE, DEFAULT_LOW, DEFAULT_HIGH, BISECTION_STEPS, SWEEP_SAMPLES,
)

_BOX = CANVAS_SIZE_PX + 4
_MARGIN = 16
_TITLE_H = 40
SHEET_W = 2 * _BOX + CANVAS_GAP_PX + 2 * _MARGIN
SHEET_H = _TITLE_H + _BOX + LABEL_H_PX + 2 * _MARGIN

# Canvas position of the physical origin (the glass pivot)
OFFSET_OPEN: Point = ((CANVAS_SIZE_PX - BASE_DIAM_PX) / 2, CANVAS_SIZE_PX)  # bottom-centered
OFFSET_SEALED: Point = (CANVAS_SIZE_PX - BASE_DIAM_PX, CANVAS_SIZE_PX)      # bottom-right

# ============================================================
# SVG Helpers
# ============================================================

def glass_panel(out, x0, y0, glass: Polygon, water: Polygon | None, level: float, to_canvas):
    """One canvas: border, water fill, glass outline, dotted level line.

    *to_canvas* maps cm to canvas pixels; the panel is placed at (x0, y0).
    A None water polygon (unbounded sealed volume) draws no fill.
    """
    def _pad(x, y):
        cx, cy = to_canvas(x, y)
        return (cx + CANVAS_PAD_PX, cy + CANVAS_PAD_PX)
    out.append(f'<g transform="translate({x0:.1f},{y0:.1f})">')
    out.append(f'<rect x="0" y="0" width="{_BOX}" height="{_BOX}" fill="white" stroke="black" stroke-width="1"/>')
    if water is not None:
        out.append(f'<polygon points="{svg_points(water, _pad)}" fill="#99C1FF"/>')
    out.append(f'<polyline points="{svg_points(glass, _pad)}" stroke="black" fill="none" stroke-width="2"/>')
    _, ly = _pad(0, level)
    out.append(f'<polyline points="{svg_points([(0, ly), (CANVAS_SIZE_PX + 2, ly)])}"'
               f' stroke="red" fill="none" stroke-dasharray="6"/>')
    out.append('</g>')

def volume_label(out, cx, y, volume):
    """Centered 'Volume: ... cm³' caption; unbounded volumes read ∞."""
    out.append(f'<text x="{cx:.1f}" y="{y:.1f}" text-anchor="middle" font-family="Arial"'
               f' font-size="12" fill="#333">Volume: {fmt_volume(volume)} cm³</text>')

# ============================================================
# Geometry computation
# ============================================================

def build_glass_data(angle=DEFAULT_ANGLE, low=DEFAULT_LOW, high=DEFAULT_HIGH,
                     steps=BISECTION_STEPS, base_area=BASE_AREA_CM, height_ratio=HEIGHT_RATIO):
    """Compute everything the SVG and the report need.

    With steps > 0 the glasses are drawn at the last bisection midpoint,
    otherwise at *angle*.
    """
    container = make_container(base_area, height_ratio)
    trace = run_bisection(container, low, high, steps)
    if trace:
        angle = trace[-1].midpoint
    ev = evaluate(container, angle)
    scale = 1 / container.resolution
    _angles, gaps = sweep_volumes(container, SWEEP_SAMPLES)
    return {
        "container": container,
        "angle": angle,
        "low": trace[-1].low if trace else low,
        "high": trace[-1].high if trace else high,
        "trace": trace,
        "ev": ev,
        "to_canvas_open": make_canvas_transform(scale, OFFSET_OPEN),
        "to_canvas_sealed": make_canvas_transform(scale, OFFSET_SEALED),
        "sign_changes": sign_changes(gaps),
    }

# ============================================================
# SVG rendering
# ============================================================

def render_glass_svg(data) -> str:
    """Render both glasses with captions and a title line."""
    ev = data["ev"]; container = data["container"]
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{SHEET_W}" height="{SHEET_H}"'
           f' viewBox="0 0 {SHEET_W} {SHEET_H}">',
           f'<rect width="{SHEET_W}" height="{SHEET_H}" fill="white"/>']

    out.append(f'<text x="{_MARGIN}" y="{_MARGIN + 12}" font-family="Arial" font-size="13"'
               f' font-weight="bold" fill="#333">Angle: {fmt_angle(data["angle"])}'
               f'   Range: {data["low"]:.2f}-{data["high"]:.2f}°</text>')
    _now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    out.append(f'<text x="{_MARGIN}" y="{_MARGIN + 28}" font-family="Arial" font-size="8" fill="#999">'
               f'Base area {container.base_area:.2f} cm², height {container.height:.2f} cm.'
               f' Generated {_now}</text>')

    top = _MARGIN + _TITLE_H
    left_x = _MARGIN; right_x = _MARGIN + _BOX + CANVAS_GAP_PX
    glass_panel(out, left_x, top, container.corners, ev.open_water, ev.level,
                data["to_canvas_open"])
    glass_panel(out, right_x, top, ev.tilted, ev.sealed_water, ev.level,
                data["to_canvas_sealed"])

    label_y = top + _BOX + LABEL_H_PX - 6
    volume_label(out, left_x + _BOX / 2, label_y, ev.open_volume)
    volume_label(out, right_x + _BOX / 2, label_y, ev.sealed_volume)

    out.append('</svg>')
    return "\n".join(out)

# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    data = build_glass_data()
    svg_content = render_glass_svg(data)
    container = data["container"]; ev = data["ev"]

    svg_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "glass.svg")
    with open(svg_path, "w") as f:
        f.write(svg_content)

    print(f"Glass written to {svg_path}")
    print(f"Base area:     {container.base_area:.4f} cm²")
    print(f"Diameter:      {container.diameter:.4f} cm")
    print(f"Height:        {container.height:.4f} cm")
    print(f"Angle:         {fmt_angle(data['angle'])}")
    print(f"Open volume:   {fmt_volume(ev.open_volume)} cm³")
    print(f"Sealed volume: {fmt_volume(ev.sealed_volume)} cm³")
    print(f"Sign changes over sweep: {data['sign_changes']}")
    print()
    for i, step in enumerate(data["trace"]):
        print(f"  step {i+1:2d}  mid {step.midpoint:12.8f}  range [{step.low:.8f}, {step.high:.8f}]")
    print(f"Final gap (open - sealed): {ev.open_volume - volume_value(ev.sealed_volume):+.3e} cm³")
