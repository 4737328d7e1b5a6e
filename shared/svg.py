"""Canvas transform factory and SVG polygon helpers."""
from typing import Callable
from .types import Point, Polygon

def make_canvas_transform(scale: float, offset: Point) -> Callable[[float, float], tuple[float, float]]:
    """Create to_canvas closure mapping physical (x, y) to canvas pixels.

    Scales by *scale* px per unit, flips the y axis (canvas y grows down)
    and shifts by *offset*, which is the canvas position of the origin.
    """
    ox, oy = offset
    def to_canvas(x: float, y: float) -> tuple[float, float]:
        return (x * scale + ox, -y * scale + oy)
    return to_canvas

def svg_points(points: Polygon, to_canvas=None) -> str:
    """SVG points attribute for a polyline/polygon, optionally transformed."""
    if to_canvas is not None:
        points = [to_canvas(*p) for p in points]
    return " ".join(f"{x:.1f},{y:.1f}" for x, y in points)
