"""Pure vector functions, rotation, edge utilities, and formatting."""
import math
from .types import Point, Polygon, Finite, Unbounded, Volume

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class ParallelEdgeError(GeometryError):
    """Raised when an edge is too close to horizontal to cross a level."""

class DomainError(GeometryError):
    """Raised for inputs outside the modelled domain (angles, areas, ratios)."""

# ============================================================
# Vector Utilities
# ============================================================
def add_v2(a: Point, b: Point) -> Point:
    """Component-wise sum a + b."""
    return (a[0]+b[0], a[1]+b[1])

def scale_v2(v: Point, k: float) -> Point:
    """Vector v scaled by k."""
    return (v[0]*k, v[1]*k)

def distance(a: Point, b: Point) -> float:
    """Euclidean distance between a and b."""
    dx, dy = add_v2(a, scale_v2(b, -1))
    return math.sqrt(dx*dx+dy*dy)

# ============================================================
# Rotation
# ============================================================
def rotate_point(p: Point, angle_deg: float, pivot: Point) -> Point:
    """Rotate p about pivot, clockwise by angle_deg in a y-up frame.

    The rotation matrix uses (360 - angle_deg) in radians, so a call with
    360 - a turns the point counter-clockwise by a. The pivot maps to itself
    exactly for every angle.
    """
    a = math.radians(360 - angle_deg)
    dx, dy = add_v2(p, scale_v2(pivot, -1))
    return add_v2(pivot, (dx*math.cos(a) - dy*math.sin(a),
                          dx*math.sin(a) + dy*math.cos(a)))

def rotate_poly(poly: Polygon, angle_deg: float, pivot: Point) -> Polygon:
    """Rotate every vertex of poly about pivot, keeping vertex order."""
    return [rotate_point(p, angle_deg, pivot) for p in poly]

# ============================================================
# Edge Utilities
# ============================================================
def edge_level_isect(p0: Point, p1: Point, level: float, min_rise: float) -> Point:
    """Point on the line p1 -> p0 at height y = level.

    Interpolates p = k*p0 + (1-k)*p1 with k = (level - y1) / (y0 - y1).
    The point may lie beyond the segment ends (k outside [0, 1]).
    Raises ParallelEdgeError if |y0 - y1| < min_rise.
    """
    rise = add_v2(p0, scale_v2(p1, -1))[1]
    if abs(rise) < min_rise:
        raise ParallelEdgeError(f"Edge too flat: rise={rise:.3e} < {min_rise:.3e}")
    k = (level-p1[1])/rise
    x, _ = add_v2(scale_v2(p0, k), scale_v2(p1, 1-k))
    return (x, level)

# ============================================================
# Angle Helpers
# ============================================================
MIN_ANGLE = 0.0
MAX_ANGLE = 90.0

def check_angle(angle_deg: float) -> float:
    """Return angle_deg unchanged, or raise DomainError if outside [0, 90]."""
    if not MIN_ANGLE <= angle_deg <= MAX_ANGLE:
        raise DomainError(f"Angle out of range: {angle_deg} not in [{MIN_ANGLE:g}, {MAX_ANGLE:g}]")
    return angle_deg

def clamp_angle(angle_deg: float) -> float:
    """Clamp an angle into [0, 90]. For callers; the geometry never clamps."""
    return min(MAX_ANGLE, max(MIN_ANGLE, angle_deg))

# ============================================================
# Formatting Helpers
# ============================================================
def volume_value(v: Volume) -> float:
    """Numeric value of a volume; Unbounded maps to +inf."""
    if isinstance(v, Unbounded):
        return math.inf
    return v.value

def fmt_volume(v: Volume | float) -> str:
    """Format a volume in cm³ to two decimals, or '∞' when unbounded."""
    if isinstance(v, Unbounded):
        return "∞"
    if isinstance(v, Finite):
        v = v.value
    return f"{v:.2f}"

def fmt_angle(a: float) -> str:
    """Format an angle in degrees, e.g. '45.00°'."""
    return f"{a:.2f}°"
