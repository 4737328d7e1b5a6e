"""Shared types, vector geometry, formatting, and SVG utilities."""

from .types import Point, Polygon, Finite, Unbounded, UNBOUNDED, Volume
from .geometry import (
    GeometryError, ParallelEdgeError, DomainError,
    add_v2, scale_v2, distance,
    rotate_point, rotate_poly,
    edge_level_isect,
    MIN_ANGLE, MAX_ANGLE, check_angle, clamp_angle,
    volume_value, fmt_volume, fmt_angle,
)
from .svg import make_canvas_transform, svg_points
