"""Water polygons and volumes for the open and sealed glass at one tilt angle.

The open glass spills: its surface stays at world height *level*, which is
the height reached by the tilted glass's bottom-right corner. The sealed
glass keeps its water wedged into the lower corner, bounded by the same level.
"""
from typing import NamedTuple

from shared.types import Point, Polygon, Finite, UNBOUNDED, Volume
from shared.geometry import ParallelEdgeError, distance, edge_level_isect
from glass.container import Container, tilt_container


class Evaluation(NamedTuple):
    """Everything derived from one tilt angle."""
    tilted: Polygon                # tilted glass corners
    open_water: Polygon            # untilted coordinates
    sealed_water: Polygon | None   # None when the sealed volume is unbounded
    level: float                   # world height shared by both variants
    open_volume: float             # cm³
    sealed_volume: Volume          # cm³, or Unbounded


def level_point(tilted: Polygon, level: float, resolution: float) -> Point:
    """Where height *level* crosses the tilted left wall (edge 0-1).

    Raises ParallelEdgeError when the wall is flatter than *resolution*.
    """
    return edge_level_isect(tilted[0], tilted[1], level, resolution)


def open_water(corners: Polygon, level: float) -> Polygon:
    """Upright glass filled to *level*. Not clamped to the glass height."""
    return [(corners[0][0], level), corners[1], corners[2], (corners[3][0], level)]


def sealed_water(tilted: Polygon, level: float, resolution: float) -> Polygon:
    """Triangle [wall crossing, pivot, low corner] in the tilted glass."""
    return [level_point(tilted, level, resolution), tilted[1], tilted[2]]


def evaluate(container: Container, angle_deg: float) -> Evaluation:
    """Tilt the glass by angle_deg and compute both water bodies.

    Open volume is the prism base_area * level. Sealed volume is
    base_area * h / 2 with h the wetted length of the left wall; it is
    Unbounded when the left wall lies flat.
    """
    tilted = tilt_container(container, angle_deg)
    level = tilted[2][1]
    open_poly = open_water(container.corners, level)
    open_volume = container.base_area * level

    try:
        sealed_poly = sealed_water(tilted, level, container.resolution)
    except ParallelEdgeError:
        return Evaluation(tilted, open_poly, None, level, open_volume, UNBOUNDED)
    h = distance(sealed_poly[0], sealed_poly[1])
    return Evaluation(tilted, open_poly, sealed_poly, level, open_volume,
                      Finite(container.base_area * h / 2))
