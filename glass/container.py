"""Container geometry: the upright glass cross-section and its tilted copy."""
import math
from typing import NamedTuple

from shared.types import Point, Polygon
from shared.geometry import DomainError, rotate_poly, check_angle
from glass.constants import BASE_DIAM_PX


class Container(NamedTuple):
    """Axial cross-section of the cylindrical glass, in cm."""
    corners: Polygon     # [top-left, bottom-left, bottom-right, top-right]
    base_area: float     # cm²
    diameter: float      # cm
    height: float        # cm
    resolution: float    # cm per canvas pixel

    @property
    def pivot(self) -> Point:
        """Bottom-left corner, held fixed while tilting."""
        return self.corners[1]


def make_container(base_area: float, height_ratio: float,
                   diameter_px: float = BASE_DIAM_PX) -> Container:
    """Build the upright glass from its base area and height/diameter ratio.

    *diameter_px* is the drawn width of the base; it fixes the resolution
    below which an edge counts as flat.
    """
    if base_area <= 0:
        raise DomainError(f"Base area must be positive: {base_area}")
    if height_ratio <= 0:
        raise DomainError(f"Height ratio must be positive: {height_ratio}")
    d = math.sqrt(base_area / math.pi) * 2
    h = height_ratio * d
    corners = [(0.0, h), (0.0, 0.0), (d, 0.0), (d, h)]
    return Container(corners, base_area, d, h, d / diameter_px)


def tilt_container(container: Container, angle_deg: float) -> Polygon:
    """Corners of the glass tipped over its pivot by angle_deg.

    Turns counter-clockwise by angle_deg (rotate_point with 360 - angle), so
    the bottom-right corner rises to diameter * sin(angle). Zero is the
    identity.
    """
    check_angle(angle_deg)
    return rotate_poly(container.corners, 360 - angle_deg, container.pivot)
