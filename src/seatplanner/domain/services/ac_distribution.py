"""Distribution of AC units around the main hall perimeter.

Units are shared evenly between the four walls. Leftover units go to the
top, right, bottom and left walls in that order. On each wall the units are
spaced evenly, centered on equal subdivisions of the wall length.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..value_objects import AcPlacement, Rect, Wall

if TYPE_CHECKING:
    from ..entities import AcConfig

__all__ = ["WALL_PRIORITY", "distribute_ac_units", "wall_assignment"]

WALL_PRIORITY: tuple[Wall, ...] = (Wall.TOP, Wall.RIGHT, Wall.BOTTOM, Wall.LEFT)


def wall_assignment(count: int) -> dict[Wall, int]:
    """Return how many units each wall receives.

    Examples:
        >>> wall_assignment(10)[Wall.TOP], wall_assignment(10)[Wall.LEFT]
        (3, 2)
    """
    count = max(0, count)
    base, remainder = divmod(count, len(WALL_PRIORITY))
    return {
        wall: base + (1 if i < remainder else 0)
        for i, wall in enumerate(WALL_PRIORITY)
    }


def distribute_ac_units(
    ac: AcConfig, tent_width_cm: float, tent_length_cm: float
) -> list[AcPlacement]:
    """Place AC units against the walls of the main hall.

    Top and bottom units use the horizontal footprint (width x depth);
    left and right units are rotated (depth x width). Rectangles are not
    clamped to the wall, so units near a short wall's corners may overhang.

    Args:
        ac: AC unit count and footprint.
        tent_width_cm: Main hall width.
        tent_length_cm: Main hall length.

    Returns:
        Placements grouped by wall in priority order.
    """
    placements: list[AcPlacement] = []
    half = ac.width_cm / 2

    for wall, k in wall_assignment(ac.count).items():
        if k == 0:
            continue
        horizontal = wall in (Wall.TOP, Wall.BOTTOM)
        wall_length = tent_width_cm if horizontal else tent_length_cm
        spacing = wall_length / (k + 1)

        for i in range(1, k + 1):
            center = spacing * i
            if wall == Wall.TOP:
                rect = Rect(center - half, 0.0, ac.width_cm, ac.depth_cm)
            elif wall == Wall.BOTTOM:
                rect = Rect(
                    center - half, tent_length_cm - ac.depth_cm, ac.width_cm, ac.depth_cm
                )
            elif wall == Wall.LEFT:
                rect = Rect(0.0, center - half, ac.depth_cm, ac.width_cm)
            else:
                rect = Rect(
                    tent_width_cm - ac.depth_cm, center - half, ac.depth_cm, ac.width_cm
                )
            placements.append(AcPlacement(wall=wall, index=i, rect=rect))

    return placements
