"""Chair grid generation for a single rectangular region."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..value_objects import ChairPosition, Rect, Region
from .exclusion import ExclusionEvaluator

__all__ = ["GridResult", "generate_grid", "grid_dimensions"]


@dataclass(frozen=True)
class GridResult:
    """Chair slots generated for one region.

    Attributes:
        rows: Number of rows that fit.
        cols: Number of columns that fit.
        padding_cm: Left (and right) padding used to center the columns.
            May be negative for odd inputs; it is not an error.
        chairs: All slots, excluded ones included.
    """

    rows: int
    cols: int
    padding_cm: float
    chairs: tuple[ChairPosition, ...]


def grid_dimensions(
    region: Rect,
    cell_width: float,
    cell_depth: float,
) -> tuple[int, int]:
    """Return (rows, cols) of whole cells fitting in a region.

    Non-positive pitch or region size yields zero instead of an error.
    """
    if cell_width <= 0 or cell_depth <= 0:
        return 0, 0
    cols = max(0, math.floor(region.width / cell_width))
    rows = max(0, math.floor(region.height / cell_depth))
    return rows, cols


def generate_grid(
    region_rect: Rect,
    chair_width: float,
    chair_depth: float,
    side_gap: float,
    front_gap: float,
    region: Region,
    evaluator: ExclusionEvaluator,
) -> GridResult:
    """Fill a region with a grid of chair slots.

    Columns are centered horizontally; rows start flush at the top of the
    region and the front gap only separates rows. Partial seats are never
    produced.

    Args:
        region_rect: Area to fill, in global coordinates.
        chair_width: Chair footprint width.
        chair_depth: Chair footprint depth.
        side_gap: Gap between neighbouring chairs in a row.
        front_gap: Gap between rows.
        region: Tag recorded on every generated slot.
        evaluator: Blocker test applied to every slot.

    Returns:
        GridResult with the dimensions and every generated slot.
    """
    cell_width = chair_width + side_gap
    cell_depth = chair_depth + front_gap
    rows, cols = grid_dimensions(region_rect, cell_width, cell_depth)

    if rows == 0 or cols == 0:
        return GridResult(rows=rows, cols=cols, padding_cm=0.0, chairs=())

    used_width = cols * cell_width - side_gap
    padding = (region_rect.width - used_width) / 2

    chairs: list[ChairPosition] = []
    for r in range(rows):
        y = region_rect.y + r * cell_depth
        for c in range(cols):
            x = region_rect.x + padding + c * cell_width
            excluded = evaluator.is_excluded(Rect(x, y, chair_width, chair_depth))
            chairs.append(
                ChairPosition(
                    row=r, col=c, region=region, x_cm=x, y_cm=y, excluded=excluded
                )
            )

    return GridResult(rows=rows, cols=cols, padding_cm=padding, chairs=tuple(chairs))
