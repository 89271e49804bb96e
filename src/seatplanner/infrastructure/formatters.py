"""Output formatters for seat layouts."""

from __future__ import annotations

import json
import math
from typing import Any

from seatplanner.application.dtos import LayoutOutput, ProjectOutput
from seatplanner.domain import ChairPosition, MainHallRegion, Rect, Region, WingRegion


def _number(value: float) -> str:
    """Render whole numbers without a trailing .0."""
    return f"{value:g}"


def region_to_dict(region: Region) -> dict[str, Any]:
    """Serialize a region tag as a discriminated dictionary."""
    if isinstance(region, MainHallRegion):
        return {"kind": "main", "block_index": region.block_index}
    return {"kind": "wing", "wing_id": region.wing_id}


def rect_to_dict(rect: Rect) -> dict[str, float]:
    return {
        "x_cm": rect.x,
        "y_cm": rect.y,
        "width_cm": rect.width,
        "height_cm": rect.height,
    }


def chair_to_dict(chair: ChairPosition) -> dict[str, Any]:
    return {
        "row": chair.row,
        "col": chair.col,
        "region": region_to_dict(chair.region),
        "x_cm": chair.x_cm,
        "y_cm": chair.y_cm,
        "excluded": chair.excluded,
    }


def layout_output_to_dict(
    output: LayoutOutput, include_chairs: bool = True
) -> dict[str, Any]:
    """Convert a LayoutOutput into JSON-ready primitives."""
    venue = output.venue
    layout = output.layout
    data: dict[str, Any] = {
        "venue": {
            "id": venue.id,
            "name": venue.name,
            "width_m": venue.width_m,
            "length_m": venue.length_m,
        },
        "summary": {
            "total_chairs": layout.total_chairs,
            "total_rows": layout.total_rows,
            "excluded_slots": layout.excluded_chairs,
            "capacity": layout.capacity,
            "total_area_m2": layout.total_area_m2,
            "usable_area_m2": layout.usable_area_m2,
            "utilization_percent": layout.utilization_percent,
        },
        "blocks": [
            {
                "block_index": block.block_index,
                "cols": block.cols,
                "x_start_cm": block.x_start_cm,
                "width_cm": block.width_cm,
            }
            for block in layout.blocks_info
        ],
        "wings": [
            {
                "wing_id": wing.wing_id,
                "side": wing.side.value,
                "rect": rect_to_dict(wing.rect),
                "rows": wing.rows,
                "cols": wing.cols,
            }
            for wing in layout.wings_info
        ],
        "bounds": rect_to_dict(output.bounds),
        "ac_units": [
            {"wall": unit.wall.value, "index": unit.index, "rect": rect_to_dict(unit.rect)}
            for unit in output.ac_units
        ],
    }
    if include_chairs:
        data["chairs"] = [chair_to_dict(chair) for chair in layout.chairs]
    return data


def project_output_to_dict(
    output: ProjectOutput, include_chairs: bool = True
) -> dict[str, Any]:
    """Convert a ProjectOutput into JSON-ready primitives."""
    if not output.is_valid:
        return {"project_name": output.project_name, "errors": output.errors}
    return {
        "project_name": output.project_name,
        "total_chairs": output.total_chairs,
        "venues": [
            layout_output_to_dict(venue, include_chairs=include_chairs)
            for venue in output.venues
        ],
    }


class SummaryFormatter:
    """Formats the seat count and area summary of one venue."""

    def format(self, output: LayoutOutput) -> str:
        venue = output.venue
        layout = output.layout
        lines = [
            f"SEAT LAYOUT SUMMARY - {venue.name}",
            "=" * 60,
            f"Total chairs:       {layout.total_chairs}",
            f"Rows:               {layout.total_rows}",
            f"Blocks:             {len(layout.blocks_info)}",
            f"Columns per block:  {layout.cols_per_block}",
            f"Excluded slots:     {layout.excluded_chairs}",
            f"Total area:         {layout.total_area_m2:.1f} m²",
            f"Seating area:       {layout.usable_area_m2:.1f} m²",
            f"Utilization:        {layout.utilization_percent:.1f}%",
        ]

        if layout.wings_info:
            lines.append("")
            lines.append("Wings:")
            for wing in layout.wings_info:
                seated = len(
                    [c for c in layout.chairs_in(WingRegion(wing.wing_id)) if not c.excluded]
                )
                lines.append(
                    f"  {wing.wing_id} ({wing.side.value}): {wing.rows} rows x "
                    f"{wing.cols} cols, {seated} chairs"
                )

        lines.append("")
        lines.append(f"Venue: {_number(venue.width_m)}m x {_number(venue.length_m)}m")
        lines.append(
            f"Chairs: {_number(venue.chair_width_cm)}cm x {_number(venue.chair_depth_cm)}cm"
        )
        lines.append(
            f"Gaps: side {_number(venue.side_gap_cm)}cm, front {_number(venue.front_gap_cm)}cm"
        )
        lines.append(
            f"Center aisles: {venue.aisle_count} x {_number(venue.aisle_width_cm)}cm"
        )
        if venue.left_aisle_cm or venue.right_aisle_cm:
            lines.append(
                f"Side aisles: left {_number(venue.left_aisle_cm)}cm, "
                f"right {_number(venue.right_aisle_cm)}cm"
            )
        if venue.top_aisle_cm or venue.bottom_aisle_cm:
            lines.append(
                f"Cross aisles: front {_number(venue.top_aisle_cm)}cm, "
                f"back {_number(venue.bottom_aisle_cm)}cm"
            )
        if venue.ac.count:
            lines.append(
                f"AC: {venue.ac.count} units "
                f"({_number(venue.ac.width_cm)}x{_number(venue.ac.depth_cm)}cm)"
            )

        return "\n".join(lines)


class ProjectSummaryFormatter:
    """Formats every venue summary followed by the grand total."""

    def __init__(self, summary_formatter: SummaryFormatter | None = None) -> None:
        self._summary = summary_formatter or SummaryFormatter()

    def format(self, output: ProjectOutput) -> str:
        if not output.is_valid:
            return "\n".join(f"Error: {error}" for error in output.errors)

        sections = [self._summary.format(venue) for venue in output.venues]
        footer = [
            "-" * 60,
            f"PROJECT TOTAL ({output.project_name}): "
            f"{output.total_chairs} chairs in {len(output.venues)} venue(s)",
        ]
        return "\n\n".join(sections) + "\n\n" + "\n".join(footer)


class LayoutDiagramFormatter:
    """Formats ASCII plans of a venue.

    Legend: '#' chair, 'x' excluded slot, 'A' altar, 'F' furniture,
    '/' exclusion zone, '.' open floor of the hall or a wing.
    """

    def format(self, output: LayoutOutput, width: int = 72) -> str:
        """Render the venue scaled to fit the given character width."""
        bounds = output.bounds
        if width < 2 or bounds.width <= 0 or bounds.height <= 0:
            return "No venue area to display."

        cm_per_col = bounds.width / width
        # Terminal cells are roughly twice as tall as they are wide
        cm_per_row = cm_per_col * 2
        height = max(1, math.ceil(bounds.height / cm_per_row))
        grid = [[" " for _ in range(width)] for _ in range(height)]

        def col_of(x: float) -> int:
            return min(width - 1, max(0, int((x - bounds.x) / cm_per_col)))

        def row_of(y: float) -> int:
            return min(height - 1, max(0, int((y - bounds.y) / cm_per_row)))

        def fill(rect: Rect, char: str) -> None:
            if not rect.has_area:
                return
            for r in range(row_of(rect.y), row_of(rect.bottom - 1e-9) + 1):
                for c in range(col_of(rect.x), col_of(rect.right - 1e-9) + 1):
                    grid[r][c] = char

        venue = output.venue
        fill(venue.main_hall, ".")
        for wing in output.layout.wings_info:
            fill(wing.rect, ".")

        for chair in output.layout.chairs:
            center_x = chair.x_cm + venue.chair_width_cm / 2
            center_y = chair.y_cm + venue.chair_depth_cm / 2
            grid[row_of(center_y)][col_of(center_x)] = "x" if chair.excluded else "#"

        for zone in venue.exclusion_zones:
            fill(zone.rect, "/")
        for item in venue.furniture:
            fill(item.rect, "F")
        if venue.altar is not None:
            fill(venue.altar, "A")

        lines = [
            f"SEAT PLAN - {venue.name}",
            "=" * width,
            *("".join(row).rstrip() for row in grid),
            "",
            f"Scale: 1 column = {cm_per_col:.0f}cm, 1 line = {cm_per_row:.0f}cm",
            f"Chairs: {output.layout.total_chairs} "
            f"(#: chair, x: excluded, A: altar, F: furniture, /: no-chair zone)",
        ]
        return "\n".join(lines)


class JsonExporter:
    """Exports project layouts as JSON."""

    def __init__(self, include_chairs: bool = True, indent: int | None = 2) -> None:
        self.include_chairs = include_chairs
        self.indent = indent

    def export(self, output: ProjectOutput) -> str:
        """Export a project output as a JSON string."""
        data = project_output_to_dict(output, include_chairs=self.include_chairs)
        return json.dumps(data, indent=self.indent)
