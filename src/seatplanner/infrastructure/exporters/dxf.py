"""DXF format exporter for seat plans.

Generates 2D DXF files (R2010 format) for CAD tools. Drawing units are
centimeters; the y axis is flipped so the front of the hall is at the top
of the drawing, as it is on screen.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf

from seatplanner.domain import Rect
from seatplanner.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from seatplanner.application.dtos import LayoutOutput, ProjectOutput


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "HALL": {"color": 7, "linetype": "CONTINUOUS"},  # White - main hall outline
    "WINGS": {"color": 3, "linetype": "CONTINUOUS"},  # Green - wing outlines
    "CHAIRS": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - usable chairs
    "EXCLUDED": {"color": 8, "linetype": "DASHED"},  # Gray - blocked slots
    "BLOCKERS": {"color": 1, "linetype": "CONTINUOUS"},  # Red - altar, zones, furniture
    "AC": {"color": 4, "linetype": "CONTINUOUS"},  # Cyan - AC units
    "LABELS": {"color": 2, "linetype": "CONTINUOUS"},  # Yellow - text labels
}

# Horizontal gap between venues in one drawing, in cm
VENUE_SPACING_CM = 500.0

# $INSUNITS code for centimeters
INSUNITS_CM = 5


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports seat plans to DXF.

    Every venue of a project is drawn side by side, left to right, with
    hall and wing outlines, chair slots, blockers, AC units and labels on
    separate layers.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(self, include_excluded: bool = True) -> None:
        """Initialize the DXF exporter.

        Args:
            include_excluded: Whether to draw excluded chair slots.
        """
        self.include_excluded = include_excluded

    def export(self, output: ProjectOutput, path: Path) -> None:
        """Export a project to a DXF file."""
        if not output.venues:
            logger.warning("No venues to export")
            return

        doc = self._build_document(output)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, output: ProjectOutput) -> str:
        """Export a project as DXF text."""
        if not output.venues:
            return ""

        doc = self._build_document(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build_document(self, output: ProjectOutput) -> Drawing:
        doc = self._create_document()
        msp = doc.modelspace()

        offset_x = 0.0
        for venue_output in output.venues:
            bounds = venue_output.bounds
            # Shift so the venue's bounding box starts at offset_x
            self._draw_venue(msp, venue_output, offset_x - bounds.x)
            offset_x += bounds.width + VENUE_SPACING_CM

        return doc

    def _create_document(self) -> Drawing:
        """Create a new DXF document with layers configured."""
        doc = ezdxf.new("R2010")
        doc.header["$INSUNITS"] = INSUNITS_CM
        self._setup_layers(doc)
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        """Create DXF layers with appropriate colors and linetypes.

        Args:
            doc: DXF document to add layers to.
        """
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[10.0, 5.0, -5.0],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _draw_venue(self, msp: Modelspace, output: LayoutOutput, offset_x: float) -> None:
        """Draw one venue.

        Args:
            msp: DXF modelspace to draw in.
            output: The venue layout to draw.
            offset_x: Horizontal shift applied to every coordinate.
        """
        venue = output.venue
        layout = output.layout

        self._draw_rect(msp, venue.main_hall, offset_x, "HALL")
        self._draw_text(
            msp,
            f"{venue.name} - {layout.total_chairs} chairs",
            offset_x + venue.width_cm / 2,
            20.0,
            25.0,
        )

        for wing in layout.wings_info:
            self._draw_rect(msp, wing.rect, offset_x, "WINGS")
            self._draw_text(
                msp,
                f"Wing {wing.wing_id}",
                offset_x + wing.rect.x + wing.rect.width / 2,
                -(wing.rect.y + wing.rect.height / 2),
                15.0,
            )

        for chair in layout.chairs:
            if chair.excluded and not self.include_excluded:
                continue
            chair_rect = Rect(chair.x_cm, chair.y_cm, venue.chair_width_cm, venue.chair_depth_cm)
            self._draw_rect(msp, chair_rect, offset_x, "EXCLUDED" if chair.excluded else "CHAIRS")

        if venue.altar is not None and venue.altar.has_area:
            self._draw_rect(msp, venue.altar, offset_x, "BLOCKERS")
            self._draw_label(msp, venue.altar, offset_x, "ALTAR")
        for zone in venue.exclusion_zones:
            self._draw_rect(msp, zone.rect, offset_x, "BLOCKERS")
            if zone.label:
                self._draw_label(msp, zone.rect, offset_x, zone.label)
        for item in venue.furniture:
            self._draw_rect(msp, item.rect, offset_x, "BLOCKERS")
            self._draw_label(msp, item.rect, offset_x, item.label or item.furniture_type.value)

        for unit in output.ac_units:
            self._draw_rect(msp, unit.rect, offset_x, "AC")

    def _draw_rect(self, msp: Modelspace, rect: Rect, offset_x: float, layer: str) -> None:
        """Draw a rectangle as a closed polyline with y flipped."""
        x = rect.x + offset_x
        top = -rect.y
        bottom = -rect.bottom
        points = [
            (x, bottom),
            (x + rect.width, bottom),
            (x + rect.width, top),
            (x, top),
            (x, bottom),
        ]
        msp.add_lwpolyline(points, dxfattribs={"layer": layer})

    def _draw_label(self, msp: Modelspace, rect: Rect, offset_x: float, text: str) -> None:
        height = max(5.0, min(20.0, min(rect.width, rect.height) * 0.3))
        self._draw_text(
            msp,
            text,
            offset_x + rect.x + rect.width / 2,
            -(rect.y + rect.height / 2),
            height,
        )

    def _draw_text(self, msp: Modelspace, text: str, x: float, y: float, height: float) -> None:
        msp.add_mtext(
            text,
            dxfattribs={
                "layer": "LABELS",
                "char_height": height,
                "insert": (x, y),
                "attachment_point": 5,  # MIDDLE_CENTER
            },
        )


__all__ = ["DxfExporter", "LAYERS"]
