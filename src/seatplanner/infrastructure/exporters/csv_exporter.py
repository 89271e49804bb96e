"""CSV exporter listing every chair slot of a project."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from seatplanner.domain import MainHallRegion
from seatplanner.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from seatplanner.application.dtos import ProjectOutput


logger = logging.getLogger(__name__)

CSV_HEADER = [
    "venue_id",
    "region",
    "block_index",
    "wing_id",
    "row",
    "col",
    "x_cm",
    "y_cm",
    "width_cm",
    "depth_cm",
    "excluded",
]


@ExporterRegistry.register("csv")
class CsvExporter:
    """Exports one CSV row per chair slot, excluded slots included.

    Rows are 1-based in the file so they read like printed seat labels.
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"
    media_type: ClassVar[str] = "text/csv"

    def export(self, output: ProjectOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8", newline="")
        logger.info(f"Exported CSV to {path}")

    def export_string(self, output: ProjectOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_HEADER)

        for venue_output in output.venues:
            venue = venue_output.venue
            for chair in venue_output.layout.chairs:
                region = chair.region
                if isinstance(region, MainHallRegion):
                    kind, block_index, wing_id = "main", region.block_index, ""
                else:
                    kind, block_index, wing_id = "wing", "", region.wing_id
                writer.writerow(
                    [
                        venue.id,
                        kind,
                        block_index,
                        wing_id,
                        chair.row + 1,
                        chair.col + 1,
                        f"{chair.x_cm:.1f}",
                        f"{chair.y_cm:.1f}",
                        f"{venue.chair_width_cm:g}",
                        f"{venue.chair_depth_cm:g}",
                        "yes" if chair.excluded else "no",
                    ]
                )

        return buffer.getvalue()
