"""JSON exporter for seat layouts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from seatplanner.infrastructure.exporters.base import ExporterRegistry
from seatplanner.infrastructure.formatters import JsonExporter

if TYPE_CHECKING:
    from seatplanner.application.dtos import ProjectOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """Exports every venue of a project, chair slots included, as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, include_chairs: bool = True) -> None:
        self._formatter = JsonExporter(include_chairs=include_chairs)

    def export(self, output: ProjectOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported JSON to {path}")

    def export_string(self, output: ProjectOutput) -> str:
        return self._formatter.export(output)
