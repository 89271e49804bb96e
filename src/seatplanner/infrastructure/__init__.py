"""Infrastructure layer - formatters, renderers and exporters."""

from .exporters import (
    CsvExporter,
    DxfExporter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    SvgExporter,
    UnsupportedFormatError,
)
from .formatters import (
    JsonExporter,
    LayoutDiagramFormatter,
    ProjectSummaryFormatter,
    SummaryFormatter,
    layout_output_to_dict,
    project_output_to_dict,
)
from .seat_plan_renderer import SeatPlanRenderer

__all__ = [
    "CsvExporter",
    "DxfExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonExporter",
    "JsonLayoutExporter",
    "LayoutDiagramFormatter",
    "ProjectSummaryFormatter",
    "SeatPlanRenderer",
    "SummaryFormatter",
    "SvgExporter",
    "UnsupportedFormatError",
    "layout_output_to_dict",
    "project_output_to_dict",
]
