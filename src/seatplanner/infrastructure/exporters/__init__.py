"""Exporter framework for seat plan outputs.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- csv: One row per chair slot, excluded slots included
- dxf: DXF drawing with hall, wings, chairs and blockers on layers
- json: Full layout data for every venue
- svg: Printable plan with rulers and a summary footer

Usage:
    from seatplanner.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["svg", "csv"], project_output, project_name="service")
"""

from seatplanner.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)

# Import exporters to trigger registration
from seatplanner.infrastructure.exporters.csv_exporter import CsvExporter
from seatplanner.infrastructure.exporters.dxf import DxfExporter
from seatplanner.infrastructure.exporters.json_exporter import JsonLayoutExporter
from seatplanner.infrastructure.exporters.svg import SvgExporter

__all__ = [
    # Framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "UnsupportedFormatError",
    # Registered exporters
    "CsvExporter",
    "DxfExporter",
    "JsonLayoutExporter",
    "SvgExporter",
]
