"""Tests for the exporter framework and the registered exporters."""

from __future__ import annotations

import csv
import io
import json
from dataclasses import replace
from pathlib import Path
from typing import ClassVar
from xml.etree import ElementTree

import ezdxf
import pytest

from seatplanner.application import LayoutOutput, ProjectOutput
from seatplanner.domain import Rect
from seatplanner.infrastructure.exporters import (
    CsvExporter,
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    SvgExporter,
    UnsupportedFormatError,
)
from seatplanner.infrastructure.exporters.csv_exporter import CSV_HEADER
from seatplanner.infrastructure.exporters.dxf import LAYERS
from seatplanner.infrastructure.seat_plan_renderer import (
    SeatPlanRenderer,
    aisle_rects,
    ruler_interval_cm,
)


@pytest.fixture
def tent_project(tent_output: LayoutOutput) -> ProjectOutput:
    """Project holding only the starter tent."""
    return ProjectOutput(project_name="tent", venues=[tent_output])


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def setup_method(self) -> None:
        """Store original exporters before each test."""
        self._original_exporters = ExporterRegistry._exporters.copy()

    def teardown_method(self) -> None:
        """Restore original exporters after each test."""
        ExporterRegistry._exporters = self._original_exporters

    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["csv", "dxf", "json", "svg"]
        assert ExporterRegistry.get("svg") is SvgExporter

    def test_get_unknown_format_raises(self) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ExporterRegistry.get("pdf")
        assert "No exporter registered for format 'pdf'" in str(exc_info.value)
        assert exc_info.value.available == ["csv", "dxf", "json", "svg"]

    def test_unsupported_format_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            ExporterRegistry.get("pdf")

    def test_register_new_exporter(self) -> None:
        @ExporterRegistry.register("txt")
        class TextExporter:
            format_name: ClassVar[str] = "txt"
            file_extension: ClassVar[str] = "txt"
            media_type: ClassVar[str] = "text/plain"

            def export(self, output: ProjectOutput, path: Path) -> None:
                path.write_text(output.project_name)

            def export_string(self, output: ProjectOutput) -> str:
                return output.project_name

        assert ExporterRegistry.is_registered("txt")
        assert ExporterRegistry.get("txt") is TextExporter

    def test_is_registered_returns_false_for_unknown(self) -> None:
        assert not ExporterRegistry.is_registered("pdf")

    @pytest.mark.parametrize(
        "exporter_class", [CsvExporter, DxfExporter, JsonLayoutExporter, SvgExporter]
    )
    def test_exporters_implement_protocol(self, exporter_class: type) -> None:
        assert isinstance(exporter_class(), Exporter)


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all_names_files(self, tmp_path: Path, tent_project: ProjectOutput) -> None:
        manager = ExportManager(tmp_path / "out")
        results = manager.export_all(["svg", "csv"], tent_project, project_name="easter")
        assert results == {
            "svg": tmp_path / "out" / "easter_svg.svg",
            "csv": tmp_path / "out" / "easter_csv.csv",
        }
        assert all(path.exists() for path in results.values())

    def test_unknown_format_writes_nothing(self, tmp_path: Path, tent_project: ProjectOutput) -> None:
        manager = ExportManager(tmp_path / "out")
        with pytest.raises(UnsupportedFormatError):
            manager.export_all(["svg", "pdf"], tent_project)
        assert not (tmp_path / "out").exists()

    def test_export_single(self, tmp_path: Path, tent_project: ProjectOutput) -> None:
        path = ExportManager(tmp_path).export_single("json", tent_project)
        assert path == tmp_path / "seating_json.json"
        assert json.loads(path.read_text())["total_chairs"] == 228


class TestCsvExporter:
    """Tests for the CSV chair list."""

    def _rows(self, output: ProjectOutput) -> list[dict[str, str]]:
        return list(csv.DictReader(io.StringIO(CsvExporter().export_string(output))))

    def test_header(self, tent_project: ProjectOutput) -> None:
        first_line = CsvExporter().export_string(tent_project).splitlines()[0]
        assert first_line.split(",") == CSV_HEADER

    def test_one_row_per_slot(self, tent_project: ProjectOutput) -> None:
        rows = self._rows(tent_project)
        assert len(rows) == 252
        assert sum(1 for row in rows if row["excluded"] == "yes") == 24

    def test_rows_and_columns_are_one_based(self, tent_project: ProjectOutput) -> None:
        first = self._rows(tent_project)[0]
        assert (first["row"], first["col"]) == ("1", "1")
        assert first["region"] == "main"
        assert first["block_index"] == "0"
        assert first["x_cm"] == "2.5"
        assert first["width_cm"] == "45"

    def test_wing_rows(self, full_project: ProjectOutput) -> None:
        wing_rows = [row for row in self._rows(full_project) if row["region"] == "wing"]
        assert len(wing_rows) == 42
        assert {row["wing_id"] for row in wing_rows} == {"west"}
        assert {row["block_index"] for row in wing_rows} == {""}

    def test_export_to_file(self, tmp_path: Path, full_project: ProjectOutput) -> None:
        path = tmp_path / "chairs.csv"
        CsvExporter().export(full_project, path)
        assert path.read_text(encoding="utf-8").count("\n") == 1 + 294 + 108


class TestSvgExporter:
    """Tests for the SVG seat plan."""

    def test_renders_every_venue(self, full_project: ProjectOutput) -> None:
        svg = SvgExporter().export_string(full_project)
        assert svg.startswith("<svg")
        assert svg.rstrip().endswith("</svg>")
        assert '<g data-venue="main"' in svg
        assert '<g data-venue="overflow"' in svg

    def test_venue_ids_keep_the_document_well_formed(self, tent_output: LayoutOutput) -> None:
        output = replace(tent_output, venue=replace(tent_output.venue, id='a--b"c'))
        svg = SvgExporter().export_string(ProjectOutput(project_name="x", venues=[output]))
        root = ElementTree.fromstring(svg)
        groups = root.findall("{http://www.w3.org/2000/svg}g")
        assert [g.get("data-venue") for g in groups] == ['a--b"c']

    def test_footer_shows_counts(self, tent_project: ProjectOutput) -> None:
        svg = SvgExporter().export_string(tent_project)
        assert "Chairs: 228" in svg
        assert "Utilization:" in svg

    def test_empty_project(self) -> None:
        svg = SvgExporter().export_string(ProjectOutput(project_name="x"))
        assert "No venues to display" in svg

    def test_individual_venues(self, tmp_path: Path, full_project: ProjectOutput) -> None:
        files = SvgExporter().export_individual_venues(full_project, tmp_path / "plan.svg")
        assert [f.name for f in files] == ["plan_main.svg", "plan_overflow.svg"]
        assert all(f.read_text().startswith("<svg") for f in files)


class TestSeatPlanRenderer:
    """Tests for renderer helpers."""

    def test_ruler_interval(self) -> None:
        assert ruler_interval_cm(Rect(0, 0, 1000, 800)) == 100
        assert ruler_interval_cm(Rect(0, 0, 3500, 800)) == 200

    def test_center_aisle_rect(self, tent_output: LayoutOutput) -> None:
        assert aisle_rects(tent_output) == [Rect(450, 0, 100, 800)]

    def test_minimum_width(self, tent_output: LayoutOutput) -> None:
        width, _ = SeatPlanRenderer(scale=0.1).venue_size(tent_output)
        assert width == 600

    def test_names_are_escaped(self, tent_output: LayoutOutput) -> None:
        output = replace(tent_output, venue=replace(tent_output.venue, name="Tent <A&B>"))
        svg = SeatPlanRenderer().render_venue(output)
        assert "Tent &lt;A&amp;B&gt;" in svg


class TestDxfExporter:
    """Tests for the DXF drawing."""

    def test_layers(self, tmp_path: Path, tent_project: ProjectOutput) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export(tent_project, path)
        doc = ezdxf.readfile(path)
        for name in LAYERS:
            assert name in doc.layers
        assert doc.header["$INSUNITS"] == 5

    def test_chair_polylines(self, tmp_path: Path, tent_project: ProjectOutput) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export(tent_project, path)
        msp = ezdxf.readfile(path).modelspace()
        assert len(msp.query('LWPOLYLINE[layer=="CHAIRS"]')) == 228
        assert len(msp.query('LWPOLYLINE[layer=="EXCLUDED"]')) == 24
        assert len(msp.query('LWPOLYLINE[layer=="BLOCKERS"]')) == 1

    def test_without_excluded(self, tmp_path: Path, tent_project: ProjectOutput) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter(include_excluded=False).export(tent_project, path)
        msp = ezdxf.readfile(path).modelspace()
        assert len(msp.query('LWPOLYLINE[layer=="EXCLUDED"]')) == 0

    def test_venues_side_by_side(self, tmp_path: Path, full_project: ProjectOutput) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export(full_project, path)
        msp = ezdxf.readfile(path).modelspace()
        halls = list(msp.query('LWPOLYLINE[layer=="HALL"]'))
        assert len(halls) == 2
        overflow_min_x = min(x for x, *_ in halls[1].get_points())
        # main bounds start at the west wing and are 1300cm wide
        assert overflow_min_x == pytest.approx(1300 + 500)
        assert len(msp.query('LWPOLYLINE[layer=="AC"]')) == 4
        assert len(msp.query('LWPOLYLINE[layer=="WINGS"]')) == 1

    def test_export_string(self, tent_project: ProjectOutput) -> None:
        text = DxfExporter().export_string(tent_project)
        assert "LWPOLYLINE" in text
        assert DxfExporter().export_string(ProjectOutput(project_name="x")) == ""

    def test_empty_project_writes_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export(ProjectOutput(project_name="x"), path)
        assert not path.exists()
