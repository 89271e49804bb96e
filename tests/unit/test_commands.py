"""Unit tests for the layout and project commands."""

from dataclasses import replace

import pytest

from seatplanner.application import (
    CalculateLayoutCommand,
    CalculateProjectCommand,
    LayoutOutput,
    ProjectOutput,
)
from seatplanner.domain import AcConfig, Rect, VenueConfig, Wall


class TestCalculateLayoutCommand:
    """Tests for CalculateLayoutCommand."""

    def test_bundles_layout_bounds_and_ac(self, tent: VenueConfig) -> None:
        output = CalculateLayoutCommand().execute(tent)
        assert output.total_chairs == 228
        assert output.bounds == Rect(0, 0, 1000, 800)
        assert output.ac_units == []

    def test_ac_units_are_placed(self, plain_tent: VenueConfig) -> None:
        output = CalculateLayoutCommand().execute(replace(plain_tent, ac=AcConfig(count=4)))
        assert [unit.wall for unit in output.ac_units] == [
            Wall.TOP,
            Wall.RIGHT,
            Wall.BOTTOM,
            Wall.LEFT,
        ]

    def test_ac_units_do_not_block_chairs(self, plain_tent: VenueConfig) -> None:
        output = CalculateLayoutCommand().execute(replace(plain_tent, ac=AcConfig(count=12)))
        assert output.total_chairs == 252


class TestCalculateProjectCommand:
    """Tests for CalculateProjectCommand."""

    def test_full_project_totals(self, full_project: ProjectOutput) -> None:
        assert full_project.is_valid
        assert full_project.project_name == "christmas"
        assert [v.total_chairs for v in full_project.venues] == [266, 108]
        assert full_project.total_chairs == 374

    def test_main_venue_breakdown(self, full_project: ProjectOutput) -> None:
        main = full_project.get_venue("main")
        assert isinstance(main, LayoutOutput)
        assert main.layout.excluded_chairs == 28
        assert main.bounds == Rect(-300, 0, 1300, 800)
        assert len(main.ac_units) == 4

    def test_overflow_venue_has_one_block(self, full_project: ProjectOutput) -> None:
        overflow = full_project.get_venue("overflow")
        assert overflow is not None
        assert overflow.layout.cols_per_block == 12
        assert overflow.layout.total_rows == 9

    def test_unknown_venue(self, full_project: ProjectOutput) -> None:
        assert full_project.get_venue("nope") is None

    def test_empty_project_is_invalid(self) -> None:
        result = CalculateProjectCommand().execute([], project_name="empty")
        assert not result.is_valid
        assert result.errors == ["Project has no venues"]
        assert result.total_chairs == 0

    def test_venues_are_independent(self, tent: VenueConfig, plain_tent: VenueConfig) -> None:
        together = CalculateProjectCommand().execute([tent, plain_tent])
        alone = CalculateLayoutCommand().execute(plain_tent)
        assert together.venues[1].layout == alone.layout

    @pytest.mark.parametrize("name", ["seating", "easter"])
    def test_project_name_is_kept(self, tent: VenueConfig, name: str) -> None:
        assert CalculateProjectCommand().execute([tent], project_name=name).project_name == name
