"""Unit tests for the layout calculator.

These tests verify:
- Seat counts of the starter tent with and without its altar
- Exclusion by altar, zones and furniture
- Wing seating and area accounting
- The empty layout when aisles consume the hall
- Determinism and the capacity upper bound
"""

from dataclasses import replace

import pytest

from seatplanner.domain import (
    ExclusionZone,
    FurnitureItem,
    FurnitureType,
    MainHallRegion,
    Rect,
    SeatLayoutCalculator,
    VenueConfig,
    Wing,
    WingRegion,
    WingSide,
    calculate_layout,
)


class TestStarterTent:
    """A 10m x 8m tent, 45cm chairs, 5/10cm gaps and one 1m aisle."""

    def test_plain_tent_seats_252(self, plain_tent: VenueConfig) -> None:
        result = calculate_layout(plain_tent)
        assert result.total_chairs == 252
        assert result.total_rows == 14
        assert result.cols_per_block == 9
        assert [b.cols for b in result.blocks_info] == [9, 9]
        assert result.excluded_chairs == 0

    def test_block_info(self, plain_tent: VenueConfig) -> None:
        result = calculate_layout(plain_tent)
        assert [(b.x_start_cm, b.width_cm) for b in result.blocks_info] == [
            (0, 450),
            (550, 450),
        ]

    def test_areas_and_utilization(self, plain_tent: VenueConfig) -> None:
        result = calculate_layout(plain_tent)
        assert result.total_area_m2 == pytest.approx(80.0)
        assert result.usable_area_m2 == pytest.approx(72.0)
        assert result.utilization_percent == pytest.approx(252 * 0.2025 / 80 * 100)

    def test_altar_excludes_front_rows(self, tent: VenueConfig) -> None:
        """The 500 x 150 altar blocks 4 columns per block in the first 3 rows."""
        result = calculate_layout(tent)
        assert result.excluded_chairs == 24
        assert result.total_chairs == 228
        excluded = [c for c in result.chairs if c.excluded]
        assert {c.row for c in excluded} == {0, 1, 2}
        assert {c.col for c in excluded if c.region == MainHallRegion(0)} == {5, 6, 7, 8}
        assert {c.col for c in excluded if c.region == MainHallRegion(1)} == {0, 1, 2, 3}

    def test_excluded_slots_are_retained(self, tent: VenueConfig) -> None:
        result = calculate_layout(tent)
        assert len(result.chairs) == 252
        assert result.capacity == 252


class TestBlockers:
    """Tests for zones and furniture."""

    def test_exclusion_zone(self, plain_tent: VenueConfig) -> None:
        venue = replace(
            plain_tent,
            exclusion_zones=(ExclusionZone(id="desk", rect=Rect(0, 700, 100, 100)),),
        )
        result = calculate_layout(venue)
        assert result.excluded_chairs == 4
        assert result.total_chairs == 248

    def test_furniture_blocks_chairs(self, plain_tent: VenueConfig) -> None:
        venue = replace(
            plain_tent,
            furniture=(
                FurnitureItem(id="tv", furniture_type=FurnitureType.TV, rect=Rect(0, 0, 100, 10)),
            ),
        )
        assert calculate_layout(venue).excluded_chairs == 2

    def test_zone_inside_aisle_excludes_nothing(self, plain_tent: VenueConfig) -> None:
        venue = replace(
            plain_tent,
            exclusion_zones=(ExclusionZone(id="aisle", rect=Rect(455, 0, 90, 800)),),
        )
        assert calculate_layout(venue).excluded_chairs == 0

    def test_zero_size_altar_excludes_nothing(self, plain_tent: VenueConfig) -> None:
        venue = replace(plain_tent, altar=Rect(250, 0, 0, 0))
        assert calculate_layout(venue).total_chairs == 252


class TestWings:
    """Tests for seating in wings."""

    def test_left_wing_adds_chairs_and_area(self, plain_tent: VenueConfig) -> None:
        venue = replace(
            plain_tent,
            wings=(Wing(id="west", side=WingSide.LEFT, offset_cm=0, extent_cm=300, length_cm=400),),
        )
        result = calculate_layout(venue)

        wing_chairs = result.chairs_in(WingRegion("west"))
        assert len(wing_chairs) == 42
        assert result.total_chairs == 252 + 42
        assert result.total_area_m2 == pytest.approx(92.0)
        assert result.usable_area_m2 == pytest.approx(84.0)
        assert result.total_rows == 14

        info = result.wings_info[0]
        assert (info.rows, info.cols) == (7, 6)
        assert info.rect == Rect(-300, 0, 300, 400)
        assert all(c.x_cm < 0 for c in wing_chairs)

    def test_wing_chairs_follow_main_hall_chairs(self, plain_tent: VenueConfig) -> None:
        venue = replace(
            plain_tent,
            wings=(Wing(id="south", side=WingSide.BOTTOM, offset_cm=0, extent_cm=200, length_cm=500),),
        )
        chairs = calculate_layout(venue).chairs
        main_count = 252
        assert all(not c.in_wing for c in chairs[:main_count])
        assert all(c.in_wing for c in chairs[main_count:])

    def test_blockers_apply_to_wing_chairs(self, plain_tent: VenueConfig) -> None:
        venue = replace(
            plain_tent,
            wings=(Wing(id="west", side=WingSide.LEFT, offset_cm=0, extent_cm=300, length_cm=400),),
            exclusion_zones=(ExclusionZone(id="pillar", rect=Rect(-300, 0, 50, 50)),),
        )
        result = calculate_layout(venue)
        assert [c for c in result.chairs if c.excluded] == [result.chairs_in(WingRegion("west"))[0]]

    def test_degenerate_wing_contributes_nothing(self, plain_tent: VenueConfig) -> None:
        venue = replace(
            plain_tent,
            wings=(Wing(id="flat", side=WingSide.TOP, offset_cm=0, extent_cm=0, length_cm=400),),
        )
        result = calculate_layout(venue)
        assert result.total_chairs == 252
        assert result.total_area_m2 == pytest.approx(80.0)


class TestEmptyLayout:
    """Tests for aisles that leave no seatable width."""

    def test_aisles_consuming_the_hall(self, plain_tent: VenueConfig) -> None:
        venue = replace(
            plain_tent,
            aisle_width_cm=1000,
            wings=(Wing(id="west", side=WingSide.LEFT, offset_cm=0, extent_cm=300, length_cm=400),),
        )
        result = calculate_layout(venue)
        assert result.chairs == ()
        assert result.total_chairs == 0
        assert result.blocks_info == ()
        assert result.wings_info == ()
        assert result.usable_area_m2 == 0.0
        assert result.utilization_percent == 0.0
        assert result.total_area_m2 == pytest.approx(92.0)
        assert result.total_rows == 14


class TestCrossAisles:
    """Tests for front and back aisles."""

    def test_front_aisle_pushes_rows_back(self, plain_tent: VenueConfig) -> None:
        venue = replace(plain_tent, top_aisle_cm=100)
        result = calculate_layout(venue)
        # floor(700 / 55) = 12 rows
        assert result.total_rows == 12
        assert min(c.y_cm for c in result.chairs) == 100
        assert result.total_chairs == 2 * 9 * 12
        assert result.usable_area_m2 == pytest.approx(9.0 * 7.0)


class TestCalculatorProperties:
    """Tests for properties that hold for any venue."""

    def test_deterministic(self, tent: VenueConfig) -> None:
        calculator = SeatLayoutCalculator()
        assert calculator.calculate(tent) == calculator.calculate(tent)

    @pytest.mark.parametrize("aisles", [0, 1, 2, 3])
    @pytest.mark.parametrize("width_m", [4.0, 10.0, 23.5])
    def test_total_never_exceeds_capacity(self, aisles: int, width_m: float) -> None:
        venue = VenueConfig(
            id="v",
            name="V",
            width_m=width_m,
            length_m=12.0,
            aisle_count=aisles,
            altar=Rect(100, 0, 200, 100),
        )
        result = calculate_layout(venue)
        assert result.total_chairs <= result.capacity
        assert len(result.chairs) == result.capacity

    def test_chairs_stay_within_their_block(self, plain_tent: VenueConfig) -> None:
        venue = replace(plain_tent, aisle_count=2, aisle_width_cm=120)
        result = calculate_layout(venue)
        for chair in result.chairs:
            block = result.blocks_info[chair.region.block_index]
            assert chair.x_cm >= block.x_start_cm
            assert chair.x_cm + venue.chair_width_cm <= block.x_start_cm + block.width_cm + 1e-9
