"""Pytest configuration and shared fixtures for seat planner tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from seatplanner.application import (
    CalculateLayoutCommand,
    CalculateProjectCommand,
    LayoutOutput,
    ProjectOutput,
)
from seatplanner.application.config import config_to_venues, load_config
from seatplanner.domain import VenueConfig, default_venue

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def tent() -> VenueConfig:
    """The starter 10m x 8m tent with its altar at the front."""
    return default_venue()


@pytest.fixture
def plain_tent() -> VenueConfig:
    """A 10m x 8m tent with one center aisle and nothing blocking seats."""
    return VenueConfig(id="plain", name="Plain Tent", width_m=10.0, length_m=8.0)


@pytest.fixture
def tent_output(tent: VenueConfig) -> LayoutOutput:
    """Calculated layout of the starter tent."""
    return CalculateLayoutCommand().execute(tent)


@pytest.fixture
def full_project() -> ProjectOutput:
    """Calculated project for the two-venue 'christmas' fixture."""
    config = load_config(FIXTURES_PATH / "valid_full.json")
    return CalculateProjectCommand().execute(
        config_to_venues(config), project_name=config.project_name
    )
