"""Exclusion checks for candidate chair slots.

A chair slot is excluded when it overlaps the altar, an exclusion zone or a
furniture item. Excluded slots stay in the layout with a flag so rendering
and area math see the full grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import Rect

if TYPE_CHECKING:
    from ..entities import VenueConfig

__all__ = ["Blocker", "ExclusionEvaluator"]


@dataclass(frozen=True)
class Blocker:
    """A rectangle chairs may not overlap.

    Attributes:
        kind: "altar", "zone" or "furniture".
        id: Identifier of the source object.
        rect: Area blocked, in global coordinates.
    """

    kind: str
    id: str
    rect: Rect


class ExclusionEvaluator:
    """Tests chair rectangles against the blockers of one venue.

    Attributes:
        blockers: Altar, exclusion zones and furniture, in that order.
    """

    def __init__(self, blockers: list[Blocker] | None = None) -> None:
        self.blockers: tuple[Blocker, ...] = tuple(blockers or [])

    @classmethod
    def from_venue(cls, venue: VenueConfig) -> ExclusionEvaluator:
        """Collect the blockers of a venue.

        The altar only counts when both of its dimensions are positive.
        """
        blockers: list[Blocker] = []
        if venue.altar is not None and venue.altar.has_area:
            blockers.append(Blocker(kind="altar", id="altar", rect=venue.altar))
        blockers.extend(
            Blocker(kind="zone", id=zone.id, rect=zone.rect)
            for zone in venue.exclusion_zones
        )
        blockers.extend(
            Blocker(kind="furniture", id=item.id, rect=item.rect)
            for item in venue.furniture
        )
        return cls(blockers)

    def is_excluded(self, chair: Rect) -> bool:
        """Return True if any blocker overlaps the chair."""
        return any(chair.overlaps(blocker.rect) for blocker in self.blockers)

    def blocking_rects(self, chair: Rect) -> list[Blocker]:
        """Return every blocker that overlaps the chair."""
        return [blocker for blocker in self.blockers if chair.overlaps(blocker.rect)]
