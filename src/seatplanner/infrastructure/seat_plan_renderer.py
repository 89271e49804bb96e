"""SVG rendering of seat plans.

This module draws a venue at a fixed scale with meter rulers, the hall and
its wings, aisles, chair slots, blockers, AC units, and a summary footer.
Several venues are stacked vertically in one document.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from seatplanner.application.dtos import LayoutOutput, ProjectOutput
from seatplanner.domain import FurnitureType, Rect

PIXELS_PER_CM = 1.5
RULER_SIZE = 40
LAYOUT_PADDING = 30
HEADER_HEIGHT = 40
FOOTER_HEIGHT = 90
VENUE_SPACING = 30
MIN_WIDTH = 600

FURNITURE_COLORS: dict[FurnitureType, str] = {
    FurnitureType.TV: "#00b8d4",
    FurnitureType.DOOR: "#ff7043",
}


def ruler_interval_cm(bounds: Rect) -> float:
    """Major tick spacing: 1 m, or 2 m when the larger side exceeds 30 m."""
    return 200.0 if max(bounds.width, bounds.height) > 3000 else 100.0


def aisle_rects(output: LayoutOutput) -> list[Rect]:
    """Rectangles of the center and perimeter aisles of the main hall."""
    venue = output.venue
    hall_w = venue.width_cm
    hall_h = venue.length_cm
    rects: list[Rect] = []

    blocks = output.layout.blocks_info
    for current, following in zip(blocks, blocks[1:]):
        start = current.x_start_cm + current.width_cm
        rects.append(Rect(start, 0.0, following.x_start_cm - start, hall_h))

    if venue.left_aisle_cm > 0:
        rects.append(Rect(0.0, 0.0, venue.left_aisle_cm, hall_h))
    if venue.right_aisle_cm > 0:
        rects.append(Rect(hall_w - venue.right_aisle_cm, 0.0, venue.right_aisle_cm, hall_h))
    if venue.top_aisle_cm > 0:
        rects.append(Rect(0.0, 0.0, hall_w, venue.top_aisle_cm))
    if venue.bottom_aisle_cm > 0:
        rects.append(
            Rect(0.0, hall_h - venue.bottom_aisle_cm, hall_w, venue.bottom_aisle_cm)
        )
    return rects


class SeatPlanRenderer:
    """Renders seat plans as SVG.

    Attributes:
        scale: Pixels per centimeter.
        show_excluded: Whether to outline excluded chair slots.
    """

    def __init__(self, scale: float = PIXELS_PER_CM, show_excluded: bool = True) -> None:
        self.scale = scale
        self.show_excluded = show_excluded

    def venue_size(self, output: LayoutOutput) -> tuple[float, float]:
        """Pixel width and height of one rendered venue."""
        bounds = output.bounds
        width = RULER_SIZE + bounds.width * self.scale + LAYOUT_PADDING * 2
        height = (
            HEADER_HEIGHT
            + RULER_SIZE
            + bounds.height * self.scale
            + LAYOUT_PADDING * 2
            + FOOTER_HEIGHT
        )
        return max(width, MIN_WIDTH), height

    def render_venue(self, output: LayoutOutput) -> str:
        """Generate a standalone SVG document for one venue."""
        width, height = self.venue_size(output)
        parts = [
            f'<svg width="{width:.1f}" height="{height:.1f}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            *self._venue_body(output, width, height),
            "</svg>",
        ]
        return "\n".join(parts)

    def render_project(self, output: ProjectOutput) -> str:
        """Generate one SVG with all venues stacked vertically."""
        if not output.venues:
            return (
                '<svg width="200" height="50" xmlns="http://www.w3.org/2000/svg">'
                '<text x="10" y="30">No venues to display</text></svg>'
            )

        sizes = [self.venue_size(venue) for venue in output.venues]
        svg_width = max(w for w, _ in sizes)
        svg_height = sum(h for _, h in sizes) + VENUE_SPACING * (len(sizes) - 1)

        parts: list[str] = [
            f'<svg width="{svg_width:.1f}" height="{svg_height:.1f}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width:.1f}" height="{svg_height:.1f}" '
            f'fill="white"/>',
        ]

        y_offset = 0.0
        for venue, (_, venue_height) in zip(output.venues, sizes):
            venue_attr = escape(venue.venue.id, {'"': "&quot;"})
            parts.append(
                f'  <g data-venue="{venue_attr}" transform="translate(0, {y_offset:.1f})">'
            )
            for line in self._venue_body(venue, svg_width, venue_height):
                parts.append(f"  {line}")
            parts.append("  </g>")
            y_offset += venue_height + VENUE_SPACING

        parts.append("</svg>")
        return "\n".join(parts)

    def _venue_body(self, output: LayoutOutput, width: float, height: float) -> list[str]:
        venue = output.venue
        layout = output.layout
        bounds = output.bounds
        scale = self.scale

        origin_x = RULER_SIZE + LAYOUT_PADDING - bounds.x * scale
        origin_y = HEADER_HEIGHT + RULER_SIZE + LAYOUT_PADDING - bounds.y * scale

        def box(rect: Rect, style: str) -> str:
            return (
                f'  <rect x="{origin_x + rect.x * scale:.1f}" '
                f'y="{origin_y + rect.y * scale:.1f}" '
                f'width="{rect.width * scale:.1f}" height="{rect.height * scale:.1f}" '
                f"{style}/>"
            )

        def label(rect: Rect, text: str, color: str, size: int = 11) -> str:
            cx = origin_x + (rect.x + rect.width / 2) * scale
            cy = origin_y + (rect.y + rect.height / 2) * scale
            return (
                f'  <text x="{cx:.1f}" y="{cy:.1f}" font-family="sans-serif" '
                f'font-size="{size}" font-weight="bold" fill="{color}" '
                f'text-anchor="middle" dominant-baseline="middle">{escape(text)}</text>'
            )

        parts: list[str] = [
            f'  <rect x="0" y="0" width="{width:.1f}" height="{height:.1f}" fill="white"/>',
            f'  <text x="10" y="{HEADER_HEIGHT - 14}" font-family="sans-serif" '
            f'font-size="18" font-weight="bold" fill="#1a1a2e">'
            f"{escape(venue.name)}</text>",
        ]
        parts.extend(self._rulers(bounds, origin_x, origin_y, width, height))

        parts.append("  <!-- Wings -->")
        for wing in layout.wings_info:
            parts.append(
                box(wing.rect, 'fill="#2e8b57" fill-opacity="0.06" stroke="#2e8b57" stroke-width="2"')
            )
            parts.append(label(wing.rect, f"Wing {wing.wing_id}", "#2e8b57"))

        parts.append("  <!-- Hall -->")
        parts.append(box(venue.main_hall, 'fill="none" stroke="#3b3b5c" stroke-width="2"'))

        parts.append("  <!-- Aisles -->")
        for aisle in aisle_rects(output):
            if aisle.has_area:
                parts.append(
                    box(aisle, 'fill="#6478c8" fill-opacity="0.08" stroke="#6478c8" '
                    'stroke-opacity="0.3" stroke-dasharray="4,4"')
                )

        parts.append("  <!-- Chairs -->")
        for chair in layout.chairs:
            chair_rect = Rect(chair.x_cm, chair.y_cm, venue.chair_width_cm, venue.chair_depth_cm)
            if chair.excluded:
                if self.show_excluded:
                    parts.append(box(chair_rect, 'fill="none" stroke="#cccccc" stroke-width="0.5"'))
                continue
            color = "#2e8b57" if chair.in_wing else "#6464f0"
            parts.append(box(chair_rect, f'fill="{color}" fill-opacity="0.6"'))

        if venue.altar is not None and venue.altar.has_area:
            parts.append("  <!-- Altar -->")
            parts.append(
                box(venue.altar, 'rx="4" fill="#ffd700" fill-opacity="0.2" stroke="#ffd700" stroke-width="2"')
            )
            parts.append(label(venue.altar, "ALTAR", "#b8860b", 14))

        parts.append("  <!-- Furniture -->")
        for item in venue.furniture:
            color = FURNITURE_COLORS[item.furniture_type]
            parts.append(
                box(item.rect, f'rx="3" fill="{color}" fill-opacity="0.25" stroke="{color}" stroke-width="1.5"')
            )
            parts.append(label(item.rect, item.label or item.furniture_type.value, color, 10))

        parts.append("  <!-- AC units -->")
        for unit in output.ac_units:
            parts.append(
                box(unit.rect, 'rx="3" fill="#42a5f5" fill-opacity="0.25" stroke="#42a5f5" stroke-width="1.5"')
            )

        parts.append("  <!-- Exclusion zones -->")
        for zone in venue.exclusion_zones:
            parts.append(
                box(zone.rect, 'fill="#ff003c" fill-opacity="0.1" stroke="#ff003c" '
                'stroke-opacity="0.4" stroke-dasharray="5,3"')
            )
            if zone.label:
                parts.append(label(zone.rect, zone.label, "#ff003c", 10))

        parts.extend(self._footer(output, width, height))
        return parts

    def _rulers(
        self, bounds: Rect, origin_x: float, origin_y: float, width: float, height: float
    ) -> list[str]:
        interval = ruler_interval_cm(bounds)
        top = HEADER_HEIGHT
        parts = [
            "  <!-- Rulers -->",
            f'  <rect x="0" y="{top}" width="{width:.1f}" height="{RULER_SIZE}" fill="#1a1a2e"/>',
            f'  <rect x="0" y="{top}" width="{RULER_SIZE}" '
            f'height="{height - top - FOOTER_HEIGHT:.1f}" fill="#1a1a2e"/>',
        ]

        cm = (bounds.x // interval) * interval
        if cm < bounds.x:
            cm += interval
        while cm <= bounds.right:
            px = origin_x + cm * self.scale
            parts.append(
                f'  <line x1="{px:.1f}" y1="{top + RULER_SIZE - 12}" x2="{px:.1f}" '
                f'y2="{top + RULER_SIZE}" stroke="#888888"/>'
            )
            parts.append(
                f'  <text x="{px:.1f}" y="{top + RULER_SIZE - 18}" font-family="sans-serif" '
                f'font-size="10" fill="#888888" text-anchor="middle">{cm / 100:.0f}m</text>'
            )
            cm += interval

        cm = (bounds.y // interval) * interval
        if cm < bounds.y:
            cm += interval
        while cm <= bounds.bottom:
            py = origin_y + cm * self.scale
            parts.append(
                f'  <line x1="{RULER_SIZE - 12}" y1="{py:.1f}" x2="{RULER_SIZE}" '
                f'y2="{py:.1f}" stroke="#888888"/>'
            )
            parts.append(
                f'  <text x="{RULER_SIZE - 18}" y="{py:.1f}" font-family="sans-serif" '
                f'font-size="10" fill="#888888" text-anchor="middle" '
                f'transform="rotate(-90 {RULER_SIZE - 18} {py:.1f})">{cm / 100:.0f}m</text>'
            )
            cm += interval

        return parts

    def _footer(self, output: LayoutOutput, width: float, height: float) -> list[str]:
        layout = output.layout
        venue = output.venue
        top = height - FOOTER_HEIGHT
        stats = (
            f"Chairs: {layout.total_chairs}  |  Rows: {layout.total_rows}  |  "
            f"Blocks: {len(layout.blocks_info)}  |  Columns/block: {layout.cols_per_block}  |  "
            f"Utilization: {layout.utilization_percent:.1f}%"
        )
        details = (
            f"Venue {venue.width_m:g}m x {venue.length_m:g}m  |  "
            f"Total {layout.total_area_m2:.1f} m²  |  Seating {layout.usable_area_m2:.1f} m²  |  "
            f"Chair {venue.chair_width_cm:g}x{venue.chair_depth_cm:g}cm"
        )
        return [
            "  <!-- Summary -->",
            f'  <line x1="0" y1="{top:.1f}" x2="{width:.1f}" y2="{top:.1f}" '
            f'stroke="#3b3b5c" stroke-width="2"/>',
            f'  <text x="20" y="{top + 30:.1f}" font-family="sans-serif" font-size="16" '
            f'font-weight="bold" fill="#1a1a2e">{escape(stats)}</text>',
            f'  <text x="20" y="{top + 56:.1f}" font-family="sans-serif" font-size="12" '
            f'fill="#555555">{escape(details)}</text>',
        ]
