"""Centralized threshold and magic number configuration.

This module contains the hardcoded sizes, ratios and cadences used by the
layout calculators. Having these in one place makes tuning easier and keeps
the calculators free of inline constants.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HeightThresholds:
    """Constants for estimated card heights."""

    # Aspect factors applied to the target width
    square_factor: float = 1.0
    portrait_factor: float = 1.4
    landscape_factor: float = 0.7
    dynamic_factor: float = 0.6

    # Standard card formula
    title_chars_per_line: int = 30
    title_line_height: int = 20
    excerpt_chars_per_line: int = 50
    excerpt_line_height: int = 16
    base_padding: int = 20
    stats_height: int = 24
    dates_height: int = 20
    tags_height: int = 32

    # Minimal (text-focused) formula
    minimal_base: int = 80
    minimal_title_chars_per_line: int = 40
    minimal_title_line_height: int = 24
    minimal_excerpt_chars_per_line: int = 60
    minimal_excerpt_line_height: int = 20
    minimal_excerpt_max_lines: int = 3
    minimal_tags_height: int = 32
    minimal_stats_height: int = 40

    # Display-mode card heights (base = width * card_aspect)
    card_aspect: float = 0.75  # 4:3
    compact_min_height: int = 60
    compact_ratio: float = 0.4
    card_min_height: int = 120
    featured_min_height: int = 200
    featured_ratio: float = 1.4


@dataclass
class ColumnThresholds:
    """Constants for multi-column packing."""

    portrait_max_columns: int = 2
    default_portrait_columns: int = 2
    default_landscape_columns: int = 3
    min_column_width: float = 40.0

    magazine_header_units: int = 2  # Spacing units reserved for the magazine banner

    featured_every: int = 6  # Every Nth index is featured (index 0 always)
    featured_height_ratio: float = 1.3  # Featured height floor as a multiple of width
    featured_z_offset: int = 1000

    masonry_jitter_period: int = 3
    masonry_jitter_step: int = 30  # -30, 0, +30 pattern
    masonry_jitter_floor: float = 0.7  # Never shrink below 70% of base


@dataclass
class TimelineThresholds:
    """Constants for the chronological and minimal single-column modes."""

    rail_width: int = 44  # Space left of cards for the timeline rail
    group_header_height: int = 60
    entry_decoration: int = 40  # Connector/dot overhead per entry
    minimal_divider: int = 1
    min_item_width: float = 40.0
    unknown_group_key: str = "unknown"


@dataclass
class FreeformThresholds:
    """Constants for the creative canvas."""

    portrait_card_ratio: float = 0.4
    landscape_card_ratio: float = 0.25
    card_aspect: float = 1.2
    grid_columns: int = 3
    spacing: int = 20
    canvas_margin: int = 40


@dataclass
class CollisionThresholds:
    """Constants for overlap resolution."""

    grid_size: int = 20
    search_step: int = 20
    search_max_radius: int = 200
    max_arrange_attempts: int = 100


@dataclass
class ViewportThresholds:
    """Default and minimum viewport dimensions."""

    default_width: float = 390.0
    default_height: float = 844.0
    min_width: float = 120.0
    min_height: float = 120.0


# Global instances for easy import
HEIGHT_THRESHOLDS = HeightThresholds()
COLUMN_THRESHOLDS = ColumnThresholds()
TIMELINE_THRESHOLDS = TimelineThresholds()
FREEFORM_THRESHOLDS = FreeformThresholds()
COLLISION_THRESHOLDS = CollisionThresholds()
VIEWPORT_THRESHOLDS = ViewportThresholds()
