"""
Module: engine.columns

Purpose:
    Greedy multi-column packing for the grid, magazine, masonry and hero
    modes. One balancer serves every column mode; the differences between
    modes (header banner, featured cadence, height jitter, hero band) are
    supplied by a per-mode ColumnProfile.

Key Functions:
    - calculate_column_layout(): Main column packing entry point
    - resolve_column_count(): Orientation-aware column count
    - is_featured_index(): Featured cadence rule

Algorithm:
    1. Resolve column count (portrait caps at 2) and a uniform column width
    2. Start every column accumulator at spacing + header offset
    3. For each entry in order, place it in the shortest column (ties go
       to the lowest column index) and advance that column by
       height + spacing
    4. Canvas height = tallest column + trailing spacing

Dependencies:
    - engine.heights: estimate_height, display_mode_height
    - common.thresholds: COLUMN_THRESHOLDS

Used By:
    - engine.dispatcher: grid, magazine, masonry and hero modes
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from modspace_layout.common.thresholds import COLUMN_THRESHOLDS, ColumnThresholds
from modspace_layout.core.models import CanvasSize, Entry, EntryPosition

from .config import DisplayMode, LayoutConfig, LayoutMode, Viewport
from .heights import display_mode_height, estimate_height
from .models import LayoutMetadata, LayoutResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnProfile:
    """
    Mode-specific constants for the column balancer.

    Attributes:
        mode: Layout mode the profile belongs to
        header_units: Spacing units reserved above the columns
        featured_cadence: Apply the periodic featured-entry rule
        masonry_jitter: Apply the index-keyed height perturbation
        hero_band: Lay index 0 out as a full-width band above the columns
        default_display_mode: Display mode for entries without one
            (None = estimate from content)
    """

    mode: LayoutMode
    header_units: int = 0
    featured_cadence: bool = False
    masonry_jitter: bool = False
    hero_band: bool = False
    default_display_mode: Optional[DisplayMode] = None


COLUMN_PROFILES: Dict[LayoutMode, ColumnProfile] = {
    LayoutMode.GRID: ColumnProfile(LayoutMode.GRID),
    LayoutMode.MAGAZINE: ColumnProfile(
        LayoutMode.MAGAZINE,
        header_units=COLUMN_THRESHOLDS.magazine_header_units,
        featured_cadence=True,
    ),
    LayoutMode.MASONRY: ColumnProfile(LayoutMode.MASONRY, masonry_jitter=True),
    LayoutMode.HERO: ColumnProfile(
        LayoutMode.HERO,
        hero_band=True,
        default_display_mode=DisplayMode.COMPACT,
    ),
}


def resolve_column_count(
    config: LayoutConfig,
    is_portrait: bool,
    thresholds: ColumnThresholds = COLUMN_THRESHOLDS,
) -> int:
    """
    Resolve the active column count.

    Portrait viewports use at most 2 columns (fewer only when the config
    asks for fewer); landscape viewports use the configured count, default 3.
    The result is never below 1.
    """
    requested = config.columns
    if is_portrait:
        columns = min(requested or thresholds.default_portrait_columns, thresholds.portrait_max_columns)
    else:
        columns = requested or thresholds.default_landscape_columns
    return max(1, int(columns))


def is_featured_index(index: int, every: int = COLUMN_THRESHOLDS.featured_every) -> bool:
    """Index 0 and every `every`-th index after it are featured."""
    if index == 0:
        return True
    return every > 0 and index % every == 0


def masonry_height(
    base_height: float,
    index: int,
    thresholds: ColumnThresholds = COLUMN_THRESHOLDS,
) -> float:
    """Deterministic staggered height: -step, 0, +step by index, floored at 70% of base."""
    period = max(thresholds.masonry_jitter_period, 1)
    variation = ((index % period) - 1) * thresholds.masonry_jitter_step
    return max(base_height + variation, base_height * thresholds.masonry_jitter_floor)


def calculate_column_layout(
    entries: Sequence[Entry],
    mode: LayoutMode,
    config: LayoutConfig,
    viewport: Viewport,
    is_portrait: bool,
    thresholds: ColumnThresholds = COLUMN_THRESHOLDS,
) -> LayoutResult:
    """
    Pack entries into balanced columns.

    Args:
        entries: Entries in display order
        mode: One of GRID, MAGAZINE, MASONRY, HERO (others use GRID rules)
        config: Layout configuration
        viewport: Viewport the layout is sized against
        is_portrait: Orientation flag (caps portrait at 2 columns)

    Returns:
        LayoutResult with one position per entry

    Example:
        >>> result = calculate_column_layout(entries, LayoutMode.GRID,
        ...     LayoutConfig(columns=2, spacing=8), Viewport(360, 640), True)
        >>> sorted({p.x for p in result.positions})
        [8.0, 184.0]
    """
    profile = COLUMN_PROFILES.get(mode, COLUMN_PROFILES[LayoutMode.GRID])
    spacing = config.spacing_for(profile.mode)
    columns = resolve_column_count(config, is_portrait, thresholds)
    warnings: List[str] = []

    column_width = (viewport.width - spacing * (columns + 1)) / columns
    if column_width < thresholds.min_column_width:
        warnings.append(
            f"Column width {column_width:.1f}px below minimum; "
            f"clamped to {thresholds.min_column_width:.1f}px"
        )
        column_width = thresholds.min_column_width

    positions: List[EntryPosition] = []
    featured: List[str] = []
    top = spacing + profile.header_units * spacing
    start_index = 0

    if profile.hero_band and entries:
        hero = entries[0]
        band_width = max(viewport.width - spacing * 2, thresholds.min_column_width)
        band_height = display_mode_height(DisplayMode.FEATURED, band_width)
        positions.append(
            EntryPosition(
                entry_id=hero.id,
                x=spacing,
                y=top,
                width=band_width,
                height=band_height,
                z_index=thresholds.featured_z_offset,
            )
        )
        featured.append(hero.id)
        top += band_height + spacing
        start_index = 1

    column_heights = [top] * columns

    for index in range(start_index, len(entries)):
        entry = entries[index]
        # min() keeps the first minimum, so ties go to the lowest column index
        column = min(range(columns), key=lambda c: column_heights[c])

        display_mode = config.display_mode_for(entry.id, profile.default_display_mode)
        if display_mode is not None:
            height = display_mode_height(display_mode, column_width)
        else:
            height = estimate_height(entry, column_width, config)

        if profile.masonry_jitter:
            height = masonry_height(height, index, thresholds)

        z_index = index
        if profile.featured_cadence and is_featured_index(index, thresholds.featured_every):
            height = max(height, column_width * thresholds.featured_height_ratio)
            z_index = thresholds.featured_z_offset + index
            featured.append(entry.id)

        positions.append(
            EntryPosition(
                entry_id=entry.id,
                x=spacing + column * (column_width + spacing),
                y=column_heights[column],
                width=column_width,
                height=height,
                z_index=z_index,
            )
        )
        column_heights[column] += height + spacing

    total_height = max(column_heights)
    canvas_width = viewport.width
    for position in positions:
        if position.right > canvas_width:
            canvas_width = position.right + spacing

    logger.debug(
        f"Packed {len(positions)} entries into {columns} columns "
        f"({profile.mode.value}), tallest column {total_height:.0f}px"
    )

    return LayoutResult(
        mode=profile.mode,
        positions=tuple(positions),
        canvas_size=CanvasSize(width=canvas_width, height=total_height + spacing),
        metadata=LayoutMetadata(
            total_height=total_height,
            columns=columns,
            featured_entries=tuple(featured),
        ),
        warnings=warnings,
    )
