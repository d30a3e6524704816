"""
Module: engine.heights

Purpose:
    Estimate rendered card heights from entry text lengths and display
    flags. Heights come from a fixed formula, not a text-measurement pass;
    they keep column heights visually plausible but must not be treated as
    authoritative pixel heights once real text wrapping is available.

Key Functions:
    - estimate_height(): Height for a card of a given width
    - display_mode_height(): Height for an explicit compact/card/featured card
    - aspect_factor(): Width multiplier for an aspect-ratio hint

Dependencies:
    - math (std)
    - common.thresholds: HEIGHT_THRESHOLDS

Used By:
    - engine.columns: Per-entry heights for column packing
    - engine.timeline: Timeline and minimal list heights
"""

from __future__ import annotations

import math
from enum import Enum

from modspace_layout.common.thresholds import HEIGHT_THRESHOLDS, HeightThresholds
from modspace_layout.core.models import Entry

from .config import AspectRatio, DisplayMode, LayoutConfig


class HeightStyle(str, Enum):
    """Height formula variant."""

    CARD = "card"
    MINIMAL = "minimal"


def aspect_factor(
    aspect_ratio: AspectRatio,
    thresholds: HeightThresholds = HEIGHT_THRESHOLDS,
) -> float:
    """Base height as a multiple of card width for an aspect hint."""
    return {
        AspectRatio.SQUARE: thresholds.square_factor,
        AspectRatio.PORTRAIT: thresholds.portrait_factor,
        AspectRatio.LANDSCAPE: thresholds.landscape_factor,
    }.get(aspect_ratio, thresholds.dynamic_factor)


def _lines(length: int, chars_per_line: int) -> int:
    return math.ceil(length / chars_per_line) if length > 0 else 0


def estimate_height(
    entry: Entry,
    target_width: float,
    config: LayoutConfig,
    style: HeightStyle = HeightStyle.CARD,
    thresholds: HeightThresholds = HEIGHT_THRESHOLDS,
) -> float:
    """
    Estimate the rendered height of an entry card.

    CARD style:
        base   = target_width * aspect factor
        title  = ceil(len(title) / 30) * 20
        excerpt (captions on, non-empty) = ceil(len(excerpt) / 50) * 16
        meta   = 20 + 24 (stats) + 20 (dates) + 32 (tags present)

    MINIMAL style (text-focused list, width-independent):
        80 + ceil(len(title) / 40) * 24
           + min(3, ceil(len(excerpt) / 60)) * 20 (captions on)
           + 32 (tags present) + 40 (stats)

    Args:
        entry: Entry to measure
        target_width: Card width in pixels (negative treated as 0)
        config: Layout config supplying display flags and aspect hint
        style: Formula variant

    Returns:
        Estimated height in pixels (always > 0)

    Example:
        >>> estimate_height(Entry("e1", title="x" * 31), 100, LayoutConfig(show_captions=False))
        120.0  # 60 base + 2 title lines * 20 + 20 padding
    """
    if style is HeightStyle.MINIMAL:
        return _estimate_minimal_height(entry, config, thresholds)

    width = max(float(target_width), 0.0)
    height = width * aspect_factor(config.aspect_ratio, thresholds)

    height += _lines(len(entry.title), thresholds.title_chars_per_line) * thresholds.title_line_height

    if config.show_captions and entry.excerpt:
        height += (
            _lines(len(entry.excerpt), thresholds.excerpt_chars_per_line)
            * thresholds.excerpt_line_height
        )

    metadata_height = thresholds.base_padding
    if config.show_stats:
        metadata_height += thresholds.stats_height
    if config.show_dates:
        metadata_height += thresholds.dates_height
    if entry.has_tags:
        metadata_height += thresholds.tags_height

    return float(height + metadata_height)


def _estimate_minimal_height(
    entry: Entry,
    config: LayoutConfig,
    thresholds: HeightThresholds,
) -> float:
    """Height of a row in the text-focused minimal list."""
    height = thresholds.minimal_base
    height += (
        _lines(len(entry.title), thresholds.minimal_title_chars_per_line)
        * thresholds.minimal_title_line_height
    )

    if config.show_captions and entry.excerpt:
        excerpt_lines = min(
            thresholds.minimal_excerpt_max_lines,
            _lines(len(entry.excerpt), thresholds.minimal_excerpt_chars_per_line),
        )
        height += excerpt_lines * thresholds.minimal_excerpt_line_height

    if entry.has_tags:
        height += thresholds.minimal_tags_height
    if config.show_stats:
        height += thresholds.minimal_stats_height

    return float(height)


def display_mode_height(
    display_mode: DisplayMode,
    card_width: float,
    scale: float = 1.0,
    thresholds: HeightThresholds = HEIGHT_THRESHOLDS,
) -> float:
    """
    Height of a card with an explicit display mode.

    Each mode floors a 4:3 base height at a minimum that shrinks with
    `scale` for preview containers:
        compact:  max(60 * scale, base * 0.4)
        card:     max(120 * scale, base)
        featured: max(200 * scale, base * 1.4)

    Args:
        display_mode: Card treatment
        card_width: Card width in pixels
        scale: Minimum-height scale (1.0 for full-size viewports)

    Returns:
        Height in pixels (always > 0)
    """
    base = max(float(card_width), 0.0) * thresholds.card_aspect
    scale = scale if scale > 0 else 1.0

    if display_mode is DisplayMode.COMPACT:
        return max(thresholds.compact_min_height * scale, base * thresholds.compact_ratio)
    if display_mode is DisplayMode.FEATURED:
        return max(thresholds.featured_min_height * scale, base * thresholds.featured_ratio)
    return max(thresholds.card_min_height * scale, base)
