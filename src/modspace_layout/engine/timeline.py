"""
Module: engine.timeline

Purpose:
    Single-column chronological layouts. The timeline mode buckets entries
    by calendar day under header blocks; the minimal mode is a plain
    newest-first list of text-focused rows.

Key Functions:
    - group_entries_by_date(): Newest-first day buckets plus "unknown"
    - calculate_timeline_layout(): Day-grouped single column
    - calculate_minimal_layout(): Text-focused single column

Algorithm (timeline):
    1. Sort newest first (unparseable dates sort as epoch, stable)
    2. Bucket by ISO calendar day (UTC); undated entries go to "unknown",
       which is always the last group
    3. Each group gets a fixed header block, then its members stacked
       with per-entry decoration overhead; groups are separated by spacing

Dependencies:
    - engine.heights: estimate_height
    - common.thresholds: TIMELINE_THRESHOLDS

Used By:
    - engine.dispatcher: timeline and minimal modes
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, List, Sequence

from modspace_layout.common.thresholds import TIMELINE_THRESHOLDS, TimelineThresholds
from modspace_layout.core.models import CanvasSize, Entry, EntryPosition

from .config import LayoutConfig, LayoutMode, Viewport
from .heights import HeightStyle, estimate_height
from .models import LayoutMetadata, LayoutResult

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def sort_newest_first(entries: Sequence[Entry]) -> List[Entry]:
    """Sort entries by share date, newest first; unparseable dates sort as epoch."""
    return sorted(entries, key=lambda e: e.timestamp or _EPOCH, reverse=True)


def group_entries_by_date(
    entries: Sequence[Entry],
    thresholds: TimelineThresholds = TIMELINE_THRESHOLDS,
) -> Dict[str, List[Entry]]:
    """
    Bucket entries by calendar day, newest day first.

    Keys are ISO dates ("2024-01-02"). Entries without a parseable share
    date are collected under the sentinel key "unknown", which always comes
    after every dated group regardless of how its timestamps sort.

    Args:
        entries: Entries in any order

    Returns:
        Ordered mapping of day key -> member entries (newest first)

    Example:
        >>> groups = group_entries_by_date([Entry("a", share_date="2024-01-02"),
        ...                                 Entry("b", share_date="invalid")])
        >>> list(groups)
        ['2024-01-02', 'unknown']
    """
    grouped: Dict[str, List[Entry]] = {}
    undated: List[Entry] = []

    for entry in sort_newest_first(entries):
        timestamp = entry.timestamp
        if timestamp is None:
            undated.append(entry)
            continue
        grouped.setdefault(timestamp.date().isoformat(), []).append(entry)

    if undated:
        grouped[thresholds.unknown_group_key] = undated
    return grouped


def calculate_timeline_layout(
    entries: Sequence[Entry],
    config: LayoutConfig,
    viewport: Viewport,
    thresholds: TimelineThresholds = TIMELINE_THRESHOLDS,
) -> LayoutResult:
    """
    Lay entries out as a single day-grouped column.

    Args:
        entries: Entries in any order
        config: Layout configuration
        viewport: Viewport the layout is sized against

    Returns:
        LayoutResult whose metadata maps each day key to its member ids
        and header offset
    """
    spacing = config.spacing_for(LayoutMode.TIMELINE)
    x = spacing + thresholds.rail_width
    item_width = viewport.width - spacing * 2 - thresholds.rail_width
    warnings: List[str] = []
    if item_width < thresholds.min_item_width:
        warnings.append(
            f"Timeline width {item_width:.1f}px below minimum; "
            f"clamped to {thresholds.min_item_width:.1f}px"
        )
        item_width = thresholds.min_item_width

    groups = group_entries_by_date(entries, thresholds)
    positions: List[EntryPosition] = []
    date_groups: Dict[str, List[str]] = {}
    group_headers: Dict[str, float] = {}
    current_y = spacing * 2

    for group_index, (date_key, members) in enumerate(groups.items()):
        date_groups[date_key] = [entry.id for entry in members]
        group_headers[date_key] = current_y
        current_y += thresholds.group_header_height

        for entry in members:
            height = estimate_height(entry, item_width, config)
            positions.append(
                EntryPosition(
                    entry_id=entry.id,
                    x=x,
                    y=current_y,
                    width=item_width,
                    height=height,
                    z_index=len(positions),
                )
            )
            current_y += height + spacing + thresholds.entry_decoration

        if group_index < len(groups) - 1:
            current_y += spacing

    if thresholds.unknown_group_key in groups:
        logger.debug(
            f"{len(groups[thresholds.unknown_group_key])} entries without a "
            f"parseable share date grouped under '{thresholds.unknown_group_key}'"
        )

    return LayoutResult(
        mode=LayoutMode.TIMELINE,
        positions=tuple(positions),
        canvas_size=CanvasSize(
            width=max(viewport.width, x + item_width + spacing),
            height=current_y + spacing,
        ),
        metadata=LayoutMetadata(
            total_height=current_y,
            date_groups=date_groups,
            group_headers=group_headers,
        ),
        warnings=warnings,
    )


def calculate_minimal_layout(
    entries: Sequence[Entry],
    config: LayoutConfig,
    viewport: Viewport,
    thresholds: TimelineThresholds = TIMELINE_THRESHOLDS,
) -> LayoutResult:
    """
    Lay entries out as a newest-first list of text-focused rows.

    Rows are separated only by a 1px divider; heights use the minimal
    formula, which ignores card width.
    """
    spacing = config.spacing_for(LayoutMode.MINIMAL)
    item_width = viewport.width - spacing * 2
    warnings: List[str] = []
    if item_width < thresholds.min_item_width:
        warnings.append(
            f"Minimal width {item_width:.1f}px below minimum; "
            f"clamped to {thresholds.min_item_width:.1f}px"
        )
        item_width = thresholds.min_item_width
    ordered = sort_newest_first(entries)

    positions: List[EntryPosition] = []
    current_y = spacing

    for index, entry in enumerate(ordered):
        height = estimate_height(entry, item_width, config, style=HeightStyle.MINIMAL)
        positions.append(
            EntryPosition(
                entry_id=entry.id,
                x=spacing,
                y=current_y,
                width=item_width,
                height=height,
                z_index=index,
            )
        )
        current_y += height
        if index < len(ordered) - 1:
            current_y += thresholds.minimal_divider

    return LayoutResult(
        mode=LayoutMode.MINIMAL,
        positions=tuple(positions),
        canvas_size=CanvasSize(
            width=max(viewport.width, spacing + item_width + spacing),
            height=current_y + spacing,
        ),
        metadata=LayoutMetadata(total_height=current_y),
        warnings=warnings,
    )
