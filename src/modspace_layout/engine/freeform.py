"""
Module: engine.freeform

Purpose:
    Free-form ("creative") canvas. Merges caller-supplied custom positions
    with generated defaults and grows the canvas to fit, plus the stacking
    operations used while a user drags cards around.

Key Functions:
    - calculate_freeform_layout(): Custom positions + default grid
    - default_card_size(): Default card size for an orientation
    - bring_to_front(): Raise one entry above every other
    - send_to_back(): Lower one entry below every other

Dependencies:
    - common.thresholds: FREEFORM_THRESHOLDS

Used By:
    - engine.dispatcher: creative mode
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from modspace_layout.common.thresholds import FREEFORM_THRESHOLDS, FreeformThresholds
from modspace_layout.core.models import CanvasSize, Entry, EntryPosition

from .config import LayoutConfig, LayoutMode, Viewport
from .models import LayoutMetadata, LayoutResult

logger = logging.getLogger(__name__)


def default_card_size(
    viewport: Viewport,
    is_portrait: bool,
    thresholds: FreeformThresholds = FREEFORM_THRESHOLDS,
) -> Tuple[float, float]:
    """Default (width, height): 40% / 25% of viewport width, height = width * 1.2."""
    ratio = thresholds.portrait_card_ratio if is_portrait else thresholds.landscape_card_ratio
    width = viewport.width * ratio
    return width, width * thresholds.card_aspect


def calculate_freeform_layout(
    entries: Sequence[Entry],
    config: LayoutConfig,
    viewport: Viewport,
    is_portrait: bool,
    thresholds: FreeformThresholds = FREEFORM_THRESHOLDS,
) -> LayoutResult:
    """
    Position entries on a free-form canvas.

    Entries with a custom position in the config keep it verbatim; this is
    the only path that trusts caller geometry unconditionally. The rest take
    the default 3-column grid slot of their input index (row = index // 3,
    column = index % 3), so a custom entry leaves its slot empty and the
    others never shift when one card is dragged. z_index is the input
    index. The canvas is at least the viewport and grows to contain every
    box plus a trailing margin.

    Args:
        entries: Entries in display order
        config: Layout configuration (custom_positions read here)
        viewport: Viewport the layout is sized against
        is_portrait: Orientation flag (selects default card width)

    Returns:
        LayoutResult in creative mode
    """
    card_width, card_height = default_card_size(viewport, is_portrait, thresholds)
    spacing = thresholds.spacing
    columns = max(thresholds.grid_columns, 1)

    positions: List[EntryPosition] = []
    generated = 0

    for index, entry in enumerate(entries):
        custom = config.custom_position_for(entry.id)
        if custom is not None:
            positions.append(custom)
            continue

        row, col = divmod(index, columns)
        positions.append(
            EntryPosition(
                entry_id=entry.id,
                x=col * (card_width + spacing) + spacing,
                y=row * (card_height + spacing) + spacing,
                width=card_width,
                height=card_height,
                z_index=index,
            )
        )
        generated += 1

    canvas = CanvasSize.containing(
        positions,
        min_width=viewport.width,
        min_height=viewport.height,
        margin=thresholds.canvas_margin,
    )
    total_height = max((p.bottom for p in positions), default=0)

    logger.debug(
        f"Free-form layout: {len(positions) - generated} custom, "
        f"{generated} generated positions"
    )

    return LayoutResult(
        mode=LayoutMode.CREATIVE,
        positions=tuple(positions),
        canvas_size=canvas,
        metadata=LayoutMetadata(total_height=total_height),
    )


def bring_to_front(
    positions: Sequence[EntryPosition],
    entry_id: str,
) -> List[EntryPosition]:
    """
    Raise an entry above every other box (z = max z + 1).

    Called when a drag starts so the dragged card paints above the rest.
    Unknown ids return an unchanged copy.

    Example:
        >>> raised = bring_to_front(positions, "e2")
        >>> max(p.z_index for p in raised) == next(p for p in raised if p.entry_id == "e2").z_index
        True
    """
    if not any(p.entry_id == entry_id for p in positions):
        logger.debug(f"bring_to_front: no position for entry {entry_id!r}")
        return list(positions)

    top = max(p.z_index for p in positions) + 1
    return [p.with_z_index(top) if p.entry_id == entry_id else p for p in positions]


def send_to_back(
    positions: Sequence[EntryPosition],
    entry_id: str,
) -> List[EntryPosition]:
    """Lower an entry below every other box (z = min z - 1). Unknown ids return an unchanged copy."""
    if not any(p.entry_id == entry_id for p in positions):
        logger.debug(f"send_to_back: no position for entry {entry_id!r}")
        return list(positions)

    bottom = min(p.z_index for p in positions) - 1
    return [p.with_z_index(bottom) if p.entry_id == entry_id else p for p in positions]
