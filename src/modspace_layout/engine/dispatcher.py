"""
Module: engine.dispatcher

Purpose:
    Single entry point for layout calculation. Resolves the mode tag,
    fills in defaults (preset config, viewport, orientation) and delegates
    to the mode-specific calculator.

Key Functions:
    - calculate_layout(): Main entry point

Dependencies:
    - engine.columns, engine.timeline, engine.freeform: Calculators
    - engine.presets: Default configs

Used By:
    - Presentation layer
    - scripts/preview_layout.py
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from modspace_layout.core.models import CanvasSize, Entry

from .columns import calculate_column_layout
from .config import LayoutConfig, LayoutMode, Viewport
from .freeform import calculate_freeform_layout
from .models import LayoutMetadata, LayoutResult
from .presets import get_preset
from .timeline import calculate_minimal_layout, calculate_timeline_layout

logger = logging.getLogger(__name__)

_COLUMN_MODES = (LayoutMode.GRID, LayoutMode.MAGAZINE, LayoutMode.MASONRY, LayoutMode.HERO)


def calculate_layout(
    entries: Sequence[Entry],
    mode: Union[LayoutMode, str, None],
    config: Optional[LayoutConfig] = None,
    viewport: Optional[Viewport] = None,
    is_portrait: Optional[bool] = None,
) -> LayoutResult:
    """
    Compute positions for every entry in the chosen layout mode.

    Never fails for a usable entry list: unrecognized modes fall back to
    grid, and an empty entry list yields an empty result with a
    viewport-sized canvas. Deterministic for identical arguments.

    Args:
        entries: Entries in display order
        mode: LayoutMode or its string tag
        config: Layout configuration (None = preset for the mode)
        viewport: Viewport to size against (None = default viewport)
        is_portrait: Orientation flag (None = derived from viewport)

    Returns:
        LayoutResult

    Example:
        >>> result = calculate_layout(entries, "grid", LayoutConfig(columns=2, spacing=8),
        ...                           Viewport(360, 640), is_portrait=True)
        >>> result.metadata.columns
        2
    """
    resolved = LayoutMode.parse(mode)
    if resolved is None:
        logger.debug(f"Unknown layout mode {mode!r}; falling back to grid")
        resolved = LayoutMode.GRID

    if config is None:
        config = get_preset(resolved).config
    if viewport is None:
        viewport = Viewport()
    if is_portrait is None:
        is_portrait = viewport.is_portrait

    entries = list(entries)
    if not entries:
        return LayoutResult(
            mode=resolved,
            positions=(),
            canvas_size=CanvasSize(width=viewport.width, height=viewport.height),
            metadata=LayoutMetadata(),
        )

    if resolved in _COLUMN_MODES:
        result = calculate_column_layout(entries, resolved, config, viewport, is_portrait)
    elif resolved is LayoutMode.TIMELINE:
        result = calculate_timeline_layout(entries, config, viewport)
    elif resolved is LayoutMode.MINIMAL:
        result = calculate_minimal_layout(entries, config, viewport)
    else:
        result = calculate_freeform_layout(entries, config, viewport, is_portrait)

    for warning in result.warnings:
        logger.warning(warning)

    logger.info(
        f"Calculated {result.mode.value} layout: {len(result.positions)} entries, "
        f"canvas {result.canvas_size.width:.0f}x{result.canvas_size.height:.0f}"
    )
    return result
