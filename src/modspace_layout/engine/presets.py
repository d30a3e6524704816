"""
Module: engine.presets

Purpose:
    Built-in layout presets: display name, description and the default
    LayoutConfig for each mode. Used when a caller picks a mode without
    supplying its own config.

Key Functions:
    - get_preset(): Preset for a mode tag (falls back to grid)

Dependencies:
    - engine.config: LayoutConfig, LayoutMode

Used By:
    - engine.dispatcher: Default config per mode
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from .config import AspectRatio, LayoutConfig, LayoutMode


@dataclass(frozen=True)
class LayoutPreset:
    """
    A named, preconfigured layout.

    Attributes:
        mode: Layout mode
        name: Display name
        description: One-line description for pickers
        config: Default configuration
    """

    mode: LayoutMode
    name: str
    description: str
    config: LayoutConfig


LAYOUT_PRESETS: Dict[LayoutMode, LayoutPreset] = {
    LayoutMode.GRID: LayoutPreset(
        mode=LayoutMode.GRID,
        name="Grid",
        description="Instagram-style grid layout",
        config=LayoutConfig(
            columns=3,
            spacing=4,
            show_captions=False,
            show_stats=True,
            aspect_ratio=AspectRatio.SQUARE,
        ),
    ),
    LayoutMode.TIMELINE: LayoutPreset(
        mode=LayoutMode.TIMELINE,
        name="Timeline",
        description="Chronological feed layout",
        config=LayoutConfig(
            columns=1,
            spacing=16,
            show_captions=True,
            show_stats=True,
            show_dates=True,
        ),
    ),
    LayoutMode.MAGAZINE: LayoutPreset(
        mode=LayoutMode.MAGAZINE,
        name="Magazine",
        description="Featured entries over balanced columns",
        config=LayoutConfig(columns=2, spacing=8, show_captions=True),
    ),
    LayoutMode.MINIMAL: LayoutPreset(
        mode=LayoutMode.MINIMAL,
        name="Minimal",
        description="Clean, text-focused layout",
        config=LayoutConfig(columns=1, spacing=24, show_captions=True),
    ),
    LayoutMode.CREATIVE: LayoutPreset(
        mode=LayoutMode.CREATIVE,
        name="Creative",
        description="Fully customizable layout",
        config=LayoutConfig(columns=2, spacing=12, show_captions=True, show_stats=True),
    ),
    LayoutMode.MASONRY: LayoutPreset(
        mode=LayoutMode.MASONRY,
        name="Masonry",
        description="Staggered heights like Pinterest",
        config=LayoutConfig(spacing=16, show_captions=True),
    ),
    LayoutMode.HERO: LayoutPreset(
        mode=LayoutMode.HERO,
        name="Hero",
        description="Large hero + compact cards below",
        config=LayoutConfig(spacing=16, show_captions=True),
    ),
}


def get_preset(mode: Union[LayoutMode, str, None]) -> LayoutPreset:
    """Preset for a mode tag; unrecognized tags get the grid preset."""
    resolved = LayoutMode.parse(mode)
    return LAYOUT_PRESETS[resolved if resolved is not None else LayoutMode.GRID]
