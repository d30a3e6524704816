"""
Module: engine

Purpose:
    Positioning engine. Computes a bounding box and stacking order for
    every shared entry in the chosen layout mode, and detects/resolves
    overlapping boxes on the free-form canvas.

Key Functions:
    - calculate_layout(): Main entry point (mode dispatch)
    - estimate_height(): Formula-based card height
    - detect_collisions(), auto_arrange_entries(), snap_to_grid(): Free-form tools
    - bring_to_front(), send_to_back(): Stacking changes

Key Classes:
    - LayoutConfig, Viewport: Calculation inputs
    - LayoutResult: Uniform result envelope

Dependencies:
    - numpy: Pairwise overlap matrix
    - core.models: Entry, EntryPosition, CanvasSize

Used By:
    - Presentation layer
    - debug.visualizer
"""

from .collisions import (
    auto_arrange_entries,
    detect_collisions,
    find_nearest_non_colliding_position,
    overlap_matrix,
    rectangles_overlap,
    snap_to_grid,
)
from .columns import calculate_column_layout, resolve_column_count
from .config import (
    AspectRatio,
    DisplayMode,
    LayoutConfig,
    LayoutConfigError,
    LayoutMode,
    Viewport,
)
from .dispatcher import calculate_layout
from .freeform import bring_to_front, calculate_freeform_layout, send_to_back
from .heights import HeightStyle, display_mode_height, estimate_height
from .models import (
    ArrangementResult,
    CollisionReport,
    LayoutMetadata,
    LayoutResult,
    PlacementOutcome,
)
from .presets import LAYOUT_PRESETS, LayoutPreset, get_preset
from .timeline import (
    calculate_minimal_layout,
    calculate_timeline_layout,
    group_entries_by_date,
)

__all__ = [
    # Config
    "LayoutMode",
    "AspectRatio",
    "DisplayMode",
    "LayoutConfig",
    "LayoutConfigError",
    "Viewport",
    # Models
    "LayoutMetadata",
    "LayoutResult",
    "CollisionReport",
    "PlacementOutcome",
    "ArrangementResult",
    # Presets
    "LayoutPreset",
    "LAYOUT_PRESETS",
    "get_preset",
    # Functions
    "calculate_layout",
    "calculate_column_layout",
    "resolve_column_count",
    "calculate_timeline_layout",
    "calculate_minimal_layout",
    "group_entries_by_date",
    "calculate_freeform_layout",
    "bring_to_front",
    "send_to_back",
    "HeightStyle",
    "estimate_height",
    "display_mode_height",
    "rectangles_overlap",
    "overlap_matrix",
    "detect_collisions",
    "find_nearest_non_colliding_position",
    "auto_arrange_entries",
    "snap_to_grid",
]
