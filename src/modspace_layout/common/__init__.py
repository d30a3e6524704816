"""Common utilities shared across the layout engine."""

from __future__ import annotations

from .thresholds import (
    COLLISION_THRESHOLDS,
    COLUMN_THRESHOLDS,
    FREEFORM_THRESHOLDS,
    HEIGHT_THRESHOLDS,
    TIMELINE_THRESHOLDS,
    VIEWPORT_THRESHOLDS,
    CollisionThresholds,
    ColumnThresholds,
    FreeformThresholds,
    HeightThresholds,
    TimelineThresholds,
    ViewportThresholds,
)

__all__ = [
    "HeightThresholds",
    "ColumnThresholds",
    "TimelineThresholds",
    "FreeformThresholds",
    "CollisionThresholds",
    "ViewportThresholds",
    "HEIGHT_THRESHOLDS",
    "COLUMN_THRESHOLDS",
    "TIMELINE_THRESHOLDS",
    "FREEFORM_THRESHOLDS",
    "COLLISION_THRESHOLDS",
    "VIEWPORT_THRESHOLDS",
]
