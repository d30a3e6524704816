"""
Module: engine.config

Purpose:
    Configuration for the positioning engine. Defines the layout mode tags,
    per-layout display options, optional caller-supplied custom geometry and
    the explicit viewport every calculation is sized against.

Key Classes:
    - LayoutMode: Layout algorithm selector
    - AspectRatio: Card aspect hint
    - DisplayMode: Per-entry card treatment
    - Viewport: Explicit viewport dimensions (clamped, never invalid)
    - LayoutConfig: Immutable layout configuration
    - LayoutConfigError: Raised for malformed config payloads

Dependencies:
    - dataclasses (std)
    - core.models: EntryPosition

Used By:
    - engine.dispatcher: Mode resolution and defaults
    - engine.columns, engine.timeline, engine.freeform: Calculation inputs
    - engine.presets: Default configs per mode
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from modspace_layout.common.thresholds import VIEWPORT_THRESHOLDS
from modspace_layout.core.models import EntryPosition


class LayoutConfigError(ValueError):
    """Raised when a layout config payload cannot be parsed."""


class LayoutMode(str, Enum):
    """Layout algorithm tags."""

    GRID = "grid"
    TIMELINE = "timeline"
    MAGAZINE = "magazine"
    MINIMAL = "minimal"
    CREATIVE = "creative"
    MASONRY = "masonry"
    HERO = "hero"

    @classmethod
    def parse(cls, value: Union[LayoutMode, str, None]) -> Optional[LayoutMode]:
        """Resolve a tag to a LayoutMode, or None if unrecognized."""
        if isinstance(value, LayoutMode):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class AspectRatio(str, Enum):
    """Aspect-ratio hint for estimated card heights."""

    SQUARE = "square"
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    DYNAMIC = "dynamic"

    @classmethod
    def parse(cls, value: Union[AspectRatio, str, None]) -> AspectRatio:
        """Resolve a hint, degrading unknown values to DYNAMIC."""
        if isinstance(value, AspectRatio):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DYNAMIC


class DisplayMode(str, Enum):
    """Per-entry card treatment."""

    COMPACT = "compact"
    CARD = "card"
    FEATURED = "featured"

    @classmethod
    def parse(cls, value: Union[DisplayMode, str, None]) -> DisplayMode:
        """Resolve a display mode, degrading unknown values to CARD."""
        if isinstance(value, DisplayMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.CARD


# Default spacing unit per mode (pixels)
DEFAULT_SPACING: Dict[LayoutMode, float] = {
    LayoutMode.GRID: 8,
    LayoutMode.TIMELINE: 16,
    LayoutMode.MAGAZINE: 12,
    LayoutMode.MINIMAL: 24,
    LayoutMode.CREATIVE: 20,
    LayoutMode.MASONRY: 16,
    LayoutMode.HERO: 16,
}


def _usable(value: Optional[float], default: float, minimum: float) -> float:
    """Clamp a dimension to a usable finite value."""
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return max(number, minimum)


def _column_hint(value: Optional[float]) -> Optional[int]:
    """Whole column count, or None when missing or not finite."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number)


@dataclass(frozen=True)
class Viewport:
    """
    Viewport dimensions a layout is computed against (immutable).

    Missing, negative or non-finite dimensions are clamped on construction
    so downstream width arithmetic never divides by zero.

    Attributes:
        width: Viewport width in pixels
        height: Viewport height in pixels

    Example:
        >>> Viewport(width=-5, height=800).width
        120.0
    """

    width: float = VIEWPORT_THRESHOLDS.default_width
    height: float = VIEWPORT_THRESHOLDS.default_height

    def __post_init__(self) -> None:
        """Clamp dimensions to a minimum usable size."""
        object.__setattr__(
            self,
            "width",
            _usable(self.width, VIEWPORT_THRESHOLDS.default_width, VIEWPORT_THRESHOLDS.min_width),
        )
        object.__setattr__(
            self,
            "height",
            _usable(self.height, VIEWPORT_THRESHOLDS.default_height, VIEWPORT_THRESHOLDS.min_height),
        )

    @property
    def is_portrait(self) -> bool:
        """Whether the viewport is taller than (or as tall as) it is wide."""
        return self.height >= self.width


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for one layout calculation (immutable).

    Numeric hints are clamped by the calculators rather than rejected, so
    any config produces a usable layout.

    Attributes:
        columns: Column count hint (None = mode default)
        spacing: Spacing unit in pixels (None = mode default)
        aspect_ratio: Aspect hint for estimated heights
        show_captions: Reserve space for excerpts
        show_stats: Reserve space for stats row
        show_dates: Reserve space for date row
        custom_positions: Caller-supplied geometry (creative mode)
        display_modes: Per-entry display mode (entry id -> DisplayMode)

    Example:
        >>> config = LayoutConfig(columns=2, spacing=8)
        >>> config.spacing_for(LayoutMode.GRID)
        8.0
    """

    columns: Optional[int] = None
    spacing: Optional[float] = None
    aspect_ratio: AspectRatio = AspectRatio.DYNAMIC
    show_captions: bool = True
    show_stats: bool = False
    show_dates: bool = False
    custom_positions: tuple[EntryPosition, ...] = ()
    display_modes: Mapping[str, DisplayMode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize numeric hints, enum and collection fields."""
        object.__setattr__(self, "columns", _column_hint(self.columns))
        object.__setattr__(self, "aspect_ratio", AspectRatio.parse(self.aspect_ratio))
        object.__setattr__(self, "custom_positions", tuple(self.custom_positions or ()))
        object.__setattr__(
            self,
            "display_modes",
            {str(k): DisplayMode.parse(v) for k, v in (self.display_modes or {}).items()},
        )

    def spacing_for(self, mode: LayoutMode) -> float:
        """Effective spacing for a mode (configured value or mode default; never negative or non-finite)."""
        default = float(DEFAULT_SPACING.get(mode, DEFAULT_SPACING[LayoutMode.GRID]))
        return _usable(self.spacing, default, 0.0)

    def custom_position_for(self, entry_id: str) -> Optional[EntryPosition]:
        """First custom position recorded for an entry, if any."""
        for position in self.custom_positions:
            if position.entry_id == entry_id:
                return position
        return None

    def display_mode_for(
        self,
        entry_id: str,
        default: Optional[DisplayMode] = None,
    ) -> Optional[DisplayMode]:
        """Display mode configured for an entry, or the default."""
        return self.display_modes.get(entry_id, default)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "columns": self.columns,
            "spacing": self.spacing,
            "aspect_ratio": self.aspect_ratio.value,
            "show_captions": self.show_captions,
            "show_stats": self.show_stats,
            "show_dates": self.show_dates,
            "custom_positions": [p.to_dict() for p in self.custom_positions],
            "display_modes": {k: v.value for k, v in self.display_modes.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutConfig:
        """
        Deserialize from dictionary.

        Accepts snake_case keys or the camelCase keys of stored layout
        configs (showCaptions, aspectRatio, customPositions,
        entryDisplayStyles).

        Raises:
            LayoutConfigError: If data is not a mapping or a custom
                position is malformed
        """
        if not isinstance(data, Mapping):
            raise LayoutConfigError(f"Layout config must be a mapping: {type(data).__name__}")

        def pick(snake: str, camel: str, default: Any = None) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        raw_positions = pick("custom_positions", "customPositions") or []
        positions = []
        for index, raw in enumerate(raw_positions):
            try:
                positions.append(EntryPosition.from_dict(raw))
            except (KeyError, TypeError, ValueError) as exc:
                raise LayoutConfigError(f"Invalid custom position at index {index}: {exc}") from exc

        columns = data.get("columns")
        spacing = data.get("spacing")
        try:
            columns = int(columns) if columns is not None else None
            spacing = float(spacing) if spacing is not None else None
        except (TypeError, ValueError) as exc:
            raise LayoutConfigError(f"Invalid columns/spacing: {exc}") from exc

        return cls(
            columns=columns,
            spacing=spacing,
            aspect_ratio=AspectRatio.parse(pick("aspect_ratio", "aspectRatio")),
            show_captions=bool(pick("show_captions", "showCaptions", True)),
            show_stats=bool(pick("show_stats", "showStats", False)),
            show_dates=bool(pick("show_dates", "showDates", False)),
            custom_positions=tuple(positions),
            display_modes=dict(pick("display_modes", "entryDisplayStyles") or {}),
        )
