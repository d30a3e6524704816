"""
Module: positions

Purpose:
    Provides EntryPosition and CanvasSize - the geometry produced by every
    layout calculator. Positions are axis-aligned boxes relative to a canvas
    origin at (0, 0).

Key Functions:
    - EntryPosition.overlaps(other): Strict overlap test (shared edges don't count)
    - EntryPosition.moved_to(x, y): Copy at a new origin
    - EntryPosition.with_z_index(z): Copy with a new stacking order
    - EntryPosition.to_dict() / from_dict(data): Serialization
    - CanvasSize.containing(positions, ...): Canvas grown to fit boxes

Dependencies:
    - dataclasses (std)

Used By:
    - engine.columns, engine.timeline, engine.freeform: Produce positions
    - engine.collisions: Overlap detection and resolution
    - debug.visualizer: Preview drawing

Invariants:
    - width > 0
    - height > 0
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable


@dataclass(frozen=True, slots=True)
class EntryPosition:
    """
    Bounding box for one entry on the canvas.

    The box covers [x, x + width) x [y, y + height). Boxes that merely share
    an edge do NOT overlap; layouts routinely place abutting boxes.

    Attributes:
        entry_id: Identifier of the positioned entry
        x: Left edge (pixels from canvas left)
        y: Top edge (pixels from canvas top)
        width: Box width (> 0)
        height: Box height (> 0)
        z_index: Paint order, higher paints above

    Example:
        >>> a = EntryPosition("a", x=0, y=0, width=100, height=50)
        >>> b = EntryPosition("b", x=100, y=0, width=100, height=50)
        >>> a.overlaps(b)  # shared edge
        False
    """

    entry_id: str
    x: float
    y: float
    width: float
    height: float
    z_index: int = 0

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be > 0: {self.height}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> float:
        """Right edge (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (exclusive)."""
        return self.y + self.height

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def overlaps(self, other: EntryPosition) -> bool:
        """
        Check whether this box overlaps another.

        Two boxes collide iff they overlap on both axes. Touching edges
        (self.right == other.x, etc.) are NOT a collision.

        Args:
            other: Box to check against

        Returns:
            True if the boxes share any area
        """
        return not (
            self.x + self.width <= other.x
            or other.x + other.width <= self.x
            or self.y + self.height <= other.y
            or other.y + other.height <= self.y
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Copies
    # ─────────────────────────────────────────────────────────────────────────

    def moved_to(self, x: float, y: float) -> EntryPosition:
        """Return a copy with a new origin (size and z-order unchanged)."""
        return replace(self, x=x, y=y)

    def with_z_index(self, z_index: int) -> EntryPosition:
        """Return a copy with a new stacking order."""
        return replace(self, z_index=z_index)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage."""
        return {
            "entry_id": self.entry_id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "z_index": self.z_index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EntryPosition:
        """
        Deserialize from dictionary.

        Accepts snake_case keys or the camelCase keys (entryId, zIndex)
        of stored custom positions.

        Raises:
            KeyError: If a required key is missing
            ValueError: If width or height is not positive
        """
        entry_id = data["entry_id"] if "entry_id" in data else data["entryId"]
        z_index = data.get("z_index", data.get("zIndex", 0))
        return cls(
            entry_id=str(entry_id),
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            z_index=int(z_index),
        )


@dataclass(frozen=True, slots=True)
class CanvasSize:
    """
    Drawable area sized to contain all computed positions.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
    """

    width: float
    height: float

    @classmethod
    def containing(
        cls,
        positions: Iterable[EntryPosition],
        min_width: float,
        min_height: float,
        margin: float = 0,
    ) -> CanvasSize:
        """
        Smallest canvas of at least (min_width, min_height) that contains
        every box plus a trailing margin.

        Args:
            positions: Boxes to contain
            min_width: Minimum canvas width (usually the viewport width)
            min_height: Minimum canvas height (usually the viewport height)
            margin: Trailing margin added past the furthest box edge

        Returns:
            CanvasSize instance
        """
        width = min_width
        height = min_height
        for pos in positions:
            width = max(width, pos.right + margin)
            height = max(height, pos.bottom + margin)
        return cls(width=width, height=height)

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary."""
        return {"width": self.width, "height": self.height}
