"""
Module: engine.models

Purpose:
    Result models for the positioning engine.
    Immutable dataclasses describing a computed layout and the outcome of
    collision checks and auto-arrangement.

Key Classes:
    - LayoutMetadata: Mode-specific details (columns, featured ids, date groups)
    - LayoutResult: Uniform result envelope returned by every calculator
    - CollisionReport: Result of a pairwise overlap scan
    - PlacementOutcome: Tag for best-effort placements
    - ArrangementResult: Positions plus per-entry placement outcomes

Dependencies:
    - dataclasses (std)
    - core.models: EntryPosition, CanvasSize

Used By:
    - engine.columns, engine.timeline, engine.freeform: Build LayoutResults
    - engine.collisions: Build CollisionReports and ArrangementResults
    - debug.visualizer: Preview drawing
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from modspace_layout.core.models import CanvasSize, EntryPosition

from .config import LayoutMode


@dataclass(frozen=True)
class LayoutMetadata:
    """
    Mode-specific layout details consumed by the presentation layer.

    Attributes:
        total_height: Height of laid-out content (excluding trailing margin)
        columns: Active column count (column modes only)
        featured_entries: Ids given featured treatment, in input order
        date_groups: Date-group key -> ordered member ids (timeline only)
        group_headers: Date-group key -> header y offset (timeline only)
    """

    total_height: float = 0
    columns: Optional[int] = None
    featured_entries: tuple[str, ...] = ()
    date_groups: Dict[str, List[str]] = field(default_factory=dict)
    group_headers: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting fields a mode does not use."""
        d: dict[str, Any] = {"total_height": self.total_height}
        if self.columns is not None:
            d["columns"] = self.columns
        if self.featured_entries:
            d["featured_entries"] = list(self.featured_entries)
        if self.date_groups:
            d["date_groups"] = {k: list(v) for k, v in self.date_groups.items()}
            d["group_headers"] = dict(self.group_headers)
        return d


@dataclass(frozen=True)
class LayoutResult:
    """
    Computed layout for one mode.

    Attributes:
        mode: Layout mode that produced the positions
        positions: One position per laid-out entry
        canvas_size: Canvas containing every position plus trailing margin
        metadata: Mode-specific details
        warnings: Degradations applied while computing (clamped widths etc.)

    Example:
        >>> result.position_for("e1").x
        8.0
    """

    mode: LayoutMode
    positions: tuple[EntryPosition, ...]
    canvas_size: CanvasSize
    metadata: LayoutMetadata = field(default_factory=LayoutMetadata)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if no entries were positioned."""
        return len(self.positions) == 0

    def position_for(self, entry_id: str) -> Optional[EntryPosition]:
        """Position of an entry, or None if it was not laid out."""
        for position in self.positions:
            if position.entry_id == entry_id:
                return position
        return None

    def paint_order(self) -> List[EntryPosition]:
        """Positions sorted back-to-front (z_index, ties by original order)."""
        indexed = list(enumerate(self.positions))
        indexed.sort(key=lambda item: (item[1].z_index, item[0]))
        return [position for _, position in indexed]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "mode": self.mode.value,
            "positions": [p.to_dict() for p in self.positions],
            "canvas_size": self.canvas_size.to_dict(),
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class CollisionReport:
    """
    Result of a pairwise overlap scan.

    Suggestions are best-effort: each was checked against the original
    positions only, not against other suggestions, so callers re-check
    after applying them.

    Attributes:
        colliding_ids: Ids in at least one collision, in first-seen order
        suggestions: Colliding id -> nearby collision-free position
    """

    colliding_ids: tuple[str, ...] = ()
    suggestions: Dict[str, EntryPosition] = field(default_factory=dict)

    @property
    def has_collision(self) -> bool:
        """Whether any pair of boxes overlaps."""
        return len(self.colliding_ids) > 0


class PlacementOutcome(str, Enum):
    """Outcome of a best-effort placement."""

    PLACED = "placed"
    PLACED_WITH_POSSIBLE_OVERLAP = "placed_with_possible_overlap"


@dataclass(frozen=True)
class ArrangementResult:
    """
    Output of auto-arrangement.

    Attributes:
        positions: Arranged positions, in ascending z order
        outcomes: Entry id -> placement outcome
    """

    positions: tuple[EntryPosition, ...]
    outcomes: Dict[str, PlacementOutcome] = field(default_factory=dict)

    @property
    def fully_resolved(self) -> bool:
        """Whether every box found a collision-free slot."""
        return all(o is PlacementOutcome.PLACED for o in self.outcomes.values())

    @property
    def unresolved_ids(self) -> List[str]:
        """Ids placed at their last attempted slot despite possible overlap."""
        return [
            entry_id
            for entry_id, outcome in self.outcomes.items()
            if outcome is PlacementOutcome.PLACED_WITH_POSSIBLE_OVERLAP
        ]
