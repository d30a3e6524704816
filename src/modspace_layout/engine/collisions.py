"""
Module: engine.collisions

Purpose:
    Detect and resolve overlapping boxes on the free-form canvas. Nothing
    here runs automatically after a layout calculation; callers invoke it
    on demand (e.g. after a drag ends).

Key Functions:
    - rectangles_overlap(): Strict pairwise overlap test
    - overlap_matrix(): Vectorized pairwise overlaps
    - detect_collisions(): Colliding ids plus relocation suggestions
    - find_nearest_non_colliding_position(): Bounded ring search
    - auto_arrange_entries(): Greedy grid-step arrangement
    - snap_to_grid(): Round a box origin to the grid

Edge Convention:
    Boxes that merely share an edge (a.x + a.width == b.x) do NOT collide.

Dependencies:
    - numpy: Pairwise overlap matrix
    - common.thresholds: COLLISION_THRESHOLDS

Used By:
    - Presentation layer (free-form editing)
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

import numpy as np

from modspace_layout.common.thresholds import COLLISION_THRESHOLDS
from modspace_layout.core.models import CanvasSize, EntryPosition

from .models import ArrangementResult, CollisionReport, PlacementOutcome

logger = logging.getLogger(__name__)

# Probe directions per ring: N, E, S, W, then NE, SE, SW, NW
_RING_DIRECTIONS = (
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 0),
    (1, -1),
    (1, 1),
    (-1, 1),
    (-1, -1),
)


def rectangles_overlap(a: EntryPosition, b: EntryPosition) -> bool:
    """Whether two boxes overlap on both axes (touching edges do not count)."""
    return a.overlaps(b)


def overlap_matrix(positions: Sequence[EntryPosition]) -> np.ndarray:
    """
    Pairwise overlap matrix.

    Args:
        positions: Boxes to compare

    Returns:
        Symmetric (n, n) boolean array; [i, j] is True when boxes i and j
        overlap. The diagonal is always False.
    """
    count = len(positions)
    if count == 0:
        return np.zeros((0, 0), dtype=bool)

    x = np.array([p.x for p in positions], dtype=float)
    y = np.array([p.y for p in positions], dtype=float)
    right = x + np.array([p.width for p in positions], dtype=float)
    bottom = y + np.array([p.height for p in positions], dtype=float)

    separated = (
        (right[:, None] <= x[None, :])
        | (right[None, :] <= x[:, None])
        | (bottom[:, None] <= y[None, :])
        | (bottom[None, :] <= y[:, None])
    )
    matrix = ~separated
    np.fill_diagonal(matrix, False)
    return matrix


def detect_collisions(
    positions: Sequence[EntryPosition],
    step: float = COLLISION_THRESHOLDS.search_step,
    max_radius: float = COLLISION_THRESHOLDS.search_max_radius,
) -> CollisionReport:
    """
    Find every entry involved in at least one overlap.

    Ids are reported in the order their pairs are first seen (row-major
    over i < j). Each colliding id gets a relocation suggestion when the
    ring search finds one; suggestions are checked against the original
    positions only, so two suggestions may still overlap each other.

    Args:
        positions: Boxes to scan
        step: Ring step for suggestions
        max_radius: Ring search bound for suggestions

    Returns:
        CollisionReport
    """
    matrix = overlap_matrix(positions)
    colliding: List[str] = []
    seen = set()

    for i, j in np.argwhere(np.triu(matrix, k=1)):
        for index in (int(i), int(j)):
            entry_id = positions[index].entry_id
            if entry_id not in seen:
                seen.add(entry_id)
                colliding.append(entry_id)

    suggestions: Dict[str, EntryPosition] = {}
    for entry_id in colliding:
        position = next(p for p in positions if p.entry_id == entry_id)
        suggestion = find_nearest_non_colliding_position(position, positions, step, max_radius)
        if suggestion is not None:
            suggestions[entry_id] = suggestion

    if colliding:
        logger.debug(
            f"Detected {len(colliding)} colliding entries, "
            f"{len(suggestions)} with relocation suggestions"
        )

    return CollisionReport(colliding_ids=tuple(colliding), suggestions=suggestions)


def find_nearest_non_colliding_position(
    position: EntryPosition,
    all_positions: Sequence[EntryPosition],
    step: float = COLLISION_THRESHOLDS.search_step,
    max_radius: float = COLLISION_THRESHOLDS.search_max_radius,
    allow_negative: bool = False,
) -> Optional[EntryPosition]:
    """
    Search outward for the nearest slot free of overlaps.

    Rings are probed at step, 2*step, ... up to max_radius; each ring tries
    8 candidates (N, E, S, W, NE, SE, SW, NW). Candidates with a negative
    coordinate lie off the canvas and are skipped unless allow_negative is
    set (a box at the origin then moves north to y = -step).
    Boxes sharing the position's entry id are ignored.

    Args:
        position: Box to relocate
        all_positions: Every box on the canvas (may include `position`)
        step: Ring spacing (clamped to >= 1)
        max_radius: Largest ring distance
        allow_negative: Also probe candidates left of or above the canvas origin

    Returns:
        Relocated copy of `position`, or None when no ring has a free slot.
        None is a soft failure: callers keep the original position.
    """
    step = step if step > 0 else 1
    others = [p for p in all_positions if p.entry_id != position.entry_id]

    ring = 1
    while step * ring <= max_radius:
        distance = step * ring
        for dx, dy in _RING_DIRECTIONS:
            x = position.x + dx * distance
            y = position.y + dy * distance
            if not allow_negative and (x < 0 or y < 0):
                continue
            candidate = position.moved_to(x, y)
            if not any(candidate.overlaps(other) for other in others):
                return candidate
        ring += 1

    return None


def auto_arrange_entries(
    positions: Sequence[EntryPosition],
    canvas_size: CanvasSize,
    grid_size: float = COLLISION_THRESHOLDS.grid_size,
    max_attempts: int = COLLISION_THRESHOLDS.max_arrange_attempts,
) -> ArrangementResult:
    """
    Greedily rearrange boxes so none overlap.

    Boxes are processed back-to-front (ascending z_index, ties by input
    order). Each box steps right by grid_size, wrapping to x = grid_size on
    the next grid row when it would pass the canvas width, until it clears
    every box placed before it. After max_attempts the box stays at its
    last attempted slot and is tagged PLACED_WITH_POSSIBLE_OVERLAP.

    Args:
        positions: Boxes to arrange
        canvas_size: Canvas the boxes wrap within
        grid_size: Step size (clamped to >= 1)
        max_attempts: Probe budget per box

    Returns:
        ArrangementResult with arranged positions in processing order
    """
    grid_size = grid_size if grid_size > 0 else 1
    ordered = sorted(enumerate(positions), key=lambda item: (item[1].z_index, item[0]))

    arranged: List[EntryPosition] = []
    outcomes: Dict[str, PlacementOutcome] = {}

    for _, position in ordered:
        candidate = position
        placed = False

        for _attempt in range(max(max_attempts, 0)):
            if not any(candidate.overlaps(other) for other in arranged):
                placed = True
                break

            x = candidate.x + grid_size
            y = candidate.y
            if x + candidate.width > canvas_size.width:
                x = grid_size
                y += grid_size
            candidate = candidate.moved_to(x, y)

        if not placed:
            placed = not any(candidate.overlaps(other) for other in arranged)

        if placed:
            outcomes[position.entry_id] = PlacementOutcome.PLACED
        else:
            outcomes[position.entry_id] = PlacementOutcome.PLACED_WITH_POSSIBLE_OVERLAP
            logger.warning(
                f"Auto-arrange gave up on {position.entry_id!r} after {max_attempts} "
                f"attempts; placed at ({candidate.x:.0f}, {candidate.y:.0f}) with possible overlap"
            )
        arranged.append(candidate)

    return ArrangementResult(positions=tuple(arranged), outcomes=outcomes)


def snap_to_grid(
    position: EntryPosition,
    grid_size: float = COLLISION_THRESHOLDS.grid_size,
) -> EntryPosition:
    """
    Round a box origin to the nearest grid multiple (halves round up).

    Width, height and z_index are untouched. Snapping is idempotent.

    Example:
        >>> snap_to_grid(EntryPosition("a", 31, 9, 50, 50)).x
        40
    """
    grid_size = grid_size if grid_size > 0 else 1
    x = math.floor(position.x / grid_size + 0.5) * grid_size
    y = math.floor(position.y / grid_size + 0.5) * grid_size
    return position.moved_to(x, y)
