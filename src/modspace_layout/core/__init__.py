"""
Core data models for the positioning engine.

Entries are read-only inputs; positions and canvas sizes are computed fresh
on every call. Nothing here holds state across calls.
"""

from .models import CanvasSize, Entry, EntryPosition, parse_share_date

__all__ = [
    "Entry",
    "EntryPosition",
    "CanvasSize",
    "parse_share_date",
]
