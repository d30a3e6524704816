"""
Core Models Package

Immutable data models shared by every layout calculator.

All models in this package are frozen dataclasses, so a result returned by
one call can be handed back into another (e.g. stored custom positions)
without the engine ever mutating caller data.
"""

from .entries import Entry, parse_share_date
from .positions import CanvasSize, EntryPosition

__all__ = [
    "Entry",
    "EntryPosition",
    "CanvasSize",
    "parse_share_date",
]
