"""
Module: entries

Purpose:
    Provides the Entry dataclass - the read-only view of a shared journal
    excerpt or media item that the positioning engine lays out. The engine
    only reads lengths and presence of these fields, never their rendered
    form.

Key Functions:
    - Entry.timestamp: Parsed share date (UTC) or None
    - Entry.from_dict(data): Build from a content payload
    - Entry.to_dict(): Serialize for JSON
    - parse_share_date(value): Normalize a share date to aware UTC datetime

Dependencies:
    - dataclasses (std)
    - datetime (std)

Used By:
    - engine.heights: Height estimation
    - engine.timeline: Chronological grouping
    - engine.dispatcher: Layout entry point
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Optional, Union

ShareDate = Union[datetime, date, str, int, float, None]


def parse_share_date(value: ShareDate) -> Optional[datetime]:
    """
    Normalize a share date into a timezone-aware UTC datetime.

    Accepts datetimes (naive values are treated as UTC), dates, ISO-8601
    strings (a trailing "Z" is accepted) and epoch seconds.

    Args:
        value: Raw share date from the content model

    Returns:
        Aware UTC datetime, or None when the value cannot be parsed

    Example:
        >>> parse_share_date("2024-01-02T10:00:00Z")
        datetime.datetime(2024, 1, 2, 10, 0, tzinfo=datetime.timezone.utc)
        >>> parse_share_date("invalid") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class Entry:
    """
    One shareable content item to be positioned (immutable).

    Attributes:
        id: Unique entry identifier
        title: Title text
        excerpt: Excerpt/caption text (may be empty)
        share_date: Raw share date (datetime, date, ISO string or epoch)
        tags: Tag labels
        has_thumbnail: Whether the entry carries a thumbnail image

    Example:
        >>> entry = Entry(id="e1", title="Morning pages", excerpt="...")
        >>> entry.has_tags
        False
    """

    id: str
    title: str = ""
    excerpt: str = ""
    share_date: ShareDate = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    has_thumbnail: bool = False

    def __post_init__(self) -> None:
        """Normalize tag collections to a tuple."""
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags or ()))

    @property
    def timestamp(self) -> Optional[datetime]:
        """Share date as aware UTC datetime, or None if unparseable."""
        return parse_share_date(self.share_date)

    @property
    def has_tags(self) -> bool:
        """Whether the entry has at least one tag."""
        return len(self.tags) > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage."""
        timestamp = self.timestamp
        d: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "excerpt": self.excerpt,
            "share_date": timestamp.isoformat() if timestamp else None,
            "tags": list(self.tags),
        }
        if self.has_thumbnail:
            d["has_thumbnail"] = True
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        """
        Deserialize from dictionary.

        Accepts both snake_case keys and the camelCase keys used by the
        shared-entry content model (shareDate, thumbnail).

        Args:
            data: Dict with at least an "id" key

        Returns:
            Entry instance
        """
        share_date = data.get("share_date", data.get("shareDate"))
        has_thumbnail = data.get("has_thumbnail")
        if has_thumbnail is None:
            has_thumbnail = bool(data.get("thumbnail"))
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            excerpt=data.get("excerpt") or "",
            share_date=share_date,
            tags=tuple(data.get("tags") or ()),
            has_thumbnail=bool(has_thumbnail),
        )
