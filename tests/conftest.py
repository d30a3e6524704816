import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import modspace_layout
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from modspace_layout.core.models import Entry  # noqa: E402
from modspace_layout.engine import Viewport  # noqa: E402


# Common test fixtures
@pytest.fixture
def entry_factory():
    """Factory to create entries with sensible defaults."""
    def _create(
        entry_id: str,
        title: str = "Entry",
        excerpt: str = "",
        share_date=None,
        tags=(),
    ) -> Entry:
        return Entry(
            id=entry_id,
            title=title,
            excerpt=excerpt,
            share_date=share_date,
            tags=tuple(tags),
        )
    return _create


@pytest.fixture
def uniform_entries(entry_factory):
    """Seven entries with identical content (identical estimated heights)."""
    return [entry_factory(f"e{i}", title="Entry n") for i in range(7)]


@pytest.fixture
def mixed_entries(entry_factory):
    """Entries with varied text lengths, tags and dates."""
    return [
        entry_factory("m0", title="Short", share_date="2024-03-01T09:00:00Z"),
        entry_factory("m1", title="A much longer title that wraps onto two lines",
                      excerpt="x" * 120, share_date="2024-03-01T18:30:00Z", tags=["travel"]),
        entry_factory("m2", title="Mid", excerpt="y" * 40, share_date="2024-02-28"),
        entry_factory("m3", title="T" * 75, share_date="not a date", tags=["a", "b"]),
        entry_factory("m4", title="Notes", excerpt="z" * 260, share_date="2024-02-28T23:59:00Z"),
        entry_factory("m5", title="Weekend", tags=["fun"], share_date="2023-12-31"),
        entry_factory("m6", title="Recipes and other things", excerpt="w" * 10),
        entry_factory("m7", title="Last", share_date="2024-03-02"),
    ]


@pytest.fixture
def phone_viewport():
    """Narrow portrait viewport."""
    return Viewport(width=360, height=640)
