"""
Unit Tests for Entry Model

Tests for share date parsing and content payload deserialization.
"""

from datetime import date, datetime, timezone

import pytest

from modspace_layout.core.models.entries import Entry, parse_share_date


class TestParseShareDate:
    """Tests for parse_share_date()."""

    def test_parse_when_iso_string_with_z_then_returns_utc(self):
        """Trailing Z should parse as UTC."""
        parsed = parse_share_date("2024-01-02T10:00:00Z")
        assert parsed == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)

    def test_parse_when_offset_string_then_converts_to_utc(self):
        """Offsets should be normalized to UTC (may change the calendar day)."""
        parsed = parse_share_date("2024-01-02T01:00:00+05:00")
        assert parsed == datetime(2024, 1, 1, 20, 0, tzinfo=timezone.utc)

    def test_parse_when_date_only_string_then_midnight_utc(self):
        """Date-only strings should parse to midnight UTC."""
        assert parse_share_date("2024-01-02") == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_parse_when_naive_datetime_then_treated_as_utc(self):
        """Naive datetimes should be tagged as UTC, not shifted."""
        parsed = parse_share_date(datetime(2024, 5, 6, 7, 8))
        assert parsed == datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc)

    def test_parse_when_date_object_then_midnight_utc(self):
        """date objects should parse to midnight UTC."""
        assert parse_share_date(date(2023, 12, 31)) == datetime(2023, 12, 31, tzinfo=timezone.utc)

    def test_parse_when_epoch_seconds_then_returns_datetime(self):
        """Numbers are epoch seconds."""
        assert parse_share_date(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["invalid", "", "   ", None, True, [], "2024-13-45"])
    def test_parse_when_unparseable_then_returns_none(self, value):
        """Unparseable values should return None, never raise."""
        assert parse_share_date(value) is None


class TestEntry:
    """Tests for Entry dataclass."""

    def test_init_when_tags_list_then_normalized_to_tuple(self):
        """Tag lists should be stored as tuples."""
        entry = Entry(id="e1", tags=["a", "b"])
        assert entry.tags == ("a", "b")
        assert entry.has_tags is True

    def test_has_tags_when_no_tags_then_false(self):
        """Entries without tags report has_tags False."""
        assert Entry(id="e1").has_tags is False

    def test_timestamp_when_invalid_date_then_none(self):
        """timestamp should be None for an unparseable share date."""
        assert Entry(id="e1", share_date="invalid").timestamp is None

    def test_from_dict_when_camel_case_payload_then_parses(self):
        """Content-model camelCase keys should be accepted."""
        entry = Entry.from_dict({
            "id": 42,
            "title": "Morning pages",
            "excerpt": None,
            "shareDate": "2024-01-02T08:00:00Z",
            "thumbnail": "thumb.png",
            "tags": ["journal"],
        })

        assert entry.id == "42"
        assert entry.excerpt == ""
        assert entry.has_thumbnail is True
        assert entry.tags == ("journal",)
        assert entry.timestamp == datetime(2024, 1, 2, 8, 0, tzinfo=timezone.utc)

    def test_from_dict_when_missing_id_then_raises(self):
        """id is required."""
        with pytest.raises(KeyError):
            Entry.from_dict({"title": "No id"})

    def test_to_dict_when_serialized_then_normalizes_date(self):
        """to_dict should emit the parsed date in ISO format."""
        entry = Entry(id="e1", title="T", share_date="2024-01-02", tags=["x"])
        d = entry.to_dict()

        assert d["share_date"] == "2024-01-02T00:00:00+00:00"
        assert d["tags"] == ["x"]
        assert "has_thumbnail" not in d
