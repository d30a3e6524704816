"""
Unit Tests for Timeline and Minimal Layouts

Tests for date grouping and the single-column chronological layouts.
"""

import pytest

from modspace_layout.engine.config import LayoutConfig, LayoutMode, Viewport
from modspace_layout.engine.heights import HeightStyle, estimate_height
from modspace_layout.engine.timeline import (
    calculate_minimal_layout,
    calculate_timeline_layout,
    group_entries_by_date,
    sort_newest_first,
)


class TestGroupEntriesByDate:
    """Tests for group_entries_by_date()."""

    def test_group_when_invalid_date_then_unknown_group_last(self, entry_factory):
        """Undated entries go to 'unknown', after every dated group."""
        entries = [
            entry_factory("b", share_date="invalid"),
            entry_factory("a", share_date="2024-01-02"),
        ]

        groups = group_entries_by_date(entries)

        assert list(groups) == ["2024-01-02", "unknown"]
        assert [e.id for e in groups["unknown"]] == ["b"]

    def test_group_when_epoch_dated_entry_then_still_before_unknown(self, entry_factory):
        """An entry genuinely dated at the epoch is not mixed into 'unknown'."""
        entries = [
            entry_factory("undated", share_date=None),
            entry_factory("epoch", share_date=0),
        ]

        groups = group_entries_by_date(entries)

        assert list(groups) == ["1970-01-01", "unknown"]

    def test_group_when_same_day_then_newest_first_within_group(self, entry_factory):
        """Members of one day are ordered newest first."""
        entries = [
            entry_factory("morning", share_date="2024-03-01T09:00:00Z"),
            entry_factory("evening", share_date="2024-03-01T18:30:00Z"),
            entry_factory("older", share_date="2024-02-28"),
        ]

        groups = group_entries_by_date(entries)

        assert list(groups) == ["2024-03-01", "2024-02-28"]
        assert [e.id for e in groups["2024-03-01"]] == ["evening", "morning"]

    def test_group_when_offset_timestamp_then_keyed_by_utc_day(self, entry_factory):
        """Day keys use the UTC calendar day."""
        groups = group_entries_by_date([entry_factory("a", share_date="2024-01-02T01:00:00+05:00")])
        assert list(groups) == ["2024-01-01"]

    def test_group_when_empty_then_empty(self):
        """No entries yield no groups."""
        assert group_entries_by_date([]) == {}


class TestSortNewestFirst:
    """Tests for sort_newest_first()."""

    def test_sort_when_equal_dates_then_stable(self, entry_factory):
        """Entries with equal timestamps keep their input order."""
        entries = [entry_factory(f"e{i}", share_date="2024-01-02") for i in range(4)]
        assert [e.id for e in sort_newest_first(entries)] == ["e0", "e1", "e2", "e3"]


class TestTimelineLayout:
    """Tests for calculate_timeline_layout()."""

    def test_layout_when_two_groups_then_headers_and_offsets(self, entry_factory, phone_viewport):
        """Groups get a header block; entries sit right of the rail."""
        entries = [
            entry_factory("a", share_date="2024-01-02"),
            entry_factory("b", share_date="invalid"),
        ]
        config = LayoutConfig(spacing=16, show_captions=False)

        result = calculate_timeline_layout(entries, config, phone_viewport)

        a, b = result.positions
        assert (a.x, a.width) == (60, 284)
        assert result.metadata.group_headers["2024-01-02"] == 32
        assert a.y == 92
        # 284 * 0.6 base + 20 title + 20 padding
        assert a.height == pytest.approx(210.4)
        assert result.metadata.group_headers["unknown"] == pytest.approx(92 + 210.4 + 16 + 40 + 16)
        assert b.y == pytest.approx(result.metadata.group_headers["unknown"] + 60)
        assert result.metadata.date_groups == {"2024-01-02": ["a"], "unknown": ["b"]}
        assert result.mode is LayoutMode.TIMELINE

    def test_layout_when_positions_then_no_overlap_and_contained(self, mixed_entries, phone_viewport):
        """Entries never overlap and fit in the canvas."""
        result = calculate_timeline_layout(mixed_entries, LayoutConfig(), phone_viewport)

        positions = result.positions
        assert len(positions) == len(mixed_entries)
        for i, p in enumerate(positions):
            assert p.right <= result.canvas_size.width
            assert p.bottom <= result.canvas_size.height
            for q in positions[i + 1:]:
                assert not p.overlaps(q)

    def test_layout_when_positions_then_z_sequential(self, mixed_entries, phone_viewport):
        """Stacking order follows chronological order."""
        result = calculate_timeline_layout(mixed_entries, LayoutConfig(), phone_viewport)
        assert [p.z_index for p in result.positions] == list(range(len(mixed_entries)))

    def test_layout_when_narrow_viewport_then_width_clamped(self, entry_factory):
        """Item widths below the minimum are clamped with a warning."""
        result = calculate_timeline_layout(
            [entry_factory("a")], LayoutConfig(spacing=40), Viewport(120, 640)
        )
        assert result.positions[0].width == 40
        assert result.warnings
        assert result.positions[0].right <= result.canvas_size.width


class TestMinimalLayout:
    """Tests for calculate_minimal_layout()."""

    def test_layout_when_entries_then_newest_first_with_divider(self, entry_factory, phone_viewport):
        """Rows are newest first, separated by a 1px divider."""
        entries = [
            entry_factory("old", share_date="2023-05-01"),
            entry_factory("new", share_date="2024-05-01"),
        ]
        config = LayoutConfig()

        result = calculate_minimal_layout(entries, config, phone_viewport)

        first, second = result.positions
        assert [first.entry_id, second.entry_id] == ["new", "old"]
        assert (first.x, first.y, first.width) == (24, 24, 312)
        expected_height = estimate_height(entries[1], 312, config, style=HeightStyle.MINIMAL)
        assert first.height == pytest.approx(expected_height)
        assert second.y == pytest.approx(first.bottom + 1)
        assert result.canvas_size.height == pytest.approx(second.bottom + 24)
        assert result.mode is LayoutMode.MINIMAL

    def test_layout_when_narrow_viewport_then_width_clamped_with_warning(self, entry_factory):
        """Row widths below the minimum are clamped and reported."""
        result = calculate_minimal_layout(
            [entry_factory("a")], LayoutConfig(spacing=50), Viewport(120, 640)
        )

        assert result.positions[0].width == 40
        assert len(result.warnings) == 1
        assert "clamped" in result.warnings[0]
        assert result.positions[0].right <= result.canvas_size.width

    def test_layout_when_wide_enough_then_no_warning(self, entry_factory, phone_viewport):
        """Normal viewports produce no warnings."""
        result = calculate_minimal_layout([entry_factory("a")], LayoutConfig(), phone_viewport)
        assert result.warnings == []
