"""
Unit Tests for Layout Dispatch

Tests for calculate_layout(): mode resolution, defaults and the properties
every mode shares (determinism, containment, empty input).
"""

import logging

import pytest

from modspace_layout.core.models import CanvasSize
from modspace_layout.engine.config import LayoutConfig, LayoutMode, Viewport
from modspace_layout.engine.dispatcher import calculate_layout

ALL_MODES = list(LayoutMode)
SINGLE_FLOW_MODES = [
    LayoutMode.GRID,
    LayoutMode.MAGAZINE,
    LayoutMode.MASONRY,
    LayoutMode.HERO,
    LayoutMode.TIMELINE,
    LayoutMode.MINIMAL,
]


class TestCalculateLayout:
    """Tests for calculate_layout()."""

    # ─────────────────────────────────────────────────────────────────────────
    # Mode Resolution
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("mode", ALL_MODES + ["bogus"])
    def test_calculate_when_no_entries_then_empty_viewport_canvas(self, mode, phone_viewport):
        """Empty input yields no positions and a viewport-sized canvas."""
        result = calculate_layout([], mode, viewport=phone_viewport)

        assert result.positions == ()
        assert result.is_empty is True
        assert result.canvas_size == CanvasSize(360, 640)

    def test_calculate_when_unknown_mode_then_grid(self, mixed_entries, phone_viewport, caplog):
        """Unknown tags fall back to grid and log at debug level."""
        config = LayoutConfig(columns=2, spacing=8)

        with caplog.at_level(logging.DEBUG, logger="modspace_layout.engine.dispatcher"):
            fallback = calculate_layout(mixed_entries, "bogus", config, phone_viewport)
        grid = calculate_layout(mixed_entries, LayoutMode.GRID, config, phone_viewport)

        assert fallback == grid
        assert fallback.mode is LayoutMode.GRID
        assert "falling back to grid" in caplog.text

    def test_calculate_when_string_tag_then_resolved(self, mixed_entries, phone_viewport):
        """String tags resolve case-insensitively."""
        result = calculate_layout(mixed_entries, " Magazine ", viewport=phone_viewport)
        assert result.mode is LayoutMode.MAGAZINE

    # ─────────────────────────────────────────────────────────────────────────
    # Defaults
    # ─────────────────────────────────────────────────────────────────────────

    def test_calculate_when_no_config_then_uses_preset(self, uniform_entries, phone_viewport):
        """Without a config, the mode's preset applies (grid: spacing 4)."""
        result = calculate_layout(uniform_entries, LayoutMode.GRID, viewport=phone_viewport)

        # Preset asks for 3 columns; portrait caps at 2
        assert result.metadata.columns == 2
        assert sorted({p.x for p in result.positions}) == [4, 182]

    def test_calculate_when_orientation_omitted_then_derived_from_viewport(self, mixed_entries):
        """Wide viewports are treated as landscape."""
        result = calculate_layout(mixed_entries, "grid", LayoutConfig(), Viewport(900, 500))
        assert result.metadata.columns == 3

    def test_calculate_when_orientation_forced_then_overrides_viewport(self, mixed_entries):
        """An explicit orientation flag wins over the viewport shape."""
        result = calculate_layout(mixed_entries, "grid", LayoutConfig(), Viewport(900, 500), is_portrait=True)
        assert result.metadata.columns == 2

    def test_calculate_when_no_viewport_then_default(self, uniform_entries):
        """Missing viewport falls back to the default phone viewport."""
        result = calculate_layout(uniform_entries, "grid", LayoutConfig(columns=2, spacing=8))
        assert result.canvas_size.width == 390

    # ─────────────────────────────────────────────────────────────────────────
    # Shared Properties
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_calculate_when_called_twice_then_identical(self, mode, mixed_entries, phone_viewport):
        """Every mode is deterministic."""
        first = calculate_layout(mixed_entries, mode, viewport=phone_viewport)
        second = calculate_layout(mixed_entries, mode, viewport=phone_viewport)
        assert first == second

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_calculate_when_entries_then_one_position_each(self, mode, mixed_entries, phone_viewport):
        """Every entry gets exactly one position."""
        result = calculate_layout(mixed_entries, mode, viewport=phone_viewport)
        assert sorted(p.entry_id for p in result.positions) == sorted(e.id for e in mixed_entries)

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_calculate_when_entries_then_canvas_contains_all(self, mode, mixed_entries, phone_viewport):
        """The canvas contains every box."""
        result = calculate_layout(mixed_entries, mode, viewport=phone_viewport)
        for p in result.positions:
            assert p.x >= 0 and p.y >= 0
            assert p.right <= result.canvas_size.width
            assert p.bottom <= result.canvas_size.height

    @pytest.mark.parametrize("mode", SINGLE_FLOW_MODES)
    def test_calculate_when_generated_layout_then_no_overlaps(self, mode, mixed_entries, phone_viewport):
        """Generated layouts never overlap."""
        positions = calculate_layout(mixed_entries, mode, viewport=phone_viewport).positions
        for i, p in enumerate(positions):
            for q in positions[i + 1:]:
                assert not p.overlaps(q), f"{p.entry_id} overlaps {q.entry_id}"

    def test_calculate_when_timeline_then_invalid_date_grouped_last(self, entry_factory, phone_viewport):
        """Undated entries are collected after every dated group."""
        entries = [
            entry_factory("a", share_date="2024-01-02"),
            entry_factory("b", share_date="invalid"),
        ]

        result = calculate_layout(entries, "timeline", viewport=phone_viewport)

        assert list(result.metadata.date_groups) == ["2024-01-02", "unknown"]
        assert result.position_for("b").y > result.position_for("a").bottom

    def test_calculate_when_narrow_columns_then_warning_logged(self, mixed_entries, caplog):
        """Degradations surface as warnings in the log and the result."""
        with caplog.at_level(logging.WARNING):
            result = calculate_layout(mixed_entries, "grid", LayoutConfig(columns=2, spacing=40), Viewport(120, 640))

        assert result.warnings
        assert "clamped" in caplog.text
