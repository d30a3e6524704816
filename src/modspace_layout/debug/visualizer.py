"""
Module: debug.visualizer

Purpose:
    Debug visualization for computed layouts. Draws every bounding box in
    paint order on a canvas-sized image so layout issues (overlaps, column
    imbalance, group spacing) can be inspected. This draws geometry only;
    it is not card rendering.

Key Functions:
    - render_layout_preview(): Create preview image for a LayoutResult
    - save_layout_preview(): Save preview to disk

Dependencies:
    - PIL: Image drawing
    - engine.models: LayoutResult

Used By:
    - scripts/preview_layout.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Set, Tuple

from PIL import Image, ImageDraw, ImageFont

from modspace_layout.engine.models import LayoutResult

logger = logging.getLogger(__name__)

# Visualization constants
COLORS = {
    "entry": (0, 102, 255, 160),       # Blue - regular entries
    "featured": (255, 107, 0, 200),    # Orange - featured entries
    "overlap": (220, 0, 0, 220),       # Red - colliding entries
    "header": (120, 120, 120, 90),     # Grey - timeline group headers
}

BACKGROUND_COLOR = (255, 255, 255, 255)
LABEL_BG_COLOR = (0, 0, 0, 200)      # Black background for labels
LABEL_TEXT_COLOR = (255, 255, 255)    # White text
BOX_LINE_WIDTH = 2
FONT_SIZE = 14
MAX_PREVIEW_DIMENSION = 8000


def render_layout_preview(
    result: LayoutResult,
    scale: float = 1.0,
    highlight_ids: Set[str] | None = None,
) -> Image.Image:
    """
    Draw a layout's bounding boxes on a canvas-sized image.

    Boxes are drawn back-to-front:
    - Blue: regular entries
    - Orange: featured entries
    - Red: entries listed in highlight_ids (e.g. colliding ids)
    - Grey bands: timeline date-group headers

    Each box is labeled with its entry id and z-index.

    Args:
        result: Layout to draw
        scale: Pixel scale applied to every coordinate
        highlight_ids: Entry ids to draw in the overlap color

    Returns:
        New RGB image

    Example:
        >>> img = render_layout_preview(result, scale=0.5)
        >>> img.save("layout.png")
    """
    scale = scale if scale > 0 else 1.0
    highlight_ids = highlight_ids or set()
    featured = set(result.metadata.featured_entries)

    width = _clamp_dimension(result.canvas_size.width * scale)
    height = _clamp_dimension(result.canvas_size.height * scale)

    preview = Image.new("RGBA", (width, height), BACKGROUND_COLOR)
    overlay = Image.new("RGBA", preview.size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(overlay)

    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()

    # Timeline header bands span the full canvas width
    for date_key, header_y in result.metadata.group_headers.items():
        top = header_y * scale
        band = (0, top, width - 1, top + 24 * scale)
        draw.rectangle(band, fill=COLORS["header"])
        draw.text((4, top + 4), date_key, fill=(0, 0, 0), font=font)

    for position in result.paint_order():
        if position.entry_id in highlight_ids:
            color = COLORS["overlap"]
        elif position.entry_id in featured:
            color = COLORS["featured"]
        else:
            color = COLORS["entry"]

        bbox = (
            position.x * scale,
            position.y * scale,
            position.right * scale,
            position.bottom * scale,
        )
        _draw_entry_box(draw, bbox, f"{position.entry_id} z={position.z_index}", color, font)

    preview = Image.alpha_composite(preview, overlay)
    return preview.convert("RGB")


def _clamp_dimension(value: float) -> int:
    return max(1, min(int(round(value)), MAX_PREVIEW_DIMENSION))


def _draw_entry_box(
    draw: ImageDraw.ImageDraw,
    bbox: Tuple[float, float, float, float],
    label_text: str,
    color: Tuple[int, int, int, int],
    font: ImageFont.FreeTypeFont,
) -> None:
    """
    Draw a single entry box with label.

    Args:
        draw: ImageDraw object
        bbox: (left, top, right, bottom) in pixels
        label_text: Text to display inside the box
        color: RGBA color tuple for box
        font: Font for label text
    """
    x0, y0, _, _ = bbox

    draw.rectangle(bbox, outline=color, width=BOX_LINE_WIDTH)

    text_bbox = draw.textbbox((0, 0), label_text, font=font)
    text_width = text_bbox[2] - text_bbox[0]
    text_height = text_bbox[3] - text_bbox[1]

    label_bg_bbox = (
        x0 + BOX_LINE_WIDTH,
        y0 + BOX_LINE_WIDTH,
        x0 + BOX_LINE_WIDTH + text_width + 4,
        y0 + BOX_LINE_WIDTH + text_height + 4,
    )
    draw.rectangle(label_bg_bbox, fill=LABEL_BG_COLOR)
    draw.text(
        (label_bg_bbox[0] + 2, label_bg_bbox[1] + 2),
        label_text,
        fill=LABEL_TEXT_COLOR,
        font=font,
    )


def save_layout_preview(
    result: LayoutResult,
    output_dir: Path,
    name: str,
    scale: float = 1.0,
    highlight_ids: Set[str] | None = None,
) -> Path:
    """
    Create and save a layout preview.

    Args:
        result: Layout to draw
        output_dir: Directory to save the preview (created if missing)
        name: Filename stem
        scale: Pixel scale
        highlight_ids: Entry ids to draw in the overlap color

    Returns:
        Path to saved preview image
    """
    preview = render_layout_preview(result, scale=scale, highlight_ids=highlight_ids)

    output_dir.mkdir(parents=True, exist_ok=True)
    preview_path = output_dir / f"{name}_layout_preview.png"
    preview.save(preview_path, "PNG")

    logger.info(
        f"Saved {result.mode.value} layout preview for {name}: "
        f"{len(result.positions)} boxes, {preview.width}x{preview.height}px"
    )

    return preview_path
