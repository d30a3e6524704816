"""
Render a debug preview of a layout from an entries JSON file.

Usage:
    python scripts/preview_layout.py entries.json --mode magazine --width 390 --height 844

The JSON file holds either a list of entries or an object with an
"entries" list and an optional "config" object (camelCase keys accepted).
"""

import json
import logging
import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from modspace_layout.core.models import Entry
from modspace_layout.debug import save_layout_preview
from modspace_layout.engine import (
    LayoutConfig,
    LayoutConfigError,
    Viewport,
    calculate_layout,
    detect_collisions,
)


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Render a layout preview PNG")
    parser.add_argument("entries", type=Path, help="Path to entries JSON")
    parser.add_argument("--mode", type=str, default="grid", help="Layout mode tag")
    parser.add_argument("--width", type=float, default=390, help="Viewport width")
    parser.add_argument("--height", type=float, default=844, help="Viewport height")
    parser.add_argument("--landscape", action="store_true", help="Force landscape orientation")
    parser.add_argument("--scale", type=float, default=1.0, help="Preview pixel scale")
    parser.add_argument("--out", type=Path, default=Path("layout_previews"), help="Output directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    payload = json.loads(args.entries.read_text(encoding="utf-8"))
    if isinstance(payload, list):
        raw_entries, raw_config = payload, None
    else:
        raw_entries, raw_config = payload.get("entries", []), payload.get("config")

    entries = [Entry.from_dict(item) for item in raw_entries]
    try:
        config = LayoutConfig.from_dict(raw_config) if raw_config is not None else None
    except LayoutConfigError as exc:
        print(f"Invalid config: {exc}")
        return 1

    result = calculate_layout(
        entries,
        args.mode,
        config=config,
        viewport=Viewport(args.width, args.height),
        is_portrait=False if args.landscape else None,
    )
    report = detect_collisions(result.positions)

    path = save_layout_preview(
        result,
        args.out,
        args.entries.stem,
        scale=args.scale,
        highlight_ids=set(report.colliding_ids),
    )
    print(f"Preview written to {path}")
    if report.has_collision:
        print(f"{len(report.colliding_ids)} entries overlap: {', '.join(report.colliding_ids)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
