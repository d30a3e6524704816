"""Top-level package for the ModSpace layout engine.

Provides subpackages:
- modspace_layout.core – entry and position models
- modspace_layout.engine – layout calculators and collision tools
- modspace_layout.debug – layout preview images for debugging
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("modspace-layout")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from modspace_layout.core import CanvasSize, Entry, EntryPosition  # noqa: E402
from modspace_layout.engine import (  # noqa: E402
    LayoutConfig,
    LayoutMode,
    LayoutResult,
    Viewport,
    calculate_layout,
)

__all__: list[str] = [
    "__version__",
    "Entry",
    "EntryPosition",
    "CanvasSize",
    "LayoutConfig",
    "LayoutMode",
    "LayoutResult",
    "Viewport",
    "calculate_layout",
]
