"""Locations of the templates and stylesheet shipped inside the package.

Templates are package data, so they sit next to this module both in the
source tree and in an installed wheel.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

PACKAGE_DIR = Path(__file__).parent


def get_templates_dir() -> Path:
    """Bundled templates: page.html.j2, partials/, scenarios/ and assets/."""
    return PACKAGE_DIR / "templates"


def get_assets_dir() -> Path:
    return get_templates_dir() / "assets"


def find_asset(name: str, template_dirs: Iterable[Path] = ()) -> Path | None:
    """Find ``assets/<name>`` in the given template dirs, then in the bundled assets.

    Returns:
        Path to the first match, or None if no directory has it
    """
    candidates = [Path(d) / "assets" / name for d in template_dirs]
    candidates.append(get_assets_dir() / name)
    for path in candidates:
        if path.is_file():
            return path
    return None
