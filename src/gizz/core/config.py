"""
Configuration and path management.

A site is any directory holding a ``.gizz/`` marker (created by ``gizz init``).
The site root is taken from GIZZ_SITE_ROOT when set, otherwise it is the
nearest directory at or above the cwd that has the marker.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

SITE_MARKER = ".gizz"
SITE_ROOT_ENV = "GIZZ_SITE_ROOT"


@dataclass(frozen=True)
class SitePaths:
    """Standard paths for the site."""

    root: Path
    gizz_dir: Path

    # Content
    data: Path
    albums: Path

    # Static assets (album covers live here as <slug>.jpg)
    public: Path


def is_site(path: Path) -> bool:
    return (path / SITE_MARKER).is_dir()


def find_site_root(start_path: Path | None = None) -> Path:
    """Locate the site root.

    Args:
        start_path: Directory to search upwards from (defaults to cwd)

    Raises:
        FileNotFoundError: If GIZZ_SITE_ROOT points at a non-site, or no
            directory above *start_path* is a site
    """
    env_root = os.environ.get(SITE_ROOT_ENV)
    if env_root:
        root = Path(env_root).expanduser().resolve()
        if not is_site(root):
            raise FileNotFoundError(f"{SITE_ROOT_ENV}={env_root} has no {SITE_MARKER}/ directory.")
        return root

    start = Path(start_path or Path.cwd()).resolve()
    for candidate in (start, *start.parents):
        if is_site(candidate):
            return candidate

    raise FileNotFoundError(
        f"No {SITE_MARKER}/ directory in {start} or any parent. "
        f"Run 'gizz init' in the site directory or set {SITE_ROOT_ENV}."
    )


@lru_cache(maxsize=1)
def get_site_root() -> Path:
    """Get the cached site root path."""
    return find_site_root()


def get_paths(site_root: Path | None = None) -> SitePaths:
    """Get all standard paths for the site.

    Args:
        site_root: Site root path (uses cached default if not provided)
    """
    root = Path(site_root) if site_root is not None else get_site_root()
    data = root / "data"

    return SitePaths(
        root=root,
        gizz_dir=root / SITE_MARKER,
        data=data,
        albums=data / "albums",
        public=root / "public",
    )
