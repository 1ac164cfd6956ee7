"""Core utilities for gizz."""

from gizz.core.config import find_site_root, get_paths, get_site_root

__all__ = [
    "find_site_root",
    "get_site_root",
    "get_paths",
]
