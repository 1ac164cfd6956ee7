"""
Content module for the discography site.

Provides tools for:
- Listing and loading album MDX files
- Display ordering by front matter index
- Title to slug conversion
- Random album selection
- Safe front matter editing
"""

from gizz.content.errors import ContentError, ContentNotFoundError, FrontMatterError
from gizz.content.frontmatter import FrontMatterEditor, split_front_matter
from gizz.content.index import ContentIndex, ScanResult
from gizz.content.links import Recommendation, album_href, cover_src, recommendations
from gizz.content.ordering import compare_by_index, sort_by_index
from gizz.content.random_pick import pick_random, random_album
from gizz.content.records import AlbumFrontmatter, ContentRecord
from gizz.content.slug import kebabify

__all__ = [
    "ContentIndex",
    "ScanResult",
    "ContentRecord",
    "AlbumFrontmatter",
    "FrontMatterEditor",
    "split_front_matter",
    "compare_by_index",
    "sort_by_index",
    "kebabify",
    "pick_random",
    "random_album",
    "Recommendation",
    "album_href",
    "cover_src",
    "recommendations",
    "ContentError",
    "ContentNotFoundError",
    "FrontMatterError",
]
