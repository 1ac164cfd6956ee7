"""
Links between album pages.

Album front matter can recommend follow-up albums under ``nextAlbums`` as
``[label, title]`` pairs, e.g. ``["Heavy riffs", "Infest the Rats' Nest"]``.
Only titles are stored, so link targets and cover images are derived from
them with :func:`kebabify`.

Pair order is ``[label, title]`` and nothing else. Older album files and
scaffolding wrote ``[title, label]`` or ``[slug, description]``; those are
not detected or swapped. An entry in another order still parses, but its
link points at the kebabified label, so fix such files with
``gizz albums set``/``unset`` or by hand.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from gizz.content.records import AlbumFrontmatter
from gizz.content.slug import kebabify

logger = logging.getLogger(__name__)


def album_href(title: str) -> str:
    """Album page URL for a title or slug."""
    return f"/albums/{kebabify(title)}"


def cover_src(title: str) -> str:
    """Cover image path for a title or slug (``public/<slug>.jpg``)."""
    return f"/{kebabify(title)}.jpg"


@dataclass(frozen=True)
class Recommendation:
    """A "if you liked X, try Y" link."""

    label: str
    title: str

    @property
    def slug(self) -> str:
        return kebabify(self.title)

    @property
    def href(self) -> str:
        return album_href(self.title)

    @property
    def cover(self) -> str:
        return cover_src(self.title)


def recommendations(front_matter: AlbumFrontmatter | dict[str, Any]) -> list[Recommendation]:
    """Read the ``nextAlbums`` recommendations from front matter.

    Entries that are not two-item lists of strings are skipped.
    """
    if isinstance(front_matter, AlbumFrontmatter):
        entries = front_matter.next_albums
    else:
        entries = front_matter.get("nextAlbums")

    if not isinstance(entries, list):
        return []

    result = []
    for entry in entries:
        if (
            isinstance(entry, (list, tuple))
            and len(entry) == 2
            and all(isinstance(part, str) for part in entry)
            and kebabify(entry[1])
        ):
            result.append(Recommendation(label=entry[0], title=entry[1]))
        else:
            logger.debug("Ignoring malformed nextAlbums entry: %r", entry)
    return result
