"""
Content records.

A :class:`ContentRecord` is one MDX file: its slug (from the file name),
its front matter, and its body. Album front matter is typed for the fields
the site knows about and keeps everything else in ``extra``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from gizz.content.ordering import index_of


@dataclass(frozen=True)
class AlbumFrontmatter:
    """Front matter of an album file.

    Attribute names are snake_case; the file keys are the camelCase names
    listed in ``KEYS``. Unknown keys are kept verbatim in ``extra``.
    """

    KEYS = {
        "title": "title",
        "index": "index",
        "release_date": "releaseDate",
        "image_src": "imageSrc",
        "bandcamp_link": "bandcampLink",
        "spotify_link": "spotifyLink",
        "youtube_link": "youtubeLink",
        "album_id": "albumId",
        "track_id": "trackId",
        "bandcamp_code": "bandcampCode",
        "next_albums": "nextAlbums",
    }

    title: str | None = None
    index: Any = None
    release_date: Any = None
    image_src: str | None = None
    bandcamp_link: str | None = None
    spotify_link: str | None = None
    youtube_link: str | None = None
    album_id: int | None = None
    track_id: int | None = None
    bandcamp_code: Any = None
    next_albums: Any = None
    extra: dict[str, Any] = field(default_factory=dict)
    _present: frozenset[str] = field(default=frozenset(), repr=False, compare=False)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> AlbumFrontmatter:
        """Build from a parsed front matter mapping."""
        by_key = {key: attr for attr, key in cls.KEYS.items()}
        known: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            if key in by_key:
                known[by_key[key]] = value
            else:
                extra[key] = value
        return cls(**known, extra=extra, _present=frozenset(data))

    def to_mapping(self) -> dict[str, Any]:
        """Return the front matter as it appears in the file."""
        result: dict[str, Any] = {}
        for attr, key in self.KEYS.items():
            if key in self._present:
                result[key] = getattr(self, attr)
        result.update(self.extra)
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by its file key (e.g. ``"imageSrc"``)."""
        return self.to_mapping().get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._present


@dataclass(frozen=True)
class ContentRecord:
    """A single content file (e.g. one album)."""

    slug: str
    path: Path
    content_type: str
    front_matter: AlbumFrontmatter = field(default_factory=AlbumFrontmatter)
    body: str = ""

    @classmethod
    def from_parts(
        cls, path: Path, content_type: str, front_matter: dict[str, Any], body: str
    ) -> ContentRecord:
        return cls(
            slug=Path(path).stem,
            path=Path(path),
            content_type=content_type,
            front_matter=AlbumFrontmatter.from_mapping(front_matter),
            body=body,
        )

    @property
    def index(self) -> int | float | None:
        """Display index, or None when absent or not a number."""
        return index_of({"index": self.front_matter.index})

    @property
    def title(self) -> str:
        title = self.front_matter.title
        return str(title) if title is not None else self.slug

    @property
    def url_path(self) -> str:
        """Site URL for this record, e.g. ``/albums/polygondwanaland``."""
        return f"/{self.content_type}/{self.slug}"

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the shape page templates consume: front matter plus slug."""
        return {**self.front_matter.to_mapping(), "slug": self.slug}

