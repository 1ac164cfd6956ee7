"""
Content index.

Reads the MDX files under ``data/<sub_path>/`` and turns them into
:class:`ContentRecord` objects in display order. Nothing is cached: every
call re-reads the directory, so edits to the files show up immediately.

Error policy:
- ``list_all`` skips files that cannot be read or parsed and keeps going.
- ``get_one`` returns None for a missing file but raises
  :class:`FrontMatterError` for a file that exists and is broken.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from gizz.content.errors import FrontMatterError
from gizz.content.frontmatter import split_front_matter
from gizz.content.ordering import sort_by_index
from gizz.content.records import ContentRecord

logger = logging.getLogger(__name__)

CONTENT_EXTENSION = ".mdx"


@dataclass
class ScanResult:
    """Records loaded from a directory plus the files that were skipped."""

    records: list[ContentRecord] = field(default_factory=list)
    skipped: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped


class ContentIndex:
    """Read-only index over the site's content directory."""

    def __init__(self, data_root: Path | None = None):
        """Initialize index.

        Args:
            data_root: Content root containing one directory per category
                (defaults to the site's ``data/`` directory)
        """
        if data_root is None:
            from gizz.core.config import get_paths

            data_root = get_paths().data
        self.data_root = Path(data_root)

    def list_all(self, sub_path: str) -> list[ContentRecord]:
        """All parseable records under *sub_path*, in display order.

        A missing or empty directory gives an empty list.
        """
        return self.scan(sub_path).records

    def scan(self, sub_path: str) -> ScanResult:
        """Load every content file under *sub_path*, recording skipped files."""
        result = ScanResult()
        directory = self.data_root / sub_path
        if not directory.is_dir():
            logger.debug("Content directory does not exist: %s", directory)
            return result

        for path in self._content_files(directory):
            try:
                record = self._load(path, sub_path)
            except FrontMatterError as e:
                logger.warning("Skipping %s: %s", path, e.message)
                result.skipped.append((path, e.message))
                continue
            result.records.append(record)

        result.records = sort_by_index(result.records)
        return result

    def get_one(self, sub_path: str, slug: str) -> ContentRecord | None:
        """Load exactly one record by slug.

        Returns:
            The record, or None if no file has that slug

        Raises:
            FrontMatterError: If the file exists but cannot be read or parsed
        """
        if not slug or slug.startswith(".") or "/" in slug or "\\" in slug:
            logger.debug("Not a content slug: %r", slug)
            return None

        path = self._find(self.data_root / sub_path, slug)
        if path is None:
            logger.debug("No content file for %s/%s", sub_path, slug)
            return None

        return self._load(path, sub_path)

    def slugs(self, sub_path: str) -> list[str]:
        """Slugs of all records under *sub_path*, in display order."""
        return [record.slug for record in self.list_all(sub_path)]

    def column(self, sub_path: str, key: str) -> list[Any]:
        """One front matter field for every record, in display order.

        Args:
            sub_path: Content category, e.g. ``"albums"``
            key: File key such as ``"title"`` or ``"imageSrc"``, or ``"slug"``

        Returns:
            List of values; None where a record lacks the field
        """
        return [record.to_dict().get(key) for record in self.list_all(sub_path)]

    def _content_files(self, directory: Path) -> Iterator[Path]:
        for path in sorted(directory.rglob(f"*{CONTENT_EXTENSION}")):
            if path.is_symlink() or not path.is_file():
                continue
            if path.name.startswith("."):
                continue
            yield path

    def _find(self, directory: Path, slug: str) -> Path | None:
        """File for *slug*: ``<directory>/<slug>.mdx`` first, then nested files."""
        name = f"{slug}{CONTENT_EXTENSION}"
        direct = directory / name
        if direct.is_file() and not direct.is_symlink():
            return direct
        if not directory.is_dir():
            return None
        for path in self._content_files(directory):
            if path.name == name:
                return path
        return None

    def _load(self, path: Path, sub_path: str) -> ContentRecord:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FrontMatterError(f"Cannot read {path}: {e}", path=path) from e

        front_matter, body = split_front_matter(text, path=path)
        return ContentRecord.from_parts(path, sub_path, front_matter, body)
