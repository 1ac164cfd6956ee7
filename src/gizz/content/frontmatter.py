"""
Front matter parsing and safe editing.

Album files are MDX documents that open with a YAML block between ``---``
lines. This module splits that block from the body and writes changes back
without corrupting the file.
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
import stat
import tempfile
from pathlib import Path
from typing import Any

import yaml

from gizz.content.errors import FrontMatterError

logger = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL | re.MULTILINE,
)


def split_front_matter(text: str, path: Path | None = None) -> tuple[dict[str, Any], str]:
    """Split raw file text into front matter and body.

    Args:
        text: Raw file content
        path: Optional file path for better error messages

    Returns:
        Tuple of (front matter dict, body string)

    Raises:
        FrontMatterError: If the delimiters are missing, the YAML is invalid,
            or the block is not a mapping
    """
    location = f" in {path}" if path else ""

    match = _FRONT_MATTER.match(text)
    if not match:
        if text.startswith("---"):
            raise FrontMatterError(f"Unclosed front matter{location}", path=path)
        raise FrontMatterError(f"No front matter{location}", path=path)

    fm_text, body = match.group(1), match.group(2)

    try:
        loaded = yaml.safe_load(fm_text)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"YAML error{location}: {e}", path=path) from e

    if loaded is None:
        return {}, body
    if not isinstance(loaded, dict):
        raise FrontMatterError(
            f"Front matter{location} is a {type(loaded).__name__}, not a mapping",
            path=path,
        )
    return loaded, body


def render_front_matter(front_matter: dict[str, Any], body: str = "") -> str:
    """Render front matter and body back into file content."""
    yaml_str = yaml.dump(
        front_matter,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=120,
    )

    return f"---\n{yaml_str}---\n{body}"


def _target_mode(path: Path) -> int:
    """Permission bits for *path*: its current mode, else the umask default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: Path, content: str) -> None:
    """Write *content* to *path* through a temp file and an atomic replace.

    An existing file keeps its permission bits; a new file gets the same
    mode a plain ``open(path, "w")`` would give it.
    """
    mode = _target_mode(path)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix=".gizz_")
    try:
        os.write(fd, content.encode("utf-8"))
        os.close(fd)
        fd = -1  # mark closed
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except Exception:
        if fd >= 0:
            os.close(fd)
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


class FrontMatterEditor:
    """Safely edit front matter in album files."""

    def __init__(self, path: Path):
        """Initialize editor.

        Args:
            path: Path to the MDX file
        """
        self.path = Path(path)
        self._original_content: str = ""
        self._front_matter: dict[str, Any] = {}
        self._body: str = ""
        self._loaded = False

    def load(self) -> bool:
        """Load and parse the file.

        Returns:
            True if loaded, False if the file does not exist

        Raises:
            FrontMatterError: If the file exists but cannot be parsed
        """
        if not self.path.exists():
            logger.debug("File not found: %s", self.path)
            return False

        try:
            self._original_content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FrontMatterError(f"Cannot read {self.path}: {e}", path=self.path) from e

        self._front_matter, self._body = split_front_matter(self._original_content, path=self.path)
        self._loaded = True
        return True

    @property
    def front_matter(self) -> dict[str, Any]:
        """Get the current front matter."""
        return self._front_matter

    @property
    def body(self) -> str:
        return self._body

    def get(self, key: str, default: Any = None) -> Any:
        return self._front_matter.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a front matter value."""
        if not self._loaded:
            raise RuntimeError("File not loaded. Call load() first.")
        self._front_matter[key] = value

    def unset(self, key: str) -> bool:
        """Remove a front matter key.

        Returns:
            True if the key was present
        """
        if not self._loaded:
            raise RuntimeError("File not loaded. Call load() first.")
        if key not in self._front_matter:
            return False
        del self._front_matter[key]
        return True

    @property
    def changed(self) -> bool:
        return self._generate_content() != self._original_content

    def save(self, dry_run: bool = False) -> bool:
        """Save changes to the file.

        Args:
            dry_run: If True, don't actually write

        Returns:
            True if saved (or would be saved in dry run)
        """
        if not self._loaded:
            raise RuntimeError("File not loaded. Call load() first.")

        new_content = self._generate_content()

        if dry_run:
            logger.info("Would update: %s", self.path)
            return True

        try:
            write_atomic(self.path, new_content)
        except OSError as e:
            logger.error("Error writing %s: %s", self.path, e)
            return False

        self._original_content = new_content
        return True

    def _generate_content(self) -> str:
        return render_front_matter(self._front_matter, self._body)
