"""Shared test fixtures for gizz package."""

import os
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def umask_022():
    """Run the test with a 022 umask, restoring the previous one afterwards."""
    previous = os.umask(0o022)
    yield
    os.umask(previous)


@pytest.fixture
def mock_site_root(tmp_path, monkeypatch):
    """Create a mock site structure with .gizz/ directory."""
    (tmp_path / ".gizz").mkdir(exist_ok=True)
    (tmp_path / "data" / "albums").mkdir(parents=True, exist_ok=True)
    (tmp_path / "public").mkdir(exist_ok=True)

    # Mock get_site_root to return our tmp_path
    from gizz.core import config
    # Clear the lru_cache first
    config.get_site_root.cache_clear()
    monkeypatch.setattr(config, "get_site_root", lambda: tmp_path)

    return tmp_path


def write_album(
    directory: Path,
    slug: str,
    title: str | None = None,
    index: int | None = None,
    body: str = "Album content here...",
    extra_fm: dict | None = None,
) -> Path:
    """Write an album MDX file with front matter and return its path."""
    fm: dict = {"title": title if title is not None else slug.replace("-", " ").title()}
    if index is not None:
        fm["index"] = index
    if extra_fm:
        fm.update(extra_fm)

    fm_str = yaml.dump(fm, default_flow_style=False, sort_keys=False)
    path = directory / f"{slug}.mdx"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{fm_str}---\n\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture
def data_root(tmp_path):
    """A bare content root with an empty albums directory."""
    root = tmp_path / "data"
    (root / "albums").mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def create_album(mock_site_root):
    """Factory fixture for creating album files in the mock site."""
    def _create(slug: str = "test-album", **kwargs) -> Path:
        return write_album(mock_site_root / "data" / "albums", slug, **kwargs)

    return _create


@pytest.fixture
def make_album(data_root):
    """Factory fixture for creating album files under a bare content root."""
    def _make(slug: str = "test-album", **kwargs) -> Path:
        return write_album(data_root / "albums", slug, **kwargs)

    return _make
