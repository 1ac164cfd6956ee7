"""Tests for the ContentIndex."""

import logging

import pytest

from gizz.content.errors import FrontMatterError
from gizz.content.index import ContentIndex, ScanResult


# ---------------------------------------------------------------------------
# list_all
# ---------------------------------------------------------------------------

class TestListAll:
    def test_missing_directory_is_empty(self, tmp_path):
        index = ContentIndex(tmp_path / "does-not-exist")
        assert index.list_all("albums") == []

    def test_missing_sub_path_is_empty(self, data_root):
        assert ContentIndex(data_root).list_all("singles") == []

    def test_empty_directory(self, data_root):
        assert ContentIndex(data_root).list_all("albums") == []

    def test_ignores_other_extensions(self, data_root):
        albums = data_root / "albums"
        (albums / "README.md").write_text("---\ntitle: Readme\n---\n", encoding="utf-8")
        (albums / "notes.txt").write_text("hello", encoding="utf-8")
        (albums / ".DS_Store").write_bytes(b"\x00\x01")
        assert ContentIndex(data_root).list_all("albums") == []

    def test_sorted_by_index(self, data_root, make_album):
        make_album("murder-of-the-universe", index=12)
        make_album("nonagon-infinity", index=10)
        make_album("flying-microtonal-banana", index=11)

        slugs = [r.slug for r in ContentIndex(data_root).list_all("albums")]
        assert slugs == ["nonagon-infinity", "flying-microtonal-banana", "murder-of-the-universe"]

    def test_unindexed_after_indexed(self, data_root, make_album):
        make_album("a-unreleased")
        make_album("b-second", index=2)
        make_album("c-also-unreleased")
        make_album("d-first", index=1)

        slugs = [r.slug for r in ContentIndex(data_root).list_all("albums")]
        assert slugs == ["d-first", "b-second", "a-unreleased", "c-also-unreleased"]

    def test_record_contents(self, data_root, make_album):
        make_album(
            "polygondwanaland",
            title="Polygondwanaland",
            index=13,
            body="# Polygondwanaland",
            extra_fm={"imageSrc": "/polygondwanaland.jpg", "albumId": 123},
        )

        [record] = ContentIndex(data_root).list_all("albums")
        assert record.slug == "polygondwanaland"
        assert record.content_type == "albums"
        assert record.title == "Polygondwanaland"
        assert record.index == 13
        assert record.front_matter.image_src == "/polygondwanaland.jpg"
        assert record.front_matter.album_id == 123
        assert record.body == "\n# Polygondwanaland\n"

    def test_slug_comes_from_file_name_not_title(self, data_root, make_album):
        make_album("kg", title="K.G.")
        [record] = ContentIndex(data_root).list_all("albums")
        assert record.slug == "kg"

    def test_recurses_into_subdirectories(self, data_root, make_album):
        make_album("live/live-in-adelaide", index=2)
        make_album("studio", index=1)
        slugs = [r.slug for r in ContentIndex(data_root).list_all("albums")]
        assert slugs == ["studio", "live-in-adelaide"]

    def test_skips_bad_file_and_keeps_order(self, data_root, make_album):
        make_album("a-good", index=None)
        (data_root / "albums" / "b-broken.mdx").write_text(
            "---\ntitle: Unclosed frontmatter\n\nno closing", encoding="utf-8"
        )
        make_album("c-good", index=None)

        slugs = [r.slug for r in ContentIndex(data_root).list_all("albums")]
        assert slugs == ["a-good", "c-good"]

    def test_skips_undecodable_file(self, data_root, make_album):
        make_album("good", index=1)
        (data_root / "albums" / "binary.mdx").write_bytes(b"---\ntitle: \xff\xfe\n---\n")
        assert [r.slug for r in ContentIndex(data_root).list_all("albums")] == ["good"]

    def test_skips_file_without_front_matter(self, data_root, make_album):
        make_album("good", index=1)
        (data_root / "albums" / "plain.mdx").write_text("# Just MDX\n", encoding="utf-8")
        assert [r.slug for r in ContentIndex(data_root).list_all("albums")] == ["good"]

    def test_skipped_file_is_logged(self, data_root, caplog):
        (data_root / "albums" / "broken.mdx").write_text("---\n: [bad\n---\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="gizz.content.index"):
            ContentIndex(data_root).list_all("albums")
        assert "broken.mdx" in caplog.text

    def test_rereads_directory_each_call(self, data_root, make_album):
        index = ContentIndex(data_root)
        make_album("first", index=1)
        assert len(index.list_all("albums")) == 1
        make_album("second", index=2)
        assert len(index.list_all("albums")) == 2

    def test_defaults_to_site_data_directory(self, mock_site_root, create_album):
        create_album("gumboot-soup", index=14)
        index = ContentIndex()
        assert index.data_root == mock_site_root / "data"
        assert [r.slug for r in index.list_all("albums")] == ["gumboot-soup"]


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------

class TestScan:
    def test_reports_skipped_files(self, data_root, make_album):
        make_album("good", index=1)
        bad = data_root / "albums" / "bad.mdx"
        bad.write_text("no front matter", encoding="utf-8")

        result = ContentIndex(data_root).scan("albums")
        assert isinstance(result, ScanResult)
        assert not result.ok
        assert [r.slug for r in result.records] == ["good"]
        assert [path for path, _ in result.skipped] == [bad]
        assert "No front matter" in result.skipped[0][1]

    def test_clean_scan(self, data_root, make_album):
        make_album("good", index=1)
        assert ContentIndex(data_root).scan("albums").ok


# ---------------------------------------------------------------------------
# get_one
# ---------------------------------------------------------------------------

class TestGetOne:
    def test_found(self, data_root, make_album):
        make_album("nonagon-infinity", title="Nonagon Infinity", index=10)
        record = ContentIndex(data_root).get_one("albums", "nonagon-infinity")
        assert record is not None
        assert record.title == "Nonagon Infinity"
        assert record.slug == "nonagon-infinity"

    def test_missing_returns_none(self, data_root):
        assert ContentIndex(data_root).get_one("albums", "does-not-exist") is None

    def test_missing_directory_returns_none(self, tmp_path):
        assert ContentIndex(tmp_path / "nowhere").get_one("albums", "kg") is None

    def test_malformed_raises(self, data_root):
        (data_root / "albums" / "broken.mdx").write_text("---\n: [bad\n---\n", encoding="utf-8")
        with pytest.raises(FrontMatterError):
            ContentIndex(data_root).get_one("albums", "broken")

    def test_undecodable_raises(self, data_root):
        (data_root / "albums" / "binary.mdx").write_bytes(b"\xff\xfe\xfd")
        with pytest.raises(FrontMatterError):
            ContentIndex(data_root).get_one("albums", "binary")

    def test_exact_match_only(self, data_root, make_album):
        make_album("kg", index=1)
        index = ContentIndex(data_root)
        assert index.get_one("albums", "k") is None

    def test_finds_nested_file(self, data_root, make_album):
        make_album("live/live-in-adelaide", title="Live in Adelaide", index=1)
        record = ContentIndex(data_root).get_one("albums", "live-in-adelaide")
        assert record is not None
        assert record.title == "Live in Adelaide"

    def test_top_level_file_wins_over_nested(self, data_root, make_album):
        make_album("live/kg", title="Nested")
        make_album("kg", title="Top")
        assert ContentIndex(data_root).get_one("albums", "kg").title == "Top"

    def test_every_listed_slug_resolves(self, data_root, make_album):
        make_album("live/live-in-adelaide", index=3)
        make_album("demos/early/12-bar-bruise", index=1)
        make_album("nonagon-infinity", index=2)
        index = ContentIndex(data_root)
        slugs = index.slugs("albums")
        assert len(slugs) == 3
        for slug in slugs:
            assert index.get_one("albums", slug) is not None

    def test_symlinked_file_not_found(self, data_root, make_album):
        target = make_album("elsewhere", index=1)
        nested = data_root / "albums" / "live"
        nested.mkdir()
        (nested / "linked.mdx").symlink_to(target)
        index = ContentIndex(data_root)
        assert "linked" not in index.slugs("albums")
        assert index.get_one("albums", "linked") is None

    @pytest.mark.parametrize("slug", ["", "../secrets", "a/b", ".hidden", "..\\x"])
    def test_unsafe_slugs_return_none(self, data_root, slug):
        (data_root / "secrets.mdx").write_text("---\ntitle: s\n---\n", encoding="utf-8")
        assert ContentIndex(data_root).get_one("albums", slug) is None


# ---------------------------------------------------------------------------
# slugs / column
# ---------------------------------------------------------------------------

def test_slugs_in_display_order(data_root, make_album):
    make_album("b", index=2)
    make_album("a", index=1)
    assert ContentIndex(data_root).slugs("albums") == ["a", "b"]


def test_column(data_root, make_album):
    make_album("b", title="Bee", index=2, extra_fm={"imageSrc": "/b.jpg"})
    make_album("a", title="Ay", index=1)
    index = ContentIndex(data_root)
    assert index.column("albums", "title") == ["Ay", "Bee"]
    assert index.column("albums", "slug") == ["a", "b"]
    assert index.column("albums", "imageSrc") == [None, "/b.jpg"]
