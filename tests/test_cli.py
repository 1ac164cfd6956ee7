"""Tests for the top-level gizz CLI."""

from pathlib import Path

from click.testing import CliRunner

from gizz import __version__
from gizz.cli import main


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_init_creates_layout():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert Path(".gizz").is_dir()
        assert Path("data/albums").is_dir()
        assert Path("public").is_dir()


def test_init_existing_without_force():
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path(".gizz").mkdir()
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "already exists" in result.output
        assert not Path("data").exists()


def test_init_dry_run():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["--dry-run", "init"])
        assert result.exit_code == 0
        assert not Path(".gizz").exists()
