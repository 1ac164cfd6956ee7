"""
Main CLI dispatcher for gizz.

Usage:
    gizz init                            # Initialize .gizz/ directory
    gizz albums [list|show|random|slug|new|set|unset|check]
"""

import logging

import click
from rich.console import Console

from gizz import __version__

console = Console()


class Context:
    """Shared context for all commands."""

    def __init__(self, verbose: bool = False, dry_run: bool = False):
        self.verbose = verbose
        self.dry_run = dry_run
        self.console = console


@click.group()
@click.version_option(version=__version__, prog_name="gizz")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("-n", "--dry-run", is_flag=True, help="Preview without making changes")
@click.pass_context
def main(ctx: click.Context, verbose: bool, dry_run: bool) -> None:
    """Get Into Gizz site tools.

    Browse, check, and scaffold the album content of the discography site.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj = Context(verbose=verbose, dry_run=dry_run)

    if dry_run:
        console.print("[yellow]DRY RUN MODE - No changes will be made[/yellow]")


@main.command()
@click.option("--force", "-f", is_flag=True, help="Reinitialize an existing .gizz/ directory")
@click.pass_obj
def init(ctx, force: bool) -> None:
    """Initialize .gizz/ and the album content directory."""
    from pathlib import Path

    from gizz.core.config import get_paths

    dry_run = ctx.dry_run if ctx else False

    site_root = Path.cwd()
    paths = get_paths(site_root)

    if paths.gizz_dir.exists() and not force:
        console.print(f"[yellow].gizz/ directory already exists at {paths.gizz_dir}[/yellow]")
        console.print("[dim]Use --force to reinitialize.[/dim]")
        return

    console.print(f"[cyan]Initializing site at {site_root}[/cyan]")

    for dir_path in (paths.gizz_dir, paths.albums, paths.public):
        if not dry_run:
            dir_path.mkdir(parents=True, exist_ok=True)
        console.print(f"  [green]Created[/green] {dir_path.relative_to(site_root)}")

    console.print()
    if dry_run:
        console.print("[yellow]DRY RUN - no changes made[/yellow]")
    else:
        console.print("[green]Done![/green] Site initialized.")


# Import and register command groups (imports after main definition intentional)
from gizz.content.commands import albums  # noqa: E402

main.add_command(albums)


if __name__ == "__main__":
    main()
