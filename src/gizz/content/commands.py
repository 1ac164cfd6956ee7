"""CLI commands for album content."""

from __future__ import annotations

import json as json_module

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gizz.content.errors import ContentNotFoundError, FrontMatterError

console = Console()

SUB_PATH = "albums"


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


def _coerce_value(value: str):
    """Coerce a string value to its most specific Python type.

    ``"true"``/``"false"`` -> ``bool``; integers; floats; else ``str``.
    """
    low = value.lower()
    if low == "true":
        return True
    if low == "false":
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


def _bandcamp_code(value: str):
    """Bandcamp ids are numeric; keep anything that would not survive as an int."""
    if value.isascii() and value.isdigit() and (value == "0" or not value.startswith("0")):
        return int(value)
    return value


def _parse_next(
values: tuple[str, ...]) -> list[list[str]]:
    """Parse ``LABEL=TITLE`` options into nextAlbums pairs."""
    pairs = []
    for value in values:
        label, sep, title = value.partition("=")
        if not sep or not label.strip() or not title.strip():
            raise click.BadParameter(f"Expected LABEL=TITLE, got: {value}", param_hint="--next")
        pairs.append([label.strip(), title.strip()])
    return pairs


def _load_or_exit(slug: str):
    """Load one album, exiting 1 if missing and 2 if malformed."""
    from gizz.content.index import ContentIndex

    try:
        record = ContentIndex().get_one(SUB_PATH, slug)
    except FrontMatterError as e:
        console.print(f"[red]Album is malformed: {escape(e.message)}[/red]")
        raise SystemExit(2)

    if record is None:
        console.print(f"[red]Album not found: {escape(slug)}[/red]")
        raise SystemExit(1)
    return record


# ---------------------------------------------------------------------------
# Click command group
# ---------------------------------------------------------------------------


@click.group(name="albums")
def albums() -> None:
    """Browse and edit album content files.

    Albums are MDX files in data/albums/, one per album, named by slug.
    """
    pass


@albums.command(name="list")
@click.option("--reverse", is_flag=True, help="Newest first (as on the albums page)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON array")
def list_albums(reverse: bool, as_json: bool) -> None:
    """List albums in display order."""
    from gizz.content.index import ContentIndex

    records = ContentIndex().list_all(SUB_PATH)
    if reverse:
        records = list(reversed(records))

    if as_json:
        click.echo(json_module.dumps([r.to_dict() for r in records], indent=2, default=str))
        return

    if not records:
        console.print("[yellow]No albums found.[/yellow]")
        return

    table = Table(title=f"Albums ({len(records)})")
    table.add_column("#", style="cyan", justify="right", width=4)
    table.add_column("Slug", style="dim")
    table.add_column("Title", no_wrap=False)
    table.add_column("Released", style="dim", width=12)

    for record in records:
        table.add_row(
            "" if record.index is None else str(record.index),
            record.slug,
            escape(record.title),
            str(record.front_matter.release_date or "")[:10],
        )

    console.print(table)


@albums.command(name="show")
@click.argument("slug")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON object")
def show_album(slug: str, as_json: bool) -> None:
    """Show one album's front matter, recommendations, and body."""
    from gizz.content.links import recommendations

    record = _load_or_exit(slug)
    recs = recommendations(record.front_matter)

    if as_json:
        output = record.to_dict()
        output["body"] = record.body
        output["recommendations"] = [
            {"label": r.label, "title": r.title, "href": r.href, "cover": r.cover}
            for r in recs
        ]
        click.echo(json_module.dumps(output, indent=2, default=str))
        return

    console.print(f"[bold]{escape(record.title)}[/bold]  [dim]{record.url_path}[/dim]")
    console.print(f"[dim]{record.path}[/dim]")
    console.print()

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in record.front_matter.to_mapping().items():
        if key == "nextAlbums":
            continue
        table.add_row(escape(str(key)), escape(str(value)))
    console.print(table)

    if recs:
        console.print()
        console.print("[bold]Next albums[/bold]")
        for r in recs:
            console.print(f"  {escape(r.label)} -> [green]{escape(r.title)}[/green] [dim]{r.href}[/dim]")

    if record.body.strip():
        console.print()
        console.print(record.body.strip(), markup=False, highlight=False)


@albums.command(name="random")
def random_album_cmd() -> None:
    """Print a random album slug."""
    from gizz.content.random_pick import random_album

    try:
        slug = random_album(sub_path=SUB_PATH)
    except ContentNotFoundError as e:
        console.print(f"[yellow]{escape(e.message)}[/yellow]")
        raise SystemExit(1)

    click.echo(slug)


@albums.command(name="slug")
@click.argument("text", nargs=-1, required=True)
def slug_cmd(text: tuple[str, ...]) -> None:
    """Print the URL slug for a title."""
    from gizz.content.slug import kebabify

    click.echo(kebabify(" ".join(text)))


@albums.command(name="new")
@click.option("--title", required=True, help="Album title")
@click.option("--slug", default=None, help="URL slug (generated from the title if omitted)")
@click.option("--bandcamp-code", default=None, help="Bandcamp album id for the player embed")
@click.option("--release-date", default=None, help="Release date YYYY-MM-DD")
@click.option("--next", "next_albums", multiple=True, help="Recommendation LABEL=TITLE (can repeat)")
@click.option("--description", default="", help="Album description (body text)")
@click.pass_obj
def new_album(
    ctx,
    title: str,
    slug: str | None,
    bandcamp_code: str | None,
    release_date: str | None,
    next_albums: tuple[str, ...],
    description: str,
) -> None:
    """Scaffold a new album file with the next display index."""
    from gizz.content.frontmatter import render_front_matter, write_atomic
    from gizz.content.index import ContentIndex
    from gizz.content.slug import is_slug, kebabify
    from gizz.core.config import get_paths

    dry_run = ctx.dry_run if ctx else False

    if slug is None:
        slug = kebabify(title)
    if not is_slug(slug):
        console.print(f"[red]Invalid slug: {escape(repr(slug))} (expected e.g. {escape(repr(kebabify(title)))})[/red]")
        raise SystemExit(1)

    albums_dir = get_paths().albums
    path = albums_dir / f"{slug}.mdx"
    if path.exists():
        console.print(f"[red]Album already exists: {path}[/red]")
        raise SystemExit(1)

    scan = ContentIndex().scan(SUB_PATH)
    next_index = len(scan.records) + len(scan.skipped) + 1

    fm: dict = {"title": title, "index": next_index}
    if release_date:
        fm["releaseDate"] = release_date
    if bandcamp_code:
        fm["bandcampCode"] = _bandcamp_code(bandcamp_code)
    fm["nextAlbums"] = _parse_next(next_albums)

    body = f"\n# {title}\n"
    if description:
        body += f"\n{description}\n"
    content = render_front_matter(fm, body)

    console.print(f"[cyan]This will be album #{next_index}[/cyan]")
    if dry_run:
        console.print(f"[dim]Would create: {path}[/dim]")
        return

    albums_dir.mkdir(parents=True, exist_ok=True)
    write_atomic(path, content)

    console.print(f"[green]Created:[/green] {path}")
    console.print()
    console.print("[dim]Next steps:[/dim]")
    console.print(f"  1. Edit {path}")
    console.print(f"  2. Add the album cover: public/{slug}.jpg")


@albums.command(name="set")
@click.argument("slug")
@click.argument("field")
@click.argument("value")
@click.pass_obj
def set_field(ctx, slug: str, field: str, value: str) -> None:
    """Set a front matter field on an album.

    Values are auto-coerced: true/false -> bool, integers, floats, else string.
    """
    from gizz.content.frontmatter import FrontMatterEditor

    dry_run = ctx.dry_run if ctx else False
    record = _load_or_exit(slug)

    editor = FrontMatterEditor(record.path)
    editor.load()

    coerced = _coerce_value(value)
    editor.set(field, coerced)
    if not editor.changed:
        console.print(f"[dim]{escape(field)} is already {escape(repr(coerced))} on {slug}[/dim]")
        return

    if not editor.save(dry_run=dry_run):
        console.print("[red]Failed to save.[/red]")
        raise SystemExit(1)

    verb = "Would set" if dry_run else "Set"
    console.print(f"[green]{verb}[/green] {field}={coerced!r} on [cyan]{slug}[/cyan]")


@albums.command(name="unset")
@click.argument("slug")
@click.argument("field")
@click.pass_obj
def unset_field(ctx, slug: str, field: str) -> None:
    """Remove a front matter field from an album."""
    from gizz.content.frontmatter import FrontMatterEditor

    dry_run = ctx.dry_run if ctx else False
    record = _load_or_exit(slug)

    editor = FrontMatterEditor(record.path)
    editor.load()

    if not editor.unset(field):
        console.print(f"[yellow]Field '{field}' not present on {slug}[/yellow]")
        return

    if not editor.save(dry_run=dry_run):
        console.print("[red]Failed to save.[/red]")
        raise SystemExit(1)

    verb = "Would remove" if dry_run else "Removed"
    console.print(f"[green]{verb}[/green] '{field}' from [cyan]{slug}[/cyan]")


@albums.command(name="check")
def check_albums() -> None:
    """Report album files that the site would skip."""
    from gizz.content.index import ContentIndex

    result = ContentIndex().scan(SUB_PATH)

    if result.ok:
        console.print(f"[green]All {len(result.records)} album file(s) parse cleanly.[/green]")
        return

    table = Table(title=f"Skipped files ({len(result.skipped)})")
    table.add_column("File", style="cyan")
    table.add_column("Problem", style="red")
    for path, reason in result.skipped:
        table.add_row(escape(path.name), escape(reason))
    console.print(table)
    console.print(f"[dim]{len(result.records)} album file(s) OK[/dim]")
    raise SystemExit(1)
