"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdposts.config import Settings, load_config
from mdposts.core.catalog import get_by_slug
from mdposts.core.pipeline import run_catalog, run_export
from mdposts.core.utils.dates import format_date
from mdposts.render.renderer import render_markdown


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _catalog(path: Optional[str], settings: Settings, strict: Optional[bool] = None):
    """Build the catalog with standard CLI error handling."""
    try:
        return run_catalog(path or settings.content_dir, settings, strict)
    except (RuntimeError, ValueError) as e:
        _fail("Could not build catalog", e)


def list_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Post file or directory (default: content_dir)")] = None,
    ):
    """List posts newest first: date, slug, title."""
    settings = _settings()
    catalog = _catalog(path, settings)
    if not catalog:
        typer.echo("No posts found.")
        return
    for post in catalog:
        typer.echo(f"{post.date or '----------'}  {post.slug}  {post.title}")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Slug of the post to show")],
    path: Annotated[Optional[str], typer.Argument(help="Post file or directory (default: content_dir)")] = None,
    html: Annotated[bool, typer.Option("--html", help="Print the rendered body instead of metadata")] = False,
    theme: Annotated[Optional[str], typer.Option("--code-theme", help="Pygments style for code blocks")] = None,
    ):
    """Show one post's metadata, or its rendered HTML with --html."""
    settings = _settings(overrides={"code_theme": theme})
    post = get_by_slug(_catalog(path, settings), slug)
    if post is None:
        _fail(f"No post with slug '{slug}'")

    if html:
        typer.echo(render_markdown(post.content, settings), nl=False)
        return
    typer.echo(f"title:       {post.title}")
    typer.echo(f"date:        {format_date(post.date)}")
    typer.echo(f"author:      {post.author}")
    typer.echo(f"tags:        {', '.join(post.tags)}")
    typer.echo(f"read time:   {post.read_time} min")
    typer.echo(f"thumbnail:   {post.thumbnail or ''}")
    if post.description:
        typer.echo(f"description: {post.description}")


def export_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Post file or directory (default: content_dir)")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    theme: Annotated[Optional[str], typer.Option("--code-theme", help="Pygments style for code blocks")] = None,
    strict: Annotated[Optional[bool], typer.Option("--strict/--no-strict", help="Fail on duplicate slugs")] = None,
    ):
    """Render every post to HTML + sidecar JSON and write index.json."""
    settings = _settings(overrides={"output_dir": out, "code_theme": theme, "strict_slugs": strict})
    output_dir = Path(settings.output_dir)
    try:
        results = run_export(path or settings.content_dir, output_dir, settings)
    except (RuntimeError, ValueError) as e:
        _fail("Export failed", e)
    for slug, html_path in results:
        typer.echo(f"  {slug} -> {html_path}")
    typer.echo(f"Exported {len(results)} post(s) to {output_dir}/")
