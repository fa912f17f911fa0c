"""
Command line entry point: ``blogseed reset | show | sql | run-file``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator

import click

from . import blog
from .adapters import AdapterError, DatabaseAdapter, adapter_for
from .config import DATABASE_URL_ENV, load_config
from .dialects import get_dialect
from .security import DestructiveOperationError
from .utils.logging import set_correlation_id, set_level


@contextmanager
def _connected(ctx: click.Context) -> Iterator[DatabaseAdapter]:
    """
    Resolve the URL, connect, and report engine failures as CLI errors.
    ValueError covers malformed input such as an unterminated quote in a
    script file.
    """
    adapter: DatabaseAdapter | None = None
    try:
        config = load_config(ctx.obj["dsn"])
        adapter = adapter_for(config)
        adapter.connect(config)
        yield adapter
    except (AdapterError, DestructiveOperationError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        if adapter is not None:
            adapter.close()


@click.group(name="blogseed")
@click.option(
    "--dsn",
    default=None,
    help=f"Database URL. Defaults to ${DATABASE_URL_ENV}, then a local PostgreSQL.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, dsn: str | None, verbose: bool) -> None:
    """Reset and seed the blog_entry table."""
    set_level(logging.DEBUG if verbose else logging.INFO)
    set_correlation_id()
    ctx.ensure_object(dict)
    ctx.obj["dsn"] = dsn


@main.command()
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not prompt for confirmation.")
@click.pass_context
def reset(ctx: click.Context, yes: bool) -> None:
    """Drop and recreate blog_entry, then insert the seed entries."""
    if not yes:
        click.confirm("This drops blog_entry and discards its rows. Continue?", abort=True)
    with _connected(ctx) as adapter:
        blog.reset_and_seed(adapter, force=True)
    click.echo(f"blog_entry reset with {len(blog.SEED_ENTRIES)} entries.")


@main.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the rows of blog_entry."""
    with _connected(ctx) as adapter:
        entries = blog.fetch_entries(adapter)
    for entry in entries:
        created = entry.created.isoformat() if isinstance(entry.created, datetime) else entry.created or ""
        click.echo(f"{created} | {entry.title} | {entry.author} | {entry.text}")


@main.command()
@click.option(
    "--dialect",
    "dialect_name",
    type=click.Choice(["postgresql", "sqlite"]),
    default="postgresql",
    show_default=True,
)
def sql(dialect_name: str) -> None:
    """Print the reset-and-seed script as SQL."""
    click.echo(blog.render_script(get_dialect(dialect_name)), nl=False)


@main.command(name="run-file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yes", "-y", is_flag=True, default=False, help="Allow DROP/TRUNCATE statements.")
@click.pass_context
def run_file(ctx: click.Context, path: Path, yes: bool) -> None:
    """Execute a SQL file statement by statement."""
    text = path.read_text(encoding="utf-8")
    with _connected(ctx) as adapter:
        count = blog.run_sql_script(adapter, text, force=yes)
    click.echo(f"Executed {count} statement(s) from {path}.")
