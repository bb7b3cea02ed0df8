"""
dotsync — CLI entrypoint.

Usage:
    python -m dotsync.main write     # repository → home directory
    python -m dotsync.main sync      # home directory → repository
"""

from __future__ import annotations

import click

from dotsync import __version__
from dotsync.core.config.settings import load_settings
from dotsync.core.models.platform import Direction
from dotsync.core.models.receipt import Receipt
from dotsync.core.observability.logging_config import setup_logging


def _echo_receipt(receipt: Receipt) -> None:
    """Print one progress line for a processed entry.

    Failures are not echoed here: the sync use case logs them at ERROR,
    which the console handler writes to stderr.
    """
    if receipt.failed:
        return
    if receipt.skipped:
        click.echo(f"Skipping missing source: {receipt.source}")
    elif receipt.kind == "directory":
        click.echo(f"Copied directory: {receipt.source} -> {receipt.target}")
    else:
        click.echo(f"Copied file: {receipt.source} -> {receipt.target}")


@click.command()
@click.version_option(version=__version__, prog_name="dotsync")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress the startup banner.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.argument(
    "command",
    type=click.Choice(["write", "sync"], case_sensitive=False),
    metavar="<write|sync>",
)
def cli(command: str, verbose: bool, quiet: bool, debug: bool) -> None:
    """Copy dotfiles between this repository and your home directory.

    \b
    write   repository → home directory
    sync    home directory → repository

    The current directory is the repository root.
    """
    settings = load_settings()

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = settings.log_level

    setup_logging(
        level=level,
        log_file=settings.log_file,
        log_file_level=settings.log_file_level,
    )

    from dotsync.core import context
    from dotsync.core.services.detection import detect_os
    from dotsync.core.use_cases.sync import run_sync

    direction = Direction.parse(command)
    platform = detect_os()
    roots = context.resolve_roots()
    context.set_roots(roots)

    if not quiet:
        click.echo(f"Running on OS: {platform}")
        click.echo(f"Repo root: {roots.repo_root}")
        click.echo(f"Home root: {roots.home_root}")
        click.echo(f"Command: {direction}")
        click.echo()

    run_sync(direction, roots=roots, platform=platform, on_receipt=_echo_receipt)


if __name__ == "__main__":
    cli()
