"""Command-line interface for unordered-compare."""

from __future__ import annotations

import functools
import logging
import os
import sys
from pathlib import Path
from typing import Iterator

import click

from . import __version__
from .bench import format_result, pretty_bytes, random_entries, run_benchmarks
from .combine import available_combiners
from .comparator import Comparator
from .config import Settings
from .digest import available_families
from .errors import UnorderedCompareError
from .execution import get_mode


def collect(root: str) -> list[str]:
    """Return every file under ``root``, sorted by relative path."""
    found = []
    for d, _, fs in os.walk(root):
        for f in fs:
            found.append(os.path.join(d, f))
    return sorted(found)


def read_entries(path: str, chunk_size: int | None = None) -> Iterator[bytes]:
    """Yield entries from a file or from every file below a directory.

    Without ``chunk_size`` each file is one entry; otherwise files are split
    into ``chunk_size``-byte chunks.
    """
    files = collect(path) if os.path.isdir(path) else [path]
    for p in files:
        if chunk_size is None:
            yield Path(p).read_bytes()
            continue
        with open(p, "rb") as fh:
            while True:
                chunk = fh.read(chunk_size)
                if not chunk:
                    break
                yield chunk


def comparator_options(fn):
    """Attach --hash/--combiner/--mode/--workers, defaulting to the environment."""

    @click.option("--hash", "hash_name", type=click.Choice(available_families(), case_sensitive=False), default=None, help="Hash family (env UNORDERED_HASH).")
    @click.option("--combiner", type=click.Choice(available_combiners(), case_sensitive=False), default=None, help="Combiner (env UNORDERED_COMBINER).")
    @click.option("--mode", type=click.Choice(["sequential", "parallel"], case_sensitive=False), default=None, help="Execution mode (env UNORDERED_MODE).")
    @click.option("--workers", type=click.IntRange(min=1), default=None, help="Worker threads for parallel mode (env UNORDERED_WORKERS).")
    @functools.wraps(fn)
    def wrapper(*args, hash_name, combiner, mode, workers, **kwargs):
        try:
            settings = Settings.from_env().override(hash=hash_name, combiner=combiner, mode=mode, workers=workers)
            comparator = Comparator.from_settings(settings)
        except UnorderedCompareError as e:
            click.echo(f"Error reading settings: {e}", err=True)
            raise click.ClickException(str(e))
        return fn(*args, comparator=comparator, **kwargs)

    return wrapper


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Order-insensitive comparison of byte collections."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
def version() -> None:
    """Display the unordered-compare version."""
    click.echo(__version__)


@cli.command(name="fingerprint")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--chunk-size", type=click.IntRange(min=1), default=None, help="Split files into chunks of this many bytes.")
@comparator_options
def fingerprint_cmd(paths: tuple[str, ...], chunk_size: int | None, comparator: Comparator) -> None:
    """Print the fingerprint of the entries found in PATHS."""
    try:
        entries = [e for p in paths for e in read_entries(p, chunk_size)]
        click.echo(comparator.hexdigest(entries))
    except Exception as e:
        click.echo(f"Error computing fingerprint: {e}", err=True)
        raise click.ClickException(str(e))


@cli.command()
@click.argument("left", type=click.Path(exists=True))
@click.argument("right", type=click.Path(exists=True))
@click.option("--chunk-size", type=click.IntRange(min=1), default=None, help="Split files into chunks of this many bytes.")
@comparator_options
def compare(left: str, right: str, chunk_size: int | None, comparator: Comparator) -> None:
    """Check whether LEFT and RIGHT hold the same entries in any order.

    Exits with status 1 when they differ.
    """
    try:
        x = list(read_entries(left, chunk_size))
        y = list(read_entries(right, chunk_size))
        same = comparator.equal(x, y)
    except Exception as e:
        click.echo(f"Error comparing: {e}", err=True)
        raise click.ClickException(str(e))
    click.echo(f"{'equal' if same else 'different'} ({len(x)} vs {len(y)} entries, {comparator})")
    if not same:
        sys.exit(1)


@cli.command()
@click.option("--entries", "count", type=click.IntRange(min=0), default=1000, show_default=True, help="Number of entries.")
@click.option("--entry-size", type=click.IntRange(min=0), default=60 * 1024, show_default=True, help="Bytes per entry.")
@click.option("--seed", type=int, default=None, help="Seed for the random data.")
@click.option("--hash", "families", multiple=True, type=click.Choice(available_families(), case_sensitive=False), help="Families to run (default: all).")
@click.option("--combiner", type=click.Choice(available_combiners(), case_sensitive=False), default="sorted", show_default=True)
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Worker threads for the parallel runs.")
def bench(count: int, entry_size: int, seed: int | None, families: tuple[str, ...], combiner: str, workers: int | None) -> None:
    """Time every family in both execution modes on random data."""
    try:
        entries = random_entries(count, entry_size, seed)
        click.echo(f"data: {count} entries x {pretty_bytes(entry_size)}")
        settings = Settings.from_env().override(workers=workers)
        par = get_mode("parallel", settings.workers, settings.min_parallel_items)
        for result in run_benchmarks(entries, families or available_families(), ["sequential", par], combiner, seed):
            click.echo(format_result(result))
    except Exception as e:
        click.echo(f"Error running benchmark: {e}", err=True)
        raise click.ClickException(str(e))

