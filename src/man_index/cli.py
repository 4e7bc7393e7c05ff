"""Command-line interface for looking up manual pages."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from man_index import cache
from man_index.config import IndexConfig
from man_index.errors import DuplicatePageError, MalformedNameError, PageNotFoundError
from man_index.index import PageIndex
from man_index.lookup import find
from man_index.scanner import ManualScanner
from man_index.sections import describe, is_none

logger = logging.getLogger(__name__)

app = typer.Typer(name="man-index", help="Index manual page sources and look pages up by title.", add_completion=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _scan(config: IndexConfig, flat: bool) -> tuple[PageIndex, PageIndex | dict[str, str]]:
    """Scan the source tree, returning the index and the data to cache."""
    scanner = ManualScanner()
    if flat:
        packed = scanner.pack_config(config)
        return PageIndex.from_mapping(packed), packed
    index = scanner.scan_config(config)
    return index, index


@app.command()
def lookup(
    title: Annotated[str | None, typer.Argument(help="Title of the page to print.")] = None,
    read: Annotated[bool, typer.Option("--read", help="Read the source tree into the index.")] = False,
    write: Annotated[bool, typer.Option("--write", help="Write the scanned index to the cache file.")] = False,
    flat: Annotated[bool, typer.Option("--flat", help="Cache pages as a flat name to content mapping.")] = False,
    output: Annotated[
        Path | None, typer.Option("-o", "--output", help="Cache file to write and read the index.")
    ] = None,
    count: Annotated[bool, typer.Option("-n", "--count", help="Print the total number of pages.")] = False,
    section: Annotated[str, typer.Option("-s", "--section", help="Section to look the title up in.")] = "",
    root: Annotated[Path | None, typer.Option("--root", help="Root of the documentation tree.")] = None,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Enable debug logging.")] = False,
) -> None:
    """Print the source of the manual page called TITLE."""
    _configure_logging(verbose)
    if title is None and not count:
        raise typer.BadParameter("a page title is required", param_hint="TITLE")

    try:
        config = IndexConfig.from_env(root)
        target = output if output is not None else config.cache_path

        if read:
            index, scanned = _scan(config, flat)
            if write:
                cache.save(scanned, target)
        else:
            index = cache.load(target)

        if count:
            typer.echo(len(index))
            return

        if not is_none(section):
            logger.debug("Looking in section %s: %s", section, describe(section))
        page = find(index, title or "", section)
    except (PageNotFoundError, MalformedNameError, DuplicatePageError, OSError, ValueError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(page.content, nl=False)


def main() -> None:
    """Entry point for the ``man-index`` console script."""
    app()


if __name__ == "__main__":
    main()
