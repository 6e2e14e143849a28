"""Command-line interface for filematch."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from filematch import __version__
from filematch.exceptions import FileMatchError
from filematch.exceptions import PatternError
from filematch.files.reader import DEFAULT_CONCURRENCY
from filematch.models import DEFAULT_OUTPUT_NAME
from filematch.models import ScanConfig
from filematch.operations import run_scan
from filematch.operations import write_matches
from filematch.output import print_error
from filematch.output import print_scan_result

app = typer.Typer(help="Recursively find files whose contents match a pattern")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filematch {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Recursively find files whose contents match a pattern."""
    pass


@app.command()
def scan(
    root_dir: Annotated[Path, typer.Argument(help="Directory to search recursively")],
    match: Annotated[
        str, typer.Option("--match", "-m", help="Regular expression to find in files")
    ],
    extension: Annotated[
        str | None,
        typer.Option(
            "--extension", "-e", help="Only test files with this suffix (e.g. .html)"
        ),
    ] = None,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Where to write the JSON list of matches"),
    ] = Path(DEFAULT_OUTPUT_NAME),
    concurrency: Annotated[
        int,
        typer.Option(
            "--concurrency", "-c", min=1, help="Max number of files read at once"
        ),
    ] = DEFAULT_CONCURRENCY,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", "-n", help="Print matches without writing")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log traversal details to stderr")
    ] = False,
) -> None:
    """Scan a directory tree and write the sorted list of matching files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ScanConfig(
        root_dir=root_dir,
        match=match,
        extension=extension,
        write_file_path=output,
        concurrency=concurrency,
    )

    try:
        result = run_scan(config)
        written = config.write_file_path
        if not dry_run and written is not None:
            written = write_matches(result.matches, written)
        print_scan_result(result, output_path=written, dry_run=dry_run)
    except PatternError as e:
        print_error(str(e))
        raise typer.Exit(1) from None
    except PermissionError as e:
        print_error(f"Permission denied: {e}")
        raise typer.Exit(1) from None
    except FileNotFoundError as e:
        print_error(f"Not found: {e}")
        raise typer.Exit(1) from None
    except OSError as e:
        print_error(f"Filesystem error: {e}")
        raise typer.Exit(1) from None
    except FileMatchError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None


def main() -> None:
    """Main entry point for the filematch CLI."""
    app()


if __name__ == "__main__":
    main()
