"""Output formatting for filematch operations."""

from pathlib import Path

import typer

from filematch.models import ScanResult


def print_scan_result(
    result: ScanResult,
    output_path: Path | None = None,
    dry_run: bool = False,
) -> None:
    """Print scan matches and a summary line to stdout.

    Args:
        result: Completed scan to report
        output_path: Where matches were (or would be) written, None if not written
        dry_run: If True, use "Would" language instead of past tense
    """
    paths = result.sorted_paths()

    if paths:
        typer.secho("Matches:", fg=typer.colors.BRIGHT_BLACK)
        for path in paths:
            typer.secho(f"  {_display_path(Path(path))}", fg=typer.colors.BRIGHT_BLACK)

    if output_path is not None:
        write_verb = "Would write" if dry_run else "Wrote"
        typer.secho(
            f"{write_verb} {_display_path(output_path)}", fg=typer.colors.BRIGHT_BLACK
        )

    num_matches = len(paths)
    summary = f"{num_matches} match{'es' if num_matches != 1 else ''}"
    typer.secho(
        f"✓ Found {summary} in {_display_path(result.root_dir)} "
        f"(finished in approximately {result.seconds} seconds)",
        fg=typer.colors.GREEN,
        bold=True,
    )


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)


def _display_path(path: Path) -> str:
    """Format path for display, using ~ for home directory.

    Args:
        path: Path to format

    Returns:
        String representation with ~ substitution if applicable
    """
    try:
        # Try to make it relative to home
        home = Path.home()
        rel_path = path.relative_to(home)
        return f"~/{rel_path}"
    except ValueError:
        # Not under home, return as-is
        return str(path)
