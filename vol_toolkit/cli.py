"""VOL Toolkit CLI."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .vol.header import DEFAULT_ENCODING

encoding_option = click.option(
    "--encoding",
    default=DEFAULT_ENCODING,
    show_default=True,
    help="Text encoding of entry names",
)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log every entry and action")
def main(verbose: bool):
    """VOL Toolkit - Extract Driver's Education '98/'99 .vol archives.

    \b
    extract: recreate the archived directory tree on disk
    report:  dump every table entry as text, touching nothing
    list:    show the entries with kind and size
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("archive", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: <archive_name>_extracted)",
)
@click.option("-q", "--quiet", is_flag=True, help="Only print the summary")
@encoding_option
def extract(archive: Path, output: Optional[Path], quiet: bool, encoding: str):
    """Extract directories and files from a VOL archive.

    Entries are processed in table order; directories are created as they
    are seen and files are written below the output directory.
    """
    from .vol import CreateDirectory, VOLReader

    click.echo(f"Opening: {archive}")

    try:
        with VOLReader(archive, encoding=encoding) as reader:
            if output is None:
                output = archive.parent / f"{archive.stem}_extracted"

            click.echo(f"Output:  {output}")
            click.echo()

            dir_count = 0
            file_count = 0
            byte_count = 0

            for entry, action, path in reader.extract_all(output):
                if isinstance(action, CreateDirectory):
                    dir_count += 1
                    if not quiet:
                        click.echo(f"Created:   {entry.path_name}")
                else:
                    file_count += 1
                    byte_count += action.length
                    if not quiet:
                        click.echo(f"Extracted: {entry.path_name} ({action.length} bytes)")

            if reader.stop_reason is not None:
                click.echo()
                click.echo(
                    f"Warning: table ended early after {len(reader.entries)} of "
                    f"{reader.header.entry_count} entries: {reader.stop_reason}",
                    err=True,
                )

            click.echo()
            click.echo(f"Directories: {dir_count}")
            click.echo(f"Files:       {file_count} ({byte_count} bytes)")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("archive", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("report_file", required=False, type=click.Path(dir_okay=False, allow_dash=True))
@encoding_option
def report(archive: Path, report_file: Optional[str], encoding: str):
    """Write a text report of every entry in a VOL archive.

    The report goes to REPORT_FILE, or to stdout when it is omitted.
    Nothing is extracted.
    """
    from .vol import VOLReader

    try:
        with VOLReader(archive, encoding=encoding) as reader:
            with click.open_file(report_file or "-", "w") as out:
                reader.report(out)

            if reader.stop_reason is not None:
                click.echo(f"Warning: table ended early: {reader.stop_reason}", err=True)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("list")
@click.argument("archive", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@encoding_option
def list_entries(archive: Path, encoding: str):
    """List the entries of a VOL archive."""
    from .vol import VOLReader

    try:
        with VOLReader(archive, encoding=encoding) as reader:
            click.echo(f"Entries in archive ({len(reader.entries)}):")
            for entry in reader.entries:
                size = f"{entry.data_length:>10}" if entry.is_file else " " * 10
                click.echo(f"  {entry.kind_label:<4} {size}  {entry.path_name}")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
