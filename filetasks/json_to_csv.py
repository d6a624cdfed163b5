"""
Convert a JSON array of objects into a CSV file.

The conversion is a strictly sequential pipeline: read the input file,
parse it as JSON, tabulate the records, render CSV text and write it to the
output path. Any failure along the way is reported to the user with one
generic message; the specific cause is only logged.

Usage::

    python -m filetasks.json_to_csv <input.json> <output.csv>
"""

import argparse
import json
import logging
import os
import stat
import sys
import tempfile

from termcolor import colored

try:
    from . import config
    from .tabulator import ConversionError, EmptyInputError, render, tabulate
except ImportError:  # pragma: no cover - script execution path
    import config
    from tabulator import ConversionError, EmptyInputError, render, tabulate


LOGGER = logging.getLogger(__name__)

USAGE = "Usage: python -m filetasks.json_to_csv <input.json> <output.csv>"
SUCCESS_MESSAGE = "CSV conversion completed successfully."
FAILURE_MESSAGE = (
    "Could not convert the file. Empty input or read/write error."
)
READ_ERRORS = (OSError, UnicodeDecodeError)
WRITE_ERRORS = (OSError, UnicodeEncodeError)
PARSE_ERRORS = (ValueError, RecursionError)


class ReadError(ConversionError):
    """Raised when the input file is missing, unreadable or empty."""


class MalformedInputError(ConversionError):
    """Raised when the input text is not a JSON array of objects."""


class WriteError(ConversionError):
    """Raised when the CSV output cannot be written."""


def _reject_constant(name):
    raise ValueError(f"Non-finite number {name} is not valid JSON")


def read_input(path) -> str:
    """
    Read the whole input file as UTF-8 text.

    :param path: Input JSON file path.
    :raises ReadError: If the file is missing, unreadable or zero-length.
    :returns: File contents.
    """

    try:
        with open(path, "r", encoding="utf-8") as handle:
            content = handle.read()
    except READ_ERRORS as exc:
        raise ReadError(f"Cannot read {path}: {exc}") from exc

    if not content:
        raise ReadError(f"Input file {path} is empty")
    return content


def parse_records(text: str):
    """
    Parse JSON text into a list of record dicts.

    :param text: Raw JSON text.
    :raises MalformedInputError: On syntax errors, non-finite numbers, a
        top-level value that is not an array, or a non-object element.
    :returns: List of dicts, in input order.
    """

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except PARSE_ERRORS as exc:
        raise MalformedInputError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise MalformedInputError(
            f"Expected a JSON array of objects, got {type(data).__name__}"
        )
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise MalformedInputError(
                f"Element {index} is {type(record).__name__}, expected an object"
            )
    return data


def _output_mode(path) -> int:
    """Mode for the CSV: keep an existing file's bits, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_output(path, text: str) -> None:
    """
    Write text to ``path`` atomically.

    The text goes to a temporary file in the destination directory which then
    replaces ``path``, so a failed write never leaves a partial CSV behind.
    The result keeps the mode of the file it replaces, or gets the usual
    umask-based mode when ``path`` is new.

    :param path: Output CSV file path.
    :param text: Rendered CSV text.
    :raises WriteError: On any OS or encoding error.
    """

    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        mode = _output_mode(path)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=directory,
            prefix=".tmp-",
            suffix=".csv",
            delete=False,
        ) as handle:
            tmp_path = handle.name
            handle.write(text)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except WRITE_ERRORS as exc:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise WriteError(f"Cannot write {path}: {exc}") from exc


def convert_file(input_path, output_path) -> int:
    """
    Run the full conversion pipeline, propagating failures.

    :param input_path: JSON array file to read.
    :param output_path: CSV file to create or overwrite.
    :raises ConversionError: On read, parse, empty-input or write failure.
    :returns: Number of data rows written.
    """

    records = parse_records(read_input(input_path))
    table = tabulate(records)
    write_output(output_path, render(table))
    LOGGER.info(
        "Wrote %s rows and %s columns to %s.",
        len(table.rows),
        len(table.header),
        output_path,
    )
    return len(table.rows)


def convert_json_to_csv(input_path, output_path) -> bool:
    """
    Convert a JSON file to CSV, collapsing every failure into ``False``.

    :param input_path: JSON array file to read.
    :param output_path: CSV file to create or overwrite.
    :returns: True on success, False on any conversion failure.
    """

    try:
        convert_file(input_path, output_path)
    except ConversionError as exc:
        LOGGER.info("Conversion of %s failed: %s", input_path, exc)
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser; both paths are optional so usage can be shown."""
    parser = argparse.ArgumentParser(
        description="Convert a JSON array of objects to CSV.",
        usage=USAGE,
    )
    parser.add_argument("input", nargs="?", help="Path to the JSON input file.")
    parser.add_argument("output", nargs="?", help="Path to the CSV output file.")
    return parser


def main(argv=None) -> int:
    """
    CLI entry point.

    :param argv: Argument list; defaults to ``sys.argv[1:]``.
    :returns: Process exit code.
    """

    config.configure_logging()
    args = build_parser().parse_args(argv)
    if not args.input or not args.output:
        print(colored(USAGE, "yellow"))
        return 0

    if convert_json_to_csv(args.input, args.output):
        print(colored(SUCCESS_MESSAGE, "green"))
        return 0
    print(colored(FAILURE_MESSAGE, "red"))
    return 1


__all__ = [
    "ConversionError",
    "EmptyInputError",
    "MalformedInputError",
    "ReadError",
    "WriteError",
    "read_input",
    "parse_records",
    "write_output",
    "convert_file",
    "convert_json_to_csv",
    "main",
]


if __name__ == "__main__":
    sys.exit(main())
