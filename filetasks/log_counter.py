"""
Count keyword occurrences in a log file.

Usage::

    python -m filetasks.log_counter <log_path> <ERROR|WARNING|INFO>
"""

import argparse
import logging
import sys

from termcolor import colored

try:
    from . import config
except ImportError:  # pragma: no cover - script execution path
    import config


LOGGER = logging.getLogger(__name__)

LOG_KEYWORDS = ("ERROR", "WARNING", "INFO")
USAGE = "Usage: python -m filetasks.log_counter <log_path> <ERROR|WARNING|INFO>"
INVALID_KEYWORD_MESSAGE = "Invalid keyword (use ERROR, WARNING or INFO)."
FAILURE_MESSAGE = "Could not count occurrences or the file is empty."


class LogReadError(Exception):
    """Raised when the log file is missing, unreadable or empty."""


def count_keyword(path, keyword: str) -> int:
    """
    Count whitespace-separated tokens equal to ``keyword``.

    :param path: Log file path.
    :param keyword: One of :data:`LOG_KEYWORDS`.
    :raises ValueError: If ``keyword`` is not a supported keyword.
    :raises LogReadError: If the file is missing, unreadable or zero-length.
    :returns: Number of exact token matches.
    """

    if keyword not in LOG_KEYWORDS:
        raise ValueError(f"Unsupported log keyword: {keyword!r}")

    try:
        with open(path, "r", encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise LogReadError(f"Cannot read {path}: {exc}") from exc
    if not content:
        raise LogReadError(f"Log file {path} is empty")

    count = 0
    for line in content.split("\n"):
        count += sum(1 for word in line.split() if word == keyword)
    LOGGER.debug("Counted %s occurrences of %s in %s.", count, keyword, path)
    return count


def main(argv=None) -> int:
    """
    CLI entry point.

    :param argv: Argument list; defaults to ``sys.argv[1:]``.
    :returns: Process exit code.
    """

    config.configure_logging()
    parser = argparse.ArgumentParser(
        description="Count ERROR/WARNING/INFO tokens in a log file.",
        usage=USAGE,
    )
    parser.add_argument("log_path", nargs="?", help="Path to the log file.")
    parser.add_argument("keyword", nargs="?", help="ERROR, WARNING or INFO.")
    args = parser.parse_args(argv)

    if not args.log_path or not args.keyword:
        print(colored(USAGE, "yellow"))
        return 0

    keyword = args.keyword.upper()
    if keyword not in LOG_KEYWORDS:
        print(colored(INVALID_KEYWORD_MESSAGE, "red"))
        return 1

    try:
        count = count_keyword(args.log_path, keyword)
    except LogReadError as exc:
        LOGGER.info("Keyword count failed: %s", exc)
        print(colored(FAILURE_MESSAGE, "red"))
        return 1

    print(colored(f'Occurrences of "{keyword}": {count}', "green"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
