"""Interactive command line interface for activity log reports."""

import argparse
import logging
import sys
from collections.abc import Callable

from activitylog.adapters.sources.text_file import TextFileLogSource
from activitylog.core.errors import LogSourceError
from activitylog.core.reports import (
    INVALID_COUNT_MESSAGE,
    INVALID_HOUR_MESSAGE,
    ReportManager,
)

logger = logging.getLogger(__name__)

FILE_PROMPT = "Specify an input file that contains user activity log data: "
FILE_ERROR = "\nFile does not exist or cannot be read."
MENU = (
    "\nPlease select method to generate output report: \n"
    "F/f (Frequency of activity)\n"
    "D/d (Date of activity)\n"
    "H/h (Hour of activity)\n"
    "Q/q (Quit)\n"
)
COUNT_PROMPT = "Please specify how many activities should appear in the report: "
DATE_PROMPT = "\nPlease enter a valid date in the format MM/DD/YYYY\n"
HOUR_PROMPT = "\nPlease enter a valid hour between 0 (12AM) and 23 (11PM): "

Reader = Callable[[str], str]
Writer = Callable[[str], None]


class _Quit(Exception):
    """Raised when the user quits or input is exhausted."""


def _ask(read: Reader, prompt: str) -> str:
    try:
        answer = read(prompt).strip()
    except EOFError as e:
        raise _Quit from e
    return answer


def load_manager(path: str) -> ReportManager:
    """Load the log file at ``path`` into a ReportManager.

    Raises:
        LogSourceError: If the file cannot be read or parsed.
    """
    return ReportManager.from_source(TextFileLogSource(path))


def _open_interactively(read: Reader, write: Writer) -> ReportManager:
    while True:
        path = _ask(read, FILE_PROMPT)
        if path.upper() == "Q":
            raise _Quit
        try:
            return load_manager(path)
        except LogSourceError as e:
            logger.debug("Could not load %s: %s", path, e)
            write(FILE_ERROR)


def _handle_choice(choice: str, manager: ReportManager, read: Reader) -> str | None:
    """Run one menu selection and return the text to print, if any."""
    if choice == "F":
        try:
            number = int(_ask(read, COUNT_PROMPT))
        except ValueError:
            return INVALID_COUNT_MESSAGE
        return manager.top_activities_report(number)
    if choice == "D":
        return manager.date_report(_ask(read, DATE_PROMPT))
    if choice == "H":
        try:
            hour = int(_ask(read, HOUR_PROMPT))
        except ValueError:
            return INVALID_HOUR_MESSAGE
        return manager.hour_report(hour)
    return None


def run(
    manager: ReportManager | None = None,
    read: Reader = input,
    write: Writer = print,
) -> None:
    """Run the interactive prompt loop until the user quits.

    Args:
        manager: Manager to report on. Prompts for a file path when None.
        read: Prompts the user and returns one line of input.
        write: Displays one block of output.
    """
    try:
        if manager is None:
            manager = _open_interactively(read, write)
        while True:
            choice = _ask(read, MENU).upper()
            if choice == "Q":
                break
            output = _handle_choice(choice, manager, read)
            if output is not None:
                write(output)
    except _Quit:
        pass


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    parser = argparse.ArgumentParser(
        prog="activitylog",
        description="Report on user activity log data.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Log file to load. Prompts for one when omitted.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING).",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    manager = None
    if args.path is not None:
        try:
            manager = load_manager(args.path)
        except LogSourceError as e:
            print(e, file=sys.stderr)
            return 1
    run(manager)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
