"""Argument parser configuration for the tmpmail CLI"""

import argparse
from typing import List, Optional

from tmpmail import __version__
from tmpmail.utils.errors import UnknownOptionError

USAGE = """tmpmail
       tmpmail -h | --version
       tmpmail -d
       tmpmail -g [ADDRESS]
       tmpmail -c
       tmpmail [-t | -b BROWSER] -r | ID"""

DESCRIPTION = """When called with no option and no argument, tmpmail lists the messages in
the inbox and their numeric IDs. When called with one argument, tmpmail
shows the email message with specified ID."""


class TmpmailArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str):
        raise UnknownOptionError(message, details={"usage": self.format_usage()})


## Argument Adding Utilities

def add_action_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the mutually exclusive actions."""

    actions = parser.add_mutually_exclusive_group()

    actions.add_argument(
        "-d", "--domains",
        action="store_true",
        help="Show list of available domains"
    )
    actions.add_argument(
        "-g", "--generate",
        nargs="?",
        const="",
        default=None,
        metavar="ADDRESS",
        help="Generate a new email address, either the specified ADDRESS, or randomly create one"
    )
    actions.add_argument(
        "-c", "--copy",
        action="store_true",
        help="Copy the email address to your clipboard"
    )
    actions.add_argument(
        "-r", "--recent",
        action="store_true",
        help="View the most recent email message"
    )
    actions.add_argument(
        "-R", "--recent-body",
        action="store_true",
        help="Print only the body markup of the most recent email message"
    )

def add_display_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments controlling how messages are shown."""

    parser.add_argument(
        "-b", "--browser",
        metavar="BROWSER",
        help="Specify BROWSER that is used to render the HTML of the email (default: w3m)"
    )
    parser.add_argument(
        "-t", "--text",
        action="store_true",
        help="View the email as raw text, where all the HTML tags are removed"
    )
    parser.add_argument(
        "--clipboard-cmd",
        metavar="COMMAND",
        help="Specify the COMMAND to use for copying the email address to your clipboard "
             "(default: xclip -selection c)"
    )

def add_settings_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments overriding configuration."""

    settings = parser.add_argument_group("settings")

    settings.add_argument(
        "--provider-url",
        metavar="URL",
        help="Base URL of the 1secmail-compatible API"
    )
    settings.add_argument(
        "--config",
        metavar="PATH",
        help="Read configuration from PATH instead of ~/.tmpmail/config.json"
    )
    settings.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Console logging level (default: WARNING)"
    )


## Parser Setup

def setup_argument_parser() -> argparse.ArgumentParser:
    """Build the tmpmail argument parser."""

    parser = TmpmailArgumentParser(
        prog="tmpmail",
        usage=USAGE,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "id",
        nargs="?",
        type=int,
        metavar="ID",
        help="View the email message with this ID"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=__version__,
        help="Show version"
    )

    add_action_arguments(parser)
    add_display_arguments(parser)
    add_settings_arguments(parser)

    return parser


def resolve_command(args: argparse.Namespace) -> str:
    """Name the single command an invocation asks for."""

    if args.domains:
        return "domains"
    if args.generate is not None:
        return "generate"
    if args.copy:
        return "copy"
    if args.recent:
        return "recent"
    if args.recent_body:
        return "recent_body"
    if args.id is not None:
        return "view"
    return "list"


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse argv and attach the resolved command name."""

    args = setup_argument_parser().parse_args(argv)
    args.command = resolve_command(args)
    return args
