"""Glue for the external programs tmpmail drives (browser, clipboard)."""

import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, List

from .errors import DependencyMissingError, ExternalCommandError
from .logging import get_logger

logger = get_logger(__name__)


def command_name(command: str) -> str:
    """Return the executable part of a shell-style command string.

    'xclip -selection c' -> 'xclip'
    """
    parts = shlex.split(command)
    return parts[0] if parts else ""


def find_missing_dependencies(commands: Iterable[str]) -> List[str]:
    """Return executables from the given commands that are not on PATH."""
    missing = []
    for command in commands:
        name = command_name(command)
        if name and shutil.which(name) is None and name not in missing:
            missing.append(name)
    return missing


def check_dependencies(commands: Iterable[str]) -> None:
    """Raise DependencyMissingError listing every missing executable."""
    missing = find_missing_dependencies(commands)
    if missing:
        logger.info(f"Missing dependencies: {', '.join(missing)}")
        raise DependencyMissingError(missing)


def _run(args: List[str], **kwargs) -> None:
    try:
        subprocess.run(args, check=True, **kwargs)
    except FileNotFoundError as e:
        raise DependencyMissingError([args[0]]) from e
    except subprocess.CalledProcessError as e:
        raise ExternalCommandError(
            f"'{' '.join(args)}' exited with status {e.returncode}",
            details={"command": args, "returncode": e.returncode},
        ) from e


def open_in_browser(browser: str, document: Path) -> None:
    """Open a document with the configured browser command."""
    args = [*shlex.split(browser), str(document)]
    logger.debug(f"Opening {document} with {args[0]}")
    _run(args)


def copy_to_clipboard(clipboard_cmd: str, text: str) -> None:
    """Feed text to the configured clipboard command."""
    args = shlex.split(clipboard_cmd)
    if not args:
        raise ExternalCommandError("No clipboard command configured")
    logger.debug(f"Copying to clipboard with {args[0]}")
    _run(args, input=text, text=True)
