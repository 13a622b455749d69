"""Main CLI entry point."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console

from tmpmail.utils.config import AppConfig, load_config
from tmpmail.utils.console import get_console, print_error
from tmpmail.utils.errors import ErrorHandler, TmpmailError, format_error_message
from tmpmail.utils.logging import get_logger, init_logging

from .cli_parser import parse_arguments
from .router import CommandRouter, MailboxContext

logger = get_logger(__name__)


def _args_to_dict(args) -> Dict[str, Any]:
    """Convert argparse Namespace to dictionary."""
    result = {}
    for key, value in vars(args).items():
        if key != "command" and value is not None:
            result[key] = value
    return result


def build_config(args) -> AppConfig:
    """Load the config file and apply command line overrides."""
    config = load_config(Path(args.config) if args.config else None)
    return config.with_overrides(
        browser=args.browser,
        clipboard_cmd=args.clipboard_cmd,
        provider_base_url=args.provider_url,
        raw_text=True if args.text else None,
        log_level=args.log_level,
    )


def dispatch_command(args, config: AppConfig, console: Optional[Console] = None) -> int:
    """Dispatch command via router.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    context = MailboxContext.build(config)

    try:
        router = CommandRouter(context, console)
        router.route(args.command, _args_to_dict(args))
        return 0

    except TmpmailError as e:
        ErrorHandler.handle(e, context=f"command '{args.command}'")
        print_error(format_error_message(e))
        return 1

    except Exception as e:
        ErrorHandler.handle(e, context=f"command '{args.command}'")
        print_error(format_error_message(e))
        return 1

    finally:
        context.provider.close()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code
    """
    console = get_console()

    try:
        args = parse_arguments(argv)
        config = build_config(args)
        init_logging(config.log_level)
        return dispatch_command(args, config, console)

    except SystemExit as e:
        # --help and --version
        return e.code if isinstance(e.code, int) else 0

    except TmpmailError as e:
        print_error(format_error_message(e))
        return 1

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        return 130  # Standard SIGINT exit code


if __name__ == "__main__":
    raise SystemExit(main())
