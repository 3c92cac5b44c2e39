"""Streamlined CLI interface with modular command structure."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

# Command modules are imported on demand in _load_command_parser()

logger = logging.getLogger(__name__)


CommandHandler = Callable[[argparse.Namespace], int]

COMMAND_MODULES: dict[str, str] = {
    "extract-url": "extract_url",
    "extract-html": "extract_html",
}

COMMAND_HANDLER_ATTRS: dict[str, str] = {
    "extract-url": "handle_extract_url_command",
    "extract-html": "handle_extract_html_command",
}


def create_parser() -> argparse.ArgumentParser:
    """Create minimal parser - commands loaded on-demand in main()."""
    parser = argparse.ArgumentParser(
        prog="newsmeta",
        description="newsmeta - Extract structured metadata from news articles",
        add_help=False,  # We'll handle help per-command
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. INFO, DEBUG); defaults to NEWSMETA_LOG_LEVEL",
    )

    # Just capture the command name, don't load subparsers yet
    parser.add_argument(
        "command",
        nargs="?",
        help="Command to run (use 'COMMAND --help' for command-specific help)",
    )

    return parser


def _load_command_parser(command: str) -> tuple[Callable, Callable] | None:
    """Load parser and handler for a specific command on-demand.

    Returns: (add_parser_func, handle_command_func) or None if not found
    """
    module_name = COMMAND_MODULES.get(command)
    if not module_name:
        return None

    try:
        module = __import__(
            f"newsmeta.cli.commands.{module_name}",
            fromlist=["*"],
        )
    except (ImportError, ModuleNotFoundError) as e:
        logger.warning(f"Failed to load command '{command}': {e}")
        return None

    preferred_add = f"add_{command.replace('-', '_')}_parser"
    preferred_handle = COMMAND_HANDLER_ATTRS.get(command) or (
        f"handle_{command.replace('-', '_')}_command"
    )

    parser_func = getattr(module, preferred_add, None)
    handler_func = getattr(module, preferred_handle, None)

    if parser_func and handler_func:
        return (parser_func, handler_func)

    return None


def main(
    argv: list[str] | None = None,
    *,
    setup_logging_func: Callable[[str], None] | None = None,
) -> int:
    """Main CLI entry point with on-demand command loading."""

    # Parse just enough to get command and log level
    parser = create_parser()
    args, remaining = parser.parse_known_args(argv)

    log_level = args.log_level
    if not log_level:
        from newsmeta.config import get_settings

        log_level = get_settings().log_level

    if setup_logging_func is None:
        from .context import setup_logging as default_setup_logging

        setup_logging_func = default_setup_logging

    setup_logging_func(log_level)

    command = args.command
    if not command:
        print("Available commands:", file=sys.stderr)
        print("  extract-url   - Fetch a URL and print its metadata as JSON", file=sys.stderr)
        print("  extract-html  - Extract metadata from a saved HTML file", file=sys.stderr)
        print("Use: newsmeta COMMAND --help for more info", file=sys.stderr)
        return 1

    result = _load_command_parser(command)
    if result is None:
        print(f"Unknown command: {command}", file=sys.stderr)
        return 1

    add_parser_func, handle_func = result

    full_parser = argparse.ArgumentParser(
        prog=f"newsmeta {command}",
        description=f"Run {command} command",
    )
    full_parser.add_argument("--log-level", default=log_level)

    # Let the command add its own arguments
    subparsers = full_parser.add_subparsers(dest="command")
    add_parser_func(subparsers)

    full_args = full_parser.parse_args([command] + remaining)

    handler = getattr(full_args, "func", None)
    if not callable(handler):
        handler = handle_func

    return handler(full_args)


if __name__ == "__main__":
    sys.exit(main())
