"""Command line interface parser"""

import argparse

from argen.handlers.registry import get_all_handlers, load_all_handlers


def create_parser() -> argparse.ArgumentParser:
    """
    Create command line argument parser.

    Structure:
    - Global framework options (config file, verbosity)
    - Handler subcommands (dynamically loaded from registry)
    """
    parser = argparse.ArgumentParser(
        prog="argen",
        description="Generate C argument parsers from JSON/YAML argument specifications",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    # === Global Framework Options ===

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Configuration file (default: ./argen_config.yaml if present)'
    )

    # Verbosity options (mutually exclusive)
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug output'
    )
    verbosity_group.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    verbosity_group.add_argument(
        '--silent',
        action='store_true',
        help='Disable console output (logs still written)'
    )

    # === Handler Subcommands ===

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands (omit for interactive menu)'
    )

    load_all_handlers()
    for handler_info in get_all_handlers():
        handler_info.add_subcommand(subparsers)

    return parser
