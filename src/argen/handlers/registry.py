"""Registry of argen commands.

Each handler module registers a ``HandlerInfo`` when imported. The CLI parser,
the interactive menu and ``Application`` all look commands up here, so a
command is declared once: its handler, its options dataclass and the
command-line options that fill it.
"""

import importlib
from dataclasses import dataclass, field, fields
from typing import Any, Optional, Type

from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)

HANDLER_MODULES = (
    "argen.handlers.generate",
    "argen.handlers.check",
    "argen.handlers.preview",
)

# Every command works on one or more specification files
SPECS_ARGUMENT = {
    "name": "specs",
    "nargs": "+",
    "help": "Specification files (.json, .yaml, .yml)",
}

# Overrides of the configured generation options; None means "as configured"
GENERATION_SWITCHES = [
    {
        "name": "--match-aliases",
        "action": "store_true",
        "default": None,
        "help": "Also accept short names and aliases in the generated parser",
    },
    {
        "name": "--bind-positionals",
        "action": "store_true",
        "default": None,
        "help": "Bind positional arguments by index in the generated parser",
    },
]


@dataclass
class HandlerInfo:
    """One argen command"""

    name: str
    handler_class: Type
    options_class: Type
    description: str
    menu_name: str
    options: list[dict[str, Any]] = field(default_factory=list)

    @property
    def cli_arguments(self) -> list[dict[str, Any]]:
        return [SPECS_ARGUMENT, *self.options]

    def add_subcommand(self, subparsers) -> None:
        """Add this command and its options to an argparse subparsers group"""
        command_parser = subparsers.add_parser(
            self.name, help=self.description, description=self.description
        )
        for arg_def in self.cli_arguments:
            definition = dict(arg_def)
            command_parser.add_argument(definition.pop("name"), **definition)

    def create_handler(self, environment: dict[str, Any], interactive: bool = False):
        return self.handler_class(environment=environment, interactive=interactive)

    def create_options(self, values: dict[str, Any]):
        """Build the options dataclass, ignoring values meant for other commands"""
        accepted = {option.name for option in fields(self.options_class)}
        return self.options_class(**{k: v for k, v in values.items() if k in accepted})


_handlers: dict[str, HandlerInfo] = {}


def register_handler(info: HandlerInfo) -> None:
    if info.name in _handlers:
        raise ValueError(f"Command '{info.name}' is already registered")
    _handlers[info.name] = info
    logger.debug(f"Registered command: {info.name}")


def get_handler(name: str) -> Optional[HandlerInfo]:
    return _handlers.get(name)


def get_all_handlers() -> list[HandlerInfo]:
    """Commands in registration order"""
    return list(_handlers.values())


def get_menu_handlers() -> list[HandlerInfo]:
    """Commands sorted by their menu label"""
    return sorted(_handlers.values(), key=lambda info: info.menu_name)


def load_all_handlers() -> None:
    """Import the handler modules, which register themselves"""
    for module_name in HANDLER_MODULES:
        importlib.import_module(module_name)
    logger.debug(f"{len(_handlers)} command(s) available")
