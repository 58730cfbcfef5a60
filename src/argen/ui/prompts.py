"""Prompt factory and handlers for menu system"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from InquirerPy import inquirer

from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)

def cli_to_python(cli_name: str) -> str:
    """Convert CLI argument name to Python attribute name"""
    return cli_name.lstrip("-").replace("-", "_")


class BasePrompt(ABC):
    """Base class for all prompt types"""

    def __init__(self, style):
        self.style = style

    @abstractmethod
    def prompt(self, arg_def: dict[str, Any]) -> Any:
        """Prompt user for value"""
        pass

    def get_help_text(self, arg_def: dict[str, Any]) -> str:
        """Get help text from argument definition"""
        return arg_def.get("help", f"Enter {cli_to_python(arg_def['name'])}")


class BooleanPrompt(BasePrompt):
    """Yes/no question for store_true flags"""

    def prompt(self, arg_def: dict[str, Any]) -> bool:
        message = self.get_help_text(arg_def)
        if not message.endswith("?"):
            message += "?"

        return inquirer.confirm(
            message=message,
            default=bool(arg_def.get("default")),
            style=self.style
        ).execute()


class PathPrompt(BasePrompt):
    """File system path with completion; an empty answer means 'not given'"""

    def prompt(self, arg_def: dict[str, Any]) -> Optional[str]:
        value = inquirer.filepath(
            message=self.get_help_text(arg_def),
            default=arg_def.get("default") or "",
            only_directories="dir" in cli_to_python(arg_def["name"]),
            style=self.style
        ).execute()
        return value or None


class ArgumentAnalyser:
    """Analyses CLI arguments to determine what needs prompting"""

    @staticmethod
    def get_unprovided_arguments(args, handler_arguments: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """
        Get arguments that weren't provided via CLI and need prompting.

        Args:
            args: Parsed command line arguments (None in pure menu mode)
            handler_arguments: list of argument definitions from handler

        Returns:
            list of argument definitions that need prompting
        """
        provided = ArgumentAnalyser._get_provided_arguments(args) if args else set()

        return [
            arg_def for arg_def in handler_arguments
            if cli_to_python(arg_def["name"]) not in provided
        ]

    @staticmethod
    def _get_provided_arguments(args) -> set[str]:
        """Extract which arguments were actually provided"""
        return {key for key, value in vars(args).items() if value is not None}


class PromptFactory:
    """Factory for creating appropriate prompts with integrated argument handling"""

    def __init__(self, style):
        self.style = style
        self.prompts = {
            'boolean': BooleanPrompt(style),
            'path': PathPrompt(style),
        }
        self.argument_analyser = ArgumentAnalyser()

    def get_unprovided_arguments(self, args, handler_arguments: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Get arguments that need prompting - delegates to analyser"""
        return self.argument_analyser.get_unprovided_arguments(args, handler_arguments)

    def prompt_for_argument(self, arg_def: dict[str, Any]) -> Any:
        """Prompt user for a single argument value"""
        prompt_type = self.determine_prompt_type(arg_def)
        logger.debug(f"Prompting for {arg_def['name']} ({prompt_type})")
        return self.prompts[prompt_type].prompt(arg_def)

    def determine_prompt_type(self, arg_def: dict[str, Any]) -> str:
        """Determine which prompt type to use"""
        if arg_def.get("action") == "store_true":
            return 'boolean'

        # every valued option of the handlers names a file or directory
        return 'path'
