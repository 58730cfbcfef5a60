"""Interactive menu system"""
from typing import Any
from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from InquirerPy.separator import Separator
from argen.core.application import Application
from argen.utils.logging_manager import get_logger
from argen.ui.style import StyleManager
from argen.ui.prompts import PromptFactory, cli_to_python

logger = get_logger(__name__)


class SpecMenu:
    """Interactive menu: pick specification files, then run handlers on them"""

    def __init__(self, app: Application, args=None):
        """
        Initialise menu with application instance.
        Args:
            app: Application instance (required)
            args: Command line arguments for hybrid mode
        """
        self.app = app
        self.args = args
        self.style_manager = StyleManager()
        self._style = self.style_manager.get_inquirer_style()
        self.prompt_factory = PromptFactory(self._style)
        self._selected_specs: list[str] = []

    def run(self) -> None:
        """Run the interactive menu system"""
        try:
            self._display_header()
            if not self._select_specs():
                logger.warning("No specifications selected. Exiting.")
                return
            self._display_spec_summary()
            self._handle_menu()
        except KeyboardInterrupt:
            logger.info("\nMenu cancelled by user.")

    def _display_header(self) -> None:
        """Display application header"""
        print("\n" + "=" * 50)
        print("argen - C argument parser generator")
        print("=" * 50 + "\n")

    def _select_specs(self) -> bool:
        """Handle specification selection"""
        specs = self.app.list_specs()
        if not specs:
            logger.error(f"No specification files found in {self.app.spec_dir}")
            return False

        self._selected_specs = inquirer.checkbox(
            message="Select specification(s):",
            choices=[Choice(spec) for spec in specs],
            validate=lambda result: len(result) >= 1,
            invalid_message="Please select at least one specification",
            instruction="Use space to select, enter to confirm",
            style=self._style,
            qmark=self.style_manager.QMARK,
            pointer=self.style_manager.POINTER,
        ).execute()
        return len(self._selected_specs) > 0

    def _display_spec_summary(self) -> None:
        """Display selected specifications summary"""
        print(f"\nSelected specifications ({len(self._selected_specs)}):")
        for i, spec in enumerate(self._selected_specs, 1):
            print(f"{i}. {spec}")
        print()

    def _handle_menu(self) -> None:
        """Handle main menu navigation"""
        while True:
            action = inquirer.select(
                message="Select an action:",
                choices=self._create_menu_choices(),
                style=self._style,
                qmark=self.style_manager.QMARK,
                pointer=self.style_manager.POINTER,
            ).execute()
            if action == "exit":
                return
            self._execute_handler(action)

    def _create_menu_choices(self) -> list:
        """Create menu choices from handler registry"""
        choices = [
            Choice(handler_info.name, name=handler_info.menu_name)
            for handler_info in self.app.get_menu_handlers()
        ]
        if choices:
            choices.append(Separator("─" * 20))
        choices.append(Choice("exit", name="Exit"))
        return choices

    def _execute_handler(self, handler_name: str) -> None:
        """Execute the selected handler, reporting failures without leaving the menu"""
        try:
            handler_info = self.app.get_handler_info(handler_name)
            options_dict = self._collect_handler_options(handler_info)
            self.app.execute_handler(
                handler_name=handler_name,
                specs=self._selected_specs,
                options_dict=options_dict,
                interactive=True,
            )
        except (ValueError, RuntimeError, OSError) as e:
            logger.error(f"{handler_name} failed: {e}")

    def _collect_handler_options(self, handler_info) -> dict[str, Any]:
        """Collect options for handler through prompts"""
        options_dict = {}
        unprovided_args = self.prompt_factory.get_unprovided_arguments(
            self.args, handler_info.options
        )
        for arg_def in unprovided_args:
            value = self.prompt_factory.prompt_for_argument(arg_def)
            # Only include non-None values
            if value is not None:
                options_dict[cli_to_python(arg_def["name"])] = value
        return options_dict
