"""Terminal rendering of specifications, results and generated source"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from argen.utils.logging_manager import get_logger, is_silent

logger = get_logger(__name__)


class SummaryDisplay:
    """
    Rich output for handlers.

    Status output goes to stderr so that generated source written to stdout
    stays clean; previews are the product and go to stdout.
    """

    def __init__(self, console: Optional[Console] = None, output_console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.output_console = output_console or Console()

    @property
    def enabled(self) -> bool:
        return not is_silent()

    def show_configuration(self, title: str, settings: dict[str, str]) -> None:
        """Show the settings an operation runs with"""
        if not self.enabled:
            return

        table = Table(box=box.SIMPLE, show_header=False)
        table.add_column("Setting", style="bold")
        table.add_column("Value")
        for key, value in settings.items():
            table.add_row(key, value)

        self.console.print(Panel(table, title=title, expand=False))

    def show_specification(self, spec_ctx) -> None:
        """Show one table row per argument, positional first"""
        if not self.enabled:
            return

        spec = spec_ctx.spec
        table = Table(title=f"{spec_ctx.name} ({spec_ctx.source_path})", box=box.ROUNDED)
        table.add_column("#", justify="right")
        table.add_column("Variable", style="cyan")
        table.add_column("Type")
        table.add_column("Flags")
        table.add_column("Required")
        table.add_column("Default")
        table.add_column("Help", style="dim")

        for index, argument in enumerate(spec.positional):
            table.add_row(
                str(index), argument.c_var, argument.c_type.value,
                Text("(positional)", style="italic"), "", "", argument.help or "",
            )

        for argument in spec.non_positional:
            table.add_row(
                "", argument.c_var, argument.c_type.value,
                " ".join(argument.flag_tokens),
                "yes" if argument.is_required else "no",
                argument.default if argument.default is not None else "",
                argument.help or "",
            )

        self.console.print(table)

    def show_source(self, title: str, source_text: str) -> None:
        """Show generated C with syntax highlighting"""
        syntax = Syntax(source_text, "c", line_numbers=True, word_wrap=False)
        self.output_console.print(Panel(syntax, title=title, expand=False))

    def show_results(self, operation: str, spec_contexts: list, results: dict[str, bool]) -> None:
        """Show the per-specification outcome of an operation"""
        if not self.enabled:
            return

        table = Table(title=f"{operation} summary", box=box.SIMPLE_HEAVY)
        table.add_column("Specification")
        table.add_column("Status")
        table.add_column("Output")

        for spec_ctx in spec_contexts:
            success = results.get(spec_ctx.key)
            if success is None:
                status = Text("SKIPPED", style="yellow")
            elif success:
                status = Text("OK", style="bold green")
            else:
                status = Text("FAILED", style="bold red")
            output = str(spec_ctx.output_path) if spec_ctx.output_path else ""
            if output == "-":
                output = "<stdout>"
            table.add_row(spec_ctx.name, status, output)

        self.console.print(table)
