"""Generate handler - writes the C argument parser for each specification"""
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

from argen.core.assembler import generate
from argen.core.output_writer import STDOUT, write_generated_source
from argen.handlers.base.handler import BaseHandler
from argen.handlers.base.context import ExecutionContext, SingleSpecContext, SpecContext
from argen.handlers.base.operation_config import OperationConfig
from argen.handlers.registry import GENERATION_SWITCHES, HandlerInfo, register_handler
from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)


@dataclass
class GenerateOptions:
    """Generate operation options"""

    output: Optional[str] = None
    output_dir: Optional[str] = None
    match_aliases: Optional[bool] = None
    bind_positionals: Optional[bool] = None


class GenerateHandler(BaseHandler):
    """Handler for generating C argument parsers"""

    CONFIG = OperationConfig(name="generate", writes_output=True)

    def configure(self, context: ExecutionContext) -> None:
        """Resolve output paths and display generation configuration"""
        options = context.options

        if options.output and len(context.specs) > 1:
            raise ValueError("--output can only be used with a single specification")

        claimed = {}
        for spec_ctx in context.specs:
            spec_ctx.output_path = self._output_path(spec_ctx, options)
            target = spec_ctx.output_path.resolve()
            if target in claimed:
                raise ValueError(
                    f"{claimed[target]} and {spec_ctx.source_path} would both be "
                    f"written to {spec_ctx.output_path}"
                )
            claimed[target] = spec_ctx.source_path

        self.display.show_configuration(
            "Generate Configuration",
            {
                "Specifications": str(len(context.specs)),
                "Match short names and aliases": "Yes" if context.generation_options.match_aliases else "No",
                "Bind positionals": "Yes" if context.generation_options.bind_positionals else "No",
            },
        )

    def _output_path(self, spec_ctx: SpecContext, options: GenerateOptions) -> Path:
        """Output file: --output, else --output-dir/configured dir, else next to the spec"""
        if options.output:
            return Path(options.output)

        output_dir = options.output_dir or self.environment.get("output_dir")
        if output_dir:
            return Path(output_dir) / f"{spec_ctx.name}.c"

        return spec_ctx.source_path.with_suffix(".c")

    def prepare(self, context: SingleSpecContext) -> None:
        """Generate the source in memory before anything is written"""
        context.spec.source_text = generate(context.spec.spec, context.generation_options)

    def execute_single(self, context: SingleSpecContext) -> bool:
        """Write the generated source for a single specification"""
        spec_ctx = context.spec
        write_generated_source(spec_ctx.source_text, spec_ctx.output_path)
        if str(spec_ctx.output_path) != STDOUT:
            logger.info(f"Generated {spec_ctx.output_path} from {spec_ctx.source_path}")
        return True


register_handler(
    HandlerInfo(
        name="generate",
        handler_class=GenerateHandler,
        options_class=GenerateOptions,
        description="Generate C argument parsers from specification files",
        menu_name="Generate Parser",
        options=[
            {
                "name": "--output",
                "default": None,
                "help": "Output file for a single specification ('-' for stdout)",
            },
            {
                "name": "--output-dir",
                "default": None,
                "help": "Directory for generated files",
            },
            *GENERATION_SWITCHES,
        ],
    )
)
