"""Preview handler - prints generated source without writing files"""
from typing import Optional
from dataclasses import dataclass

from argen.core.assembler import generate
from argen.handlers.base.handler import BaseHandler
from argen.handlers.base.context import ExecutionContext, SingleSpecContext
from argen.handlers.base.operation_config import OperationConfig
from argen.handlers.registry import GENERATION_SWITCHES, HandlerInfo, register_handler


@dataclass
class PreviewOptions:
    """Preview operation options"""

    match_aliases: Optional[bool] = None
    bind_positionals: Optional[bool] = None


class PreviewHandler(BaseHandler):
    """Handler for showing generated C with syntax highlighting"""

    CONFIG = OperationConfig(name="preview")

    def configure(self, context: ExecutionContext) -> None:
        pass

    def prepare(self, context: SingleSpecContext) -> None:
        context.spec.source_text = generate(context.spec.spec, context.generation_options)

    def execute_single(self, context: SingleSpecContext) -> bool:
        spec_ctx = context.spec
        self.display.show_source(f"{spec_ctx.name}.c", spec_ctx.source_text)
        return True


register_handler(
    HandlerInfo(
        name="preview",
        handler_class=PreviewHandler,
        options_class=PreviewOptions,
        description="Print generated C source with syntax highlighting",
        menu_name="Preview Parser",
        options=list(GENERATION_SWITCHES),
    )
)
