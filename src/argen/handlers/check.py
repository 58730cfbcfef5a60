"""Check handler - validates specifications and shows their arguments"""
from dataclasses import dataclass

from argen.handlers.base.handler import BaseHandler
from argen.handlers.base.context import ExecutionContext, SingleSpecContext
from argen.handlers.base.operation_config import OperationConfig
from argen.handlers.registry import HandlerInfo, register_handler
from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)


@dataclass
class CheckOptions:
    """Check operation options"""


class CheckHandler(BaseHandler):
    """Handler for validating specifications without generating code"""

    CONFIG = OperationConfig(name="check")

    def configure(self, context: ExecutionContext) -> None:
        logger.info(f"Checking {len(context.specs)} specification(s)")

    def prepare(self, context: SingleSpecContext) -> None:
        pass

    def execute_single(self, context: SingleSpecContext) -> bool:
        # loading already validated the specification
        spec_ctx = context.spec
        logger.info(f"{spec_ctx.source_path}: valid ({spec_ctx.spec.argument_count} argument(s))")
        self.display.show_specification(spec_ctx)
        return True


register_handler(
    HandlerInfo(
        name="check",
        handler_class=CheckHandler,
        options_class=CheckOptions,
        description="Validate specification files and list their arguments",
        menu_name="Check Specification",
    )
)
