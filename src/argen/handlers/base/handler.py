"""Slim base handler using service composition"""

from typing import Any, Optional
from abc import ABC, abstractmethod
from dataclasses import replace

from argen.config.options import GenerationOptions
from argen.handlers.base.context import (
    ExecutionContext,
    SpecContext,
    SingleSpecContext,
)
from argen.handlers.base.operation_config import OperationConfig
from argen.handlers.services.spec_loader import SpecLoader
from argen.utils.summary_display import SummaryDisplay
from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)


class BaseHandler(ABC):
    """
    Slim orchestration-only base handler.
    Services handle the actual work.

    Subclasses must:
    1. Define CONFIG class attribute (OperationConfig)
    2. Implement configure() - check options, display configuration
    3. Implement prepare() - per-specification setup
    4. Implement execute_single() - execute for one specification
    """

    # Subclasses must define this
    CONFIG: OperationConfig

    def __init__(self, environment: dict[str, Any], interactive: bool = False,
                 display: Optional[SummaryDisplay] = None):
        """
        Initialise handler with environment and mode.

        Args:
            environment: dict with spec_dir, output_dir, generation_options
            interactive: Whether running in interactive/menu mode
            display: Terminal renderer (default: rich console on stderr)
        """
        self.environment = environment
        self.interactive = interactive

        # Compose services
        self.spec_loader = SpecLoader(environment)
        self.display = display or SummaryDisplay()

    def execute(self, specs: list[str], options: Any) -> dict[str, bool]:
        """
        Main orchestration - loads specifications and calls lifecycle hooks.

        Args:
            specs: list of specification file paths
            options: Handler-specific options object

        Returns:
            dict mapping specification path to success
        """
        # 1. Load all specifications, all or nothing
        logger.info(f"Loading {len(specs)} specification(s)")
        spec_contexts = self.spec_loader.load_specs(specs)

        # 2. Create execution context
        context = ExecutionContext(
            specs=spec_contexts,
            options=options,
            operation_config=self.CONFIG,
            environment=self.environment,
            generation_options=self._resolve_generation_options(options),
            display=self.display,
        )

        # 3. Check options and display configuration (handler-specific)
        self.configure(context)

        # 4. Run
        results = self._execute_sequential(context)

        # 5. Summary
        if self.CONFIG.writes_output:
            self.display.show_results(self.CONFIG.name, context.specs, results)

        return results

    def _execute_sequential(self, context: ExecutionContext) -> dict[str, bool]:
        """Execute specifications one after another."""
        results = {}

        for spec_ctx in context.specs:
            single_ctx = self._make_single_context(context, spec_ctx)

            try:
                self.prepare(single_ctx)
                success = self.execute_single(single_ctx)
                results[spec_ctx.key] = success

                if not success:
                    error_msg = f"Operation failed for {spec_ctx.name}"
                    if not self.interactive:
                        raise RuntimeError(error_msg)
                    else:
                        logger.error(error_msg)

            except Exception as e:
                results[spec_ctx.key] = False
                logger.error(f"Specification {spec_ctx.name} failed: {e}")
                if not self.interactive:
                    raise

        return results

    def _resolve_generation_options(self, options: Any) -> GenerationOptions:
        """Configured generation options, overridden by explicit handler options"""
        resolved = self.environment.get("generation_options") or GenerationOptions()

        overrides = {}
        for name in ("match_aliases", "bind_positionals"):
            value = getattr(options, name, None)
            if value is not None:
                overrides[name] = value

        if overrides:
            resolved = replace(resolved, **overrides)
        logger.debug(f"Generation options: {resolved}")
        return resolved

    # === Hooks for subclasses ===

    @abstractmethod
    def configure(self, context: ExecutionContext) -> None:
        """Check options and display configuration. Called once with all specifications."""
        pass

    @abstractmethod
    def prepare(self, context: SingleSpecContext) -> None:
        """Prepare single specification before execution. Called for each specification."""
        pass

    @abstractmethod
    def execute_single(self, context: SingleSpecContext) -> bool:
        """Execute operation for single specification. Returns True if successful."""
        pass

    # === Helper methods ===

    def _make_single_context(
        self,
        exec_ctx: ExecutionContext,
        spec_ctx: SpecContext,
    ) -> SingleSpecContext:
        """Create single specification context from execution context"""
        return SingleSpecContext(
            spec=spec_ctx,
            options=exec_ctx.options,
            operation_config=exec_ctx.operation_config,
            generation_options=exec_ctx.generation_options,
            display=exec_ctx.display,
        )
