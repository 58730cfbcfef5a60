"""Application container with internal initialisation"""

from pathlib import Path
from typing import Any, Optional

from argen.config.generator_config import GeneratorConfigManager
from argen.config.options import GenerationOptions
from argen.utils.logging_manager import (
    setup_application_log,
    set_verbosity,
    LogLevel,
    get_logger,
    cleanup,
)
from argen.handlers.registry import get_handler, get_menu_handlers, load_all_handlers

logger = get_logger(__name__)


class Application:
    """
    Application container that manages:
    - Configuration resolution
    - Handler execution
    """

    def __init__(
        self,
        spec_dir: Path,
        generation_options: GenerationOptions,
        verbosity: LogLevel,
        output_dir: Optional[Path] = None,
        log_dir: Optional[Path] = None,
    ):
        """
        Initialise application with resolved configuration.

        Args:
            spec_dir: Directory searched for specification files
            generation_options: Configured generation options
            verbosity: Logging verbosity level
            output_dir: Default directory for generated files
            log_dir: Directory for the application log file
        """
        # Set verbosity first
        set_verbosity(verbosity)

        # Setup application log
        self.app_log_path = setup_application_log(log_dir) if log_dir else None

        # Store configuration
        self.spec_dir = spec_dir
        self.output_dir = output_dir
        self.generation_options = generation_options

        # Create handler environment
        self.handler_environment = {
            "spec_dir": spec_dir,
            "output_dir": output_dir,
            "generation_options": generation_options,
        }

        # Load all handlers
        load_all_handlers()

        logger.info("Application Initialised")
        logger.info(f"Spec dir: {spec_dir}")
        logger.info(f"Output dir: {output_dir or '(next to each specification)'}")
        logger.info(f"Generation options: {generation_options}")

    @classmethod
    def from_args(cls, args, base_dir: Optional[Path] = None) -> "Application":
        """
        Create application from CLI arguments.

        Args:
            args: Parsed command line arguments
            base_dir: Directory holding argen_config.yaml (default: current directory)

        Returns:
            Initialised Application instance

        Raises:
            FileNotFoundError: If an explicit --config file doesn't exist
            ValueError: If the configuration is invalid
        """
        base_dir = base_dir or Path.cwd()
        config_path = Path(args.config) if getattr(args, "config", None) else None

        # Step 1: Load configuration (file -> defaults)
        manager = GeneratorConfigManager(base_dir, config_path)
        config = manager.load()

        # Step 2: Resolve configured paths against the configuration location
        spec_dir = manager.resolve_path(config.spec_dir)
        output_dir = manager.resolve_path(config.output_dir) if config.output_dir else None
        log_dir = manager.resolve_path(config.log_dir) if config.log_dir else None

        # Step 3: Map verbosity from args
        verbosity = cls._map_verbosity(args)

        return cls(
            spec_dir=spec_dir,
            generation_options=config.generation_options,
            verbosity=verbosity,
            output_dir=output_dir,
            log_dir=log_dir,
        )

    @staticmethod
    def _map_verbosity(args) -> LogLevel:
        """Map CLI verbosity flags to LogLevel enum"""
        if getattr(args, "silent", False):
            return LogLevel.SILENT
        elif getattr(args, "debug", False):
            return LogLevel.DEBUG
        elif getattr(args, "verbose", False):
            return LogLevel.VERBOSE
        else:
            return LogLevel.NORMAL

    def execute_handler(
        self,
        handler_name: str,
        specs: list[str],
        options_dict: dict[str, Any],
        interactive: bool = False,
    ) -> dict[str, bool]:
        """
        Execute a handler with given specifications and options.

        Args:
            handler_name: Name of handler to execute
            specs: list of specification file paths
            options_dict: dictionary of handler options
            interactive: Whether running in interactive/menu mode

        Returns:
            dict mapping specification path to success

        Raises:
            ValueError: If handler not found
            Exception: If handler execution fails
        """
        handler_info = get_handler(handler_name)
        if not handler_info:
            raise ValueError(f"Unknown handler: {handler_name}")

        # Log execution
        logger.info(f"{'='*60}")
        logger.info(f"Executing handler: {handler_name}")
        logger.info(f"Specifications: {specs}")
        logger.info(f"Options: {options_dict}")
        logger.info(f"Interactive mode: {interactive}")
        logger.info(f"{'='*60}")

        # Create handler with environment and options
        handler = handler_info.create_handler(
            environment=self.handler_environment, interactive=interactive
        )
        options = handler_info.create_options(options_dict)

        return handler.execute(specs=specs, options=options)

    def list_specs(self) -> list[str]:
        """Get list of available specification files"""
        from argen.handlers.services.spec_loader import SpecLoader

        return SpecLoader(self.handler_environment).list_specs()

    def get_handler_info(self, name: str):
        """Get handler information"""
        info = get_handler(name)
        if not info:
            raise ValueError(f"Handler not found: {name}")
        return info

    def get_menu_handlers(self):
        """Commands offered by the interactive menu"""
        return get_menu_handlers()

    def shutdown(self):
        """Cleanup resources"""
        logger.info("Shutting down application")
        cleanup()
