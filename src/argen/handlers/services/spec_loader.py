"""Service for locating and loading specification files"""

from pathlib import Path
from typing import Any

from argen.config.generator_config import GeneratorConfigManager
from argen.core.spec_reader import SPEC_SUFFIXES, load_spec_file
from argen.handlers.base.context import SpecContext
from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)


class SpecLoader:
    """Handles all specification loading and validation"""

    def __init__(self, environment: dict[str, Any]):
        """
        Initialise loader with environment configuration.

        Args:
            environment: dict with 'spec_dir'
        """
        self.spec_dir = Path(environment.get("spec_dir", "."))

    def resolve_path(self, spec_name: str) -> Path:
        """Resolve a spec argument: as given, else relative to the spec directory"""
        path = Path(spec_name)
        if path.exists() or path.is_absolute():
            return path

        candidate = self.spec_dir / path
        if candidate.exists():
            return candidate
        return path

    def load_specs(self, spec_names: list[str]) -> list[SpecContext]:
        """
        Load and validate all specifications.

        Every file is attempted so that all problems are reported together.

        Args:
            spec_names: list of specification file paths

        Returns:
            list of SpecContext objects

        Raises:
            RuntimeError: If any specification fails to load or validate
        """
        contexts = []
        errors = []

        for spec_name in spec_names:
            try:
                contexts.append(self.load_single_spec(spec_name))
            except (ValueError, OSError) as e:
                logger.debug(f"Failed to load specification '{spec_name}': {e}")
                errors.append(f"{spec_name}: {e}")

        if errors:
            error_msg = "Specification loading failed:\n" + "\n".join(
                f"  - {e}" for e in errors
            )
            raise RuntimeError(error_msg)

        return contexts

    def load_single_spec(self, spec_name: str) -> SpecContext:
        """
        Load a single specification file.

        Args:
            spec_name: Specification file path

        Returns:
            SpecContext with the validated specification
        """
        path = self.resolve_path(spec_name)
        spec = load_spec_file(path)
        return SpecContext(name=path.stem, source_path=path, spec=spec)

    def list_specs(self) -> list[str]:
        """Get specification files in the spec directory"""
        if not self.spec_dir.exists():
            return []

        specs = []
        for path in self.spec_dir.iterdir():
            if not path.is_file() or path.name.startswith("."):
                continue
            if path.name == GeneratorConfigManager.CONFIG_FILENAME:
                continue
            if path.suffix in SPEC_SUFFIXES:
                specs.append(str(path))

        return sorted(specs)
