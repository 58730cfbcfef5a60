"""Generator configuration management"""

import yaml
from pathlib import Path
from typing import Any, Optional
from dataclasses import dataclass, asdict, fields

from argen.config.options import GenerationOptions
from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)


@dataclass
class GeneratorConfig:
    """Generator configuration from argen_config.yaml"""
    spec_dir: str = "."  # Directory searched for spec files by the menu
    output_dir: Optional[str] = None  # Default: write next to each spec file
    match_aliases: bool = False
    bind_positionals: bool = False
    log_dir: Optional[str] = None  # Application log file location, if any

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values"""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @property
    def generation_options(self) -> GenerationOptions:
        return GenerationOptions(
            match_aliases=self.match_aliases,
            bind_positionals=self.bind_positionals
        )


_FIELD_TYPES = {
    "spec_dir": str,
    "output_dir": str,
    "match_aliases": bool,
    "bind_positionals": bool,
    "log_dir": str,
}


class GeneratorConfigManager:
    """Manages generator configuration from argen_config.yaml."""

    CONFIG_FILENAME = "argen_config.yaml"

    def __init__(self, base_dir: Path, config_path: Optional[Path] = None):
        self.base_dir = base_dir
        self.config_path = config_path or base_dir / self.CONFIG_FILENAME
        self.explicit = config_path is not None
        self._config: Optional[GeneratorConfig] = None

    def load(self) -> GeneratorConfig:
        """
        Load configuration from YAML file.

        A missing default file yields the built-in defaults; a missing file
        given explicitly is an error.

        Returns:
            GeneratorConfig with validated values

        Raises:
            FileNotFoundError: If an explicitly requested file doesn't exist
            ValueError: If the file is not valid YAML or values have wrong types
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            if self.explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            logger.debug(f"No {self.CONFIG_FILENAME} in {self.base_dir}, using defaults")
            self._config = GeneratorConfig()
            return self._config

        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {self.config_path}")

        logger.info(f"Loaded configuration from {self.config_path}")

        known = {f.name for f in fields(GeneratorConfig)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown configuration key '{key}' in {self.config_path}")

        values = {}
        for key, expected in _FIELD_TYPES.items():
            if key not in data or data[key] is None:
                continue
            if not isinstance(data[key], expected):
                raise ValueError(
                    f"Invalid value for '{key}' in {self.config_path}: "
                    f"expected {expected.__name__}, got {type(data[key]).__name__}"
                )
            values[key] = data[key]

        self._config = GeneratorConfig(**values)
        logger.debug(f"Generator configuration: {self._config.to_dict()}")
        return self._config

    def resolve_path(self, value: str) -> Path:
        """Resolve a configured path relative to the configuration directory"""
        path = Path(value)
        if not path.is_absolute():
            path = self.config_path.parent / path
        return path
