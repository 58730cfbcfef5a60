"""Execution context objects for handler execution"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Any

from argen.config.options import GenerationOptions
from argen.models.models import ArgumentSpecification


@dataclass
class SpecContext:
    """Everything about a single specification for this execution"""
    name: str
    source_path: Path
    spec: ArgumentSpecification
    output_path: Optional[Path] = None  # Path("-") means stdout
    source_text: Optional[str] = None   # Generated C, once prepared

    @property
    def key(self) -> str:
        """Identifies the specification in result tables"""
        return str(self.source_path)


@dataclass
class ExecutionContext:
    """Everything needed for handler execution across all specifications"""
    specs: list[SpecContext]
    options: Any                        # Handler-specific options (GenerateOptions, etc.)
    operation_config: Any               # OperationConfig from handler
    environment: dict[str, Any]         # Shared environment (spec_dir, output_dir, etc.)
    generation_options: GenerationOptions
    display: Any


@dataclass
class SingleSpecContext:
    """Context for processing a single specification"""
    spec: SpecContext
    options: Any
    operation_config: Any
    generation_options: GenerationOptions
    display: Any
