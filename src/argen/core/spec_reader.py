"""Reading argument specification documents from disk"""

import json
import yaml
from pathlib import Path
from typing import Any

from argen.models.errors import MalformedSpecError
from argen.models.models import ArgumentSpecification, load_spec
from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)

SPEC_SUFFIXES = ['.json', '.yaml', '.yml']


def read_spec_document(spec_path: Path) -> Any:
    """
    Decode a JSON or YAML specification document.

    .json files are decoded as JSON, .yaml/.yml files with the YAML loader.

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedSpecError: If the suffix is unsupported or the text can't be parsed
    """
    if spec_path.suffix not in SPEC_SUFFIXES:
        raise MalformedSpecError(
            f"Unsupported specification file: {spec_path.name} "
            f"(expected one of {', '.join(SPEC_SUFFIXES)})"
        )

    if not spec_path.exists():
        raise FileNotFoundError(f"Specification file not found: {spec_path}")

    try:
        with open(spec_path, encoding="utf-8") as f:
            if spec_path.suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise MalformedSpecError(f"Failed to parse {spec_path}: {e}") from e

    logger.debug(f"Read specification document: {spec_path}")
    return data


def load_spec_file(spec_path: Path) -> ArgumentSpecification:
    """Read and validate a specification file"""
    logger.info(f"Loading specification: {spec_path}")
    spec = load_spec(read_spec_document(spec_path))
    logger.info(
        f"Specification valid: {len(spec.positional)} positional, "
        f"{len(spec.non_positional)} named argument(s)"
    )
    return spec
