"""Pydantic models for argument specifications"""

from argen.models.models import (
    CType,
    PositionalArgument,
    NamedArgument,
    ArgumentSpecification,
    load_spec
)
from argen.models.errors import (
    SpecError,
    MalformedSpecError,
    SpecValidationError
)

__all__ = [
    'CType',
    'PositionalArgument',
    'NamedArgument',
    'ArgumentSpecification',
    'load_spec',
    'SpecError',
    'MalformedSpecError',
    'SpecValidationError'
]
