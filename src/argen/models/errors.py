"""Errors raised while loading and validating argument specifications"""


class SpecError(ValueError):
    """Base class for argument specification errors"""


class MalformedSpecError(SpecError):
    """Document does not match the expected schema"""


class SpecValidationError(SpecError):
    """Schema-conformant document with invalid field values"""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        message = "Argument specification validation failed:\n"
        message += "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(message)
