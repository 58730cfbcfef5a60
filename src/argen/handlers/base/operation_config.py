"""Operation configuration - declarative handler metadata"""

from dataclasses import dataclass


@dataclass
class OperationConfig:
    """
    Declarative operation metadata.
    Each handler defines this as a class attribute.
    """
    name: str                           # Operation name (generate, check, preview)
    writes_output: bool = False         # Whether this operation writes files
