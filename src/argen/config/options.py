"""Generation option dataclasses - no dependencies to avoid circular imports"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationOptions:
    """Switches changing what the emitted parser accepts"""
    match_aliases: bool = False  # Also match -short and --alias tokens
    bind_positionals: bool = False  # Bind positional arguments by index
