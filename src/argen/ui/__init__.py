"""User interface components"""

from argen.ui.menu import SpecMenu
from argen.ui.style import StyleManager
from argen.ui.prompts import PromptFactory

__all__ = [
    'SpecMenu',
    'StyleManager',
    'PromptFactory'
]
