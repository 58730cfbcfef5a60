"""Configuration module"""

from argen.config.options import GenerationOptions
from argen.config.generator_config import GeneratorConfig, GeneratorConfigManager

__all__ = [
    'GenerationOptions',
    'GeneratorConfig',
    'GeneratorConfigManager'
]
