"""Utility functions and classes"""

from argen.utils.logging_manager import (
    get_logger,
    setup_application_log,
    set_verbosity,
    is_silent,
    cleanup,
    LogLevel
)
from argen.utils.summary_display import SummaryDisplay

__all__ = [
    # Logging
    'get_logger',
    'setup_application_log',
    'set_verbosity',
    'is_silent',
    'cleanup',
    'LogLevel',

    # Terminal rendering
    'SummaryDisplay'
]
