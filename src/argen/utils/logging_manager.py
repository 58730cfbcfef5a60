"""Unified logging management system"""

import logging
import sys
from pathlib import Path
from typing import Optional
from enum import Enum
from datetime import datetime
import threading


class LogLevel(Enum):
    """Simplified verbosity levels"""
    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class LoggingManager:
    """Centralised logging manager for console and application log file"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_Initialised'):
            self._Initialised = True
            self.log_level = LogLevel.NORMAL
            self.app_log_path: Optional[Path] = None
            self._file_handler: Optional[logging.FileHandler] = None
            self._setup_root_logger()

    def _setup_root_logger(self):
        """Setup root logger with console handler only initially"""
        root = logging.getLogger()
        root.setLevel(logging.DEBUG)

        # Remove any existing handlers
        root.handlers.clear()

        # Console handler on stderr, stdout may carry generated source
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(self._get_console_level())
        console.setFormatter(self._get_console_formatter())
        root.addHandler(console)
        self._console_handler = console

    def setup_application_log(self, log_dir: Path) -> Path:
        """Setup application log file"""
        log_dir.mkdir(parents=True, exist_ok=True)
        self.app_log_path = log_dir / "argen.log"

        root = logging.getLogger()
        if self._file_handler is not None:
            root.removeHandler(self._file_handler)
            self._file_handler.close()

        file_handler = logging.FileHandler(self.app_log_path, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        root.addHandler(file_handler)
        self._file_handler = file_handler

        # Log startup
        logging.info("="*60)
        logging.info("argen started")
        logging.info(f"Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        logging.info(f"Log: {self.app_log_path}")
        logging.info("="*60)

        return self.app_log_path

    def set_verbosity(self, level: LogLevel):
        """Update verbosity level"""
        self.log_level = level
        self._console_handler.setLevel(self._get_console_level())
        self._console_handler.setFormatter(self._get_console_formatter())

    def _get_console_level(self) -> int:
        """Map LogLevel to logging level for console"""
        mapping = {
            LogLevel.SILENT: logging.CRITICAL + 10,
            LogLevel.NORMAL: logging.WARNING,
            LogLevel.VERBOSE: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG
        }
        return mapping[self.log_level]

    def _get_console_formatter(self) -> logging.Formatter:
        """Get appropriate formatter based on verbosity"""
        if self.log_level == LogLevel.DEBUG:
            return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        elif self.log_level == LogLevel.VERBOSE:
            return logging.Formatter('[%(levelname)s] %(message)s')
        else:
            return logging.Formatter('%(message)s')

    def is_silent(self) -> bool:
        """Check if in silent mode"""
        return self.log_level == LogLevel.SILENT

    def cleanup(self):
        """Close the application log file"""
        if self._file_handler is not None:
            logging.getLogger().removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None


# Global instance
_manager = LoggingManager()

# Convenience functions
def setup_application_log(log_dir: Path) -> Path:
    return _manager.setup_application_log(log_dir)

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)

def set_verbosity(level: LogLevel):
    _manager.set_verbosity(level)

def is_silent() -> bool:
    return _manager.is_silent()

def cleanup():
    _manager.cleanup()
