"""Module de logging."""

from gistore_utils.logging.base import Logger
from gistore_utils.logging.file_logger import FileLogger
from gistore_utils.logging.tty_logger import TtyLogger

__all__ = [
    "Logger",
    "FileLogger",
    "TtyLogger",
]
