"""Module de gestion des erreurs."""

from gistore_utils.errors.base import ErrorHandler, ErrorHandlerChain
from gistore_utils.errors.exceptions import (ApplicationError,
                                             CommandError,
                                             CommandExceptionError,
                                             CommandReturnError,
                                             ConfigurationError,
                                             GitNotFoundError,
                                             MissingDependencyError,
                                             SystemRequirementError)
from gistore_utils.errors.console_handler import ConsoleErrorHandler
from gistore_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "SystemRequirementError",
    "MissingDependencyError",
    "GitNotFoundError",
    "CommandError",
    "CommandReturnError",
    "CommandExceptionError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
