"""Rapport des erreurs dans un Logger (typiquement un FileLogger)."""

from gistore_utils.errors.base import ErrorHandler
from gistore_utils.errors.exceptions import (ApplicationError,
                                             CommandReturnError)
from gistore_utils.logging.base import Logger


def describe(error: Exception) -> str:
    """Ligne de log d'une erreur : son type, son code retour, son message."""
    name = type(error).__name__
    if isinstance(error, CommandReturnError) and error.return_code is not None:
        name = f"{name} [code {error.return_code}]"
    if isinstance(error, ApplicationError):
        return f"{name}: {error}"
    return f"Erreur inattendue: {name}: {error}"


class LoggerErrorHandler(ErrorHandler):
    """Enregistre chaque erreur au niveau error du Logger injecté."""

    def __init__(self, logger: Logger) -> None:
        self.logger = logger

    def handle(self, error: Exception) -> None:
        self.logger.log_error(describe(error))
