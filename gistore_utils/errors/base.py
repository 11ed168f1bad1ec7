"""Rapport final des erreurs remontées par les couches d'exécution."""

import sys
from abc import ABC, abstractmethod
from typing import NoReturn


class ErrorHandler(ABC):
    """Stratégie de rapport d'une erreur (terminal, fichier de log...)."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        pass


class ErrorHandlerChain:
    """Transmet chaque erreur à une suite de handlers.

    Les handlers sont appelés dans l'ordre d'enregistrement, par
    exemple ConsoleErrorHandler pour l'utilisateur puis
    LoggerErrorHandler pour le fichier de log.

    Example :
        chain = (ErrorHandlerChain()
                 .add_handler(ConsoleErrorHandler())
                 .add_handler(LoggerErrorHandler(file_logger)))
        try:
            context.git_version_compare("1.8.2")
        except ApplicationError as e:
            chain.handle_and_exit(e)
    """

    def __init__(self, *handlers: ErrorHandler) -> None:
        self.handlers: list[ErrorHandler] = list(handlers)

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Enregistre un handler et retourne la chaîne."""
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> NoReturn:
        """Rapporte l'erreur puis quitte avec exit_code."""
        self.handle(error)
        sys.exit(exit_code)
