"""
    ConsoleErrorHandler
"""
from typing import Optional

from gistore_utils.errors.base import ErrorHandler
from gistore_utils.errors.exceptions import (ApplicationError,
                                             CommandExceptionError,
                                             CommandReturnError,
                                             ConfigurationError,
                                             GitNotFoundError,
                                             MissingDependencyError)
from gistore_utils.logging.base import Logger
from gistore_utils.logging.tty_logger import TtyLogger


class ConsoleErrorHandler(ErrorHandler):
    """Handler affichant les erreurs sur la console.

    Les erreurs connues (ApplicationError) sont affichées avec une
    suggestion de solution adaptée à leur type. Les autres sont
    signalées comme inattendues.
    """

    def __init__(
        self,
        console: Optional[Logger] = None,
        solutions: Optional[dict[type[Exception], str]] = None,
    ) -> None:
        """Initialise le handler console.

        Args:
            console: Logger de sortie (défaut: TtyLogger sur stderr).
            solutions: Messages de solution supplémentaires
                {TypeException: "message"}, prioritaires sur
                les messages par défaut.
        """
        self.console = console or TtyLogger()
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur et une piste de résolution."""
        if isinstance(error, ApplicationError):
            self.console.log_error(str(error))
            hint = self._solution_for(error)
            if hint:
                self.console.log_info(hint)
        else:
            self.console.log_error(
                f"Erreur inattendue ({type(error).__name__}): {error}"
            )

    def _solution_for(self, error: ApplicationError) -> Optional[str]:
        for error_type, hint in self.solutions.items():
            if isinstance(error, error_type):
                return hint
        if isinstance(error, GitNotFoundError):
            return "Installez git puis vérifiez la variable PATH."
        if isinstance(error, MissingDependencyError):
            return "Installez les dépendances manquantes."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        if isinstance(error, CommandReturnError):
            return "Consultez la sortie de la commande ci-dessus."
        if isinstance(error, CommandExceptionError):
            return "Vérifiez que le programme est installé et exécutable."
        return None
