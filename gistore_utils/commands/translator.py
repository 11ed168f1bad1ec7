"""Normalisation des échecs d'exécution en erreurs typées."""

from typing import Optional, Sequence

from gistore_utils.commands.redaction import (
    CredentialRedactor,
    IdentityRedactor,
)
from gistore_utils.errors.exceptions import (
    CommandError,
    CommandExceptionError,
    CommandReturnError,
)


class ErrorTranslator:
    """Convertit toute exception d'exécution en CommandError.

    Une CommandReturnError reste une CommandReturnError (son code
    retour est conservé) ; toute autre exception devient une
    CommandExceptionError. Le message et la ligne de commande sont
    expurgés par le CredentialRedactor configuré.
    """

    def __init__(
        self, redactor: Optional[CredentialRedactor] = None
    ) -> None:
        self.redactor = redactor or IdentityRedactor()

    def command_line(self, command: Sequence[str]) -> str:
        """Ligne de commande expurgée."""
        return self.redactor.strip_command(command)

    def translate(
        self, error: Exception, command: Sequence[str]
    ) -> CommandError:
        """Construit l'erreur normalisée correspondant à error.

        Args:
            error: Exception interceptée.
            command: Vecteur d'arguments de l'invocation.

        Returns:
            CommandReturnError ou CommandExceptionError, à lever par
            l'appelant (``raise translated from error``).
        """
        detail = self.redactor.strip(str(error) or type(error).__name__)
        command_line = self.command_line(command)
        message = f"Échec de la commande : {detail}\n    >> {command_line}"
        if isinstance(error, CommandReturnError):
            return CommandReturnError(
                message,
                command_line=command_line,
                return_code=error.return_code,
            )
        return CommandExceptionError(message, command_line=command_line)
