"""
Exceptions personnalisées de gistore_utils.

Deux familles d'erreurs d'exécution sont distinguées :
    - CommandReturnError : le processus a tourné et s'est terminé
      avec un code non nul alors qu'une vérification était demandée.
    - CommandExceptionError : tout autre échec autour de l'exécution
      (lancement impossible, erreur d'E/S sur un flux, attente).
"""

from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Configuration invalide ou illisible."""
    pass


class SystemRequirementError(ApplicationError):
    """Exception de base pour les prérequis système."""
    pass


class MissingDependencyError(SystemRequirementError):
    """Un programme externe requis est introuvable."""
    pass


class GitNotFoundError(MissingDependencyError):
    """Le binaire git est introuvable dans le chemin de recherche."""

    def __init__(self, message: str = "Please install git first.") -> None:
        super().__init__(message)


class CommandError(ApplicationError):
    """Exception de base pour les échecs d'exécution de commandes."""

    def __init__(
        self,
        message: str,
        command_line: Optional[str] = None,
    ) -> None:
        """Initialise l'erreur.

        Args:
            message: Message de diagnostic (déjà expurgé).
            command_line: Ligne de commande expurgée, si connue.
        """
        super().__init__(message)
        self.command_line = command_line


class CommandReturnError(CommandError):
    """Le processus s'est terminé avec un code retour non nul."""

    def __init__(
        self,
        message: str,
        command_line: Optional[str] = None,
        return_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, command_line)
        self.return_code = return_code


class CommandExceptionError(CommandError):
    """Échec du lancement, des flux ou de l'attente du processus."""
    pass
