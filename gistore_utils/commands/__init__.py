"""Module d'exécution de commandes externes.

Classes disponibles :
    ShellOptions : Options immuables d'une invocation.
    RoutingMode : Flux remis au consommateur.
    ExecutionOutcome : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    ProcessRunner : Exécuteur concret via subprocess.
    ErrorTranslator : Conversion des échecs en erreurs typées.
    CredentialRedactor : Interface d'expurgation des messages.
    CommandLocator : Recherche d'exécutables dans le PATH.
    CommandBuilder : Constructeur fluent de vecteurs d'arguments.
"""

from gistore_utils.commands.base import (
    CommandExecutor,
    ExecutionOutcome,
    RoutingMode,
    ShellOptions,
)
from gistore_utils.commands.builder import CommandBuilder
from gistore_utils.commands.formatter import CommandFormatter, escape_command
from gistore_utils.commands.locator import CommandLocator, which
from gistore_utils.commands.redaction import (
    CredentialRedactor,
    IdentityRedactor,
    UrlCredentialRedactor,
)
from gistore_utils.commands.runner import ProcessRunner
from gistore_utils.commands.translator import ErrorTranslator

__all__ = [
    # Structures de données
    "ShellOptions",
    "RoutingMode",
    "ExecutionOutcome",
    # Interface abstraite
    "CommandExecutor",
    # Implémentation
    "ProcessRunner",
    # Erreurs
    "ErrorTranslator",
    "CredentialRedactor",
    "IdentityRedactor",
    "UrlCredentialRedactor",
    # Utilitaires
    "CommandLocator",
    "which",
    "CommandBuilder",
    "CommandFormatter",
    "escape_command",
]
