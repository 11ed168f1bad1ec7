"""
Gistore Utils - Couche d'exécution de processus pour gistore.

Modules disponibles:
- commands: Exécution de programmes externes (ProcessRunner,
  ShellOptions, ErrorTranslator, CommandLocator)
- git: Contexte git mis en cache (GitContext) et comparaison de versions
- errors: Exceptions typées et handlers de rapport d'erreurs
- logging: Gestion des logs (Logger, FileLogger, TtyLogger)
- config: Chargement des réglages (GistoreSettings, FileConfigLoader)
- tty: Couleurs, options d'affichage et mise en colonnes
"""

__version__ = "1.0.0"

from gistore_utils.logging import Logger, FileLogger, TtyLogger
from gistore_utils.errors import (
    ApplicationError,
    CommandError,
    CommandExceptionError,
    CommandReturnError,
    ConfigurationError,
    GitNotFoundError,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from gistore_utils.config import FileConfigLoader, GistoreSettings
from gistore_utils.commands import (
    CommandBuilder,
    CommandExecutor,
    CommandLocator,
    CredentialRedactor,
    ErrorTranslator,
    ExecutionOutcome,
    IdentityRedactor,
    ProcessRunner,
    RoutingMode,
    ShellOptions,
    UrlCredentialRedactor,
    which,
)
from gistore_utils.git import (
    GitContext,
    compare_versions,
    parse_version,
)
from gistore_utils.tty import Tty, TtyOptions
from gistore_utils.tty.columns import show_columns

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "TtyLogger",
    # Errors
    "ApplicationError",
    "CommandError",
    "CommandExceptionError",
    "CommandReturnError",
    "ConfigurationError",
    "GitNotFoundError",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Config
    "FileConfigLoader",
    "GistoreSettings",
    # Commands
    "CommandBuilder",
    "CommandExecutor",
    "CommandLocator",
    "CredentialRedactor",
    "ErrorTranslator",
    "ExecutionOutcome",
    "IdentityRedactor",
    "ProcessRunner",
    "RoutingMode",
    "ShellOptions",
    "UrlCredentialRedactor",
    "which",
    # Git
    "GitContext",
    "compare_versions",
    "parse_version",
    # Tty
    "Tty",
    "TtyOptions",
    "show_columns",
]
