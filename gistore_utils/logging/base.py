"""Interface commune des loggers de gistore_utils.

Les couches d'exécution n'écrivent qu'à travers cette interface :
le début de chaque commande en debug, ses échecs en error.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Destination des messages de diagnostic (fichier, terminal)."""

    @abstractmethod
    def log_info(self, message: str) -> None:
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Message d'échec, éventuellement sur plusieurs lignes."""
        pass

    @abstractmethod
    def log_debug(self, message: str) -> None:
        """Trace détaillée, typiquement la ligne de commande lancée."""
        pass
