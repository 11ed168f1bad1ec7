"""Recherche d'un exécutable dans un chemin de recherche."""

import os
from pathlib import Path
from typing import Optional


class CommandLocator:
    """Résout un nom d'exécutable en chemin absolu.

    Parcourt les répertoires du chemin de recherche dans l'ordre et
    retourne le premier candidat existant et exécutable. Ne lève
    jamais d'exception : l'absence est signalée par None.
    """

    def __init__(self, search_path: Optional[str] = None) -> None:
        """Initialise le localisateur.

        Args:
            search_path: Liste de répertoires séparés par os.pathsep
                (défaut: variable PATH lue à chaque recherche).
        """
        self._search_path = search_path

    @property
    def search_path(self) -> str:
        if self._search_path is not None:
            return self._search_path
        return os.environ.get("PATH", "")

    def locate(self, name: str) -> Optional[Path]:
        """Retourne le chemin du premier exécutable nommé name.

        Args:
            name: Nom du programme (ex: "git").

        Returns:
            Chemin absolu du programme ou None.
        """
        for directory in self.search_path.split(os.pathsep):
            if not directory:
                continue
            candidate = Path(directory, name)
            if candidate.exists() and os.access(candidate, os.X_OK):
                return candidate.absolute()
        return None


def which(name: str, path: Optional[str] = None) -> Optional[Path]:
    """Raccourci de CommandLocator(path).locate(name)."""
    return CommandLocator(path).locate(name)
