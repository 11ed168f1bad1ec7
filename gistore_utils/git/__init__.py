"""Intégration git : contexte d'exécution et versions.

Exports:
    GitContext: Binaire git, version et tâches gistore mis en cache.
    compare_versions: Comparaison de vecteurs de version.
    parse_version: Conversion d'une version pointée en vecteur.
    parse_git_version_output: Analyse de la sortie de ``git --version``.
"""

from gistore_utils.git.context import GitContext
from gistore_utils.git.version import (
    compare_versions,
    parse_git_version_output,
    parse_version,
)

__all__ = [
    "GitContext",
    "compare_versions",
    "parse_git_version_output",
    "parse_version",
]
