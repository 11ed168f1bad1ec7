"""Analyse et comparaison des versions de git.

Les versions sont des vecteurs d'entiers issus d'une chaîne pointée
("2.30.1" -> [2, 30, 1]). Chaque composant est converti à partir de
ses chiffres de tête ; un composant sans chiffre de tête vaut 0
("2.39.2 (Apple Git-143)" -> [2, 39, 2], "2.45.windows.1" ->
[2, 45, 0, 1]).
"""

import re
from typing import List, Optional, Sequence, Union

VersionVector = List[int]
VersionLike = Union[str, Sequence[int]]

GIT_VERSION_PATTERN = re.compile(r"^git version (.*)", re.MULTILINE)
_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def _component(text: str) -> int:
    match = _LEADING_DIGITS.match(text)
    return int(match.group(1)) if match else 0


def parse_version(version: VersionLike) -> VersionVector:
    """Convertit une version pointée (ou une séquence) en vecteur.

    Args:
        version: Chaîne "2.30.1" ou séquence d'entiers.

    Returns:
        Nouvelle liste d'entiers.
    """
    if isinstance(version, str):
        return [_component(part) for part in version.split(".")]
    return [int(part) for part in version]


def parse_git_version_output(output: str) -> Optional[VersionVector]:
    """Extrait le vecteur de version de la sortie de ``git --version``.

    Returns:
        Le vecteur, ou None si la sortie ne correspond pas au motif
        ``git version <chaîne pointée>``.
    """
    match = GIT_VERSION_PATTERN.search(output.strip())
    if match is None:
        return None
    return parse_version(match.group(1))


def compare_versions(current: VersionLike, check: VersionLike) -> int:
    """Compare deux versions composant par composant.

    Chaque composant de current est comparé au composant suivant de
    check (0 si check est épuisé) ; la première différence décide.
    Si tous les composants de current sont égaux, le résultat est -1
    lorsque check contient encore des composants, même nuls :
    compare_versions([1, 5], [1, 5, 0]) == -1. Ce comportement sert
    de garde aux fonctionnalités git et est conservé tel quel.

    Args:
        current: Version de référence (ex: version installée).
        check: Version à laquelle comparer.

    Returns:
        -1, 0 ou 1.
    """
    current_version = parse_version(current)
    check_version = parse_version(check)
    for component in current_version:
        other = check_version.pop(0) if check_version else 0
        if component != other:
            return 1 if component > other else -1
    return -1 if check_version else 0
