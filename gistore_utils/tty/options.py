"""Options d'affichage du terminal."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TtyOptions:
    """Options d'affichage passées à la construction des sorties console.

    Attributes:
        verbose: Affiche les messages de débogage.
        quiet: Masque les messages d'information.
    """

    verbose: bool = False
    quiet: bool = False
