"""Codes ANSI et dimensions du terminal.

Les codes ne sont émis que si le flux cible est un terminal (TTY),
évitant ainsi de polluer les pipes ou les redirections.
"""

import shutil
import sys
from typing import Optional, TextIO

DEFAULT_WIDTH = 80


class Tty:
    """Styles ANSI associés à un flux de sortie.

    Example :
        tty = Tty()
        print(f"{tty.blue}Info{tty.reset}: sauvegarde terminée")
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """Initialise les styles pour un flux.

        Args:
            stream: Flux de référence pour la détection TTY
                (défaut: sys.stdout au moment de l'appel).
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Flux de référence (résolu paresseusement)."""
        return self._stream if self._stream is not None else sys.stdout

    def is_tty(self) -> bool:
        """Vérifie si le flux est un terminal interactif."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def _escape(self, code: str) -> str:
        if not self.is_tty():
            return ""
        return f"\033[{code}m"

    def _color(self, n: int) -> str:
        return self._escape(f"0;{n}")

    def _bold(self, n: int) -> str:
        return self._escape(f"1;{n}")

    def _underline(self, n: int) -> str:
        return self._escape(f"4;{n}")

    @property
    def blue(self) -> str:
        return self._bold(34)

    @property
    def white(self) -> str:
        return self._bold(39)

    @property
    def red(self) -> str:
        return self._underline(31)

    @property
    def yellow(self) -> str:
        return self._underline(33)

    @property
    def reset(self) -> str:
        return self._escape("0")

    @property
    def em(self) -> str:
        return self._underline(39)

    @property
    def green(self) -> str:
        return self._color(92)

    @property
    def gray(self) -> str:
        return self._bold(30)

    def width(self) -> int:
        """Largeur du terminal en colonnes (80 par défaut)."""
        columns = shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns
        return columns if columns > 0 else DEFAULT_WIDTH

    def truncate(self, text: object) -> str:
        """Tronque un texte pour qu'il tienne sur une ligne."""
        return str(text)[: max(self.width() - 4, 0)]
