"""Logger console au format « Error: / Warning: / Info: / Debug: ».

Les préfixes sont colorés lorsque le flux est un terminal. Les messages
d'information sont masqués en mode quiet et les messages de débogage
ne s'affichent qu'en mode verbose.
"""

import sys
from typing import Optional, TextIO

from gistore_utils.logging.base import Logger
from gistore_utils.tty.colors import Tty
from gistore_utils.tty.options import TtyOptions


class TtyLogger(Logger):
    """Logger écrivant sur la sortie d'erreur du terminal.

    Attributes:
        options: Options d'affichage (verbose, quiet).
    """

    def __init__(
        self,
        options: Optional[TtyOptions] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Initialise le logger console.

        Args:
            options: Options d'affichage (défaut: TtyOptions()).
            stream: Flux de sortie (défaut: sys.stderr à l'écriture).
        """
        self.options = options or TtyOptions()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Flux de sortie effectif."""
        return self._stream if self._stream is not None else sys.stderr

    def _label(self, label: str, style: str) -> str:
        tty = Tty(self.stream)
        if not tty.is_tty():
            return label
        return f"{getattr(tty, style)}{label}{tty.reset}"

    def _write(self, text: str) -> None:
        print(text, file=self.stream)

    def log_error(self, message: str) -> None:
        """Affiche une erreur, les lignes suivantes sans préfixe."""
        lines = str(message).split("\n")
        self._write(f"{self._label('Error', 'red')}: {lines[0]}")
        for line in lines[1:]:
            self._write(line)

    def log_warning(self, message: str) -> None:
        """Affiche un avertissement."""
        self._write(f"{self._label('Warning', 'red')}: {message}")

    def log_info(self, message: str) -> None:
        """Affiche une information sauf en mode quiet."""
        if not self.options.quiet:
            self._write(f"{self._label('Info', 'blue')}: {message}")

    def log_debug(self, message: str) -> None:
        """Affiche un message de débogage en mode verbose."""
        if self.options.verbose:
            self._write(f"{self._label('Debug', 'yellow')}: {message}")
