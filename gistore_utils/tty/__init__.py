"""Module d'affichage terminal (couleurs, options)."""

from gistore_utils.tty.colors import Tty
from gistore_utils.tty.options import TtyOptions

__all__ = [
    "Tty",
    "TtyOptions",
]
