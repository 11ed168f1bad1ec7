"""Rendu textuel des lignes de commande pour les logs et les erreurs."""

from typing import Iterable

from gistore_utils.commands.base import RoutingMode


def escape_command(command: Iterable[object]) -> str:
    """Rend une commande en échappant les espaces de chaque argument.

    Example :
        >>> escape_command(["cp", "my file", "/tmp"])
        'cp my\\\\ file /tmp'
    """
    return " ".join(str(arg).replace(" ", "\\ ") for arg in command)


class CommandFormatter:
    """Formateur texte brut des messages d'exécution.

    Produit des messages sans code ANSI, compatibles avec les
    fichiers de log et les outils grep.

    Example :
        Exécution [stdout_only] : /usr/bin/git --version
    """

    def format_start(self, command_line: str, mode: RoutingMode) -> str:
        """Message de début d'exécution avec le mode de routage."""
        return f"Exécution [{mode.value}] : {command_line}"

    def format_system(self, command_line: str) -> str:
        """Message de début d'exécution sans capture."""
        return f"Exécution : {command_line}"

    def format_exit(self, command_line: str, return_code: int) -> str:
        """Message de fin d'exécution en échec."""
        return f"Code retour {return_code} : {command_line}"
