"""Constructeur fluent pour assembler des vecteurs d'arguments.

Example:
    Listage des tâches gistore dans la configuration globale :

        cmd = (
            CommandBuilder("/usr/bin/git")
            .with_args(["config"])
            .with_flag_if("--global", scope == "global")
            .with_args(["--get-regexp", "gistore.task."])
            .build()
        )
        # Résultat : ["/usr/bin/git", "config", "--global",
        #             "--get-regexp", "gistore.task."]
"""

import os
from typing import List, Sequence

from gistore_utils.commands.base import Argument


class CommandBuilder:
    """Constructeur fluent de vecteurs d'arguments (argv)."""

    def __init__(self, program: Argument) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Nom ou chemin du programme à exécuter.

        Raises:
            ValueError: Si program est vide.
        """
        program = os.fspath(program)
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._argv: List[str] = [program]

    def with_flag(self, flag: str) -> "CommandBuilder":
        """Ajoute un flag simple (ex: '-t')."""
        self._argv.append(flag)
        return self

    def with_flag_if(
        self, flag: str, condition: bool
    ) -> "CommandBuilder":
        """Ajoute un flag seulement si la condition est vraie."""
        if condition:
            self._argv.append(flag)
        return self

    def with_args(
        self, args: Sequence[Argument]
    ) -> "CommandBuilder":
        """Ajoute des arguments positionnels (chemins acceptés)."""
        self._argv.extend(os.fspath(arg) for arg in args)
        return self

    def build(self) -> List[str]:
        """Retourne une copie du vecteur d'arguments."""
        return list(self._argv)
