"""Affichage d'une liste en colonnes adaptées à la largeur du terminal."""

import math
from typing import Optional, Sequence

from gistore_utils.commands.builder import CommandBuilder
from gistore_utils.commands.runner import ProcessRunner
from gistore_utils.tty.colors import Tty

PR_COMMAND = "/usr/bin/pr"


def show_columns(
    items: Sequence[object],
    runner: Optional[ProcessRunner] = None,
    padding: int = 4,
    indent: int = 4,
    tty: Optional[Tty] = None,
) -> str:
    """Met en forme des éléments en colonnes.

    Sur un terminal, la mise en page est confiée à ``pr`` ; sinon
    chaque élément est indenté sur sa propre ligne.

    Args:
        items: Éléments à afficher.
        runner: Exécuteur pour ``pr`` (défaut: ProcessRunner()).
        padding: Espacement minimal entre colonnes.
        indent: Indentation de gauche.
        tty: Terminal de référence (défaut: Tty() sur stdout).

    Returns:
        Texte prêt à l'affichage (terminé par un saut de ligne sur
        un terminal, sauf s'il est vide).
    """
    tty = tty or Tty()
    lines = [str(item) for item in items]
    if not tty.is_tty():
        return "\n".join(" " * indent + line for line in lines)

    console_width = tty.width()
    longest = max((len(line) for line in lines), default=0)
    cols = math.floor(
        (console_width - indent + padding) / (longest + padding)
    )
    cols = max(cols, 1)

    command = (
        CommandBuilder(PR_COMMAND)
        .with_flag(f"-{cols}")
        .with_flag(f"-o{indent}")
        .with_flag("-t")
        .with_flag(f"-w{console_width}")
        .build()
    )

    def paginate(stdin, stdout, stderr) -> str:
        stdin.write("".join(f"{line}\n" for line in lines))
        stdin.close()
        return stdout.read()

    output = (runner or ProcessRunner()).shellpipe(
        command, consumer=paginate
    ).value.rstrip()
    return f"{output}\n" if output else output
