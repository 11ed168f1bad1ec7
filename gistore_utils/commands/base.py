"""Interfaces abstraites et structures de données pour l'exécution
de commandes externes.

Ce module définit :
    - RoutingMode : Sous-ensemble des flux standard remis au consommateur.
    - ShellOptions : Options immuables d'une invocation.
    - ExecutionOutcome : Résultat immuable d'une exécution.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Any, Callable, List, Optional, Sequence, Union

Argument = Union[str, PathLike]
Consumer = Callable[..., Any]


class RoutingMode(Enum):
    """Flux du processus enfant remis au consommateur.

    STDOUT_ONLY : (stdout,), stdin fermé immédiatement, stderr hérité.
    MERGED : (stdin, stdout), stderr redirigé dans stdout.
    FULL : (stdin, stdout, stderr), trois flux indépendants.
    """

    STDOUT_ONLY = "stdout_only"
    MERGED = "merge_stderr"
    FULL = "full"


@dataclass(frozen=True)
class ShellOptions:
    """Options d'une invocation de commande.

    Attributes:
        stdout_only: Ne remettre que stdout au consommateur.
        merge_stderr: Fusionner stderr dans stdout.
        check_return: Lever CommandReturnError si le code est non nul.
        without_locale: Exécuter avec LC_ALL=C (sortie analysable).
        with_git_config: Marqueur du mode test de configuration git.
        system_scope: Portée --system demandée par l'appelant.
        global_scope: Portée --global demandée par l'appelant.
    """

    stdout_only: bool = False
    merge_stderr: bool = False
    check_return: bool = False
    without_locale: bool = False
    with_git_config: bool = False
    system_scope: bool = False
    global_scope: bool = False

    @property
    def routing_mode(self) -> RoutingMode:
        """Mode de routage effectif (stdout_only est prioritaire)."""
        if self.stdout_only:
            return RoutingMode.STDOUT_ONLY
        if self.merge_stderr:
            return RoutingMode.MERGED
        return RoutingMode.FULL

    def with_(self, **changes: Any) -> "ShellOptions":
        """Retourne une copie modifiée des options."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class ExecutionOutcome:
    """Résultat de l'exécution d'une commande.

    Attributes:
        command: Commande exécutée sous forme de liste.
        return_code: Code de retour du processus.
        success: True si la commande a réussi (code 0).
        value: Valeur retournée par le consommateur des flux.
    """

    command: List[str]
    return_code: int
    success: bool
    value: Any = None


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de commandes externes."""

    @abstractmethod
    def popen3(
        self,
        command: Sequence[Argument],
        options: Optional[ShellOptions] = None,
        consumer: Optional[Consumer] = None,
    ) -> ExecutionOutcome:
        """Exécute une commande en remettant ses flux au consommateur.

        Args:
            command: Vecteur d'arguments (le premier est le programme).
            options: Options d'invocation.
            consumer: Fonction recevant les flux routés.

        Returns:
            Résultat de l'exécution.

        Raises:
            CommandReturnError: Code non nul avec check_return.
            CommandExceptionError: Tout autre échec.
        """
        pass

    @abstractmethod
    def system(self, command: Sequence[Argument]) -> bool:
        """Exécute une commande sans capture et retourne son succès."""
        pass
