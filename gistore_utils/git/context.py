"""Contexte d'exécution git : binaire, version et tâches gistore.

Le chemin du binaire git et sa version sont calculés à la première
utilisation puis conservés pour toute la durée de vie du contexte.
Un calcul concurrent lors du premier accès est sans conséquence :
il est idempotent et la dernière écriture est identique aux autres.
"""

import re
from pathlib import Path
from typing import Dict, Optional, Union

from gistore_utils.commands.base import ShellOptions
from gistore_utils.commands.builder import CommandBuilder
from gistore_utils.commands.locator import CommandLocator
from gistore_utils.commands.redaction import (
    IdentityRedactor,
    UrlCredentialRedactor,
)
from gistore_utils.commands.runner import ProcessRunner
from gistore_utils.config.settings import GistoreSettings
from gistore_utils.errors.exceptions import CommandError, GitNotFoundError
from gistore_utils.git.version import (
    VersionLike,
    VersionVector,
    compare_versions,
    parse_git_version_output,
)
from gistore_utils.logging.base import Logger
from gistore_utils.logging.file_logger import FileLogger
from gistore_utils.logging.tty_logger import TtyLogger
from gistore_utils.tty.options import TtyOptions

TASK_PREFIX = "gistore.task."
_TASK_LINE = re.compile(r"^gistore\.task\.(\S+) (.*)$")


class GitContext:
    """Propriétaire des informations git mises en cache.

    Attributes:
        runner: Exécuteur utilisé pour toutes les commandes git.
        locator: Localisateur du binaire git.
        test_git_config: Mode test de la configuration git.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        search_path: Optional[str] = None,
        test_git_config: bool = False,
    ) -> None:
        """Initialise le contexte.

        Args:
            runner: Exécuteur de commandes (défaut: ProcessRunner()).
            search_path: Chemin de recherche de git (défaut: PATH).
            test_git_config: Si True, ``get_gistore_tasks`` ne
                transmet pas la portée --system/--global.
        """
        self.runner = runner or ProcessRunner()
        self.locator = CommandLocator(search_path)
        self.test_git_config = test_git_config
        self._git_cmd: Optional[str] = None
        self._git_version: Optional[VersionVector] = None

    @classmethod
    def from_settings(
        cls,
        settings: GistoreSettings,
        logger: Optional[Logger] = None,
    ) -> "GitContext":
        """Construit un contexte câblé selon les réglages.

        Sans logger explicite, un FileLogger est créé si log_file est
        défini, sinon un TtyLogger respectant verbose et quiet.
        """
        if logger is None:
            if settings.log_file:
                logger = FileLogger(settings.log_file, settings.log_level)
            else:
                logger = TtyLogger(
                    TtyOptions(verbose=settings.verbose,
                               quiet=settings.quiet)
                )
        redactor = (UrlCredentialRedactor() if settings.redact_credentials
                    else IdentityRedactor())
        runner = ProcessRunner(logger=logger, redactor=redactor)
        return cls(
            runner=runner,
            search_path=settings.search_path,
            test_git_config=settings.git_test_config,
        )

    @property
    def git_cmd(self) -> str:
        """Chemin absolu du binaire git.

        Raises:
            GitNotFoundError: Si git est absent du chemin de recherche.
        """
        if self._git_cmd is None:
            git_path = self.locator.locate("git")
            if git_path is None:
                raise GitNotFoundError()
            self._git_cmd = str(git_path)
        return self._git_cmd

    @property
    def git_version(self) -> Optional[VersionVector]:
        """Version de git installée, ou None si elle est inconnue.

        Raises:
            GitNotFoundError: Si git est introuvable.
            CommandError: Si ``git --version`` ne peut être exécuté.
        """
        if self._git_version is None:
            outcome = self.runner.shellout(
                [self.git_cmd, "--version"],
                ShellOptions(without_locale=True),
                lambda stdout: parse_git_version_output(stdout.read()),
            )
            self._git_version = outcome.value
        if self._git_version is None:
            return None
        return list(self._git_version)

    def git_version_compare(
        self,
        v1: VersionLike,
        v2: Optional[VersionLike] = None,
    ) -> int:
        """Compare deux versions, ou la version installée à v1.

        Args:
            v1: Version courante si v2 est fourni, sinon version à
                laquelle comparer la version installée.
            v2: Version à laquelle comparer v1.

        Returns:
            -1, 0 ou 1 (voir compare_versions).

        Raises:
            CommandError: Si la version installée est inconnue.
        """
        if v2 is not None:
            return compare_versions(v1, v2)
        installed = self.git_version
        if installed is None:
            raise CommandError(
                "Version de git inconnue : sortie de "
                "« git --version » non reconnue."
            )
        return compare_versions(installed, v1)

    def get_gistore_tasks(
        self, system: bool = False, global_: bool = False
    ) -> Dict[str, str]:
        """Liste les tâches gistore de la configuration git.

        Lit les clés ``gistore.task.<nom>`` ; tout échec de la
        commande (aucune clé, code non nul) donne un dict vide.

        Args:
            system: Lire la configuration système (--system).
            global_: Lire la configuration globale (--global),
                ignoré si system est vrai.

        Returns:
            Dictionnaire {nom de tâche: valeur}.
        """
        builder = CommandBuilder(self.git_cmd).with_flag("config")
        if not self.test_git_config:
            builder.with_flag_if("--system", system)
            builder.with_flag_if("--global", global_ and not system)
        command = builder.with_args(["--get-regexp", TASK_PREFIX]).build()
        options = ShellOptions(
            with_git_config=self.test_git_config,
            system_scope=system,
            global_scope=global_,
        )

        def read_tasks(stdout) -> Dict[str, str]:
            tasks: Dict[str, str] = {}
            for line in stdout.read().splitlines():
                match = _TASK_LINE.match(line)
                if match:
                    tasks[match.group(1)] = match.group(2)
            return tasks

        try:
            return self.runner.shellout(command, options, read_tasks).value
        except CommandError:
            return {}

    @staticmethod
    def is_git_repo(name: Union[str, Path]) -> bool:
        """Vérifie si name est un dépôt git nu (objects, refs, config)."""
        path = Path(name)
        return ((path / "objects").is_dir()
                and (path / "refs").is_dir()
                and (path / "config").exists())
