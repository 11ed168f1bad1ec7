"""Exécuteur de processus externes via subprocess.

Ce module fournit ProcessRunner, l'implémentation concrète de
CommandExecutor utilisée pour invoquer git et les autres programmes
externes. Trois modes de routage des flux sont disponibles (voir
RoutingMode) ; le consommateur fourni par l'appelant lit et écrit
les flux pendant que le processus enfant s'exécute.

Contrat de l'appelant :
    Tout flux que le consommateur n'utilise pas est fermé ou vidé
    par l'exécuteur avant l'attente de fin du processus. Un
    consommateur qui écrit beaucoup sur stdin sans lire stdout
    (ou stderr en mode FULL) peut toutefois bloquer si l'enfant
    remplit son tampon de sortie : il doit alterner lectures et
    écritures, ou fermer stdin avant de lire.

Aucun timeout ni annulation n'est proposé : un appel dure jusqu'à
la fin du processus enfant.

Example :
    Lecture de la version de git :

        from gistore_utils.commands import ProcessRunner

        runner = ProcessRunner(logger=logger)
        outcome = runner.shellout(
            ["git", "--version"],
            consumer=lambda stdout: stdout.read(),
        )
        print(outcome.value)

    Écriture sur stdin et lecture des deux sorties :

        def paginate(stdin, stdout, stderr):
            stdin.write("a\\nb\\n")
            stdin.close()
            return stdout.read()

        runner.shellpipe(["pr", "-2", "-t"], consumer=paginate)
"""

import os
import subprocess  # nosec B404
import threading
from typing import Dict, IO, List, Optional, Sequence, Tuple

from gistore_utils.commands.base import (
    Argument,
    CommandExecutor,
    Consumer,
    ExecutionOutcome,
    RoutingMode,
    ShellOptions,
)
from gistore_utils.commands.formatter import CommandFormatter, escape_command
from gistore_utils.commands.redaction import CredentialRedactor
from gistore_utils.commands.translator import ErrorTranslator
from gistore_utils.errors.exceptions import CommandReturnError
from gistore_utils.logging.base import Logger

_C_LOCALE = {"LC_ALL": "C", "LANG": "C"}
_CHUNK_SIZE = 65536


def _discard(stream: IO[str]) -> None:
    """Lit un flux jusqu'à la fin en ignorant son contenu."""
    while stream.read(_CHUNK_SIZE):
        pass


class ProcessRunner(CommandExecutor):
    """Exécuteur de processus avec routage des flux standard.

    Chaque appel lance un seul processus enfant, remet les flux
    routés au consommateur, attend la fin du processus puis
    vérifie éventuellement son code retour. Toute exception levée
    pendant le lancement, la lecture des flux ou l'attente est
    convertie par l'ErrorTranslator en CommandReturnError ou
    CommandExceptionError. Tous les flux sont fermés avant le
    retour ou la propagation de l'erreur.

    Attributes:
        _logger: Logger optionnel (début d'exécution en debug,
            échecs en erreur).
        _translator: Traducteur d'erreurs avec son expurgateur.
        _default_env: Variables d'environnement ajoutées à os.environ.
        _formatter: Formateur des messages de log.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        redactor: Optional[CredentialRedactor] = None,
        default_env: Optional[Dict[str, str]] = None,
    ) -> None:
        """Initialise l'exécuteur.

        Args:
            logger: Logger optionnel.
            redactor: Expurgateur appliqué aux messages d'erreur et
                aux lignes de commande (défaut: IdentityRedactor).
            default_env: Variables d'environnement par défaut
                (fusionnées avec os.environ).
        """
        self._logger = logger
        self._translator = ErrorTranslator(redactor)
        self._default_env = default_env
        self._formatter = CommandFormatter()

    @property
    def translator(self) -> ErrorTranslator:
        return self._translator

    def _log_debug(self, message: str) -> None:
        if self._logger:
            self._logger.log_debug(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _build_env(
        self, options: ShellOptions
    ) -> Optional[Dict[str, str]]:
        """Construit l'environnement d'exécution.

        Retourne None si aucun environnement personnalisé n'est
        nécessaire (subprocess utilisera os.environ).
        """
        if self._default_env is None and not options.without_locale:
            return None
        merged = os.environ.copy()
        if self._default_env:
            merged.update(self._default_env)
        if options.without_locale:
            merged.pop("LANGUAGE", None)
            merged.update(_C_LOCALE)
        return merged

    @staticmethod
    def _normalize(command: Sequence[Argument]) -> List[str]:
        """Convertit le vecteur d'arguments en liste de chaînes.

        Raises:
            ValueError: Si le vecteur est vide.
        """
        args = [os.fspath(arg) if isinstance(arg, os.PathLike)
                else str(arg) for arg in command]
        if not args:
            raise ValueError("La commande ne peut pas être vide.")
        return args

    @staticmethod
    def _pipes(mode: RoutingMode) -> Tuple[int, int, Optional[int]]:
        """Redirections (stdin, stdout, stderr) pour un mode."""
        if mode is RoutingMode.STDOUT_ONLY:
            return subprocess.PIPE, subprocess.PIPE, None
        if mode is RoutingMode.MERGED:
            return subprocess.PIPE, subprocess.PIPE, subprocess.STDOUT
        return subprocess.PIPE, subprocess.PIPE, subprocess.PIPE

    @staticmethod
    def _route(proc: subprocess.Popen, mode: RoutingMode) -> tuple:
        """Flux remis au consommateur selon le mode."""
        if mode is RoutingMode.STDOUT_ONLY:
            # Évite l'interblocage enfant bloqué en écriture /
            # parent bloqué en écriture sur stdin.
            proc.stdin.close()
            return (proc.stdout,)
        if mode is RoutingMode.MERGED:
            return (proc.stdin, proc.stdout)
        return (proc.stdin, proc.stdout, proc.stderr)

    @staticmethod
    def _drain(proc: subprocess.Popen) -> int:
        """Ferme stdin, vide les sorties non lues et attend l'enfant.

        Les deux sorties sont vidées en parallèle en mode FULL pour
        qu'un tampon plein sur l'une ne bloque pas l'autre.

        Returns:
            Code retour du processus.
        """
        if proc.stdin is not None and not proc.stdin.closed:
            try:
                proc.stdin.close()
            except BrokenPipeError:
                pass
        pending = [stream for stream in (proc.stdout, proc.stderr)
                   if stream is not None and not stream.closed]
        workers = [threading.Thread(target=_discard, args=(stream,),
                                    daemon=True)
                   for stream in pending[1:]]
        for worker in workers:
            worker.start()
        if pending:
            _discard(pending[0])
        for worker in workers:
            worker.join()
        return proc.wait()

    def popen3(
        self,
        command: Sequence[Argument],
        options: Optional[ShellOptions] = None,
        consumer: Optional[Consumer] = None,
    ) -> ExecutionOutcome:
        """Exécute une commande en remettant ses flux au consommateur.

        Le consommateur est appelé avec les flux du mode de routage
        (voir RoutingMode) ; sa valeur de retour devient
        ExecutionOutcome.value. Il est appelé après l'établissement
        du routage et avant l'attente de fin du processus.

        Args:
            command: Vecteur d'arguments, sans interprétation shell.
            options: Options d'invocation (défaut: ShellOptions()).
            consumer: Fonction recevant les flux routés (optionnelle).

        Returns:
            ExecutionOutcome avec le code retour et la valeur du
            consommateur.

        Raises:
            ValueError: Si la commande est vide.
            CommandReturnError: Code non nul avec check_return.
            CommandExceptionError: Lancement impossible, erreur dans
                le consommateur ou pendant l'attente.
        """
        options = options or ShellOptions()
        args = self._normalize(command)
        mode = options.routing_mode
        self._log_debug(
            self._formatter.format_start(
                self._translator.command_line(args), mode
            )
        )

        stdin, stdout, stderr = self._pipes(mode)
        try:
            with subprocess.Popen(  # nosec B603
                args,
                stdin=stdin,
                stdout=stdout,
                stderr=stderr,
                text=True,
                errors="replace",
                env=self._build_env(options),
            ) as proc:
                streams = self._route(proc, mode)
                value = consumer(*streams) if consumer else None
                return_code = self._drain(proc)
            if options.check_return and return_code != 0:
                raise CommandReturnError(
                    f"Code retour non nul ({return_code}).",
                    return_code=return_code,
                )
        except Exception as exc:
            error = self._translator.translate(exc, args)
            self._log_error(str(error))
            raise error from exc

        return ExecutionOutcome(
            command=args,
            return_code=return_code,
            success=return_code == 0,
            value=value,
        )

    def shellout(
        self,
        command: Sequence[Argument],
        options: Optional[ShellOptions] = None,
        consumer: Optional[Consumer] = None,
    ) -> ExecutionOutcome:
        """popen3 en mode STDOUT_ONLY : le consommateur reçoit stdout."""
        options = (options or ShellOptions()).with_(stdout_only=True)
        return self.popen3(command, options, consumer)

    def shellpipe(
        self,
        command: Sequence[Argument],
        options: Optional[ShellOptions] = None,
        consumer: Optional[Consumer] = None,
    ) -> ExecutionOutcome:
        """popen3 avec les options telles quelles (mode FULL par défaut)."""
        return self.popen3(command, options, consumer)

    def system(
        self,
        command: Sequence[Argument],
        stdout: Optional[int] = None,
        stderr: Optional[int] = None,
    ) -> bool:
        """Exécute une commande sans capture et retourne son succès.

        Un échec de lancement (programme absent, non exécutable)
        est logué et retourne False, comme un code retour non nul.

        Args:
            command: Vecteur d'arguments.
            stdout: Redirection optionnelle de la sortie standard.
            stderr: Redirection optionnelle de la sortie d'erreur.

        Returns:
            True si le processus s'est terminé avec le code 0.
        """
        args = self._normalize(command)
        command_line = self._translator.command_line(args)
        self._log_debug(self._formatter.format_system(command_line))
        try:
            return_code = subprocess.call(  # nosec B603
                args, stdout=stdout, stderr=stderr
            )
        except OSError as exc:
            self._log_error(
                f"Erreur système : "
                f"{self._translator.redactor.strip(str(exc))}"
            )
            return False
        if return_code != 0:
            self._log_debug(
                self._formatter.format_exit(command_line, return_code)
            )
        return return_code == 0

    def safe_system(self, command: Sequence[Argument]) -> None:
        """Comme system, mais lève une erreur en cas d'échec.

        Raises:
            CommandReturnError: Si le processus n'a pas réussi.
        """
        if not self.system(command):
            rendered = self._translator.redactor.strip(
                escape_command(command)
            )
            raise CommandReturnError(
                f"Échec lors de l'exécution : {rendered}",
                command_line=rendered,
            )

    def quiet_system(self, command: Sequence[Argument]) -> bool:
        """Comme system, stdout et stderr redirigés vers /dev/null.

        Les flux sont redirigés plutôt que fermés : certains
        programmes échouent s'ils ne peuvent pas écrire.
        """
        return self.system(
            command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
