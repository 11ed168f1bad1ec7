"""Logger écrivant les traces d'exécution dans un fichier."""

import logging
from pathlib import Path
from typing import Union

from gistore_utils.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class FileLogger(Logger):
    """Logger fichier avec copie optionnelle sur la sortie d'erreur.

    Un logging.Logger nommé ``gistore.<chemin>`` est partagé par
    fichier : une seconde instance sur le même chemin réutilise ses
    handlers au lieu d'en ajouter. Chaque enregistrement est vidé
    sur le disque dès son écriture et ne remonte pas au logger racine.

    Attributes:
        log_file: Chemin du fichier de log.
        logger: logging.Logger sous-jacent.
    """

    def __init__(
        self,
        log_file: Union[str, Path],
        level: str = "INFO",
        log_format: str = DEFAULT_FORMAT,
        console_output: bool = False
    ) -> None:
        """
        Ouvre (ou réutilise) le logger associé à log_file.

        Args:
            log_file: Chemin du fichier, ses répertoires sont créés
            level: Nom du niveau minimal (DEBUG pour tracer les commandes)
            log_format: Format logging des enregistrements
            console_output: Dupliquer les enregistrements sur stderr
        """
        self.log_file = str(log_file)
        Path(self.log_file).parent.mkdir(parents=True, exist_ok=True)
        self._level = getattr(logging, level.upper(), logging.INFO)

        self.logger = logging.getLogger(f"gistore.{self.log_file}")
        self.logger.setLevel(self._level)
        self.logger.propagate = False

        if not self.logger.handlers:
            self._attach(
                logging.FileHandler(self.log_file, encoding="utf-8"),
                log_format,
            )
            if console_output:
                self._attach(logging.StreamHandler(), log_format)

    def _attach(self, handler: logging.Handler, log_format: str) -> None:
        handler.setLevel(self._level)
        handler.setFormatter(logging.Formatter(log_format))
        self.logger.addHandler(handler)

    def _emit(self, level: int, message: str) -> None:
        self.logger.log(level, message)
        for handler in self.logger.handlers:
            handler.flush()

    def log_info(self, message: str) -> None:
        self._emit(logging.INFO, message)

    def log_warning(self, message: str) -> None:
        self._emit(logging.WARNING, message)

    def log_error(self, message: str) -> None:
        self._emit(logging.ERROR, message)

    def log_debug(self, message: str) -> None:
        """Trace une commande lancée (visible au niveau DEBUG)."""
        self._emit(logging.DEBUG, message)

    def close(self) -> None:
        """Ferme les handlers et les détache du logger partagé."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
