"""Réglages d'exécution de gistore.

Les valeurs par défaut proviennent de l'environnement (PATH,
GISTORE_TEST_GIT_CONFIG) ; un fichier TOML ou JSON peut les
surcharger via sa table ``[gistore]`` :

    [gistore]
    log_file = "~/.cache/gistore/gistore.log"
    log_level = "DEBUG"
    verbose = true
    redact_credentials = true
"""

import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from gistore_utils.config.loader import ConfigLoader, FileConfigLoader
from gistore_utils.errors.exceptions import ConfigurationError

TEST_GIT_CONFIG_VARIABLE = "GISTORE_TEST_GIT_CONFIG"
SECTION = "gistore"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GistoreSettings(BaseModel):
    """Réglages validés de la couche d'exécution.

    Attributes:
        search_path: Répertoires de recherche des exécutables.
        git_test_config: Mode test : la portée --system/--global
            n'est pas transmise à ``git config``.
        log_file: Fichier de log optionnel.
        log_level: Niveau du fichier de log.
        verbose: Affiche les messages de débogage sur la console.
        quiet: Masque les messages d'information.
        redact_credentials: Masque les mots de passe des URL dans
            les erreurs et les logs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    search_path: str = ""
    git_test_config: bool = False
    log_file: Optional[str] = None
    log_level: str = "INFO"
    verbose: bool = False
    quiet: bool = False
    redact_credentials: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(
                f"Niveau de log invalide: {value}. "
                f"Valeurs possibles: {', '.join(_LEVELS)}"
            )
        return level

    @field_validator("log_file")
    @classmethod
    def _expand_log_file(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return str(Path(value).expanduser())

    @staticmethod
    def _env_defaults(
        environ: Optional[Mapping[str, str]]
    ) -> dict[str, Any]:
        env = os.environ if environ is None else environ
        return {
            "search_path": env.get("PATH", ""),
            # Une variable définie, même vide, active le mode test.
            "git_test_config": TEST_GIT_CONFIG_VARIABLE in env,
        }

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "GistoreSettings":
        """Construit les réglages depuis l'environnement.

        Args:
            environ: Environnement à lire (défaut: os.environ).
        """
        return cls(**cls._env_defaults(environ))

    @classmethod
    def from_file(
        cls,
        config_path: Union[str, Path],
        environ: Optional[Mapping[str, str]] = None,
        loader: Optional[ConfigLoader] = None,
    ) -> "GistoreSettings":
        """Construit les réglages depuis un fichier et l'environnement.

        Les valeurs de la table ``[gistore]`` du fichier surchargent
        celles issues de l'environnement.

        Raises:
            ConfigurationError: Fichier absent, illisible ou invalide.
        """
        loader = loader or FileConfigLoader()
        try:
            section = loader.load_section(config_path, SECTION)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Impossible de charger {config_path}: {e}"
            ) from e

        values = cls._env_defaults(environ)
        values.update(section)
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration invalide dans {config_path}: {e}"
            ) from e
