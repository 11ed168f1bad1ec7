"""Lecture des fichiers de réglages TOML ou JSON.

Le format est choisi d'après l'extension du fichier. Les erreurs de
syntaxe remontent en ValueError (tomllib.TOMLDecodeError et
json.JSONDecodeError en dérivent).
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Union

ConfigPath = Union[str, Path]
RawConfig = Dict[str, Any]


def _read_toml(path: Path) -> RawConfig:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> RawConfig:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class ConfigLoader(ABC):
    """Source des réglages bruts, substituable dans les tests."""

    @abstractmethod
    def load(self, config_path: ConfigPath) -> RawConfig:
        """Retourne le contenu du fichier sous forme de dictionnaire."""
        pass

    def load_section(self, config_path: ConfigPath, section: str) -> RawConfig:
        """Retourne une table de premier niveau du fichier.

        Args:
            config_path: Fichier à lire.
            section: Nom de la table (ex: "gistore").

        Returns:
            Le contenu de la table, ou un dict vide si elle est absente.

        Raises:
            TypeError: Si la valeur de section n'est pas une table.
        """
        value = self.load(config_path).get(section, {})
        if not isinstance(value, dict):
            raise TypeError(
                f"La section [{section}] de {config_path} "
                f"doit être une table."
            )
        return value


class FileConfigLoader(ConfigLoader):
    """Chargeur de fichiers .toml et .json.

    Attributes:
        PARSERS: Lecteur associé à chaque extension reconnue.
    """

    PARSERS: Dict[str, Callable[[Path], RawConfig]] = {
        ".toml": _read_toml,
        ".json": _read_json,
    }

    def load(self, config_path: ConfigPath) -> RawConfig:
        """Charge un fichier de réglages.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Extension non reconnue, syntaxe invalide ou
                document JSON qui n'est pas un objet.
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        parser = self.PARSERS.get(path.suffix.lower())
        if parser is None:
            raise ValueError(
                f"Extension non supportée: {path.suffix}. "
                f"Utilisez {' ou '.join(sorted(self.PARSERS))}"
            )

        data = parser(path)
        if not isinstance(data, dict):
            raise ValueError(f"{path} doit contenir un objet de premier niveau.")
        return data
