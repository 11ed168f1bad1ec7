"""Tests pour CommandLocator et which."""

import os
import stat

import pytest

from gistore_utils.commands import CommandLocator, which


def make_tool(directory, name="tool", executable=True):
    """Crée un programme factice dans directory."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    path.chmod(mode)
    return path


class TestCommandLocator:
    """Tests de la recherche d'exécutables."""

    def test_premier_repertoire_prioritaire(self, tmp_path):
        """Le premier répertoire contenant l'exécutable l'emporte."""
        first = make_tool(tmp_path / "a")
        make_tool(tmp_path / "b")
        search_path = os.pathsep.join(
            [str(tmp_path / "a"), str(tmp_path / "b")]
        )

        assert CommandLocator(search_path).locate("tool") == first

    def test_ignore_les_fichiers_non_executables(self, tmp_path):
        """Un fichier sans droit d'exécution est ignoré."""
        if os.geteuid() == 0:
            pytest.skip("root contourne les droits d'exécution")
        make_tool(tmp_path / "a", executable=False)
        second = make_tool(tmp_path / "b")
        search_path = os.pathsep.join(
            [str(tmp_path / "a"), str(tmp_path / "b")]
        )

        assert CommandLocator(search_path).locate("tool") == second

    def test_introuvable_retourne_none(self, tmp_path):
        """L'absence est signalée par None, sans exception."""
        (tmp_path / "vide").mkdir()
        locator = CommandLocator(str(tmp_path / "vide"))

        assert locator.locate("tool") is None

    def test_repertoire_inexistant_ignore(self, tmp_path):
        """Les répertoires absents du disque sont ignorés."""
        found = make_tool(tmp_path / "bin")
        search_path = os.pathsep.join(
            [str(tmp_path / "absent"), "", str(tmp_path / "bin")]
        )

        assert CommandLocator(search_path).locate("tool") == found

    def test_chemin_absolu(self, tmp_path, monkeypatch):
        """Un répertoire relatif donne tout de même un chemin absolu."""
        make_tool(tmp_path / "bin")
        monkeypatch.chdir(tmp_path)

        result = CommandLocator("bin").locate("tool")

        assert result is not None
        assert result.is_absolute()

    def test_path_par_defaut(self, tmp_path, monkeypatch):
        """Sans chemin explicite, la variable PATH est utilisée."""
        found = make_tool(tmp_path / "bin")
        monkeypatch.setenv("PATH", str(tmp_path / "bin"))

        assert which("tool") == found

    def test_which_avec_chemin(self, tmp_path):
        """which accepte un chemin de recherche explicite."""
        assert which("tool", str(tmp_path)) is None
