"""Tests pour GitContext avec un faux binaire git."""

import stat
from unittest.mock import MagicMock

import pytest

from gistore_utils.commands import (
    IdentityRedactor,
    ProcessRunner,
    UrlCredentialRedactor,
)
from gistore_utils.config import GistoreSettings
from gistore_utils.errors import (
    CommandError,
    CommandExceptionError,
    GitNotFoundError,
)
from gistore_utils.git import GitContext
from gistore_utils.logging import FileLogger, TtyLogger

FAKE_GIT = """#!/bin/sh
printf '%s\\n' "$*" >> "$(dirname "$0")/calls.log"
case "$1" in
  --version)
    printf 'LC_ALL=%s\\n' "$LC_ALL" >> "$(dirname "$0")/calls.log"
    echo "{version}"
    ;;
  config)
    printf '{tasks}'
    exit {config_code}
    ;;
esac
"""

TASKS = "gistore.task.main /srv/repo\\ngistore.task.etc /etc\\n"


def install_git(directory, version="git version 2.30.1", tasks=TASKS,
                config_code=0):
    """Installe un faux git dans directory et retourne son chemin."""
    directory.mkdir(parents=True, exist_ok=True)
    git = directory / "git"
    git.write_text(FAKE_GIT.format(
        version=version, tasks=tasks, config_code=config_code
    ))
    git.chmod(git.stat().st_mode | stat.S_IXUSR)
    return git


def calls(directory):
    """Lignes d'arguments reçues par le faux git."""
    log = directory / "calls.log"
    return log.read_text().splitlines() if log.exists() else []


@pytest.fixture
def bin_dir(tmp_path):
    return tmp_path / "bin"


class TestGitCmd:
    """Tests de la localisation de git."""

    def test_chemin_absolu(self, bin_dir):
        """git_cmd retourne le chemin absolu du binaire."""
        git = install_git(bin_dir)
        context = GitContext(search_path=str(bin_dir))

        assert context.git_cmd == str(git)

    def test_git_absent(self, tmp_path):
        """Sans git, GitNotFoundError est levée."""
        (tmp_path / "vide").mkdir()
        context = GitContext(search_path=str(tmp_path / "vide"))

        with pytest.raises(GitNotFoundError, match="install git"):
            context.git_cmd

    def test_git_absent_bloque_la_version(self, tmp_path):
        """La version ne peut être lue sans binaire git."""
        context = GitContext(search_path=str(tmp_path))

        with pytest.raises(GitNotFoundError):
            context.git_version


class TestGitVersion:
    """Tests de la lecture et de la comparaison de version."""

    def test_version_lue(self, bin_dir):
        """La sortie de git --version est analysée."""
        install_git(bin_dir)
        context = GitContext(search_path=str(bin_dir))

        assert context.git_version == [2, 30, 1]

    def test_locale_c(self, bin_dir):
        """git --version est lancé sous la locale C."""
        install_git(bin_dir)
        GitContext(search_path=str(bin_dir)).git_version

        assert "LC_ALL=C" in calls(bin_dir)

    def test_version_en_cache(self, bin_dir):
        """git --version n'est exécuté qu'une fois."""
        install_git(bin_dir)
        context = GitContext(search_path=str(bin_dir))

        context.git_version
        context.git_version

        assert calls(bin_dir).count("--version") == 1

    def test_copie_du_cache(self, bin_dir):
        """Modifier la valeur retournée n'altère pas le cache."""
        install_git(bin_dir)
        context = GitContext(search_path=str(bin_dir))

        context.git_version.append(99)

        assert context.git_version == [2, 30, 1]

    def test_version_inconnue(self, bin_dir):
        """Une sortie non reconnue donne None, sans mise en cache."""
        install_git(bin_dir, version="hub version 2.14")
        context = GitContext(search_path=str(bin_dir))

        assert context.git_version is None
        assert context.git_version is None
        assert calls(bin_dir).count("--version") == 2

    def test_comparaison_avec_la_version_installee(self, bin_dir):
        """Avec un argument, la version installée est comparée."""
        install_git(bin_dir)
        context = GitContext(search_path=str(bin_dir))

        assert context.git_version_compare("2.30") == 1
        assert context.git_version_compare([2, 30, 1]) == 0
        assert context.git_version_compare("2.31") == -1

    def test_comparaison_explicite(self):
        """Avec deux arguments, aucun git n'est nécessaire."""
        context = GitContext(search_path="")

        assert context.git_version_compare([1, 5], [1, 5, 0]) == -1
        assert context.git_version_compare("2.0.0", "1.9.9") == 1

    def test_comparaison_version_inconnue(self, bin_dir):
        """Une version installée inconnue lève CommandError."""
        install_git(bin_dir, version="hub version 2.14")
        context = GitContext(search_path=str(bin_dir))

        with pytest.raises(CommandError, match="Version de git inconnue"):
            context.git_version_compare("2.0")


class TestGistoreTasks:
    """Tests de la lecture des tâches gistore."""

    def test_taches_lues(self, bin_dir):
        """Les clés gistore.task.* sont retournées par nom."""
        install_git(bin_dir)
        context = GitContext(search_path=str(bin_dir))

        assert context.get_gistore_tasks() == {
            "main": "/srv/repo",
            "etc": "/etc",
        }
        assert calls(bin_dir)[-1] == "config --get-regexp gistore.task."

    def test_portee_globale(self, bin_dir):
        """global_ ajoute --global hors mode test."""
        install_git(bin_dir)
        GitContext(search_path=str(bin_dir)).get_gistore_tasks(global_=True)

        assert calls(bin_dir)[-1] == (
            "config --global --get-regexp gistore.task."
        )

    def test_portee_systeme_prioritaire(self, bin_dir):
        """system l'emporte sur global_."""
        install_git(bin_dir)
        GitContext(search_path=str(bin_dir)).get_gistore_tasks(
            system=True, global_=True
        )

        assert calls(bin_dir)[-1] == (
            "config --system --get-regexp gistore.task."
        )

    def test_mode_test_ignore_la_portee(self, bin_dir):
        """En mode test, --system et --global ne sont pas transmis."""
        install_git(bin_dir)
        context = GitContext(search_path=str(bin_dir), test_git_config=True)

        context.get_gistore_tasks(system=True)

        assert calls(bin_dir)[-1] == "config --get-regexp gistore.task."

    def test_aucune_tache(self, bin_dir):
        """Un code non nul sans sortie donne un dict vide."""
        install_git(bin_dir, tasks="", config_code=1)
        context = GitContext(search_path=str(bin_dir))

        assert context.get_gistore_tasks() == {}

    def test_echec_execution(self, bin_dir):
        """Une CommandError de l'exécuteur donne un dict vide."""
        install_git(bin_dir)
        runner = MagicMock(spec=ProcessRunner)
        runner.shellout.side_effect = CommandExceptionError("échec")
        context = GitContext(runner=runner, search_path=str(bin_dir))

        assert context.get_gistore_tasks() == {}

    def test_lignes_ignorees(self, bin_dir):
        """Les lignes qui ne sont pas des tâches sont ignorées."""
        install_git(
            bin_dir, tasks="gistore.task.a /a\\nbruit\\ngistore.task.b\\n"
        )
        context = GitContext(search_path=str(bin_dir))

        assert context.get_gistore_tasks() == {"a": "/a"}


class TestIsGitRepo:
    """Tests de la détection d'un dépôt nu."""

    def test_depot_nu(self, tmp_path):
        """objects, refs et config suffisent."""
        (tmp_path / "objects").mkdir()
        (tmp_path / "refs").mkdir()
        (tmp_path / "config").write_text("")

        assert GitContext.is_git_repo(tmp_path)
        assert GitContext.is_git_repo(str(tmp_path))

    def test_repertoire_incomplet(self, tmp_path):
        """Un répertoire sans config n'est pas un dépôt."""
        (tmp_path / "objects").mkdir()
        (tmp_path / "refs").mkdir()

        assert not GitContext.is_git_repo(tmp_path)

    def test_chemin_inexistant(self, tmp_path):
        assert not GitContext.is_git_repo(tmp_path / "absent")


class TestFromSettings:
    """Tests de la construction depuis les réglages."""

    def test_reglages_par_defaut(self, bin_dir):
        """Sans fichier de log, un TtyLogger est utilisé."""
        settings = GistoreSettings(search_path=str(bin_dir))

        context = GitContext.from_settings(settings)

        assert isinstance(context.runner._logger, TtyLogger)
        assert isinstance(context.runner.translator.redactor,
                          IdentityRedactor)
        assert context.test_git_config is False

    def test_fichier_de_log_et_expurgation(self, bin_dir, tmp_path):
        """log_file et redact_credentials câblent le contexte."""
        settings = GistoreSettings(
            search_path=str(bin_dir),
            git_test_config=True,
            log_file=str(tmp_path / "gistore.log"),
            redact_credentials=True,
        )

        context = GitContext.from_settings(settings)
        logger = context.runner._logger
        try:
            assert isinstance(logger, FileLogger)
            assert isinstance(context.runner.translator.redactor,
                              UrlCredentialRedactor)
            assert context.test_git_config is True
        finally:
            logger.close()

    def test_logger_explicite(self, bin_dir):
        """Un logger fourni est utilisé tel quel."""
        logger = MagicMock()
        settings = GistoreSettings(search_path=str(bin_dir))

        context = GitContext.from_settings(settings, logger=logger)

        assert context.runner._logger is logger

    def test_git_localise_via_les_reglages(self, bin_dir):
        """search_path des réglages sert à trouver git."""
        git = install_git(bin_dir)
        context = GitContext.from_settings(
            GistoreSettings(search_path=str(bin_dir)), logger=MagicMock()
        )

        assert context.git_cmd == str(git)
