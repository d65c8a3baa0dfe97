"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- list: collection d'un proprietaire, recherche et filtres
- stats: agregats de la collection
- lookup: recherche OMDB et codes de sortie
- info / version
- options -v / -q et niveau de log console
"""

from collections.abc import Iterator
from unittest.mock import AsyncMock, PropertyMock, patch

import pytest
from dependency_injector import providers
from loguru import logger
from typer.testing import CliRunner

from dvdshelf.adapters.api.omdb_client import OMDBClient
from dvdshelf import main
from dvdshelf.adapters.cli.helpers import session_scope
from dvdshelf.config import Settings
from dvdshelf.container import Container
from dvdshelf.core.exceptions import InvalidApiKeyError, MetadataLookupError
from dvdshelf.core.ports.api_clients import MovieData
from dvdshelf.main import app

runner = CliRunner()

OWNER = "user-1"


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def cli_settings(test_settings: Settings) -> Iterator[Settings]:
    """Settings de test pour le container de main.py (logs dans tmp_path)."""
    main.container.config.override(providers.Object(test_settings))
    yield test_settings
    main.container.config.reset_override()
    logger.remove()


@pytest.fixture
def cli_container(container: Container) -> Iterator[Container]:
    """Patche Container dans helpers.py, ou build_container l'instancie."""
    container.database.init()
    with patch("dvdshelf.adapters.cli.helpers.Container", return_value=container):
        yield container


@pytest.fixture
def seeded(cli_container: Container) -> Container:
    """Container avec une petite collection pour OWNER et un autre proprietaire."""
    with session_scope(cli_container.engine()) as session:
        service = cli_container.dvd_service(
            repository=cli_container.dvd_repository(session=session)
        )
        service.create_dvd(
            {
                "title": "Inception",
                "year": 2010,
                "genre": "Action, Sci-Fi",
                "director": "Christopher Nolan",
                "status": "owned",
            },
            OWNER,
        )
        service.create_dvd(
            {"title": "Amelie", "year": 2001, "genre": "Comedy", "status": "wishlist"},
            OWNER,
        )
        service.create_dvd({"title": "Heat", "year": 1995, "status": "owned"}, "user-2")
    return cli_container


@pytest.fixture
def mock_omdb(cli_container: Container) -> Iterator[AsyncMock]:
    client = AsyncMock(spec=OMDBClient)
    type(client).source = PropertyMock(return_value="omdb")
    cli_container.omdb_client.override(providers.Object(client))
    yield client
    cli_container.omdb_client.reset_override()


# ============================================================================
# Tests list
# ============================================================================


class TestListCommand:
    """Tests pour la commande list."""

    def test_lists_owner_collection(self, seeded):
        result = runner.invoke(app, ["list", "--owner", OWNER])

        assert result.exit_code == 0
        assert "Inception" in result.output
        assert "Amelie" in result.output
        assert "Heat" not in result.output

    def test_search(self, seeded):
        result = runner.invoke(app, ["list", "-o", OWNER, "--search", "nolan"])

        assert result.exit_code == 0
        assert "Inception" in result.output
        assert "Amelie" not in result.output

    def test_status_filter(self, seeded):
        result = runner.invoke(app, ["list", "-o", OWNER, "--status", "wishlist"])

        assert result.exit_code == 0
        assert "Amelie" in result.output
        assert "Inception" not in result.output

    def test_status_labels(self, seeded):
        result = runner.invoke(app, ["list", "-o", OWNER, "--status", "wishlist"])

        assert "souhaité" in result.output
        assert "possédé" not in result.output

    def test_invalid_status_exits_1(self, seeded):
        result = runner.invoke(app, ["list", "-o", OWNER, "--status", "lent"])

        assert result.exit_code == 1
        assert "status" in result.output

    def test_empty_collection(self, cli_container):
        result = runner.invoke(app, ["list", "--owner", "nobody"])

        assert result.exit_code == 0
        assert "Aucun DVD" in result.output

    def test_owner_is_required(self, cli_container):
        result = runner.invoke(app, ["list"])
        assert result.exit_code != 0


# ============================================================================
# Tests stats
# ============================================================================


class TestStatsCommand:
    """Tests pour la commande stats."""

    def test_shows_aggregates(self, seeded):
        result = runner.invoke(app, ["stats", "--owner", OWNER])

        assert result.exit_code == 0
        assert "Completion" in result.output
        assert "50%" in result.output
        assert "Christopher Nolan" in result.output

    def test_empty_collection(self, cli_container):
        result = runner.invoke(app, ["stats", "--owner", "nobody"])

        assert result.exit_code == 0
        assert "Collection vide" in result.output


# ============================================================================
# Tests lookup
# ============================================================================


class TestLookupCommand:
    """Tests pour la commande lookup."""

    def test_prints_movie(self, mock_omdb):
        mock_omdb.get_by_title.return_value = MovieData(
            title="Inception",
            year=2010,
            genre="Action, Sci-Fi",
            director="Christopher Nolan",
            imdb_id="tt1375666",
        )

        result = runner.invoke(app, ["lookup", "Inception"])

        assert result.exit_code == 0
        assert "Inception" in result.output
        assert "Christopher Nolan" in result.output
        mock_omdb.close.assert_awaited_once()

    def test_not_found_exits_1(self, mock_omdb):
        mock_omdb.get_by_title.return_value = None

        result = runner.invoke(app, ["lookup", "Nothing"])

        assert result.exit_code == 1
        assert "Aucun film" in result.output

    def test_invalid_key_exits_1(self, mock_omdb):
        mock_omdb.get_by_title.side_effect = InvalidApiKeyError()

        result = runner.invoke(app, ["lookup", "Inception"])

        assert result.exit_code == 1
        assert "DVDSHELF_OMDB_API_KEY" in result.output

    def test_transport_failure_exits_1(self, mock_omdb):
        mock_omdb.get_by_title.side_effect = MetadataLookupError("timeout")

        result = runner.invoke(app, ["lookup", "Inception"])

        assert result.exit_code == 1
        assert "Echec" in result.output


# ============================================================================
# Tests info / version
# ============================================================================


class TestInfoAndVersion:
    """Tests pour les commandes info et version."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "DVDShelf v0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Base de données" in result.output
        assert "API OMDB" in result.output


# ============================================================================
# Tests verbosite
# ============================================================================


class TestVerbosityOptions:
    """Tests pour les options -v / -q du callback principal."""

    def test_info_logs_shown_by_default(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Configuration DVDShelf" in result.output

    def test_quiet_hides_info_logs(self):
        result = runner.invoke(app, ["-q", "info"])

        assert result.exit_code == 0
        assert "Configuration DVDShelf" not in result.output
        assert "Base de données" in result.output

    @pytest.mark.parametrize(
        "args,level",
        [
            ([], "INFO"),
            (["-v"], "DEBUG"),
            (["-vv"], "TRACE"),
            (["-q"], "ERROR"),
            (["-q", "-v"], "ERROR"),
        ],
    )
    def test_console_level(self, cli_settings, args, level):
        with patch("dvdshelf.main.configure_logging") as configure:
            result = runner.invoke(app, [*args, "version"])

        assert result.exit_code == 0
        configure.assert_called_once_with(cli_settings, level=level)
