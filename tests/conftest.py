"""
Fixtures pytest partagees pour les tests DVDShelf.

Ce module contient les fixtures communes utilisees dans les tests:
- Collections de DVD d'exemple
- Repository en memoire et session SQLite en memoire
- Container DI configure pour une base SQLite en memoire
"""

from collections.abc import Iterator

import pytest
from dependency_injector import providers
from sqlmodel import Session

from dvdshelf.config import Settings
from dvdshelf.container import Container
from dvdshelf.core.entities.dvd import Dvd, DvdStatus
from dvdshelf.infrastructure.persistence.database import create_db_engine, init_db
from dvdshelf.infrastructure.persistence.repositories import InMemoryDvdRepository

OWNER = "user-1"


@pytest.fixture
def sample_dvds() -> list[Dvd]:
    """Collection d'exemple (deux possedes, un souhaite, un sans annee)."""
    return [
        Dvd(
            id=1,
            owner_id=OWNER,
            title="Inception",
            year=2010,
            genre="Action, Sci-Fi",
            director="Christopher Nolan",
            status=DvdStatus.OWNED,
        ),
        Dvd(
            id=2,
            owner_id=OWNER,
            title="The Dark Knight",
            year=2008,
            genre="Action, Crime",
            director="Christopher Nolan",
            status=DvdStatus.OWNED,
        ),
        Dvd(
            id=3,
            owner_id=OWNER,
            title="Amelie",
            year=2001,
            genre="Comedy, Romance",
            director="Jean-Pierre Jeunet",
            status=DvdStatus.WISHLIST,
        ),
        Dvd(
            id=4,
            owner_id=OWNER,
            title="Unknown Bootleg",
            status=DvdStatus.WISHLIST,
        ),
    ]


@pytest.fixture
def memory_repository() -> InMemoryDvdRepository:
    return InMemoryDvdRepository()


@pytest.fixture
def db_session() -> Iterator[Session]:
    """Session sur une base SQLite en memoire, tables creees."""
    engine = init_db(create_db_engine("sqlite://"))
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings de test : base en memoire, logs dans tmp_path, sans cle OMDB."""
    return Settings(
        database_url="sqlite://",
        omdb_api_key=None,
        log_file=tmp_path / "logs" / "dvdshelf.log",
    )


@pytest.fixture
def container(test_settings: Settings) -> Iterator[Container]:
    """Container DI branche sur une base SQLite en memoire."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    yield container
    container.config.reset_override()
