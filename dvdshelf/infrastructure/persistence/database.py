"""
Configuration de la base de données pour DVDShelf.

Ce module fournit :
- Création de l'engine (SQLite par défaut, toute URL SQLAlchemy acceptée)
- Fonction lower() Unicode enregistrée sur chaque connexion SQLite
- Session factory avec context manager
- Fonction d'initialisation des tables

L'engine est construit explicitement et injecté par le Container ;
aucun engine global n'est conservé dans ce module.
La base de données est configurée via DVDSHELF_DATABASE_URL (défaut : sqlite:///data/dvdshelf.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Crée l'engine SQLAlchemy pour l'URL donnée.

    Pour SQLite fichier, le répertoire parent est créé si nécessaire.
    Pour tout engine SQLite, lower() est remplacée à chaque connexion par
    une version Unicode, identique à str.lower.
    Pour SQLite en mémoire, une StaticPool partage l'unique connexion
    entre les threads (sinon chaque connexion verrait une base vide).

    Args:
        database_url: URL SQLAlchemy de la base
        echo: Active le log SQL de SQLAlchemy

    Returns:
        Engine configuré
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    if database_url in _MEMORY_URLS:
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_path = Path(database_url.replace("sqlite:///", "", 1))
        db_path.parent.mkdir(exist_ok=True, parents=True)
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    event.listen(engine, "connect", _register_unicode_lower)
    return engine


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if isinstance(value, str) else value


def _register_unicode_lower(dbapi_connection: Any, connection_record: Any) -> None:
    """
    Remplace lower() de SQLite par str.lower de Python.

    Le lower() natif de SQLite ne replie que l'ASCII : "AMÉLIE" resterait
    "amÉlie" et ne correspondrait jamais à la recherche "amélie".
    """
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def get_session(engine: Engine) -> Generator[Session, None, None]:
    """
    Générateur de session SQLModel.

    Utilisation comme dépendance FastAPI ou avec next() :
        session = next(get_session(engine))
        try:
            # opérations
        finally:
            session.close()

    Yields:
        Session SQLModel connectée à l'engine
    """
    with Session(engine) as session:
        yield session


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de données en créant toutes les tables.

    Importe les modèles pour enregistrer leurs métadonnées dans
    SQLModel.metadata, puis crée les tables si elles n'existent pas.

    Doit être appelée une fois au démarrage de l'application.
    """
    # Import des modèles pour enregistrer leurs métadonnées
    from dvdshelf.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisées", url=str(engine.url))
    return engine
