"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le store est construit explicitement et injecte dans les services
(aucune instance globale).
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .adapters.api.omdb_client import OMDBClient
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelDvdRepository,
    SQLModelUserRepository,
)
from .services.dvd_service import DvdService
from .services.metadata_lookup import MetadataLookupService
from .services.user_service import UserService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Crée les tables une fois
        session = container.session()
        service = container.dvd_service(repository=container.dvd_repository(session=session))

    Les tests remplacent la configuration via :
        container.config.override(providers.Object(Settings(database_url="sqlite://")))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine - partage par toutes les sessions
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )

    # Database - Resource pour initialisation unique des tables
    database = providers.Resource(init_db, engine=engine)

    # Session - nouvelle session à chaque appel, fermée par l'appelant
    session = providers.Factory(Session, engine)

    # Repositories - Factory pour nouvelle instance avec session fraiche
    dvd_repository = providers.Factory(SQLModelDvdRepository, session=session)
    user_repository = providers.Factory(SQLModelUserRepository, session=session)

    # Services - Factory car dependent des repositories (sessions fraiches)
    dvd_service = providers.Factory(DvdService, repository=dvd_repository)
    user_service = providers.Factory(UserService, repository=user_repository)

    # Client OMDB - Singleton (client HTTP reutilise)
    # Si omdb_api_key est None, le client est crée mais chaque requête
    # lève InvalidApiKeyError sans appel réseau
    omdb_client = providers.Singleton(
        OMDBClient,
        api_key=config.provided.omdb_api_key,
        base_url=config.provided.omdb_base_url,
        timeout=config.provided.omdb_timeout,
    )

    lookup_service = providers.Factory(MetadataLookupService, client=omdb_client)
