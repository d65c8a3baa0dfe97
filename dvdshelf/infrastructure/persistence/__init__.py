"""
Module de persistance pour DVDShelf.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de données
- repositories/ : Implementations des ports repository

Les modèles ici sont des adapters de persistance, distincts des entités de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from dvdshelf.infrastructure.persistence import create_db_engine, init_db

    engine = init_db(create_db_engine("sqlite:///data/dvdshelf.db"))
"""

from dvdshelf.infrastructure.persistence.database import (
    create_db_engine,
    get_session,
    init_db,
)
from dvdshelf.infrastructure.persistence.models import DvdModel, UserModel

__all__ = [
    "create_db_engine",
    "get_session",
    "init_db",
    "DvdModel",
    "UserModel",
]
