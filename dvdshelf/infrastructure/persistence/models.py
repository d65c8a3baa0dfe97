"""
Modeles SQLModel pour la base de données DVDShelf.

Ces modèles representent les tables de la base de données.
Ils sont distincts des entités de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- users: Utilisateurs créés à la première authentification
- dvds: DVD des collections, chacun rattache à un utilisateur
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(SQLModel, table=True):
    """
    Modele representant un utilisateur.

    L'ID est fourni par le fournisseur d'authentification.
    """

    __tablename__ = "users"

    id: str = Field(primary_key=True)
    email: str | None = Field(default=None, unique=True)
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    created_at: datetime | None = Field(default_factory=_utcnow)
    updated_at: datetime | None = Field(default_factory=_utcnow)


class DvdModel(SQLModel, table=True):
    """
    Modele representant un DVD d'une collection.

    status vaut "owned" ou "wishlist" ; genre peut contenir plusieurs
    libellés joints par ", " (ex: "Action, Sci-Fi").
    """

    __tablename__ = "dvds"

    id: int | None = Field(default=None, primary_key=True)
    owner_id: str = Field(foreign_key="users.id", index=True)
    title: str = Field(index=True)
    year: int | None = Field(default=None, index=True)
    genre: str | None = None
    director: str | None = None
    status: str = Field(index=True)
    poster_url: str | None = None
    barcode: str | None = None
    created_at: datetime | None = Field(default_factory=_utcnow)
