"""
Implémentation SQLModel du repository User.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Session

from dvdshelf.core.entities.user import User
from dvdshelf.core.ports.repositories import IUserRepository
from dvdshelf.infrastructure.persistence.models import UserModel


class SQLModelUserRepository(IUserRepository):
    """Repository SQLModel pour les utilisateurs."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            profile_image_url=model.profile_image_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Récupère un utilisateur par son ID."""
        model = self._session.get(UserModel, user_id)
        if model:
            return self._to_entity(model)
        return None

    def upsert(self, user: User) -> User:
        """Crée l'utilisateur ou met à jour ses champs d'identité."""
        model = self._session.get(UserModel, user.id)
        if model is None:
            model = UserModel(id=user.id)
        else:
            model.updated_at = datetime.now(timezone.utc)

        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.profile_image_url = user.profile_image_url

        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)
