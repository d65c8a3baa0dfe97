"""
Service des utilisateurs.

Enregistre l'identité transmise par le fournisseur d'authentification :
creation à la première connexion, mise à jour si les champs ont change.
"""

from loguru import logger

from dvdshelf.core.entities.user import User
from dvdshelf.core.ports.repositories import IUserRepository


class UserService:
    """Service de gestion des utilisateurs authentifies."""

    def __init__(self, repository: IUserRepository) -> None:
        self._repository = repository

    def authenticate(self, identity: User) -> User:
        """
        Retourne l'utilisateur correspondant à l'identité, crée ou mis à jour.

        Aucune ecriture n'a lieu si l'utilisateur existe avec la même identité.
        """
        existing = self._repository.get_by_id(identity.id)
        if existing is not None and existing.same_identity(identity):
            return existing

        user = self._repository.upsert(identity)
        if existing is None:
            logger.info("Nouvel utilisateur", user_id=user.id)
        else:
            logger.debug("Utilisateur mis a jour", user_id=user.id)
        return user
