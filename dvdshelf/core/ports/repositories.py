"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour la persistance des données.
Les implementations (adaptateurs) fournissent les mecanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).

Toutes les operations DVD sauf insert sont restreintes au propriétaire :
un DVD d'un autre utilisateur se comporte comme un DVD absent.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from dvdshelf.core.entities.dvd import Dvd, DvdPatch
from dvdshelf.core.entities.user import User
from dvdshelf.core.value_objects.filters import DvdFilter


class IDvdRepository(ABC):
    """
    Interface de stockage des DVD.

    Definit les operations pour persister et récupérer les entités Dvd
    d'un propriétaire donne.
    """

    @abstractmethod
    def get(self, dvd_id: int, owner_id: str) -> Optional[Dvd]:
        """Récupère un DVD par son ID, None si absent ou non possede."""
        ...

    @abstractmethod
    def list(self, owner_id: str) -> list[Dvd]:
        """Liste tous les DVD du propriétaire, dans l'ordre d'insertion."""
        ...

    @abstractmethod
    def insert(self, dvd: Dvd, owner_id: str) -> Dvd:
        """
        Insere un nouveau DVD pour le propriétaire.

        L'ID et la date de creation sont attribues par le store ;
        les valeurs éventuellement presentes dans dvd sont ignorees.
        """
        ...

    @abstractmethod
    def update(self, dvd_id: int, patch: DvdPatch, owner_id: str) -> Optional[Dvd]:
        """
        Applique une mise à jour partielle.

        Retourne le DVD mis à jour, ou None si absent/non possede (aucune creation).
        """
        ...

    @abstractmethod
    def delete(self, dvd_id: int, owner_id: str) -> bool:
        """Supprime un DVD. Retourne True si une ligne a ete supprimee."""
        ...

    @abstractmethod
    def search(self, text: str, owner_id: str) -> list[Dvd]:
        """
        Recherche insensible à la casse dans le titre, le réalisateur ou le genre.

        Un DVD correspond si AU MOINS un des champs contient le texte.
        """
        ...

    @abstractmethod
    def filter(self, criteria: DvdFilter, owner_id: str) -> list[Dvd]:
        """
        Filtre par statut (exact), genre (sous-chaine) et année (exacte).

        Les criteres presents sont combines en ET ; les criteres absents
        ne sont pas des contraintes.
        """
        ...


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs.
    """

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Récupère un utilisateur par son ID."""
        ...

    @abstractmethod
    def upsert(self, user: User) -> User:
        """Crée l'utilisateur ou met à jour ses champs d'identité."""
        ...
