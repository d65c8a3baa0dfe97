"""
Entites DVD.

Un DVD appartient a exactement un utilisateur (owner_id) et porte un statut
"owned" (possede) ou "wishlist" (liste de souhaits).

DvdPatch represente une mise à jour partielle : chaque champ est optionnel
et la valeur sentinelle UNSET distingue "champ absent" de "champ remis a None".
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class DvdStatus(str, Enum):
    """Statut d'un DVD dans la collection."""

    OWNED = "owned"
    WISHLIST = "wishlist"


class _Unset:
    """Marqueur de champ non fourni dans un patch."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass
class Dvd:
    """
    DVD de la collection d'un utilisateur.

    Attributs :
        id : ID attribue par le store (None avant insertion)
        owner_id : ID de l'utilisateur propriétaire (immuable)
        title : Titre du film (obligatoire, non vide)
        year : Annee de sortie
        genre : Genre(s), éventuellement plusieurs libellés joints par ", "
        director : Realisateur
        status : owned ou wishlist
        poster_url : URL de l'affiche
        barcode : Code-barres scanné
        created_at : Date de creation attribuee par le store
    """

    title: str
    status: DvdStatus = DvdStatus.OWNED
    id: Optional[int] = None
    owner_id: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    poster_url: Optional[str] = None
    barcode: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def genre_labels(self) -> list[str]:
        """Retourne les libellés de genre (separes par ", ")."""
        if not self.genre:
            return []
        return [label for label in self.genre.split(", ") if label]

    @property
    def is_owned(self) -> bool:
        return self.status == DvdStatus.OWNED


@dataclass(frozen=True)
class DvdPatch:
    """
    Mise à jour partielle d'un DVD.

    Seuls les champs differents de UNSET sont appliques. id, owner_id et
    created_at ne font jamais partie d'un patch.
    """

    title: Any = UNSET
    year: Any = UNSET
    genre: Any = UNSET
    director: Any = UNSET
    status: Any = UNSET
    poster_url: Any = UNSET
    barcode: Any = UNSET

    def changes(self) -> dict[str, Any]:
        """Retourne les champs fournis sous forme de dictionnaire."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, dvd: Dvd) -> Dvd:
        """Retourne une copie du DVD avec les champs du patch fusionnes."""
        return replace(dvd, **self.changes())
