"""
Objets valeur pour le filtrage de la collection.

- DvdFilter : criteres de filtrage cote store (statut, genre, année exacte)
- YearRange : intervalle d'années inclusif
- FilterState : etat des filtres de la barre laterale (statuts, genres, années)
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from dvdshelf.core.entities.dvd import DvdStatus

# Bornes plausibles pour l'année d'un film
MIN_YEAR = 1900


def max_year() -> int:
    """Annee maximale acceptee : année courante + 1 (sorties annoncees)."""
    return date.today().year + 1


@dataclass(frozen=True)
class DvdFilter:
    """
    Criteres de filtrage appliques par le store.

    Les criteres absents (None) ne sont pas des contraintes.
    Les criteres presents sont combines en ET.

    Attributs:
        status: Statut exact
        genre: Sous-chaine recherchee dans le champ genre
        year: Annee exacte
    """

    status: Optional[DvdStatus] = None
    genre: Optional[str] = None
    year: Optional[int] = None

    def is_empty(self) -> bool:
        return self.status is None and not self.genre and self.year is None


@dataclass(frozen=True)
class YearRange:
    """Intervalle d'années inclusif [minimum, maximum]."""

    minimum: int = MIN_YEAR
    maximum: int = field(default_factory=max_year)

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"Intervalle d'annees invalide: {self.minimum} > {self.maximum}"
            )

    def contains(self, year: int) -> bool:
        return self.minimum <= year <= self.maximum


@dataclass(frozen=True)
class FilterState:
    """
    État des filtres de la collection.

    Un ensemble vide de statuts ou de genres signifie "tous".

    Attributs:
        status: Statuts sélectionnés
        genres: Libelles de genre sélectionnés
        year_range: Intervalle d'années inclusif
    """

    status: frozenset[DvdStatus] = frozenset()
    genres: frozenset[str] = frozenset()
    year_range: YearRange = field(default_factory=YearRange)
