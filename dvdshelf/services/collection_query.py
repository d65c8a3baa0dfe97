"""
Moteur de filtrage et d'agrégation de la collection.

Fonctions pures opérant sur une collection de DVD en mémoire :
- Prédicats de recherche, statut, genres et années
- filter_collection : conjonction des quatre prédicats
- compute_stats : agrégats (compteurs, taux de completion, genres,
  réalisateurs, années)
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from dvdshelf.core.entities.dvd import Dvd, DvdStatus
from dvdshelf.core.value_objects.filters import FilterState, YearRange

# Nombre d'entrees dans les classements genres/réalisateurs
TOP_N = 5


def round_half_up(value: float) -> int:
    """Arrondi à l'entier le plus proche, les demis vers le haut (12.5 -> 13)."""
    return math.floor(value + 0.5)


def matches_search(dvd: Dvd, query: str) -> bool:
    """
    Vérifie si la requête est contenue dans le titre, le réalisateur ou le genre.

    Comparaison insensible à la casse. Une requête vide correspond a tout.
    """
    if not query:
        return True
    needle = query.lower()
    return any(
        value is not None and needle in value.lower()
        for value in (dvd.title, dvd.director, dvd.genre)
    )


def matches_status(dvd: Dvd, statuses: Iterable[DvdStatus]) -> bool:
    """Ensemble vide = tous les statuts."""
    selected = {DvdStatus(s) for s in statuses}
    return not selected or DvdStatus(dvd.status) in selected


def matches_genres(dvd: Dvd, genres: Iterable[str]) -> bool:
    """
    Ensemble vide = tous les genres.

    Sinon le champ genre (éventuellement plusieurs libellés joints)
    doit contenir au moins un des libellés sélectionnés.
    """
    selected = list(genres)
    if not selected:
        return True
    if not dvd.genre:
        return False
    return any(label in dvd.genre for label in selected)


def matches_year(dvd: Dvd, year_range: YearRange) -> bool:
    """Un DVD sans année correspond toujours."""
    if dvd.year is None:
        return True
    return year_range.contains(dvd.year)


def filter_collection(
    dvds: Iterable[Dvd],
    filters: FilterState,
    query: str = "",
) -> list[Dvd]:
    """
    Applique recherche, statut, genres et années (ET logique).

    L'ordre de la collection d'entree est préservé.

    Args:
        dvds: Collection a filtrer
        filters: État des filtres
        query: Texte de recherche libre

    Returns:
        Sous-ensemble correspondant a tous les prédicats
    """
    return [
        dvd
        for dvd in dvds
        if matches_search(dvd, query)
        and matches_status(dvd, filters.status)
        and matches_genres(dvd, filters.genres)
        and matches_year(dvd, filters.year_range)
    ]


@dataclass
class QueryResult:
    """Résultat d'un filtrage : DVD retenus et taille de la collection."""

    dvds: list[Dvd]
    total: int

    @property
    def matched(self) -> int:
        return len(self.dvds)


@dataclass
class CollectionStats:
    """Agrégats calculés sur une collection de DVD."""

    total: int = 0
    owned_count: int = 0
    wishlist_count: int = 0
    completion_rate: int = 0
    genre_counts: dict[str, int] = field(default_factory=dict)
    director_counts: dict[str, int] = field(default_factory=dict)
    oldest_year: Optional[int] = None
    newest_year: Optional[int] = None
    average_year: Optional[int] = None
    top_genres: list[tuple[str, int]] = field(default_factory=list)
    top_directors: list[tuple[str, int]] = field(default_factory=list)


def top_counts(counts: dict[str, int], limit: int = TOP_N) -> list[tuple[str, int]]:
    """
    Classement par nombre décroissant.

    Le tri est stable : a égalité, l'ordre de première apparition est conserve.
    """
    return sorted(counts.items(), key=lambda item: -item[1])[:limit]


def compute_stats(dvds: Sequence[Dvd]) -> CollectionStats:
    """
    Calcule les agrégats d'une collection.

    - completion_rate = arrondi(100 * possédés / total), 0 si vide
    - un genre multiple ("Action, Sci-Fi") compte pour chaque libellé
    - années min/max/moyenne calculées sur les DVD datés uniquement
    """
    total = len(dvds)
    owned = sum(1 for d in dvds if d.is_owned)
    wishlist = total - owned

    genre_counts: dict[str, int] = {}
    director_counts: dict[str, int] = {}
    for dvd in dvds:
        for label in dvd.genre_labels:
            genre_counts[label] = genre_counts.get(label, 0) + 1
        if dvd.director:
            director_counts[dvd.director] = director_counts.get(dvd.director, 0) + 1

    years = [d.year for d in dvds if d.year is not None]

    return CollectionStats(
        total=total,
        owned_count=owned,
        wishlist_count=wishlist,
        completion_rate=round_half_up(100 * owned / total) if total else 0,
        genre_counts=genre_counts,
        director_counts=director_counts,
        oldest_year=min(years) if years else None,
        newest_year=max(years) if years else None,
        average_year=round_half_up(sum(years) / len(years)) if years else None,
        top_genres=top_counts(genre_counts),
        top_directors=top_counts(director_counts),
    )
