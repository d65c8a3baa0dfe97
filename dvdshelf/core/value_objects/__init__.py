"""
Objets valeur immutables representant des concepts du domaine sans identité.

Exports :
- DvdFilter : Criteres de filtrage cote store
- FilterState : État des filtres de la collection (statuts, genres, années)
- YearRange : Intervalle d'années inclusif
- MIN_YEAR / max_year : Bornes plausibles pour l'année d'un film
"""

from dvdshelf.core.value_objects.filters import (
    MIN_YEAR,
    DvdFilter,
    FilterState,
    YearRange,
    max_year,
)

__all__ = [
    "MIN_YEAR",
    "DvdFilter",
    "FilterState",
    "YearRange",
    "max_year",
]
