"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) definissant le contrat pour la base de données
de films externe utilisee pour pre-remplir les fiches DVD.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchResult:
    """
    Candidat retourne par une recherche large.

    Attributs :
        id : ID spécifique à l'API (ID IMDb pour OMDB)
        title : Titre du film
        year : Annee de sortie
        poster_url : URL de l'affiche
        source : Identifiant de la source API ("omdb")
    """

    id: str
    title: str
    year: Optional[int] = None
    poster_url: Optional[str] = None
    source: str = ""


@dataclass
class MovieData:
    """
    Métadonnées normalisees d'un film, au format des fiches DVD.

    Attributs :
        title : Titre du film
        year : Annee de sortie
        genre : Genres joints par ", " (ex: "Action, Sci-Fi")
        director : Realisateur(s)
        poster_url : URL de l'affiche, None si indisponible
        imdb_id : ID IMDb du film
    """

    title: str
    year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    poster_url: Optional[str] = None
    imdb_id: Optional[str] = None


class IMovieLookupClient(ABC):
    """
    Interface pour les bases de données de films externes.

    Les implementations levent InvalidApiKeyError quand la clé est refusée
    et MetadataLookupError pour tout autre échec (transport, parsing).
    """

    @abstractmethod
    async def get_by_title(self, title: str) -> Optional[MovieData]:
        """Recherche directe d'un film par titre. None si aucune correspondance."""
        ...

    @abstractmethod
    async def search(self, term: str) -> list[SearchResult]:
        """Recherche large par terme. Liste vide si aucune correspondance."""
        ...

    @abstractmethod
    async def get_details(self, media_id: str) -> Optional[MovieData]:
        """Récupère la fiche complete d'un candidat. None si non trouve."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'omdb')."""
        ...
