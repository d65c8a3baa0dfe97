"""
Client OMDB pour la recherche de métadonnées films.

Implémente l'interface IMovieLookupClient pour OMDB (Open Movie Database).
Les réponses OMDB sont converties au format des fiches DVD (MovieData).

Trois categories d'échec sont distinguees :
- aucune correspondance : None / liste vide
- clé API absente ou refusée : InvalidApiKeyError
- transport, HTTP inattendu, JSON invalide : MetadataLookupError

Aucun retry : un échec est remonte immediatement.

Usage:
    client = OMDBClient(api_key="your_key")
    movie = await client.get_by_title("Inception")
    results = await client.search("Matrix")
    details = await client.get_details(results[0].id)
    await client.close()
"""

import re
from typing import Any, Optional

import httpx
from loguru import logger

from dvdshelf.core.exceptions import InvalidApiKeyError, MetadataLookupError
from dvdshelf.core.ports.api_clients import IMovieLookupClient, MovieData, SearchResult

# Valeur OMDB pour "information non disponible"
NOT_AVAILABLE = "N/A"

# Messages d'erreur OMDB signifiant "aucune correspondance"
_NO_MATCH_ERRORS = ("not found", "incorrect imdb id", "too many results")

_YEAR_PATTERN = re.compile(r"\d{4}")


def _clean(value: Any) -> Optional[str]:
    """Retourne None pour les valeurs absentes, vides ou "N/A"."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value or value == NOT_AVAILABLE:
        return None
    return value


def parse_year(value: Any) -> Optional[int]:
    """Extrait l'année ("2010" -> 2010, "2010–2014" -> 2010, "N/A" -> None)."""
    text = _clean(value)
    if text is None:
        return None
    match = _YEAR_PATTERN.search(text)
    return int(match.group()) if match else None


class OMDBClient(IMovieLookupClient):
    """
    Client API OMDB.

    Implémente IMovieLookupClient avec:
    - Recherche directe par titre (?t=)
    - Recherche large par terme (?s=)
    - Recuperation de la fiche complete par ID IMDb (?i=)

    Attributes:
        OMDB_BASE_URL: URL de base de l'API OMDB
    """

    OMDB_BASE_URL = "https://www.omdbapi.com/"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = OMDB_BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialise le client OMDB.

        Args:
            api_key: Clé API OMDB (None si non configuree)
            base_url: URL de base de l'API
            timeout: Delai maximum par requête en secondes
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                params={"apikey": self._api_key},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "omdb"

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def _request(self, params: dict[str, str]) -> Optional[dict[str, Any]]:
        """
        Execute une requête OMDB et classe la réponse.

        Returns:
            Le payload JSON, ou None si OMDB ne trouve aucune correspondance

        Raises:
            InvalidApiKeyError: Clé absente ou refusée
            MetadataLookupError: Erreur transport, HTTP ou JSON
        """
        if not self._api_key:
            raise InvalidApiKeyError("OMDB API key is not configured")

        logger.debug("Requete OMDB", params=params)
        try:
            response = await self._get_client().get("/", params=params)
        except httpx.HTTPError as e:
            logger.warning("Echec transport OMDB", error=str(e))
            raise MetadataLookupError(f"OMDB request failed: {e}") from e

        if response.status_code == 401:
            raise InvalidApiKeyError(self._error_text(response))
        if response.status_code >= 400:
            logger.warning("Reponse OMDB inattendue", status=response.status_code)
            raise MetadataLookupError(f"OMDB returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise MetadataLookupError("OMDB returned an invalid JSON body") from e
        if not isinstance(data, dict):
            raise MetadataLookupError("OMDB returned an unexpected payload")

        if str(data.get("Response", "True")).lower() == "false":
            error = str(data.get("Error", ""))
            lowered = error.lower()
            if "api key" in lowered:
                raise InvalidApiKeyError(error)
            if any(marker in lowered for marker in _NO_MATCH_ERRORS):
                logger.debug("Aucune correspondance OMDB", error=error)
                return None
            raise MetadataLookupError(f"OMDB error: {error or 'unknown'}")

        return data

    @staticmethod
    def _error_text(response: httpx.Response) -> Optional[str]:
        try:
            return response.json().get("Error")
        except (ValueError, AttributeError):
            return None

    @staticmethod
    def _to_movie_data(data: dict[str, Any]) -> MovieData:
        """Convertit une fiche OMDB en MovieData."""
        title = _clean(data.get("Title"))
        if title is None:
            raise MetadataLookupError("OMDB payload has no title")
        return MovieData(
            title=title,
            year=parse_year(data.get("Year")),
            genre=_clean(data.get("Genre")),
            director=_clean(data.get("Director")),
            poster_url=_clean(data.get("Poster")),
            imdb_id=_clean(data.get("imdbID")),
        )

    async def get_by_title(self, title: str) -> Optional[MovieData]:
        """Recherche directe d'un film par titre."""
        data = await self._request({"t": title})
        if data is None:
            return None
        return self._to_movie_data(data)

    async def search(self, term: str) -> list[SearchResult]:
        """Recherche large ; les entrees sans ID IMDb sont ignorees."""
        data = await self._request({"s": term})
        if data is None:
            return []

        results = []
        for item in data.get("Search") or []:
            imdb_id = _clean(item.get("imdbID"))
            if imdb_id is None:
                continue
            results.append(
                SearchResult(
                    id=imdb_id,
                    title=_clean(item.get("Title")) or "",
                    year=parse_year(item.get("Year")),
                    poster_url=_clean(item.get("Poster")),
                    source=self.source,
                )
            )
        return results

    async def get_details(self, media_id: str) -> Optional[MovieData]:
        """Récupère la fiche complete d'un film par ID IMDb."""
        data = await self._request({"i": media_id})
        if data is None:
            return None
        return self._to_movie_data(data)
