"""
Service de recherche de métadonnées pour pre-remplir une fiche DVD.

Un terme purement numerique est considere comme un code-barres scanné :
recherche large, puis fiche complete du premier candidat.
Tout autre terme donne lieu à une recherche directe par titre.
"""

from typing import Optional

from loguru import logger

from dvdshelf.core.exceptions import DvdValidationError, MovieNotFoundError
from dvdshelf.core.ports.api_clients import IMovieLookupClient, MovieData


def is_scanned_code(term: str) -> bool:
    """Un code scanné ne contient que des chiffres."""
    return term.isdigit()


class MetadataLookupService:
    """
    Service de recherche de métadonnées de films.

    Example:
        service = MetadataLookupService(client=OMDBClient(api_key="xxx"))
        movie = await service.lookup(title="Inception")
        movie = await service.lookup(barcode="5051889004455")
    """

    def __init__(self, client: IMovieLookupClient) -> None:
        self._client = client

    async def lookup(
        self,
        title: Optional[str] = None,
        barcode: Optional[str] = None,
    ) -> MovieData:
        """
        Recherche un film par titre ou par code scanné.

        Le titre est prioritaire sur le code-barres.

        Raises:
            DvdValidationError: Si ni titre ni code-barres ne sont fournis
            MovieNotFoundError: Si la source ne trouve aucune correspondance
            InvalidApiKeyError: Si la clé API est absente ou refusée
            MetadataLookupError: Pour tout autre échec
        """
        term = (title or barcode or "").strip()
        if not term:
            raise DvdValidationError({"title": ["Title or barcode required"]})

        if is_scanned_code(term):
            movie = await self._lookup_code(term)
        else:
            movie = await self._client.get_by_title(term)

        if movie is None:
            raise MovieNotFoundError(term)

        logger.info("Film trouve", term=term, title=movie.title, source=self._client.source)
        return movie

    async def _lookup_code(self, code: str) -> Optional[MovieData]:
        """Recherche large puis fiche complete du premier candidat."""
        candidates = await self._client.search(code)
        if not candidates:
            return None
        logger.debug("Candidats pour code scanne", code=code, count=len(candidates))
        return await self._client.get_details(candidates[0].id)
