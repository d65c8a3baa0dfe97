"""
Service CRUD des DVD.

Le DvdService centralise la validation des données et la restriction au
propriétaire avant de deleguer au repository injecte. Il est utilisé par
l'API web et par la CLI.

Responsabilites:
- Validation des payloads de creation et de modification partielle
- Lecture, creation, modification et suppression restreintes au propriétaire
- Liste avec recherche OU filtres (la recherche est prioritaire)
- Filtrage en mémoire et agrégats de la collection
"""

from typing import Any, Optional

from loguru import logger

from dvdshelf.core.entities.dvd import Dvd, DvdStatus
from dvdshelf.core.exceptions import DvdNotFoundError, DvdValidationError
from dvdshelf.core.ports.repositories import IDvdRepository
from dvdshelf.core.value_objects.filters import DvdFilter, FilterState
from dvdshelf.services.collection_query import (
    CollectionStats,
    QueryResult,
    compute_stats,
    filter_collection,
)
from dvdshelf.services.dvd_schemas import validate_create, validate_update


class DvdService:
    """
    Service CRUD pour les DVD d'un propriétaire.

    Example:
        service = DvdService(repository=SQLModelDvdRepository(session))

        dvd = service.create_dvd({"title": "Inception", "status": "owned"}, "user-1")
        service.update_dvd(dvd.id, {"year": 2010}, "user-1")
        service.delete_dvd(dvd.id, "user-1")
    """

    def __init__(self, repository: IDvdRepository) -> None:
        """
        Initialise le service.

        Args:
            repository: Store des DVD (SQL, mémoire, ou double de test)
        """
        self._repository = repository

    def list_dvds(
        self,
        owner_id: str,
        search: Optional[str] = None,
        status: Optional[str] = None,
        genre: Optional[str] = None,
        year: Optional[Any] = None,
    ) -> list[Dvd]:
        """
        Liste les DVD du propriétaire.

        Une recherche non vide est prioritaire sur les filtres. Sans recherche,
        les filtres presents sont combines ; sans filtre, tout est retourne.

        Raises:
            DvdValidationError: Si le statut ou l'année du filtre sont invalides
        """
        if search:
            return self._repository.search(search, owner_id)

        criteria = self._parse_filter(status, genre, year)
        if criteria.is_empty():
            return self._repository.list(owner_id)
        return self._repository.filter(criteria, owner_id)

    def get_dvd(self, dvd_id: int, owner_id: str) -> Dvd:
        """
        Récupère un DVD du propriétaire.

        Raises:
            DvdNotFoundError: Si absent ou appartenant à un autre utilisateur
        """
        dvd = self._repository.get(dvd_id, owner_id)
        if dvd is None:
            raise DvdNotFoundError(dvd_id)
        return dvd

    def create_dvd(self, payload: Any, owner_id: str) -> Dvd:
        """
        Valide et crée un DVD.

        Raises:
            DvdValidationError: Avec tous les champs en erreur
        """
        data = validate_create(payload)
        dvd = Dvd(
            title=data.title,
            year=data.year,
            genre=data.genre,
            director=data.director,
            status=data.status,
            poster_url=data.poster_url,
            barcode=data.barcode,
        )
        created = self._repository.insert(dvd, owner_id)
        logger.info("DVD cree", dvd_id=created.id, title=created.title, owner_id=owner_id)
        return created

    def update_dvd(self, dvd_id: int, payload: Any, owner_id: str) -> Dvd:
        """
        Applique une modification partielle.

        Les champs non fournis restent inchanges.

        Raises:
            DvdValidationError: Si un champ fourni est invalide
            DvdNotFoundError: Si le DVD n'existe pas pour ce propriétaire
        """
        patch = validate_update(payload).to_patch()
        updated = self._repository.update(dvd_id, patch, owner_id)
        if updated is None:
            raise DvdNotFoundError(dvd_id)
        logger.info(
            "DVD modifie",
            dvd_id=dvd_id,
            fields=sorted(patch.changes()),
            owner_id=owner_id,
        )
        return updated

    def delete_dvd(self, dvd_id: int, owner_id: str) -> None:
        """
        Supprime un DVD (suppression definitive).

        Raises:
            DvdNotFoundError: Si rien n'a ete supprime
        """
        if not self._repository.delete(dvd_id, owner_id):
            raise DvdNotFoundError(dvd_id)
        logger.info("DVD supprime", dvd_id=dvd_id, owner_id=owner_id)

    def query_collection(
        self,
        owner_id: str,
        filters: FilterState,
        query: str = "",
    ) -> QueryResult:
        """Applique le moteur de filtrage a toute la collection du propriétaire."""
        dvds = self._repository.list(owner_id)
        return QueryResult(dvds=filter_collection(dvds, filters, query), total=len(dvds))

    def collection_stats(self, owner_id: str) -> CollectionStats:
        """Calcule les agrégats de la collection du propriétaire."""
        return compute_stats(self._repository.list(owner_id))

    @staticmethod
    def _parse_filter(
        status: Optional[str],
        genre: Optional[str],
        year: Optional[Any],
    ) -> DvdFilter:
        """Convertit les paramètres bruts de requête en DvdFilter."""
        errors: dict[str, list[str]] = {}

        parsed_status: Optional[DvdStatus] = None
        if status:
            try:
                parsed_status = DvdStatus(status)
            except ValueError:
                errors["status"] = ["Status must be 'owned' or 'wishlist'"]

        parsed_year: Optional[int] = None
        if year not in (None, ""):
            try:
                parsed_year = int(year)
            except (TypeError, ValueError):
                errors["year"] = ["Year must be an integer"]

        if errors:
            raise DvdValidationError(errors)

        return DvdFilter(status=parsed_status, genre=genre or None, year=parsed_year)
