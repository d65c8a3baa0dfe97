"""
Routes de la vue collection : filtrage combine et statistiques.
"""

from fastapi import APIRouter, Depends

from ...core.entities.user import User
from ...services.dvd_service import DvdService
from ..deps import get_current_user, get_dvd_service
from ..schemas import CollectionQueryIn, CollectionQueryOut, DvdOut, StatsOut

router = APIRouter(prefix="/api/collection", tags=["collection"])


@router.post("/query", response_model=CollectionQueryOut)
def query_collection(
    body: CollectionQueryIn,
    user: User = Depends(get_current_user),
    service: DvdService = Depends(get_dvd_service),
):
    """Applique recherche libre, statuts, genres et intervalle d'années."""
    result = service.query_collection(user.id, body.to_filter_state(), body.query)
    return CollectionQueryOut(
        dvds=[DvdOut.from_entity(dvd) for dvd in result.dvds],
        matched=result.matched,
        total=result.total,
    )


@router.get("/stats", response_model=StatsOut)
def collection_stats(
    user: User = Depends(get_current_user),
    service: DvdService = Depends(get_dvd_service),
):
    return StatsOut.from_stats(service.collection_stats(user.id))
