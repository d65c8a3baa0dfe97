"""
Route de recherche de métadonnées de film (titre ou code scanné).
"""

from fastapi import APIRouter, Depends

from ...core.entities.user import User
from ...services.metadata_lookup import MetadataLookupService
from ..deps import get_current_user, get_lookup_service
from ..schemas import LookupIn, MovieDataOut

router = APIRouter(prefix="/api/lookup", tags=["lookup"])


@router.post("", response_model=MovieDataOut)
async def lookup_movie(
    body: LookupIn,
    user: User = Depends(get_current_user),
    service: MetadataLookupService = Depends(get_lookup_service),
):
    """
    Retourne les métadonnées du premier film correspondant.

    400 si ni titre ni code, 404 si aucun film, 401 API_KEY_INVALID
    si la clé du fournisseur est absente ou refusée.
    """
    movie = await service.lookup(title=body.title, barcode=body.barcode)
    return MovieDataOut.from_movie(movie)
