"""
Routes REST des DVD.

Toutes les routes sont restreintes à l'utilisateur authentifie :
un DVD d'un autre utilisateur repond 404.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from ...core.entities.user import User
from ...services.dvd_service import DvdService
from ..deps import get_current_user, get_dvd_service
from ..schemas import DvdOut

router = APIRouter(prefix="/api/dvds", tags=["dvds"])


@router.get("", response_model=list[DvdOut])
def list_dvds(
    search: Optional[str] = Query(default=None),
    status: Optional[str] = Query(default=None),
    genre: Optional[str] = Query(default=None),
    year: Optional[str] = Query(default=None),
    user: User = Depends(get_current_user),
    service: DvdService = Depends(get_dvd_service),
):
    """Liste les DVD ; search est prioritaire sur status/genre/year."""
    dvds = service.list_dvds(
        user.id, search=search, status=status, genre=genre, year=year
    )
    return [DvdOut.from_entity(dvd) for dvd in dvds]


@router.get("/{dvd_id}", response_model=DvdOut)
def get_dvd(
    dvd_id: int,
    user: User = Depends(get_current_user),
    service: DvdService = Depends(get_dvd_service),
):
    return DvdOut.from_entity(service.get_dvd(dvd_id, user.id))


@router.post("", response_model=DvdOut, status_code=201)
def create_dvd(
    payload: Any = Body(...),
    user: User = Depends(get_current_user),
    service: DvdService = Depends(get_dvd_service),
):
    """Crée un DVD ; 400 avec les erreurs par champ si invalide."""
    return DvdOut.from_entity(service.create_dvd(payload, user.id))


@router.patch("/{dvd_id}", response_model=DvdOut)
def update_dvd(
    dvd_id: int,
    payload: Any = Body(...),
    user: User = Depends(get_current_user),
    service: DvdService = Depends(get_dvd_service),
):
    """Modification partielle : les champs absents restent inchanges."""
    return DvdOut.from_entity(service.update_dvd(dvd_id, payload, user.id))


@router.delete("/{dvd_id}", status_code=204)
def delete_dvd(
    dvd_id: int,
    user: User = Depends(get_current_user),
    service: DvdService = Depends(get_dvd_service),
):
    service.delete_dvd(dvd_id, user.id)
    return Response(status_code=204)
