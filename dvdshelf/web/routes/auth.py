"""
Route d'identité de l'utilisateur courant.
"""

from fastapi import APIRouter, Depends

from ...core.entities.user import User
from ..deps import get_current_user
from ..schemas import UserOut

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/user", response_model=UserOut)
def current_user(user: User = Depends(get_current_user)):
    return UserOut.from_entity(user)
