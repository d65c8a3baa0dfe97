"""
Dependances partagees de l'application web.

Fournit aux routes :
- le Container DI pose sur app.state au démarrage
- une session de base de données par requête
- l'utilisateur authentifie (identité transmise par en-tetes)
- les services construits avec le store de la requête
"""

from collections.abc import Generator

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from ..container import Container
from ..core.entities.user import User
from ..services.dvd_service import DvdService
from ..services.metadata_lookup import MetadataLookupService

# En-tetes optionnels transmis par le fournisseur d'identité
EMAIL_HEADER = "X-User-Email"
FIRST_NAME_HEADER = "X-User-First-Name"
LAST_NAME_HEADER = "X-User-Last-Name"
AVATAR_HEADER = "X-User-Avatar"


def get_container(request: Request) -> Container:
    """Retourne le Container initialisé par le lifespan."""
    return request.app.state.container


def get_db_session(
    container: Container = Depends(get_container),
) -> Generator[Session, None, None]:
    """Ouvre une session pour la duree de la requête."""
    session = container.session()
    try:
        yield session
    finally:
        session.close()


def _header(request: Request, name: str) -> str | None:
    value = request.headers.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_current_user(
    request: Request,
    container: Container = Depends(get_container),
    session: Session = Depends(get_db_session),
) -> User:
    """
    Resout l'utilisateur authentifie.

    L'utilisateur est crée ou mis à jour à la première authentification.

    Raises:
        HTTPException: 401 si l'identité est absente
    """
    user_id = _header(request, container.config().auth_header)
    if user_id is None:
        raise HTTPException(status_code=401, detail="Unauthorized")

    identity = User(
        id=user_id,
        email=_header(request, EMAIL_HEADER),
        first_name=_header(request, FIRST_NAME_HEADER),
        last_name=_header(request, LAST_NAME_HEADER),
        profile_image_url=_header(request, AVATAR_HEADER),
    )
    user_service = container.user_service(
        repository=container.user_repository(session=session)
    )
    return user_service.authenticate(identity)


def get_dvd_service(
    container: Container = Depends(get_container),
    session: Session = Depends(get_db_session),
) -> DvdService:
    """Construit le service DVD avec le store de la requête."""
    return container.dvd_service(repository=container.dvd_repository(session=session))


def get_lookup_service(
    container: Container = Depends(get_container),
) -> MetadataLookupService:
    return container.lookup_service()
