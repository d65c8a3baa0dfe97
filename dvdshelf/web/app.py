"""
Application FastAPI de DVDShelf.

Initialise l'application web avec le Container DI, monte les routes
de l'API et traduit les exceptions du domaine en réponses JSON.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..container import Container
from ..core.exceptions import (
    DvdNotFoundError,
    DvdValidationError,
    InvalidApiKeyError,
    MetadataLookupError,
    MovieNotFoundError,
)
from ..logging_config import configure_logging
from .routes.auth import router as auth_router
from .routes.collection import router as collection_router
from .routes.dvds import router as dvds_router
from .routes.lookup import router as lookup_router

# Préfixes de localisation pydantic a ignorer dans les erreurs par champ
_LOCATION_PREFIXES = ("body", "query", "path", "header")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et ferme le client OMDB à l'arrêt."""
    container: Optional[Container] = getattr(app.state, "container", None)
    if container is None:
        container = Container()
        configure_logging(container.config())
        app.state.container = container

    container.database.init()
    logger.info("DVDShelf démarré", version=__version__)
    yield
    await container.omdb_client().close()
    container.database.shutdown()


def _field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Regroupe les erreurs de validation FastAPI par champ."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = str(loc[0]) if loc else "body"
        message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
        errors.setdefault(field, []).append(message)
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Associe chaque exception du domaine à un code HTTP."""

    @app.exception_handler(DvdValidationError)
    async def validation_error_handler(request: Request, exc: DvdValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid DVD data", "errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request", "errors": _field_errors(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(DvdNotFoundError)
    async def dvd_not_found_handler(request: Request, exc: DvdNotFoundError):
        return JSONResponse(status_code=404, content={"message": "DVD not found"})

    @app.exception_handler(MovieNotFoundError)
    async def movie_not_found_handler(request: Request, exc: MovieNotFoundError):
        return JSONResponse(status_code=404, content={"message": "Movie not found"})

    @app.exception_handler(InvalidApiKeyError)
    async def invalid_key_handler(request: Request, exc: InvalidApiKeyError):
        logger.warning("Cle OMDB refusee ou absente", detail=exc.detail)
        return JSONResponse(
            status_code=401,
            content={
                "error": "API_KEY_INVALID",
                "message": "OMDB API key is missing or invalid",
            },
        )

    @app.exception_handler(MetadataLookupError)
    async def lookup_error_handler(request: Request, exc: MetadataLookupError):
        logger.error("Echec de la recherche de metadonnees", error=str(exc))
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to lookup movie data"},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Erreur inattendue", path=request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application FastAPI.

    Args:
        container: Container DI à utiliser (les tests injectent le leur) ;
            par défaut un Container est crée au démarrage
    """
    app = FastAPI(title="DVDShelf", version=__version__, lifespan=lifespan)
    if container is not None:
        app.state.container = container

    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router)
    app.include_router(dvds_router)
    app.include_router(collection_router)
    app.include_router(lookup_router)

    @app.get("/api/health", tags=["health"])
    def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
