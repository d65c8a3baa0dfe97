"""
Exceptions du domaine DVDShelf.

Chaque exception correspond à une catégorie d'erreur traduite en code HTTP
par l'application web :
- DvdValidationError : données invalides (400), avec messages par champ
- DvdNotFoundError : DVD absent ou appartenant à un autre utilisateur (404)
- MovieNotFoundError : aucune correspondance cote OMDB (404)
- InvalidApiKeyError : clé API OMDB refusée ou absente (401)
- MetadataLookupError : échec transport/parsing de la recherche (500)
"""

from typing import Optional


class DvdShelfError(Exception):
    """Exception de base de l'application."""


class DvdValidationError(DvdShelfError):
    """
    Exception levée quand des données ne respectent pas le schéma DVD.

    Attributes:
        errors: Messages d'erreur indexes par nom de champ
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        fields_list = ", ".join(sorted(errors))
        super().__init__(f"Invalid DVD data: {fields_list}")


class DvdNotFoundError(DvdShelfError):
    """Exception levée quand un DVD n'existe pas pour l'utilisateur courant."""

    def __init__(self, dvd_id: int) -> None:
        self.dvd_id = dvd_id
        super().__init__(f"DVD not found: {dvd_id}")


class MetadataLookupError(DvdShelfError):
    """Échec générique de la recherche de métadonnées (transport, parsing)."""


class MovieNotFoundError(MetadataLookupError):
    """Le service externe ne trouve aucun film pour le terme recherche."""

    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(f"Movie not found: {term}")


class InvalidApiKeyError(MetadataLookupError):
    """La clé API du service externe est absente ou refusée."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        super().__init__(detail or "Invalid API key")
