"""
Schémas de validation des données DVD entrantes (pydantic).

- DvdCreate : schéma complet pour la creation (id, propriétaire et date exclus)
- DvdUpdate : schéma partiel pour la modification ; seuls les champs
  effectivement fournis sont appliques
- error_messages : conversion des erreurs pydantic en messages par champ

Les noms de champs sont acceptes en camelCase (posterUrl) comme en snake_case.
Les chaines optionnelles vides ("") envoyees par les formulaires valent None.
"""

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from dvdshelf.core.entities.dvd import DvdPatch, DvdStatus
from dvdshelf.core.exceptions import DvdValidationError
from dvdshelf.core.value_objects.filters import MIN_YEAR, max_year

_OPTIONAL_TEXT = ("genre", "director", "poster_url", "barcode")


class _DvdFields(BaseModel):
    """Regles communes aux schémas de creation et de modification."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    @field_validator("year", mode="before", check_fields=False)
    @classmethod
    def year_must_be_integer(cls, v: Any) -> Any:
        if v == "":
            return None
        if isinstance(v, bool) or isinstance(v, float):
            raise ValueError("Year must be an integer")
        return v

    @field_validator("year", mode="after", check_fields=False)
    @classmethod
    def year_in_range(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not MIN_YEAR <= v <= max_year():
            raise ValueError(f"Year must be between {MIN_YEAR} and {max_year()}")
        return v

    @field_validator(*_OPTIONAL_TEXT, mode="before", check_fields=False)
    @classmethod
    def blank_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class DvdCreate(_DvdFields):
    """Donnees requises pour creer un DVD."""

    title: str = Field(min_length=1)
    year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    status: DvdStatus
    poster_url: Optional[str] = None
    barcode: Optional[str] = None


class DvdUpdate(_DvdFields):
    """Donnees partielles pour modifier un DVD."""

    title: Optional[str] = Field(default=None, min_length=1)
    year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    status: Optional[DvdStatus] = None
    poster_url: Optional[str] = None
    barcode: Optional[str] = None

    @field_validator("title", "status")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        # Execute uniquement si le champ est fourni explicitement
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    def to_patch(self) -> DvdPatch:
        """Construit un DvdPatch à partir des seuls champs fournis."""
        return DvdPatch(**{name: getattr(self, name) for name in self.model_fields_set})


def error_messages(exc: ValidationError) -> dict[str, list[str]]:
    """
    Regroupe les erreurs pydantic par champ.

    Returns:
        Dictionnaire {champ: [messages]} ; "body" pour les erreurs globales
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        key = str(loc[0]) if loc else "body"
        message = error.get("msg", "Invalid value")
        errors.setdefault(key, []).append(message.removeprefix("Value error, "))
    return errors


def validate_create(payload: Any) -> DvdCreate:
    """Valide un payload de creation, lève DvdValidationError sinon."""
    if not isinstance(payload, Mapping):
        raise DvdValidationError({"body": ["Expected a JSON object"]})
    try:
        return DvdCreate.model_validate(dict(payload))
    except ValidationError as e:
        raise DvdValidationError(error_messages(e)) from e


def validate_update(payload: Any) -> DvdUpdate:
    """Valide un payload de modification partielle, lève DvdValidationError sinon."""
    if not isinstance(payload, Mapping):
        raise DvdValidationError({"body": ["Expected a JSON object"]})
    try:
        return DvdUpdate.model_validate(dict(payload))
    except ValidationError as e:
        raise DvdValidationError(error_messages(e)) from e
