"""
Schémas JSON de l'API REST.

Les champs sont exposes en camelCase (ownerId, posterUrl, createdAt)
et acceptes en camelCase comme en snake_case.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from dvdshelf.core.entities.dvd import Dvd, DvdStatus
from dvdshelf.core.entities.user import User
from dvdshelf.core.ports.api_clients import MovieData
from dvdshelf.core.value_objects.filters import FilterState, YearRange
from dvdshelf.services.collection_query import CollectionStats


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DvdOut(CamelModel):
    id: int
    owner_id: str
    title: str
    year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    status: DvdStatus
    poster_url: Optional[str] = None
    barcode: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, dvd: Dvd) -> "DvdOut":
        return cls(
            id=dvd.id,
            owner_id=dvd.owner_id,
            title=dvd.title,
            year=dvd.year,
            genre=dvd.genre,
            director=dvd.director,
            status=dvd.status,
            poster_url=dvd.poster_url,
            barcode=dvd.barcode,
            created_at=dvd.created_at,
        )


class UserOut(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    display_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserOut":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_image_url=user.profile_image_url,
            display_name=user.display_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CollectionQueryIn(CamelModel):
    """Recherche libre et etat des filtres de la barre laterale."""

    query: str = ""
    status: list[DvdStatus] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    year_range: Optional[tuple[int, int]] = None

    @model_validator(mode="after")
    def check_year_range(self) -> "CollectionQueryIn":
        if self.year_range is not None and self.year_range[0] > self.year_range[1]:
            raise ValueError("yearRange minimum must not exceed maximum")
        return self

    def to_filter_state(self) -> FilterState:
        year_range = YearRange(*self.year_range) if self.year_range else YearRange()
        return FilterState(
            status=frozenset(self.status),
            genres=frozenset(self.genres),
            year_range=year_range,
        )


class CollectionQueryOut(CamelModel):
    dvds: list[DvdOut]
    matched: int
    total: int


class CountOut(BaseModel):
    name: str
    count: int


class StatsOut(CamelModel):
    total: int
    owned_count: int
    wishlist_count: int
    completion_rate: int
    genre_counts: dict[str, int]
    director_counts: dict[str, int]
    oldest_year: Optional[int] = None
    newest_year: Optional[int] = None
    average_year: Optional[int] = None
    top_genres: list[CountOut]
    top_directors: list[CountOut]

    @classmethod
    def from_stats(cls, stats: CollectionStats) -> "StatsOut":
        return cls(
            total=stats.total,
            owned_count=stats.owned_count,
            wishlist_count=stats.wishlist_count,
            completion_rate=stats.completion_rate,
            genre_counts=stats.genre_counts,
            director_counts=stats.director_counts,
            oldest_year=stats.oldest_year,
            newest_year=stats.newest_year,
            average_year=stats.average_year,
            top_genres=[CountOut(name=n, count=c) for n, c in stats.top_genres],
            top_directors=[CountOut(name=n, count=c) for n, c in stats.top_directors],
        )


class LookupIn(CamelModel):
    title: Optional[str] = None
    barcode: Optional[str] = None

    @field_validator("barcode", mode="before")
    @classmethod
    def barcode_as_text(cls, v: Any) -> Any:
        # Les scanners envoient parfois le code sous forme numerique
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class MovieDataOut(CamelModel):
    title: str
    year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    poster_url: Optional[str] = None
    imdb_id: Optional[str] = None

    @classmethod
    def from_movie(cls, movie: MovieData) -> "MovieDataOut":
        return cls(
            title=movie.title,
            year=movie.year,
            genre=movie.genre,
            director=movie.director,
            poster_url=movie.poster_url,
            imdb_id=movie.imdb_id,
        )
