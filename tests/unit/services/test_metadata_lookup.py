"""
Tests unitaires pour MetadataLookupService.

Le client OMDB est remplace par un AsyncMock respectant IMovieLookupClient.
"""

from unittest.mock import AsyncMock, PropertyMock

import pytest

from dvdshelf.core.exceptions import (
    DvdValidationError,
    InvalidApiKeyError,
    MovieNotFoundError,
)
from dvdshelf.core.ports.api_clients import IMovieLookupClient, MovieData, SearchResult
from dvdshelf.services.metadata_lookup import MetadataLookupService, is_scanned_code

MATRIX = MovieData(
    title="The Matrix",
    year=1999,
    genre="Action, Sci-Fi",
    director="Lana Wachowski, Lilly Wachowski",
    poster_url="https://example.com/matrix.jpg",
    imdb_id="tt0133093",
)


@pytest.fixture
def mock_client() -> AsyncMock:
    client = AsyncMock(spec=IMovieLookupClient)
    type(client).source = PropertyMock(return_value="omdb")
    return client


@pytest.fixture
def service(mock_client: AsyncMock) -> MetadataLookupService:
    return MetadataLookupService(client=mock_client)


class TestIsScannedCode:
    """Tests pour is_scanned_code."""

    @pytest.mark.parametrize("term", ["5051889004455", "0123"])
    def test_digits_only(self, term):
        assert is_scanned_code(term)

    @pytest.mark.parametrize("term", ["Inception", "2001: A Space Odyssey", "12 Monkeys"])
    def test_titles(self, term):
        assert not is_scanned_code(term)


class TestLookup:
    """Tests pour MetadataLookupService."""

    @pytest.mark.asyncio
    async def test_title_uses_direct_lookup(self, service, mock_client):
        mock_client.get_by_title.return_value = MATRIX

        movie = await service.lookup(title="The Matrix")

        assert movie == MATRIX
        mock_client.get_by_title.assert_awaited_once_with("The Matrix")
        mock_client.search.assert_not_called()
        mock_client.get_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_numeric_code_searches_then_fetches_first_candidate(
        self, service, mock_client
    ):
        mock_client.search.return_value = [
            SearchResult(id="tt0133093", title="The Matrix", year=1999, source="omdb"),
            SearchResult(id="tt0234215", title="The Matrix Reloaded", year=2003, source="omdb"),
        ]
        mock_client.get_details.return_value = MATRIX

        movie = await service.lookup(barcode="5051889004455")

        assert movie == MATRIX
        mock_client.search.assert_awaited_once_with("5051889004455")
        mock_client.get_details.assert_awaited_once_with("tt0133093")
        mock_client.get_by_title.assert_not_called()

    @pytest.mark.asyncio
    async def test_numeric_title_is_treated_as_code(self, service, mock_client):
        mock_client.search.return_value = []

        with pytest.raises(MovieNotFoundError):
            await service.lookup(title="5051889004455")

        mock_client.get_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_title_has_priority_over_barcode(self, service, mock_client):
        mock_client.get_by_title.return_value = MATRIX

        await service.lookup(title="The Matrix", barcode="5051889004455")

        mock_client.get_by_title.assert_awaited_once_with("The Matrix")
        mock_client.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_match_raises_not_found(self, service, mock_client):
        mock_client.get_by_title.return_value = None

        with pytest.raises(MovieNotFoundError) as exc_info:
            await service.lookup(title="Nothing Like This")

        assert exc_info.value.term == "Nothing Like This"

    @pytest.mark.asyncio
    async def test_missing_term_is_a_validation_error(self, service, mock_client):
        with pytest.raises(DvdValidationError):
            await service.lookup(title="   ")
        with pytest.raises(DvdValidationError):
            await service.lookup()
        mock_client.get_by_title.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_key_propagates(self, service, mock_client):
        mock_client.get_by_title.side_effect = InvalidApiKeyError("Invalid API key!")

        with pytest.raises(InvalidApiKeyError):
            await service.lookup(title="Inception")
