"""
Tests pour SQLModelUserRepository.
"""

from sqlmodel import Session

from dvdshelf.core.entities.user import User
from dvdshelf.infrastructure.persistence.repositories import SQLModelUserRepository


class TestSQLModelUserRepository:
    """Tests pour SQLModelUserRepository."""

    def test_get_unknown_returns_none(self, db_session: Session):
        assert SQLModelUserRepository(db_session).get_by_id("nobody") is None

    def test_upsert_creates_user(self, db_session: Session):
        repository = SQLModelUserRepository(db_session)

        user = repository.upsert(
            User(id="u1", email="ada@example.com", first_name="Ada", last_name="Lovelace")
        )

        assert user.created_at is not None
        assert repository.get_by_id("u1").display_name == "Ada Lovelace"

    def test_upsert_updates_identity_fields(self, db_session: Session):
        repository = SQLModelUserRepository(db_session)
        created = repository.upsert(User(id="u1", email="old@example.com"))

        updated = repository.upsert(
            User(id="u1", email="new@example.com", profile_image_url="https://example.com/a.png")
        )

        assert updated.email == "new@example.com"
        assert updated.profile_image_url == "https://example.com/a.png"
        assert updated.created_at == created.created_at
