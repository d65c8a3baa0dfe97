"""
Tests pour l'entite User.
"""

from dvdshelf.core.entities.user import User


class TestDisplayName:
    """Tests pour User.display_name."""

    def test_full_name(self):
        user = User(id="u1", first_name="Ada", last_name="Lovelace", email="ada@example.com")
        assert user.display_name == "Ada Lovelace"

    def test_first_name_only(self):
        assert User(id="u1", first_name="Ada").display_name == "Ada"

    def test_falls_back_to_email(self):
        assert User(id="u1", email="ada@example.com").display_name == "ada@example.com"

    def test_falls_back_to_id(self):
        assert User(id="u1").display_name == "u1"


class TestSameIdentity:
    """Tests pour User.same_identity."""

    def test_ignores_dates(self):
        from datetime import datetime, timezone

        stored = User(id="u1", email="a@b.c", created_at=datetime.now(timezone.utc))
        assert stored.same_identity(User(id="u1", email="a@b.c"))

    def test_detects_changed_field(self):
        stored = User(id="u1", email="a@b.c", first_name="Ada")
        assert not stored.same_identity(User(id="u1", email="a@b.c", first_name="Grace"))
