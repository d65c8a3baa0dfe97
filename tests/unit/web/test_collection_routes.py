"""
Tests des routes /api/collection (filtrage combine et statistiques).
"""

from fastapi.testclient import TestClient

from tests.unit.web.api_helpers import AUTH, OTHER_AUTH, create


class TestCollectionQuery:
    """Tests pour la requete filtree de la collection."""

    def test_wishlist_in_year_range(self, client: TestClient):
        create(client, title="Owned 2015", year=2015, status="owned")
        create(client, title="Wished 2023", year=2023, status="wishlist")

        response = client.post(
            "/api/collection/query",
            json={"status": ["wishlist"], "yearRange": [2000, 2024]},
            headers=AUTH,
        )

        assert response.status_code == 200
        body = response.json()
        assert [d["title"] for d in body["dvds"]] == ["Wished 2023"]
        assert body["matched"] == 1
        assert body["total"] == 2

    def test_empty_body_matches_everything(self, client: TestClient):
        create(client, title="Inception", year=2010)
        create(client, title="Undated")

        body = client.post("/api/collection/query", json={}, headers=AUTH).json()

        assert body["matched"] == body["total"] == 2

    def test_query_and_genres(self, client: TestClient):
        create(client, title="Inception", genre="Action, Sci-Fi", director="Christopher Nolan")
        create(client, title="Memento", genre="Mystery, Thriller", director="Christopher Nolan")

        body = client.post(
            "/api/collection/query",
            json={"query": "nolan", "genres": ["Thriller", "Horror"]},
            headers=AUTH,
        ).json()

        assert [d["title"] for d in body["dvds"]] == ["Memento"]

    def test_inverted_year_range_is_400(self, client: TestClient):
        response = client.post(
            "/api/collection/query", json={"yearRange": [2024, 2000]}, headers=AUTH
        )
        assert response.status_code == 400

    def test_unknown_status_is_400(self, client: TestClient):
        response = client.post(
            "/api/collection/query", json={"status": ["borrowed"]}, headers=AUTH
        )
        assert response.status_code == 400
        assert "status" in response.json()["errors"]


class TestCollectionStats:
    """Tests pour les statistiques de la collection."""

    def test_genre_aggregate(self, client: TestClient):
        create(client, title="Inception", year=2010, genre="Action, Sci-Fi")

        stats = client.get("/api/collection/stats", headers=AUTH).json()

        assert stats["genreCounts"] == {"Action": 1, "Sci-Fi": 1}
        assert stats["total"] == 1
        assert stats["completionRate"] == 100

    def test_full_stats(self, client: TestClient):
        create(client, title="Inception", year=2010, director="Christopher Nolan")
        create(client, title="Memento", year=2000, director="Christopher Nolan")
        create(client, title="Amelie", year=2001, status="wishlist")
        create(client, headers=OTHER_AUTH, title="Heat", year=1995)

        stats = client.get("/api/collection/stats", headers=AUTH).json()

        assert stats["ownedCount"] == 2
        assert stats["wishlistCount"] == 1
        assert stats["completionRate"] == 67
        assert stats["oldestYear"] == 2000
        assert stats["newestYear"] == 2010
        assert stats["averageYear"] == 2004
        assert stats["topDirectors"] == [{"name": "Christopher Nolan", "count": 2}]

    def test_empty_collection(self, client: TestClient):
        stats = client.get("/api/collection/stats", headers=AUTH).json()
        assert stats["total"] == 0
        assert stats["completionRate"] == 0
        assert stats["averageYear"] is None
