"""
Fixtures pour les tests de l'API web.

L'application est construite avec le Container de test (SQLite en memoire)
et demarree via TestClient en context manager pour executer le lifespan.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from dvdshelf.container import Container
from dvdshelf.web.app import create_app


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    app = create_app(container)
    with TestClient(app) as test_client:
        yield test_client
