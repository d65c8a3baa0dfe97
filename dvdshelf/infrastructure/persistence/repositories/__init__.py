"""
Implementations des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans dvdshelf/core/ports/repositories.py :

- SQLModelDvdRepository / SQLModelUserRepository : persistance SQL via SQLModel,
  session reçue par injection de dependances
- InMemoryDvdRepository : stockage en mémoire (double de test)
"""

from dvdshelf.infrastructure.persistence.repositories.dvd_repository import (
    SQLModelDvdRepository,
)
from dvdshelf.infrastructure.persistence.repositories.memory_dvd_repository import (
    InMemoryDvdRepository,
)
from dvdshelf.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = [
    "InMemoryDvdRepository",
    "SQLModelDvdRepository",
    "SQLModelUserRepository",
]
