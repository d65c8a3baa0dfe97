"""
Implémentation en mémoire du repository DVD.

Utilisee comme double de test des services et de la CLI.
Les IDs sont attribues par une sequence propre à l'instance ; les DVD
retournes sont des copies, jamais les objets stockes.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from dvdshelf.core.entities.dvd import Dvd, DvdPatch, DvdStatus
from dvdshelf.core.ports.repositories import IDvdRepository
from dvdshelf.core.value_objects.filters import DvdFilter


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()


class InMemoryDvdRepository(IDvdRepository):
    """Repository DVD en mémoire, sur pour des appelants concurrents."""

    def __init__(self) -> None:
        self._rows: dict[int, Dvd] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _owned(self, owner_id: str) -> list[Dvd]:
        return [replace(d) for d in self._rows.values() if d.owner_id == owner_id]

    def get(self, dvd_id: int, owner_id: str) -> Optional[Dvd]:
        with self._lock:
            dvd = self._rows.get(dvd_id)
            if dvd is None or dvd.owner_id != owner_id:
                return None
            return replace(dvd)

    def list(self, owner_id: str) -> list[Dvd]:
        with self._lock:
            return self._owned(owner_id)

    def insert(self, dvd: Dvd, owner_id: str) -> Dvd:
        with self._lock:
            stored = replace(
                dvd,
                id=next(self._ids),
                owner_id=owner_id,
                status=DvdStatus(dvd.status),
                created_at=datetime.now(timezone.utc),
            )
            self._rows[stored.id] = stored
            return replace(stored)

    def update(self, dvd_id: int, patch: DvdPatch, owner_id: str) -> Optional[Dvd]:
        with self._lock:
            dvd = self._rows.get(dvd_id)
            if dvd is None or dvd.owner_id != owner_id:
                return None
            updated = patch.apply_to(dvd)
            updated.status = DvdStatus(updated.status)
            self._rows[dvd_id] = updated
            return replace(updated)

    def delete(self, dvd_id: int, owner_id: str) -> bool:
        with self._lock:
            dvd = self._rows.get(dvd_id)
            if dvd is None or dvd.owner_id != owner_id:
                return False
            del self._rows[dvd_id]
            return True

    def search(self, text: str, owner_id: str) -> list[Dvd]:
        needle = text.lower()
        with self._lock:
            return [
                d
                for d in self._owned(owner_id)
                if _contains(d.title, needle)
                or _contains(d.director, needle)
                or _contains(d.genre, needle)
            ]

    def filter(self, criteria: DvdFilter, owner_id: str) -> list[Dvd]:
        with self._lock:
            results = self._owned(owner_id)

        if criteria.status is not None:
            status = DvdStatus(criteria.status)
            results = [d for d in results if d.status == status]
        if criteria.genre:
            genre = criteria.genre.lower()
            results = [d for d in results if _contains(d.genre, genre)]
        if criteria.year is not None:
            results = [d for d in results if d.year == criteria.year]
        return results
