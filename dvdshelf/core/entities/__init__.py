"""
Business entities representing core domain concepts.

Exports:
- Dvd: A DVD record owned by a single user
- DvdPatch: Partial update of a DVD (all fields optional)
- DvdStatus: owned / wishlist
- UNSET: Sentinel for fields absent from a patch
- User: Collection owner
"""

from dvdshelf.core.entities.dvd import UNSET, Dvd, DvdPatch, DvdStatus
from dvdshelf.core.entities.user import User

__all__ = [
    "Dvd",
    "DvdPatch",
    "DvdStatus",
    "UNSET",
    "User",
]
