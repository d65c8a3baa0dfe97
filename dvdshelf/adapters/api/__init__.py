"""
Clients API externes.

- OMDBClient : base de données de films OMDB (httpx)
"""

from dvdshelf.adapters.api.omdb_client import OMDBClient

__all__ = ["OMDBClient"]
