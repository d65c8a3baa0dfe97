"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- IDvdRepository : Stockage des DVD, restreint au propriétaire
- IUserRepository : Stockage des utilisateurs

Ports client API : Contrats pour les services externes
- IMovieLookupClient : Base de données de films (OMDB)
- SearchResult : Candidat d'une recherche large
- MovieData : Métadonnées normalisees d'un film
"""

from dvdshelf.core.ports.api_clients import (
    IMovieLookupClient,
    MovieData,
    SearchResult,
)
from dvdshelf.core.ports.repositories import (
    IDvdRepository,
    IUserRepository,
)

__all__ = [
    # Repositories
    "IDvdRepository",
    "IUserRepository",
    # Clients API
    "IMovieLookupClient",
    "MovieData",
    "SearchResult",
]
