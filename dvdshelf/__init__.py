"""
DVDShelf - Gestion d'une collection personnelle de DVD.

Ce package fournit une API REST pour lister, filtrer, rechercher, ajouter,
modifier et supprimer des DVD, avec une recherche optionnelle de métadonnées
via OMDB pour pre-remplir les fiches.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- services/ : Couche application (cas d'utilisation, moteur de filtrage)
- adapters/ : Clients API externes (OMDB) et interface CLI
- infrastructure/ : Persistance SQLModel et stockage en mémoire
- web/ : API REST FastAPI
"""

__version__ = "0.1.0"
