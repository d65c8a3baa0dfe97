"""
Entite utilisateur.

Les utilisateurs sont créés ou mis à jour à la première authentification
(upsert) par le fournisseur d'identité externe.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """
    Utilisateur propriétaire d'une collection.

    Attributs :
        id : Identifiant fourni par le fournisseur d'authentification
        email : Adresse email
        first_name : Prenom
        last_name : Nom
        profile_image_url : URL de l'avatar
        created_at : Date de creation
        updated_at : Date de dernière mise à jour
    """

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        """Nom affichable : nom complet, sinon email, sinon ID."""
        full_name = " ".join(
            part for part in (self.first_name, self.last_name) if part
        )
        return full_name or self.email or self.id

    def same_identity(self, other: "User") -> bool:
        """Vérifie si les champs d'identité sont identiques (hors dates)."""
        return (
            self.id == other.id
            and self.email == other.email
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.profile_image_url == other.profile_image_url
        )
