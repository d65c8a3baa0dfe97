"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe DVDSHELF_,
et peut optionnellement être fournie via un fichier .env.

La clé API OMDB est optionnelle - la recherche de métadonnées répond 401 si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de dvdshelf/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe DVDSHELF_.
    Exemple : DVDSHELF_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="DVDSHELF_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stockage
    database_url: str = Field(default="sqlite:///data/dvdshelf.db")

    # OMDB (OPTIONNEL - recherche de métadonnées désactivée si non défini)
    omdb_api_key: Optional[str] = Field(default=None)
    omdb_base_url: str = Field(default="https://www.omdbapi.com/")
    omdb_timeout: float = Field(default=10.0, gt=0)

    # Authentification (en-tête posé par le fournisseur d'identité en amont)
    auth_header: str = Field(default="X-User-Id")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/dvdshelf.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("omdb_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Une clé vide dans le .env équivaut à une clé absente."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def omdb_enabled(self) -> bool:
        """Vérifie si l'API OMDB est configurée."""
        return self.omdb_api_key is not None
