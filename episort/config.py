"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe EPISORT_,
et peut optionnellement être fournie via un fichier .env.

Le fichier de règles est optionnel : sans lui, aucune règle de filtrage n'est appliquée.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de episort/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe EPISORT_.
    Exemple : EPISORT_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="EPISORT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Bibliothèque de séries (un sous-dossier par série)
    library_dir: Path = Field(default=Path("~/Videos/Series"))

    # Règles de filtrage (JSON) - optionnel
    rules_file: Optional[Path] = Field(default=None)

    # Sous-dossier d'une série contenant l'export TVDB (series.json, episodes.json)
    metadata_dirname: str = Field(default=".episort", min_length=1)

    # Analyseurs de noms de fichiers, par priorité
    extractor_backends: list[str] = Field(default_factory=lambda: ["regex", "guessit"])

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/episort.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("library_dir", "rules_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None:
            return None
        return Path(v).expanduser()

    @field_validator("extractor_backends")
    @classmethod
    def check_backends(cls, v: list[str]) -> list[str]:
        """Au moins un analyseur doit être configuré."""
        if not v:
            raise ValueError("extractor_backends ne peut pas être vide")
        return v

    @property
    def rules_enabled(self) -> bool:
        """Vérifie si un fichier de règles est configuré."""
        return self.rules_file is not None
