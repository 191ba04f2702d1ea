"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CHAKRAM_,
et peut optionnellement être fournie via un fichier .env.

Les cookies de session sont optionnels - les commandes qui interrogent le catalogue
échouent proprement s'ils ne sont pas fournis.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chakram.utils.constants import USER_AGENT

# Trouver le fichier .env à la racine du projet (parent de chakram/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CHAKRAM_.
    Exemple : CHAKRAM_COOKIES="session-id=...; ubid-main=..."
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAKRAM_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Authentification (header Cookie d'une session navigateur)
    cookies: Optional[str] = Field(default=None)
    device_id: Optional[str] = Field(default=None)
    user_agent: str = Field(default=USER_AGENT)

    # Transport
    request_timeout: float = Field(default=30.0, gt=0)
    max_retry_attempts: int = Field(default=5, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/chakram.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Accepte les niveaux de log en minuscules."""
        return str(v).upper()

    @property
    def auth_enabled(self) -> bool:
        """Vérifie si des cookies de session sont configurés."""
        return bool(self.cookies)
