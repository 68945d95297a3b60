"""Configuration du moteur de recherche floue."""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Seuils de similarité (réglés empiriquement)
    DEFAULT_THRESHOLD: float = Field(default=0.6, ge=0.0, le=1.0)
    # Plus tolérant pour les noms de restaurants et de plats
    LENIENT_THRESHOLD: float = Field(default=0.55, ge=0.0, le=1.0)

    # Recherche en direct
    SEARCH_DEBOUNCE_MS: int = Field(default=300, ge=0)

    # Logs
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MENUSEARCH_",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
