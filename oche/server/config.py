# oche/server/config.py
"""Server configuration with sensible defaults for a single shared board."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import DEFAULT_RATING, K_FACTOR


class Settings(BaseSettings):
    """Server settings, overridable via environment variables."""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8090

    # Ladder
    STATE_PATH: Path = Path("data/ladder.json")
    RESET_PASSPHRASE: str = "bullseye"
    K_FACTOR: float = K_FACTOR
    DEFAULT_RATING: int = DEFAULT_RATING

    model_config = SettingsConfigDict(env_prefix="OCHE_", env_file=".env", extra="ignore")


settings = Settings()
