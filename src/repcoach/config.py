"""Application settings loaded from the environment."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory (project root /data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """repcoach settings, overridable with REPCOACH_* variables or a .env file."""

    data_dir: Path = DATA_DIR
    db_name: str = "repcoach.db"
    log_level: str = "INFO"

    # Workout history
    history_limit: int = 20

    # Web server
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="REPCOACH_", env_file=".env", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
