"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.cwd() / "data"


class TeamMember(BaseModel):
    """A developer listed by the about endpoint."""

    first_name: str
    last_name: str


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Cost Tracker"
    app_version: str = "0.1.0"

    # Name stamped on log events emitted by this process
    service_name: str = "cost-tracker"

    # Data directory (SQLite database lives here unless database_url is set)
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Timezone used for month boundaries and day-of-month extraction
    timezone: str = "UTC"

    # Central log collector; when unset, log events are stored locally
    logs_service_url: Optional[str] = None
    log_forward_timeout_seconds: float = 2.0

    # Seed data for GET /api/about
    developers: list[TeamMember] = []

    host: str = "127.0.0.1"
    port: int = 3001

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "costs.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
