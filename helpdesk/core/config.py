from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DATA_FILE = PROJECT_ROOT / "data" / "tickets.json"


class Settings(BaseSettings):
    app_name: str = "Helpdesk API"
    app_env: str = "development"
    app_debug: bool = True
    api_prefix: str = ""
    data_file: Path = DEFAULT_DATA_FILE
    cors_origins: str = "http://localhost:8080"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
