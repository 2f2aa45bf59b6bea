from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: Path = BASE_DIR / "content" / "posts"
    TEMPLATES_DIR: Path = BASE_DIR / "templates"

    # Static assets
    STATIC_DIR: Path = BASE_DIR / "static"
    STATIC_CACHE_CONTROL: str = "public, max-age=3600"

    # Landing page
    SITE_TITLE: str = "Portfolio Website"
    SITE_OWNER: str = "Ervin"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3002

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def bind_address(self) -> str:
        return f"{self.HOST}:{self.PORT}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings
