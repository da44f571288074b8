from functools import lru_cache
from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 5 MiB is plenty for a few thousand translation rows
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    if isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Translation Admin API"
    DEBUG: bool = False

    # Logging; unset values follow DEBUG and ENVIRONMENT
    LOG_LEVEL: str | None = None
    LOG_JSON: bool | None = None

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    FRONTEND_URL: str = "http://localhost:5173"

    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        """Return all CORS origins as strings."""
        origins = [str(origin).rstrip("/") for origin in self.CORS_ORIGINS]
        if self.FRONTEND_URL and self.FRONTEND_URL not in origins:
            origins.append(self.FRONTEND_URL.rstrip("/"))
        return origins

    # Persistence
    STORE_BACKEND: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite:///./translations.db"
    SEED_SAMPLE_DATA: bool = True

    MAX_UPLOAD_BYTES: int = DEFAULT_MAX_UPLOAD_BYTES

    # API client
    CLIENT_BASE_URL: str = "http://localhost:8000/api"
    CLIENT_TIMEOUT_SECONDS: float = 30.0
    # Serve static sample data when the API is unreachable (demo/debug only)
    CLIENT_FALLBACK_TO_SAMPLE: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def uses_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
