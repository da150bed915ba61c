# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./tickets.db")
    APP_NAME: str = "Ticket API"
    APP_DESC: str = "Ticket management with ownership and role based access"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # CORS origins, comma separated; empty means "*"
    CORS_ORIGINS: str | None = None

    # Security. Turning it off makes every caller DEFAULT_SUBJECT with ADMIN.
    SECURITY_ENABLED: bool = True
    MOCK_JWT: bool = False  # accept unsigned "mock-{type}-{id}" tokens
    JWT_SECRET: str = Field(default="change-me")
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str | None = None
    JWT_ISSUER: str | None = None
    SUBJECT_CLAIM: str = "SID"
    ROLES_CLAIM: str = "roles"
    DEFAULT_SUBJECT: str = "default-user"

    CACHE_MAX_SIZE: int = Field(default=1024, gt=0)

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
