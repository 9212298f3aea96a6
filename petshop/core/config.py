"""Application configuration via pydantic settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application configuration."""

    app_env: str = Field("local", alias="APP_ENV")
    app_name: str = Field("PetShop API", alias="APP_NAME")
    api_prefix: str = Field("/api", alias="API_PREFIX")

    database_url: str = Field(
        "sqlite+aiosqlite:///./petshop.db", alias="DATABASE_URL"
    )
    sync_database_url: str | None = Field(default=None, alias="SYNC_DATABASE_URL")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    jwt_secret_key: str = Field(..., alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_days: int = Field(7, alias="ACCESS_TOKEN_EXPIRE_DAYS")
    bcrypt_rounds: int = Field(10, alias="BCRYPT_ROUNDS")

    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3333, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    cors_allow_origins: str = Field(
        "http://localhost:3000", alias="CORS_ALLOW_ORIGINS"
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")

    viacep_base_url: str = Field("https://viacep.com.br", alias="VIACEP_BASE_URL")
    viacep_timeout_seconds: float = Field(5.0, alias="VIACEP_TIMEOUT_SECONDS")

    redis_url: str | None = Field(default=None, alias="REDIS_URL")
    rate_limit_login: str = Field("10/minute", alias="RATE_LIMIT_LOGIN")

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[2] / ".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Return the comma-separated CORS allowlist as a list."""
        return [
            origin.strip()
            for origin in self.cors_allow_origins.split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()  # type: ignore[call-arg]
