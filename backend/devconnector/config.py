"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables; the JWT placeholder is refused at use
    - get_settings() is cached (lru_cache) — single instance per process
    - Token lifetime is finite (jwt_expires_seconds)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - Client settings (api_base_url, alert_timeout_ms) live here too: one config surface
"""

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

INSECURE_JWT_SECRET = "change-me"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://devconnector:devconnector@db:5432/devconnector"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    jwt_secret: SecretStr = SecretStr(INSECURE_JWT_SECRET)
    jwt_algorithm: str = "HS256"
    jwt_expires_seconds: int = 86_400
    auth_header_name: str = "x-auth-token"
    bcrypt_rounds: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Client
    api_base_url: str = "http://localhost:5000"
    alert_timeout_ms: int = 5000
    client_timeout_seconds: float = 10.0

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def signing_secret(self) -> str:
        """JWT signing key; the placeholder and an empty value are refused."""
        secret = self.jwt_secret.get_secret_value()
        if not secret or secret == INSECURE_JWT_SECRET:
            raise RuntimeError(
                "JWT_SECRET is not configured; refusing to sign tokens with a placeholder",
            )
        return secret


@lru_cache
def get_settings() -> Settings:
    return Settings()
