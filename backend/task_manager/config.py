"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables (never hardcoded)
    - Settings is built once at startup and handed to create_app();
      request handling never reads configuration from module globals
    - DATABASE_URL, when set, wins over the PG* connection parts

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - PG* variable names kept so existing libpq-style environments work unchanged
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database connection parts
    db_host: str = Field(
        "localhost", validation_alias=AliasChoices("PGHOST", "DB_HOST", "db_host"),
    )
    db_port: int = Field(
        5432, validation_alias=AliasChoices("PGPORT", "DB_PORT", "db_port"),
    )
    db_user: str = Field(
        "postgres", validation_alias=AliasChoices("PGUSER", "DB_USER", "db_user"),
    )
    db_password: str = Field(
        "", validation_alias=AliasChoices("PGPASSWORD", "DB_PASSWORD", "db_password"),
    )
    db_name: str = Field(
        "tasks",
        validation_alias=AliasChoices("PGNAME", "PGDATABASE", "DB_NAME", "db_name"),
    )

    # Full URL override
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_tables: bool = True

    # API
    tasks_path: str = "/api/tasks"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def get_database_url(self) -> str:
        """Connection URL: DATABASE_URL if set, else assembled from the PG* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
