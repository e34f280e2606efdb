"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The CLI builds a Settings instance from --host/--port/--cache
and passes it to create_app(); get_settings() is the fallback for code paths
that run without an explicit instance.
"""

from functools import lru_cache
from pathlib import Path
from urllib.parse import quote_plus

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

INVENTORY_BACKENDS = ("json", "sql")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    cache_dir is required. When inventory_backend is 'sql', either
    DATABASE_URL or DB_HOST/DB_USER/DB_NAME must be provided.
    """

    # App
    app_name: str = "inventory-service"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    cache_dir: str = ""

    # Inventory store: "json" (flat file under cache_dir) or "sql" (relational table)
    inventory_backend: str = "json"
    data_filename: str = "inventory.json"
    photo_dirname: str = "photos"

    # Database (sql backend only)
    database_url: str = ""
    db_host: str = ""
    db_port: int = 5432
    db_user: str = ""
    db_password: SecretStr = SecretStr("")
    db_name: str = ""
    database_echo: bool = False
    # Create the inventory table on startup when it does not exist.
    database_auto_create: bool = True

    # CORS
    allowed_origins: str = "*"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required_and_backend(self) -> "Settings":
        """Validate required settings and the inventory backend.

        - cache_dir is always required (data file and photos live under it).
        - sql: DATABASE_URL or DB_HOST + DB_USER + DB_NAME required.
        """
        if not self.cache_dir:
            raise ValueError(
                "CACHE_DIR is required. Pass --cache on the command line "
                "or set CACHE_DIR in environment or .env file."
            )
        backend = self.inventory_backend.lower()
        if backend not in INVENTORY_BACKENDS:
            raise ValueError(
                f"inventory_backend must be 'json' or 'sql', got: {self.inventory_backend!r}"
            )
        self.inventory_backend = backend
        if backend == "sql" and not self.database_url:
            if not (self.db_host and self.db_user and self.db_name):
                raise ValueError(
                    "DATABASE_URL (or DB_HOST, DB_USER and DB_NAME) is required "
                    "when inventory_backend is 'sql'."
                )
        return self

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_dir).resolve()

    @property
    def data_file(self) -> Path:
        """JSON array of records used by the json backend."""
        return self.cache_path / self.data_filename

    @property
    def photo_dir(self) -> Path:
        """Directory holding uploaded photo blobs (both backends)."""
        return self.cache_path / self.photo_dirname

    @property
    def sqlalchemy_url(self) -> str:
        """Async SQLAlchemy URL: DATABASE_URL as given, else composed from DB_* parts."""
        if self.database_url:
            return self.database_url
        password = self.db_password.get_secret_value()
        credentials = quote_plus(self.db_user)
        if password:
            credentials = f"{credentials}:{quote_plus(password)}"
        return (
            f"postgresql+asyncpg://{credentials}@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def public_url(self) -> str:
        return f"http://{self.host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
