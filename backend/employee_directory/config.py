"""Application settings and configuration helpers."""
from functools import lru_cache
import json
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://51.21.195.141:8036",
    "http://51.21.195.141:8156",
    "http://51.21.195.141:3093",
    "http://51.21.195.141:5500",
    "http://127.0.0.1:5500",
]


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    db_user: str = Field(default="postgres", alias="DB_USER")
    db_password: str = Field(default="admin123", alias="DB_PASSWORD")
    db_host: str = Field(default="postgres", alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")
    db_name: str = Field(default="auth_db", alias="DB_NAME")
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")

    employee_port: int = Field(default=3093, alias="EMPLOYEE_PORT")
    upload_dir: str = Field(default="uploads", alias="UPLOAD_DIR")
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, alias="MAX_UPLOAD_BYTES")
    email_domain: str = Field(default="astrolitetech.com", alias="EMAIL_DOMAIN")
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CORS_ORIGINS), alias="CORS_ALLOW_ORIGINS"
    )
    change_feed_serialized: bool = Field(default=False, alias="CHANGE_FEED_SERIALIZED")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL, either given verbatim or assembled from the DB_* parts."""

        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


def _parse_origins(raw: str) -> list[str]:
    try:
        return [str(origin) for origin in json.loads(raw)]
    except ValueError:
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    values: dict[str, object] = {}
    for name, field in Settings.model_fields.items():
        raw = os.getenv(field.alias or name)
        if raw is not None:
            values[name] = raw

    origins = values.pop("cors_allow_origins", None)
    if origins is not None:
        values["cors_allow_origins"] = _parse_origins(str(origins))

    return Settings(**values)
