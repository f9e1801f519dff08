import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DB_PATH: str = os.path.join("~", "folio", "folio.db")
    DB_PERSISTENT_CONNECTION: bool = False

    # Users
    BOOTSTRAP_ADMIN: bool = True
    ADMIN_USERNAME: str = "admin"
    BCRYPT_ROUNDS: int = Field(12, ge=4, le=31)

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DB_PATH")
    @classmethod
    def expand_db_path(cls, v: str) -> str:
        return os.path.expanduser(v)


settings = Settings()
