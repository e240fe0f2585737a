from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from .. import __version__

DEFAULT_SECRET_KEY = "your-secret-key-change-this-in-production"
PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Booking Backend"
    VERSION: str = __version__
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    STATIC_DIR: Path = PACKAGE_DIR / "static"

    # Database
    DATABASE_URL: str = "sqlite:///./bookings.db"
    DB_CONNECT_TIMEOUT: int = 10
    DB_POOL_TIMEOUT: int = 30

    # Security
    SECRET_KEY: str = Field(
        default=DEFAULT_SECRET_KEY,
        validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET"),
    )
    ALGORITHM: str = "HS256"
    BCRYPT_ROUNDS: int = 10

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings loaded from the environment."""
    return Settings()
