from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    DB_DRIVER_NAME: str = "sqlite"
    """Database driver (e.g., `postgresql+psycopg2`, `mysql+pymysql`, `sqlite`)."""

    DB_USERNAME: str | None = None
    """Database username credential."""

    DB_PASSWORD: str | None = None
    """Database password credential."""

    DB_HOST: str | None = None
    """Hostname or IP address of the database server."""

    DB_DATABASE_NAME: str = "votacion.db"
    """Name of the application’s database (a file path for SQLite)."""

    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    """Duration (in minutes) before access tokens expire."""

    SECRET_KEY: str
    """Secret key used for signing tokens and securing sensitive operations."""

    ALGORITHM: str = "HS256"
    """Cryptographic algorithm used for JWT signing (e.g., `HS256`)."""

    FRONTEND_URL: str = "*"
    """Comma separated origins allowed by CORS, or `*`."""

    LOG_LEVEL: str = "INFO"
    """Root logging level."""

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL assembled from the `DB_*` values."""
        return URL.create(
            drivername=self.DB_DRIVER_NAME,
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            database=self.DB_DATABASE_NAME,
        )

    @property
    def cors_origins(self) -> list[str]:
        if self.FRONTEND_URL.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.FRONTEND_URL.split(",") if origin.strip()]

    class Config:
        """
        Configuration for Pydantic settings. Loads values from `.env` file by default.
        """
        env_file = ".env"


# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Defines a Settings object that contains the contents of the .env file"""
