# app/core/config.py

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- JWT Config ---
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # --- Database Config ---
    DATABASE_URL: str = "sqlite+aiosqlite:///./vastradaan.db"

    # --- Google Sign-In ---
    GOOGLE_CLIENT_ID: Optional[str] = None
    GOOGLE_CERTS_URL: str = "https://www.googleapis.com/oauth2/v3/certs"
    GOOGLE_CERTS_CACHE_SECONDS: int = 3600
    GOOGLE_REQUEST_TIMEOUT: int = 10

    # --- Server ---
    APP_NAME: str = "VastraDaan"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    @property
    def sync_database_url(self) -> str:
        return (
            self.DATABASE_URL
            .replace("+aiosqlite", "")
            .replace("+asyncpg", "+psycopg2")
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
