# sales_inquiry/config.py

import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# 🟩 .env at the repository root, whatever the working directory is
ENV_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', '.env'))


class Settings(BaseSettings):
    # Session tokens
    JWT_SECRET_KEY: str = "dtt-sales-inquiry-secret"
    JWT_ALGORITHM: str = "HS256"
    TOKEN_TTL_HOURS: int = 8

    # Passwords
    BCRYPT_ROUNDS: int = 10
    MIN_PASSWORD_LENGTH: int = 6

    # ERP data scope
    COMPANY_CODE: str = "DTT"
    MASTER_LANG: str = "en-US"
    ALL_ACCESS_SCOPE: str = "ALL"

    # PostgreSQL
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_DATABASE: str = "sales_db"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""

    # HTTP
    CORS_ORIGINS: str = "*"
    EXPORT_SHEET_NAME: str = "Sales Data"

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


def load_settings(env_path: str = ENV_PATH) -> Settings:
    # Real environment variables win over the .env file
    load_dotenv(env_path)
    return Settings()


settings = load_settings()
