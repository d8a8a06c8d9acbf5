from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Gig API"
    ENVIRONMENT: str = "production"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    # Database Settings
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "gig_db"

    # Full connection URL; takes precedence over the POSTGRES_* parts when set
    SQL_CONNECTION: str = ""

    @property
    def DATABASE_URL(self) -> str:
        if self.SQL_CONNECTION:
            return self.SQL_CONNECTION
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Connection retry on transient failures
    DB_RETRY_ON_FAILURE: bool = True
    DB_MAX_RETRY_COUNT: int = 6
    DB_RETRY_BASE_DELAY: float = 1.0
    DB_MAX_RETRY_DELAY: float = 30.0

    # HTTP pipeline
    HTTPS_REDIRECT: bool = False

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:8000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
