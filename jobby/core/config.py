from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    PROJECT_NAME: str = "Jobby API"
    PORT: int = 5001

    # Database Settings (any SQLAlchemy URL, e.g. postgresql://user:pw@host/jobby)
    DATABASE_URL: str = ""

    # JWT Settings
    JWT_SECRET: str = ""
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 30

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",")]
        return v

    def missing_required(self) -> List[str]:
        """Names of required settings that are unset or blank."""
        return [
            name for name in ("DATABASE_URL", "JWT_SECRET")
            if not getattr(self, name).strip()
        ]

    class Config:
        env_file = ".env"
        case_sensitive = True
