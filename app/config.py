from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List

class Settings(BaseSettings):
    # App
    APP_NAME: str = "FOOTCHAMP API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (Postgres en prod, SQLite en local)
    DATABASE_URL: str = "sqlite:///./footchamp.db"

    # Admin : à surcharger via les variables d'environnement
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "change-me"
    ADMIN_TOKEN: str = "footchamp-dev-admin-token"

    # Géolocalisation IP (le free tier ip-api ne supporte que HTTP)
    GEOLOCATION_URL: str = "http://ip-api.com/json"
    GEOLOCATION_TIMEOUT: float = 3.0

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"
    FORM_RATE_LIMIT: str = "20/minute"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True

@lru_cache()
def get_settings():
    return Settings()

settings = get_settings()
