from enum import Enum

from pydantic_settings import BaseSettings


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class Settings(BaseSettings):
    # Database
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_NAME: str = "zcredits"
    DB_USER: str = "postgres"
    DB_PASS: str = "postgres"
    DATABASE_URL: str | None = None

    # Application
    APP_NAME: str = "zcredits-service"
    DEBUG: bool = True
    ROOT_PATH: str = ''
    ENVIRONMENT: Environment = Environment.DEVELOPMENT
    LOG_LEVEL: str = "INFO"

    # Conversion rate cache
    RATE_CACHE_TTL_SECONDS: float = 5 * 60
    FALLBACK_CONVERSION_RATE: float = 1.0

    # Admin
    ADMIN_API_KEY: str | None = None

    # Remote functions
    FUNCTIONS_URL: str = "http://localhost:54321/functions/v1"
    FUNCTIONS_SERVICE_KEY: str | None = None
    PASSWORD_RESET_FUNCTION: str = "admin-reset-password"
    FUNCTIONS_TIMEOUT: float = 10.0

    @property
    def enable_docs(self) -> bool:
        return self.ENVIRONMENT in [Environment.DEVELOPMENT]

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASS}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}")


settings = Settings()
