from datetime import timedelta
from typing import Annotated, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_PROJECT_NAME = "Chirpy"
DEFAULT_API_V1_PREFIX = "/api/v1"

JWT_ISSUER = "chirpy"
REFRESH_TOKEN_TTL = timedelta(days=60)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    PROJECT_NAME: str = DEFAULT_PROJECT_NAME
    API_V1_PREFIX: str = DEFAULT_API_V1_PREFIX
    ENV: str = 'development'
    PLATFORM: str = ''
    DEBUG: bool = False

    DB_URL: str = 'sqlite:///./chirpy.db'
    AUTO_CREATE_TABLES: bool = False
    LOG_LEVEL: str = 'INFO'
    LOG_JSON: bool = False
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ['*']

    JWT_SECRET: SecretStr
    JWT_ALGORITHM: str = 'HS256'
    SESSION_TTL_SECONDS: int = 3600
    POLKA_KEY: Optional[SecretStr] = None

    CHIRP_MAX_LEN: int = 140

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, value):  # type: ignore[override]
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return []
            if value == '*':
                return ['*']
            return [item.strip() for item in value.split(',') if item.strip()]
        return value

    @field_validator('SESSION_TTL_SECONDS')
    @classmethod
    def check_session_ttl(cls, value: int) -> int:
        if value <= 0:
            raise ValueError('SESSION_TTL_SECONDS must be positive')
        return value

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(seconds=self.SESSION_TTL_SECONDS)


settings = Settings()
