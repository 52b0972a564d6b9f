from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Math Operations Calculator"
    LOG_LEVEL: str = "INFO"

    # Limita superioară pentru numărul de intrare (factorial / Fibonacci cresc nelimitat)
    MAX_NUMBER: int = 1000

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Client REST
    API_BASE: str = "http://localhost:8000/api"
    REQUEST_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(
        env_prefix="MATH_CALC_", env_file=".env", extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
