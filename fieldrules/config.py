from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Messages
    DEFAULT_LOCALE: str = "en"
    FALLBACK_LOCALE: str = "en"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    # Format rules
    URL_SCHEMES: list[str] = ["http", "https", "ftp"]
    URL_REQUIRE_TLD: bool = True

    # Forms
    FORM_MAX_ERRORS: int = 50

    class Config:
        env_prefix = "FIELDRULES_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
