# ovp_builder/shared/config.py
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; read from the environment and `.env`.
    """

    # --- Application Meta ---
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE
    OTEL_SERVICE_NAME: str = "ovp-sentence-builder"

    # --- Sentence Builder ---
    RANDOM_FILL_ROUNDS: int = 20

    # --- Translator ---
    # Model names passed on every translation port call; the core never calls a model.
    SPLIT_MODEL: str = "gpt-4o-mini"
    BACK_TRANSLATION_MODEL: str = "gpt-3.5-turbo"
    TRANSLATION_QUALITY_THRESHOLD: float = 0.8

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
