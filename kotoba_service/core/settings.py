from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

DEFAULT_API_URL = "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions"
DEFAULT_MODEL_NAME = "gemini-2.5-flash-preview-05-20"


class Settings(BaseSettings):
    """Process-wide configuration, read once from the environment (and ``.env``)."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        frozen=True,
    )

    # Server-held upstream credential; never sent to the browser
    API_KEY: str = ""
    API_URL: str = DEFAULT_API_URL
    DEFAULT_MODEL: str = DEFAULT_MODEL_NAME

    # None disables the timeout entirely
    UPSTREAM_TIMEOUT_SEC: Optional[float] = None

    HOST: str = "0.0.0.0"
    PORT: int = 7050
    CORS_ORIGINS: str = "http://localhost:3000"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
