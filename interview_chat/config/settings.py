from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Interview Chat"
    APP_ADDRESS: str = "0.0.0.0"
    APP_PORT: int = 8000

    AI_GATEWAY_API_KEY: str | None = None
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_MODEL: str = "google/gemini-3-flash-preview"
    AI_TEMPERATURE: float = 0.7
    AI_TIMEOUT: float = 60.0

    CHAT_MAX_TOKENS: int = 800
    FEEDBACK_MAX_TOKENS: int = 1500

    CORS_ALLOW_HEADERS: list[str] = ["authorization", "x-client-info", "apikey", "content-type"]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
