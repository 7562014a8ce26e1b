# litbot/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Literature Companion")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # upstream chat-completion gateway
    AI_GATEWAY_API_KEY: str | None = None
    AI_GATEWAY_URL: str = Field(default="https://ai.gateway.lovable.dev/v1/chat/completions")
    AI_MODEL: str = Field(default="google/gemini-2.5-flash")
    UPSTREAM_TIMEOUT_SEC: float = Field(default=30.0, gt=0)

    # local dev without a gateway key
    USE_ECHO: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def has_gateway_key(self) -> bool:
        return bool(self.AI_GATEWAY_API_KEY)


settings = Settings()
