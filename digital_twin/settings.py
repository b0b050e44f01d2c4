# digital_twin/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Digital Twin")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # whose profile the twin speaks for (used in the MCP tool description)
    OWNER_NAME: str | None = None

    # Upstash Vector
    UPSTASH_VECTOR_REST_URL: str | None = None
    UPSTASH_VECTOR_REST_TOKEN: str | None = None

    # Groq (OpenAI-compatible endpoint)
    GROQ_API_KEY: str | None = None
    GROQ_BASE_URL: str = Field(default="https://api.groq.com/openai/v1")

    # local dev without a model key
    USE_ECHO: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
