from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Endpoints of the hosted practice client; override via .env
    PROMPTS_URL: str = "https://raw.githubusercontent.com/9611io/CHIP/main/prompts.json"
    ADVISORY_URL: str = "https://chip.zoran-a18.workers.dev/"

    # "proxy" posts to ADVISORY_URL, "openai" talks to the OpenAI API directly
    ADVISORY_PROVIDER: Literal["proxy", "openai"] = "proxy"
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Generation Parameters
    LLM_TEMPERATURE: float = 0.5
    MAX_RETRIES: int = 0
    ADVISORY_TIMEOUT_SECONDS: float = 30.0

    # Corpus source: "http" fetches PROMPTS_URL, "static" uses the bundled samples
    CORPUS_SOURCE: Literal["http", "static"] = "http"

    # Session behaviour
    DEFAULT_SKILL: str = "Clarifying"
    HYPOTHESIS_NUDGE_THRESHOLD: int = 3
    RAW_PREVIEW_CHARS: int = 200

    LOG_LEVEL: str = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
