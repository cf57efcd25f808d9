from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Google Custom Search
    google_search_api_key: str = Field(default="", alias="GOOGLE_SEARCH_API_KEY")
    google_search_cx: str = Field(default="", alias="GOOGLE_SEARCH_CX")
    google_search_base_url: str = Field(
        default="https://www.googleapis.com/customsearch/v1",
        alias="GOOGLE_SEARCH_BASE_URL",
    )

    # Summarization model
    llm_provider: str = Field(default="openai", alias="LLM_PROVIDER")

    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    google_api_key: str = Field(default="", alias="GOOGLE_API_KEY")
    gemini_model: str = Field(default="gemini-1.5-flash", alias="GEMINI_MODEL")

    default_api_timeout_seconds: int = Field(
        default=20, alias="DEFAULT_API_TIMEOUT_SECONDS"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
