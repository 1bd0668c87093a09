"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    environment: str = "development"
    log_level: str = "INFO"

    # Blogger API v3; seed data is served while either credential is empty
    blogger_api_key: str = ""
    blogger_blog_id: str = ""
    blogger_api_base: str = "https://www.googleapis.com/blogger/v3"
    blogger_timeout: float = 10.0  # seconds

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def blogger_configured(self) -> bool:
        return bool(self.blogger_api_key and self.blogger_blog_id)


@lru_cache
def get_settings() -> Settings:
    return Settings()
