"""Configuration management for AppGap."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # OpenAI API
    openai_api_key: str = Field("", description="OpenAI API key")
    OPENAI_API_KEY: str = Field("", description="OpenAI API key (alternative naming)")
    openai_model: str = Field("gpt-4o-mini", description="Chat completion model")

    @property
    def effective_openai_key(self) -> str:
        """Get the effective OpenAI API key from either field."""
        return self.openai_api_key or self.OPENAI_API_KEY

    # App Store feeds
    apple_rss_user_agent: str = Field("AppStoreReviewAnalyzer/1.0", description="User agent for App Store requests")
    app_store_country: str = Field("us", description="Storefront country code")
    review_feed_root: str = Field("https://itunes.apple.com", description="Customer review RSS root")
    lookup_root: str = Field("https://itunes.apple.com/lookup", description="iTunes lookup endpoint")
    request_timeout: float = Field(15.0, description="HTTP timeout in seconds for App Store requests")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
