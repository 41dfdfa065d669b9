import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    key_prefix: str = os.getenv("KEY_PREFIX", "review_summary")

    # Summary cache
    summary_cache_ttl: int = int(os.getenv("SUMMARY_CACHE_TTL", "604800"))  # 7 days default
    summary_prompt_name: str = os.getenv("SUMMARY_PROMPT_NAME", "review_summary")
    summary_approved_only: bool = _env_bool("SUMMARY_APPROVED_ONLY", "true")
    summary_single_flight: bool = _env_bool("SUMMARY_SINGLE_FLIGHT", "true")

    # Text generation (any OpenAI-compatible chat completions endpoint)
    llm_base_url: str = os.getenv("LLM_BASE_URL", "https://api.openai.com/v1")
    llm_api_key: str | None = os.getenv("LLM_API_KEY")
    llm_model: str = os.getenv("LLM_MODEL", "gpt-4o-mini")
    llm_timeout: float = float(os.getenv("LLM_TIMEOUT", "60"))

    # Admin
    admin_api_token: str | None = os.getenv("ADMIN_API_TOKEN")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = _env_bool("API_RELOAD", "true")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.summary_cache_ttl <= 0:
            raise ValueError("SUMMARY_CACHE_TTL must be a positive number of seconds")

        if self.llm_timeout <= 0:
            raise ValueError("LLM_TIMEOUT must be positive")

        if not self.key_prefix or ":" in self.key_prefix:
            raise ValueError(f"KEY_PREFIX must be non-empty and contain no ':', got {self.key_prefix!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client(url: str | None = None) -> redis.Redis:
    """Create a Redis client instance.

    A new client is returned on every call; the caller owns it and must close it.
    """
    return redis.from_url(
        url or settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
