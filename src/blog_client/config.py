import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # API
    api_base_url: str = os.getenv("BLOG_API_BASE_URL", "http://localhost:3000")
    http_timeout: float = float(os.getenv("BLOG_HTTP_TIMEOUT", "30.0"))

    # Feed
    home_posts_limit: int = int(os.getenv("BLOG_HOME_POSTS_LIMIT", "10"))

    # Uploads
    max_image_size: int = int(os.getenv("BLOG_MAX_IMAGE_SIZE", str(10 * 1024 * 1024)))  # 10MB

    # Local current-user cache
    user_cache_path: str = os.getenv(
        "BLOG_USER_CACHE_PATH",
        str(Path.home() / ".virtualsblog" / "current_user.json"),
    )

    # Logging
    log_level: str = os.getenv("BLOG_LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.http_timeout <= 0:
            raise ValueError("BLOG_HTTP_TIMEOUT must be greater than 0")

        if self.home_posts_limit < 1:
            raise ValueError(
                f"BLOG_HOME_POSTS_LIMIT must be at least 1, got {self.home_posts_limit}"
            )

        if self.max_image_size < 1:
            raise ValueError("BLOG_MAX_IMAGE_SIZE must be a positive number of bytes")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
