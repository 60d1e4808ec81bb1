"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

# Repository root (contains config/ and content/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "https://shreeshanth.dev",
    ]

    # Content locations (empty = default under the project root)
    blog_dir: str = ""
    site_data_path: str = ""

    # Blog
    default_author: str = "Shreeshanth Shetty"
    words_per_minute: int = 200

    model_config = {"env_file": ".env", "extra": "ignore"}

    def resolved_blog_dir(self) -> Path:
        return Path(self.blog_dir) if self.blog_dir else PROJECT_ROOT / "content" / "blog"

    def resolved_site_data_path(self) -> Path:
        if self.site_data_path:
            return Path(self.site_data_path)
        return PROJECT_ROOT / "config" / "site.yaml"


@lru_cache
def get_settings() -> Settings:
    return Settings()
