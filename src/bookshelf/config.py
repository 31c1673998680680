"""
Configuration management for the Bookshelf catalog API
"""

from pathlib import Path

from pydantic_settings import BaseSettings

# JSON fixtures shipped with the package
BUNDLED_DATA_DIR = Path(__file__).parent / "datasource" / "fixtures"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Data source
    data_dir: str | None = None  # None means the bundled fixtures

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = []
    cors_origin_regex: str | None = ".*"  # reflect any origin, credentials allowed
    graphql_path: str = "/graphql"

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BOOKSHELF_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_data_dir() -> Path:
    """Directory the catalog fixtures are loaded from."""
    if settings.data_dir:
        return Path(settings.data_dir)
    return BUNDLED_DATA_DIR
