from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    verbose: bool = False

    symbol_provider: str = "archive"
    symbols_root: Path = Path.home() / "Library" / "Developer" / "Xcode" / "Archives"

    resolver_executable: str = "/usr/bin/xcrun"
    resolver_tool: str = "atos"
    resolver_timeout_seconds: int = 60
    resolver_max_workers: int = 1
