"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

CONTENTS_SEARCH_URL = "https://pkgs.alpinelinux.org/contents"


class Settings(BaseSettings):
    """Settings for apk-file. Every field can be set as APK_FILE_<NAME>."""

    model_config = SettingsConfigDict(
        env_prefix="APK_FILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_parse_none_str="none",
    )

    contents_url: str = CONTENTS_SEARCH_URL
    # Seconds; APK_FILE_TIMEOUT=none waits forever
    timeout: float | None = 30.0

    branch: str = "v3.8"
    repo: str = "main"
    arch: str = "x86_64"

    output_format: str = "yaml"
    output_type: str = "stdout"
    output_prefix: str = "output"
    output_basename: str = "results"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
