from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from SCHEMAGRAPH_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMAGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level for the schemagraph logger")
    # utf-8-sig also reads plain UTF-8 and drops the BOM spreadsheet tools write
    encoding: str = Field(default="utf-8-sig", description="Text encoding used when reading input files")
    markup_suffixes: list[str] = Field(default_factory=lambda: [".xml"])
    tabular_suffixes: list[str] = Field(default_factory=lambda: [".csv"])

    @field_validator("markup_suffixes", "tabular_suffixes")
    @classmethod
    def _lowercase_suffixes(cls, value: list[str]) -> list[str]:
        return [suffix.strip().lower() for suffix in value]


@lru_cache
def get_settings() -> Settings:
    return Settings()
