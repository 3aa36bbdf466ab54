"""Lightweight configuration for the Kingdomino tools."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KINGDOMINO_",
        extra="ignore",
    )

    board_size: int = Field(
        default=5,
        ge=3,
        description="Cells per side of the square kingdom (5 standard, 7 for the large variant)",
    )

    @field_validator("board_size")
    @classmethod
    def _odd_board_size(cls, value: int) -> int:
        if value % 2 == 0:
            raise ValueError("board_size must be odd so the castle sits in the centre")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
