"""Settings for the bookkeeping CLI and dashboard, read from ``BOOKKEEPING_*`` env vars."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "data" / "seed.json"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="BOOKKEEPING_",
        env_file=".env",
        extra="ignore",
    )

    currency: str = Field(
        default="RUB",
        description="Currency label appended to amounts in reports",
    )
    log_level: str = Field(
        default="INFO",
        description="Level for the bookkeeping package logger",
    )
    seed_path: Path = Field(
        default=DEFAULT_SEED_PATH,
        description="JSON scenario replayed by the demo driver and dashboard",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
