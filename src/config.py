from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    shop_name: str = "PawnShop Manager"
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="PAWNSHOP_", env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()
