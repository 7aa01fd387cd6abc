"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from DONUT_SHOP_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="DONUT_SHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "donut-shop"
    log_level: str = "INFO"

    # Cards
    default_card_balance: int = 50

    # Settlement
    lock_mode: Literal["in_memory", "noop"] = "in_memory"

