# dars_tracker/config.py
from decimal import Decimal
from typing import List

from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    app_title: str = "DARS Progress Tracker"
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"

    # GPA at or above this value is shown as passing
    minimum_gpa: Decimal = Decimal("2.00")

    cors_origins: List[str] = ["*"]

    class Config:
        env_prefix = "DARS_"  # Load settings from environment variables with DARS_ prefix
        env_file = ".env"
        extra = "ignore"


# Load settings from environment variables
settings = AppSettings()
