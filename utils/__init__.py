from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .settings import Settings


def load_settings() -> Settings:
    from dotenv import load_dotenv
    from .settings import Settings
    # BERLIN_CLOCK_* variables already in the environment take precedence over .env
    load_dotenv(override=False)
    return Settings()

settings = load_settings()
