"""Configuration management for the marketplace service."""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("MARKETPLACE_PROJECT_NAME", "Marketplace Service")
    API_PREFIX: str = os.getenv("API_PREFIX", "").rstrip("/")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # "firestore" in deployments, "memory" for local development.
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "firestore").strip().lower()
    FIREBASE_PROJECT_ID: Optional[str] = os.getenv("FIREBASE_PROJECT_ID")
    FIREBASE_CREDENTIALS_PATH: Optional[str] = os.getenv("FIREBASE_CREDENTIALS_PATH")

    DEFAULT_CLICK_CITY: str = os.getenv("DEFAULT_CLICK_CITY", "Rosario")
    SEARCH_DEFAULT_LIMIT: int = int(os.getenv("SEARCH_DEFAULT_LIMIT", "50"))
    ALL_ZONES_SENTINEL: str = os.getenv("ALL_ZONES_SENTINEL", "all")
    ALL_RUBROS_TAG: str = os.getenv("ALL_RUBROS_TAG", "all")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


__all__ = ["settings", "Settings", "get_settings"]
