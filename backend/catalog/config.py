"""Application settings and validation."""

import os


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


class Settings:
    ENV: str
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    FEATURED_LIMIT: int
    SEARCH_MIN_LENGTH: int
    SEED_SAMPLE_DATA: bool
    CATALOG_API_URL: str

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.FEATURED_LIMIT = _env_int("FEATURED_LIMIT", 4)
        self.SEARCH_MIN_LENGTH = _env_int("SEARCH_MIN_LENGTH", 3)
        self.SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() == "true"
        self.CATALOG_API_URL = os.getenv("CATALOG_API_URL", "http://localhost:8000").rstrip("/")
        self._validate()

    def _validate(self):
        if self.FEATURED_LIMIT < 0:
            raise RuntimeError("FEATURED_LIMIT must be >= 0")
        if self.SEARCH_MIN_LENGTH < 0:
            raise RuntimeError("SEARCH_MIN_LENGTH must be >= 0")


settings = Settings()
