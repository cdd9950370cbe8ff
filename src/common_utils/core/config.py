import logging
import os
from typing import Optional

from pydantic import BaseModel, PositiveInt, field_validator

__all__ = ["Settings", "settings"]


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    MATERIALIZE_LIMIT: Optional[PositiveInt] = None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @property
    def materialize_limit(self) -> Optional[int]:
        return self.MATERIALIZE_LIMIT

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        if "LOG_LEVEL" in os.environ:
            values["LOG_LEVEL"] = os.environ["LOG_LEVEL"]

        # An empty variable means "no limit"
        limit = os.getenv("COMMON_UTILS_MATERIALIZE_LIMIT", "").strip()
        if limit:
            values["MATERIALIZE_LIMIT"] = limit

        return cls(**values)


settings = Settings.load()
