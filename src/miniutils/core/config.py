# miniutils/src/miniutils/core/config.py

import logging

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="%(levelname)s %(name)s - %(message)s")

    # Extra characters url_encode leaves unescaped in path segments
    url_safe_chars: str = Field(default="")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "MINIUTILS_",
        "extra": "ignore"
    }

    def numeric_log_level(self) -> int:
        """Resolve ``log_level`` to a logging constant, WARNING if unknown."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

# Instantiate settings
settings = Settings()
