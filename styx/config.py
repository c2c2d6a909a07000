"""
Settings read from the environment (prefix STYX_) or a local .env file.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # nesting beyond this evaluates to "Maximum Depth Exceeded";
    # kept well under the interpreter's recursion limit
    max_depth: int = Field(256, ge=1, le=400)

    # REPL
    prompt: str = "Styx> "
    history_file: Optional[str] = None

    # rendering of numeric results, printf style
    float_format: str = "%f"

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="STYX_", env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
