"""Runtime constants for timedate-status."""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """Settings for querying timedatectl."""

    model_config = ConfigDict(frozen=True)

    timedatectl_path: str = Field(
        "/usr/bin/timedatectl", description="Absolute path of the timedatectl executable"
    )
    timestamp_format: str = Field(
        "%a %Y-%m-%d %H:%M:%S",
        description="strptime layout of timedatectl timestamps, without the zone abbreviation",
    )
    command_timeout: float | None = Field(
        None, description="Seconds to wait for timedatectl (None waits forever)"
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get the default configuration."""
    return Config()
