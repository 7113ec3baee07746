"""Configuration management with pydantic-settings."""

import json
import shlex
from typing import Annotated, Any

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# PIDs captured for the Firefox processes under test.
FIREFOX_PIDS: tuple[int, ...] = (23664, 18420, 9132, 25508, 14876, 21040)

# The analysis tool is built and resolved by cargo; the PID is appended.
DEFAULT_TOOL_COMMAND: tuple[str, ...] = ("cargo", "run", "--quiet", "--")


class PidprobeSettings(BaseSettings):
    """pidprobe settings loaded from environment variables.

    All settings use the PIDPROBE_ prefix for environment variables. List
    values accept either JSON (``[1, 2]``) or a plain form: comma-separated
    PIDs and a shell-quoted tool command.
    """

    # Test run configuration
    tool_command: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_TOOL_COMMAND),
        description="Command that runs the analysis tool; the PID is appended",
    )
    pids: Annotated[list[PositiveInt], NoDecode] = Field(
        default_factory=lambda: list(FIREFOX_PIDS),
        description="Process identifiers to test, in order",
    )
    label: str = Field(default="Firefox", description="Process label shown in banners")
    separator_char: str = Field(
        default="=", min_length=1, max_length=1, description="Banner rule character"
    )
    separator_width: PositiveInt = Field(default=40, description="Banner rule width")
    pause_on_exit: bool = Field(
        default=True,
        description="Wait for a keypress after the last test",
    )
    fail_fast: bool = Field(
        default=False,
        description="Abort the run when the tool cannot be launched",
    )

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format: console or json")

    model_config = SettingsConfigDict(
        env_prefix="PIDPROBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("pids", mode="before")
    @classmethod
    def _split_pids(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("tool_command", mode="before")
    @classmethod
    def _split_tool_command(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return shlex.split(value)
        return value

    @field_validator("tool_command")
    @classmethod
    def _require_tool_command(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("tool_command must name an executable")
        return value


# Global settings instance
_settings: PidprobeSettings | None = None


def get_settings() -> PidprobeSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = PidprobeSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
