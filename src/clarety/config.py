"""Centralized application configuration."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "clarety"

SERVICE_SECTIONS = ("conversation", "speech_to_text", "text_to_speech", "personality_insights")


class ServiceCredentials(BaseModel):
    """Credentials and endpoint for one Watson service instance."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1, description="Basic auth username")
    password: str = Field(min_length=1, description="Basic auth password")
    url: str | None = Field(default=None, description="Service base URL (None = public default)")
    version: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$", description="API version date, YYYY-MM-DD")


class ConversationCredentials(ServiceCredentials):
    """Conversation credentials plus the workspace the chat commands talk to."""

    version: str = Field(default="2017-05-26", pattern=r"^\d{4}-\d{2}-\d{2}$", description="API version date, YYYY-MM-DD")
    workspace_id: str | None = Field(default=None, description="Default workspace for message and chat")


class TextToSpeechCredentials(ServiceCredentials):
    """Text to Speech credentials plus the default voice."""

    voice: str = Field(default="en-US_AllisonVoice", min_length=1, description="Default synthesis voice")


class PersonalityCredentials(ServiceCredentials):
    """Personality Insights credentials; the V3 API is versioned."""

    version: str = Field(default="2017-10-13", pattern=r"^\d{4}-\d{2}-\d{2}$", description="API version date, YYYY-MM-DD")


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    config_dir: Path = Field(description="Directory holding config.toml and the log file")
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    conversation: ConversationCredentials | None = None
    speech_to_text: ServiceCredentials | None = None
    text_to_speech: TextToSpeechCredentials | None = None
    personality_insights: PersonalityCredentials | None = None

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.config_dir / "config.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.config_dir / "clarety.log"

    @staticmethod
    def build(config_dir: Path | None = None) -> "Config":
        """Build a Config from defaults and optional config.toml."""
        resolved_dir = config_dir if config_dir is not None else DEFAULT_CONFIG_DIR
        config_path = resolved_dir / "config.toml"

        kwargs: dict[str, Any] = {"config_dir": resolved_dir}
        if config_path.is_file():
            with config_path.open("rb") as f:
                toml_data = tomllib.load(f)
            if isinstance(toml_data.get("timeout"), int | float):
                kwargs["timeout"] = toml_data["timeout"]
            for section in SERVICE_SECTIONS:
                if isinstance(toml_data.get(section), dict):
                    kwargs[section] = toml_data[section]

        return Config(**kwargs)
