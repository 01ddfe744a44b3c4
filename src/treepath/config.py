"""Configuration for treepath operations."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from treepath.platforms import PLATFORMS

# Default chunk size for streaming file copies
DEFAULT_BUFFER_SIZE = 8 * 1024


class TreePathConfig(BaseModel):
    """Tunable settings shared by the copy and delete engines."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    buffer_size: int = Field(default=DEFAULT_BUFFER_SIZE, gt=0, alias="bufferSize")
    platform: str | None = None

    @field_validator("platform")
    @classmethod
    def _check_platform(cls, value: str | None) -> str | None:
        if value is not None and value not in PLATFORMS:
            raise ValueError(f"Unknown platform: {value}. Supported: {list(PLATFORMS.keys())}")
        return value

    @classmethod
    def from_file(cls, path: Path) -> TreePathConfig:
        """Load configuration from a JSON file.

        Args:
            path: Path to the configuration file.

        Returns:
            Parsed TreePathConfig.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the JSON or any setting is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            data = json.loads(path.read_text())
            return cls.model_validate(data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {path}: {e}") from e
