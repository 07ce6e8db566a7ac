"""Configuration for the real filesystem provider."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Environment variables read by ExtensionsConfig.from_env
TEMP_ROOT_ENV = "FS_EXTENSIONS_TEMP_ROOT"
ENCODING_ENV = "FS_EXTENSIONS_ENCODING"


class ExtensionsConfig(BaseModel):
    """Settings shared by the provider and the text helpers.

    Attributes:
        temp_root: Directory scoped temp objects are created under.
            Defaults to the platform temp directory.
        encoding: Default encoding for line and text helpers.
        random_name_length: Length of generated temp names.
    """

    model_config = ConfigDict(populate_by_name=True)

    temp_root: Path | None = Field(default=None, alias="tempRoot")
    encoding: str = "utf-8"
    random_name_length: int = Field(default=12, ge=4, le=64, alias="randomNameLength")

    @classmethod
    def from_file(cls, path: Path) -> ExtensionsConfig:
        """Load configuration from a JSON file.

        Args:
            path: Path to the JSON file.

        Returns:
            Parsed ExtensionsConfig.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If JSON is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        data = json.loads(path.read_text())
        return cls.model_validate(data)

    @classmethod
    def from_env(cls) -> ExtensionsConfig:
        """Build configuration from environment variables.

        Unset variables fall back to the model defaults.
        """
        data: dict[str, str] = {}
        if temp_root := os.environ.get(TEMP_ROOT_ENV):
            data["temp_root"] = temp_root
        if encoding := os.environ.get(ENCODING_ENV):
            data["encoding"] = encoding
        return cls.model_validate(data)
