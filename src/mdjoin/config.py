"""Render configuration schema and loading."""

import codecs
import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mdjoin.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "mdjoin.yaml"


class RenderConfig(BaseModel):
    """Output formatting options shared by every node of a document.

    Frozen because one config is handed to every render call of a document.
    """

    model_config = ConfigDict(frozen=True)

    line_ending: Literal["\r\n", "\n"] = Field(
        default="\r\n", description="Terminator written after every line"
    )
    indent_width: int = Field(
        default=3, ge=0, le=8, description="Spaces per nesting level of a list"
    )
    bullet: Literal["*", "-", "+"] = Field(default="*", description="Unordered list marker")
    encoding: str = Field(default="utf-8", description="Encoding used when flushing to a sink")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that ``encoding`` names a known codec."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


def load_render_config(config_path: Path | None = None) -> RenderConfig:
    """Load render configuration from a YAML file.

    The options live under a top-level ``render:`` section.

    Args:
        config_path: Path of the YAML file. Defaults to ./mdjoin.yaml.

    Returns:
        RenderConfig with values from file or defaults

    Example:
        config = load_render_config(Path("mdjoin.yaml"))
        doc = Document("README.md", config=config)
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILE

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return RenderConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(f"Invalid config in {config_path}: expected a mapping")
    section = (data or {}).get("render") or {}
    try:
        return RenderConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid render config in {config_path}: {e}") from e
