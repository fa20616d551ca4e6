"""
Config Loader

Loads editor settings (grid layout, spawn region, logging) from YAML.
Missing files fall back to defaults; malformed ones are rejected.
"""

import os
import yaml
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "editor.yaml"

# Levels understood by both logging and uvicorn
LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class LayoutConfig(BaseModel):
    """Grid used by the auto layout"""
    columns: int = Field(default=3, ge=1)
    spacing_x: float = 200
    spacing_y: float = 100
    origin_x: float = 100
    origin_y: float = 50


class SpawnConfig(BaseModel):
    """Region where new nodes appear before any layout"""
    min_x: float = 50
    min_y: float = 50
    width: float = Field(default=300, ge=0)
    height: float = Field(default=300, ge=0)


class EditorConfig(BaseModel):
    """Complete editor configuration"""
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    spawn: SpawnConfig = Field(default_factory=SpawnConfig)
    node_id_prefix: str = "node"
    log_level: LogLevel = "INFO"
    seed: Optional[int] = None  # Fixed seed makes spawn positions reproducible

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, prefix: str = "EDITOR") -> "EditorConfig":
        """
        Create config from environment variables.

        Environment Variables:
            EDITOR_CONFIG_DIR: Directory holding editor.yaml (default: "config")
            LOG_LEVEL: Overrides log_level from the file

        Raises:
            ValueError: If the file or LOG_LEVEL is invalid
        """
        config_dir = Path(os.getenv(f"{prefix}_CONFIG_DIR", "config"))
        config = ConfigLoader(config_dir).load()

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            try:
                config = EditorConfig(**{**config.model_dump(), "log_level": log_level})
            except ValidationError as e:
                raise ValueError(f"Invalid LOG_LEVEL {log_level!r}: {e}") from e

        return config


class ConfigLoader:
    """
    Loads editor config from YAML.

    Example usage:
        loader = ConfigLoader(Path("config"))
        config = loader.load()          # config/editor.yaml

        print(config.layout.columns)    # 3
    """

    def __init__(self, config_dir: Path):
        """
        Initialize loader with config directory.

        Args:
            config_dir: Directory that contains the editor YAML file
        """
        self.config_dir = Path(config_dir)
        logger.debug(f"Initialized ConfigLoader with config_dir: {self.config_dir}")

    def load(self, name: str = DEFAULT_CONFIG_FILE) -> EditorConfig:
        """
        Load one YAML file into an EditorConfig.

        Args:
            name: File name inside config_dir

        Returns:
            Parsed config, or defaults when the file does not exist

        Raises:
            ValueError: If the file cannot be parsed or fails validation
        """
        path = self.config_dir / name

        if not path.exists():
            logger.info(f"No config at {path}, using defaults")
            return EditorConfig()

        try:
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load {path}: {e}")
            raise ValueError(f"Failed to load {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(
                f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}"
            )

        try:
            config = EditorConfig(**raw)
        except ValidationError as e:
            logger.error(f"Invalid config in {path}: {e}")
            raise ValueError(f"Invalid config in {path}: {e}") from e

        logger.info(f"Loaded editor config from {path}")
        return config
