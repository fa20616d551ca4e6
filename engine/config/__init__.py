"""
Config Module

YAML editor configuration loading and validation.
"""

from .loader import ConfigLoader, EditorConfig, LayoutConfig, SpawnConfig

__all__ = [
    "ConfigLoader",
    "EditorConfig",
    "LayoutConfig",
    "SpawnConfig",
]
