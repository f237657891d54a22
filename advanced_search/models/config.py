"""
Host configuration for the advanced search extension.
"""
import json
import os
from pathlib import Path
from typing import List, Dict, Any, Optional

from loguru import logger
from pydantic import BaseModel, Field, field_validator


CONFIG_ENV_VAR = "ADVANCED_SEARCH_CONFIG"


class HostSearchConfig(BaseModel):
    """Values the extension reads from the host wiki's configuration"""
    # Extensions offered in the file type filter
    file_extensions: List[str] = Field(
        default_factory=lambda: ["png", "gif", "jpg", "jpeg", "webp"]
    )
    # Passed to the client verbatim
    namespace_presets: Dict[str, Any] = Field(default_factory=dict)
    deepcat_enabled: bool = False

    # Search engine configuration
    default_namespaces: List[int] = Field(default_factory=lambda: [0])
    searchable_namespaces: Dict[int, str] = Field(default_factory=lambda: {0: ""})

    # Data behind the bundled static providers
    extension_mime_types: Dict[str, str] = Field(default_factory=dict)
    tooltips: Dict[str, str] = Field(default_factory=dict)
    languages: Optional[Dict[str, str]] = None  # None = language integration not loaded

    @field_validator("default_namespaces")
    @classmethod
    def _unique_non_negative(cls, value: List[int]) -> List[int]:
        if any(ns < 0 for ns in value):
            raise ValueError("default_namespaces must be non-negative")
        return list(dict.fromkeys(value))


def get_config_path() -> Optional[Path]:
    """Config file named by the environment, if any."""
    path = os.getenv(CONFIG_ENV_VAR)
    return Path(path) if path else None


def load_config(config_path: Optional[Path] = None) -> HostSearchConfig:
    """
    Load host configuration from a JSON file, or fall back to defaults.

    Args:
        config_path: Optional path to the config file. Uses $ADVANCED_SEARCH_CONFIG if not provided.
    """
    path = config_path or get_config_path()

    if path and path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            config = HostSearchConfig.model_validate(data)
            logger.info(f"Loaded search config from {path}")
            return config
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Failed to load config from {path}: {e}. Using default configuration.")

    return HostSearchConfig()
