"""Configuration data models."""

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import DEFAULT_CONFIG


@dataclass
class SystemConfig:
    """System configuration settings."""
    # Image analysis settings
    cat_confidence_threshold: float = DEFAULT_CONFIG["cat_confidence_threshold"]  # percent
    image_service_seed: Optional[int] = DEFAULT_CONFIG["image_service_seed"]

    # Storage settings
    persist_state: bool = DEFAULT_CONFIG["persist_state"]
    repository_path: str = DEFAULT_CONFIG["repository_path"]

    # Logging settings
    log_level: str = DEFAULT_CONFIG["log_level"]
    log_dir: str = DEFAULT_CONFIG["log_dir"]
