"""Configuration components for the security system."""

from .defaults import (
    DEFAULT_CONFIG,
    CAT_CONFIDENCE_THRESHOLD,
    SYSTEM_CONSTANTS,
    DEFAULT_PATHS
)

__all__ = [
    'DEFAULT_CONFIG',
    'CAT_CONFIDENCE_THRESHOLD',
    'SYSTEM_CONSTANTS',
    'DEFAULT_PATHS'
]
