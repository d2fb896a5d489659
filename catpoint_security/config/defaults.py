"""Default configuration values and constants."""

from typing import Dict, Any

# Confidence (percent) an image must reach to count as showing a cat
CAT_CONFIDENCE_THRESHOLD = 50.0

# Default system configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    # Image analysis settings
    "cat_confidence_threshold": CAT_CONFIDENCE_THRESHOLD,
    "image_service_seed": None,

    # Storage settings
    "persist_state": True,
    "repository_path": "data/security_state.json",

    # Logging settings
    "log_level": "INFO",
    "log_dir": "logs"
}

# System constants
SYSTEM_CONSTANTS = {
    "STATE_WRITE_RETRY_ATTEMPTS": 3,
    "STATE_WRITE_RETRY_DELAY_SECONDS": 0.1,
    "LOG_ROTATION_SIZE_MB": 10,
    "LOG_BACKUP_COUNT": 5
}

# File paths and directories
DEFAULT_PATHS = {
    "config_file": "config.json"
}
