"""
Catpoint Security

Decision logic for a home security alarm controller: arming modes, sensor
activity and a camera cat-detection signal determine the alarm status.
"""

__version__ = "1.0.0"

from .config_manager import ConfigManager
from .models import (
    AlarmStatus,
    ArmingStatus,
    SensorType,
    Sensor,
    SystemConfig
)
from .services import (
    SecurityRepositoryInterface,
    ImageServiceInterface,
    StatusListenerInterface,
    SecurityService,
    InMemorySecurityRepository,
    JsonFileSecurityRepository,
    FakeImageService
)
from .security_system import SecuritySystem

__all__ = [
    # Core management
    'ConfigManager',
    'SecuritySystem',

    # Data models
    'AlarmStatus',
    'ArmingStatus',
    'SensorType',
    'Sensor',
    'SystemConfig',

    # Services
    'SecurityRepositoryInterface',
    'ImageServiceInterface',
    'StatusListenerInterface',
    'SecurityService',
    'InMemorySecurityRepository',
    'JsonFileSecurityRepository',
    'FakeImageService'
]
