"""Data models for the security system."""

from .security import AlarmStatus, ArmingStatus, SensorType, Sensor
from .config import SystemConfig

__all__ = ['AlarmStatus', 'ArmingStatus', 'SensorType', 'Sensor', 'SystemConfig']
