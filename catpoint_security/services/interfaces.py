"""Service interfaces and abstract base classes."""

from abc import ABC, abstractmethod
from typing import Set

import numpy as np

from ..models.security import AlarmStatus, ArmingStatus, Sensor


class SecurityRepositoryInterface(ABC):
    """Interface for the store holding system state and sensors."""

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Get current arming status."""
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Persist arming status."""
        pass

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Get current alarm status."""
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Persist alarm status."""
        pass

    @abstractmethod
    def is_camera_shows_cat(self) -> bool:
        """Check whether the last processed image showed a cat."""
        pass

    @abstractmethod
    def set_camera_shows_cat(self, cat: bool) -> None:
        """Persist the cat flag."""
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Get all known sensors."""
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Add a sensor."""
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Remove a sensor."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist a sensor's current state."""
        pass


class ImageServiceInterface(ABC):
    """Interface for image classification."""

    @abstractmethod
    def image_contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        """Check whether image contains a cat above the confidence threshold (percent)."""
        pass


class StatusListenerInterface(ABC):
    """Interface for observers of security system changes."""

    @abstractmethod
    def on_alarm_status_changed(self, status: AlarmStatus) -> None:
        """Called after the alarm status has been set."""
        pass

    @abstractmethod
    def on_cat_detected(self, cat_present: bool) -> None:
        """Called with the result of every processed image."""
        pass
