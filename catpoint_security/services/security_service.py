"""Security service holding the alarm decision logic."""

import logging
from typing import Optional, Set

import numpy as np

from ..config.defaults import CAT_CONFIDENCE_THRESHOLD
from ..logging_config import get_logger, log_with_context
from ..models.security import AlarmStatus, ArmingStatus, Sensor
from .error_decorators import log_execution_time
from .interfaces import (
    SecurityRepositoryInterface,
    ImageServiceInterface,
    StatusListenerInterface
)

logger = get_logger("security_service")


class SecurityService:
    """Receives information about changes to the security system.

    Forwards updates to the repository and decides how the alarm status
    changes. All alarm status writes go through :meth:`set_alarm_status`,
    which also notifies the registered listeners.

    Collaborator errors are not caught here; they propagate to the caller.
    """

    def __init__(self,
                 security_repository: SecurityRepositoryInterface,
                 image_service: ImageServiceInterface,
                 cat_confidence_threshold: float = CAT_CONFIDENCE_THRESHOLD):
        self.security_repository = security_repository
        self.image_service = image_service
        self.cat_confidence_threshold = cat_confidence_threshold
        self.status_listeners: Set[StatusListenerInterface] = set()

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Set the arming status, which may also change the alarm status."""
        logger.info(f"Arming status requested: {arming_status.value}")

        if arming_status == ArmingStatus.DISARMED:
            self.set_alarm_status(AlarmStatus.NO_ALARM)
        elif arming_status == ArmingStatus.ARMED_HOME and self.is_camera_shows_cat():
            self._set_all_sensors_inactive()
            self.set_alarm_status(AlarmStatus.ALARM)
        else:
            self._set_all_sensors_inactive()

        self.security_repository.set_arming_status(arming_status)

    def is_camera_shows_cat(self) -> bool:
        return self.security_repository.is_camera_shows_cat()

    def _set_all_sensors_inactive(self) -> None:
        """Reset every sensor to inactive in name order."""
        for sensor in sorted(self.get_sensors()):
            self.change_sensor_activation_status(sensor, False)

    def _all_sensors_inactive(self) -> bool:
        return all(not sensor.active for sensor in self.get_sensors())

    def _cat_detected(self, cat: bool) -> None:
        """Update alarm status from an image classification result."""
        if cat and self.get_arming_status() == ArmingStatus.ARMED_HOME:
            self.set_alarm_status(AlarmStatus.ALARM)
        elif not cat and self._all_sensors_inactive():
            self.set_alarm_status(AlarmStatus.NO_ALARM)

        for listener in list(self.status_listeners):
            listener.on_cat_detected(cat)
        self.security_repository.set_camera_shows_cat(cat)

    def add_status_listener(self, status_listener: StatusListenerInterface) -> None:
        """Register a listener for alarm system updates."""
        self.status_listeners.add(status_listener)

    def remove_status_listener(self, status_listener: StatusListenerInterface) -> None:
        self.status_listeners.discard(status_listener)

    def set_alarm_status(self, status: AlarmStatus) -> None:
        """Change the alarm status of the system and notify all listeners."""
        self.security_repository.set_alarm_status(status)
        logger.info(f"Alarm status set to {status.value}")
        for listener in list(self.status_listeners):
            listener.on_alarm_status_changed(status)

    def _handle_sensor_activated(self) -> None:
        if self.security_repository.get_arming_status() == ArmingStatus.DISARMED:
            return  # no problem if the system is disarmed

        alarm_status = self.security_repository.get_alarm_status()
        if alarm_status == AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif alarm_status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_reactivated(self) -> None:
        if self.security_repository.get_alarm_status() == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_deactivated(self) -> None:
        alarm_status = self.security_repository.get_alarm_status()
        if alarm_status == AlarmStatus.PENDING_ALARM:
            if self._all_sensors_inactive():
                self.set_alarm_status(AlarmStatus.NO_ALARM)
        # ALARM stays: an active alarm is never cleared by a sensor going quiet

    def _handle_sensor_redeactivated(self) -> None:
        """Sensor was already inactive; nothing changes."""
        logger.debug("Sensor already inactive, alarm status unchanged")

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Change the activation status for a sensor and update alarm status if necessary."""
        log_with_context(logger, logging.DEBUG, "Sensor activation change", {
            "sensor": sensor.name,
            "current": sensor.active,
            "requested": active
        })

        if not sensor.active and active:
            sensor.active = True
            self._handle_sensor_activated()
        elif sensor.active and active:
            self._handle_sensor_reactivated()
        elif sensor.active and not active:
            sensor.active = False
            self._handle_sensor_deactivated()
        else:
            self._handle_sensor_redeactivated()

        self.security_repository.update_sensor(sensor)

    @log_execution_time("security_service")
    def process_image(self, current_camera_image: np.ndarray) -> None:
        """Analyze a camera image for cats and update the alarm status accordingly."""
        cat = self.image_service.image_contains_cat(current_camera_image,
                                                    self.cat_confidence_threshold)
        logger.info(f"Image processed, cat detected: {cat}")
        self._cat_detected(cat)

    def get_alarm_status(self) -> AlarmStatus:
        return self.security_repository.get_alarm_status()

    def get_sensors(self) -> Set[Sensor]:
        return self.security_repository.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        self.security_repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self.security_repository.remove_sensor(sensor)

    def get_arming_status(self) -> ArmingStatus:
        return self.security_repository.get_arming_status()

    def set_cat_confidence_threshold(self, threshold: Optional[float]) -> None:
        """Set the image confidence threshold (percent)."""
        if threshold is None:
            threshold = CAT_CONFIDENCE_THRESHOLD
        self.cat_confidence_threshold = max(0.0, min(100.0, threshold))
        logger.info(f"Cat confidence threshold set to {self.cat_confidence_threshold}")
