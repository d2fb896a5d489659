"""Repository implementations for security system state."""

import json
import os
from typing import Dict, Set, Any

from ..config.defaults import SYSTEM_CONSTANTS
from ..logging_config import get_logger
from ..models.security import AlarmStatus, ArmingStatus, Sensor
from ..utils import ensure_directory_exists
from .error_decorators import retry_on_error
from .interfaces import SecurityRepositoryInterface

logger = get_logger("security_repository")


class InMemorySecurityRepository(SecurityRepositoryInterface):
    """Keeps system state in memory for the lifetime of the process."""

    def __init__(self):
        self.arming_status = ArmingStatus.DISARMED
        self.alarm_status = AlarmStatus.NO_ALARM
        self.camera_shows_cat = False
        self._sensors: Dict[str, Sensor] = {}

    def get_arming_status(self) -> ArmingStatus:
        return self.arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self.arming_status = arming_status
        self._state_changed()

    def get_alarm_status(self) -> AlarmStatus:
        return self.alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self.alarm_status = alarm_status
        self._state_changed()

    def is_camera_shows_cat(self) -> bool:
        return self.camera_shows_cat

    def set_camera_shows_cat(self, cat: bool) -> None:
        self.camera_shows_cat = cat
        self._state_changed()

    def get_sensors(self) -> Set[Sensor]:
        return set(self._sensors.values())

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.sensor_id] = sensor
        logger.debug(f"Sensor added: {sensor.name} ({sensor.sensor_type.value})")
        self._state_changed()

    def remove_sensor(self, sensor: Sensor) -> None:
        if self._sensors.pop(sensor.sensor_id, None) is not None:
            logger.debug(f"Sensor removed: {sensor.name}")
            self._state_changed()

    def update_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.sensor_id] = sensor
        self._state_changed()

    def _state_changed(self) -> None:
        """Hook called after every mutation."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the whole state."""
        return {
            "arming_status": self.arming_status.value,
            "alarm_status": self.alarm_status.value,
            "camera_shows_cat": self.camera_shows_cat,
            "sensors": [sensor.to_dict() for sensor in sorted(self._sensors.values())]
        }


class JsonFileSecurityRepository(InMemorySecurityRepository):
    """In-memory repository that writes its state to a JSON file on every change."""

    def __init__(self, state_path: str):
        super().__init__()
        self.state_path = state_path
        self._load()

    def _load(self) -> None:
        """Load state from file, keeping defaults if it is missing or unreadable."""
        if not os.path.exists(self.state_path):
            logger.info(f"No saved state at {self.state_path}, starting with defaults")
            return

        try:
            with open(self.state_path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            arming_status = ArmingStatus(data.get("arming_status", ArmingStatus.DISARMED.value))
            alarm_status = AlarmStatus(data.get("alarm_status", AlarmStatus.NO_ALARM.value))
            camera_shows_cat = bool(data.get("camera_shows_cat", False))
            sensors = [Sensor.from_dict(item) for item in data.get("sensors", [])]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error loading state from {self.state_path}: {e}. Using defaults.")
            return

        self.arming_status = arming_status
        self.alarm_status = alarm_status
        self.camera_shows_cat = camera_shows_cat
        self._sensors = {sensor.sensor_id: sensor for sensor in sensors}
        logger.info(f"Loaded state from {self.state_path} with {len(self._sensors)} sensors")

    def _state_changed(self) -> None:
        self._save()

    @retry_on_error(max_attempts=SYSTEM_CONSTANTS["STATE_WRITE_RETRY_ATTEMPTS"],
                    delay=SYSTEM_CONSTANTS["STATE_WRITE_RETRY_DELAY_SECONDS"],
                    exceptions=[OSError])
    def _save(self) -> None:
        """Write the whole state to file."""
        directory = os.path.dirname(self.state_path)
        if directory:
            ensure_directory_exists(directory)

        # Write then rename so a failed write never leaves a truncated file
        tmp_path = f"{self.state_path}.tmp"
        with open(tmp_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
        os.replace(tmp_path, self.state_path)
