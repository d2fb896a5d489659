"""Security system data models."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Dict, Any


class AlarmStatus(Enum):
    """Overall alert level of the system."""
    NO_ALARM = "no_alarm"
    PENDING_ALARM = "pending_alarm"
    ALARM = "alarm"

    @property
    def description(self) -> str:
        return _ALARM_DISPLAY[self][0]

    @property
    def color(self) -> str:
        return _ALARM_DISPLAY[self][1]


class ArmingStatus(Enum):
    """Whether the system is monitoring its sensors."""
    DISARMED = "disarmed"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"

    @property
    def description(self) -> str:
        return _ARMING_DISPLAY[self][0]

    @property
    def color(self) -> str:
        return _ARMING_DISPLAY[self][1]


class SensorType(Enum):
    """Kind of device a sensor is attached to."""
    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"


_ALARM_DISPLAY = {
    AlarmStatus.NO_ALARM: ("Cool and Good", "#47F04A"),
    AlarmStatus.PENDING_ALARM: ("I'm in Danger...", "#F0DC4A"),
    AlarmStatus.ALARM: ("Awooga!", "#F04A4A"),
}

_ARMING_DISPLAY = {
    ArmingStatus.DISARMED: ("Disarmed", "#47F04A"),
    ArmingStatus.ARMED_HOME: ("Armed - At Home", "#F04A4A"),
    ArmingStatus.ARMED_AWAY: ("Armed - Away", "#A04AF0"),
}


@total_ordering
@dataclass(eq=False)
class Sensor:
    """A named, typed device with an activation flag.

    Sensors are identified by ``sensor_id``; two sensors with the same name
    are still different devices. Ordering is by name, then id.
    """
    name: str
    sensor_type: SensorType
    active: bool = False
    sensor_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.sensor_id == other.sensor_id

    def __lt__(self, other: "Sensor") -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return (self.name, self.sensor_id) < (other.name, other.sensor_id)

    def __hash__(self) -> int:
        return hash(self.sensor_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize sensor for storage."""
        return {
            "sensor_id": self.sensor_id,
            "name": self.name,
            "sensor_type": self.sensor_type.value,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sensor":
        """Build a sensor from its stored representation."""
        return cls(
            name=data["name"],
            sensor_type=SensorType(data["sensor_type"]),
            active=bool(data.get("active", False)),
            sensor_id=data["sensor_id"],
        )
