"""Integration tests for the assembled security system."""

import unittest
import tempfile
import shutil
import os
from unittest.mock import Mock
import sys

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.security_system import SecuritySystem
from catpoint_security.config_manager import ConfigManager
from catpoint_security.services.interfaces import ImageServiceInterface, StatusListenerInterface
from catpoint_security.services.security_repository import (
    InMemorySecurityRepository, JsonFileSecurityRepository
)
from catpoint_security.services.image_service import FakeImageService
from catpoint_security.models.security import AlarmStatus, ArmingStatus, Sensor, SensorType


class TestSecuritySystem(unittest.TestCase):
    """Test cases for SecuritySystem wiring and end-to-end behavior."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.config_manager = ConfigManager(os.path.join(self.test_dir, "config.json"))
        self.config_manager.update_config(
            repository_path=os.path.join(self.test_dir, "state.json"),
            log_dir=os.path.join(self.test_dir, "logs")
        )
        self.image_service = Mock(spec=ImageServiceInterface)
        self.image = np.zeros((224, 224, 3), dtype=np.uint8)

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def build(self, **kwargs):
        system = SecuritySystem(self.config_manager, configure_logging=False, **kwargs)
        self.addCleanup(system.shutdown)
        return system

    def test_builds_json_repository_by_default(self):
        system = self.build()
        self.assertIsInstance(system.repository, JsonFileSecurityRepository)
        self.assertIsInstance(system.image_service, FakeImageService)
        self.assertEqual(system.security_service.cat_confidence_threshold, 50.0)

    def test_builds_in_memory_repository_when_not_persisting(self):
        self.config_manager.update_config(persist_state=False)
        system = self.build()
        self.assertIsInstance(system.repository, InMemorySecurityRepository)
        self.assertNotIsInstance(system.repository, JsonFileSecurityRepository)

    def test_invalid_config_rejected(self):
        self.config_manager.update_config(cat_confidence_threshold=-1.0)
        with self.assertRaises(ValueError):
            SecuritySystem(self.config_manager, configure_logging=False)

    def test_non_numeric_threshold_rejected_as_invalid_config(self):
        self.config_manager.update_config(cat_confidence_threshold="high")
        with self.assertRaises(ValueError):
            SecuritySystem(self.config_manager, configure_logging=False)

    def test_threshold_change_reaches_service(self):
        system = self.build(image_service=self.image_service)
        self.image_service.image_contains_cat.return_value = False

        self.config_manager.update_config(cat_confidence_threshold=80.0)
        system.security_service.process_image(self.image)

        self.image_service.image_contains_cat.assert_called_once_with(self.image, 80.0)

    def test_intrusion_scenario(self):
        """Sensors escalate the alarm while armed, disarming clears it."""
        system = self.build(repository=InMemorySecurityRepository(),
                            image_service=self.image_service)
        service = system.security_service
        listener = Mock(spec=StatusListenerInterface)
        service.add_status_listener(listener)
        door = Sensor("door", SensorType.DOOR)
        window = Sensor("window", SensorType.WINDOW)
        service.add_sensor(door)
        service.add_sensor(window)

        service.set_arming_status(ArmingStatus.ARMED_AWAY)
        service.change_sensor_activation_status(door, True)
        self.assertEqual(service.get_alarm_status(), AlarmStatus.PENDING_ALARM)

        service.change_sensor_activation_status(door, False)
        self.assertEqual(service.get_alarm_status(), AlarmStatus.NO_ALARM)

        service.change_sensor_activation_status(door, True)
        service.change_sensor_activation_status(window, True)
        self.assertEqual(service.get_alarm_status(), AlarmStatus.ALARM)

        # An active alarm is not cleared by sensors going quiet
        service.change_sensor_activation_status(door, False)
        service.change_sensor_activation_status(window, False)
        self.assertEqual(service.get_alarm_status(), AlarmStatus.ALARM)

        service.set_arming_status(ArmingStatus.DISARMED)
        self.assertEqual(service.get_alarm_status(), AlarmStatus.NO_ALARM)
        self.assertEqual(service.get_arming_status(), ArmingStatus.DISARMED)

        statuses = [c.args[0] for c in listener.on_alarm_status_changed.call_args_list]
        self.assertEqual(statuses, [
            AlarmStatus.PENDING_ALARM,
            AlarmStatus.NO_ALARM,
            AlarmStatus.PENDING_ALARM,
            AlarmStatus.ALARM,
            AlarmStatus.NO_ALARM
        ])

    def test_cat_scenario(self):
        """A cat seen while armed home raises the alarm; arming home with a cat does too."""
        system = self.build(repository=InMemorySecurityRepository(),
                            image_service=self.image_service)
        service = system.security_service
        sensor = Sensor("hall", SensorType.MOTION, active=True)
        service.add_sensor(sensor)

        self.image_service.image_contains_cat.return_value = True
        service.process_image(self.image)
        self.assertTrue(service.is_camera_shows_cat())
        self.assertEqual(service.get_alarm_status(), AlarmStatus.NO_ALARM)

        service.set_arming_status(ArmingStatus.ARMED_HOME)
        self.assertEqual(service.get_alarm_status(), AlarmStatus.ALARM)
        self.assertFalse(sensor.active)

        self.image_service.image_contains_cat.return_value = False
        service.process_image(self.image)
        self.assertFalse(service.is_camera_shows_cat())
        self.assertEqual(service.get_alarm_status(), AlarmStatus.NO_ALARM)

    def test_state_persists_across_systems(self):
        system = self.build(image_service=self.image_service)
        sensor = Sensor("garage", SensorType.DOOR)
        system.security_service.add_sensor(sensor)
        system.security_service.set_arming_status(ArmingStatus.ARMED_AWAY)
        system.security_service.change_sensor_activation_status(sensor, True)

        restored = self.build(image_service=self.image_service)

        self.assertEqual(restored.security_service.get_arming_status(), ArmingStatus.ARMED_AWAY)
        self.assertEqual(restored.security_service.get_alarm_status(), AlarmStatus.PENDING_ALARM)
        stored = restored.security_service.get_sensors().pop()
        self.assertTrue(stored.active)


if __name__ == '__main__':
    unittest.main()
