"""Unit tests for configuration manager."""

import unittest
import os
import json
import tempfile
import shutil
from dataclasses import asdict
from unittest.mock import Mock
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.config_manager import ConfigManager
from catpoint_security.models.config import SystemConfig
from catpoint_security.config.defaults import DEFAULT_CONFIG


class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, "test_config.json")
        self.config_manager = ConfigManager(self.config_path)

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_initialization(self):
        """Test configuration manager initialization."""
        self.assertEqual(self.config_manager.config_path, self.config_path)
        self.assertTrue(os.path.exists(self.config_path))
        self.assertEqual(self.config_manager.get_config(), SystemConfig())

    def test_load_save_config(self):
        """Test loading and saving configuration."""
        self.config_manager.update_config(cat_confidence_threshold=80.0)

        new_manager = ConfigManager(self.config_path)
        self.assertEqual(new_manager.get_config().cat_confidence_threshold, 80.0)

    def test_update_config(self):
        """Test updating configuration."""
        self.config_manager.update_config(
            cat_confidence_threshold=65.0,
            persist_state=False
        )
        config = self.config_manager.get_config()
        self.assertEqual(config.cat_confidence_threshold, 65.0)
        self.assertFalse(config.persist_state)

        # Invalid key should be ignored
        self.config_manager.update_config(invalid_key="value")
        self.assertFalse(hasattr(self.config_manager.get_config(), "invalid_key"))

    def test_corrupt_config_uses_defaults(self):
        with open(self.config_path, 'w') as f:
            f.write("{broken")

        manager = ConfigManager(self.config_path)

        self.assertEqual(manager.get_config(), SystemConfig())

    def test_unknown_key_in_file_uses_defaults(self):
        with open(self.config_path, 'w') as f:
            json.dump({"cat_confidence_threshold": 70.0, "bogus": 1}, f)

        manager = ConfigManager(self.config_path)

        self.assertEqual(manager.get_config().cat_confidence_threshold, 50.0)

    def test_validate_config(self):
        """Test configuration validation."""
        self.assertTrue(self.config_manager.validate_config())

        self.config_manager.update_config(cat_confidence_threshold=101.0)
        self.assertFalse(self.config_manager.validate_config())

        self.config_manager.update_config(cat_confidence_threshold="high")
        self.assertFalse(self.config_manager.validate_config())

        self.config_manager.update_config(cat_confidence_threshold=True)
        self.assertFalse(self.config_manager.validate_config())

        self.config_manager.update_config(cat_confidence_threshold=50.0, log_level="LOUD")
        self.assertFalse(self.config_manager.validate_config())

        self.config_manager.update_config(log_level="debug", repository_path="")
        self.assertFalse(self.config_manager.validate_config())

        self.config_manager.update_config(persist_state=False)
        self.assertTrue(self.config_manager.validate_config())

    def test_non_numeric_threshold_in_file_is_invalid(self):
        with open(self.config_path, 'w') as f:
            json.dump({"cat_confidence_threshold": "high"}, f)

        manager = ConfigManager(self.config_path)

        self.assertFalse(manager.validate_config())

    def test_defaults_match_default_config(self):
        self.assertEqual(asdict(SystemConfig()), DEFAULT_CONFIG)

    def test_change_callbacks(self):
        callback = Mock()
        self.config_manager.register_change_callback(callback)
        self.config_manager.register_change_callback(callback)

        self.config_manager.update_config(cat_confidence_threshold=60.0)
        callback.assert_called_once_with(self.config_manager.get_config())

        self.config_manager.unregister_change_callback(callback)
        self.config_manager.update_config(cat_confidence_threshold=70.0)
        callback.assert_called_once()


if __name__ == '__main__':
    unittest.main()
