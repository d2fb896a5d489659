"""Wires configuration, repository, image service and security service together."""

from typing import Optional

from .config_manager import ConfigManager
from .logging_config import get_logger, setup_logging
from .models.config import SystemConfig
from .services.image_service import FakeImageService
from .services.interfaces import SecurityRepositoryInterface, ImageServiceInterface
from .services.security_repository import InMemorySecurityRepository, JsonFileSecurityRepository
from .services.security_service import SecurityService

logger = get_logger("security_system")


class SecuritySystem:
    """Builds a ready-to-use security service from configuration."""

    def __init__(self,
                 config_manager: Optional[ConfigManager] = None,
                 repository: Optional[SecurityRepositoryInterface] = None,
                 image_service: Optional[ImageServiceInterface] = None,
                 configure_logging: bool = True):
        self.config_manager = config_manager or ConfigManager()
        self.config = self.config_manager.get_config()

        if not self.config_manager.validate_config():
            raise ValueError(f"Invalid configuration in {self.config_manager.config_path}")

        if configure_logging:
            setup_logging(self.config.log_level, self.config.log_dir)

        self.repository = repository or self._build_repository(self.config)
        self.image_service = image_service or FakeImageService(self.config.image_service_seed)
        self.security_service = SecurityService(
            self.repository,
            self.image_service,
            cat_confidence_threshold=self.config.cat_confidence_threshold
        )

        self.config_manager.register_change_callback(self._on_config_changed)

        logger.info(f"Security system initialized with {type(self.repository).__name__}")

    @staticmethod
    def _build_repository(config: SystemConfig) -> SecurityRepositoryInterface:
        if config.persist_state:
            return JsonFileSecurityRepository(config.repository_path)
        return InMemorySecurityRepository()

    def _on_config_changed(self, config: SystemConfig) -> None:
        """Apply config changes that can take effect without a rebuild."""
        self.config = config
        self.security_service.set_cat_confidence_threshold(config.cat_confidence_threshold)

    def shutdown(self) -> None:
        self.config_manager.unregister_change_callback(self._on_config_changed)
        logger.info("Security system shut down")
