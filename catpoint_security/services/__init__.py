"""Services for the security system."""

from .interfaces import (
    SecurityRepositoryInterface,
    ImageServiceInterface,
    StatusListenerInterface
)
from .security_service import SecurityService
from .security_repository import InMemorySecurityRepository, JsonFileSecurityRepository
from .image_service import FakeImageService

__all__ = [
    'SecurityRepositoryInterface',
    'ImageServiceInterface',
    'StatusListenerInterface',
    'SecurityService',
    'InMemorySecurityRepository',
    'JsonFileSecurityRepository',
    'FakeImageService'
]
