"""Image classification services."""

from typing import Optional

import numpy as np

from ..logging_config import get_logger
from .interfaces import ImageServiceInterface

logger = get_logger("image_service")


class FakeImageService(ImageServiceInterface):
    """Stand-in classifier that answers at random.

    Useful for exercising the security service without a real model. Pass
    a ``seed`` for repeatable answers.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def image_contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        if image is None:
            raise ValueError("No image provided")

        result = bool(self.rng.integers(0, 2))
        logger.debug(f"Fake classification at {confidence_threshold}% threshold: {result}")
        return result
