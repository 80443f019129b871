"""
Store policy service - attendance radius resolution
"""
from typing import Optional

from sodam.config import Settings
from sodam.core.exceptions import InvalidOperationError
from sodam.instrumentation.performance import performance_log


class StorePolicyService:
    """Store-level defaults taken from the settings snapshot"""

    def __init__(self, settings: Settings):
        self.settings = settings

    def default_radius(self) -> int:
        return self.settings.get_store_default_radius()

    @performance_log
    def resolve_radius(self, radius: Optional[int] = None) -> int:
        """
        Radius a new store is registered with

        Args:
            radius: Requested radius in meters, or None for the configured default

        Raises:
            InvalidOperationError: Radius is zero or negative
        """
        if radius is None:
            return self.default_radius()
        if radius <= 0:
            raise InvalidOperationError(
                "Radius must be a positive number of meters",
                details={"radius": radius}
            )
        return radius
