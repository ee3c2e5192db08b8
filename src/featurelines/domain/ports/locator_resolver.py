"""Locator resolver port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from featurelines.domain.model.feature_uri import FeatureUri


class LocatorResolverPort(ABC):
    """Port for turning locator text into a feature URI.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def resolve(self, locator: str) -> FeatureUri:
        """Resolve locator text.

        Args:
            locator: File path or URI, without line markers

        Returns:
            Canonical absolute feature URI

        Raises:
            ValueError: If locator is malformed or not a feature
                (FeatureLinesError subclasses are ValueErrors)
        """
        ...
