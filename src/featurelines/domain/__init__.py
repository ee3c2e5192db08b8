"""featurelines domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, types, collections.abc
"""

from featurelines.domain.exceptions import (
    FeatureLinesError,
    InvalidFeatureLocatorError,
    InvalidLineNumberError,
    MalformedIdentifierError,
)
from featurelines.domain.model import (
    FeatureSelection,
    FeatureUri,
    FeatureWithLines,
    ResolverConfig,
)
from featurelines.domain.ports import LocatorResolverPort

__all__ = [
    # Exceptions
    "FeatureLinesError",
    "MalformedIdentifierError",
    "InvalidFeatureLocatorError",
    "InvalidLineNumberError",
    # Value objects
    "FeatureUri",
    "FeatureWithLines",
    "FeatureSelection",
    # Configuration
    "ResolverConfig",
    # Ports
    "LocatorResolverPort",
]
