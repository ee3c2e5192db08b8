"""Locator resolvers implementing LocatorResolverPort."""

from featurelines.infrastructure.resolvers.feature_identifier import FeatureIdentifierResolver

__all__ = [
    "FeatureIdentifierResolver",
]
