"""Domain ports (interfaces/protocols)."""

from featurelines.domain.ports.locator_resolver import LocatorResolverPort

__all__ = [
    "LocatorResolverPort",
]
