"""Feature resource identifier value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class FeatureUri:
    """Absolute URI of a feature resource.

    Produced by a locator resolver, opaque to the parser. Compared and
    hashed structurally. Equivalent spellings are normalized at
    construction so that str() reads back to an equal value:
    file:/x → file:///x, classpath:/x → classpath:x.

    Attributes:
        scheme: URI scheme, lower-cased (file, classpath, ...)
        scheme_specific_part: Everything after the first colon
    """

    scheme: str
    scheme_specific_part: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.scheme:
            raise ValueError("scheme must be non-empty string")
        scheme = self.scheme.lower()
        scheme_specific_part = _normalize_scheme_specific_part(scheme, self.scheme_specific_part)
        if not scheme_specific_part:
            raise ValueError("scheme_specific_part must be non-empty string")
        object.__setattr__(self, "scheme", scheme)
        object.__setattr__(self, "scheme_specific_part", scheme_specific_part)

    @classmethod
    def from_string(cls, uri: str) -> FeatureUri:
        """Split an already absolute URI string at its first colon."""
        scheme, sep, rest = uri.partition(":")
        if not sep:
            raise ValueError(f"uri must contain a scheme, got {uri!r}")
        return cls(scheme=scheme, scheme_specific_part=rest)

    def is_feature(self, suffix: str) -> bool:
        """Check if URI references a single feature file."""
        return self.scheme_specific_part.endswith(suffix)

    def __str__(self) -> str:
        """Format as scheme:scheme_specific_part."""
        return f"{self.scheme}:{self.scheme_specific_part}"


def _normalize_scheme_specific_part(scheme: str, scheme_specific_part: str) -> str:
    """Collapse equivalent spellings of the same resource."""
    match scheme:
        case "classpath":
            return scheme_specific_part.lstrip("/")
        case "file" if scheme_specific_part.startswith("/") and not scheme_specific_part.startswith("//"):
            # file:/x and file:///x name the same resource
            return f"//{scheme_specific_part}"
    return scheme_specific_part
