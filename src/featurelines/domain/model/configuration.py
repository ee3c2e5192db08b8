"""Locator resolution configuration.

None = use the default, value = override.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_FEATURE_SUFFIX = ".feature"


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Configuration DTO for the default locator resolver.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        base_dir: Directory relative paths are anchored at. None = current directory.
        feature_suffix: Suffix a URI must end with to reference a single feature.
    """

    base_dir: Path | None = None
    feature_suffix: str = DEFAULT_FEATURE_SUFFIX

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.feature_suffix:
            raise ValueError("feature_suffix must be non-empty string")
        if not self.feature_suffix.startswith("."):
            raise ValueError(f"feature_suffix must start with '.', got {self.feature_suffix!r}")
        if self.base_dir is not None and not self.base_dir.is_absolute():
            raise ValueError(f"base_dir must be absolute, got {self.base_dir}")
