"""Domain model value objects."""

from featurelines.domain.model.configuration import DEFAULT_FEATURE_SUFFIX, ResolverConfig
from featurelines.domain.model.feature_uri import FeatureUri
from featurelines.domain.model.feature_with_lines import FeatureWithLines
from featurelines.domain.model.line_set import (
    MAX_LINE,
    format_lines,
    normalize_lines,
    parse_line,
    parse_lines,
)
from featurelines.domain.model.selection import FeatureSelection

__all__ = [
    # Value objects
    "FeatureUri",
    "FeatureWithLines",
    "FeatureSelection",
    # Line set
    "MAX_LINE",
    "format_lines",
    "normalize_lines",
    "parse_line",
    "parse_lines",
    # Configuration
    "DEFAULT_FEATURE_SUFFIX",
    "ResolverConfig",
]
