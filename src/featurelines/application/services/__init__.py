"""Application services for feature identifiers.

FeatureWithLinesParser is the main facade for parsing URI[:LINE]* text.
"""

from featurelines.application.services.parser import (
    FEATURE_COLON_LINE_PATTERN,
    FeatureWithLinesParser,
    create_feature_with_lines,
    parse_feature_with_explicit_lines,
    parse_feature_with_lines,
    parse_rerun,
)

__all__ = [
    "FEATURE_COLON_LINE_PATTERN",
    "FeatureWithLinesParser",
    "create_feature_with_lines",
    "parse_feature_with_explicit_lines",
    "parse_feature_with_lines",
    "parse_rerun",
]
