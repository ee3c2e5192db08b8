"""Application layer for feature identifiers.

Components:
- services: Parsing facade (FeatureWithLinesParser)
- reporters: Output formatting (Rerun, Console)
"""

from featurelines.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    RerunReporter,
    ReporterProtocol,
)
from featurelines.application.services import (
    FeatureWithLinesParser,
    create_feature_with_lines,
    parse_feature_with_explicit_lines,
    parse_feature_with_lines,
    parse_rerun,
)

__all__ = [
    # Services
    "FeatureWithLinesParser",
    "create_feature_with_lines",
    "parse_feature_with_explicit_lines",
    "parse_feature_with_lines",
    "parse_rerun",
    # Reporters
    "ReporterProtocol",
    "RerunReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
