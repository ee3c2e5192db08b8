"""featurelines - parse URI[:LINE]* identifiers of scenarios in feature files."""

__version__ = "0.1.0"

import logging

from featurelines.application import (
    ConsoleReporter,
    FeatureWithLinesParser,
    RerunReporter,
    create_feature_with_lines,
    parse_feature_with_explicit_lines,
    parse_feature_with_lines,
    parse_rerun,
)
from featurelines.domain import (
    FeatureLinesError,
    FeatureSelection,
    FeatureUri,
    FeatureWithLines,
    InvalidFeatureLocatorError,
    InvalidLineNumberError,
    MalformedIdentifierError,
    ResolverConfig,
)
from featurelines.infrastructure.resolvers import FeatureIdentifierResolver

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Value objects
    "FeatureUri",
    "FeatureWithLines",
    "FeatureSelection",
    # Parsing
    "FeatureWithLinesParser",
    "FeatureIdentifierResolver",
    "ResolverConfig",
    "create_feature_with_lines",
    "parse_feature_with_explicit_lines",
    "parse_feature_with_lines",
    "parse_rerun",
    # Reporters
    "RerunReporter",
    "ConsoleReporter",
    # Exceptions
    "FeatureLinesError",
    "MalformedIdentifierError",
    "InvalidFeatureLocatorError",
    "InvalidLineNumberError",
]
