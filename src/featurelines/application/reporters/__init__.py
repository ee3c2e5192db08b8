"""Reporters for feature selections.

RerunReporter uses stdlib only, ConsoleReporter renders with rich.
"""

from featurelines.application.reporters.console import ConsoleConfig, ConsoleReporter
from featurelines.application.reporters.protocol import ReporterProtocol
from featurelines.application.reporters.rerun import RerunReporter

__all__ = [
    "ReporterProtocol",
    "RerunReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
