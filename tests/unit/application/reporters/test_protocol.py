"""Tests for ReporterProtocol conformance of built-in reporters."""

from featurelines.application.reporters import ConsoleReporter, RerunReporter, ReporterProtocol
from tests.factories import make_feature, make_selection


class TestReporterProtocol:
    """Built-in reporters share one interface."""

    def test_all_reporters_return_str(self) -> None:
        reporters: list[ReporterProtocol] = [RerunReporter(), ConsoleReporter()]
        selection = make_selection(make_feature("/a.feature", 1))
        for reporter in reporters:
            assert "file:///a.feature" in reporter.report(selection)
