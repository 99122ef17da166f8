"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and customization
- ConsoleReporter report() output format
"""

import pytest

from selectorkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from selectorkit.domain.model.selector import SelectorBuilder
from tests.factories import make_docs_example, make_full_selector


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.show_parts is True
        assert config.width == 120

    def test_custom_values(self) -> None:
        config = ConsoleConfig(show_parts=False, width=80)
        assert config.show_parts is False
        assert config.width == 80

    def test_zero_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be > 0"):
            ConsoleConfig(width=0)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        output = ConsoleReporter().report(make_full_selector())
        assert "SELECTOR" in output

    def test_report_contains_selector(self) -> None:
        output = ConsoleReporter().report(make_full_selector())
        assert "a#nav.link[href]:hover::after" in output

    def test_report_contains_parts_table(self) -> None:
        output = ConsoleReporter().report(make_full_selector())
        assert "Parts" in output
        assert "pseudo-element" in output
        assert "::after" in output

    def test_report_shows_combinators(self) -> None:
        output = ConsoleReporter().report(make_docs_example())
        assert "combinator" in output
        assert "'~'" in output

    def test_attribute_brackets_not_eaten_by_markup(self) -> None:
        output = ConsoleReporter().report(SelectorBuilder().attr("href"))
        assert "[href]" in output

    def test_empty_selector(self) -> None:
        output = ConsoleReporter().report(SelectorBuilder())
        assert "(empty)" in output
        assert "Parts" not in output

    def test_parts_hidden(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(show_parts=False))
        output = reporter.report(make_full_selector())
        assert "Parts" not in output
        assert "a#nav.link[href]:hover::after" in output
