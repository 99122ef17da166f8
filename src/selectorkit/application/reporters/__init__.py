"""Reporters describing how a selector was assembled.

ConsoleReporter renders with rich, JSONReporter uses stdlib only.
Users can implement custom reporters (see SelectorReporterProtocol).
"""

from selectorkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from selectorkit.application.reporters.json_reporter import JSONReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
