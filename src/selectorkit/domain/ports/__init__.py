"""Domain ports: extension protocols."""

from selectorkit.domain.ports.reporter import SelectorReporterProtocol

__all__ = ["SelectorReporterProtocol"]
