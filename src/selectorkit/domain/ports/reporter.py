"""Reporter protocol for selector output formatting.

Users extend selectorkit by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from selectorkit.domain.model.selector import SelectorBuilder


class SelectorReporterProtocol(Protocol):
    """Contract for selector reporters.

    selectorkit provides ConsoleReporter (rich) and JSONReporter.

    Example:
        class PlainReporter:
            def report(self, builder: SelectorBuilder) -> str:
                return "\\n".join(str(part) for part in builder.parts)
    """

    def report(self, builder: SelectorBuilder) -> str:
        """Describe how a selector was assembled.

        Args:
            builder: Selector to describe

        Returns:
            Formatted report
        """
        ...
