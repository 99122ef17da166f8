"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from selectorkit.application.reporters._rows import part_rows

if TYPE_CHECKING:
    from selectorkit.domain.model.selector import SelectorBuilder


class JSONReporter:
    """JSON reporter for machine-readable output.

    Writes the report to the output stream and returns it.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, builder: SelectorBuilder) -> str:
        """Report selector as JSON.

        Args:
            builder: Selector to describe

        Returns:
            JSON document that was written
        """
        text = json.dumps(self._builder_to_dict(builder), indent=self._indent)
        self._output.write(text + "\n")
        return text

    def _builder_to_dict(self, builder: SelectorBuilder) -> dict[str, object]:
        """Convert SelectorBuilder to JSON-serializable dict."""
        return {
            "selector": builder.stringify(),
            "last_kind": builder.last_kind.label if builder.last_kind is not None else None,
            "parts": [
                {"kind": row.kind, "value": row.value, "fragment": row.fragment}
                for row in part_rows(builder)
            ],
        }
