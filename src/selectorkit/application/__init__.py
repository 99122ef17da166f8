"""Application layer.

- serialization: JSON conversion helpers
- reporters: Selector reports (rich console, JSON)
"""

from selectorkit.application.reporters import ConsoleConfig, ConsoleReporter, JSONReporter
from selectorkit.application.serialization import from_json, get_json

__all__ = [
    # Serialization
    "from_json",
    "get_json",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
