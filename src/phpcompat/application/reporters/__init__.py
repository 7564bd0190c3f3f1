"""Reporters for scan results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from phpcompat.application.reporters._base import BaseReporter
from phpcompat.application.reporters.console import ConsoleConfig, ConsoleReporter
from phpcompat.application.reporters.json_reporter import JSONReporter
from phpcompat.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
