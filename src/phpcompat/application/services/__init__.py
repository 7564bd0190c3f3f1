"""Application services."""

from phpcompat.application.services.scanner import CompatibilityScanner

__all__ = ["CompatibilityScanner"]
