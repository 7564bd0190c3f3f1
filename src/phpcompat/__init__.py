"""phpcompat - PHP cross-version compatibility sniffs."""

__version__ = "0.1.0"

from phpcompat.application.services.scanner import CompatibilityScanner
from phpcompat.application.sniffs.removed_optional_before_required_param import (
    RemovedOptionalBeforeRequiredParamSniff,
    analyze_parameter_order,
)

__all__ = [
    "CompatibilityScanner",
    "RemovedOptionalBeforeRequiredParamSniff",
    "analyze_parameter_order",
    "__version__",
]
