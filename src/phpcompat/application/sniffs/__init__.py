"""Compatibility sniffs.

Sniffs inspect function signatures and report findings to a sink:
- RemovedOptionalBeforeRequiredParamSniff: optional before required parameters
"""

from phpcompat.application.sniffs._base import BaseSniff
from phpcompat.application.sniffs._registry import default_sniffs, sniffs_from_config
from phpcompat.application.sniffs.default_value import (
    DefaultValueClass,
    classify_default_value,
)
from phpcompat.application.sniffs.removed_optional_before_required_param import (
    RemovedOptionalBeforeRequiredParamSniff,
    analyze_parameter_order,
)

__all__ = [
    # Base
    "BaseSniff",
    # Sniffs
    "RemovedOptionalBeforeRequiredParamSniff",
    # Core helpers
    "DefaultValueClass",
    "analyze_parameter_order",
    "classify_default_value",
    # Factory functions
    "default_sniffs",
    "sniffs_from_config",
]
