"""Optional parameters declared before required ones.

Declaring a required parameter after an optional one is deprecated since
PHP 8.0: the optional parameter is implicitly treated as required. As an
exception, "Type $param = null" before a required parameter stays allowed,
because that form was used to get nullable types before "?Type" existed.

"?Type $param = null" before a required parameter is soft deprecated in
PHP 8.0 and only reported once the codebase has to run on PHP 8.1.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

from phpcompat.application.sniffs._base import BaseSniff
from phpcompat.application.sniffs.default_value import classify_default_value
from phpcompat.domain.model.enums import Tier
from phpcompat.domain.model.violation import ParameterOrderViolation

if TYPE_CHECKING:
    from collections.abc import Mapping

    from phpcompat.domain.model.parameter import ParameterDescriptor
    from phpcompat.domain.model.signature import FunctionSignature
    from phpcompat.domain.ports.diagnostic_sink import DiagnosticSinkProtocol
    from phpcompat.domain.ports.version_gate import VersionGateProtocol

_DETAILS = (
    " Parameter {0} is optional, while parameter {1} is required."
    " The {0} parameter is implicitly treated as a required parameter."
)

PHP80_MESSAGE = (
    "Declaring an optional parameter before a required parameter"
    " is deprecated since PHP 8.0." + _DETAILS
)
PHP81_MESSAGE = (
    "Declaring an optional parameter with a nullable type before a required parameter"
    " is soft deprecated since PHP 8.0 and hard deprecated since PHP 8.1." + _DETAILS
)


def analyze_parameter_order(
    parameters: Sequence[ParameterDescriptor],
    *,
    target_at_least_80: bool,
    target_at_least_81: bool,
) -> tuple[ParameterOrderViolation, ...]:
    """Find optional parameters declared before a required parameter.

    Walks the parameters from last to first, remembering the nearest
    required parameter seen so far.

    Args:
        parameters: Parameters in declaration order
        target_at_least_80: Codebase has to run on PHP 8.0+
        target_at_least_81: Codebase has to run on PHP 8.1+

    Returns:
        Violations in reverse declaration order
    """
    if not target_at_least_80:
        return ()

    violations: list[ParameterOrderViolation] = []
    nearest_required: str | None = None

    for param in reversed(parameters):
        # Variadics are optional by nature and always declared last.
        if param.is_variadic:
            continue

        if not param.has_default:
            nearest_required = param.name
            continue

        if nearest_required is None:
            continue

        default = classify_default_value(param.default)

        # "Type $param = null": implicit nullable type, still allowed.
        if param.type_hint and not param.nullable_type and default.is_bare_null:
            continue

        tier = Tier.TIER_80
        if param.nullable_type and default.contains_null:
            if not target_at_least_81:
                continue
            tier = Tier.TIER_81

        violations.append(
            ParameterOrderViolation(
                offending_parameter=param.name,
                required_parameter=nearest_required,
                tier=tier,
                anchor=param.location,
            )
        )

    return tuple(violations)


class RemovedOptionalBeforeRequiredParamSniff(BaseSniff):
    """Reports optional parameters declared before required parameters.

    Codes:
        Deprecated80: any optional parameter before a required one
        Deprecated81: "?Type $param = null" before a required one
    """

    category: ClassVar[str] = "FunctionDeclarations"
    name: ClassVar[str] = "RemovedOptionalBeforeRequiredParam"
    messages: ClassVar[Mapping[str, str]] = {
        Tier.TIER_80.code: PHP80_MESSAGE,
        Tier.TIER_81.code: PHP81_MESSAGE,
    }

    def process(
        self,
        signature: FunctionSignature,
        gate: VersionGateProtocol,
        sink: DiagnosticSinkProtocol,
    ) -> int:
        """Report each violation in signature to sink.

        Args:
            signature: Parsed function signature
            gate: Target version predicate
            sink: Receiver of findings

        Returns:
            Number of findings handed to the sink
        """
        if not gate.should_run_on_or_above(Tier.TIER_80.version):
            return 0
        if not signature.parameters:
            return 0

        violations = analyze_parameter_order(
            signature.parameters,
            target_at_least_80=True,
            target_at_least_81=gate.should_run_on_or_above(Tier.TIER_81.version),
        )

        for violation in violations:
            sink.add_warning(
                self.render(
                    violation.tier.code,
                    violation.anchor,
                    (violation.offending_parameter, violation.required_parameter),
                )
            )

        return len(violations)
