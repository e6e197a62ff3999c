# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Plausibility rules for insured object premium inputs.

The calculator never rejects a record; it coerces whatever it is given. These
rules report the inputs that were coerced or look wrong, so that the people
maintaining the data can fix them at the source.
"""

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Final

from attrs import frozen
from beartype import beartype

from ...core.coercion import ZERO, coerce_amount
from ...core.config import Settings, get_settings
from ...models.insured_object import (
    AMOUNT_FIELDS,
    InsuredObject,
    InsuredObjectStatus,
    InsuredRecord,
    PremiumMethod,
)
from ...models.premium import RateSource
from .rate_resolver import resolve_fixed_amount, resolve_rate
from .status_rules import included_in_premium

_LEGACY_SOURCES: Final = frozenset(
    {
        RateSource.LEGACY_PERCENTAGE,
        RateSource.LEGACY_PER_MILLE,
        RateSource.LEGACY_AS_FIXED_FALLBACK,
    }
)


class RuleSeverity(str, Enum):
    """Severity of a rule violation."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@frozen
class BusinessRuleViolation:
    """Represents a business rule violation."""

    rule_id: str
    severity: RuleSeverity
    message: str
    field: str | None = None
    suggested_action: str | None = None

    @beartype
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.value,
            "message": self.message,
            "field": self.field,
            "suggested_action": self.suggested_action,
        }


@beartype
class PremiumBusinessRules:
    """Plausibility checks on the inputs of the premium calculation."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the rules with thresholds from ``settings``."""
        self._settings = settings or get_settings()

    def validate(self, record: InsuredRecord) -> list[BusinessRuleViolation]:
        """Check one record and return every violation found.

        Raw mappings are also checked for negative amounts, which the model
        has already clamped to 0 by the time it exists.
        """
        violations: list[BusinessRuleViolation] = []
        if not isinstance(record, InsuredObject):
            violations.extend(self._validate_raw_amounts(record))

        insured = InsuredObject.from_record(record)
        violations.extend(self._validate_per_mille(insured))
        violations.extend(self._validate_value(insured))
        violations.extend(self._validate_dates(insured))
        violations.extend(self._validate_rate_source(insured))
        return violations

    def _validate_raw_amounts(
        self, record: Mapping[str, Any]
    ) -> list[BusinessRuleViolation]:
        violations = []
        for field_name in AMOUNT_FIELDS:
            for key in InsuredObject.input_keys(field_name):
                if key not in record:
                    continue
                amount = coerce_amount(record[key]).unwrap_or(ZERO)
                if amount < ZERO:
                    violations.append(
                        BusinessRuleViolation(
                            rule_id="NEGATIVE_AMOUNT",
                            severity=RuleSeverity.ERROR,
                            message=f"{key} is negative ({amount}) and was treated as 0",
                            field=field_name,
                            suggested_action="Correct the stored amount",
                        )
                    )
                break
        return violations

    def _validate_per_mille(self, insured: InsuredObject) -> list[BusinessRuleViolation]:
        per_mille = insured.legacy_per_mille
        if per_mille > self._settings.max_per_mille:
            return [
                BusinessRuleViolation(
                    rule_id="PER_MILLE_NOT_A_RATE",
                    severity=RuleSeverity.ERROR,
                    message=(
                        f"Per-mille rate {per_mille} is too high to be a per-mille value"
                    ),
                    field="legacy_per_mille",
                    suggested_action="Check whether a percentage or amount was entered",
                )
            ]
        if per_mille > self._settings.max_plausible_per_mille:
            return [
                BusinessRuleViolation(
                    rule_id="PER_MILLE_IMPLAUSIBLE",
                    severity=RuleSeverity.WARNING,
                    message=(
                        f"Per-mille rate {per_mille} is unusually high; "
                        "typical rates are 1-20 per mille"
                    ),
                    field="legacy_per_mille",
                )
            ]
        return []

    def _validate_value(self, insured: InsuredObject) -> list[BusinessRuleViolation]:
        if insured.value > self._settings.value_warning_threshold:
            return [
                BusinessRuleViolation(
                    rule_id="VALUE_UNUSUALLY_HIGH",
                    severity=RuleSeverity.WARNING,
                    message=f"Insured value {insured.value} is unusually high",
                    field="value",
                    suggested_action="Confirm the value is correct",
                )
            ]
        return []

    def _validate_dates(self, insured: InsuredObject) -> list[BusinessRuleViolation]:
        violations = []
        start = insured.insurance_start_date
        end = insured.insurance_end_date
        if start is not None and end is not None and end < start:
            violations.append(
                BusinessRuleViolation(
                    rule_id="END_BEFORE_START",
                    severity=RuleSeverity.ERROR,
                    message=f"Coverage ends ({end}) before it starts ({start})",
                    field="insurance_end_date",
                )
            )
        if insured.status is InsuredObjectStatus.REMOVED and end is None:
            violations.append(
                BusinessRuleViolation(
                    rule_id="REMOVED_WITHOUT_END_DATE",
                    severity=RuleSeverity.WARNING,
                    message="Removed object has no end date; covered until year end",
                    field="insurance_end_date",
                    suggested_action="Record the date the object left the policy",
                )
            )
        return violations

    def _validate_rate_source(
        self, insured: InsuredObject
    ) -> list[BusinessRuleViolation]:
        if not included_in_premium(insured.status):
            return []

        if insured.premium_method is PremiumMethod.FIXED:
            resolved = resolve_fixed_amount(insured)
        else:
            resolved = resolve_rate(insured)

        if resolved.source is RateSource.NONE:
            return [
                BusinessRuleViolation(
                    rule_id="MISSING_RATE",
                    severity=RuleSeverity.WARNING,
                    message=(
                        f"No {insured.premium_method.value} premium is set; "
                        "the premium is 0"
                    ),
                    field=(
                        "premium_fixed_amount"
                        if insured.premium_method is PremiumMethod.FIXED
                        else "premium_percentage"
                    ),
                )
            ]
        if resolved.source in _LEGACY_SOURCES:
            return [
                BusinessRuleViolation(
                    rule_id="LEGACY_RATE_SOURCE",
                    severity=RuleSeverity.INFO,
                    message=f"Premium is taken from a legacy field ({resolved.source.value})",
                    suggested_action="Migrate the rate to the current premium fields",
                )
            ]
        return []
