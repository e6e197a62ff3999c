# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Insured object record model.

Records come from three generations of the schema and from two naming
conventions (camelCase API payloads and the older Dutch field names). Every
field coerces its raw input in a ``mode="before"`` validator, so building an
:class:`InsuredObject` from a mapping never fails.
"""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Final, TypeAlias

from beartype import beartype
from pydantic import AliasChoices, Field, ValidationInfo, field_validator

from ..core.coercion import ZERO, coerce_amount, non_negative_amount, optional_date
from ..core.logging_utils import get_logger
from .base import RecordModel

logger = get_logger(__name__)


class InsuredObjectStatus(str, Enum):
    """Lifecycle status of an insured object."""

    INSURED = "Insured"
    PENDING = "Pending"
    REJECTED = "Rejected"
    # Was insured and has since left the policy; still earns premium for its
    # covered period.
    REMOVED = "Removed"

    @classmethod
    def parse(cls, raw: object) -> "InsuredObjectStatus | None":
        """Map a raw status to a member, or ``None`` when it is unrecognised."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        key = raw.strip().lower().replace(" ", "").replace("_", "")
        return _STATUS_ALIASES.get(key)


_STATUS_ALIASES: Final = {
    "insured": InsuredObjectStatus.INSURED,
    "pending": InsuredObjectStatus.PENDING,
    "rejected": InsuredObjectStatus.REJECTED,
    "removed": InsuredObjectStatus.REMOVED,
    "outofpolicy": InsuredObjectStatus.REMOVED,
    "outsidepolicy": InsuredObjectStatus.REMOVED,
}


class PremiumMethod(str, Enum):
    """How the yearly premium of a record is determined."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


AMOUNT_FIELDS: Final = (
    "value",
    "premium_percentage",
    "premium_fixed_amount",
    "legacy_percentage",
    "legacy_per_mille",
)


class InsuredObject(RecordModel):
    """A single insured asset as supplied by the persistence layer.

    ``yearly_premium``, ``period_premium`` and ``period_days`` are output
    fields filled in by the derived-field projection; the engine never reads
    them back.
    """

    id: str | None = Field(default=None, description="Opaque record identifier")

    status: InsuredObjectStatus | None = Field(
        default=None,
        description="Lifecycle status; None when the raw status is unrecognised",
    )

    value: Decimal = Field(
        default=ZERO,
        ge=ZERO,
        validation_alias=AliasChoices("value", "waarde"),
        description="Insured value",
    )

    premium_method: PremiumMethod = Field(
        default=PremiumMethod.PERCENTAGE,
        validation_alias=AliasChoices("premiumMethod", "premium_method"),
        description="Percentage of value, or a fixed yearly amount",
    )

    premium_percentage: Decimal = Field(
        default=ZERO,
        ge=ZERO,
        validation_alias=AliasChoices("premiumPercentage", "premium_percentage"),
        description="Current rate field, in percent",
    )

    premium_fixed_amount: Decimal = Field(
        default=ZERO,
        ge=ZERO,
        validation_alias=AliasChoices("premiumFixedAmount", "premium_fixed_amount"),
        description="Current fixed yearly premium",
    )

    legacy_percentage: Decimal = Field(
        default=ZERO,
        ge=ZERO,
        validation_alias=AliasChoices("legacyPercentage", "legacy_percentage"),
        description="Older rate field in percent, also read as a fixed-amount fallback",
    )

    legacy_per_mille: Decimal = Field(
        default=ZERO,
        ge=ZERO,
        validation_alias=AliasChoices(
            "legacyPerMille", "legacy_per_mille", "premiumPerMille", "premiepromillage"
        ),
        description="Oldest rate field, in per-mille",
    )

    insurance_start_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "insuranceStartDate", "insurance_start_date", "ingangsdatum"
        ),
        description="Date coverage began",
    )

    insurance_end_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "insuranceEndDate", "insurance_end_date", "uitgangsdatum"
        ),
        description="Date coverage ended; None while still covered",
    )

    yearly_premium: Decimal | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "yearlyPremium", "yearly_premium", "totalePremieOverHetJaar"
        ),
    )
    period_premium: Decimal | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "periodPremium", "period_premium", "totalePremieOverDeVerzekerdePeriode"
        ),
    )
    period_days: int | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "periodDays", "period_days", "aantalVerzekerdeDagen"
        ),
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str | None:
        """Identifiers are opaque; keep their string form."""
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: Any) -> InsuredObjectStatus | None:
        """Resolve status spellings, leaving unknown ones unclassified."""
        status = InsuredObjectStatus.parse(v)
        if status is None and v is not None:
            logger.debug("Unrecognised insured object status %r", v)
        return status

    @field_validator("premium_method", mode="before")
    @classmethod
    def coerce_premium_method(cls, v: Any) -> PremiumMethod:
        """Anything other than ``fixed`` calculates as a percentage."""
        if isinstance(v, PremiumMethod):
            return v
        if isinstance(v, str) and v.strip().lower() == PremiumMethod.FIXED.value:
            return PremiumMethod.FIXED
        return PremiumMethod.PERCENTAGE

    @field_validator(*AMOUNT_FIELDS, mode="before")
    @classmethod
    def coerce_amounts(cls, v: Any, info: ValidationInfo) -> Decimal:
        """Missing, invalid and negative amounts become zero."""
        return non_negative_amount(v, field=info.field_name or "amount")

    @field_validator("insurance_start_date", "insurance_end_date", mode="before")
    @classmethod
    def coerce_dates(cls, v: Any, info: ValidationInfo) -> date | None:
        """Missing and unparseable dates become ``None``."""
        return optional_date(v, field=info.field_name or "date")

    @field_validator("yearly_premium", "period_premium", mode="before")
    @classmethod
    def coerce_derived_amounts(cls, v: Any) -> Decimal | None:
        """Stale derived amounts are carried, never trusted."""
        return coerce_amount(v).unwrap_or(None)

    @field_validator("period_days", mode="before")
    @classmethod
    def coerce_derived_days(cls, v: Any) -> int | None:
        amount = coerce_amount(v).unwrap_or(None)
        return None if amount is None else int(amount)

    @classmethod
    @beartype
    def input_keys(cls, field_name: str) -> tuple[str, ...]:
        """Return the raw keys accepted for ``field_name``, most current first."""
        alias = cls.model_fields[field_name].validation_alias
        if isinstance(alias, AliasChoices):
            return tuple(choice for choice in alias.choices if isinstance(choice, str))
        return (field_name,)

    @classmethod
    def from_record(cls, record: "InsuredObject | Mapping[str, Any]") -> "InsuredObject":
        """Build a model from a raw mapping, passing models through untouched."""
        if isinstance(record, cls):
            return record
        return cls.model_validate(dict(record))


InsuredRecord: TypeAlias = InsuredObject | Mapping[str, Any]
