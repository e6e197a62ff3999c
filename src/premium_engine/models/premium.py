# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Derived premium and totals models."""

from decimal import Decimal
from enum import Enum

from pydantic import Field

from .base import BaseModelConfig


class RateSource(str, Enum):
    """Which stored field produced a record's rate or fixed amount."""

    CURRENT_PERCENTAGE = "current_percentage"
    LEGACY_PERCENTAGE = "legacy_percentage"
    LEGACY_PER_MILLE = "legacy_per_mille"
    FIXED_AMOUNT = "fixed_amount"
    # legacy_percentage read as a fixed yearly amount under the fixed method
    LEGACY_AS_FIXED_FALLBACK = "legacy_as_fixed_fallback"
    NONE = "none"


class StatusBucket(str, Enum):
    """Totals bucket a status is accumulated into."""

    INSURED = "insured"
    OUTSIDE_POLICY = "outsidePolicy"
    PENDING = "pending"
    REJECTED = "rejected"


class ResolvedRate(BaseModelConfig):
    """A resolved rate (percent) or fixed amount, tagged with its source."""

    value: Decimal = Field(..., ge=Decimal("0"))
    source: RateSource = Field(...)


class PremiumCalculationResult(BaseModelConfig):
    """Premiums derived for one insured object."""

    yearly_premium: Decimal = Field(
        ..., ge=Decimal("0"), description="Premium for a full year of cover"
    )
    period_premium: Decimal = Field(
        ..., ge=Decimal("0"), description="Yearly premium prorated to the covered days"
    )
    period_days: int = Field(..., ge=1, description="Covered days, both ends inclusive")
    rate_source: RateSource = Field(
        default=RateSource.NONE,
        description="Field the rate or fixed amount was taken from",
    )
    included_in_premium: bool = Field(
        default=False, description="Whether the status bears premium at all"
    )


class BucketTotals(BaseModelConfig):
    """Sums for a single status bucket.

    Premium sums are ``None`` for buckets whose statuses never bear premium.
    """

    total_value: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    count: int = Field(default=0, ge=0)
    total_yearly_premium: Decimal | None = Field(default=None)
    total_period_premium: Decimal | None = Field(default=None)


class TotalsCalculation(BaseModelConfig):
    """Collection-wide totals, with a per-bucket breakdown.

    ``total_value`` covers currently insured objects only, while the premium
    totals also include removed objects for the part of the year they were
    covered.
    """

    total_value: Decimal = Field(..., ge=Decimal("0"))
    total_yearly_premium: Decimal = Field(..., ge=Decimal("0"))
    total_period_premium: Decimal = Field(..., ge=Decimal("0"))
    insured_count: int = Field(..., ge=0)
    outside_policy_count: int = Field(..., ge=0)
    pending_count: int = Field(..., ge=0)
    rejected_count: int = Field(..., ge=0)
    unclassified_count: int = Field(
        default=0, ge=0, description="Records with an unrecognised status"
    )
    breakdown: dict[StatusBucket, BucketTotals] = Field(...)


class TotalsSummary(BaseModelConfig):
    """Display-ready figures derived from a :class:`TotalsCalculation`."""

    difference: Decimal = Field(
        ..., ge=Decimal("0"), description="|yearly - period| premium, to the cent"
    )
    percentage_difference: Decimal = Field(
        ..., ge=Decimal("0"), description="difference as a percentage of yearly premium"
    )
    active_count: int = Field(..., ge=0)
    value_scope_count: int = Field(..., ge=0)
    total_count: int = Field(..., ge=0)
