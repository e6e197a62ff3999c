# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Domain models package for the premium engine."""

from .base import BaseModelConfig, RecordModel
from .insured_object import (
    AMOUNT_FIELDS,
    InsuredObject,
    InsuredObjectStatus,
    InsuredRecord,
    PremiumMethod,
)
from .premium import (
    BucketTotals,
    PremiumCalculationResult,
    RateSource,
    ResolvedRate,
    StatusBucket,
    TotalsCalculation,
    TotalsSummary,
)

__all__ = [
    # Base models
    "BaseModelConfig",
    "RecordModel",
    # Input records
    "AMOUNT_FIELDS",
    "InsuredObject",
    "InsuredObjectStatus",
    "InsuredRecord",
    "PremiumMethod",
    # Derived values
    "BucketTotals",
    "PremiumCalculationResult",
    "RateSource",
    "ResolvedRate",
    "StatusBucket",
    "TotalsCalculation",
    "TotalsSummary",
]
