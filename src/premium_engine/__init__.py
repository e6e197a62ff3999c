# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Status-aware premium calculation and totals aggregation engine."""

from .models import (
    BucketTotals,
    InsuredObject,
    InsuredObjectStatus,
    PremiumCalculationResult,
    PremiumMethod,
    RateSource,
    StatusBucket,
    TotalsCalculation,
)
from .services.premium import (
    aggregate_totals,
    calculate_premiums,
    compute_period_days,
    resolve_rate_percent,
    with_calculated_premiums,
)

__version__ = "0.1.0"

__all__ = [
    "BucketTotals",
    "InsuredObject",
    "InsuredObjectStatus",
    "PremiumCalculationResult",
    "PremiumMethod",
    "RateSource",
    "StatusBucket",
    "TotalsCalculation",
    "aggregate_totals",
    "calculate_premiums",
    "compute_period_days",
    "resolve_rate_percent",
    "with_calculated_premiums",
]
