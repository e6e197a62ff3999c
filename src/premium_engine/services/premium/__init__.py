# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium engine services package.

This package provides:
- Rate resolution across current and legacy premium fields
- Period length and premium calculation per insured object
- Status-bucketed totals aggregation
- Projection of calculated premiums onto records
- Totals summaries and plausibility rules
"""

from .aggregator import aggregate_totals
from .business_rules import BusinessRuleViolation, PremiumBusinessRules, RuleSeverity
from .calculators import DAYS_PER_YEAR, calculate_premiums, compute_period_days
from .formatting import round_money, status_summary_lines, summarize_totals
from .projection import with_calculated_premiums, with_calculated_premiums_all
from .rate_resolver import (
    FIXED_AMOUNT_CANDIDATES,
    RATE_CANDIDATES,
    resolve_fixed_amount,
    resolve_rate,
    resolve_rate_percent,
)
from .status_rules import (
    bucket_for_status,
    included_in_premium,
    included_in_premium_total,
    included_in_value_total,
)

__all__ = [
    # Aggregation
    "aggregate_totals",
    # Calculators
    "DAYS_PER_YEAR",
    "calculate_premiums",
    "compute_period_days",
    # Projection
    "with_calculated_premiums",
    "with_calculated_premiums_all",
    # Rate resolution
    "FIXED_AMOUNT_CANDIDATES",
    "RATE_CANDIDATES",
    "resolve_fixed_amount",
    "resolve_rate",
    "resolve_rate_percent",
    # Status rules
    "bucket_for_status",
    "included_in_premium",
    "included_in_premium_total",
    "included_in_value_total",
    # Display helpers
    "round_money",
    "status_summary_lines",
    "summarize_totals",
    # Business rules
    "BusinessRuleViolation",
    "PremiumBusinessRules",
    "RuleSeverity",
]
