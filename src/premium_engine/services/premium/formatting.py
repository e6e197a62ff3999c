# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Display helpers for totals.

These produce numbers and plain-text lines for summary banners and tooltips.
Currency symbols and localisation are left to the presentation layer.
"""

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final

from beartype import beartype

from ...core.coercion import ZERO
from ...models.premium import StatusBucket, TotalsCalculation, TotalsSummary

_CENT: Final = Decimal("0.01")
_TENTH: Final = Decimal("0.1")
_PERCENT: Final = Decimal("100")

# Wide enough to quantize any sum the engine can produce.
_DISPLAY_CONTEXT: Final = Context(prec=60, rounding=ROUND_HALF_UP)

_BUCKET_LABELS: Final = {
    StatusBucket.INSURED: "Insured",
    StatusBucket.OUTSIDE_POLICY: "Outside policy",
    StatusBucket.PENDING: "Pending",
    StatusBucket.REJECTED: "Rejected",
}


@beartype
def round_money(amount: Decimal) -> Decimal:
    """Round an amount half-up to whole cents."""
    return amount.quantize(_CENT, context=_DISPLAY_CONTEXT)


@beartype
def summarize_totals(
    totals: TotalsCalculation,
    *,
    total_count: int | None = None,
) -> TotalsSummary:
    """Derive the yearly-vs-period difference and headline counts.

    Args:
        totals: Result of ``aggregate_totals``
        total_count: Size of the collection shown to the user; defaults to the
            number of records that went into ``totals``

    Returns:
        Summary figures, rounded for display
    """
    raw_difference = abs(totals.total_yearly_premium - totals.total_period_premium)
    if totals.total_yearly_premium > ZERO:
        percentage = (raw_difference / totals.total_yearly_premium * _PERCENT).quantize(
            _TENTH, context=_DISPLAY_CONTEXT
        )
    else:
        percentage = ZERO

    counted = (
        totals.insured_count
        + totals.outside_policy_count
        + totals.pending_count
        + totals.rejected_count
        + totals.unclassified_count
    )
    return TotalsSummary(
        difference=round_money(raw_difference),
        percentage_difference=percentage,
        active_count=totals.insured_count + totals.outside_policy_count,
        value_scope_count=(
            totals.insured_count + totals.outside_policy_count + totals.pending_count
        ),
        total_count=counted if total_count is None else total_count,
    )


@beartype
def status_summary_lines(totals: TotalsCalculation) -> list[str]:
    """One line per non-empty bucket, for tooltips and plain-text reports."""
    lines: list[str] = []
    for bucket, label in _BUCKET_LABELS.items():
        bucket_totals = totals.breakdown[bucket]
        if bucket_totals.count == 0:
            continue
        if bucket is StatusBucket.REJECTED:
            lines.append(f"{label}: {bucket_totals.count} objects (excluded from totals)")
        else:
            lines.append(
                f"{label}: {bucket_totals.count} objects "
                f"(value {round_money(bucket_totals.total_value)})"
            )
    if totals.unclassified_count:
        lines.append(
            f"Unclassified: {totals.unclassified_count} objects (excluded from totals)"
        )
    return lines
