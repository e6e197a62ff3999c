# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Totals aggregation across a collection of insured objects."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from beartype import beartype

from ...core.coercion import ZERO
from ...core.logging_utils import get_logger
from ...models.insured_object import InsuredObject, InsuredRecord
from ...models.premium import BucketTotals, StatusBucket, TotalsCalculation
from .calculators import calculate_premiums
from .status_rules import (
    BUCKET_STATUSES,
    bucket_for_status,
    included_in_premium,
    included_in_premium_total,
    included_in_value_total,
)

logger = get_logger(__name__)


def _ordered_sum(amounts: Iterable[Decimal]) -> Decimal:
    # Sorted so that the rounded Decimal sum is independent of input order.
    return sum(sorted(amounts), ZERO)


@beartype
def aggregate_totals(
    objects: Iterable[InsuredRecord],
    *,
    as_of: date | None = None,
) -> TotalsCalculation:
    """Aggregate values and premiums of a collection, bucketed by status.

    Each record is run through :func:`calculate_premiums` once and its value
    and premiums are added to the bucket of its status. The headline
    ``total_value`` only counts buckets passing :func:`included_in_value_total`
    (insured objects), while the premium totals count buckets passing
    :func:`included_in_premium_total` (insured and removed objects). Records
    with an unrecognised status are counted as unclassified and otherwise
    ignored.

    Args:
        objects: Insured object models or raw record mappings
        as_of: Evaluation date, defaults to today

    Returns:
        Totals with a breakdown for every bucket
    """
    evaluation_date = as_of or date.today()

    values: dict[StatusBucket, list[Decimal]] = {bucket: [] for bucket in StatusBucket}
    yearly: dict[StatusBucket, list[Decimal]] = {bucket: [] for bucket in StatusBucket}
    period: dict[StatusBucket, list[Decimal]] = {bucket: [] for bucket in StatusBucket}
    unclassified = 0

    for record in objects:
        insured = InsuredObject.from_record(record)
        bucket = bucket_for_status(insured.status)
        if bucket is None:
            unclassified += 1
            logger.warning(
                "Insured object %s has no recognised status; excluded from totals",
                insured.id,
            )
            continue

        result = calculate_premiums(insured, as_of=evaluation_date)
        values[bucket].append(insured.value)
        yearly[bucket].append(result.yearly_premium)
        period[bucket].append(result.period_premium)

    breakdown: dict[StatusBucket, BucketTotals] = {}
    for bucket in StatusBucket:
        bears_premium = included_in_premium(BUCKET_STATUSES[bucket])
        breakdown[bucket] = BucketTotals(
            total_value=_ordered_sum(values[bucket]),
            count=len(values[bucket]),
            total_yearly_premium=_ordered_sum(yearly[bucket]) if bears_premium else None,
            total_period_premium=_ordered_sum(period[bucket]) if bears_premium else None,
        )

    value_buckets = [
        bucket
        for bucket in StatusBucket
        if included_in_value_total(BUCKET_STATUSES[bucket])
    ]
    premium_buckets = [
        bucket
        for bucket in StatusBucket
        if included_in_premium_total(BUCKET_STATUSES[bucket])
    ]

    totals = TotalsCalculation(
        total_value=_ordered_sum(breakdown[b].total_value for b in value_buckets),
        total_yearly_premium=_ordered_sum(
            breakdown[b].total_yearly_premium or ZERO for b in premium_buckets
        ),
        total_period_premium=_ordered_sum(
            breakdown[b].total_period_premium or ZERO for b in premium_buckets
        ),
        insured_count=breakdown[StatusBucket.INSURED].count,
        outside_policy_count=breakdown[StatusBucket.OUTSIDE_POLICY].count,
        pending_count=breakdown[StatusBucket.PENDING].count,
        rejected_count=breakdown[StatusBucket.REJECTED].count,
        unclassified_count=unclassified,
        breakdown=breakdown,
    )
    logger.debug(
        "Aggregated %d insured objects (%d unclassified): value=%s yearly=%s period=%s",
        sum(b.count for b in breakdown.values()) + unclassified,
        unclassified,
        totals.total_value,
        totals.total_yearly_premium,
        totals.total_period_premium,
    )
    return totals
