# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Status inclusion rules.

Value totals and premium totals use different inclusion sets. They are kept
as separate predicates so that each can be tested on its own.
"""

from types import MappingProxyType
from typing import Final

from beartype import beartype

from ...models.insured_object import InsuredObjectStatus
from ...models.premium import StatusBucket

PREMIUM_BEARING_STATUSES: Final = frozenset(
    {InsuredObjectStatus.INSURED, InsuredObjectStatus.REMOVED}
)
PREMIUM_TOTAL_STATUSES: Final = frozenset(
    {InsuredObjectStatus.INSURED, InsuredObjectStatus.REMOVED}
)
VALUE_TOTAL_STATUSES: Final = frozenset({InsuredObjectStatus.INSURED})

STATUS_BUCKETS: Final = MappingProxyType(
    {
        InsuredObjectStatus.INSURED: StatusBucket.INSURED,
        InsuredObjectStatus.REMOVED: StatusBucket.OUTSIDE_POLICY,
        InsuredObjectStatus.PENDING: StatusBucket.PENDING,
        InsuredObjectStatus.REJECTED: StatusBucket.REJECTED,
    }
)
BUCKET_STATUSES: Final = MappingProxyType(
    {bucket: status for status, bucket in STATUS_BUCKETS.items()}
)


@beartype
def included_in_premium(status: InsuredObjectStatus | None) -> bool:
    """Whether a record with this status has a non-zero premium at all."""
    return status in PREMIUM_BEARING_STATUSES


@beartype
def included_in_premium_total(status: InsuredObjectStatus | None) -> bool:
    """Whether premiums of this status count towards the headline premium totals."""
    return status in PREMIUM_TOTAL_STATUSES


@beartype
def included_in_value_total(status: InsuredObjectStatus | None) -> bool:
    """Whether values of this status count towards the headline value total."""
    return status in VALUE_TOTAL_STATUSES


@beartype
def bucket_for_status(status: InsuredObjectStatus | None) -> StatusBucket | None:
    """Return the totals bucket for ``status``; unclassified records have none."""
    if status is None:
        return None
    return STATUS_BUCKETS[status]
