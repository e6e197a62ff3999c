# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Rate resolution across three generations of premium fields.

Stored records may carry the current percentage field, the older percentage
field, or the oldest per-mille field. Candidates are tried in order and the
first non-zero one wins. Stored records use 0 for "not set", so a deliberate
rate of 0 falls through to the next generation; this is kept as-is.
"""

from collections.abc import Callable
from decimal import Decimal
from typing import Final

from beartype import beartype

from ...core.coercion import ZERO
from ...models.insured_object import InsuredObject, InsuredRecord
from ...models.premium import RateSource, ResolvedRate

RateTransform = Callable[[Decimal], Decimal]
RateCandidate = tuple[RateSource, str, RateTransform]

_PER_MILLE_PER_PERCENT: Final = Decimal("10")


def _as_is(amount: Decimal) -> Decimal:
    return amount


def _per_mille_to_percent(amount: Decimal) -> Decimal:
    return amount / _PER_MILLE_PER_PERCENT


# Newest generation first.
RATE_CANDIDATES: Final[tuple[RateCandidate, ...]] = (
    (RateSource.CURRENT_PERCENTAGE, "premium_percentage", _as_is),
    (RateSource.LEGACY_PERCENTAGE, "legacy_percentage", _as_is),
    (RateSource.LEGACY_PER_MILLE, "legacy_per_mille", _per_mille_to_percent),
)

FIXED_AMOUNT_CANDIDATES: Final[tuple[RateCandidate, ...]] = (
    (RateSource.FIXED_AMOUNT, "premium_fixed_amount", _as_is),
    (RateSource.LEGACY_AS_FIXED_FALLBACK, "legacy_percentage", _as_is),
)


def _first_non_zero(
    insured: InsuredObject, candidates: tuple[RateCandidate, ...]
) -> ResolvedRate:
    for source, field_name, transform in candidates:
        amount: Decimal = getattr(insured, field_name)
        if amount:
            return ResolvedRate(value=transform(amount), source=source)
    return ResolvedRate(value=ZERO, source=RateSource.NONE)


@beartype
def resolve_rate(record: InsuredRecord) -> ResolvedRate:
    """Resolve the premium rate of a record, in percent, with its source."""
    return _first_non_zero(InsuredObject.from_record(record), RATE_CANDIDATES)


@beartype
def resolve_rate_percent(record: InsuredRecord) -> Decimal:
    """Resolve the premium rate of a record in percent (``2.5`` means 2.5%).

    Returns 0 when no rate field is set.
    """
    return resolve_rate(record).value


@beartype
def resolve_fixed_amount(record: InsuredRecord) -> ResolvedRate:
    """Resolve the fixed yearly premium of a record.

    Falls back to ``legacy_percentage`` read as an amount, which is how older
    records stored fixed premiums; the result is tagged
    :attr:`RateSource.LEGACY_AS_FIXED_FALLBACK` in that case.
    """
    return _first_non_zero(InsuredObject.from_record(record), FIXED_AMOUNT_CANDIDATES)
