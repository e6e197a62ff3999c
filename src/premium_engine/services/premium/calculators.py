# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium calculation for a single insured object."""

import calendar
from datetime import date, datetime
from decimal import Decimal
from typing import Final

from beartype import beartype

from ...core.coercion import ZERO
from ...models.insured_object import InsuredObject, InsuredRecord, PremiumMethod
from ...models.premium import PremiumCalculationResult, RateSource
from .rate_resolver import resolve_fixed_amount, resolve_rate
from .status_rules import included_in_premium

# Premiums are prorated over a fixed 365-day year, leap years included.
DAYS_PER_YEAR: Final = 365

_DAYS_PER_YEAR: Final = Decimal(DAYS_PER_YEAR)
_PERCENT: Final = Decimal("100")


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _leap_days_between(start: date, end: date) -> int:
    """Count the February 29ths in ``[start, end]``."""
    count = 0
    for year in range(start.year, end.year + 1):
        if calendar.isleap(year) and start <= date(year, 2, 29) <= end:
            count += 1
    return count


@beartype
def compute_period_days(
    start: date | None,
    end: date | None,
    *,
    as_of: date | None = None,
) -> int:
    """Count the insured days between ``start`` and ``end``, both inclusive.

    A missing start falls back to ``as_of`` (today by default) and a missing
    end to December 31 of that year. February 29 is not counted, so a full
    calendar year is always 365 days. The result is at least 1.

    Args:
        start: Date coverage began
        end: Date coverage ended, or None while still covered
        as_of: Evaluation date, defaults to today

    Returns:
        Number of covered days
    """
    today = _as_date(as_of) if as_of is not None else date.today()
    start = _as_date(start) if start is not None else today
    end = _as_date(end) if end is not None else date(today.year, 12, 31)

    if end < start:
        return 1
    days = (end - start).days - _leap_days_between(start, end) + 1
    return max(1, days)


@beartype
def calculate_premiums(
    record: InsuredRecord,
    *,
    as_of: date | None = None,
) -> PremiumCalculationResult:
    """Calculate the yearly and period premium of one insured object.

    Only insured and removed objects bear premium; for every other status both
    premiums are 0, but ``period_days`` is still reported. Under the fixed
    method the yearly premium is the resolved fixed amount; otherwise it is
    ``value * rate / 100``. The period premium is ``yearly * days / 365``.

    Args:
        record: Insured object model or raw record mapping
        as_of: Evaluation date, defaults to today

    Returns:
        Premium calculation result; never raises for malformed field values
    """
    insured = InsuredObject.from_record(record)
    period_days = compute_period_days(
        insured.insurance_start_date,
        insured.insurance_end_date,
        as_of=as_of,
    )

    if not included_in_premium(insured.status):
        return PremiumCalculationResult(
            yearly_premium=ZERO,
            period_premium=ZERO,
            period_days=period_days,
            rate_source=RateSource.NONE,
            included_in_premium=False,
        )

    if insured.premium_method is PremiumMethod.FIXED:
        resolved = resolve_fixed_amount(insured)
        yearly_premium = resolved.value
    else:
        resolved = resolve_rate(insured)
        yearly_premium = insured.value * resolved.value / _PERCENT

    period_premium = yearly_premium * period_days / _DAYS_PER_YEAR

    return PremiumCalculationResult(
        yearly_premium=yearly_premium,
        period_premium=period_premium,
        period_days=period_days,
        rate_source=resolved.source,
        included_in_premium=True,
    )
