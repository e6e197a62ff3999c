# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Defensive coercion of raw record fields.

Records arrive from the REST layer with numbers as strings, empty strings for
absent dates and the occasional ``null``. The helpers here turn such values
into ``Decimal`` and ``date`` instances, reporting anything unusable as an
``Err`` so that callers can fall back to a documented default instead of
raising.
"""

import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Final

from beartype import beartype

from .logging_utils import get_logger
from .result_types import Err, Ok, Result

logger = get_logger(__name__)

ZERO: Final = Decimal("0")

# Amounts are money or rates; anything outside this magnitude is garbage.
_MAX_ADJUSTED_EXPONENT: Final = 15

_FALLBACK_DATE_FORMATS: Final = ("%d-%m-%Y", "%d/%m/%Y")


@beartype
def coerce_amount(raw: object) -> Result[Decimal, str]:
    """Parse a raw numeric field into a finite ``Decimal``.

    Accepts ``Decimal``, ``int``, ``float`` and numeric strings (a lone comma
    is read as the decimal separator). Negative values are returned as-is;
    clamping is left to :func:`non_negative_amount`.
    """
    if raw is None:
        return Err("missing")
    if isinstance(raw, bool):
        return Err("boolean is not an amount")

    if isinstance(raw, Decimal):
        amount = raw
    elif isinstance(raw, int):
        amount = Decimal(raw)
    elif isinstance(raw, float):
        if not math.isfinite(raw):
            return Err(f"non-finite float {raw!r}")
        amount = Decimal(str(raw))
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return Err("missing")
        if "," in text and "." not in text:
            text = text.replace(",", ".")
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return Err(f"not a number: {raw!r}")
    else:
        return Err(f"unsupported type {type(raw).__name__}")

    if not amount.is_finite():
        return Err(f"non-finite amount {raw!r}")
    if amount.is_zero():
        return Ok(ZERO)
    if abs(amount.adjusted()) > _MAX_ADJUSTED_EXPONENT:
        return Err(f"amount out of range: {raw!r}")
    return Ok(amount)


@beartype
def non_negative_amount(raw: object, *, field: str = "amount") -> Decimal:
    """Coerce a raw numeric field to a non-negative ``Decimal``, defaulting to 0."""
    result = coerce_amount(raw)
    if result.is_err():
        if raw is not None and raw != "":
            logger.debug("Coerced %s=%r to 0: %s", field, raw, result.unwrap_err())
        return ZERO

    amount = result.unwrap()
    if amount < ZERO:
        logger.debug("Clamped negative %s=%r to 0", field, raw)
        return ZERO
    return amount


@beartype
def parse_insurance_date(raw: object) -> Result[date, str]:
    """Parse a raw date field.

    Accepts ``date`` and ``datetime`` instances, ISO-8601 date or datetime
    strings, and day-first ``dd-mm-yyyy`` / ``dd/mm/yyyy`` strings.
    """
    if raw is None:
        return Err("missing")
    if isinstance(raw, datetime):
        return Ok(raw.date())
    if isinstance(raw, date):
        return Ok(raw)
    if not isinstance(raw, str):
        return Err(f"unsupported type {type(raw).__name__}")

    text = raw.strip()
    if not text:
        return Err("missing")

    try:
        return Ok(date.fromisoformat(text))
    except ValueError:
        pass
    try:
        return Ok(datetime.fromisoformat(text).date())
    except ValueError:
        pass
    for fmt in _FALLBACK_DATE_FORMATS:
        try:
            return Ok(datetime.strptime(text, fmt).date())
        except ValueError:
            continue
    return Err(f"unparseable date {raw!r}")


@beartype
def optional_date(raw: object, *, field: str = "date") -> date | None:
    """Parse a raw date field, returning ``None`` when it is absent or invalid."""
    result = parse_insurance_date(raw)
    if result.is_err():
        if raw is not None and raw != "":
            logger.debug("Ignored %s=%r: %s", field, raw, result.unwrap_err())
        return None
    return result.unwrap()
