# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Projection of calculated premiums onto insured object records."""

from collections.abc import Iterable
from datetime import date

from beartype import beartype

from ...models.insured_object import InsuredObject, InsuredRecord
from .calculators import calculate_premiums


@beartype
def with_calculated_premiums(
    record: InsuredRecord,
    *,
    as_of: date | None = None,
) -> InsuredObject:
    """Return a copy of ``record`` with its derived premium fields filled in.

    The input is never modified. Derived fields already present on the input
    are ignored and overwritten, which makes the projection idempotent.
    """
    insured = InsuredObject.from_record(record)
    result = calculate_premiums(insured, as_of=as_of)
    return insured.model_copy(
        update={
            "yearly_premium": result.yearly_premium,
            "period_premium": result.period_premium,
            "period_days": result.period_days,
        }
    )


@beartype
def with_calculated_premiums_all(
    objects: Iterable[InsuredRecord],
    *,
    as_of: date | None = None,
) -> list[InsuredObject]:
    """Project every record of a collection, preserving order."""
    evaluation_date = as_of or date.today()
    return [with_calculated_premiums(obj, as_of=evaluation_date) for obj in objects]
