"""Tests for status-bucketed totals aggregation."""

import itertools
from datetime import date
from decimal import Decimal
from typing import Any

from premium_engine.models import InsuredObjectStatus, StatusBucket
from premium_engine.services.premium.aggregator import aggregate_totals

S = InsuredObjectStatus


class TestAggregateTotals:
    """Aggregation contract."""

    def test_value_and_premium_inclusion_differ(
        self, make_object: Any, as_of: date
    ) -> None:
        """Removed objects add premium but not value."""
        objects = [
            make_object(status=S.INSURED, value=Decimal("100000")),
            make_object(status=S.REMOVED, value=Decimal("50000")),
        ]
        totals = aggregate_totals(objects, as_of=as_of)
        assert totals.total_value == Decimal("100000")
        assert totals.total_yearly_premium == Decimal("1500")
        assert totals.total_period_premium == Decimal("1500")
        assert totals.insured_count == 1
        assert totals.outside_policy_count == 1

    def test_pending_and_rejected_only_in_breakdown(
        self, make_object: Any, as_of: date
    ) -> None:
        """Pending and rejected values stay out of the headline totals."""
        objects = [
            make_object(status=S.INSURED, value=Decimal("1000")),
            make_object(status=S.PENDING, value=Decimal("2000")),
            make_object(status=S.PENDING, value=Decimal("3000")),
            make_object(status=S.REJECTED, value=Decimal("4000")),
        ]
        totals = aggregate_totals(objects, as_of=as_of)

        assert totals.total_value == Decimal("1000")
        assert totals.total_yearly_premium == Decimal("10")
        assert totals.pending_count == 2
        assert totals.rejected_count == 1

        pending = totals.breakdown[StatusBucket.PENDING]
        assert pending.total_value == Decimal("5000")
        assert pending.count == 2
        assert pending.total_yearly_premium is None
        assert pending.total_period_premium is None

        rejected = totals.breakdown[StatusBucket.REJECTED]
        assert rejected.total_value == Decimal("4000")
        assert rejected.total_yearly_premium is None

    def test_breakdown_has_every_bucket(self, as_of: date) -> None:
        """An empty collection still reports all four buckets at zero."""
        totals = aggregate_totals([], as_of=as_of)
        assert set(totals.breakdown) == set(StatusBucket)
        assert totals.total_value == Decimal("0")
        assert totals.total_yearly_premium == Decimal("0")
        assert totals.total_period_premium == Decimal("0")
        assert totals.breakdown[StatusBucket.INSURED].total_yearly_premium == Decimal("0")
        assert totals.breakdown[StatusBucket.OUTSIDE_POLICY].count == 0

    def test_partial_year_removed_object(self, make_object: Any, as_of: date) -> None:
        """A removed object contributes its prorated period premium."""
        objects = [
            make_object(
                status=S.REMOVED,
                value=Decimal("36500"),
                insurance_end_date=date(2024, 1, 31),
            )
        ]
        totals = aggregate_totals(objects, as_of=as_of)
        outside = totals.breakdown[StatusBucket.OUTSIDE_POLICY]
        assert outside.total_yearly_premium == Decimal("365")
        assert outside.total_period_premium == Decimal("31")
        assert totals.total_period_premium == Decimal("31")
        assert totals.total_value == Decimal("0")

    def test_order_independent(self, make_object: Any, as_of: date) -> None:
        """Permuting the input never changes the result."""
        objects = [
            make_object(
                status=S.INSURED,
                value=Decimal("123456.78"),
                premium_percentage=Decimal("1.37"),
                insurance_start_date=date(2024, 3, 3),
            ),
            make_object(
                status=S.INSURED,
                value=Decimal("98765.43"),
                premium_percentage=Decimal("0.93"),
                insurance_start_date=date(2024, 5, 17),
            ),
            make_object(
                status=S.REMOVED,
                value=Decimal("55555.55"),
                premium_percentage=None,
                legacy_per_mille=Decimal("7.3"),
                insurance_end_date=date(2024, 8, 9),
            ),
            make_object(status=S.PENDING, value=Decimal("1000")),
            make_object(status=S.REJECTED, value=Decimal("2000")),
        ]
        expected = aggregate_totals(objects, as_of=as_of)
        for permutation in itertools.permutations(objects):
            assert aggregate_totals(list(permutation), as_of=as_of) == expected

    def test_unclassified_records_are_counted_separately(self, as_of: date) -> None:
        """Unknown statuses are excluded from every bucket."""
        records = [
            {"status": "Insured", "value": 1000, "premiumPercentage": 1},
            {"status": "Not Insured", "value": 9999, "premiumPercentage": 5},
            {"value": 5},
        ]
        totals = aggregate_totals(records, as_of=as_of)
        assert totals.unclassified_count == 2
        assert totals.total_value == Decimal("1000")
        assert sum(bucket.count for bucket in totals.breakdown.values()) == 1

    def test_mixed_models_and_mappings(self, make_object: Any, as_of: date) -> None:
        """Models and raw mappings can be aggregated together."""
        records = [
            make_object(status=S.INSURED, value=Decimal("1000")),
            {
                "status": "OutOfPolicy",
                "waarde": "2000",
                "premiepromillage": "10",
                "ingangsdatum": "2024-01-01",
                "uitgangsdatum": "2024-12-31",
            },
        ]
        totals = aggregate_totals(records, as_of=as_of)
        assert totals.total_value == Decimal("1000")
        assert totals.total_yearly_premium == Decimal("30")

    def test_accepts_generators(self, make_object: Any, as_of: date) -> None:
        """Any finite iterable is accepted."""
        totals = aggregate_totals(
            (make_object(value=Decimal(v)) for v in ("10", "20", "30")), as_of=as_of
        )
        assert totals.insured_count == 3
        assert totals.total_value == Decimal("60")

    def test_never_raises_on_garbage(self, as_of: date) -> None:
        """Garbage records do not break aggregation."""
        records = [
            {},
            {"status": "Insured", "value": "abc", "insuranceStartDate": "soon"},
            {"status": "Removed", "premiumMethod": "fixed", "legacyPercentage": "x"},
            {"status": 12, "value": None},
        ]
        totals = aggregate_totals(records, as_of=as_of)
        assert totals.total_value == Decimal("0")
        assert totals.total_yearly_premium == Decimal("0")
        assert totals.insured_count == 1
        assert totals.outside_policy_count == 1
        assert totals.unclassified_count == 2
