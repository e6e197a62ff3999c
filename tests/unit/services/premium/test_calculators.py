"""Tests for period length and premium calculation."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

import pytest

from premium_engine.models import InsuredObjectStatus, PremiumMethod, RateSource
from premium_engine.services.premium.calculators import (
    calculate_premiums,
    compute_period_days,
)


class TestComputePeriodDays:
    """Inclusive day counts over a 365-day year."""

    def test_same_day_is_one(self) -> None:
        """Start and end on the same day count as one day."""
        assert compute_period_days(date(2024, 3, 5), date(2024, 3, 5)) == 1

    @pytest.mark.parametrize("year", [2023, 2024])
    def test_full_year_without_end_date(self, year: int) -> None:
        """Jan 1 to year end is 365 days, leap year or not."""
        as_of = date(year, 9, 1)
        assert compute_period_days(date(year, 1, 1), None, as_of=as_of) == 365

    @pytest.mark.parametrize("year", [2023, 2024])
    def test_full_year_with_end_date(self, year: int) -> None:
        """An explicit Dec 31 end date gives the same 365 days."""
        assert compute_period_days(date(year, 1, 1), date(year, 12, 31)) == 365

    def test_second_half_of_year(self) -> None:
        """July through December is 184 days."""
        assert compute_period_days(date(2024, 7, 1), date(2024, 12, 31)) == 184

    def test_february_in_leap_year(self) -> None:
        """February 29 is not counted."""
        assert compute_period_days(date(2024, 2, 1), date(2024, 2, 29)) == 28
        assert compute_period_days(date(2024, 2, 29), date(2024, 2, 29)) == 1

    def test_missing_start_uses_evaluation_date(self) -> None:
        """Without a start date coverage runs from as_of to year end."""
        assert compute_period_days(None, None, as_of=date(2023, 12, 31)) == 1
        assert compute_period_days(None, None, as_of=date(2023, 12, 1)) == 31

    def test_end_before_start_clamps_to_one(self) -> None:
        """Inverted periods never go below one day."""
        assert compute_period_days(date(2024, 6, 1), date(2024, 5, 1)) == 1

    def test_multi_year_period(self) -> None:
        """Periods spanning years count 365 days per full year."""
        assert compute_period_days(date(2023, 1, 1), date(2024, 12, 31)) == 730

    def test_datetimes_are_accepted(self) -> None:
        """datetime values are truncated to their date."""
        assert (
            compute_period_days(
                datetime(2024, 7, 1, 12, 0), datetime(2024, 12, 31, 8, 0)
            )
            == 184
        )


class TestCalculatePremiums:
    """Status-aware premium calculation."""

    def test_percentage_full_year(self, as_of: date) -> None:
        """200,000 at 2% for the whole of 2024."""
        result = calculate_premiums(
            {
                "status": "Insured",
                "value": 200000,
                "premiumMethod": "percentage",
                "premiumPercentage": 2,
                "insuranceStartDate": "2024-01-01",
            },
            as_of=as_of,
        )
        assert result.period_days == 365
        assert result.yearly_premium == Decimal("4000")
        assert result.period_premium == Decimal("4000")
        assert result.rate_source is RateSource.CURRENT_PERCENTAGE
        assert result.included_in_premium is True

    def test_fixed_second_half(self, make_object: Any, as_of: date) -> None:
        """A fixed 1,200 prorated over 184 days."""
        insured = make_object(
            premium_method=PremiumMethod.FIXED,
            premium_percentage=None,
            premium_fixed_amount=Decimal("1200"),
            insurance_start_date=date(2024, 7, 1),
            insurance_end_date=date(2024, 12, 31),
        )
        result = calculate_premiums(insured, as_of=as_of)
        assert result.period_days == 184
        assert result.yearly_premium == Decimal("1200")
        assert result.period_premium.quantize(Decimal("0.01")) == Decimal("604.93")
        assert result.rate_source is RateSource.FIXED_AMOUNT

    def test_fixed_uses_legacy_percentage_fallback(
        self, make_object: Any, as_of: date
    ) -> None:
        """Under the fixed method the legacy percentage is read as an amount."""
        insured = make_object(
            premium_method=PremiumMethod.FIXED,
            legacy_percentage=Decimal("750"),
        )
        result = calculate_premiums(insured, as_of=as_of)
        assert result.yearly_premium == Decimal("750")
        assert result.rate_source is RateSource.LEGACY_AS_FIXED_FALLBACK

    def test_fixed_ignores_value_and_rate(self, make_object: Any, as_of: date) -> None:
        """The percentage rate plays no part under the fixed method."""
        insured = make_object(
            premium_method=PremiumMethod.FIXED,
            premium_percentage=Decimal("5"),
        )
        result = calculate_premiums(insured, as_of=as_of)
        assert result.yearly_premium == Decimal("0")
        assert result.rate_source is RateSource.NONE

    def test_per_mille_rate(self, make_object: Any, as_of: date) -> None:
        """Per-mille rates are converted before use."""
        insured = make_object(
            value=Decimal("50000"),
            premium_percentage=None,
            legacy_per_mille=Decimal("8"),
        )
        result = calculate_premiums(insured, as_of=as_of)
        assert result.yearly_premium == Decimal("400")

    @pytest.mark.parametrize(
        "status", [InsuredObjectStatus.PENDING, InsuredObjectStatus.REJECTED, None]
    )
    def test_non_premium_statuses(
        self, make_object: Any, as_of: date, status: InsuredObjectStatus | None
    ) -> None:
        """Pending, rejected and unclassified objects bear no premium."""
        insured = make_object(status=status, insurance_start_date=date(2024, 7, 1))
        result = calculate_premiums(insured, as_of=as_of)
        assert result.yearly_premium == Decimal("0")
        assert result.period_premium == Decimal("0")
        assert result.period_days == 184
        assert result.included_in_premium is False

    def test_removed_object_bears_premium(self, make_object: Any, as_of: date) -> None:
        """Removed objects pay for the days they were covered."""
        insured = make_object(
            status=InsuredObjectStatus.REMOVED,
            value=Decimal("36500"),
            premium_percentage=Decimal("1"),
            insurance_start_date=date(2024, 1, 1),
            insurance_end_date=date(2024, 1, 10),
        )
        result = calculate_premiums(insured, as_of=as_of)
        assert result.yearly_premium == Decimal("365")
        assert result.period_days == 10
        assert result.period_premium == Decimal("10")

    def test_does_not_mutate_input(self, raw_record: dict[str, Any], as_of: date) -> None:
        """Raw input mappings are left untouched."""
        before = dict(raw_record)
        calculate_premiums(raw_record, as_of=as_of)
        assert raw_record == before

    @pytest.mark.parametrize(
        "record",
        [
            {},
            {"status": "Insured"},
            {"status": "Insured", "value": "NaN", "premiumPercentage": "x"},
            {"status": "Removed", "insuranceStartDate": "garbage", "insuranceEndDate": 5},
            {"status": "Insured", "premiumMethod": "fixed", "premiumFixedAmount": None},
            {"status": "Insured", "value": -100, "premiumPercentage": -2},
            {"status": "Insured", "value": "1e999999999", "premiumPercentage": "1e30"},
        ],
    )
    def test_never_raises(self, record: dict[str, Any], as_of: date) -> None:
        """Malformed records still produce a well-formed result."""
        result = calculate_premiums(record, as_of=as_of)
        assert result.yearly_premium >= 0
        assert result.period_premium >= 0
        assert result.period_days >= 1
        assert result.yearly_premium.is_finite()
        assert result.period_premium.is_finite()
