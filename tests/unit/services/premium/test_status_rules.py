"""Tests for status inclusion rules."""

import pytest

from premium_engine.models import InsuredObjectStatus, StatusBucket
from premium_engine.services.premium.status_rules import (
    bucket_for_status,
    included_in_premium,
    included_in_premium_total,
    included_in_value_total,
)

S = InsuredObjectStatus


class TestStatusRules:
    """Value and premium inclusion sets differ."""

    @pytest.mark.parametrize(
        ("status", "premium", "value"),
        [
            (S.INSURED, True, True),
            (S.REMOVED, True, False),
            (S.PENDING, False, False),
            (S.REJECTED, False, False),
            (None, False, False),
        ],
    )
    def test_inclusion(
        self, status: InsuredObjectStatus | None, premium: bool, value: bool
    ) -> None:
        """Each predicate answers independently."""
        assert included_in_premium(status) is premium
        assert included_in_premium_total(status) is premium
        assert included_in_value_total(status) is value

    def test_buckets(self) -> None:
        """Each status maps to its own bucket."""
        assert bucket_for_status(S.INSURED) is StatusBucket.INSURED
        assert bucket_for_status(S.REMOVED) is StatusBucket.OUTSIDE_POLICY
        assert bucket_for_status(S.PENDING) is StatusBucket.PENDING
        assert bucket_for_status(S.REJECTED) is StatusBucket.REJECTED
        assert bucket_for_status(None) is None
