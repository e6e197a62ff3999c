"""Shared fixtures for the premium engine test suite."""

from collections.abc import Callable, Generator
from datetime import date
from decimal import Decimal
from typing import Any

import pytest

from premium_engine.core.config import clear_settings_cache
from premium_engine.models import InsuredObject, InsuredObjectStatus, PremiumMethod

RecordFactory = Callable[..., InsuredObject]


@pytest.fixture
def as_of() -> date:
    """Fixed evaluation date inside a leap year."""
    return date(2024, 6, 15)


@pytest.fixture
def make_object() -> RecordFactory:
    """Factory for insured objects with sensible defaults."""

    counter = iter(range(1, 10_000))

    def _make(**overrides: Any) -> InsuredObject:
        data: dict[str, Any] = {
            "id": f"obj-{next(counter)}",
            "status": InsuredObjectStatus.INSURED,
            "value": Decimal("100000"),
            "premium_method": PremiumMethod.PERCENTAGE,
            "premium_percentage": Decimal("1"),
            "insurance_start_date": date(2024, 1, 1),
            "insurance_end_date": date(2024, 12, 31),
        }
        data.update(overrides)
        return InsuredObject.model_validate(data)

    return _make


@pytest.fixture
def raw_record() -> dict[str, Any]:
    """An insured object as it arrives from the REST layer."""
    return {
        "id": 42,
        "status": "Insured",
        "value": "200000",
        "premiumMethod": "percentage",
        "premiumPercentage": "2",
        "insuranceStartDate": "2024-01-01",
        "insuranceEndDate": "",
        "objectType": "boat",
        "organization": "org-1",
    }


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Ensure no test sees settings cached by another."""
    clear_settings_cache()
    yield
    clear_settings_cache()
