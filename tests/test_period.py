from datetime import date

import pytest

from src.worker_management.worker_management.common.period import PayPeriod
from src.worker_management.worker_management.core.exceptions import DataError


def test_period_bounds():
    period = PayPeriod(2025, 2)

    assert period.key == "2025-02"
    assert period.days == 28
    assert period.first_day == date(2025, 2, 1)
    assert period.last_day == date(2025, 2, 28)
    assert period.contains(date(2025, 2, 14))
    assert not period.contains(date(2025, 3, 1))


def test_from_key_and_containing():
    assert PayPeriod.from_key("2024-12") == PayPeriod(2024, 12)
    assert PayPeriod.containing(date(2024, 12, 31)) == PayPeriod(2024, 12)


@pytest.mark.parametrize("key", ["2024-13", "24-1-1", "", "december"])
def test_from_key_rejects_bad_keys(key):
    with pytest.raises(DataError):
        PayPeriod.from_key(key)


def test_month_out_of_range():
    with pytest.raises(DataError):
        PayPeriod(2025, 0)
