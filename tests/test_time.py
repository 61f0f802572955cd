# tests/test_time.py

import pytest
import random
from datetime import date, datetime, timedelta, timezone

from amlich.core.time import VIETNAM_TZ, from_jdn, to_jdn, vietnam_civil_date

def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        assert to_jdn(from_jdn(jdn_in)) == jdn_in

def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert to_jdn(date(2000, 1, 1)) == 2451545
    # Unix epoch
    assert to_jdn(date(1970, 1, 1)) == 2440588
    assert to_jdn(date(1900, 1, 1)) == 2415021

def test_jdn_consecutive_days():
    d = date(1899, 12, 25)
    for _ in range(400):
        assert to_jdn(d + timedelta(days=1)) == to_jdn(d) + 1
        d += timedelta(days=1)

def test_plain_date_is_civil_date():
    assert vietnam_civil_date(date(2024, 2, 10)) == date(2024, 2, 10)

def test_aware_datetime_shifted_to_vietnam():
    utc = timezone.utc
    assert vietnam_civil_date(datetime(2024, 2, 9, 16, 59, tzinfo=utc)) == date(2024, 2, 9)
    assert vietnam_civil_date(datetime(2024, 2, 9, 17, 0, tzinfo=utc)) == date(2024, 2, 10)

    paris = timezone(timedelta(hours=1))
    assert vietnam_civil_date(datetime(2024, 2, 9, 18, 30, tzinfo=paris)) == date(2024, 2, 10)
    assert vietnam_civil_date(datetime(2024, 2, 10, 0, 0, tzinfo=VIETNAM_TZ)) == date(2024, 2, 10)

def test_naive_datetime_read_as_utc():
    assert vietnam_civil_date(datetime(2024, 2, 9, 16, 59)) == date(2024, 2, 9)
    assert vietnam_civil_date(datetime(2024, 2, 9, 17, 0)) == date(2024, 2, 10)

def test_rejects_non_dates():
    with pytest.raises(TypeError):
        vietnam_civil_date("2024-02-10")
