# tests/test_tariff_service.py
"""Unit tests for date checks, the 30-day-month calendar and fees."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from airport_parking.services.tariff_service import (
    calculate_cost,
    calculate_days,
    is_exit_date_valid,
    is_valid_date,
    is_valid_registration,
    total_days,
)


class TestValidation:
    @pytest.mark.parametrize("reg", ["ABC", "ABC123", "ABCD1234"])
    def test_registration_length_accepted(self, reg):
        assert is_valid_registration(reg)

    @pytest.mark.parametrize("reg", ["", "AB", "ABCDE1234"])
    def test_registration_length_rejected(self, reg):
        assert not is_valid_registration(reg)

    def test_date_shape_accepted(self):
        assert is_valid_date("2024-01-01")

    def test_date_is_shape_only(self):
        # month 13, day 40: no calendar check
        assert is_valid_date("2024-13-40")

    @pytest.mark.parametrize("value", ["2024-1-01", "24-01-01", "2024/01/01", "2024-01-01 ", "x2024-01-01", ""])
    def test_bad_date_shape_rejected(self, value):
        assert not is_valid_date(value)

    def test_non_ascii_digits_rejected(self):
        assert not is_valid_date("٢٠٢٤-01-01")


class TestCalendar:
    def test_total_days(self):
        assert total_days("2024-01-01") == 2024 * 360 + 30 + 1

    def test_same_day_is_zero(self):
        assert calculate_days("2024-05-05", "2024-05-05") == 0

    def test_ten_days(self):
        assert calculate_days("2024-01-01", "2024-01-11") == 10

    def test_every_month_is_thirty_days(self):
        assert calculate_days("2024-01-01", "2024-02-01") == 30
        assert calculate_days("2024-02-01", "2024-03-01") == 30

    def test_year_boundary(self):
        assert calculate_days("2023-12-25", "2024-01-05") == 10

    def test_negative_span(self):
        assert calculate_days("2024-01-10", "2024-01-01") == -9

    def test_exit_date_window(self):
        assert is_exit_date_valid("2024-01-01", "2024-01-01")
        assert is_exit_date_valid("2024-01-01", "2024-02-01")
        assert not is_exit_date_valid("2024-01-01", "2024-02-02")
        assert not is_exit_date_valid("2024-01-02", "2024-01-01")
        assert not is_exit_date_valid("2024-01-01", "tomorrow")


class TestCost:
    def test_zero_days_free(self):
        assert calculate_cost(0, False) == 0

    def test_zero_days_charging_pays_surcharge(self):
        assert calculate_cost(0, True) == 250

    def test_ten_day_boundary(self):
        assert calculate_cost(10, False) == 1200
        assert calculate_cost(10, True) == 1450

    def test_eleventh_day_reduced(self):
        assert calculate_cost(11, False) == 1250

    def test_full_month_with_charging(self):
        assert calculate_cost(30, True) == 1200 + 20 * 50 + 250

    def test_monotonic(self):
        for charging in (False, True):
            costs = [calculate_cost(d, charging) for d in range(31)]
            assert costs == sorted(costs)

    def test_negative_days_rejected(self):
        with pytest.raises(ValueError):
            calculate_cost(-1, False)
