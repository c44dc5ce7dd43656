"""Tests for department normalization."""

import pytest

from app.domain.policies.department import ALLOWED_DEPARTMENTS, normalize_department
from app.domain.value_objects.enums import Department


def test_every_allowed_value_maps_to_itself():
    for value in ALLOWED_DEPARTMENTS:
        assert normalize_department(value).value == value


@pytest.mark.parametrize("raw", ["", None, "spa", "room service", "house keeping"])
def test_unknown_values_become_other(raw):
    assert normalize_department(raw) == Department.OTHER


def test_mixed_case_returns_canonical_lowercase():
    assert normalize_department("Housekeeping") == Department.HOUSEKEEPING
    assert normalize_department("WIFI-TECH").value == "wifi-tech"


def test_whitespace_is_trimmed():
    assert normalize_department("  maintenance \n") == Department.MAINTENANCE


def test_result_compares_equal_to_plain_string():
    assert normalize_department("billing-payment") == "billing-payment"


def test_non_string_becomes_other():
    assert normalize_department(5) == Department.OTHER
