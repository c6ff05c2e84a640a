import pytest

from torrest.validation import ValidationError, gt, gte, lt, lte, not_empty, validate


def test_valid_value_is_returned():
    assert validate("x", 5, gt(0), lt(10)) == 5


def test_gt_failure_message():
    with pytest.raises(ValidationError, match="^'x' must be greater than 0$"):
        validate("x", 0, gt(0))


def test_gte_accepts_boundary_and_rejects_below():
    assert validate("x", 0, gte(0)) == 0
    with pytest.raises(ValidationError, match="'x' must be greater than or equal to 0"):
        validate("x", -1, gte(0))


def test_lt_rejects_boundary():
    with pytest.raises(ValidationError, match="'count' must be less than 3"):
        validate("count", 3, lt(3))


def test_lte_accepts_boundary_and_rejects_above():
    assert validate("port", 65535, lte(65535)) == 65535
    with pytest.raises(ValidationError, match="'port' must be less than or equal to 65535"):
        validate("port", 65536, lte(65535))


def test_not_empty():
    assert validate("name", "abc", not_empty()) == "abc"
    with pytest.raises(ValidationError, match="^'name' cannot be empty$"):
        validate("name", "", not_empty())


def test_first_failing_rule_is_reported():
    with pytest.raises(ValidationError) as info:
        validate("v", -5, gte(0), lte(-10))
    assert str(info.value) == "'v' must be greater than or equal to 0"


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate("v", 1, gt(1))