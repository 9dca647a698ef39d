import pytest
from returns.result import Failure, Success

from binsize.bytesize import ByteSize
from binsize.exception import ByteSizeDivisionByZeroError, ByteSizeOverflowError
from binsize.helper.attempt import (
    attempt,
    try_add,
    try_divide,
    try_multiply,
    try_negate,
    try_remainder,
    try_subtract,
)

MIN = ByteSize.MIN_VALUE
MAX = ByteSize.MAX_VALUE
ONE = ByteSize(1)


def test_success():
    assert try_add(ONE, ONE) == Success(ByteSize(2))
    assert try_subtract(ONE, ONE) == Success(ByteSize.ZERO)
    assert try_multiply(ByteSize(6), ByteSize(7)) == Success(ByteSize(42))
    assert try_divide(ByteSize(-7), ByteSize(2)) == Success(ByteSize(-3))
    assert try_remainder(ByteSize(-7), ByteSize(2)) == Success(ByteSize(-1))
    assert try_negate(MAX) == Success(ByteSize(-(2**63) + 1))


def test_overflow_failure():
    result = try_add(MAX, ONE)
    assert isinstance(result, Failure)
    assert isinstance(result.failure(), ByteSizeOverflowError)
    assert isinstance(try_subtract(MIN, ONE), Failure)
    assert isinstance(try_multiply(MIN, ByteSize(-1)), Failure)
    assert isinstance(try_negate(MIN), Failure)
    assert isinstance(try_divide(MIN, ByteSize(-1)).failure(), ByteSizeOverflowError)


def test_division_by_zero_failure():
    assert isinstance(try_divide(ONE, ByteSize.ZERO).failure(), ByteSizeDivisionByZeroError)
    assert isinstance(try_remainder(ONE, ByteSize.ZERO).failure(), ByteSizeDivisionByZeroError)


def test_attempt_any_operation():
    assert attempt(ByteSize.increment_checked, ByteSize(41)) == Success(ByteSize(42))
    assert isinstance(attempt(ByteSize.increment_checked, MAX), Failure)
    assert attempt(ByteSize.shift_right_unsigned, ByteSize(-1), 63) == Success(ONE)


def test_attempt_map():
    doubled = try_add(ByteSize(512), ByteSize(512)).map(lambda b: b.multiply(ByteSize(2)))
    assert doubled == Success(ByteSize(2048))


def test_attempt_does_not_swallow_type_errors():
    with pytest.raises(TypeError):
        attempt(ByteSize.shift_left, ONE, "1")


@pytest.mark.parametrize("wrapper", [try_add, try_subtract, try_multiply, try_divide, try_remainder])
def test_wrappers_raise_type_error_for_plain_int(wrapper):
    with pytest.raises(TypeError):
        wrapper(ONE, 1)


def test_attempt_propagates_type_error_from_checked_method():
    with pytest.raises(TypeError):
        attempt(ByteSize.add_checked, ONE, 1)
