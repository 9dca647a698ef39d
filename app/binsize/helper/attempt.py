from typing import Callable

from returns.result import Failure, Result, Success

from binsize.bytesize import ByteSize
from binsize.exception import BinSizeError


def attempt(operation: Callable[..., ByteSize], *operands: ByteSize) -> Result[ByteSize, BinSizeError]:
    """
    Run a ByteSize operation and capture arithmetic failures as a value.

    Args:
        operation: Any callable returning a ByteSize, usually an unbound
            method such as ``ByteSize.add_checked``.
        *operands: Arguments passed to ``operation``.

    Returns:
        Success with the result, or Failure holding the BinSizeError raised.
        Other exceptions are not caught.
    """
    try:
        return Success(operation(*operands))
    except BinSizeError as e:
        return Failure(e)


def try_add(left: ByteSize, right: ByteSize) -> Result[ByteSize, BinSizeError]:
    return attempt(ByteSize.add_checked, left, right)


def try_subtract(left: ByteSize, right: ByteSize) -> Result[ByteSize, BinSizeError]:
    return attempt(ByteSize.subtract_checked, left, right)


def try_multiply(left: ByteSize, right: ByteSize) -> Result[ByteSize, BinSizeError]:
    return attempt(ByteSize.multiply_checked, left, right)


def try_divide(left: ByteSize, right: ByteSize) -> Result[ByteSize, BinSizeError]:
    return attempt(ByteSize.divide, left, right)


def try_remainder(left: ByteSize, right: ByteSize) -> Result[ByteSize, BinSizeError]:
    return attempt(ByteSize.remainder, left, right)


def try_negate(value: ByteSize) -> Result[ByteSize, BinSizeError]:
    return attempt(ByteSize.negate_checked, value)
