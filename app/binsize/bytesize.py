from __future__ import annotations

from typing import ClassVar, final

from binsize.exception import ByteSizeDivisionByZeroError, ByteSizeOverflowError
from binsize.logger import log as _log
from binsize.util import Int64
from binsize.util.Int64 import Sign


@final
class ByteSize:
    """A quantity of bytes stored as a signed 64-bit integer.

    Arithmetic comes in two flavours. The operator symbols and the plain
    methods (``add``, ``negate``, ...) wrap around on overflow exactly like
    machine integers. The ``*_checked`` methods raise
    :class:`ByteSizeOverflowError` instead. When nothing overflows both give
    the same result.

    Division and remainder truncate toward zero, as C does, not toward
    negative infinity like Python's ``//``.

    Attributes:
        value: The byte count (read-only). May be negative.
    """

    __slots__ = ("_value",)

    MIN_VALUE: ClassVar[ByteSize]
    MAX_VALUE: ClassVar[ByteSize]
    ZERO: ClassVar[ByteSize]

    def __init__(self, value: int = 0):
        """Wrap a raw byte count.

        Subclasses of int such as ``IntFlag`` members are stored as plain ints.

        Args:
            value (int, optional): Byte count. Defaults to 0.

        Raises:
            TypeError: If value is not an int.
            ByteSizeOverflowError: If value is outside the signed 64-bit range.
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        value = int(value)
        if not Int64.fits(value):
            raise ByteSizeOverflowError("ByteSize", value)
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_raw(cls, value: int) -> ByteSize:
        """Create a ByteSize from a raw byte count; same as the constructor."""
        return cls(value)

    @classmethod
    def _wrapped(cls, v: int) -> ByteSize:
        return cls(Int64.wrap(v))

    @classmethod
    def _checked(cls, operation: str, v: int) -> ByteSize:
        if not Int64.fits(v):
            _log.debug("%s overflowed with exact result %d", operation, v)
            raise ByteSizeOverflowError(operation, v)
        return cls(v)

    @property
    def value(self) -> int:
        return self._value

    def to_raw(self) -> int:
        """Return the byte count as a plain int.

        Returns:
            int: The byte count.
        """
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"ByteSize({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __hash__(self) -> int:
        return hash((ByteSize, self._value))

    # Comparison operations
    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteSize):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ByteSize):
            return self._value < other._value
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, ByteSize):
            return self._value <= other._value
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, ByteSize):
            return self._value > other._value
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, ByteSize):
            return self._value >= other._value
        return NotImplemented

    # Unchecked arithmetic
    def add(self, other: ByteSize) -> ByteSize:
        """Addition with wrapping.

        Args:
            other (ByteSize): Value to add.

        Raises:
            TypeError: If other is not a ByteSize.

        Returns:
            ByteSize: Sum, wrapped to 64 bits.
        """
        return self._wrapped(self._value + _operand(other))

    def subtract(self, other: ByteSize) -> ByteSize:
        """Subtraction with wrapping.

        Args:
            other (ByteSize): Value to subtract.

        Raises:
            TypeError: If other is not a ByteSize.

        Returns:
            ByteSize: Difference, wrapped to 64 bits.
        """
        return self._wrapped(self._value - _operand(other))

    def multiply(self, other: ByteSize) -> ByteSize:
        """Multiplication with wrapping.

        Args:
            other (ByteSize): Multiplier.

        Raises:
            TypeError: If other is not a ByteSize.

        Returns:
            ByteSize: Product, wrapped to 64 bits.
        """
        return self._wrapped(self._value * _operand(other))

    def negate(self) -> ByteSize:
        """Negation (two's complement); ``MIN_VALUE`` negates to itself.

        Returns:
            ByteSize
        """
        return self._wrapped(-self._value)

    def increment(self) -> ByteSize:
        """Add one with wrapping.

        Returns:
            ByteSize
        """
        return self._wrapped(self._value + 1)

    def decrement(self) -> ByteSize:
        """Subtract one with wrapping.

        Returns:
            ByteSize
        """
        return self._wrapped(self._value - 1)

    # Checked arithmetic
    def add_checked(self, other: ByteSize) -> ByteSize:
        """Addition that raises instead of wrapping.

        Raises:
            TypeError: If other is not a ByteSize.
            ByteSizeOverflowError: If the sum is outside the int64 range.
        """
        return self._checked("add", self._value + _operand(other))

    def subtract_checked(self, other: ByteSize) -> ByteSize:
        return self._checked("subtract", self._value - _operand(other))

    def multiply_checked(self, other: ByteSize) -> ByteSize:
        return self._checked("multiply", self._value * _operand(other))

    def negate_checked(self) -> ByteSize:
        return self._checked("negate", -self._value)

    def increment_checked(self) -> ByteSize:
        return self._checked("increment", self._value + 1)

    def decrement_checked(self) -> ByteSize:
        return self._checked("decrement", self._value - 1)

    # Division has a single implementation for both call sites.
    def divide(self, other: ByteSize) -> ByteSize:
        """Quotient truncated toward zero.

        Raises:
            TypeError: If other is not a ByteSize.
            ByteSizeDivisionByZeroError: If other is zero.
            ByteSizeOverflowError: For ``MIN_VALUE / -1``.
        """
        divisor = _operand(other)
        if divisor == 0:
            _log.debug("divide by zero rejected for %d", self._value)
            raise ByteSizeDivisionByZeroError("divide")
        return self._checked("divide", Int64.trunc_div(self._value, divisor))

    def remainder(self, other: ByteSize) -> ByteSize:
        """Remainder of :meth:`divide`; takes the sign of the dividend.

        ``MIN_VALUE % -1`` raises, because the matching quotient does. The
        error then carries that quotient as its ``result``.

        Raises:
            TypeError: If other is not a ByteSize.
            ByteSizeDivisionByZeroError: If other is zero.
            ByteSizeOverflowError: For ``MIN_VALUE % -1``.
        """
        divisor = _operand(other)
        if divisor == 0:
            _log.debug("remainder by zero rejected for %d", self._value)
            raise ByteSizeDivisionByZeroError("remainder")
        if self._value == Int64.MIN_VALUE and divisor == -1:
            quotient = Int64.trunc_div(self._value, divisor)
            _log.debug("remainder overflowed: quotient %d of %d / -1", quotient, self._value)
            raise ByteSizeOverflowError("remainder", quotient)
        return ByteSize(Int64.trunc_rem(self._value, divisor))

    divide_checked = divide
    remainder_checked = remainder

    # Bitwise operations
    def bitwise_and(self, other: ByteSize) -> ByteSize:
        """Bitwise AND.

        Raises:
            TypeError: If other is not a ByteSize.

        Returns:
            ByteSize: Result of AND.
        """
        return ByteSize(self._value & _operand(other))

    def bitwise_or(self, other: ByteSize) -> ByteSize:
        """Bitwise OR.

        Raises:
            TypeError: If other is not a ByteSize.

        Returns:
            ByteSize: Result of OR.
        """
        return ByteSize(self._value | _operand(other))

    def bitwise_xor(self, other: ByteSize) -> ByteSize:
        """Bitwise XOR.

        Raises:
            TypeError: If other is not a ByteSize.

        Returns:
            ByteSize: Result of XOR.
        """
        return ByteSize(self._value ^ _operand(other))

    def complement(self) -> ByteSize:
        """Bitwise NOT (ones' complement).

        Returns:
            ByteSize: Bitwise complement.
        """
        return ByteSize(~self._value)

    # Shift operations; the count is taken modulo 64
    def shift_left(self, count: int) -> ByteSize:
        """Left shift; bits moved past bit 63 are dropped.

        Args:
            count (int): Shift amount, taken modulo 64.

        Raises:
            TypeError: If count is not an int.

        Returns:
            ByteSize: Result of shift.
        """
        return self._wrapped(self._value << _shift_count(count))

    def shift_right(self, count: int) -> ByteSize:
        """Arithmetic right shift; the sign bit is copied into vacated bits."""
        return ByteSize(self._value >> _shift_count(count))

    def shift_right_unsigned(self, count: int) -> ByteSize:
        """Logical right shift; vacated bits are filled with zero."""
        unsigned = Int64.wrap(self._value, Sign.UNSIGNED)
        return self._wrapped(unsigned >> _shift_count(count))

    # Operator symbols use the unchecked path
    def __add__(self, other: object) -> ByteSize:
        if isinstance(other, ByteSize):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object) -> ByteSize:
        if isinstance(other, ByteSize):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: object) -> ByteSize:
        if isinstance(other, ByteSize):
            return self.multiply(other)
        return NotImplemented

    def __floordiv__(self, other: object) -> ByteSize:
        if isinstance(other, ByteSize):
            return self.divide(other)
        return NotImplemented

    def __mod__(self, other: object) -> ByteSize:
        if isinstance(other, ByteSize):
            return self.remainder(other)
        return NotImplemented

    def __and__(self, other: object) -> ByteSize:
        if isinstance(other, ByteSize):
            return self.bitwise_and(other)
        return NotImplemented

    def __or__(self, other: object) -> ByteSize:
        if isinstance(other, ByteSize):
            return self.bitwise_or(other)
        return NotImplemented

    def __xor__(self, other: object) -> ByteSize:
        if isinstance(other, ByteSize):
            return self.bitwise_xor(other)
        return NotImplemented

    def __lshift__(self, other: object) -> ByteSize:
        if isinstance(other, int):
            return self.shift_left(other)
        return NotImplemented

    def __rshift__(self, other: object) -> ByteSize:
        if isinstance(other, int):
            return self.shift_right(other)
        return NotImplemented

    # Unary operations
    def __neg__(self) -> ByteSize:
        return self.negate()

    def __pos__(self) -> ByteSize:
        return self

    def __invert__(self) -> ByteSize:
        return self.complement()


def _operand(other: ByteSize) -> int:
    if not isinstance(other, ByteSize):
        raise TypeError(f"Expected ByteSize operand, got {type(other).__name__}")
    return other._value


def _shift_count(count: int) -> int:
    if not isinstance(count, int):
        raise TypeError(f"Shift count must be int, got {type(count).__name__}")
    return Int64.shift_count(int(count))


ByteSize.MIN_VALUE = ByteSize(Int64.MIN_VALUE)
ByteSize.MAX_VALUE = ByteSize(Int64.MAX_VALUE)
ByteSize.ZERO = ByteSize(0)


def from_raw(value: int) -> ByteSize:
    return ByteSize(value)


def to_raw(value: ByteSize) -> int:
    return value.to_raw()


# Named entry points. add/subtract/multiply are always checked; negate wraps.
def add(left: ByteSize, right: ByteSize) -> ByteSize:
    return left.add_checked(right)


def subtract(left: ByteSize, right: ByteSize) -> ByteSize:
    return left.subtract_checked(right)


def multiply(left: ByteSize, right: ByteSize) -> ByteSize:
    return left.multiply_checked(right)


def divide(left: ByteSize, right: ByteSize) -> ByteSize:
    return left.divide(right)


def remainder(left: ByteSize, right: ByteSize) -> ByteSize:
    return left.remainder(right)


def negate(value: ByteSize) -> ByteSize:
    return value.negate()
