from enum import Enum
from typing import Final, final


@final
class Sign(Enum):
    """Enumeration for how a 64-bit pattern is interpreted."""

    UNSIGNED = "unsigned"
    SIGNED = "signed"


BITS: Final[int] = 64
MODULO: Final[int] = 1 << BITS
MASK: Final[int] = MODULO - 1
SIGN_BIT: Final[int] = 1 << (BITS - 1)
SHIFT_MASK: Final[int] = BITS - 1

MIN_VALUE: Final[int] = -SIGN_BIT
MAX_VALUE: Final[int] = SIGN_BIT - 1


def wrap(v: int, sign: Sign = Sign.SIGNED) -> int:
    """Wrap an arbitrary int to 64 bits.

    The value is first reduced modulo 2**64, then interpreted according to
    ``sign``. This handles both positive and negative inputs, so the result is
    exactly what two's-complement machine arithmetic would produce.
    """
    v &= MASK
    if sign == Sign.SIGNED and v >= SIGN_BIT:
        v -= MODULO
    return v


def fits(v: int) -> bool:
    return MIN_VALUE <= v <= MAX_VALUE


def shift_count(count: int) -> int:
    """Reduce a shift count modulo the bit width."""
    return count & SHIFT_MASK


def trunc_div(left: int, right: int) -> int:
    """Integer quotient rounded toward zero.

    ``right`` must be non-zero; callers check for that first.
    """
    q = abs(left) // abs(right)
    return -q if (left < 0) != (right < 0) else q


def trunc_rem(left: int, right: int) -> int:
    """Remainder matching :func:`trunc_div`; takes the sign of ``left``."""
    r = abs(left) % abs(right)
    return -r if left < 0 else r
