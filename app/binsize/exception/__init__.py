class BinSizeError(ArithmeticError):
    """Base exception for all binsize arithmetic errors."""
    pass


class ByteSizeOverflowError(BinSizeError, OverflowError):
    """A checked operation produced a value outside the int64 range.

    Attributes:
        operation: Name of the failing operation.
        result: The exact value that did not fit. For ``remainder`` this is
            the overflowing quotient ``MIN_VALUE / -1``, since the remainder
            itself would be 0.
    """

    def __init__(self, operation: str, result: int):
        self.operation = operation
        self.result = result
        super().__init__(f"{operation}: result {result} does not fit in a signed 64-bit integer")


class ByteSizeDivisionByZeroError(BinSizeError, ZeroDivisionError):
    """Division or remainder by a zero ByteSize."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: division by zero")
