from binsize.bytesize import ByteSize
from binsize.exception import BinSizeError, ByteSizeDivisionByZeroError, ByteSizeOverflowError

__all__ = [
    "ByteSize",
    "BinSizeError",
    "ByteSizeDivisionByZeroError",
    "ByteSizeOverflowError",
]
