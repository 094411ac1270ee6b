"""
extfmt - Hex Dump Rendering

Renders byte buffers as rows of two-digit hex tokens, optionally prefixed
with the running byte offset of each row:

    00000000	01 02 03 04 05 06 07 08 09 0a 0b 0c
    0000000c	0d 0e 0f 10

Also provides as_hexdump() for dumping fixed-size numeric values through
numpy with an explicit byte order, and the dump() shortcut.
"""

import operator
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import TextIO

import numpy as np

DEFAULT_ITEMS_PER_ROW = 16
INDEX_WIDTH = 8  # hex digits in the row offset column

BYTE_ORDERS = {"little": "<", "big": ">"}

# numpy dtype used for plain Python scalars when none is given (bool before int)
DEFAULT_SCALAR_DTYPES = (
    (bool, np.bool_),
    (int, np.int32),
    (float, np.float64),
)


@dataclass(frozen=True)
class RenderOptions:
    """Display options for a HexRenderer."""

    show_index: bool = True
    items_per_row: int = DEFAULT_ITEMS_PER_ROW

    def __post_init__(self):
        try:
            if isinstance(self.items_per_row, bool):
                raise TypeError
            operator.index(self.items_per_row)
        except TypeError:
            raise TypeError(
                f"items_per_row must be an integer, got {self.items_per_row!r}"
            ) from None
        if self.items_per_row < 1:
            raise ValueError(
                f"items_per_row must be at least 1, got {self.items_per_row}"
            )


class HexRenderer:
    """
    Formats a byte buffer as a hex dump.

    The buffer is held as a memoryview and is never copied or modified.
    Configuration methods return a new renderer over the same buffer, so a
    renderer never changes once created.

    Example:
        >>> str(HexRenderer(bytes([1, 2, 255, 64])))
        '00000000\\t01 02 ff 40'
        >>> str(HexRenderer(b"\\x01\\x02\\x03").set_show_index(False))
        '01 02 03'
    """

    def __init__(self, data, options: RenderOptions | None = None):
        """
        Create a renderer over a byte buffer.

        Args:
            data: Any object supporting the buffer protocol (bytes,
                bytearray, memoryview, array, contiguous numpy array)
            options: Display options, defaults to RenderOptions()

        Raises:
            TypeError: If data is not a contiguous bytes-like object
        """
        self._data = memoryview(data).cast("B")
        self._options = options if options is not None else RenderOptions()

    @property
    def data(self) -> memoryview:
        return self._data

    @property
    def options(self) -> RenderOptions:
        return self._options

    def set_show_index(self, value: bool) -> "HexRenderer":
        """Return a renderer that does (or does not) prefix rows with their offset."""
        return HexRenderer(self._data, replace(self._options, show_index=value))

    def set_items_per_row(self, value: int) -> "HexRenderer":
        """
        Return a renderer that wraps rows after the given number of bytes.

        Raises:
            ValueError: If value is less than 1
        """
        return HexRenderer(self._data, replace(self._options, items_per_row=value))

    def iter_text(self) -> Iterator[str]:
        """
        Yield the rendered dump piece by piece.

        Each index field, byte token and separator is yielded separately.
        Joining everything gives the same text as str(renderer).
        """
        show_index = self._options.show_index
        per_row = self._options.items_per_row
        last = len(self._data) - 1

        for i, byte in enumerate(self._data):
            col = i % per_row
            if show_index and col == 0:
                yield f"{i:0{INDEX_WIDTH}x}\t"

            yield f"{byte:02x}"

            if i != last:
                yield "\n" if col == per_row - 1 else " "

    def write_to(self, sink: TextIO) -> int:
        """
        Write the dump to a text sink incrementally.

        Errors raised by the sink propagate to the caller unchanged.

        Args:
            sink: Object with a write(str) method (file, StringIO, ...)

        Returns:
            Number of characters written
        """
        written = 0
        for piece in self.iter_text():
            sink.write(piece)
            written += len(piece)
        return written

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return "".join(self.iter_text())

    def __repr__(self) -> str:
        return (
            f"HexRenderer(len={len(self._data)}, "
            f"show_index={self._options.show_index}, "
            f"items_per_row={self._options.items_per_row})"
        )


def _check_integer_range(value, dtype: np.dtype) -> None:
    """Raise OverflowError if integer values would wrap when cast to dtype."""
    if isinstance(value, int) and not isinstance(value, bool):
        low = high = value
    else:
        source = np.asarray(value)
        if source.dtype.kind not in "iu" or source.size == 0:
            return
        low, high = int(source.min()), int(source.max())

    info = np.iinfo(dtype)
    if low < info.min or high > info.max:
        shown = low if low == high else f"{low}..{high}"
        raise OverflowError(f"{shown} does not fit in {dtype}")


def _numpy_bytes(value, byteorder: str, dtype) -> memoryview:
    """Serialize a scalar or array through numpy in the requested byte order."""
    if dtype is None:
        if isinstance(value, (np.generic, np.ndarray)):
            dtype = value.dtype
        else:
            dtype = next(d for t, d in DEFAULT_SCALAR_DTYPES if isinstance(value, t))
    dtype = np.dtype(dtype)

    if dtype.hasobject:
        raise TypeError(f"Cannot dump raw bytes of object dtype {dtype}")

    if dtype.kind in "iu":
        _check_integer_range(value, dtype)

    arr = np.asarray(value, dtype=dtype.newbyteorder(BYTE_ORDERS[byteorder]))
    return memoryview(arr.tobytes())


def as_hexdump(value, *, byteorder: str = "little", dtype=None) -> HexRenderer:
    """
    Create a HexRenderer over the raw bytes of a value.

    Byte buffers (bytes, bytearray, single-byte memoryviews) are viewed
    directly, and lists and tuples of ints are converted with bytes().
    Python bools, ints and floats, numpy scalars and arrays, and buffers
    with wider items (array.array("H"), memoryviews of numpy arrays) are
    serialized through numpy in the given byte order, so the result does
    not depend on the host.

    Python scalars default to these dtypes unless dtype is given:
    bool -> bool_ (1 byte), int -> int32, float -> float64.

    Args:
        value: Value to dump
        byteorder: "little" or "big"
        dtype: numpy dtype overriding the value's own or the default one

    Returns:
        HexRenderer with default options

    Raises:
        ValueError: If byteorder is unknown or a list item is not a byte
        OverflowError: If integer values do not fit in the dtype
        TypeError: If the value has no raw byte representation, or dtype is
            given for plain bytes or a list of bytes

    Example:
        >>> str(as_hexdump(64))
        '00000000\\t40 00 00 00'
        >>> str(as_hexdump(64, byteorder="big", dtype="uint16"))
        '00000000\\t00 40'
    """
    if byteorder not in BYTE_ORDERS:
        raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}")

    if isinstance(value, (np.generic, np.ndarray, bool, int, float)):
        return HexRenderer(_numpy_bytes(value, byteorder, dtype))

    if isinstance(value, str):
        raise TypeError("Cannot dump str, encode it to bytes first")

    if isinstance(value, (list, tuple)):
        view = memoryview(bytes(value))
    else:
        try:
            view = memoryview(value)
        except TypeError:
            raise TypeError(
                f"Cannot dump raw bytes of {type(value).__name__} value"
            ) from None

    if view.itemsize > 1:
        return HexRenderer(_numpy_bytes(np.asarray(view), byteorder, dtype))

    if dtype is not None:
        raise TypeError(
            f"dtype does not apply to {type(value).__name__} values, which are already bytes"
        )
    return HexRenderer(view)


def dump(
    value,
    *,
    show_index: bool | None = None,
    items_per_row: int | None = None,
    byteorder: str = "little",
    dtype=None,
) -> HexRenderer:
    """
    Create a hex dump of a value with optional option overrides.

    Options left as None keep their defaults.

    Example:
        >>> print(dump(bytes(range(1, 17)), items_per_row=12))
        00000000	01 02 03 04 05 06 07 08 09 0a 0b 0c
        0000000c	0d 0e 0f 10
    """
    renderer = as_hexdump(value, byteorder=byteorder, dtype=dtype)
    if show_index is not None:
        renderer = renderer.set_show_index(show_index)
    if items_per_row is not None:
        renderer = renderer.set_items_per_row(items_per_row)
    return renderer
