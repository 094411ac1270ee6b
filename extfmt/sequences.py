"""
extfmt - Sequence Formatting

Formats sequences of values as joined text: comma-separated lists in any
format style, and plain concatenated hex strings.
"""

from collections.abc import Iterable


def format_joined(items: Iterable, spec: str = "", separator: str = ", ") -> str:
    """
    Format every item with the same format spec and join the results.

    Args:
        items: Values to format
        spec: Format spec applied to each item (e.g. "x", "02X", "o", ".2f")
        separator: Text placed between items

    Returns:
        Joined string, empty for no items

    Example:
        >>> format_joined([1, 2, 163, 255], "02X", " ")
        '01 02 A3 FF'
    """
    return separator.join(format(item, spec) for item in items)


class CommaSeparated:
    """
    Wraps a sequence so it formats as a comma-separated list.

    The format spec given to format() or an f-string is applied to each
    element, so any style the elements support can be used.

    Example:
        >>> f"{CommaSeparated([10, 255])}"
        '10, 255'
        >>> f"{CommaSeparated([10, 255]):#x}"
        '0xa, 0xff'
    """

    def __init__(self, items: Iterable):
        self.items = items

    def __format__(self, spec: str) -> str:
        return format_joined(self.items, spec)

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"CommaSeparated({self.items!r})"


def concat_hex(data, uppercase: bool = False) -> str:
    """
    Format a byte buffer as one unbroken hex string.

    Example:
        >>> concat_hex(bytes([1, 2, 255]))
        '0102ff'
    """
    return format_joined(memoryview(data).cast("B"), "02X" if uppercase else "02x", "")
