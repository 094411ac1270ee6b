"""
Extended formatting for byte buffers and sequences.

This package renders in-memory data as text: configurable hex dumps,
comma-separated lists in any format style, and concatenated hex strings.
"""

from .renderer import (
    DEFAULT_ITEMS_PER_ROW,
    INDEX_WIDTH,
    HexRenderer,
    RenderOptions,
    as_hexdump,
    dump,
)
from .sequences import CommaSeparated, concat_hex, format_joined

__all__ = [
    "DEFAULT_ITEMS_PER_ROW",
    "INDEX_WIDTH",
    "HexRenderer",
    "RenderOptions",
    "as_hexdump",
    "dump",
    "CommaSeparated",
    "concat_hex",
    "format_joined",
]
