"""
Integration tests for hex dump output structure.

Checks every row width against a set of random buffers: token layout,
row offsets, and recovering the original bytes from the text.
"""

import io
import re

import pytest

from extfmt import HexRenderer, concat_hex, dump

WIDTHS = [1, 2, 3, 7, 8, 12, 16, 32, 64]

TOKEN = re.compile(r"^[0-9a-f]{2}$")
INDEX = re.compile(r"^[0-9a-f]{8}$")


@pytest.mark.parametrize("width", WIDTHS)
class TestRowStructure:
    """Row layout holds for every buffer and row width."""

    def test_tokens_without_index(self, random_buffers, width):
        """Only byte tokens, spaces inside rows and newlines between rows."""
        for data in random_buffers:
            text = str(dump(data, show_index=False, items_per_row=width))
            if not data:
                assert text == ""
                continue

            rows = text.split("\n")
            assert len(rows) == (len(data) + width - 1) // width
            tokens = [tok for row in rows for tok in row.split(" ")]
            assert len(tokens) == len(data)
            assert all(TOKEN.match(tok) for tok in tokens)
            assert all(len(row.split(" ")) == width for row in rows[:-1])

    def test_row_offsets(self, random_buffers, width):
        """Row k starts with the offset k * width."""
        for data in random_buffers:
            text = str(dump(data, items_per_row=width))
            for k, row in enumerate(text.split("\n") if data else []):
                index, _, rest = row.partition("\t")
                assert INDEX.match(index)
                assert int(index, 16) == k * width
                assert rest and "\t" not in rest

    def test_no_leading_or_trailing_separator(self, random_buffers, width):
        for data in random_buffers:
            text = str(dump(data, items_per_row=width))
            assert text == text.strip(" \n")

    def test_roundtrip(self, random_buffers, parse_hexdump, width):
        """Parsing the dump gives back the original bytes."""
        for data in random_buffers:
            for show_index in (True, False):
                text = str(dump(data, show_index=show_index, items_per_row=width))
                assert parse_hexdump(text) == data


class TestAgreement:
    """Different output paths produce the same text."""

    def test_write_to_matches_str(self, random_buffers):
        for data in random_buffers:
            renderer = HexRenderer(data).set_items_per_row(10)
            sink = io.StringIO()
            renderer.write_to(sink)
            assert sink.getvalue() == str(renderer)

    def test_tokens_match_concat_hex(self, random_buffers):
        for data in random_buffers:
            text = str(dump(data, show_index=False))
            assert text.replace(" ", "").replace("\n", "") == concat_hex(data)

    def test_large_buffer_row_count(self):
        data = bytes(range(256)) * 16
        rows = str(HexRenderer(data)).split("\n")
        assert len(rows) == 256
        assert rows[-1].startswith("00000ff0\t")
        assert rows[-1].endswith("fd fe ff")
