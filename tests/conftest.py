"""Shared pytest fixtures for hex dump tests."""

import random

import pytest


def _parse_hexdump(text: str) -> bytes:
    """
    Recover the dumped bytes from hex dump text.

    Drops the index field (everything up to the tab) from each row and
    parses the remaining space-separated byte tokens.
    """
    data = bytearray()
    for row in text.split("\n"):
        if not row:
            continue
        tokens = row.split("\t", 1)[-1]
        data.extend(int(tok, 16) for tok in tokens.split(" "))
    return bytes(data)


@pytest.fixture
def sequential_16():
    """Bytes 0x01 through 0x10."""
    return bytes(range(1, 17))


@pytest.fixture
def random_buffers():
    """Seeded random buffers of assorted lengths, including empty."""
    rng = random.Random(0x5EED)
    lengths = [0, 1, 2, 7, 15, 16, 17, 31, 32, 33, 100, 255, 256, 1000]
    return [bytes(rng.randrange(256) for _ in range(n)) for n in lengths]


@pytest.fixture
def parse_hexdump():
    """Parser turning hex dump text back into bytes."""
    return _parse_hexdump
