import struct
import zlib

import pytest


def create_png_data():
    """Create a minimal 1x1 transparent PNG"""
    ihdr_data = struct.pack(">LLBBBBB", 1, 1, 8, 6, 0, 0, 0)
    ihdr_crc = zlib.crc32(b"IHDR" + ihdr_data) & 0xFFFFFFFF
    ihdr_chunk = struct.pack(">L", len(ihdr_data)) + b"IHDR" + ihdr_data + struct.pack(">L", ihdr_crc)

    compressed_data = zlib.compress(b"\x00\x00\x00\x00\x00")
    idat_crc = zlib.crc32(b"IDAT" + compressed_data) & 0xFFFFFFFF
    idat_chunk = struct.pack(">L", len(compressed_data)) + b"IDAT" + compressed_data + struct.pack(">L", idat_crc)

    iend_chunk = struct.pack(">L", 0) + b"IEND" + struct.pack(">L", zlib.crc32(b"IEND"))

    return b"\x89PNG\r\n\x1a\n" + ihdr_chunk + idat_chunk + iend_chunk


@pytest.fixture
def minimal_png():
    return create_png_data()
