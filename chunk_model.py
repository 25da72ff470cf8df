import zlib

import chardet

from chunk_errors import EncodingError, InvalidChunkType, InvalidCrc, InvalidLength
from chunk_type import ChunkType

# length(4) + type(4) + crc(4)
CHUNK_OVERHEAD = 12
MAX_CHUNK_LENGTH = 0xFFFFFFFF

# CC - critical chunk | AC - ancillary chunk
chunk_types = {
    b"IHDR": "image header",  # CC
    b"PLTE": "palette",  # CC
    b"IDAT": "image data",  # CC
    b"IEND": "image trailer",  # CC
    b"sRGB": "standard RGB colour space",  # AC
    b"gAMA": "image gamma",  # AC
    b"pHYs": "physical pixel dimensions",  # AC
    b"sBIT": "significant bits",  # AC
    b"sPLT": "suggested palette",  # AC
    b"tIME": "last modification time",  # AC
    b"cHRM": "primary chromaticities",  # AC
    b"tEXt": "textual data",  # AC
    b"iTXt": "international textual data",  # AC
    b"zTXt": "compressed textual data",  # AC
}


def checksum(type_bytes, data):
    return zlib.crc32(data, zlib.crc32(type_bytes)) & 0xFFFFFFFF


class ChunkModel:
    def __init__(self, length, chunk_type, data, crc):
        data = bytes(data)
        if length != len(data):
            raise InvalidLength(
                f"Declared chunk length {length} does not match {len(data)} data bytes",
                length,
            )
        expected = checksum(chunk_type.to_bytes(), data)
        if crc != expected:
            raise InvalidCrc(expected, crc)

        self._length = length
        self._chunk_type = chunk_type
        self._data = data
        self._crc = crc

    @property
    def length(self):
        return self._length

    @property
    def chunk_type(self):
        return self._chunk_type

    @property
    def data(self):
        return self._data

    @property
    def crc(self):
        return self._crc

    @classmethod
    def encode(cls, chunk_type, data):
        data = bytes(data)
        if len(data) > MAX_CHUNK_LENGTH:
            raise InvalidLength(
                f"Chunk data of {len(data)} bytes does not fit a 32-bit length",
                len(data),
            )
        crc = checksum(chunk_type.to_bytes(), data)
        return cls(len(data), chunk_type, data, crc)

    @classmethod
    def read_from(cls, buffer, offset=0):
        """Decode the chunk starting at ``offset``.

        Returns the chunk and the offset just past its CRC. The declared
        length is checked against the buffer before any data is sliced.
        """
        available = len(buffer) - offset
        if available < CHUNK_OVERHEAD:
            raise InvalidLength(
                f"Chunk needs at least {CHUNK_OVERHEAD} bytes, got {available}",
                available,
            )

        length = int.from_bytes(buffer[offset : offset + 4], byteorder="big")
        type_bytes = bytes(buffer[offset + 4 : offset + 8])
        if length > available - CHUNK_OVERHEAD:
            raise InvalidLength(
                f"Declared chunk length {length} exceeds the "
                f"{available - CHUNK_OVERHEAD} bytes left in the buffer",
                length,
            )
        data_start = offset + 8
        data_end = data_start + length
        data = bytes(buffer[data_start:data_end])
        crc = int.from_bytes(buffer[data_end : data_end + 4], byteorder="big")

        expected = checksum(type_bytes, data)
        if crc != expected:
            raise InvalidCrc(expected, crc)

        chunk_type = ChunkType.from_bytes(type_bytes)
        if not chunk_type.is_letters():
            raise InvalidChunkType(type_bytes)

        return cls(length, chunk_type, data, crc), data_end + 4

    @classmethod
    def from_bytes(cls, buffer):
        chunk, end = cls.read_from(buffer)
        if end != len(buffer):
            raise InvalidLength(
                f"{len(buffer) - end} unexpected bytes after the chunk CRC",
                len(buffer),
            )
        return chunk

    def as_bytes(self):
        return (
            self.length.to_bytes(4, byteorder="big")
            + self.chunk_type.to_bytes()
            + self.data
            + self.crc.to_bytes(4, byteorder="big")
        )

    def data_as_string(self):
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(e.reason) from e

    def data_for_display(self):
        try:
            return self.data_as_string()
        except EncodingError:
            pass

        # Attempt to decode the data using the detected encoding
        detected_encoding = chardet.detect(self.data)["encoding"]
        if detected_encoding:
            try:
                return self.data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError):
                pass
        return self.data.hex()

    def summary(self):
        name = chunk_types.get(self.chunk_type.to_bytes(), "unknown")
        kind = "critical" if self.chunk_type.is_critical() else "ancillary"
        return f"Type:{self.chunk_type} ({name}, {kind})    Length:{self.length}"

    def write_to_file(self, file):
        file.write(self.as_bytes())

    def __eq__(self, other):
        if not isinstance(other, ChunkModel):
            return NotImplemented
        return (
            self.length == other.length
            and self.chunk_type == other.chunk_type
            and self.data == other.data
            and self.crc == other.crc
        )

    def __repr__(self):
        return (
            f"ChunkModel(length={self.length}, chunk_type={self.chunk_type!s}, "
            f"crc={self.crc:#010x})"
        )

    def __str__(self):
        return (
            f"Chunk Type: {self.chunk_type}\n"
            f"Length: {self.length}\n"
            f"Data: {self.data_for_display()}\n"
            f"CRC: {self.crc}"
        )
