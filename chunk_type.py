from chunk_errors import InvalidChunkType

# Bit 5 of each type byte: set for lowercase letters
PROPERTY_BIT = 0x20


def _is_letter(byte):
    return 65 <= byte <= 90 or 97 <= byte <= 122


class ChunkType:
    """Four byte chunk type code.

    The case of each letter carries a property bit:
    byte 0 ancillary, byte 1 private, byte 2 reserved, byte 3 safe-to-copy.
    """

    __slots__ = ("_code",)

    def __init__(self, code):
        if not isinstance(code, (bytes, bytearray, memoryview)):
            raise InvalidChunkType(code)
        code = bytes(code)
        if len(code) != 4:
            raise InvalidChunkType(code)
        self._code = code

    @classmethod
    def from_bytes(cls, code):
        return cls(code)

    @classmethod
    def from_string(cls, text):
        if len(text) != 4 or not text.isascii() or not text.isalpha():
            raise InvalidChunkType(text)
        return cls(text.encode("ascii"))

    def to_bytes(self):
        return self._code

    def is_letters(self):
        return all(_is_letter(byte) for byte in self._code)

    def is_critical(self):
        return not self._code[0] & PROPERTY_BIT

    def is_public(self):
        return not self._code[1] & PROPERTY_BIT

    def is_reserved_bit_valid(self):
        return not self._code[2] & PROPERTY_BIT

    def is_safe_to_copy(self):
        return bool(self._code[3] & PROPERTY_BIT)

    def is_valid(self):
        return self.is_letters() and self.is_reserved_bit_valid()

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._code == other._code

    def __hash__(self):
        return hash(self._code)

    def __str__(self):
        return self._code.decode("latin-1")

    def __repr__(self):
        return f"ChunkType({self._code!r})"
