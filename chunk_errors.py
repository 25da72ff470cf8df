class PngError(ValueError):
    pass


class InvalidLength(PngError):
    def __init__(self, message, length=None):
        super().__init__(message)
        self.length = length


class InvalidChunkType(PngError):
    def __init__(self, value):
        super().__init__(f"Invalid chunk type: {value!r}")
        self.value = value


class InvalidCrc(PngError):
    def __init__(self, expected, actual):
        super().__init__(f"Invalid CRC: expected {expected:#010x}, got {actual:#010x}")
        self.expected = expected
        self.actual = actual


class ChunkNotFound(PngError):
    def __init__(self, chunk_type):
        super().__init__(f"Chunk not found: {chunk_type}")
        self.chunk_type = chunk_type


class EncodingError(PngError):
    def __init__(self, reason):
        super().__init__(f"Chunk data is not valid UTF-8 text ({reason})")
        self.reason = reason


class SignatureMismatch(PngError):
    def __init__(self, header):
        super().__init__(f"Not a valid PNG file, header: {header.hex()}")
        self.header = header
