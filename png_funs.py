from chunk_errors import ChunkNotFound, SignatureMismatch
from chunk_model import ChunkModel

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class Png:
    STANDARD_HEADER = PNG_SIGNATURE

    def __init__(self, chunks=()):
        self._chunks = list(chunks)

    @classmethod
    def from_chunks(cls, chunks):
        return cls(chunks)

    @classmethod
    def from_bytes(cls, buffer):
        # Check if the buffer is a valid PNG file
        header = bytes(buffer[: len(PNG_SIGNATURE)])
        if header != PNG_SIGNATURE:
            raise SignatureMismatch(header)

        # Read the chunks until the buffer is exhausted
        chunks = []
        offset = len(PNG_SIGNATURE)
        while offset < len(buffer):
            chunk, offset = ChunkModel.read_from(buffer, offset)
            chunks.append(chunk)

        return cls(chunks)

    @property
    def header(self):
        return self.STANDARD_HEADER

    @property
    def chunks(self):
        return tuple(self._chunks)

    def append_chunk(self, chunk):
        self._chunks.append(chunk)

    def chunk_by_type(self, chunk_type):
        return next(
            (chunk for chunk in self._chunks if str(chunk.chunk_type) == chunk_type),
            None,
        )

    def remove_chunk(self, chunk_type):
        for index, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return self._chunks.pop(index)
        raise ChunkNotFound(chunk_type)

    def as_bytes(self):
        return self.header + b"".join(chunk.as_bytes() for chunk in self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __str__(self):
        lines = [f"Signature: {self.header.hex()}", f"Chunks: {len(self._chunks)}"]
        lines.extend(chunk.summary() for chunk in self._chunks)
        return "\n".join(lines)


def read_png(image):
    # Open the PNG file in binary mode
    with open(image, "rb") as file:
        return Png.from_bytes(file.read())


def write_png(png, file_name):
    with open(file_name, "wb") as file:
        file.write(png.header)
        for chunk in png:
            chunk.write_to_file(file)
