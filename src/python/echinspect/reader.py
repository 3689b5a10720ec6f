from typing import Self
from dataclasses import dataclass

from .ech_common import BufferOverflow

@dataclass
class ByteReader:
    """Forward-only reader over a fixed buffer; never returns a short read."""
    raw: bytes
    offset: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.offset <= len(self.raw)):
            raise ValueError(f"offset {self.offset} outside buffer of length {len(self.raw)}")

    @classmethod
    def from_raw(cls, raw: bytes, offset: int = 0) -> Self:
        return cls(raw = bytes(raw), offset = offset)

    def remaining(self) -> int:
        return len(self.raw) - self.offset

    def _check(self, size: int) -> None:
        if size > self.remaining():
            raise BufferOverflow(needed=size, available=self.remaining(), offset=self.offset)

    def read(self, size: int) -> bytes:
        self._check(size)
        chunk = self.raw[self.offset:self.offset+size]
        self.offset += size
        return chunk

    def read_u8(self) -> int:
        return self.read(1)[0]

    def read_u16(self) -> int:
        return int.from_bytes(self.read(2), 'big')

    def peek(self, size: int) -> bytes:
        self._check(size)
        return self.raw[self.offset:self.offset+size]
