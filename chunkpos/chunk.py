from __future__ import annotations
from typing import NamedTuple
from enum import Enum, auto
from abc import ABC


BLOCK_OFFSET_BITS: int = 16
BLOCK_OFFSET_MASK: int = (1 << BLOCK_OFFSET_BITS) - 1


class Location(Enum):
    BeforeChunk = auto()
    InChunk = auto()
    PastChunk = auto()


class VirtualOffset(NamedTuple):
    """A position in a block-compressed file.

    `block_address` is the file offset of the compressed block,
    `offset_in_block` is the offset into its decompressed contents.
    """
    block_address: int
    offset_in_block: int = 0

    @classmethod
    def from_packed(cls, packed: int) -> VirtualOffset:
        return cls(packed >> BLOCK_OFFSET_BITS, packed & BLOCK_OFFSET_MASK)

    @property
    def packed(self) -> int:
        return self.block_address << BLOCK_OFFSET_BITS | self.offset_in_block


class Chunk(NamedTuple):
    """Half-open range `[start, end)` of virtual offsets.

    The block at `end.block_address` belongs to the chunk unless
    `end.offset_in_block` is 0.
    """
    start: VirtualOffset
    end: VirtualOffset

    @classmethod
    def from_packed(cls, start: int, end: int) -> Chunk:
        return cls(VirtualOffset.from_packed(start), VirtualOffset.from_packed(end))

    @property
    def block_start(self) -> int:
        return self.start.block_address

    @property
    def block_end(self) -> int:
        return self.end.block_address

    @property
    def block_offset_end(self) -> int:
        return self.end.offset_in_block

    def __repr__(self) -> str:
        start, end = self
        return f'Chunk<{start.block_address}:{start.offset_in_block}-{end.block_address}:{end.offset_in_block}>'


Chunks = tuple[Chunk, ...]


class ChunkLocation(ABC):
    def _chunk_location(self, file_position: int, chunk: Chunk) -> Location:
        pass
