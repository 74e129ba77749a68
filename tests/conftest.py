import pytest

from chunkpos.chunk import Chunk, VirtualOffset


BLOCK_SIZE: int = 100
FILE_SIZE: int = 1_000


class BlockFile:
  """Fixed-size blocks laid out back to back, recording every read."""
  def __init__(self, size: int = FILE_SIZE, block_size: int = BLOCK_SIZE):
    self.size = size
    self.block_size = block_size
    self.reads: list[int] = []

  def read_block(self, address: int) -> tuple[bytes, int]:
    self.reads.append(address)

    if address >= self.size:
      return b'', address

    end = min(address + self.block_size, self.size)
    return address.to_bytes(4, 'little'), end


def chunk(start: tuple[int, int], end: tuple[int, int]) -> Chunk:
  return Chunk(VirtualOffset(*start), VirtualOffset(*end))


@pytest.fixture
def block_file() -> BlockFile:
  return BlockFile()
