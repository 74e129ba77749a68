from __future__ import annotations
from typing import Callable, Iterator
import logging

from .tracker import ChunkPositionTracker


Block = tuple[int, bytes]
ReadBlock = Callable[[int], tuple[bytes, int]]


def iter_blocks(
  tracker: ChunkPositionTracker,
  read_block: ReadBlock
) -> Iterator[Block]:
  """
  Drive `read_block` over the blocks the tracker's chunks cover.

  `read_block(address)` seeks to `address`, reads one block and returns
  its decompressed contents together with the file position after it.
  Yields `(address, block)` pairs in file order.
  """
  while (address := tracker.block_address) is not None:
    block, position = read_block(address)

    # nothing left to read at this address
    if position <= address:
      logging.debug(f'End of file at {address}: {tracker}')
      return

    yield address, block
    tracker.advance_position(position)
