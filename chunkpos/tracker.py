from __future__ import annotations
from typing import Any, Iterable
import logging

from wrapt import synchronized

from .chunk import Chunk, Chunks, Location, ChunkLocation
from .errors import InvariantViolation, PositionError


START_CURSOR: int = 0
NO_BLOCK: None = None

POSITION_ERR: str = \
  'File position {position} is before the previously reported position {previous}.'
INVARIANT_ERR: str = \
  'Cannot compare file position {position} with chunk {chunk!r}.'


BlockAddress = int | None


class Position:
    chunks: Chunks
    cursor: int
    block_address: BlockAddress
    file_position: int | None
    reader: Any
    stream: Any


class PositionLocation(Position, ChunkLocation):
  def _chunk_location(self, file_position: int, chunk: Chunk) -> Location:
    if file_position < chunk.block_start:
      return Location.BeforeChunk

    # the end block is excluded when the end offset points at its very start
    elif file_position > chunk.block_end:
      return Location.PastChunk

    elif file_position == chunk.block_end and chunk.block_offset_end == 0:
      return Location.PastChunk

    return Location.InChunk


class ChunkPositionTracker(PositionLocation):
  """
  Walks a sorted sequence of index chunks while a block reader moves
  forward through the file, telling it which block address to read next.

  `reader` and `stream` are only referenced, never opened or closed.
  """
  def __init__(
    self,
    chunks: Iterable[Chunk],
    reader: Any = None,
    stream: Any = None
  ):
    self.chunks = tuple(chunks)
    self.reader = reader
    self.stream = stream
    self._initialize()

  def __repr__(self):
    name = type(self).__name__
    cursor = self.cursor
    total = len(self.chunks)
    block_address = self.block_address

    return f'{name}<{cursor}/{total}, {block_address}>'

  def _initialize(self):
    self.cursor = START_CURSOR
    self.file_position = None

    if self.chunks:
      self.block_address = self.chunks[START_CURSOR].block_start
    else:
      self.block_address = NO_BLOCK

  @property
  def current_chunk(self) -> Chunk | None:
    if self.is_exhausted():
      return None

    return self.chunks[self.cursor]

  def is_exhausted(self) -> bool:
    return self.cursor >= len(self.chunks)

  def get_block_address(self) -> BlockAddress:
    return self.block_address

  def reset(self):
    with synchronized(self):
      logging.debug(f'Resetting {self}')
      self._initialize()

  def advance_position(self, file_position: int):
    """
    Move the cursor past every chunk that `file_position` has left behind.

    Afterwards `block_address` is `file_position` when reading should go on
    sequentially, the start block of the next chunk when there is a gap to
    skip, or None once every chunk is consumed.
    """
    with synchronized(self):
      previous = self.file_position

      if previous is not None and file_position < previous:
        raise PositionError(POSITION_ERR.format(position=file_position, previous=previous))

      self.file_position = file_position

      if self.is_exhausted():
        self.block_address = NO_BLOCK
        return

      self.block_address = file_position

      try:
        self._advance_cursor(file_position)

      except (TypeError, AttributeError) as e:
        chunk = self.current_chunk
        raise InvariantViolation(INVARIANT_ERR.format(position=file_position, chunk=chunk)) from e

  def _advance_cursor(self, file_position: int):
    while not self.is_exhausted():
      location = self._chunk_location(file_position, self.chunks[self.cursor])

      if location is not Location.PastChunk:
        return

      self.cursor += 1

      if self.is_exhausted():
        logging.debug(f'All chunks consumed at {file_position}: {self}')
        self.block_address = NO_BLOCK
        return

      chunk = self.chunks[self.cursor]

      match self._chunk_location(file_position, chunk):
        case Location.BeforeChunk:
          logging.debug(f'Skipping from {file_position} to {chunk!r}')
          self.block_address = chunk.block_start
          return

        case Location.InChunk | Location.PastChunk:
          continue
