class ChunkPositionError(Exception):
    pass


class InvariantViolation(ChunkPositionError):
    """Chunk boundaries could not be compared. Not recoverable."""


class PositionError(ChunkPositionError, ValueError):
    """A file position moved backwards."""
