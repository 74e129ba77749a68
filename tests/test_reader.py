from chunkpos.reader import iter_blocks
from chunkpos.tracker import ChunkPositionTracker

from conftest import chunk


def addresses(tracker, block_file):
    return [address for address, _ in iter_blocks(tracker, block_file.read_block)]


def test_visits_only_chunked_blocks(block_file):
    tracker = ChunkPositionTracker([
        chunk((100, 0), (300, 0)),
        chunk((600, 5), (700, 10)),
    ])

    assert addresses(tracker, block_file) == [100, 200, 600, 700]
    assert tracker.get_block_address() is None


def test_overlapping_chunks(block_file):
    tracker = ChunkPositionTracker([
        chunk((100, 0), (300, 5)),
        chunk((200, 0), (400, 0)),
    ])

    assert addresses(tracker, block_file) == [100, 200, 300]


def test_yields_block_contents(block_file):
    tracker = ChunkPositionTracker([chunk((100, 0), (200, 0))])

    blocks = list(iter_blocks(tracker, block_file.read_block))

    assert blocks == [(100, (100).to_bytes(4, 'little'))]


def test_stops_at_end_of_file(block_file):
    tracker = ChunkPositionTracker([chunk((800, 0), (2_000, 0))])

    assert addresses(tracker, block_file) == [800, 900]
    assert block_file.reads == [800, 900, 1_000]


def test_empty_sequence_reads_nothing(block_file):
    tracker = ChunkPositionTracker([])

    assert addresses(tracker, block_file) == []
    assert block_file.reads == []


def test_replay_after_reset(block_file):
    tracker = ChunkPositionTracker([chunk((0, 0), (200, 0))])

    first = addresses(tracker, block_file)
    tracker.reset()
    second = addresses(tracker, block_file)

    assert first == second == [0, 100]
