import pytest

from cwr.constants import CHUNK_S1, Y_CHUNKS
from cwr.pos import (
    BlockPos,
    BlockPos2d,
    ChunkPos,
    ColPos,
    Realm,
    chunk_pos,
    chunked,
    chunks_in_col,
    unchunked,
)


@pytest.mark.parametrize("x", [-200, -63, -62, -1, 0, 1, 61, 62, 63, 500])
def test_chunked_round_trip(x):
    cx, dx = chunked(x)
    assert 0 <= dx < CHUNK_S1
    assert unchunked(cx, dx) == x


def test_chunked_negative_wraps_into_previous_chunk():
    assert chunked(-1) == (-1, CHUNK_S1 - 1)
    assert chunked(CHUNK_S1) == (1, 0)


def test_chunk_pos_floors():
    assert chunk_pos(-0.5, CHUNK_S1 * 2.0, CHUNK_S1 - 0.1) == (-1, 2, 0)


def test_col_from_block_pos_truncates_towards_zero():
    col = ColPos.from_block_pos(BlockPos(-1, 5, -CHUNK_S1 - 1))
    assert (col.x, col.z) == (0, -1)


def test_col_from_world_matches_block_pos():
    assert ColPos.from_world(130.7, 3.0, -2.2, Realm.OVERWORLD) == ColPos.from_block_pos(
        BlockPos.from_world(130.7, 3.0, -2.2)
    )


def test_chunk_from_block_pos_truncates():
    chunk = ChunkPos.from_block_pos(BlockPos(CHUNK_S1, -1, 2 * CHUNK_S1 + 3))
    assert (chunk.x, chunk.y, chunk.z) == (1, 0, 2)


@pytest.mark.parametrize("pos", [BlockPos(0, 0, 0), BlockPos(-5, 70, 300), BlockPos(124, -1, -124)])
def test_block_chunk_round_trip(pos):
    chunk, (dx, dy, dz) = pos.to_chunk()
    assert BlockPos.from_chunk(chunk, dx, dy, dz) == pos


@pytest.mark.parametrize("pos", [BlockPos(-7, 12, 99), BlockPos(62, 400, -62)])
def test_block_col_round_trip(pos):
    col, (dx, y, dz) = pos.to_col()
    assert y == pos.y
    assert BlockPos.from_col(col, dx, y, dz) == pos


def test_block2d_col_round_trip():
    pos = BlockPos2d.from_world(-70.2, 15.9)
    assert (pos.x, pos.z) == (-71, 15)
    col, (dx, dz) = pos.to_col()
    assert BlockPos2d.from_col(col, dx, dz) == pos


def test_offset_and_shifted():
    base = BlockPos(1, 2, 3)
    assert base.offset(1, -1, 0) == BlockPos(2, 1, 3)
    assert base.shifted(0.5, -0.5, 1.9) == base.offset(0, -1, 1)
    assert base.to_vec() == (1.0, 2.0, 3.0)


def test_dist_is_chebyshev():
    a = ChunkPos(0, 0, 0)
    b = ChunkPos(3, -5, 1)
    assert a.dist(b) == b.dist(a) == 5
    assert a.dist(a) == 0
    assert ColPos(2, 2).dist(ColPos(-1, 4)) == 3


def test_prng_is_deterministic_and_64_bit():
    pos = BlockPos(-3, 7, 11)
    value = pos.prng(42)
    assert value == BlockPos(-3, 7, 11).prng(42)
    assert 0 <= value < 2**64
    assert 0 <= ColPos(-1, -1).prng(-1) < 2**64


def test_prng_depends_on_position_and_seed():
    values = {BlockPos(x, 0, 0).prng(1) for x in range(20)}
    assert len(values) == 20
    assert ColPos(1, 2).prng(1) != ColPos(1, 2).prng(2)


def test_chunk_column():
    assert ChunkPos(4, 2, -3).column() == ColPos(4, -3)


def test_chunks_in_col():
    col = ColPos(5, -2)
    chunks = chunks_in_col(col)
    assert len(chunks) == Y_CHUNKS
    assert [c.y for c in chunks] == list(range(Y_CHUNKS))
    assert all(c.column() == col for c in chunks)