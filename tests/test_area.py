import pytest

from cwr.area import PlayerArea, range_around
from cwr.chunk import TrackedChunk
from cwr.pos import ChunkPos, ColPos


def _chunks(*changed_positions, unchanged=()):
    chunks = {}
    for pos in changed_positions:
        chunk = TrackedChunk()
        chunk.changed = True
        chunks[pos] = chunk
    for pos in unchanged:
        chunks[pos] = TrackedChunk()
    return chunks


def test_range_around_bounds():
    r = range_around(5, 2)
    assert r[0] == 5 - 2
    assert r[-1] == 5 + 2
    assert len(r) == 2 * 2 + 1


def test_range_around_zero_distance():
    assert list(range_around(-4, 0)) == [-4]


def test_around_covers_square():
    center = ColPos(3, -2)
    area = PlayerArea.around(center, 2)
    assert len(area.col_dists) == (2 * 2 + 1) ** 2
    assert area.col_dists[center] == 0
    assert max(area.col_dists.values()) == 2
    for pos, dist in area.col_dists.items():
        assert dist == pos.dist(center)
        assert pos.realm == center.realm


def test_around_negative_distance_rejected():
    with pytest.raises(ValueError):
        PlayerArea.around(ColPos(), -1)


def test_empty_area():
    area = PlayerArea.empty()
    assert area.center == ColPos()
    assert area.col_dists == {}


def test_closest_change_none_when_nothing_changed():
    area = PlayerArea.around(ColPos(), 1)
    chunks = _chunks(unchanged=[ChunkPos(0, 0, 0)])
    assert area.closest_change(chunks) is None
    assert area.pop_closest_change(chunks) is None


def test_closest_change_ignores_unchanged():
    area = PlayerArea.around(ColPos(), 3)
    near_unchanged = ChunkPos(0, 0, 0)
    far_changed = ChunkPos(3, 1, 0)
    chunks = _chunks(far_changed, unchanged=[near_unchanged])
    assert area.closest_change(chunks) == far_changed


def test_closest_change_picks_nearest_column():
    area = PlayerArea.around(ColPos(1, 1), 4)
    near = ChunkPos(2, 5, 1)
    far = ChunkPos(4, 0, 4)
    chunks = _chunks(far, near)
    assert area.closest_change(chunks) == near


def test_pop_closest_change_clears_flag_in_order():
    area = PlayerArea.around(ColPos(), 4)
    near = ChunkPos(1, 3, 0)
    far = ChunkPos(0, 0, -3)
    chunks = _chunks(far, near)

    assert area.pop_closest_change(chunks) == (near, 1)
    assert chunks[near].changed is False
    assert chunks[far].changed is True

    assert area.pop_closest_change(chunks) == (far, 3)
    assert chunks[far].changed is False
    assert area.pop_closest_change(chunks) is None