import pytest

from cwr.packed import PackedUints


def test_new_is_zeroed_at_four_bits():
    packed = PackedUints(10)
    assert packed.bits() == 4
    assert len(packed) == 10
    assert all(packed.get(i) == 0 for i in range(10))


def test_set_get_round_trip_keeps_neighbours():
    packed = PackedUints(8)
    packed.set(3, 7)
    packed.set(4, 15)
    assert packed.get(3) == 7
    assert packed.get(4) == 15
    assert packed.get(2) == 0
    assert packed.get(5) == 0
    assert packed.bits() == 4


def test_upscale_keeps_existing_values():
    packed = PackedUints(6)
    packed.set(1, 9)
    packed.set(2, 200)
    assert packed.bits() == 8
    assert packed.get(1) == 9
    assert packed.get(2) == 200
    packed.set(3, 70000)
    assert packed.bits() == 32
    assert [packed.get(i) for i in range(4)] == [0, 9, 200, 70000]


@pytest.mark.parametrize(
    "values",
    [
        [0, 1, 2, 3, 15, 4],
        [0, 1, 2, 3, 15],
        [16, 255, 3],
        [256, 65535, 1],
        [65536, 7],
        [0, 0, 0],
        [],
    ],
)
def test_from_values_round_trip(values):
    packed = PackedUints.from_values(values)
    assert len(packed) == len(values)
    assert [packed.get(i) for i in range(len(values))] == values
    assert packed.unpack()[: len(values)] == values


def test_from_values_picks_width_of_largest():
    assert PackedUints.from_values([1, 300]).bits() == 16
    assert PackedUints.from_values([1, 15]).bits() == 4


def test_filled_constructor():
    packed = PackedUints(5, 300)
    assert packed.bits() == 16
    assert all(packed.get(i) == 300 for i in range(5))


def test_set_range_end_excluded():
    packed = PackedUints(10)
    packed.set_range(2, 5, 6)
    assert [packed.get(i) for i in range(10)] == [0, 0, 6, 6, 6, 0, 0, 0, 0, 0]


def test_set_range_step_hits_only_steps():
    packed = PackedUints(12)
    packed.set_range_step(1, 10, 3, 40)
    got = [packed.get(i) for i in range(12)]
    assert [i for i, v in enumerate(got) if v == 40] == list(range(1, 10, 3))
    assert packed.bits() == 8


def test_iter_matches_unpack():
    packed = PackedUints.from_values([3, 1, 4, 1, 5, 9])
    assert list(packed) == packed.unpack()


def test_index_out_of_range():
    packed = PackedUints(4)
    with pytest.raises(IndexError):
        packed.get(10)
    with pytest.raises(IndexError):
        packed.set(-1, 1)


def test_negative_value_rejected():
    packed = PackedUints(4)
    with pytest.raises(ValueError):
        packed.set(0, -3)


def test_zero_step_rejected():
    packed = PackedUints(4)
    with pytest.raises(ValueError):
        packed.set_range_step(0, 4, 0, 1)