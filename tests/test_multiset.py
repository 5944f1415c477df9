import pytest

from bitfunc.multiset import MultiSet, MultiSetFullError


def build(n, k, items):
    ms = MultiSet(n, k)
    for item in items:
        ms.add(item)
    return ms


@pytest.fixture
def m1():
    return build(4, 3, [3, 3, 3, 2, 2, 2, 2, 2, 2, 0, 0, 0, 1, 1, 4])


def test_counts(m1):
    assert m1.count(0) == 3
    assert m1.count(1) == 2
    assert m1.count(2) == 6
    assert m1.count(3) == 3
    assert m1.count(4) == 1


def test_str_and_iter(m1):
    assert str(m1) == "0 0 0 1 1 2 2 2 2 2 2 3 3 3 4"
    assert list(m1) == sorted(list(m1))
    assert len(list(m1)) == 15


def test_add_full_raises():
    ms = build(1, 2, [0, 0, 0])
    with pytest.raises(MultiSetFullError):
        ms.add(0)
    assert ms.count(0) == 3


def test_add_out_of_range():
    ms = MultiSet(3, 2)
    with pytest.raises(ValueError):
        ms.add(4)
    with pytest.raises(ValueError):
        ms.add(-1)


def test_count_out_of_range_is_zero():
    ms = build(3, 2, [1])
    assert ms.count(10) == 0


@pytest.mark.parametrize("k", [0, 9])
def test_invalid_bit_width(k):
    with pytest.raises(ValueError):
        MultiSet(4, k)


def test_complement():
    m3 = build(1, 2, [0, 0, 1])
    assert str(m3) == "0 0 1"
    m4 = m3.complement()
    assert str(m4) == "0 1 1"
    assert m4.complement().to_bytes() == m3.to_bytes()


def test_intersection_and_difference():
    m5 = build(3, 2, [1, 1, 2, 3])
    m6 = build(4, 3, [1, 2, 2, 4])
    assert str(m5.intersection(m6)) == "1 2"
    assert str(m5.difference(m6)) == "1 3"


def test_intersection_includes_largest_number():
    a = build(3, 2, [3, 3])
    b = build(3, 2, [3])
    assert list(a.intersection(b)) == [3]


def test_difference_with_itself_is_empty(m1):
    assert list(m1.difference(m1)) == []


def test_memory_view_and_bytes():
    ms = build(1, 2, [0, 1, 1])
    assert ms.memory_view() == "0 1 1 0"
    assert ms.to_bytes() == b"\x01\x00\x00\x00\x02\x60"


def test_bytes_round_trip(m1):
    restored = MultiSet.from_bytes(m1.to_bytes())
    assert str(restored) == str(m1)
    assert restored.to_bytes() == m1.to_bytes()


def test_from_bytes_rejects_bad_data(m1):
    with pytest.raises(ValueError):
        MultiSet.from_bytes(b"\x01")
    with pytest.raises(ValueError):
        MultiSet.from_bytes(m1.to_bytes() + b"\x00")


def test_save_and_load(tmp_path, m1):
    path = tmp_path / "MultiSet.dat"
    m1.save(path)
    loaded = MultiSet.load(path)
    assert list(loaded) == list(m1)
    assert loaded.memory_view() == m1.memory_view()


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        MultiSet.load(tmp_path / "missing.dat")