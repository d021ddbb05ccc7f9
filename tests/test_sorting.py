import pytest

from apeiron.sorting import Sort, SortObject


def _filled(values, width=1):
    sorter = Sort(width)
    for i, v in enumerate(values):
        sorter.add(i, v)
    return sorter


def test_ascending_order():
    data = [5.0, -1.0, 3.5, 0.0, 2.0]
    sorter = _filled(data)
    sorter.sort_all()
    result = [sorter.values(i)[0] for i in range(len(sorter))]
    assert result == sorted(data)


def test_indices_follow_values():
    data = [5, -1, 3, 0, 2]
    sorter = _filled(data)
    sorter.sort_all()
    for i in range(len(sorter)):
        assert data[sorter.index(i)] == sorter.values(i)[0]


def test_descending_is_reverse_of_ascending():
    data = [4, 9, 1, 7, 3]
    ascending = _filled(data)
    ascending.sort_all()
    descending = _filled(data)
    descending.sort_all(ascending=False)
    assert [o.index for o in descending] == [o.index for o in ascending][::-1]


def test_lexicographic_on_several_values():
    data = [(2, 1), (1, 5), (2, 0), (1, 2)]
    sorter = _filled(data, width=2)
    sorter.sort_all()
    assert [sorter.values(i) for i in range(4)] == sorted(data)
    assert sorter.index(0) == 3


def test_objects_are_sort_objects():
    sorter = _filled([3])
    assert list(sorter) == [SortObject(0, (3,))]


def test_wrong_width_raises():
    sorter = Sort(2)
    with pytest.raises(ValueError):
        sorter.add(0, (1,))


def test_non_numeric_raises():
    sorter = Sort()
    with pytest.raises(TypeError):
        sorter.add(0, ("a",))


def test_zero_width_raises():
    with pytest.raises(ValueError):
        Sort(0)


def test_index_out_of_range():
    sorter = _filled([1, 2])
    with pytest.raises(IndexError):
        sorter.index(2)