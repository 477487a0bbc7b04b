import pytest

from contestkit.components import DisjointSet, largest_component_after_fill


def test_fresh_sets_are_singletons():
    sets = DisjointSet(4)
    assert len(sets) == 5
    assert [sets.find(node) for node in range(5)] == [0, 1, 2, 3, 4]
    assert all(sets.size_of(node) == 1 for node in range(5))


def test_union_by_size_tracks_sizes():
    sets = DisjointSet(5)
    assert sets.union_by_size(0, 1) is True
    assert sets.union_by_size(2, 1) is True
    assert sets.union_by_size(0, 2) is False
    assert sets.find(0) == sets.find(2)
    assert sets.size_of(2) == 3
    assert sets.size_of(4) == 1


def test_union_by_rank_connects():
    sets = DisjointSet(6)
    sets.union_by_rank(0, 1)
    sets.union_by_rank(2, 3)
    sets.union_by_rank(1, 3)
    assert len({sets.find(node) for node in range(4)}) == 1
    assert sets.find(4) != sets.find(0)
    assert sets.size_of(0) == 4


def test_find_out_of_range():
    sets = DisjointSet(2)
    with pytest.raises(IndexError):
        sets.find(3)
    with pytest.raises(IndexError):
        sets.find(-1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_column_fill_example():
    assert largest_component_after_fill(["..", "#.", "#.", ".#"]) == 6


def test_isolated_cells_example():
    assert largest_component_after_fill([".#.#.", "..#..", ".#.#."]) == 9


def test_row_fill_example():
    grid = ["#...#", "....#", "#...#", ".....", "...##"]
    assert largest_component_after_fill(grid) == 11


@pytest.mark.parametrize("height,width", [(1, 1), (2, 5), (4, 3)])
def test_empty_grid_gives_longest_line(height, width):
    grid = ["." * width] * height
    assert largest_component_after_fill(grid) == max(height, width)


@pytest.mark.parametrize("height,width", [(1, 1), (3, 2), (4, 4)])
def test_full_grid_gives_everything(height, width):
    grid = ["#" * width] * height
    assert largest_component_after_fill(grid) == height * width


def test_result_bounds():
    grid = ["#..#", ".##.", "#..#"]
    result = largest_component_after_fill(grid)
    assert max(3, 4) <= result <= 12


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        largest_component_after_fill(["#.", "#"])


def test_bad_character_rejected():
    with pytest.raises(ValueError):
        largest_component_after_fill(["#x"])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        largest_component_after_fill([])