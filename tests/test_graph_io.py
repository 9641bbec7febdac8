import random

import pytest

from algolab.graph_io import (
    GraphFormatError,
    load_matrix,
    matrix_to_list,
    save_matrix,
    zero_matrix,
)


def test_zero_matrix_shape_and_values():
    matrix = zero_matrix(4)
    assert len(matrix) == 4
    assert all(len(row) == 4 for row in matrix)
    assert all(cell == 0 for row in matrix for cell in row)


def test_zero_matrix_rows_are_independent():
    matrix = zero_matrix(3)
    matrix[0][1] = 7
    assert matrix[1][1] == 0
    assert matrix[2][1] == 0


def test_zero_matrix_negative_size():
    with pytest.raises(ValueError):
        zero_matrix(-1)


def test_save_matrix_text_format(tmp_path):
    path = tmp_path / "m.txt"
    save_matrix(path, [[0, 1], [1, 0]])
    assert path.read_text() == "2\n0 1\n1 0\n"


def test_round_trip(tmp_path):
    rng = random.Random(5)
    matrix = [[rng.randint(0, 1000) for _ in range(6)] for _ in range(6)]
    path = tmp_path / "m.txt"
    save_matrix(path, matrix)
    assert load_matrix(path) == matrix


def test_round_trip_empty(tmp_path):
    path = tmp_path / "empty.txt"
    save_matrix(path, [])
    assert load_matrix(path) == []


def test_load_accepts_trailing_spaces(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("2\n0 5 \n3 0 \n")
    assert load_matrix(path) == [[0, 5], [3, 0]]


def test_save_rejects_non_square(tmp_path):
    with pytest.raises(ValueError):
        save_matrix(tmp_path / "m.txt", [[0, 1], [1]])


def test_load_bad_header(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("x\n0 1\n")
    with pytest.raises(GraphFormatError):
        load_matrix(path)


def test_load_empty_file(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("")
    with pytest.raises(GraphFormatError):
        load_matrix(path)


def test_load_truncated_data(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("2\n0 1\n1\n")
    with pytest.raises(GraphFormatError, match="1,1"):
        load_matrix(path)


def test_load_bad_cell(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("2\n0 q\n1 0\n")
    with pytest.raises(GraphFormatError, match="0,1"):
        load_matrix(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrix(tmp_path / "absent.txt")


def test_matrix_to_list_unweighted_order():
    matrix = [[0, 1, 1], [0, 0, 1], [0, 0, 0]]
    assert matrix_to_list(matrix) == [[2, 1], [2], []]


def test_matrix_to_list_weighted():
    matrix = [[0, 4, 5], [4, 0, 0], [5, 0, 0]]
    assert matrix_to_list(matrix, weighted=True) == [[(2, 5), (1, 4)], [(0, 4)], [(0, 5)]]


def test_matrix_to_list_edge_count_matches_nonzero_cells():
    rng = random.Random(11)
    matrix = [[rng.choice([0, 0, 1, 3]) for _ in range(8)] for _ in range(8)]
    adjacency = matrix_to_list(matrix)
    assert sum(len(row) for row in adjacency) == sum(1 for row in matrix for c in row if c)
    for u, neighbours in enumerate(adjacency):
        assert all(matrix[u][v] for v in neighbours)