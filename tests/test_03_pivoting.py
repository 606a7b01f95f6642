"""Test the computation of row and column visiting orders."""
from exactsolve import Row, optimize_sequences
from exactsolve.pivoting import leading_zeros, order_columns, order_rows, zero_pattern


def rows_of(*lefts):
    return [Row(left, [1]) for left in lefts]


def test_zero_pattern():
    rows = rows_of([0, 1], [0, 0], [2, 3])
    assert zero_pattern(rows) == [frozenset({0, 1}), frozenset({1})]


def test_identity_stays_in_order():
    assert optimize_sequences(rows_of([1, 1], [0, 1])) == ((0, 1), (0, 1))


def test_staircase_rows_come_first():
    assert optimize_sequences(rows_of([0, 1], [1, 1])) == ((1, 0), (0, 1))


def test_dense_rows_keep_index_order():
    assert optimize_sequences(rows_of([1, 2, 3], [4, 5, 6], [7, 8, 9])) == ((0, 1, 2), (0, 1, 2))


def test_ties_explored_for_greatest_total():
    # starting with column 0 sums to 4 zeros, column 1 or 2 to 5
    rows = rows_of([0, 0, 0, 1], [0, 1, 1, 1], [1, 0, 0, 1])
    assert order_columns(rows) == (1, 2, 0, 3)
    assert optimize_sequences(rows) == ((1, 2, 0), (1, 2, 0, 3))


def test_column_with_most_zeros_first():
    rows = rows_of([1, 0, 1], [1, 0, 2], [1, 3, 0])
    assert order_columns(rows)[0] == 1


def test_result_is_permutation():
    rows = rows_of([2, 1, 7, -2], [0, 0, 2, 1], [2, 2, 1, 0], [0, 0, 1, 1])
    row_sequence, col_sequence = optimize_sequences(rows)
    assert sorted(row_sequence) == [0, 1, 2, 3]
    assert sorted(col_sequence) == [0, 1, 2, 3]


def test_leading_zeros():
    row = Row([0, 0, 5, 0], [1])
    assert leading_zeros(row, (0, 1, 2, 3)) == 2
    assert leading_zeros(row, (2, 0, 1, 3)) == 0
    assert leading_zeros(Row([0, 0], [1]), (1, 0)) == 2


def test_row_order_is_stable():
    rows = rows_of([0, 1], [0, 2], [3, 0])
    assert order_rows(rows, (0, 1)) == (2, 0, 1)


def test_wide_rows_order_by_pivot_columns_only():
    rows = [Row([1, 0, 2], [3]), Row([0, 1, -1], [4])]
    assert optimize_sequences(rows) == ((0, 1), (0, 1, 2))
