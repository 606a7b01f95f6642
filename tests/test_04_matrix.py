"""Test the elimination state machine step by step."""
import pytest
from exactsolve import ConfigurationError, Fraction, Matrix, MatrixState, Phase, Row, SingularSystemError, parse
from exactsolve.matrix import nulling_state, normalizing_state


def test_state_texts():
    assert str(MatrixState.initial()) == 'Initial matrix'
    assert str(MatrixState.null(0)) == 'Nulling column 1'
    assert str(MatrixState.normalize_row(2)) == 'Normalizing row 3'
    assert str(MatrixState.reinsert_row(1)) == 'Using nulled rows to reinsert row 2'
    assert str(MatrixState.done()) == 'Done'


def test_state_positions_are_checked():
    with pytest.raises(ValueError):
        MatrixState(Phase.NULL)
    with pytest.raises(ValueError):
        MatrixState(Phase.DONE, 1)
    assert MatrixState.null(1) == MatrixState(Phase.NULL, 1)


def test_from_rows_rejects_bad_shapes():
    with pytest.raises(ConfigurationError):
        Matrix.from_rows([])
    with pytest.raises(ConfigurationError):
        Matrix.from_rows([Row([1], [1]), Row([2], [2])])
    with pytest.raises(ConfigurationError):
        Matrix.from_rows([Row([1, 2], [1]), Row([2, 3], [])])
    with pytest.raises(ConfigurationError):
        Matrix.from_rows([Row([1, 2], [1]), Row([2, 3, 4], [2])])
    with pytest.raises(ConfigurationError):
        Matrix.from_rows([Row([1, 2], [1]), Row([2, 3], [2, 3])])


def test_sequences_must_be_permutations():
    rows = [Row([1, 0], [1]), Row([0, 1], [1])]
    with pytest.raises(ConfigurationError):
        Matrix(rows, row_sequence=(0, 0))
    with pytest.raises(ConfigurationError):
        Matrix(rows, col_sequence=(0, 2))


def test_initial_sequences(matrix_4x4):
    assert matrix_4x4.state == MatrixState.initial()
    assert matrix_4x4.row_sequence == (1, 3, 2, 0)
    assert matrix_4x4.col_sequence == (0, 2, 1, 3)
    assert matrix_4x4.pivot_columns == (0, 2, 1, 3)
    assert matrix_4x4.free_columns == ()
    assert matrix_4x4.ordered_rows()[0] == Row([1, 1, 4, 2], [3])


def test_without_optimizer_sequences_are_identity(system_3x3):
    matrix = parse(system_3x3, optimize=False)
    assert matrix.row_sequence == (0, 1, 2)
    assert matrix.col_sequence == (0, 1, 2)
    assert not matrix.optimize


def test_single_row_starts_normalizing():
    matrix = Matrix.from_rows([Row([4], [2])])
    following = matrix.calculate_next()
    assert following.state == MatrixState.normalize_row(0)
    final = following.calculate_next()
    assert final.is_done()
    assert final.rows[0] == Row([1], [Fraction(1, 2)])
    assert final.calculate_next() is None


def test_steps_without_optimizer(system_3x3):
    rows = parse(system_3x3, optimize=False).rows
    matrix = Matrix(rows, MatrixState.null(0), (0, 2, 1), optimize=False)

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.null(1)
    assert matrix.rows == (Row([1, 1, 2], [8]), Row([0, 5, 3], [-21]), Row([0, -2, -5], [-31]))

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.normalize_row(2)
    assert matrix.rows[1] == Row([0, 0, 19], [197])

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.reinsert_row(1)
    assert matrix.rows[1] == Row([0, 0, 1], [Fraction(197, 19)])

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.normalize_row(1)
    assert matrix.rows[2] == Row([0, -2, 0], [Fraction(396, 19)])

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.reinsert_row(0)
    assert matrix.rows[2] == Row([0, 1, 0], [Fraction(-198, 19)])

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.done()
    assert matrix.rows == (Row([1, 0, 0], [Fraction(-44, 19)]),
                           Row([0, 0, 1], [Fraction(197, 19)]),
                           Row([0, 1, 0], [Fraction(-198, 19)]))
    assert matrix.calculate_next() is None


def test_nulling_reorders_rows(matrix_4x4):
    matrix = matrix_4x4.calculate_next()
    assert matrix.state == MatrixState.null(0)
    assert matrix.rows == matrix_4x4.rows

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.null(1)
    assert matrix.rows[3] == Row([0, -1, -3, -2], [-4])
    assert matrix.row_sequence == (1, 2, 3, 0)

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.null(2)
    assert matrix.rows[3] == Row([0, 5, 0, 1], [11])
    assert matrix.row_sequence == (1, 2, 0, 3)

    matrix = matrix.calculate_next()
    assert matrix.state == MatrixState.normalize_row(3)
    assert matrix.rows[3] == Row([0, 0, 0, 6], [6])


def test_rows_are_never_moved(matrix_4x4):
    matrix = matrix_4x4
    while matrix is not None:
        assert len(matrix.rows) == 4
        previous, matrix = matrix, matrix.calculate_next()
    assert previous.rows == (Row([0, 1, 0, 0], [2]), Row([1, 0, 0, 0], [-1]),
                             Row([0, 0, 1, 0], [0]), Row([0, 0, 0, 1], [1]))


def test_zero_leading_pivot_is_singular():
    matrix = parse("(0;1|1)\n(1;1|2)", optimize=False).calculate_next()
    with pytest.raises(SingularSystemError) as e:
        matrix.calculate_next()
    assert e.value.state == MatrixState.null(0)


def test_zero_row_is_singular(matrix_inconsistent):
    matrix = matrix_inconsistent.calculate_next().calculate_next()
    assert matrix.state == MatrixState.normalize_row(1)
    assert matrix.rows[1] == Row([0, 0], [1])
    with pytest.raises(SingularSystemError):
        matrix.calculate_next()


def test_wide_system_leaves_free_column():
    matrix = Matrix.from_rows([Row([1, 0, 2], [3]), Row([0, 1, -1], [4])])
    assert matrix.free_columns == (2,)
    final = matrix
    while not final.is_done():
        final = final.calculate_next()
    assert final.rows == matrix.rows


def test_next_state_rules():
    rows = (Row([1, 2], [1]), Row([3, 4], [1]))
    assert nulling_state(rows, (0, 1), (0, 1)) == MatrixState.null(0)
    rows = (Row([1, 2], [1]), Row([0, 4], [1]))
    assert nulling_state(rows, (0, 1), (0, 1)) == MatrixState.normalize_row(1)
    assert normalizing_state(rows, (0, 1), (0, 1)) == MatrixState.normalize_row(1)
    rows = (Row([1, 2], [1]), Row([0, 1], [1]))
    assert normalizing_state(rows, (0, 1), (0, 1)) == MatrixState.reinsert_row(0)
    rows = (Row([2, 0], [1]), Row([0, 1], [1]))
    assert normalizing_state(rows, (0, 1), (0, 1)) == MatrixState.normalize_row(0)
    rows = (Row([1, 0], [1]), Row([0, 1], [1]))
    assert normalizing_state(rows, (0, 1), (0, 1)) == MatrixState.done()


def test_equality_and_text():
    a = parse("(1;-2|3)\n(10;4|5)")
    b = parse("(1;-2|3)\n(10;4|5)")
    assert a == b
    assert hash(a) == hash(b)
    assert a != a.calculate_next()
    assert str(a) == "( 1 -2 |  3)\n(10  4 |  5)"
