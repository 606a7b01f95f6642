"""Test equation rows: signed indexing, scaling and subtraction."""
import fractions
import pytest
from exactsolve import Fraction, Row


@pytest.fixture
def row():
    return Row([1, Fraction(-1, 2), 0], [3, 4])


def test_values_are_converted(row):
    assert all(isinstance(v, Fraction) for v in row.left + row.right)
    assert Row([fractions.Fraction(1, 2)], [1]).left == (Fraction(1, 2),)
    assert len(row) == 3


def test_signed_index(row):
    assert row[0] == 1
    assert row[1] == Fraction(-1, 2)
    assert row[2] == 0
    assert row[-1] == 3
    assert row[-2] == 4
    with pytest.raises(IndexError):
        row[3]
    with pytest.raises(IndexError):
        row[-3]


def test_replace(row):
    assert row.replace(2, 5) == Row([1, Fraction(-1, 2), 5], [3, 4])
    assert row.replace(-2, Fraction(1, 3)) == Row([1, Fraction(-1, 2), 0], [3, Fraction(1, 3)])
    assert row[2] == 0


def test_is_zero():
    assert Row([0, 0], [5]).is_zero()
    assert not Row([0, 1], [0]).is_zero()


def test_scale(row):
    assert row * 2 == Row([2, -1, 0], [6, 8])
    assert 2 * row == row * 2
    assert row / Fraction(-1, 2) == Row([-2, 1, 0], [-6, -8])


def test_subtract(row):
    other = Row([1, 1, 1], [1, 1])
    assert row - other == Row([0, Fraction(-3, 2), -1], [2, 3])
    assert (row - row).is_zero()


def test_subtract_shape_mismatch(row):
    with pytest.raises(ValueError):
        row - Row([1, 2], [3, 4])
    with pytest.raises(ValueError):
        row - Row([1, 2, 3], [3])


def test_equality_uses_values():
    assert Row([Fraction(2, 4)], [Fraction.raw(False, 3, 3)]) == Row([Fraction(1, 2)], [1])
    assert hash(Row([Fraction(2, 4)], [1])) == hash(Row([Fraction(1, 2)], [1]))
    assert Row([1], [2]) != Row([1], [3])


def test_text(row):
    assert str(row) == '(1;-1/2;0|3;4)'
    assert repr(Row([1], [2])) == "Row(['1'], ['2'])"


@pytest.mark.parametrize("factor", [Fraction(3), Fraction(-2, 7), Fraction(1, 2), -1])
def test_scaling_is_invertible(row, factor):
    assert (row * factor) / factor == row
