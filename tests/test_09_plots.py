"""Test if the growth plot of a solve finishes correctly."""
import pytest
import exactsolve as es
from exactsolve.plotting import max_bits, plot_growth


def test_max_bits(matrix_4x4):
    assert max_bits(matrix_4x4) == 3
    assert max_bits(es.parse("(1/1024|1)")) == 11


@pytest.mark.timeout(15)
def test_plot_growth(matrix_4x4):
    """Test plot of a solved history."""
    solver = es.solve_with_history(matrix_4x4)
    steps, bits, plot = plot_growth(solver, plt_backend='agg', show=False)
    assert steps == list(range(9))
    assert bits[0] == 3
    assert len(bits) == len(steps)
    assert list(plot.get_xdata()) == steps


@pytest.mark.timeout(15)
def test_plot_growth_overflow():
    """Test plot of a history that stopped on overflow."""
    solver = es.solve_with_history(es.parse("(100;1|1)\n(1;100|1)"), int_bits=8)
    steps, bits, plot = plot_growth(solver, plt_backend='agg', show=False)
    assert len(steps) == len(solver)
    assert max(bits) <= 8
