import pytest
from exactsolve import Matrix, Row, parse

# four equations with a zero leading pivot in the given row order
SYSTEM_4X4 = "(0;1;0;-1|1)\n(1;1;4;2|3)\n(0;2;1;1|5)\n(1;0;1;0|-1)"
# two equations, the second has no non-zero coefficient
SYSTEM_ZERO_ROW = "(1;0|1)\n(0;0|1)"
SYSTEM_3X3 = "(1;1;2|8)\n(3;8;9|3)\n(4;2;3|1)"
SYSTEM_DEMO = "(2;1;7;-2|5)\n(0;0;2;1|3)\n(2;2;1;0|1)\n(0;0;1;1|2)"


@pytest.fixture
def matrix_4x4() -> Matrix:
    """Four equations with solution x = (-1, 2, 0, 1)."""
    return parse(SYSTEM_4X4)


@pytest.fixture
def matrix_zero_row() -> Matrix:
    """Singular system with an all-zero coefficient row."""
    return parse(SYSTEM_ZERO_ROW)


@pytest.fixture
def matrix_inconsistent() -> Matrix:
    """Two parallel equations, elimination leaves a zero coefficient row."""
    return Matrix.from_rows([Row([1, 1], [1]), Row([1, 1], [2])])


@pytest.fixture(params=[SYSTEM_4X4, SYSTEM_3X3, SYSTEM_DEMO], ids=["4x4", "3x3", "demo"], scope="session")
def regular_system(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for uniquely solvable systems."""
    return request.param


@pytest.fixture
def system_3x3() -> str:
    """Three dense equations, solution (-44/19, -198/19, 197/19)."""
    return SYSTEM_3X3
