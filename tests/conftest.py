import pytest

from crucible_lab import Grid

EXAMPLE = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

LONG_RUN = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""

# Cropped 10x10 copy of EXAMPLE with rows 7-10 rewritten, and LONG_RUN with a
# blocked last cell; their answers differ from the full grids.
CROPPED_EXAMPLE = """\
2413432311
3215453535
3255245654
3446585845
4546657867
1438598798
2251191634
3869871423
4546584756
1438598798
"""

BLOCKED_LONG_RUN = """\
111111111111
999999999991
999999999991
999999999991
999999999999
"""


@pytest.fixture
def example_grid() -> Grid:
    return Grid.from_text(EXAMPLE)


@pytest.fixture
def long_run_grid() -> Grid:
    return Grid.from_text(LONG_RUN)


@pytest.fixture
def small_grid() -> Grid:
    return Grid.from_text("123\n456\n789\n")
