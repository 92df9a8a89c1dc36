import pytest

from solvebook.euler_basic import (
    multiples_of_3_and_5,
    smallest_multiple,
    sum_square_difference,
)
from solvebook.euler_cli import main
from solvebook.euler_data import large_sum, maximum_path_sum
from solvebook.euler_more import distinct_powers


def test_default_runs_distinct_powers(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(distinct_powers())


def test_single_problem(capsys):
    assert main(["6"]) == 0
    assert capsys.readouterr().out.strip() == str(sum_square_difference(100))


def test_several_problems_keep_order(capsys):
    main(["5", "1", "13"])
    lines = capsys.readouterr().out.split()
    assert lines == [
        str(smallest_multiple()),
        str(multiples_of_3_and_5(1000)),
        large_sum(10),
    ]


def test_builtin_triangle(capsys):
    main(["18"])
    assert capsys.readouterr().out.strip() == str(maximum_path_sum())


def test_list_contains_known_numbers(capsys):
    assert main(["--list"]) == 0
    numbers = [int(token) for token in capsys.readouterr().out.split()]
    assert numbers == sorted(numbers)
    assert {1, 29, 50}.issubset(numbers)
    assert 22 not in numbers


def test_unknown_problem_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["22"])
    assert excinfo.value.code == 2


def test_non_numeric_problem_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["abc"])
    assert excinfo.value.code == 2