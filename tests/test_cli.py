import pytest

from pushswap.cli import main, to_ints


def test_to_ints_handles_signs():
    assert to_ints(["1", "-2", "+3"]) == [1, -2, 3]


def test_to_ints_empty():
    assert to_ints([]) == []


def test_no_arguments_does_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_empty_first_argument_does_nothing(capsys):
    assert main(["", "3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "x"], ["3", "3"], ["2147483648"], ["-"], ["1 2 2"], ["1", "2a"]],
)
def test_invalid_input_prints_error(capsys, args):
    assert main(args) == 1
    assert capsys.readouterr().out == "Error\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


def test_two_numbers_are_swapped(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_single_string_with_spaces(capsys):
    assert main(["2 3 1"]) == 0
    assert capsys.readouterr().out == "rra\n"


def test_only_spaces_does_nothing(capsys):
    assert main([" "]) == 0
    assert capsys.readouterr().out == ""


def test_larger_input_prints_valid_operations(capsys):
    assert main(["5", "1", "4", "2", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["pb", "pb"]
    assert set(lines) <= {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}