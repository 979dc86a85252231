import pytest

from advent.y2019_day01 import fuel, main, total_fuel


def test_pinned_examples():
    assert fuel(12) == 2
    assert fuel(1969, True) == 966
    assert fuel(100756) == 33583


@pytest.mark.parametrize("mass", [14, 1969, 5000, 100756])
def test_full_fuel_recurses_on_its_own_fuel(mass):
    simple = fuel(mass)
    assert fuel(mass, True) == simple + fuel(simple, True)


@pytest.mark.parametrize("mass", [10, 500, 123456])
def test_full_never_less_than_simple(mass):
    assert fuel(mass, True) >= fuel(mass)


@pytest.mark.parametrize("mass", range(6))
def test_negative_requirement_becomes_zero(mass):
    assert fuel(mass) == 0
    assert fuel(mass, True) == 0


def test_total_is_additive_and_ignores_blank_lines():
    combined = total_fuel("12\n\n1969\n", True)
    assert combined == total_fuel("12", True) + total_fuel("1969", True)
    assert total_fuel("12\n1969") == total_fuel("12\n\n1969\n")


def test_empty_input_needs_no_fuel():
    assert total_fuel("") == 0


def test_bad_number_raises():
    with pytest.raises(ValueError):
        total_fuel("12\nabc\n")


def test_main_requires_one_argument():
    with pytest.raises(SystemExit):
        main([])


def test_main_prints_both_parts(tmp_path, capsys):
    text = "12\n14\n1969\n100756\n"
    path = tmp_path / "input.txt"
    path.write_text(text)
    main([str(path)])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"Part 1: {total_fuel(text, False)}",
        f"Part 2: {total_fuel(text, True)}",
    ]