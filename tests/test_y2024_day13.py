import pytest

from advent.y2024_day13 import OFFSET, parse, token_cost

EXAMPLE = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""

FIRST = ((94, 34), (22, 67), (8400, 5400))


def test_parse_reads_machines():
    machines = parse(EXAMPLE)
    assert len(machines) == 4
    assert machines[0] == FIRST
    assert machines[3] == ((69, 23), (27, 71), (18641, 10279))


def test_parse_round_trip():
    machine = ((7, 2), (3, 5), (55, 53))
    (ax, ay), (bx, by), (tx, ty) = machine
    text = (
        f"Button A: X+{ax}, Y+{ay}\n"
        f"Button B: X+{bx}, Y+{by}\n"
        f"Prize: X={tx}, Y={ty}\n"
    )
    assert parse(text) == [machine]


def test_parse_empty_raises():
    with pytest.raises(ValueError):
        parse("")


def test_parse_incomplete_machine_raises():
    with pytest.raises(ValueError):
        parse("Button A: X+1, Y+2\nButton B: X+3, Y+4\n")


def test_example_total():
    assert token_cost(parse(EXAMPLE), False) == 480


def test_first_machine():
    assert token_cost([FIRST], False) == 280


@pytest.mark.parametrize("a,b", [(0, 0), (1, 0), (0, 1), (4, 9), (57, 83)])
def test_constructed_machine(a, b):
    button_a, button_b = (7, 2), (3, 5)
    prize = (a * 7 + b * 3, a * 2 + b * 5)
    assert token_cost([(button_a, button_b, prize)], False) == 3 * a + b


def test_unwinnable_machines_add_nothing():
    unreachable = ((7, 2), (3, 5), (56, 53))
    negative = ((7, 2), (3, 5), (-7, -2))
    parallel = ((2, 2), (3, 3), (10, 10))
    base = token_cost([FIRST], False)
    assert token_cost([FIRST, unreachable, negative, parallel], False) == base


def test_total_is_additive():
    machines = parse(EXAMPLE)
    assert token_cost(machines, False) == sum(
        token_cost([machine], False) for machine in machines
    )


def test_offset_moves_prize():
    a, b = 100_000_000_000, 90_000_000_001
    button_a, button_b = (94, 34), (22, 67)
    prize = (a * 94 + b * 22 - OFFSET, a * 34 + b * 67 - OFFSET)
    assert token_cost([(button_a, button_b, prize)], True) == 3 * a + b