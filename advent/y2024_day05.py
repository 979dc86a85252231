"""Print queue ordering rules."""

import sys
from pathlib import Path


def parse(text):
    """Read ``a|b`` rules and comma separated updates.

    Rules map a page to the pages that must come after it.
    """
    rules = {}
    updates = []
    for line in text.split("\n"):
        if len(line) == 5:
            before, after = (int(piece) for piece in line.split("|"))
            rules.setdefault(before, []).append(after)
        else:
            pages = [int(piece) for piece in line.split(",") if piece]
            if pages:
                updates.append(pages)
    return rules, updates


def violations(update, rules):
    """Index pairs ``(i, j)`` with ``j < i`` where page ``i`` must precede page ``j``."""
    found = []
    for i, page in enumerate(update):
        later = rules.get(page)
        if i == 0 or later is None:
            continue
        for j, earlier in enumerate(update[:i]):
            found.extend((i, j) for required in later if required == earlier)
    return found


def _middle(update):
    return update[(len(update) - 1) // 2]


def part1(rules, updates):
    """Sum of middle pages of correctly ordered updates."""
    return sum(_middle(update) for update in updates if not violations(update, rules))


def _reorder(update, rules):
    pages = list(update)
    while found := violations(pages, rules):
        i, j = found[0]
        pages[i], pages[j] = pages[j], pages[i]
    return pages


def part2(rules, updates):
    """Sum of middle pages of incorrectly ordered updates after fixing them."""
    return sum(
        _middle(_reorder(update, rules))
        for update in updates
        if violations(update, rules)
    )


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    rules, updates = parse(Path(path).read_text())
    print(f"Part 1: {part1(rules, updates)}")
    print(f"Part 2: {part2(rules, updates)}")


if __name__ == "__main__":
    main()