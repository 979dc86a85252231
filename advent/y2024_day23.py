"""LAN party: triangles of computers and the largest fully connected group."""

import sys
from pathlib import Path


def parse(text):
    """Read ``a-b`` links into an adjacency mapping.

    Computers appear in the order they are first named, and each link is
    recorded in both directions.
    """
    graph = {}
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split("-")
        if len(parts) < 2:
            raise ValueError(f"malformed link {line!r}")
        first, second = parts[0], parts[1]
        graph.setdefault(first, [])
        graph.setdefault(second, [])
        graph[first].append(second)
        graph[second].append(first)
    return graph


def count_t_triangles(graph):
    """Triangles of linked computers where some name starts with ``t``."""
    order = {name: index for index, name in enumerate(graph)}
    adjacent = {name: set(links) for name, links in graph.items()}
    count = 0
    for first, links in graph.items():
        for second in adjacent[first]:
            if order[first] >= order[second]:
                continue
            for third in links:
                if order[second] >= order[third] or third not in adjacent[second]:
                    continue
                if any(name.startswith("t") for name in (first, second, third)):
                    count += 1
    return count


def largest_clique(graph):
    """Names of the first largest fully connected group, sorted."""
    if not graph:
        raise ValueError("the network is empty")
    order = {name: index for index, name in enumerate(graph)}
    adjacent = {name: set(links) for name, links in graph.items()}
    level = [(name,) for name in graph]
    while True:
        grown = []
        for clique in level:
            last = order[clique[-1]]
            for candidate in graph[clique[0]]:
                if order[candidate] <= last:
                    continue
                if all(candidate in adjacent[member] for member in clique):
                    grown.append(clique + (candidate,))
        if not grown:
            return sorted(level[0])
        level = grown


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    graph = parse(Path(path).read_text())
    print(f"Part 1: {count_t_triangles(graph)}")
    print(f"Part 2: {','.join(largest_clique(graph))}")


if __name__ == "__main__":
    main()