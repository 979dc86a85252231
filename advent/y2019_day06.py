"""Orbit maps: counting orbits and orbital transfers."""

import sys
from dataclasses import dataclass, field
from pathlib import Path

CENTER = "COM"


@dataclass
class OrbitMap:
    """Objects linked by direct orbits, parent to children."""

    parents: dict = field(default_factory=dict)
    children: dict = field(default_factory=dict)

    @classmethod
    def from_text(cls, text):
        """Build a map from ``PARENT)CHILD`` lines."""
        orbit = cls()
        for line in text.split("\n"):
            if not line:
                continue
            parent, child = line.split(")")
            orbit.children.setdefault(parent, [])
            orbit.children.setdefault(child, [])
            orbit.children[parent].append(child)
            orbit.parents[child] = parent
        return orbit

    def count_orbits(self):
        """Total number of direct and indirect orbits below the centre of mass."""
        if CENTER not in self.children:
            raise KeyError(CENTER)
        total = 0
        stack = [(CENTER, 0)]
        while stack:
            name, depth = stack.pop()
            total += depth
            stack.extend((child, depth + 1) for child in self.children[name])
        return total

    def _parent(self, name):
        if name not in self.children:
            raise KeyError(name)
        try:
            return self.parents[name]
        except KeyError:
            raise ValueError(f"{name} has no parent") from None

    def _depth_below(self, start, target):
        stack = [(start, 0)]
        while stack:
            name, depth = stack.pop()
            if name == target:
                return depth
            stack.extend((child, depth + 1) for child in reversed(self.children[name]))
        return None

    def transfers(self, start, end):
        """Orbital transfers needed to move from ``start``'s parent to ``end``'s parent."""
        goal = self._parent(end)
        current = self._parent(start)
        distance = 0
        while (depth := self._depth_below(current, goal)) is None:
            distance += 1
            current = self._parent(current)
        return distance + depth


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("usage: y2019_day06 INPUT")
    orbit = OrbitMap.from_text(Path(args[0]).read_text())
    print(f"Part 1: {orbit.count_orbits()}")
    print(f"Part 2: {orbit.transfers('YOU', 'SAN')}")


if __name__ == "__main__":
    main()