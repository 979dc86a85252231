"""Layered space image format: checksums and rendering."""

import sys
from pathlib import Path

TRANSPARENT = "2"


def split_layers(data, width, height):
    """Split pixel data into complete layers of ``width * height`` characters.

    A trailing partial layer is dropped.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    size = width * height
    return [data[start:start + size] for start in range(0, len(data) - size + 1, size)]


def checksum(data, width, height):
    """Ones times twos in the layer with the fewest zeros; 0 with no layers."""
    layers = split_layers(data, width, height)
    if not layers:
        return 0
    best = min(layers, key=lambda layer: layer.count("0"))
    return best.count("1") * best.count("2")


def _visible(pixels):
    return next((pixel for pixel in pixels if pixel != TRANSPARENT), TRANSPARENT)


def render(data, width, height):
    """Stack the layers, front first, and return the image as text rows."""
    layers = split_layers(data, width, height)
    if not layers:
        raise ValueError("the image has no complete layer")
    image = "".join(_visible(pixels) for pixels in zip(*layers))
    return "\n".join(image[row * width:(row + 1) * width] for row in range(height))


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        raise SystemExit("usage: y2019_day08 WIDTH HEIGHT INPUT")
    width, height = int(args[0]), int(args[1])
    data = Path(args[2]).read_text()
    print(f"Part 1: {checksum(data, width, height)}")
    print(render(data, width, height))


if __name__ == "__main__":
    main()