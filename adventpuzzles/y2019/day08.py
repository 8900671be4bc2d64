"""Space image format: layered pixel images."""

from __future__ import annotations

from collections.abc import Sequence

WIDTH = 25
HEIGHT = 6
BLACK = "0"
TRANSPARENT = "2"
DARK = "▓"


def split_layers(data: str, width: int = WIDTH, height: int = HEIGHT) -> list[str]:
    """Cut the digit string into layers of ``width * height`` pixels."""
    size = width * height
    if size <= 0:
        raise ValueError("the image must have a positive size")
    if not data or len(data) % size:
        raise ValueError(f"{len(data)} pixels do not make whole layers of {size}")
    return [data[start:start + size] for start in range(0, len(data), size)]


def checksum(layers: Sequence[str]) -> int:
    """Ones times twos on the first layer with the fewest zeros."""
    if not layers:
        raise ValueError("there are no layers")
    layer = min(layers, key=lambda item: item.count("0"))
    return layer.count("1") * layer.count("2")


def decode_image(layers: Sequence[str]) -> str:
    """Stack the layers: each pixel takes the topmost value that is not transparent."""
    return "".join(
        next((pixel for pixel in stack if pixel != TRANSPARENT), TRANSPARENT)
        for stack in zip(*layers)
    )


def render(image: str, width: int = WIDTH, height: int = HEIGHT) -> str:
    """Draw the image as text, black pixels dark and the rest blank."""
    if width <= 0 or len(image) != width * height:
        raise ValueError(f"an image of {len(image)} pixels is not {width}x{height}")
    rows = (image[start:start + width] for start in range(0, len(image), width))
    return "\n".join("".join(DARK if pixel == BLACK else " " for pixel in row) for row in rows)


def solve(text: str) -> tuple[int, str]:
    """Return the checksum and the rendered message."""
    layers = split_layers(text.strip())
    return checksum(layers), render(decode_image(layers))