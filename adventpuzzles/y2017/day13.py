"""Packet scanners in a layered firewall."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import count


def _check_delay(delay: int) -> int:
    if delay < 0:
        raise ValueError(f"delay must not be negative: {delay}")
    return delay


@dataclass
class ZeroLayer:
    """A depth without a scanner; it never catches anything.

    It still keeps track of the time that passed, so that it moves in step
    with the layers around it.
    """

    elapsed: int = 0

    def position_at(self, delay: int) -> int:
        """Return -1: there is no scanner at any time."""
        _check_delay(delay)
        return -1

    def jump(self, delay: int) -> None:
        """Advance the layer's clock to ``delay`` picoseconds."""
        self.elapsed = _check_delay(delay)

    def move(self) -> None:
        """Let one picosecond pass."""
        self.elapsed += 1

    def severity(self) -> int:
        return 0

    def caught(self) -> bool:
        return False

    def reset(self) -> None:
        """Set the layer's clock back to the start."""
        self.elapsed = 0


@dataclass
class SecurityLayer:
    """A scanner bouncing up and down a layer of ``size`` positions."""

    depth: int
    size: int
    scanner: int = 0
    rising: bool = True

    def position_at(self, delay: int) -> int:
        """Return the scanner position after ``delay`` picoseconds from the start."""
        period = 2 * (self.size - 1)
        moves = delay % period
        return moves if moves < self.size else period - moves

    def jump(self, delay: int) -> None:
        """Place the scanner where it would be after ``delay`` picoseconds."""
        self.scanner = self.position_at(delay)
        period = 2 * (self.size - 1)
        if delay % period < self.size:
            self.rising = self.scanner < self.size - 1
        else:
            self.rising = self.scanner == 0

    def move(self) -> None:
        """Advance the scanner one step, turning at either end."""
        if self.rising:
            self.scanner += 1
            self.rising = self.scanner < self.size - 1
        else:
            self.scanner -= 1
            self.rising = self.scanner == 0

    def severity(self) -> int:
        return self.depth * self.size

    def caught(self) -> bool:
        return self.scanner == 0

    def reset(self) -> None:
        self.scanner = 0
        self.rising = True


Layer = ZeroLayer | SecurityLayer


class Firewall:
    """Layers indexed by depth."""

    def __init__(self, layers: Iterable[Layer]):
        self.layers = list(layers)

    def passthrough(self) -> int:
        """Send a packet through now, moving the scanners, and return the total severity."""
        severity = 0
        for layer in self.layers:
            if layer.caught():
                severity += layer.severity()
            for other in self.layers:
                other.move()
        return severity

    def caught(self, delay: int) -> bool:
        """Return whether a packet leaving after ``delay`` picoseconds is caught anywhere."""
        return any(layer.position_at(delay + i) == 0 for i, layer in enumerate(self.layers))

    def reset(self) -> None:
        for layer in self.layers:
            layer.reset()


def parse_firewall(text: str) -> Firewall:
    """Parse ``depth: range`` lines, filling missing depths with empty layers."""
    layers: list[Layer] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        depth, separator, size = line.partition(": ")
        if not separator:
            raise ValueError(f"malformed layer line: {line!r}")
        layer = SecurityLayer(int(depth), int(size))
        while len(layers) < layer.depth:
            layers.append(ZeroLayer())
        layers.append(layer)
    return Firewall(layers)


def solve(text: str) -> tuple[int, int]:
    """Return the severity of leaving at once and the first safe delay from 1 on."""
    firewall = parse_firewall(text)
    severity = firewall.passthrough()
    firewall.reset()
    delay = next(d for d in count(1) if not firewall.caught(d))
    return severity, delay