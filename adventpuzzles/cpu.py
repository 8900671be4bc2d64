"""A small register machine running the duet-style assembly language."""

from __future__ import annotations

import re
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_COMMAND = re.compile(r"^([a-z]+) ([a-z]|[\-0-9]+)( ([a-z]|[\-0-9]+))?")
_UNARY = frozenset({"snd", "rcv"})
_BINARY = frozenset({"set", "add", "sub", "mul", "mod", "jgz", "jnz"})


@dataclass(frozen=True)
class Instruction:
    """One instruction: an operation and its operands."""

    op: str
    x: str
    y: str = ""

    @property
    def needs_input(self) -> bool:
        return self.op == "rcv"


def parse_instruction(line: str) -> Instruction:
    """Parse one line such as ``set a 5`` or ``jgz a -2``."""
    match = _COMMAND.match(line)
    if match is None:
        raise ValueError(f"unknown instruction {line!r}")
    op, x, y = match.group(1), match.group(2), match.group(4) or ""
    if op in _UNARY:
        return Instruction(op, x)
    if op in _BINARY:
        return Instruction(op, x, y)
    raise ValueError(f"unknown instruction {line!r}")


def load_program(lines: Iterable[str]) -> list[Instruction]:
    """Parse every line into an instruction."""
    return [parse_instruction(line) for line in lines]


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


class CPU:
    """Executes a program; ``snd`` appends to ``sent`` and ``rcv`` takes from ``received``."""

    def __init__(self, program: Sequence[Instruction], cpu_id: int = 0, debug: bool = False):
        self.program = list(program)
        self.id = cpu_id
        self.debug = debug
        self.counts: Counter[str] = Counter()
        self.registers: dict[str, int] = {"p": cpu_id}
        self.ip = 0
        self.sends = 0
        self.sent: list[int] = []
        self.received: deque[int] = deque()

    def _value(self, operand: str) -> int:
        try:
            return int(operand)
        except ValueError:
            return self.registers.get(operand, 0)

    def _apply(self, ins: Instruction) -> int:
        match ins.op:
            case "snd":
                self.sent.append(self._value(ins.x))
                self.sends += 1
            case "set":
                self.registers[ins.x] = self._value(ins.y)
            case "add":
                self.registers[ins.x] = self._value(ins.x) + self._value(ins.y)
            case "sub":
                self.registers[ins.x] = self._value(ins.x) - self._value(ins.y)
            case "mul":
                self.registers[ins.x] = self._value(ins.x) * self._value(ins.y)
            case "mod":
                self.registers[ins.x] = _truncated_mod(self._value(ins.x), self._value(ins.y))
            case "rcv":
                self.registers[ins.x] = self.received.popleft()
            case "jgz":
                if self._value(ins.x) > 0:
                    return self._value(ins.y)
            case "jnz":
                if self._value(ins.x) != 0:
                    return self._value(ins.y)
            case _:
                raise ValueError(f"unknown operation {ins.op!r}")
        return 1

    def execute(self) -> bool:
        """Run until the program ends (True) or waits for input (False)."""
        while 0 <= self.ip < len(self.program):
            ins = self.program[self.ip]
            if ins.needs_input and not self.received:
                return False
            if self.debug:
                self.counts[ins.op] += 1
            self.ip += self._apply(ins)
        return True