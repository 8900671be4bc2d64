"""Conditional register increments."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

_COMPARISONS: dict[str, Callable[[int, int], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


@dataclass(frozen=True)
class Condition:
    """A comparison of a register with a constant."""

    register: str
    op: str
    value: int

    def evaluate(self, registers: Mapping[str, int]) -> bool:
        """Evaluate against the registers; unset registers read as 0."""
        try:
            compare = _COMPARISONS[self.op]
        except KeyError:
            raise ValueError(f"unknown condition {self.op!r}") from None
        return compare(registers.get(self.register, 0), self.value)


@dataclass(frozen=True)
class Instruction:
    """Increase or decrease a register when the condition holds."""

    register: str
    op: str
    amount: int
    condition: Condition


def parse_instruction(line: str) -> Instruction:
    """Parse a line such as ``b inc 5 if a > 1``."""
    parts = line.split()
    if len(parts) != 7 or parts[3] != "if":
        raise ValueError(f"malformed instruction: {line!r}")
    register, op, amount, _, cond_register, cond_op, cond_value = parts
    return Instruction(
        register, op, int(amount), Condition(cond_register, cond_op, int(cond_value))
    )


class RegisterMachine:
    """Registers plus the highest value any of them has held."""

    def __init__(self) -> None:
        self.registers: dict[str, int] = {}
        self.high_value = 0

    def _add(self, register: str, amount: int) -> None:
        value = self.registers.get(register, 0) + amount
        self.registers[register] = value
        self.high_value = max(self.high_value, value)

    def execute(self, program: Iterable[Instruction]) -> None:
        """Run every instruction in order."""
        for ins in program:
            if not ins.condition.evaluate(self.registers):
                continue
            if ins.op == "inc":
                self._add(ins.register, ins.amount)
            elif ins.op == "dec":
                self._add(ins.register, -ins.amount)

    def largest(self) -> int:
        """Return the largest register value, never below 0."""
        return max([0, *self.registers.values()])


def solve(text: str) -> tuple[int, int]:
    """Return the largest final register value and the highest value ever held."""
    machine = RegisterMachine()
    machine.execute(parse_instruction(line) for line in text.splitlines() if line.strip())
    return machine.largest(), machine.high_value