"""1202 program alarm: running Intcode with a noun and a verb."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import product

from adventpuzzles.intcode import Program

TARGET = 19690720
ALARM_NOUN = 12
ALARM_VERB = 2


def _parse(program: str | Iterable[int]) -> list[int]:
    if isinstance(program, str):
        return [int(field) for field in program.strip().split(",")]
    return list(program)


def run_gravity_assist(program: str | Iterable[int], noun: int, verb: int) -> int:
    """Run a copy of the program with the noun and verb in place; return address 0."""
    memory = _parse(program)
    if len(memory) < 3:
        raise ValueError("the program is too short to take a noun and a verb")
    memory[1], memory[2] = noun, verb
    computer = Program(memory)
    deque(computer.run(), maxlen=0)
    return computer.memory[0]


def find_noun_verb(program: str | Iterable[int], target: int = TARGET) -> int:
    """Return ``100 * noun + verb`` for the first pair producing ``target``."""
    memory = _parse(program)
    for noun, verb in product(range(100), repeat=2):
        if run_gravity_assist(memory, noun, verb) == target:
            return 100 * noun + verb
    raise ValueError(f"no noun and verb produce {target}")


def solve(program: str | Iterable[int]) -> tuple[int, int]:
    """Return the output for the 1202 alarm state and the noun-verb code for the target."""
    memory = _parse(program)
    return run_gravity_assist(memory, ALARM_NOUN, ALARM_VERB), find_noun_verb(memory, TARGET)