"""The Intcode virtual machine."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

EXTRA_MEMORY = 4096

_ADD, _MUL, _IN, _OUT, _JIT, _JIF, _LT, _EQ, _RLB, _END = 1, 2, 3, 4, 5, 6, 7, 8, 9, 99
_IMMEDIATE, _RELATIVE = 1, 2


class Program:
    """An Intcode program with its memory, instruction pointer and relative base."""

    def __init__(self, instructions: Iterable[int]):
        self.memory = list(instructions) + [0] * EXTRA_MEMORY
        self.ip = 0
        self.relative_base = 0

    def _check(self, address: int) -> int:
        if not 0 <= address < len(self.memory):
            raise IndexError(f"address {address} is outside memory")
        return address

    def _address(self, ins: int, offset: int) -> int:
        mode = ins // 10 ** (offset + 1) % 10
        if mode == _IMMEDIATE:
            address = self.ip + offset
        elif mode == _RELATIVE:
            address = self.relative_base + self.memory[self._check(self.ip + offset)]
        else:
            address = self.memory[self._check(self.ip + offset)]
        return self._check(address)

    def _value(self, ins: int, offset: int) -> int:
        return self.memory[self._address(ins, offset)]

    def _store(self, ins: int, offset: int, value: int) -> None:
        self.memory[self._address(ins, offset)] = value

    def run(self, inputs: Iterable[int] = ()) -> Iterator[int]:
        """Run from the start, yielding outputs; inputs are drawn lazily as needed.

        Raises EOFError when the program asks for input that is not there.
        """
        feed = iter(inputs)
        self.ip = 0
        while self.ip < len(self.memory):
            ins = self.memory[self._check(self.ip)]
            if ins < 0:
                raise ValueError(f"unknown opcode {ins} at {self.ip}")
            match ins % 100:
                case 1:
                    self._store(ins, 3, self._value(ins, 1) + self._value(ins, 2))
                    self.ip += 4
                case 2:
                    self._store(ins, 3, self._value(ins, 1) * self._value(ins, 2))
                    self.ip += 4
                case 3:
                    try:
                        value = next(feed)
                    except StopIteration:
                        raise EOFError("the program needs input but none is left") from None
                    self._store(ins, 1, value)
                    self.ip += 2
                case 4:
                    yield self._value(ins, 1)
                    self.ip += 2
                case 5:
                    if self._value(ins, 1) != 0:
                        self.ip = self._value(ins, 2)
                    else:
                        self.ip += 3
                case 6:
                    if self._value(ins, 1) == 0:
                        self.ip = self._value(ins, 2)
                    else:
                        self.ip += 3
                case 7:
                    self._store(ins, 3, int(self._value(ins, 1) < self._value(ins, 2)))
                    self.ip += 4
                case 8:
                    self._store(ins, 3, int(self._value(ins, 1) == self._value(ins, 2)))
                    self.ip += 4
                case 9:
                    self.relative_base += self._value(ins, 1)
                    self.ip += 2
                case 99:
                    return
                case _:
                    raise ValueError(f"unknown opcode {ins} at {self.ip}")