import pytest

from adventpuzzles.intcode import Program


def test_quine_outputs_itself():
    code = [109, 1, 204, -1, 1001, 100, 1, 100, 1008, 100, 16, 101, 1006, 101, 0, 99]
    assert list(Program(code).run()) == code


def test_outputs_large_numbers():
    code = [104, 1125899906842624, 99]
    assert list(Program(code).run()) == [1125899906842624]


def test_immediate_multiply_writes_memory():
    program = Program([1002, 4, 3, 4, 33])
    assert list(program.run()) == []
    assert program.memory[4] == 99


@pytest.mark.parametrize("value", [-3, 0, 12345])
def test_echo_input(value):
    assert list(Program([3, 0, 4, 0, 99]).run([value])) == [value]


@pytest.mark.parametrize("value, expected", [(8, 1), (7, 0), (9, 0)])
def test_equals_eight(value, expected):
    code = [3, 9, 8, 9, 10, 9, 4, 9, 99, -1, 8]
    assert list(Program(code).run([value])) == [expected]


def test_inputs_drawn_lazily():
    code = [3, 0, 4, 0, 3, 0, 4, 0, 99]
    outputs = Program(code).run(iter([5, 6]))
    assert next(outputs) == 5
    assert next(outputs) == 6
    with pytest.raises(StopIteration):
        next(outputs)


def test_relative_mode_output():
    assert list(Program([109, 5, 204, 0, 99, 77]).run()) == [77]


def test_missing_input_raises():
    with pytest.raises(EOFError):
        list(Program([3, 0, 99]).run([]))


def test_unknown_opcode_raises():
    with pytest.raises(ValueError):
        list(Program([42]).run())


def test_negative_address_raises():
    with pytest.raises(IndexError):
        list(Program([4, -1, 99]).run())