import pytest

from adventpuzzles.cpu import CPU, Instruction, load_program, parse_instruction


def run(text, **kwargs):
    cpu = CPU(load_program(text.splitlines()), **kwargs)
    finished = cpu.execute()
    return cpu, finished


def test_parse_binary_instruction():
    assert parse_instruction("add a -12") == Instruction("add", "a", "-12")


def test_parse_unary_instruction():
    assert parse_instruction("snd x") == Instruction("snd", "x")


@pytest.mark.parametrize("line", ["foo", "jmp a 1", "SET a 1"])
def test_parse_rejects_unknown(line):
    with pytest.raises(ValueError):
        parse_instruction(line)


def test_set_and_finish():
    cpu, finished = run("set a 5")
    assert finished is True
    assert cpu.registers["a"] == 5


def test_loop_with_jnz():
    cpu, _ = run("set a 3\nadd b 1\nsub a 1\njnz a -2", debug=True)
    assert cpu.registers["b"] == 3
    assert cpu.counts["sub"] == 3
    assert cpu.registers["a"] == 0


def test_mod_truncates_toward_zero():
    cpu, _ = run("set a -7\nmod a 3")
    assert cpu.registers["a"] == -1


def test_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        run("set a 4\nmod a b")


def test_counts_only_when_debugging():
    cpu, _ = run("mul a 2\nmul a 2")
    assert not cpu.counts


def test_snd_uses_id_register():
    cpu, _ = run("snd p", cpu_id=1)
    assert cpu.sent == [1]
    assert cpu.sends == 1


def test_rcv_waits_for_input():
    cpu = CPU(load_program(["rcv a", "set b a"]))
    assert cpu.execute() is False
    assert cpu.ip == 0
    cpu.received.append(9)
    assert cpu.execute() is True
    assert cpu.registers["b"] == 9


def test_jgz_skips_when_not_positive():
    cpu, _ = run("jgz a 5\nset b 2")
    assert cpu.registers["b"] == 2