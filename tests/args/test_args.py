import pytest

from wordvm.runtime.args import Literal, Register, decode_arg, encode_arg, resolve, resolve_all
from wordvm.runtime.errors import InvalidArgument, InvalidLiteral, InvalidRegister


@pytest.mark.parametrize('raw', [0, 1, 4, 12345, 32767])
def test_literal_decodes_to_itself(raw):
    assert decode_arg(raw) == Literal(raw)
    assert resolve(decode_arg(raw), [0] * 8) == raw


@pytest.mark.parametrize('index', range(8))
def test_register_range(index):
    arg = decode_arg(32768 + index)
    assert arg == Register(index)
    assert encode_arg(arg) == 32768 + index


@pytest.mark.parametrize('raw', [32776, 40000, 65535])
def test_reserved_values_fail(raw):
    with pytest.raises(InvalidArgument):
        decode_arg(raw)


def test_register_resolves_to_content():
    registers = [0, 0, 0, 77, 0, 0, 0, 0]
    assert resolve(Register(3), registers) == 77


def test_bad_literal():
    with pytest.raises(InvalidLiteral):
        resolve(Literal(32768), [0] * 8)


def test_bad_register():
    with pytest.raises(InvalidRegister):
        resolve(Register(8), [0] * 8)


def test_resolve_all_left_to_right():
    registers = [10, 20, 30, 0, 0, 0, 0, 0]
    args = [Register(2), Literal(5), Register(0)]
    assert resolve_all(args, registers) == [30, 5, 10]


def test_register_names():
    assert str(Register(0)) == 'a'
    assert str(Register(7)) == 'h'
    assert str(Literal(42)) == '42'
