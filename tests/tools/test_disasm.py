from click.testing import CliRunner

import wordvm.tools.disasm as disasm
from wordvm.runtime.loader import words_to_bytes
from wordvm.runtime.memory import Memory


def test_listing():
    memory = Memory([9, 32768, 32769, 4, 19, 32768, 22, 0])

    assert list(disasm.disassemble(memory)) == [
        '00000: add a b 4',
        '00004: out a',
        '00006: .dw 22',
        '00007: halt',
    ]


def test_window():
    memory = Memory([21, 21, 21, 19, 65])
    assert list(disasm.disassemble(memory, start=2, count=2)) == [
        '00002: noop',
        '00003: out 65',
    ]


def test_truncated_tail():
    memory = Memory([21, 9, 32768])
    assert list(disasm.disassemble(memory)) == [
        '00000: noop',
        '00001: .dw 9',
        '00002: .dw 32768',
    ]


def test_command(tmp_path):
    image = tmp_path / 'image.bin'
    image.write_bytes(words_to_bytes([18]))

    result = CliRunner().invoke(disasm.run, [str(image)])

    assert result.exit_code == 0
    assert result.output.strip() == '00000: ret'
