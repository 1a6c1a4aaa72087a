# type: ignore
import pytest
from click.testing import CliRunner

import wordvm.runtime.emulator as emulator
from wordvm.runtime.errors import InvalidOpcode
from wordvm.runtime.loader import words_to_bytes

import unit_utils
from fixtures import console  # noqa: F401


def test_execute(console):  # noqa: F811
    proc = emulator.execute(words_to_bytes([19, 72, 19, 105, 0]), console)

    assert console.output == 'Hi'
    assert proc.pc == 4


def test_execute_error(console):  # noqa: F811
    with pytest.raises(InvalidOpcode):
        emulator.execute(words_to_bytes([22]), console)


def write_image(tmp_path, filename):
    path = tmp_path / 'image.bin'
    path.write_bytes(unit_utils.assemble_file(filename))
    return path


def test_cli_run(tmp_path):
    image = write_image(tmp_path, 'programs/hello.sasm')
    result = CliRunner().invoke(emulator.run, [str(image)])

    assert result.exit_code == emulator.EXIT_HALT
    assert 'Hello, world!' in result.stdout


def test_cli_input_file(tmp_path):
    image = write_image(tmp_path, 'programs/echo.sasm')
    feed = tmp_path / 'input.txt'
    feed.write_text('pong\n')

    result = CliRunner().invoke(emulator.run, ['--input', str(feed), str(image)])

    assert result.exit_code == emulator.EXIT_HALT
    assert 'pong' in result.stdout


def test_cli_exec_error(tmp_path):
    image = tmp_path / 'bad.bin'
    image.write_bytes(words_to_bytes([22]))

    result = CliRunner().invoke(emulator.run, [str(image)])
    assert result.exit_code == emulator.EXIT_EXEC_ERROR


def test_cli_missing_image(tmp_path):
    result = CliRunner().invoke(emulator.run, [str(tmp_path / 'missing.bin')])
    assert result.exit_code == emulator.EXIT_IMAGE_ERROR


def test_cli_odd_image(tmp_path):
    image = tmp_path / 'odd.bin'
    image.write_bytes(b'\x00')

    result = CliRunner().invoke(emulator.run, [str(image)])
    assert result.exit_code == emulator.EXIT_IMAGE_ERROR
