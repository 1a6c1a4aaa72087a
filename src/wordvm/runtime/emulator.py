import sys
from pathlib import Path
import logging as lg
import traceback

import click

import wordvm.runtime.cpu as cpu
import wordvm.runtime.loader as loader
from wordvm.runtime.console import Console, StdConsole
from wordvm.runtime.errors import ImageError, VMError
from wordvm.runtime.memory import Memory


EXIT_HALT = 0
EXIT_KEYBOARD = 3
EXIT_IMAGE_ERROR = 4
EXIT_EXEC_ERROR = 100


def execute_memory(memory: Memory, console: Console | None = None, trace: bool = False) -> cpu.CPU:
    proc = cpu.CPU(memory, console if console is not None else StdConsole(), trace=trace)
    proc.run()
    return proc


def execute(image: bytes, console: Console | None = None, trace: bool = False) -> cpu.CPU:
    return execute_memory(loader.memory_from_bytes(image), console, trace)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--trace', is_flag=True, help='Log every executed instruction (implies -v)')
@click.option('-i', '--input', 'input_file', type=click.File('r'), help='Read program input from a file')
@click.argument('image_filename', type=Path)
def run(verbose: bool, trace: bool, input_file, image_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info('WORDVM')

    try:
        memory = loader.memory_from_file(image_filename)

    except (OSError, ImageError) as e:
        lg.error(f'Cannot load image {image_filename}: {e}')
        sys.exit(EXIT_IMAGE_ERROR)

    try:
        execute_memory(memory, StdConsole(stdin=input_file), trace=trace)

    except VMError as e:
        lg.error(f'Execution halted on error at 0x{e.pc or 0:X}: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)

    lg.info('Execution halted gracefully')
    sys.exit(EXIT_HALT)


if __name__ == '__main__':
    run()
