import logging as lg
from pathlib import Path
from typing import Iterator

import click

import wordvm.runtime.loader as loader
from wordvm.runtime.decoder import decode
from wordvm.runtime.errors import DecodeError, NoMoreInstructions
from wordvm.runtime.memory import Memory


def disassemble(memory: Memory, start: int = 0, count: int | None = None) -> Iterator[str]:
    ''' Yields one listing line per instruction, raw words become .dw '''
    addr = start
    emitted = 0

    while count is None or emitted < count:
        try:
            cmd = decode(memory, addr)
            line = str(cmd)
            size = cmd.size

        except NoMoreInstructions:
            return

        except DecodeError:
            line = f'.dw {memory.load(addr)}'
            size = 1

        yield f'{addr:05d}: {line}'
        addr += size
        emitted += 1


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--start', type=int, default=0, help='First address to decode')
@click.option('--count', type=int, default=None, help='Number of lines to print')
@click.argument('image_filename', type=Path)
def run(verbose: bool, start: int, count: int | None, image_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.WARNING)
    memory = loader.memory_from_file(image_filename)

    for line in disassemble(memory, start, count):
        click.echo(line)


if __name__ == '__main__':
    run()
