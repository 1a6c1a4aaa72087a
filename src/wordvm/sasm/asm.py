import logging as lg
from pathlib import Path
from typing import Tuple

import click

from wordvm.runtime.loader import words_to_bytes
import wordvm.sasm.grammar as grammar
from wordvm.sasm.fpp import FPP


class CompilationItem:
    modulename: str
    contents: str

    def __init__(self, modulename: str = '<string>', contents: str = ''):
        self.modulename = modulename
        self.contents = contents


def collect_file(filepath: str | Path) -> CompilationItem:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Collecting file {filepath}')
    return CompilationItem(filepath.stem, filepath.read_text())


def compile_words(items: list[CompilationItem]) -> list[int]:
    first_pass = FPP()

    for item in items:
        lg.info(f'Processing {item.modulename}')
        actions = grammar.program.parse_string(item.contents)

        for (func, arg) in actions:  # type: ignore
            func(first_pass, arg)

    return first_pass.resolve()


def compile_items(items: list[CompilationItem]) -> bytes:
    return words_to_bytes(compile_words(items))


def assemble(source: str) -> bytes:
    return compile_items([CompilationItem(contents=source)])


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('sources', nargs=-1, type=Path)
@click.argument('binary', type=Path)
def compile(verbose: bool, sources: Tuple[Path], binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('WORDVM ASM')

    bytestr = compile_items([collect_file(path) for path in sources])
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(bytestr)


if __name__ == '__main__':
    compile()
