import logging as lg
from typing import Any

from wordvm.common.hwconf import CELL_MASK, MAX_LITERAL, REGISTER_BASE
import wordvm.common.ops as ops

Tokens = list[Any]

ESCAPES = {
    'n': '\n',
    't': '\t',
    '\\': '\\',
    "'": "'",
    '0': '\0',
}


class AsmError(Exception):
    pass


def unescape(body: str) -> str:
    if body.startswith('\\'):
        return ESCAPES[body[1]]

    return body


class FPP:
    ''' First pass processor: collects words and label addresses '''
    cmd_list: list[tuple[str, int | str]]
    label_dict: dict[str, int]

    def __init__(self):
        self.cmd_list = list()
        self.offset = 0
        self.label_dict = dict()

    # Handlers
    def issue_word(self, word: int):
        if not 0 <= word <= CELL_MASK:
            raise AsmError(f'Word {word} does not fit a memory cell')

        self.cmd_list.append(('word', word))
        self.offset += 1

    def issue_op(self, op: int):
        lg.debug(f'Issuing {ops.mnemonic(op)} @ {self.offset}')
        self.issue_word(op)

    def on_reg(self, index: int):
        self.issue_word(REGISTER_BASE + index)

    def on_const(self, tokens: Tokens):
        word = int(tokens[0])

        if word > MAX_LITERAL:
            raise AsmError(f'Literal {word} out of range')

        self.issue_word(word)

    def on_raw(self, tokens: Tokens):
        text = tokens[0]
        self.issue_word(int(text, 16) if text.startswith('0x') else int(text))

    def on_char(self, tokens: Tokens):
        self.issue_word(ord(unescape(tokens[0][1:-1])))

    def on_str(self, tokens: Tokens):
        for ch in tokens[0]:
            self.issue_word(ord(ch))

    def on_label(self, tokens: Tokens):
        labelname = tokens[0]

        if labelname in self.label_dict:
            raise AsmError(f'Duplicate label {labelname}')

        self.label_dict[labelname] = self.offset
        lg.debug(f'Label {labelname} @ {self.offset}')

    def on_ref(self, tokens: Tokens):
        labelname = tokens[0]
        lg.debug(f'Ref {labelname}')
        self.cmd_list.append(('ref', labelname))
        self.offset += 1  # placeholder

    def on_fail(self, rest: Tokens):
        raise AsmError(f'Unknown command {rest[0]}')

    # Second pass
    def resolve(self) -> list[int]:
        words = []

        for (t, d) in self.cmd_list:
            if t == 'ref':
                if d not in self.label_dict:
                    raise AsmError(f'Unknown label {d}')

                words.append(self.label_dict[str(d)])
            else:
                words.append(int(d))

        return words
