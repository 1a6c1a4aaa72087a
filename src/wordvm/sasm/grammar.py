# type: ignore
''' Assembly grammar '''

import pyparsing as pp

import wordvm.common.ops as ops
from wordvm.sasm.fpp import FPP


reg_indices = {
    'a': 0,
    'b': 1,
    'c': 2,
    'd': 3,
    'e': 4,
    'f': 5,
    'g': 6,
    'h': 7
}

id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
comment = pp.Suppress(pp.Literal('//') + pp.rest_of_line)

label = (id + pp.Suppress(':')).setParseAction(lambda r: (FPP.on_label, r))

reg_op = pp.Regex(r'[a-h]\b').setParseAction(lambda r: (FPP.on_reg, reg_indices[r[0]]))
const_op = pp.Regex('[0-9]+').setParseAction(lambda r: (FPP.on_const, r))
char_op = pp.Regex(r"'(\\[nt0\\']|[^'\\])'").setParseAction(lambda r: (FPP.on_char, r))
ref_op = (pp.Suppress('&') + id).setParseAction(lambda r: (FPP.on_ref, r))

operand = reg_op | const_op | char_op | ref_op


def g_cmd(op):
    info = ops.INFO[op]
    keyword = pp.Keyword(info.mnemonic).setParseAction(lambda _: (FPP.issue_op, op))

    if info.arity == 0:
        return keyword

    return keyword + operand * info.arity


asm_cmd = pp.Or([g_cmd(op) for op in sorted(ops.INFO)])

# Data
raw_op = pp.Regex('0x[0-9a-fA-F]+|[0-9]+').setParseAction(lambda r: (FPP.on_raw, r))
dw_cmd = pp.Suppress(pp.Keyword('.dw')) + pp.OneOrMore(reg_op | raw_op | char_op | ref_op)
str_cmd = (pp.Suppress(pp.Keyword('.str')) + pp.QuotedString('"', esc_char='\\')) \
    .setParseAction(lambda r: (FPP.on_str, r))

cmd = asm_cmd | dw_cmd | str_cmd
statement = pp.Optional(label) + cmd + pp.ZeroOrMore(comment)

unknown = pp.Regex('.+').setParseAction(lambda r: (FPP.on_fail, r))

program = pp.ZeroOrMore(comment | statement | label | unknown)
