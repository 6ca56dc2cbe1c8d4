"""
asm2table Resolver
==================

Classifies MCS-51 assembly source lines without generating code.

Main Components
---------------
- **lexer**: Splits a raw line into label, statement and comment
- **LineResolver**: Selects an operand shape and derives modes, length and
  cycle cost
- **gate**: Skip detection and structural validation

Example Usage
-------------
>>> from asm2table.resolver import (
...     resolve_addressing_modes, resolve_byte_length, resolve_cycle_cost)
>>> resolve_addressing_modes("MOV DPTR, #200H")
[RegisterDirect, Immediate(2-byte)]
>>> resolve_byte_length("WAIT: JNB TI, WAIT")
3
>>> resolve_cycle_cost("WAIT:")
0
"""

from asm2table.resolver.lexer import SourceLine, strip_line, split_operands
from asm2table.resolver.resolver import (
    LineKind,
    ResolvedInstruction,
    LineResolver,
    BLANK_LINE,
    DIRECTIVE_LINE,
    resolve_line,
    resolve_addressing_modes,
    resolve_byte_length,
    resolve_cycle_cost,
)
from asm2table.resolver.gate import (
    is_skippable,
    validate_line,
    is_structurally_valid,
    validate_lines,
)

__all__ = [
    # Lexer
    "SourceLine",
    "strip_line",
    "split_operands",
    # Resolver
    "LineKind",
    "ResolvedInstruction",
    "LineResolver",
    "BLANK_LINE",
    "DIRECTIVE_LINE",
    "resolve_line",
    "resolve_addressing_modes",
    "resolve_byte_length",
    "resolve_cycle_cost",
    # Gate
    "is_skippable",
    "validate_line",
    "is_structurally_valid",
    "validate_lines",
]
