"""
Operand Classes
===============

An operand class is the single configuration record for one operand tag.
It answers three questions about the tag:

1. Does a raw operand token have this tag's surface syntax? (``matches``)
2. Which addressing mode does the tag imply? (``mode``)
3. How many bytes does it add to the instruction? (``byte_width``)

Keeping all three in one record means a tag cannot be present in one table
and missing from another.

Example
-------
>>> from asm2table.cpu.operands import OperandClass
>>> from asm2table.cpu.modes import REGISTER_DIRECT
>>> acc = OperandClass("A", r"A", REGISTER_DIRECT, "accumulator")
>>> acc.matches("A"), acc.matches("B")
(True, False)
"""

import re
from dataclasses import dataclass, field

from asm2table.cpu.modes import AddressingMode


@dataclass(frozen=True)
class OperandClass:
    """
    Syntax predicate, addressing mode and width for one operand tag.

    Attributes:
        tag: Symbolic tag name used by the variant table (e.g. "imm1B")
        pattern: Regular expression a token must match in full
        mode: Addressing mode implied by the tag
        description: Human-readable summary for hints and documentation
    """
    tag: str
    pattern: str
    mode: AddressingMode
    description: str = ""
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ for the cached regex
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def matches(self, token: str) -> bool:
        """Return True if the whole token has this tag's syntax."""
        return self._compiled.fullmatch(token) is not None

    @property
    def byte_width(self) -> int:
        return self.mode.bytes_required
