"""
Source Line Splitting
=====================

Breaks one raw assembly line into its parts:

    LOOP:   DJNZ R2, LOOP   ; count down
    ^^^^    ^^^^ ^^^^^^^^   ^^^^^^^^^^^^
    label   mnemonic        comment
                 operands

The comment (from the first ';') is removed first, then the label (up to the
first ':'), and the remainder is trimmed. A line that is empty after this is
a blank or label-only line.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceLine:
    """
    A raw source line split into label, statement and comment.

    Attributes:
        raw: The line exactly as given
        label: Label text before ':' (None if the line has no label)
        statement: Instruction or directive text, trimmed
        comment: Comment text after ';' (None if the line has no comment)
    """
    raw: str
    label: Optional[str]
    statement: str
    comment: Optional[str]

    @property
    def is_blank(self) -> bool:
        return not self.statement

    @property
    def code(self) -> str:
        """The line without its comment, trimmed."""
        code, _, _ = self.raw.partition(";")
        return code.strip()

    @property
    def mnemonic(self) -> str:
        parts = self.statement.split(None, 1)
        return parts[0] if parts else ""

    @property
    def operand_text(self) -> str:
        parts = self.statement.split(None, 1)
        return parts[1].strip() if len(parts) > 1 else ""

    @property
    def operands(self) -> list[str]:
        return split_operands(self.operand_text)


def strip_line(raw: str) -> SourceLine:
    """Split a raw line into label, statement and comment."""
    text, has_comment, comment = raw.partition(";")
    label: Optional[str] = None
    if ":" in text:
        label, _, text = text.partition(":")
        label = label.strip()
    return SourceLine(
        raw=raw,
        label=label,
        statement=text.strip(),
        comment=comment.strip() if has_comment else None,
    )


def split_operands(operand_text: str) -> list[str]:
    """
    Split an operand list on commas, trimming each operand.

    An empty operand list yields a single empty token, which no operand
    class accepts.

    >>> split_operands("A, #30H")
    ['A', '#30H']
    >>> split_operands("")
    ['']
    """
    return [operand.strip() for operand in operand_text.split(",")]
