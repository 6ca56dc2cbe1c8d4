"""
asm2table Error Hierarchy
=========================

This module defines the exception hierarchy for asm2table. All exceptions
inherit from Asm2TableError, allowing callers to catch every library error
with a single except clause if desired.

Exception Hierarchy
-------------------
Asm2TableError (base)
├── ConfigurationError - static instruction tables are inconsistent
└── ResolutionError (per source line)
    ├── ParseFailure - line cannot be classified
    │   ├── UnknownInstruction - mnemonic not in the variant table
    │   ├── UnexpectedOperands - operands given to a zero-operand mnemonic
    │   └── NoMatchingVariant - no operand shape accepts the operands
    └── MatchFailure - cycle cost cannot be resolved
        └── UnknownInstruction (also a ParseFailure)

UnknownInstruction sits under both branches: an unknown mnemonic is reported
the same way whether the caller asked for addressing modes, byte length or
cycle cost.

Error messages follow this format:
    line N: error: description
        source_line_text
    hint: suggestion for fixing (when available)

Copyright (c) 2026 asm2table Contributors
"""

from typing import Optional, Sequence


# =============================================================================
# Base Exception Class
# =============================================================================

class Asm2TableError(Exception):
    """
    Base exception for all asm2table errors.

        try:
            resolve_byte_length(line)
        except Asm2TableError as e:
            print(f"Error: {e}")
    """
    pass


class ConfigurationError(Asm2TableError):
    """
    The static instruction tables are inconsistent.

    Raised once, when an InstructionSet is built, never while resolving
    individual lines. Typical cause: an operand tag used by the variant
    table or by a cycle rule has no operand class.
    """
    pass


# =============================================================================
# Per-line Resolution Errors
# =============================================================================

class ResolutionError(Asm2TableError):
    """
    Base exception for a source line that could not be resolved.

    Attributes:
        message: The error description
        source_line: The raw source text (optional)
        line_number: 1-indexed line number in the source file (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        source_line: Optional[str] = None,
        line_number: Optional[int] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.source_line = source_line
        self.line_number = line_number
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with line number, source and hint.

        Example output:
            line 12: error: unknown instruction 'MOVV'
                MOVV A, #1
            hint: did you mean 'MOV', 'MOVC', 'MOVX'?
        """
        parts = []

        if self.line_number is not None:
            parts.append(f"line {self.line_number}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line.strip()}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def at_line(self, line_number: int) -> "ResolutionError":
        """Attach a line number, returning self for chaining."""
        self.line_number = line_number
        self.args = (self._format_message(),)
        return self


class ParseFailure(ResolutionError):
    """A source line could not be classified against the variant table."""
    pass


class MatchFailure(ResolutionError):
    """A cycle cost could not be resolved for a source line."""
    pass


class UnknownInstruction(ParseFailure, MatchFailure):
    """
    The mnemonic is absent from the variant table.

    Similar mnemonics, when any are found, are offered as the hint to help
    catch typos.
    """

    def __init__(
        self,
        mnemonic: str,
        source_line: Optional[str] = None,
        line_number: Optional[int] = None,
        similar_mnemonics: Optional[Sequence[str]] = None,
    ):
        self.mnemonic = mnemonic
        self.similar_mnemonics = list(similar_mnemonics or [])

        hint = None
        if self.similar_mnemonics:
            suggestions = ", ".join(f"'{m}'" for m in self.similar_mnemonics[:3])
            hint = f"did you mean {suggestions}?"

        super().__init__(
            f"unknown instruction '{mnemonic}'",
            source_line=source_line,
            line_number=line_number,
            hint=hint,
        )


class UnexpectedOperands(ParseFailure):
    """
    Operands were supplied to an instruction that takes none.

    Example:
        RET A  ; Error: RET takes no operands
    """

    def __init__(
        self,
        mnemonic: str,
        operand_text: str,
        source_line: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.mnemonic = mnemonic
        self.operand_text = operand_text
        super().__init__(
            f"'{mnemonic}' takes no operands, got '{operand_text}'",
            source_line=source_line,
            line_number=line_number,
            hint=f"write '{mnemonic}' on its own",
        )


class NoMatchingVariant(ParseFailure):
    """
    The mnemonic is known but none of its operand shapes matches.

    Covers wrong operand count, wrong operand syntax and wrong operand order.

    Example:
        MOV #5, A  ; Error: an immediate cannot be a destination
    """

    def __init__(
        self,
        mnemonic: str,
        operands: Sequence[str],
        source_line: Optional[str] = None,
        line_number: Optional[int] = None,
        valid_shapes: Optional[Sequence[Sequence[str]]] = None,
    ):
        self.mnemonic = mnemonic
        self.operands = tuple(operands)
        self.valid_shapes = [tuple(shape) for shape in (valid_shapes or [])]

        hint = None
        if self.valid_shapes:
            shapes_str = "; ".join(", ".join(shape) for shape in self.valid_shapes)
            hint = f"{mnemonic} accepts: {shapes_str}"

        super().__init__(
            f"no operand form of '{mnemonic}' matches '{', '.join(self.operands)}'",
            source_line=source_line,
            line_number=line_number,
            hint=hint,
        )
