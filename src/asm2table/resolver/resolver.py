"""
Line Resolver
=============

Resolves one raw source line against an InstructionSet into the addressing
modes of its operands, its encoded length in bytes and its machine-cycle
cost.

Resolution Steps
----------------
1. Strip the label and comment. A line that is then empty is a BLANK line.
2. A line matching a skip pattern is a DIRECTIVE line.
3. Split off the mnemonic at the first whitespace and the operands on commas.
4. Look the mnemonic up in the variant table (UnknownInstruction if absent).
5. A zero-operand mnemonic must have no operand text (UnexpectedOperands).
6. Otherwise try the operand shapes in table order. A shape is selected when
   every tag accepts the operand in the same position; the first such shape
   wins. Operands beyond the shape's length are ignored, but a shape longer
   than the operand list never matches.
7. No shape matched: NoMatchingVariant.

BLANK and DIRECTIVE lines have no addressing modes, zero length and zero
cost. An instruction's length is one opcode byte plus each operand's width.

Every step is a pure function of the line and the static tables, so the
same line always resolves the same way and lines can be resolved in any
order or in parallel.

Example
-------
>>> from asm2table.resolver import LineResolver
>>> resolver = LineResolver()
>>> resolver.byte_length("MOV DPTR, #200H")
3
>>> resolver.cycle_cost("HERE: SJMP HERE")
2

Copyright (c) 2026 asm2table Contributors
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence

from asm2table.cpu import MCS51, AddressingMode, InstructionSet, InstructionVariant
from asm2table.errors import (
    MatchFailure,
    NoMatchingVariant,
    ParseFailure,
    UnexpectedOperands,
    UnknownInstruction,
)
from asm2table.resolver.lexer import SourceLine, strip_line


class LineKind(Enum):
    """What a source line turned out to be."""
    BLANK = auto()        # empty or label-only
    DIRECTIVE = auto()    # matched a skip pattern
    INSTRUCTION = auto()  # resolved against the variant table


@dataclass(frozen=True)
class ResolvedInstruction:
    """
    The outcome of resolving a single source line.

    Attributes:
        kind: Line classification
        mnemonic: Instruction name ("" for blank and directive lines)
        operand_tags: Tags of the selected operand shape
        modes: Addressing mode of each operand in the selected shape
    """
    kind: LineKind
    mnemonic: str = ""
    operand_tags: InstructionVariant = ()
    modes: tuple[AddressingMode, ...] = ()

    @property
    def is_instruction(self) -> bool:
        return self.kind is LineKind.INSTRUCTION

    @property
    def byte_length(self) -> int:
        """Opcode byte plus operand bytes; 0 for non-instructions."""
        if not self.is_instruction:
            return 0
        return 1 + sum(mode.bytes_required for mode in self.modes)


BLANK_LINE = ResolvedInstruction(LineKind.BLANK)
DIRECTIVE_LINE = ResolvedInstruction(LineKind.DIRECTIVE)


class LineResolver:
    """
    Resolves source lines against one instruction set.

    The resolver holds no per-line state; a single instance can be shared.

    Args:
        instruction_set: Tables to resolve against (default: MCS-51)
    """

    def __init__(self, instruction_set: InstructionSet = MCS51):
        self.instruction_set = instruction_set

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def classify_line(self, raw_line: str) -> tuple[SourceLine, Optional[ResolvedInstruction]]:
        """
        Run steps 1-2: strip the line and detect blank and directive lines.

        Returns the stripped line and, for a non-instruction, its result;
        the result is None when the line still needs resolving.
        """
        line = strip_line(raw_line)
        if line.is_blank:
            return line, BLANK_LINE
        if self.instruction_set.is_directive(line.statement):
            return line, DIRECTIVE_LINE
        return line, None

    def select_variant(
        self, variants: Sequence[InstructionVariant], operands: Sequence[str]
    ) -> Optional[InstructionVariant]:
        """Return the first variant whose tags all accept their operands."""
        classify = self.instruction_set.classify
        for variant in variants:
            if len(operands) < len(variant):
                continue
            if all(classify(tag, token) for tag, token in zip(variant, operands)):
                return variant
        return None

    def resolve(self, raw_line: str) -> ResolvedInstruction:
        """
        Resolve a raw source line.

        Raises:
            UnknownInstruction: mnemonic not in the variant table
            UnexpectedOperands: operands given to a zero-operand instruction
            NoMatchingVariant: no operand shape accepts the operands
        """
        line, result = self.classify_line(raw_line)
        if result is not None:
            return result

        isa = self.instruction_set
        mnemonic = line.mnemonic
        variants = isa.variants_of(mnemonic)
        if variants is None:
            raise UnknownInstruction(
                mnemonic,
                source_line=raw_line,
                similar_mnemonics=isa.similar_mnemonics(mnemonic),
            )

        if not variants:
            if line.operand_text:
                raise UnexpectedOperands(mnemonic, line.operand_text, source_line=raw_line)
            return ResolvedInstruction(LineKind.INSTRUCTION, mnemonic)

        operands = line.operands
        variant = self.select_variant(variants, operands)
        if variant is None:
            raise NoMatchingVariant(
                mnemonic,
                operands,
                source_line=raw_line,
                valid_shapes=variants,
            )

        return ResolvedInstruction(
            LineKind.INSTRUCTION,
            mnemonic,
            variant,
            tuple(isa.addressing_mode_of(tag) for tag in variant),
        )

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def addressing_modes(self, raw_line: str) -> list[AddressingMode]:
        """Addressing mode of each operand; empty for non-instructions."""
        return list(self.resolve(raw_line).modes)

    def byte_length(self, raw_line: str) -> int:
        """Encoded instruction length in bytes; 0 for non-instructions."""
        return self.resolve(raw_line).byte_length

    def cycle_cost(self, raw_line: str) -> int:
        """
        Machine cycles for the line; 0 for non-instructions.

        Raises:
            MatchFailure: the line has no operand shape to match cycle rules
                against. UnknownInstruction is raised as is; the other parse
                failures are wrapped, with the original as ``__cause__``.
        """
        try:
            resolved = self.resolve(raw_line)
        except MatchFailure:
            raise
        except ParseFailure as e:
            raise MatchFailure(
                e.message,
                source_line=e.source_line,
                line_number=e.line_number,
                hint=e.hint,
            ) from e
        return self.cycle_cost_of(resolved)

    def cycle_cost_of(self, resolved: ResolvedInstruction) -> int:
        """
        Machine cycles for an already resolved line.

        Raises:
            UnknownInstruction: the mnemonic is not in this instruction set
        """
        if not resolved.is_instruction:
            return 0
        if not self.instruction_set.is_valid_instruction(resolved.mnemonic):
            raise UnknownInstruction(resolved.mnemonic)
        return self.instruction_set.cycle_rules.cost_of(resolved.mnemonic, resolved.operand_tags)


# =============================================================================
# Module-level API
# =============================================================================
# Convenience functions bound to the MCS-51 tables. Each call re-runs the
# strip/tokenize/classify steps, so callers may use any subset.

_default_resolver = LineResolver()


def resolve_line(line: str) -> ResolvedInstruction:
    return _default_resolver.resolve(line)


def resolve_addressing_modes(line: str) -> list[AddressingMode]:
    return _default_resolver.addressing_modes(line)


def resolve_byte_length(line: str) -> int:
    return _default_resolver.byte_length(line)


def resolve_cycle_cost(line: str) -> int:
    return _default_resolver.cycle_cost(line)
