"""
asm2table CPU Package
=====================

Static instruction-set configuration consumed by the resolver.

Modules:
    modes: Addressing kinds and width-carrying addressing modes
    operands: OperandClass, the per-tag syntax/mode/width record
    rules: Cycle-cost rules and the precedence-ordered rule chain
    isa: InstructionSet, the validated bundle of all tables
    mcs51: The MCS-51 (8051) tables and the MCS51 instruction set

Usage:
    from asm2table.cpu import MCS51

    MCS51.variants_of("SJMP")            # (('rel1B',),)
    MCS51.classify("Rn", "R3")           # True
    MCS51.addressing_mode_of("imm2B")    # Immediate(2-byte)

Copyright (c) 2026 asm2table Contributors
"""

from asm2table.cpu.modes import (
    AddressingKind,
    AddressingMode,
    REGISTER_DIRECT,
    REGISTER_INDIRECT,
    INDEXED,
    IMPLIED,
)
from asm2table.cpu.operands import OperandClass
from asm2table.cpu.rules import CycleRule, CycleRuleChain
from asm2table.cpu.isa import InstructionSet, InstructionVariant
from asm2table.cpu.mcs51 import (
    MCS51,
    OPERAND_CLASSES,
    INSTRUCTION_VARIANTS,
    CYCLE_RULES,
    SKIP_PATTERNS,
)

__all__ = [
    # Addressing modes
    "AddressingKind",
    "AddressingMode",
    "REGISTER_DIRECT",
    "REGISTER_INDIRECT",
    "INDEXED",
    "IMPLIED",
    # Configuration records
    "OperandClass",
    "CycleRule",
    "CycleRuleChain",
    "InstructionSet",
    "InstructionVariant",
    # MCS-51 tables
    "MCS51",
    "OPERAND_CLASSES",
    "INSTRUCTION_VARIANTS",
    "CYCLE_RULES",
    "SKIP_PATTERNS",
]
