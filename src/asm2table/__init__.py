"""
asm2table - MCS-51 Assembly Line Analyzer
=========================================

This package classifies each line of an Intel 8051 (MCS-51) assembly source
file into the addressing modes of its operands, its encoded length in bytes
and its machine-cycle cost. No machine code is generated and no labels are
resolved: each line is judged on its own syntax.

Main Components
---------------
- **cpu**: Static tables (operand classes, instruction variants, cycle
  rules, directive skip list)
- **resolver**: Line stripping, operand-shape selection and cost resolution
- **report**: Whole-file analysis with CSV and text-table output

Quick Start
-----------
    >>> from asm2table import resolve_byte_length, resolve_cycle_cost
    >>> resolve_byte_length("MOV DPTR, #200H")
    3
    >>> resolve_cycle_cost("MOV DPTR, #200H")
    2

Or use the command-line tool:
    $ asm2table program.asm
    $ asm2table program.asm -o program.csv

Copyright (c) 2026 asm2table Contributors
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from asm2table.cpu import (
    AddressingKind,
    AddressingMode,
    InstructionSet,
    MCS51,
)
from asm2table.resolver import (
    LineKind,
    LineResolver,
    ResolvedInstruction,
    resolve_line,
    resolve_addressing_modes,
    resolve_byte_length,
    resolve_cycle_cost,
    is_skippable,
    is_structurally_valid,
    validate_line,
)
from asm2table.report import (
    LineReport,
    analyze_line,
    analyze_source,
    analyze_file,
    validate_source,
    write_csv,
    format_table,
)
from asm2table.config import ReportConfig
from asm2table.errors import (
    Asm2TableError,
    ConfigurationError,
    ResolutionError,
    ParseFailure,
    MatchFailure,
    UnknownInstruction,
    UnexpectedOperands,
    NoMatchingVariant,
)

__all__ = [
    "__version__",
    # Tables
    "AddressingKind",
    "AddressingMode",
    "InstructionSet",
    "MCS51",
    # Resolver
    "LineKind",
    "LineResolver",
    "ResolvedInstruction",
    "resolve_line",
    "resolve_addressing_modes",
    "resolve_byte_length",
    "resolve_cycle_cost",
    "is_skippable",
    "is_structurally_valid",
    "validate_line",
    # Reports
    "LineReport",
    "analyze_line",
    "analyze_source",
    "analyze_file",
    "validate_source",
    "write_csv",
    "format_table",
    "ReportConfig",
    # Exception hierarchy
    "Asm2TableError",
    "ConfigurationError",
    "ResolutionError",
    "ParseFailure",
    "MatchFailure",
    "UnknownInstruction",
    "UnexpectedOperands",
    "NoMatchingVariant",
]
