"""
asm2table Command-Line Interface
================================

- **asm2table**: per-line addressing mode, cycle and byte report

Implemented as a Click application with unified error reporting.
"""

__all__ = ["asm2table"]
