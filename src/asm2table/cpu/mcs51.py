"""
MCS-51 (8051) Instruction Set Tables
====================================

This module holds the static configuration for the Intel 8051 family: the
operand classes, the operand shapes accepted by each mnemonic, the cycle-cost
rules and the directive skip list. Everything here is a constant; MCS51 is
the InstructionSet built from it at import time.

Operand Tags
------------
| Tag      | Syntax                          | Mode              | Bytes |
|----------|---------------------------------|-------------------|-------|
| A        | A                               | register direct   | 0     |
| AB       | AB (MUL/DIV pair)               | implied           | 0     |
| C        | C (carry flag)                  | register direct   | 0     |
| DPTR     | DPTR                            | register direct   | 0     |
| Rn       | R0..R7                          | register direct   | 0     |
| @Ri      | @R0, @R1                        | register indirect | 0     |
| @DPTR    | @DPTR                           | register indirect | 0     |
| @A+DPTR  | @A+DPTR                         | indexed           | 0     |
| @A+PC    | @A+PC                           | indexed           | 0     |
| imm1B    | #30H, #01010101B, #-5           | immediate         | 1     |
| imm2B    | #1234H                          | immediate         | 2     |
| addr1B   | 30H, 48, P1, SBUF               | direct            | 1     |
| addr2B   | 1234H, LABEL                    | direct            | 2     |
| addr11   | 0123H, LABEL (ACALL/AJMP page)  | direct            | 1     |
| rel1B    | LABEL, 0FEH                     | direct            | 1     |
| bit      | 20H, P2.0, TR1, TI              | direct            | 1     |
| /bit     | /P2.0, /TR1                     | direct            | 1     |

Number Formats
--------------
Literals follow Intel syntax: hexadecimal with an H suffix (a leading digit
is required, so FFH is written 0FFH), binary with a B suffix and decimal with
an optional D suffix. Source text is matched case-sensitively.

Cycle Costs
-----------
Every instruction costs one machine cycle unless a rule below says
otherwise. Mnemonic-wide rules are registered first and operand-specific
rules after them, so a specific rule always outranks a mnemonic-wide one.

Reference
---------
- Intel MCS-51 Microcontroller Family User's Manual, instruction set chapter

Copyright (c) 2026 asm2table Contributors
"""

from asm2table.cpu.isa import InstructionSet
from asm2table.cpu.modes import (
    AddressingMode,
    IMPLIED,
    INDEXED,
    REGISTER_DIRECT,
    REGISTER_INDIRECT,
)
from asm2table.cpu.operands import OperandClass
from asm2table.cpu.rules import CycleRuleChain


# =============================================================================
# Literal and Name Grammars
# =============================================================================

HEX_8 = r"0*([1-9][A-F0-9]|0[0-9A-F]{1,2})H"
BIN_8 = r"0*[0-1]{1,8}B"
DEC_8 = r"0*[0-9]{1,3}D?"
NUMBER_8 = rf"(({HEX_8})|({BIN_8})|({DEC_8}))"

HEX_16 = r"0*([1-9][A-F0-9]{1,3}|0[0-9A-F]{1,4})H"
BIN_16 = r"0*[0-1]{1,16}B"
DEC_16 = r"0*[0-9]{1,5}D?"
NUMBER_16 = rf"(({HEX_16})|({BIN_16})|({DEC_16}))"

LABEL = r"[A-Z][A-Z0-9_-]*"

# Byte-addressable special function registers
SFR_NAMES = r"(ACC|B|PSW|SP|DPL|DPH|P[0-3]|IE|IP|TCON|TMOD|T[LH][01]|SCON|SBUF|PCON)"

# Bit-addressable registers (dotted form) and named flag bits
BIT_REGISTERS = r"(P[0-7]|ACC|B|PSW|TCON|SCON|IE|IP)"
BIT_NAMES = r"(T[FR][01]|I[ET][01]|[TR]I|REN|SM[0-2]|[TR]B8|EA|ES|ET[01]|EX[01]|PS|PT[01]|PX[01]|CY|AC|F0|RS[01]|OV)"
BIT = rf"({NUMBER_8}|{BIT_REGISTERS}\.[0-7]|{BIT_NAMES})"


# =============================================================================
# Operand Classes
# =============================================================================

OPERAND_CLASSES: tuple[OperandClass, ...] = (
    OperandClass("A", r"A", REGISTER_DIRECT, "accumulator"),
    OperandClass("AB", r"AB", IMPLIED, "accumulator/B register pair"),
    OperandClass("C", r"C", REGISTER_DIRECT, "carry flag"),
    OperandClass("DPTR", r"DPTR", REGISTER_DIRECT, "data pointer"),
    OperandClass("Rn", r"R[0-7]", REGISTER_DIRECT, "working register R0-R7"),
    OperandClass("@Ri", r"@R[0-1]", REGISTER_INDIRECT, "indirect through R0 or R1"),
    OperandClass("@DPTR", r"@DPTR", REGISTER_INDIRECT, "indirect through DPTR"),
    OperandClass("@A+DPTR", r"@A *\+ *DPTR", INDEXED, "code memory at A+DPTR"),
    OperandClass("@A+PC", r"@A *\+ *PC", INDEXED, "code memory at A+PC"),
    OperandClass(
        "imm1B",
        rf"#(({HEX_8})|({BIN_8})|(-?{DEC_8}))",
        AddressingMode.immediate(1),
        "8-bit immediate",
    ),
    OperandClass("imm2B", rf"#{NUMBER_16}", AddressingMode.immediate(2), "16-bit immediate"),
    OperandClass(
        "addr1B",
        rf"({NUMBER_8}|{SFR_NAMES})",
        AddressingMode.direct(1),
        "internal RAM or SFR address",
    ),
    OperandClass(
        "addr2B",
        rf"({NUMBER_16}|B|{LABEL})",
        AddressingMode.direct(2),
        "16-bit code address",
    ),
    OperandClass(
        "addr11",
        rf"({NUMBER_16}|{LABEL})",
        AddressingMode.direct(1),
        "11-bit in-page code address",
    ),
    OperandClass(
        "rel1B",
        rf"({NUMBER_8}|{LABEL})",
        AddressingMode.direct(1),
        "relative branch target",
    ),
    OperandClass("bit", BIT, AddressingMode.direct(1), "bit address"),
    OperandClass("/bit", rf"/{BIT}", AddressingMode.direct(1), "complemented bit address"),
)


# =============================================================================
# Instruction Variants
# =============================================================================
# Key: mnemonic
# Value: operand shapes in match order. The first shape whose tags all accept
# their operands wins, so more specific shapes must come before general ones.
# An empty list marks an instruction that takes no operands.
# =============================================================================

_ARITHMETIC = [["A", "imm1B"], ["A", "addr1B"], ["A", "@Ri"], ["A", "Rn"]]

_LOGICAL = [
    ["addr1B", "A"], ["addr1B", "imm1B"],
    ["A", "imm1B"], ["A", "addr1B"], ["A", "@Ri"], ["A", "Rn"],
]

_BIT_LOGICAL = _LOGICAL + [["C", "bit"], ["C", "/bit"], ["bit", "C"]]

INSTRUCTION_VARIANTS: dict[str, list[list[str]]] = {
    # Zero-operand
    "NOP": [],
    "RET": [],
    "RETI": [],

    # Arithmetic
    "ADD": _ARITHMETIC,
    "ADDC": _ARITHMETIC,
    "SUBB": _ARITHMETIC,
    "INC": [["A"], ["addr1B"], ["@Ri"], ["Rn"], ["DPTR"]],
    "DEC": [["A"], ["addr1B"], ["@Ri"], ["Rn"]],
    "MUL": [["AB"]],
    "DIV": [["AB"]],
    "DA": [["A"]],

    # Logical
    "ANL": _BIT_LOGICAL,
    "ORL": _BIT_LOGICAL,
    "XRL": _LOGICAL,
    "CLR": [["bit"], ["C"], ["A"]],
    "CPL": [["bit"], ["C"], ["A"]],
    "SETB": [["bit"], ["C"]],
    "RL": [["A"]],
    "RLC": [["A"]],
    "RR": [["A"]],
    "RRC": [["A"]],
    "SWAP": [["A"]],

    # Data transfer
    "MOV": [
        ["A", "imm1B"], ["addr1B", "imm1B"], ["@Ri", "imm1B"], ["Rn", "imm1B"],
        ["addr1B", "addr1B"], ["addr1B", "@Ri"], ["addr1B", "Rn"],
        ["DPTR", "imm2B"],
        ["bit", "C"], ["C", "bit"],
        ["@Ri", "addr1B"], ["Rn", "addr1B"], ["A", "addr1B"],
        ["A", "@Ri"], ["A", "Rn"],
        ["addr1B", "A"], ["@Ri", "A"], ["Rn", "A"],
    ],
    "MOVC": [["A", "@A+DPTR"], ["A", "@A+PC"]],
    "MOVX": [["A", "@DPTR"], ["A", "@Ri"], ["@DPTR", "A"], ["@Ri", "A"]],
    "PUSH": [["addr1B"]],
    "POP": [["addr1B"]],
    "XCH": [["A", "addr1B"], ["A", "@Ri"], ["A", "Rn"]],
    "XCHD": [["A", "@Ri"]],

    # Program branching
    "ACALL": [["addr11"]],
    "LCALL": [["addr2B"]],
    "AJMP": [["addr11"]],
    "LJMP": [["addr2B"]],
    "SJMP": [["rel1B"]],
    "JMP": [["@A+DPTR"]],
    "JC": [["rel1B"]],
    "JNC": [["rel1B"]],
    "JZ": [["rel1B"]],
    "JNZ": [["rel1B"]],
    "JB": [["bit", "rel1B"]],
    "JNB": [["bit", "rel1B"]],
    "JBC": [["bit", "rel1B"]],
    "CJNE": [
        ["A", "imm1B", "rel1B"], ["A", "addr1B", "rel1B"],
        ["@Ri", "imm1B", "rel1B"], ["Rn", "imm1B", "rel1B"],
    ],
    "DJNZ": [["addr1B", "rel1B"], ["Rn", "rel1B"]],
}


# =============================================================================
# Cycle Rules
# =============================================================================

def build_cycle_rules() -> CycleRuleChain:
    """Build the MCS-51 cycle-rule chain, lowest precedence first."""
    chain = CycleRuleChain(baseline=1)

    # Mnemonic-wide costs
    for mnemonic in ("MUL", "DIV"):
        chain = chain.when_mnemonic(mnemonic, 4)
    for mnemonic in (
        "MOVC", "MOVX", "PUSH", "POP",
        "JC", "JNC", "JB", "JNB", "JZ", "JNZ", "JBC",
        "ACALL", "LCALL", "AJMP", "LJMP", "JMP", "SJMP",
        "CJNE", "DJNZ", "RET", "RETI",
    ):
        chain = chain.when_mnemonic(mnemonic, 2)

    # Operand-specific overrides
    two_cycle_forms = [
        ("ORL", ("C", "bit")),
        ("ANL", ("C", "bit")),
        ("ORL", ("C", "/bit")),
        ("ANL", ("C", "/bit")),
        ("MOV", ("bit", "C")),
        ("MOV", ("DPTR", "imm2B")),
        ("MOV", ("@Ri", "addr1B")),
        ("MOV", ("A", "addr1B")),
        ("MOV", ("addr1B", "imm1B")),
        ("MOV", ("addr1B", "@Ri")),
        ("MOV", ("addr1B", "addr1B")),
        ("MOV", ("addr1B", "Rn")),
        ("MOV", ("Rn", "addr1B")),
        ("XRL", ("addr1B", "imm1B")),
        ("ORL", ("addr1B", "imm1B")),
        ("ANL", ("addr1B", "imm1B")),
        ("INC", ("DPTR",)),
    ]
    for mnemonic, tags in two_cycle_forms:
        chain = chain.when_operands(mnemonic, tags, 2)

    return chain


CYCLE_RULES = build_cycle_rules()


# =============================================================================
# Directives
# =============================================================================
# Lines matching any of these (after label and comment stripping) are
# assembler directives, not instructions, and cost nothing.

SKIP_PATTERNS: tuple[str, ...] = (
    r"END",
    r"ORG.+",
    r"DB.+",
    r"DW.+",
    r"DS.+",
    r"\S+\s+EQU\s+.+",
)


MCS51 = InstructionSet(
    name="MCS-51",
    operand_classes=OPERAND_CLASSES,
    variants=INSTRUCTION_VARIANTS,
    cycle_rules=CYCLE_RULES,
    skip_patterns=SKIP_PATTERNS,
)
