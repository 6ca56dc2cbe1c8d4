"""
MCS-51 Addressing Modes
=======================

An addressing mode pairs the access pattern implied by an operand with the
number of bytes that operand contributes to the encoded instruction.

| Kind              | Example        | Width  |
|-------------------|----------------|--------|
| IMMEDIATE         | #30H, #200H    | 1 or 2 |
| DIRECT            | 30H, P1, LABEL | 1 or 2 |
| REGISTER_DIRECT   | A, R3, DPTR    | 0      |
| REGISTER_INDIRECT | @R0, @DPTR     | 0      |
| INDEXED           | @A+DPTR        | 0      |
| IMPLIED           | AB             | 0      |

Relative branch targets and bit addresses are reported as DIRECT with a
one-byte width, since that is how they are encoded.
"""

from dataclasses import dataclass
from enum import Enum, auto


class AddressingKind(Enum):
    """The access pattern of an operand, independent of its width."""
    IMMEDIATE = auto()          # #literal
    DIRECT = auto()             # memory, SFR, bit or branch target
    REGISTER_DIRECT = auto()    # A, C, Rn, DPTR
    REGISTER_INDIRECT = auto()  # @Ri, @DPTR
    INDEXED = auto()            # @A+DPTR, @A+PC
    IMPLIED = auto()            # AB

    def __str__(self) -> str:
        """Return the display name used in reports."""
        return {
            AddressingKind.IMMEDIATE: "Immediate",
            AddressingKind.DIRECT: "Direct",
            AddressingKind.REGISTER_DIRECT: "Register",
            AddressingKind.REGISTER_INDIRECT: "Indirect",
            AddressingKind.INDEXED: "Indexed",
            AddressingKind.IMPLIED: "Implied",
        }[self]


# Kinds that encode their operand in the instruction stream
_SIZED_KINDS = frozenset({AddressingKind.IMMEDIATE, AddressingKind.DIRECT})


@dataclass(frozen=True)
class AddressingMode:
    """
    An addressing kind together with its byte width.

    Immediate and direct modes carry a width of 1 or 2; every other kind
    carries 0. Instances are immutable and compare by value.

    Attributes:
        kind: The access pattern
        width: Bytes this operand adds to the instruction (0, 1 or 2)
    """
    kind: AddressingKind
    width: int = 0

    def __post_init__(self) -> None:
        if self.kind in _SIZED_KINDS:
            if self.width not in (1, 2):
                raise ValueError(f"{self.kind.name} width must be 1 or 2, got {self.width}")
        elif self.width != 0:
            raise ValueError(f"{self.kind.name} carries no operand bytes, got width {self.width}")

    @classmethod
    def immediate(cls, width: int) -> "AddressingMode":
        return cls(AddressingKind.IMMEDIATE, width)

    @classmethod
    def direct(cls, width: int) -> "AddressingMode":
        return cls(AddressingKind.DIRECT, width)

    @property
    def bytes_required(self) -> int:
        """Bytes this operand contributes to the instruction length."""
        return self.width

    def __str__(self) -> str:
        return str(self.kind)

    def __repr__(self) -> str:
        if self.kind in _SIZED_KINDS:
            return f"{self.kind.name.title()}({self.width}-byte)"
        return self.kind.name.title().replace("_", "")


REGISTER_DIRECT = AddressingMode(AddressingKind.REGISTER_DIRECT)
REGISTER_INDIRECT = AddressingMode(AddressingKind.REGISTER_INDIRECT)
INDEXED = AddressingMode(AddressingKind.INDEXED)
IMPLIED = AddressingMode(AddressingKind.IMPLIED)
