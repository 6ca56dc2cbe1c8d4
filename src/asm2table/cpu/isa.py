"""
Instruction Set Bundle
======================

An InstructionSet groups the four static tables the resolver consults:

- operand classes, keyed by tag
- instruction variants, keyed by mnemonic
- the cycle-rule chain
- skip patterns for directives

It is built once at import time and never mutated. Construction checks that
the tables agree with each other, so a missing operand class is reported as
a ConfigurationError at startup rather than surfacing on some source line
later.
"""

import difflib
import logging
import re
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from asm2table.cpu.modes import AddressingMode
from asm2table.cpu.operands import OperandClass
from asm2table.cpu.rules import CycleRuleChain
from asm2table.errors import ConfigurationError

logger = logging.getLogger(__name__)

# One legal operand shape for a mnemonic
InstructionVariant = tuple[str, ...]


class InstructionSet:
    """
    Immutable bundle of the configuration tables for one instruction set.

    Args:
        name: Display name (e.g. "MCS-51")
        operand_classes: One OperandClass per tag
        variants: Mnemonic -> ordered operand shapes. An empty list marks a
            zero-operand instruction.
        cycle_rules: Cycle-cost rule chain
        skip_patterns: Regular expressions for lines that are not
            instructions (matched against the whole stripped line)

    Raises:
        ConfigurationError: if a tag used by a variant or rule has no
            operand class, or a tag is registered twice
    """

    def __init__(
        self,
        name: str,
        operand_classes: Iterable[OperandClass],
        variants: Mapping[str, Sequence[Sequence[str]]],
        cycle_rules: CycleRuleChain,
        skip_patterns: Iterable[str] = (),
    ):
        self.name = name

        classes: dict[str, OperandClass] = {}
        for op_class in operand_classes:
            if op_class.tag in classes:
                raise ConfigurationError(f"{name}: operand tag '{op_class.tag}' defined twice")
            classes[op_class.tag] = op_class
        self._classes = MappingProxyType(classes)

        self._variants = MappingProxyType({
            mnemonic: tuple(tuple(shape) for shape in shapes)
            for mnemonic, shapes in variants.items()
        })
        self._cycle_rules = cycle_rules
        self._skip_patterns: tuple[re.Pattern[str], ...] = tuple(
            re.compile(pattern) for pattern in skip_patterns
        )

        self._check_tables()
        logger.debug(
            f"Loaded instruction set {name}: {len(self._variants)} mnemonics, "
            f"{len(self._classes)} operand classes, {len(self._cycle_rules)} cycle rules"
        )

    def _check_tables(self) -> None:
        for mnemonic, shapes in self._variants.items():
            for shape in shapes:
                missing = [tag for tag in shape if tag not in self._classes]
                if missing:
                    raise ConfigurationError(
                        f"{self.name}: {mnemonic} uses unknown operand tag(s) {', '.join(missing)}"
                    )
        for rule in self._cycle_rules:
            if rule.mnemonic not in self._variants:
                raise ConfigurationError(
                    f"{self.name}: cycle rule '{rule}' names unknown instruction {rule.mnemonic}"
                )
        unknown = sorted(self._cycle_rules.referenced_tags() - set(self._classes))
        if unknown:
            raise ConfigurationError(
                f"{self.name}: cycle rules use unknown operand tag(s) {', '.join(unknown)}"
            )

    # -------------------------------------------------------------------------
    # Classifier
    # -------------------------------------------------------------------------

    def operand_class(self, tag: str) -> OperandClass:
        return self._classes[tag]

    def classify(self, tag: str, token: str) -> bool:
        """Return True if ``token`` has the surface syntax of ``tag``."""
        return self._classes[tag].matches(token)

    def addressing_mode_of(self, tag: str) -> AddressingMode:
        return self._classes[tag].mode

    def byte_width_of(self, tag: str) -> int:
        return self._classes[tag].byte_width

    @property
    def operand_tags(self) -> list[str]:
        return list(self._classes)

    # -------------------------------------------------------------------------
    # Variant table
    # -------------------------------------------------------------------------

    def variants_of(self, mnemonic: str) -> Optional[tuple[InstructionVariant, ...]]:
        """Ordered operand shapes for ``mnemonic``, or None if unknown."""
        return self._variants.get(mnemonic)

    def is_valid_instruction(self, mnemonic: str) -> bool:
        return mnemonic in self._variants

    def similar_mnemonics(self, mnemonic: str) -> list[str]:
        """Known mnemonics spelled like ``mnemonic``, closest first."""
        return difflib.get_close_matches(mnemonic, list(self._variants), n=3, cutoff=0.6)

    @property
    def mnemonics(self) -> list[str]:
        return sorted(self._variants)

    # -------------------------------------------------------------------------
    # Cycle rules and skip patterns
    # -------------------------------------------------------------------------

    @property
    def cycle_rules(self) -> CycleRuleChain:
        return self._cycle_rules

    def is_directive(self, stripped_line: str) -> bool:
        """Return True if a stripped line matches any skip pattern."""
        return any(pattern.fullmatch(stripped_line) for pattern in self._skip_patterns)

    def __repr__(self) -> str:
        return f"InstructionSet({self.name!r}, mnemonics={len(self._variants)})"
