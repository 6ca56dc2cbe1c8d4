"""
Cycle-Cost Rules
================

Machine-cycle costs are resolved through an ordered chain of override rules
rather than a flat table. A rule matches either on the mnemonic alone or on
the mnemonic plus the exact operand-tag sequence of the selected variant.

Precedence
----------
Rules are registered from lowest to highest precedence: the most recently
registered rule is evaluated first. The chain stores its rules
highest-precedence first, so evaluation is a plain front-to-back scan that
stops at the first match. When nothing matches, the baseline cost applies.

Example
-------
>>> chain = (CycleRuleChain(baseline=1)
...          .when_mnemonic("MOV", 1)
...          .when_operands("MOV", ("DPTR", "imm2B"), 2))
>>> chain.cost_of("MOV", ("A", "Rn"))
1
>>> chain.cost_of("MOV", ("DPTR", "imm2B"))
2
>>> chain.cost_of("NOP", ())
1
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass(frozen=True)
class CycleRule:
    """
    One cycle-cost override.

    Attributes:
        mnemonic: Instruction name the rule applies to
        operand_tags: Exact tag sequence to match, or None to match any
        cycles: Machine cycles charged when the rule matches
    """
    mnemonic: str
    operand_tags: Optional[tuple[str, ...]]
    cycles: int

    def matches(self, mnemonic: str, operand_tags: Sequence[str]) -> bool:
        if mnemonic != self.mnemonic:
            return False
        return self.operand_tags is None or tuple(operand_tags) == self.operand_tags

    @property
    def is_specific(self) -> bool:
        return self.operand_tags is not None

    def __str__(self) -> str:
        if self.operand_tags is None:
            return f"{self.mnemonic} -> {self.cycles}"
        return f"{self.mnemonic} {', '.join(self.operand_tags)} -> {self.cycles}"


class CycleRuleChain:
    """
    Immutable, ordered chain of cycle rules with a baseline fallback.

    The registration methods return a new chain, leaving the receiver
    untouched, so a chain can be shared freely once built.
    """

    def __init__(self, baseline: int = 1, rules: Iterable[CycleRule] = ()):
        self._baseline = baseline
        # Highest precedence first
        self._rules: tuple[CycleRule, ...] = tuple(rules)

    @property
    def baseline(self) -> int:
        return self._baseline

    def register(self, rule: CycleRule) -> "CycleRuleChain":
        """Return a chain where ``rule`` outranks every existing rule."""
        return CycleRuleChain(self._baseline, (rule,) + self._rules)

    def when_mnemonic(self, mnemonic: str, cycles: int) -> "CycleRuleChain":
        return self.register(CycleRule(mnemonic, None, cycles))

    def when_operands(
        self, mnemonic: str, operand_tags: Sequence[str], cycles: int
    ) -> "CycleRuleChain":
        return self.register(CycleRule(mnemonic, tuple(operand_tags), cycles))

    def find_rule(self, mnemonic: str, operand_tags: Sequence[str]) -> Optional[CycleRule]:
        """Return the highest-precedence matching rule, or None."""
        tags = tuple(operand_tags)
        for rule in self._rules:
            if rule.matches(mnemonic, tags):
                return rule
        return None

    def cost_of(self, mnemonic: str, operand_tags: Sequence[str]) -> int:
        """Cycle cost for a mnemonic and its selected operand tags."""
        rule = self.find_rule(mnemonic, operand_tags)
        return rule.cycles if rule is not None else self._baseline

    def referenced_tags(self) -> set[str]:
        """All operand tags named by specific rules."""
        return {tag for rule in self._rules if rule.operand_tags for tag in rule.operand_tags}

    def __iter__(self) -> Iterator[CycleRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"CycleRuleChain(baseline={self._baseline}, rules={len(self._rules)})"
