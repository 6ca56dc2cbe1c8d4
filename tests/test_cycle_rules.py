# =============================================================================
# test_cycle_rules.py - Cycle Rule Chain Tests
# =============================================================================
# Tests for cycle-cost resolution through the precedence-ordered rule chain.
#
# Test coverage includes:
#   - Baseline fallback
#   - Last-registered-wins precedence
#   - Operand-specific overrides over mnemonic-wide rules
#   - Chain immutability
#   - The MCS-51 cost table
# =============================================================================

import pytest

from asm2table.cpu import CYCLE_RULES, MCS51, CycleRule, CycleRuleChain


# =============================================================================
# Chain Semantics
# =============================================================================

class TestChainPrecedence:
    """Rules are evaluated most-recently-registered first."""

    def test_empty_chain_uses_baseline(self):
        assert CycleRuleChain().cost_of("NOP", ()) == 1
        assert CycleRuleChain(baseline=3).cost_of("NOP", ()) == 3

    def test_mnemonic_rule(self):
        chain = CycleRuleChain().when_mnemonic("MUL", 4)
        assert chain.cost_of("MUL", ("AB",)) == 4
        assert chain.cost_of("ADD", ("A", "Rn")) == 1

    def test_specific_rule_needs_exact_tags(self):
        chain = CycleRuleChain().when_operands("MOV", ("DPTR", "imm2B"), 2)
        assert chain.cost_of("MOV", ("DPTR", "imm2B")) == 2
        assert chain.cost_of("MOV", ("A", "imm1B")) == 1
        assert chain.cost_of("MOV", ("DPTR",)) == 1

    def test_last_registered_wins(self):
        chain = CycleRuleChain().when_mnemonic("JMP", 2).when_mnemonic("JMP", 3)
        assert chain.cost_of("JMP", ("@A+DPTR",)) == 3

    def test_specific_registered_later_outranks_mnemonic(self):
        chain = (CycleRuleChain()
                 .when_mnemonic("MOV", 3)
                 .when_operands("MOV", ("A", "Rn"), 5))
        assert chain.cost_of("MOV", ("A", "Rn")) == 5
        assert chain.cost_of("MOV", ("A", "@Ri")) == 3

    def test_mnemonic_registered_later_outranks_specific(self):
        """Precedence comes only from registration order."""
        chain = (CycleRuleChain()
                 .when_operands("MOV", ("A", "Rn"), 5)
                 .when_mnemonic("MOV", 3))
        assert chain.cost_of("MOV", ("A", "Rn")) == 3

    def test_find_rule(self):
        chain = CycleRuleChain().when_mnemonic("MOV", 3).when_operands("MOV", ("A", "Rn"), 5)
        rule = chain.find_rule("MOV", ["A", "Rn"])
        assert rule == CycleRule("MOV", ("A", "Rn"), 5)
        assert rule.is_specific
        assert chain.find_rule("NOP", ()) is None

    def test_register_returns_new_chain(self):
        base = CycleRuleChain()
        extended = base.when_mnemonic("MUL", 4)
        assert len(base) == 0
        assert len(extended) == 1
        assert base.cost_of("MUL", ("AB",)) == 1

    def test_iteration_is_highest_precedence_first(self):
        chain = CycleRuleChain().when_mnemonic("A1", 2).when_mnemonic("A2", 3)
        assert [rule.mnemonic for rule in chain] == ["A2", "A1"]

    def test_rule_str(self):
        assert str(CycleRule("MUL", None, 4)) == "MUL -> 4"
        assert str(CycleRule("MOV", ("DPTR", "imm2B"), 2)) == "MOV DPTR, imm2B -> 2"


# =============================================================================
# MCS-51 Costs
# =============================================================================

class TestMCS51Costs:
    """The configured MCS-51 rule chain."""

    @pytest.mark.parametrize("mnemonic,tags,cycles", [
        ("MUL", ("AB",), 4),
        ("DIV", ("AB",), 4),
        ("SJMP", ("rel1B",), 2),
        ("RET", (), 2),
        ("NOP", (), 1),
        ("SETB", ("bit",), 1),
        ("MOV", ("DPTR", "imm2B"), 2),
        ("MOV", ("@Ri", "addr1B"), 2),
        ("MOV", ("A", "Rn"), 1),
        ("INC", ("DPTR",), 2),
        ("INC", ("A",), 1),
        ("ANL", ("C", "/bit"), 2),
        ("XRL", ("A", "imm1B"), 1),
    ])
    def test_costs(self, mnemonic, tags, cycles):
        assert CYCLE_RULES.cost_of(mnemonic, tags) == cycles

    def test_specific_rules_always_apply(self):
        """Every operand-specific rule is reachable in the configured chain."""
        specific = [rule for rule in CYCLE_RULES if rule.is_specific]
        assert specific
        for rule in specific:
            assert CYCLE_RULES.find_rule(rule.mnemonic, rule.operand_tags) == rule

    def test_specific_rules_name_real_variants(self):
        for rule in CYCLE_RULES:
            if rule.is_specific:
                assert rule.operand_tags in MCS51.variants_of(rule.mnemonic)

    def test_baseline(self):
        assert CYCLE_RULES.baseline == 1
