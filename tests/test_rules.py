"""Unit tests for the ordered condition rule table."""
import logging

from src.domain.models import CategoryFlags
from src.domain.rules import (
    CONDITION_RULES,
    EMERGENCY_RULE,
    GENERAL_ASSESSMENT_RULE,
    determine_condition,
    match_rule,
)


class TestRuleTable:
    """Test the rule table itself."""

    def test_rules_are_in_priority_order(self):
        assert [r.priority for r in CONDITION_RULES] == [1, 2, 3, 4, 5, 6, 7]

    def test_names_and_confidences(self):
        assert [(r.name, r.confidence) for r in CONDITION_RULES] == [
            ("Emergency Medical Condition", 95),
            ("Upper Respiratory Infection", 85),
            ("Viral Flu-like Illness", 82),
            ("Tension Headache", 78),
            ("Gastrointestinal Upset", 75),
            ("General Fatigue Syndrome", 70),
            ("General Health Assessment", 65),
        ]

    def test_only_emergency_requires_immediate_care(self):
        assert [r.seek_immediate_care for r in CONDITION_RULES] == [True] + [False] * 6

    def test_recommendation_counts(self):
        for rule in CONDITION_RULES:
            assert 4 <= len(rule.recommendations) <= 5

    def test_default_rule_is_last(self):
        assert CONDITION_RULES[-1] is GENERAL_ASSESSMENT_RULE


class TestMatchRule:
    """Test first-match-wins selection."""

    def test_no_flags_falls_back_to_default(self):
        assert match_rule(CategoryFlags(), 0) is GENERAL_ASSESSMENT_RULE

    def test_missing_flags_treated_as_false(self):
        assert match_rule(None, 10) is GENERAL_ASSESSMENT_RULE

    def test_emergency_flag_beats_everything(self):
        flags = CategoryFlags(**{name: True for name in CategoryFlags.model_fields})
        assert match_rule(flags, 0) is EMERGENCY_RULE

    def test_respiratory_pain_needs_score_above_seven(self):
        flags = CategoryFlags(respiratory=True, pain=True)
        assert match_rule(flags, 8).priority == 1
        assert match_rule(flags, 7).priority == 7

    def test_respiratory_fever_beats_digestive(self):
        flags = CategoryFlags(respiratory=True, fever=True, digestive=True)
        assert match_rule(flags, 0).priority == 2

    def test_flu_needs_pain_or_neurological(self):
        assert match_rule(CategoryFlags(fever=True, fatigue=True, pain=True), 0).priority == 3
        assert match_rule(CategoryFlags(fever=True, fatigue=True, neurological=True), 0).priority == 3
        # fever + fatigue alone falls through to the fatigue rule
        assert match_rule(CategoryFlags(fever=True, fatigue=True), 0).priority == 6

    def test_fever_blocks_tension_headache(self):
        assert match_rule(CategoryFlags(neurological=True), 0).priority == 4
        assert match_rule(CategoryFlags(neurological=True, fever=True), 0).priority == 7

    def test_skin_alone_has_no_rule(self):
        assert match_rule(CategoryFlags(skin=True), 0).priority == 7


class TestSeverityTiers:
    """Test per-rule tier thresholds."""

    def test_emergency_always_severe(self):
        assert determine_condition(CategoryFlags(emergency=True), 0).severity == "severe"

    def test_respiratory_threshold_six(self):
        flags = CategoryFlags(respiratory=True, fever=True)
        assert determine_condition(flags, 6).severity == "mild"
        assert determine_condition(flags, 7).severity == "moderate"

    def test_flu_threshold_six(self):
        flags = CategoryFlags(fever=True, fatigue=True, pain=True)
        assert determine_condition(flags, 6).severity == "mild"
        assert determine_condition(flags, 7).severity == "moderate"

    def test_headache_threshold_seven(self):
        flags = CategoryFlags(neurological=True)
        assert determine_condition(flags, 7).severity == "mild"
        assert determine_condition(flags, 8).severity == "moderate"

    def test_digestive_threshold_six(self):
        flags = CategoryFlags(digestive=True)
        assert determine_condition(flags, 6).severity == "mild"
        assert determine_condition(flags, 7).severity == "moderate"

    def test_fatigue_always_mild(self):
        assert determine_condition(CategoryFlags(fatigue=True), 10).severity == "mild"

    def test_default_threshold_six(self):
        assert determine_condition(CategoryFlags(), 6).severity == "mild"
        assert determine_condition(CategoryFlags(), 7).severity == "moderate"


def test_result_carries_rule_text():
    result = determine_condition(CategoryFlags(digestive=True), 0)
    assert result.recommendations == CONDITION_RULES[4].recommendations
    assert result.explanation == CONDITION_RULES[4].explanation


def test_match_logs_selected_rule(caplog):
    with caplog.at_level(logging.DEBUG, logger="src.domain.rules"):
        match_rule(CategoryFlags(digestive=True), 3)
    assert "Matched rule 5 (Gastrointestinal Upset) at severity score 3" in caplog.text
