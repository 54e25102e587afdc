"""Consistency checks over the review profile tables."""

import pytest

from models.schemas.signal_set import SignalSet
from services.errors import PreconditionViolation
from services.pipeline.scorer import signal_value
from services.profiles import available_kinds, get_profile
from services.profiles.linkedin import LINKEDIN_PROFILE
from services.profiles.resume import RESUME_PROFILE

PROFILES = [RESUME_PROFILE, LINKEDIN_PROFILE]


def test_registry():
    assert available_kinds() == ["linkedin", "resume"]
    assert get_profile("resume") is RESUME_PROFILE
    assert get_profile("linkedin") is LINKEDIN_PROFILE


def test_unknown_kind():
    with pytest.raises(PreconditionViolation):
        get_profile("cover_letter")


@pytest.mark.parametrize("profile", PROFILES, ids=lambda p: p.kind)
class TestProfileTables:
    def test_weights_sum_to_one(self, profile):
        assert sum(d.weight for d in profile.dimensions) == pytest.approx(1.0)

    def test_dimension_keys_unique(self, profile):
        assert len(set(profile.dimension_keys)) == len(profile.dimension_keys)

    def test_every_dimension_has_a_fix(self, profile):
        assert set(profile.fixes) == set(profile.dimension_keys)

    def test_rule_signals_resolve(self, profile):
        signals = SignalSet(sections=dict.fromkeys(profile.section_keywords, False))
        for dimension in profile.dimensions:
            for rule in dimension.rules:
                signal_value(signals, rule.signal)

    def test_critiques_reference_known_names(self, profile):
        signals = SignalSet(sections=dict.fromkeys(profile.section_keywords, False))
        for critique in profile.critiques:
            assert set(critique.dimensions) <= set(profile.dimension_keys)
            for name in critique.signals:
                signal_value(signals, name)
            for finding in critique.findings:
                if finding.signal:
                    signal_value(signals, finding.signal)

    def test_tiers_covered(self, profile):
        assert set(profile.verdicts) == {"ready", "close", "not ready"}
        assert set(profile.strategy_notes) == {"ready", "close", "not ready"}

    def test_issue_texts_non_empty(self, profile):
        issues = profile.issues
        assert all([issues.no_direction, issues.no_metrics, issues.no_projects, issues.fallback])


def test_plan_lengths():
    assert len(RESUME_PROFILE.plan) == 7
    assert len(LINKEDIN_PROFILE.plan) == 6


def test_linkedin_weights_equal():
    assert {d.weight for d in LINKEDIN_PROFILE.dimensions} == {0.2}
