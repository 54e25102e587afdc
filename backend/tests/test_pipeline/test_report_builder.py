"""Tests for stage 4: report assembly."""

import dataclasses

import pytest

from models.schemas.score_card import ScoreCard
from models.schemas.signal_set import RoleHit, SignalSet
from services.errors import PreconditionViolation
from services.pipeline.report_builder import ROLE_PLACEHOLDER, build_report, readiness_tier
from services.profiles.base import CritiqueTemplate
from services.profiles.linkedin import LINKEDIN_PROFILE
from services.profiles.resume import RESUME_PROFILE

ISSUE = "Tighten the top third."


def _card(profile, overall=90, **overrides) -> ScoreCard:
    breakdown = dict.fromkeys(profile.dimension_keys, 90)
    breakdown.update(overrides)
    return ScoreCard(overall=overall, score_breakdown=breakdown)


def _complete_signals(profile, **overrides) -> SignalSet:
    values = dict(
        target_role="Test Engineer",
        target_role_given=True,
        target_role_aligned=True,
        sections=dict.fromkeys(profile.section_keywords, True),
        has_email=True,
        has_phone=True,
        has_profile_link=True,
        detected_roles=[RoleHit(name="Test", hits=4)],
        metrics_count=5,
        action_verb_count=6,
        tools_count=3,
        tools=["labview", "python", "matlab"],
        bullet_count=8,
        word_count=450,
    )
    values.update(overrides)
    return SignalSet(**values)


@pytest.mark.parametrize("overall,tier", [
    (100, "ready"),
    (80, "ready"),
    (79, "close"),
    (65, "close"),
    (64, "not ready"),
    (0, "not ready"),
])
def test_readiness_tier(overall, tier):
    assert readiness_tier(overall) == tier


class TestResumeReport:
    def setup_method(self):
        self.profile = RESUME_PROFILE

    def test_strong_resume_has_no_critique_sections(self):
        report = build_report(_complete_signals(self.profile), _card(self.profile), ISSUE, self.profile)
        assert report.sections == []
        assert report.readiness == "ready"
        assert report.verdict == self.profile.verdicts["ready"]
        assert report.biggest_issue == ISSUE

    def test_weak_dimension_adds_section(self):
        card = _card(self.profile, projects=50)
        report = build_report(_complete_signals(self.profile), card, ISSUE, self.profile)
        assert [s.title for s in report.sections] == ["Projects"]
        assert report.sections[0].summary.startswith("Your projects are there")

    def test_missing_signal_uses_missing_text(self):
        sections = dict.fromkeys(self.profile.section_keywords, True)
        sections["projects"] = False
        signals = _complete_signals(self.profile, sections=sections)
        report = build_report(signals, _card(self.profile), ISSUE, self.profile)
        projects = next(s for s in report.sections if s.title == "Projects")
        assert projects.summary.startswith("There is no Projects section")

    def test_header_findings_only_for_missing_contact(self):
        signals = _complete_signals(self.profile, has_phone=False)
        report = build_report(signals, _card(self.profile), ISSUE, self.profile)
        header = next(s for s in report.sections if s.title == "Header")
        assert "No phone number found." in header.findings
        assert not any(f.startswith("No email") for f in header.findings)

    def test_findings_fill_templates(self):
        signals = _complete_signals(
            self.profile, weak_words_count=2, weak_phrases=["responsible for", "team player"],
        )
        card = _card(self.profile, impactBullets=40)
        report = build_report(signals, card, ISSUE, self.profile)
        experience = next(s for s in report.sections if s.title == "Experience")
        assert 'Cut vague phrasing: "responsible for", "team player".' in experience.findings

    def test_plan_is_seven_days(self):
        report = build_report(_complete_signals(self.profile), _card(self.profile), ISSUE, self.profile)
        assert len(report.plan) == 7
        assert [step.label for step in report.plan] == [f"Day {i}" for i in range(1, 8)]
        assert "Test Engineer" in report.plan[0].action
        assert report.plan_title == "7-day improvement plan"

    def test_role_placeholder_without_any_role(self):
        signals = _complete_signals(
            self.profile, target_role="", target_role_given=False, detected_roles=[],
        )
        report = build_report(signals, _card(self.profile), ISSUE, self.profile)
        assert ROLE_PLACEHOLDER in report.plan[0].action

    def test_detected_role_used_when_no_target(self):
        signals = _complete_signals(self.profile, target_role="", target_role_given=False)
        report = build_report(signals, _card(self.profile), ISSUE, self.profile)
        assert "(Test)" in report.plan[0].action

    def test_rewrites(self):
        report = build_report(_complete_signals(self.profile), _card(self.profile), ISSUE, self.profile)
        assert len(report.rewrites) == 3
        assert all(r.template for r in report.rewrites)

    def test_fix_list_worst_first(self):
        card = _card(self.profile, overall=50, formatting=60, projects=20, impactBullets=40, roleClarity=30)
        report = build_report(_complete_signals(self.profile), card, ISSUE, self.profile)
        fixes = self.profile.fixes
        assert report.fix_before_applying == [
            fixes["projects"], fixes["roleClarity"], fixes["impactBullets"],
        ]

    def test_fix_list_falls_back_to_polish(self):
        report = build_report(_complete_signals(self.profile), _card(self.profile), ISSUE, self.profile)
        assert report.fix_before_applying == [self.profile.polish_fix]

    def test_closing_and_sign_off(self):
        report = build_report(
            _complete_signals(self.profile), _card(self.profile), ISSUE, self.profile,
            mentor_name="Davis Booth",
        )
        assert report.closing.startswith("Thank you for sending this")
        assert report.sign_off == ["Thanks,", "Your Friend and Mentor,", "Davis Booth"]

    def test_strategy_note_follows_tier(self):
        card = _card(self.profile, overall=70)
        report = build_report(_complete_signals(self.profile), card, ISSUE, self.profile)
        assert report.readiness == "close"
        assert report.strategy_note == self.profile.strategy_notes["close"]


class TestLinkedInReport:
    def test_plan_is_six_steps(self):
        profile = LINKEDIN_PROFILE
        report = build_report(_complete_signals(profile), _card(profile), ISSUE, profile)
        assert [step.label for step in report.plan] == [f"Step {i}" for i in range(1, 7)]
        assert report.plan_title == "Next steps"
        assert report.closing == ""
        assert report.kind == "linkedin"

    def test_missing_headline(self):
        profile = LINKEDIN_PROFILE
        sections = dict.fromkeys(profile.section_keywords, True)
        sections["headline"] = False
        report = build_report(_complete_signals(profile, sections=sections), _card(profile), ISSUE, profile)
        assert [s.title for s in report.sections] == ["Headline"]


class TestPreconditions:
    def test_empty_issue(self):
        with pytest.raises(PreconditionViolation):
            build_report(_complete_signals(RESUME_PROFILE), _card(RESUME_PROFILE), "", RESUME_PROFILE)

    def test_score_keys_must_match_profile(self):
        with pytest.raises(PreconditionViolation):
            build_report(
                _complete_signals(RESUME_PROFILE), _card(LINKEDIN_PROFILE), ISSUE, RESUME_PROFILE,
            )

    def test_score_out_of_range(self):
        card = _card(RESUME_PROFILE, projects=120)
        with pytest.raises(PreconditionViolation):
            build_report(_complete_signals(RESUME_PROFILE), card, ISSUE, RESUME_PROFILE)

    def test_critique_with_unknown_dimension(self):
        critiques = RESUME_PROFILE.critiques + (CritiqueTemplate(title="Typo", dimensions=("polish",)),)
        broken = dataclasses.replace(RESUME_PROFILE, critiques=critiques)
        with pytest.raises(PreconditionViolation):
            build_report(_complete_signals(broken), _card(broken), ISSUE, broken)
