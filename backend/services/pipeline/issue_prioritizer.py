"""Stage 3: pick the single biggest issue.

Ordered rules, first match wins:
    1. no target role and no role signal  -> positioning unclear
    2. no quantified results              -> duties, not impact
    3. no projects section                -> missing projects
    4. otherwise                          -> tighten the top third / headline
"""

from models.schemas.signal_set import SignalSet
from services.profiles import ReviewProfile


def biggest_issue(signals: SignalSet, profile: ReviewProfile) -> str:
    issues = profile.issues
    if not signals.target_role_given and signals.roles_detected == 0:
        return issues.no_direction
    if signals.metrics_count == 0:
        return issues.no_metrics
    if not signals.has_section("projects"):
        return issues.no_projects
    return issues.fallback
