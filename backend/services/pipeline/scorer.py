"""Stage 2: turn a SignalSet into clamped sub-scores and a weighted overall."""

import math

from models.schemas.score_card import ScoreCard
from models.schemas.signal_set import SignalSet
from services.errors import PreconditionViolation
from services.profiles import ReviewProfile
from services.profiles.base import Dimension

SCORE_MIN = 0
SCORE_MAX = 100
_WEIGHT_TOLERANCE = 1e-6


def clamp(value: float) -> int:
    return int(min(SCORE_MAX, max(SCORE_MIN, value)))


def round_half_up(value: float) -> int:
    # round(…, 6) first so 26.499999… from float weights still rounds to 27
    return math.floor(round(value, 6) + 0.5)


def signal_value(signals: SignalSet, name: str) -> int:
    """Resolve a rule signal name to an int (booleans as 0/1).

    `has_<section>` names look up the profile's section table first.
    """
    if name.startswith("has_") and name[4:] in signals.sections:
        return int(signals.sections[name[4:]])
    try:
        value = getattr(signals, name)
    except AttributeError:
        raise PreconditionViolation(f"Unknown signal in score rule: {name}") from None
    if not isinstance(value, (bool, int)):
        raise PreconditionViolation(f"Signal {name} is not numeric")
    return int(value)


def score_dimension(dimension: Dimension, signals: SignalSet) -> int:
    """Base plus every applicable rule, clamped to 0..100."""
    total = dimension.base
    for rule in dimension.rules:
        if rule.applies(signal_value(signals, rule.signal)):
            total += rule.points
    return clamp(total)


def check_weights(profile: ReviewProfile) -> None:
    weights = sum(d.weight for d in profile.dimensions)
    if abs(weights - 1.0) > _WEIGHT_TOLERANCE:
        raise PreconditionViolation(
            f"{profile.kind} dimension weights sum to {weights}, expected 1.0"
        )


def score(signals: SignalSet, profile: ReviewProfile) -> ScoreCard:
    check_weights(profile)
    breakdown = {d.key: score_dimension(d, signals) for d in profile.dimensions}
    weighted = sum(d.weight * breakdown[d.key] for d in profile.dimensions)
    return ScoreCard(overall=clamp(round_half_up(weighted)), score_breakdown=breakdown)
