# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
scoring.py — Derived myth scalars fed back into the simulation.

All five functions are pure (myth_type, snapshot) → float.  The constants
below are load-bearing: the simulation compares these scores against its
own thresholds, so a changed bonus is a behaviour change.

    believability   base 0.7, clamp [0.1, 1.0]
    spread          base 0.3, clamp [0.1, 1.0]
    moral_weight    per-type base, clamp [0.1, 1.0]
    cultural_impact 0.5 + culture × 0.05, clamp [0.1, 1.0]
    authenticity    0.8 / 0.4 / 0.3 step function
"""

from __future__ import annotations

from dataclasses import dataclass

from .categories import MythType
from .snapshot import PersonalityStage, SimulationSnapshot

SCORE_MIN = 0.1
SCORE_MAX = 1.0

MORAL_WEIGHT_BASE = {
    MythType.TRAGEDY:    0.8,
    MythType.REDEMPTION: 0.9,
    MythType.CURSE:      0.7,
    MythType.HERO:       0.8,
    MythType.CREATION:   0.6,
}
MORAL_WEIGHT_DEFAULT = 0.5

# Myth types whose authenticity depends on a real event behind them
_EVENT_GROUNDED = frozenset({MythType.HERO, MythType.WAR, MythType.TRAGEDY})


def _clamp(value: float, lo: float = SCORE_MIN, hi: float = SCORE_MAX) -> float:
    return max(lo, min(hi, value))


def believability(myth_type: MythType, snap: SimulationSnapshot) -> float:
    score = 0.7
    if snap.civilization.religion > 6:
        score += 0.2
    if (snap.stage is PersonalityStage.BROKEN
            and myth_type in (MythType.CURSE, MythType.TRAGEDY)):
        score += 0.3
    if snap.civilization.culture > 6:
        score += 0.1
    return _clamp(score)


def spread(myth_type: MythType, snap: SimulationSnapshot) -> float:
    score = 0.3
    if snap.civilization.trade > 5:
        score += 0.2
    if snap.civilization.culture > 6:
        score += 0.15
    if snap.personality.pride > 7:
        score += 0.1
    return _clamp(score)


def moral_weight(myth_type: MythType, snap: SimulationSnapshot) -> float:
    score = MORAL_WEIGHT_BASE.get(myth_type, MORAL_WEIGHT_DEFAULT)
    if snap.stage in (PersonalityStage.MATURE, PersonalityStage.ENLIGHTENED):
        score += 0.2
    return _clamp(score)


def cultural_impact(myth_type: MythType, snap: SimulationSnapshot) -> float:
    score = 0.5 + snap.civilization.culture * 0.05
    if myth_type in (MythType.CREATION, MythType.PROPHECY):
        score += 0.3
    return _clamp(score)


def authenticity(myth_type: MythType, snap: SimulationSnapshot) -> float:
    """0.8 for an event-grounded type with history behind it, 0.4 without, 0.3 otherwise."""
    if myth_type in _EVENT_GROUNDED:
        return 0.8 if snap.events else 0.4
    return 0.3


@dataclass(frozen=True)
class MythScores:
    believability:   float
    spread:          float
    moral_weight:    float
    cultural_impact: float
    authenticity:    float

    def as_dict(self) -> dict:
        return {
            'believability':   self.believability,
            'spread':          self.spread,
            'moral_weight':    self.moral_weight,
            'cultural_impact': self.cultural_impact,
            'authenticity':    self.authenticity,
        }


def score_myth(myth_type: MythType, snap: SimulationSnapshot) -> MythScores:
    return MythScores(
        believability=believability(myth_type, snap),
        spread=spread(myth_type, snap),
        moral_weight=moral_weight(myth_type, snap),
        cultural_impact=cultural_impact(myth_type, snap),
        authenticity=authenticity(myth_type, snap),
    )
