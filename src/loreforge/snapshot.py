# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
snapshot.py — Read-only view of simulation state handed to the generators.

Architecture
────────────
  Enumerations        — closed discriminants (biome, civilization archetype,
                        personality stage, memory tag, event type/category,
                        religious belief).
  PersonalityTraits   — nine bounded traits, clamped to [0, 10].
  CivilizationAttributes
                      — scalar civilization state plus position/archetype.
  HistoricalEventRecord
                      — one entry of the civilization's event history.
  SimulationSnapshot  — the bundle every classifier and scorer reads.

All dataclasses are frozen.  The simulation builds a fresh snapshot per call
and discards it; generators never write back through it, so one snapshot may
be shared by any number of threads.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

from . import config


# ══════════════════════════════════════════════════════════════════════════
# Enumerations
# ══════════════════════════════════════════════════════════════════════════

class Biome(Enum):
    NONE       = 'none'
    FOREST     = 'forest'
    MOUNTAINS  = 'mountains'
    DESERT     = 'desert'
    OCEAN      = 'ocean'
    TUNDRA     = 'tundra'
    SWAMP      = 'swamp'
    RAINFOREST = 'rainforest'
    PLAINS     = 'plains'
    COAST      = 'coast'


class CivilizationType(Enum):
    MILITARY   = 'military'
    TECHNOLOGY = 'technology'
    RELIGIOUS  = 'religious'
    TRADE      = 'trade'
    CULTURAL   = 'cultural'


class PersonalityStage(Enum):
    NAIVE       = 'naive'
    DEVELOPING  = 'developing'
    MATURE      = 'mature'
    HARDENED    = 'hardened'
    BROKEN      = 'broken'
    ENLIGHTENED = 'enlightened'


class MemoryTag(Enum):
    TRIUMPH     = 'triumph'
    TRAUMA      = 'trauma'
    BETRAYAL    = 'betrayal'
    SACRIFICE   = 'sacrifice'
    DISCOVERY   = 'discovery'
    LOSS        = 'loss'
    MIRACLE     = 'miracle'
    TRAGEDY     = 'tragedy'
    HUMILIATION = 'humiliation'
    REVENGE     = 'revenge'


class EventType(Enum):
    NONE           = 'none'
    NATURAL        = 'natural'
    SOCIAL         = 'social'
    POLITICAL      = 'political'
    ECONOMIC       = 'economic'
    RELIGIOUS      = 'religious'
    CULTURAL       = 'cultural'
    TECHNOLOGICAL  = 'technological'
    MILITARY       = 'military'
    ENVIRONMENTAL  = 'environmental'
    DIPLOMATIC     = 'diplomatic'
    GEOLOGICAL     = 'geological'
    CLIMATOLOGICAL = 'climatological'


class EventCategory(Enum):
    DISASTER   = 'disaster'
    GOLDEN     = 'golden'
    MILITARY   = 'military'
    CONFLICT   = 'conflict'
    COALITION  = 'coalition'
    HOLY_WAR   = 'holy_war'
    BETRAYAL   = 'betrayal'
    HERO       = 'hero'
    REVOLUTION = 'revolution'
    CASCADE    = 'cascade'
    ESCALATION = 'escalation'
    SPIRITUAL  = 'spiritual'
    DECLINE    = 'decline'
    DISCOVERY  = 'discovery'
    OTHER      = 'other'


class ReligionBelief(Enum):
    NONE       = 'none'
    MONOTHEISM = 'monotheism'
    POLYTHEISM = 'polytheism'
    PANTHEISM  = 'pantheism'
    ANIMISM    = 'animism'
    ATHEISM    = 'atheism'


# Event types that count as a natural disaster in the civilization's past
DISASTER_EVENT_TYPES = frozenset({
    EventType.NATURAL, EventType.ENVIRONMENTAL,
    EventType.GEOLOGICAL, EventType.CLIMATOLOGICAL,
})

# Event types a hero myth can be built around
TRIUMPH_EVENT_TYPES = frozenset({
    EventType.MILITARY, EventType.CULTURAL, EventType.POLITICAL,
})


# ══════════════════════════════════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════════════════════════════════

Position = Tuple[float, float, float]


def clamp_trait(value) -> float:
    """Clamp *value* to [TRAIT_MIN, TRAIT_MAX]; non-numeric or NaN → TRAIT_MIN."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return config.TRAIT_MIN
    if math.isnan(v):
        return config.TRAIT_MIN
    return min(config.TRAIT_MAX, max(config.TRAIT_MIN, v))


def _coord(value) -> float:
    """One axis as a float; non-numeric, NaN or infinite → 0.0."""
    try:
        v = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def as_position(pos) -> Position:
    """Coerce any 1–3 element sequence into an (x, y, z) float triple.

    Missing or unusable axes count as 0; a non-sequence is the origin.
    """
    if pos is None:
        return (0.0, 0.0, 0.0)
    try:
        raw = tuple(pos)[:3]
    except TypeError:
        return (0.0, 0.0, 0.0)
    coords = [_coord(c) for c in raw]
    while len(coords) < 3:
        coords.append(0.0)
    return (coords[0], coords[1], coords[2])


def _keep_recent(items: Optional[Iterable], limit: int) -> tuple:
    seq = tuple(items or ())
    return seq[-limit:] if len(seq) > limit else seq


# ══════════════════════════════════════════════════════════════════════════
# Dataclasses
# ══════════════════════════════════════════════════════════════════════════

_TRAIT_NAMES = ('aggressiveness', 'defensiveness', 'greed', 'paranoia',
                'ambition', 'desperation', 'hatred', 'pride', 'vengefulness')


@dataclass(frozen=True)
class PersonalityTraits:
    """Nine personality traits, each clamped to [0, 10] on construction."""
    aggressiveness: float = 5.0
    defensiveness:  float = 5.0
    greed:          float = 5.0
    paranoia:       float = 5.0
    ambition:       float = 5.0
    desperation:    float = 5.0
    hatred:         float = 5.0
    pride:          float = 5.0
    vengefulness:   float = 5.0

    def __post_init__(self) -> None:
        for name in _TRAIT_NAMES:
            object.__setattr__(self, name, clamp_trait(getattr(self, name)))

    @classmethod
    def uniform(cls, value: float) -> 'PersonalityTraits':
        """Every trait set to *value* (handy for the all-0 / all-10 extremes)."""
        return cls(**{name: value for name in _TRAIT_NAMES})


@dataclass(frozen=True)
class CivilizationAttributes:
    """Civilization scalars.  The 0–10 attributes are clamped like traits;
    population is a head-count and is only floored at zero."""
    name:       str              = 'the Nameless'
    population: float            = 1000.0
    wealth:     float            = 5.0
    technology: float            = 5.0
    culture:    float            = 5.0
    religion:   float            = 5.0
    trade:      float            = 5.0
    military:   float            = 5.0
    stability:  float            = 5.0
    position:   Position         = (0.0, 0.0, 0.0)
    archetype:  CivilizationType = CivilizationType.MILITARY

    def __post_init__(self) -> None:
        for name in ('wealth', 'technology', 'culture', 'religion',
                     'trade', 'military', 'stability'):
            object.__setattr__(self, name, clamp_trait(getattr(self, name)))
        try:
            pop = max(0.0, float(self.population))
        except (TypeError, ValueError):
            pop = 0.0
        object.__setattr__(self, 'population', 0.0 if math.isnan(pop) else pop)
        object.__setattr__(self, 'position', as_position(self.position))
        object.__setattr__(self, 'name', str(self.name or ''))


@dataclass(frozen=True)
class HistoricalEventRecord:
    year:         int       = 0
    type:         EventType = EventType.NONE
    significance: float     = 0.0
    location:     Position  = (0.0, 0.0, 0.0)
    title:        str       = ''


@dataclass(frozen=True)
class SimulationSnapshot:
    """Immutable bundle of everything the generators may read.

    ``events`` and ``memories`` are bounded to the most recent
    MAX_EVENTS / MAX_MEMORIES entries.
    """
    civilization: CivilizationAttributes = field(default_factory=CivilizationAttributes)
    personality:  PersonalityTraits      = field(default_factory=PersonalityTraits)
    stage:        PersonalityStage       = PersonalityStage.DEVELOPING
    events:       Tuple[HistoricalEventRecord, ...] = ()
    memories:     Tuple[MemoryTag, ...]             = ()
    year:         int                               = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, 'events',
                           _keep_recent(self.events, config.MAX_EVENTS))
        object.__setattr__(self, 'memories',
                           _keep_recent(self.memories, config.MAX_MEMORIES))

    # ── Read-only queries ──────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self.civilization.position

    def has_memory(self, tag: MemoryTag) -> bool:
        return tag in self.memories

    def has_disaster(self) -> bool:
        """True if the past holds a natural calamity (event or TRAGEDY memory)."""
        if MemoryTag.TRAGEDY in self.memories:
            return True
        return any(e.type in DISASTER_EVENT_TYPES for e in self.events)

    def most_significant_event(self, types=TRIUMPH_EVENT_TYPES) -> Optional[HistoricalEventRecord]:
        """Highest-significance event among *types*, or None.  Ties keep the earliest."""
        best = None
        for evt in self.events:
            if evt.type in types and evt.significance > 0:
                if best is None or evt.significance > best.significance:
                    best = evt
        return best
