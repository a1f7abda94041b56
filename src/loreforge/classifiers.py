# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
classifiers.py — Map a SimulationSnapshot to one discrete category.

Every classifier is the same three steps:

    1. start from a fixed base weight per category
    2. walk its rule table, adding each rule's bonus when the rule holds
    3. hand the adjusted vector to weighted_index() with the caller's stream

The rule tables are plain data: (label, predicate, category, bonus).  The
label is what shows up in explain() output and test failure messages.

Public API
──────────
  myth_weights(snap)      classify_myth(snap, stream)      → MythType
  religion_weights(snap)  classify_religion(snap, stream)  → ReligionArchetype
  hero_weights(snap)      classify_hero(snap, stream)      → HeroArchetype
  name_style_weights(...) classify_name_style(..., stream) → NameStyle
  explain(rules, snap)    labels of the rules that fire for *snap*
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple

from .categories import HeroArchetype, MythType, NameStyle, ReligionArchetype
from .seeding import LoreStream, weighted_index
from .snapshot import (Biome, CivilizationType, MemoryTag, PersonalityStage,
                       PersonalityTraits, SimulationSnapshot)


class Rule(NamedTuple):
    label:     str
    applies:   Callable
    category:  object
    bonus:     float


def _apply(base: dict, rules, subject) -> List[float]:
    """Base vector in enum order, plus every firing rule's bonus."""
    weights = dict(base)
    for rule in rules:
        if rule.applies(subject):
            weights[rule.category] = weights.get(rule.category, 0.0) + rule.bonus
    return [weights.get(member, 0.0) for member in type(next(iter(base)))]


def explain(rules, subject) -> List[str]:
    return [r.label for r in rules if r.applies(subject)]


# ══════════════════════════════════════════════════════════════════════════
# Myth type
# ══════════════════════════════════════════════════════════════════════════

MYTH_BASE = {m: 0.1 for m in MythType}

MYTH_RULES = (
    Rule('triumph memory',       lambda s: s.has_memory(MemoryTag.TRIUMPH),               MythType.HERO,       0.30),
    Rule('trauma memory',        lambda s: s.has_memory(MemoryTag.TRAUMA),                MythType.TRAGEDY,    0.25),
    Rule('betrayal memory',      lambda s: s.has_memory(MemoryTag.BETRAYAL),              MythType.CURSE,      0.20),
    Rule('religion > 7',         lambda s: s.civilization.religion > 7,                   MythType.CREATION,   0.20),
    Rule('aggressiveness > 7',   lambda s: s.personality.aggressiveness > 7,              MythType.WAR,        0.25),
    Rule('culture > 6',          lambda s: s.civilization.culture > 6,                    MythType.LOVE,       0.15),
    Rule('broken stage',         lambda s: s.stage is PersonalityStage.BROKEN,            MythType.REDEMPTION, 0.30),
    Rule('broken stage (curse)', lambda s: s.stage is PersonalityStage.BROKEN,            MythType.CURSE,      0.30),
    Rule('technology > 5',       lambda s: s.civilization.technology > 5,                 MythType.MAGIC,      0.10),
    Rule('past disaster',        lambda s: s.has_disaster(),                              MythType.MONSTER,    0.20),
    Rule('ambition > 8',         lambda s: s.personality.ambition > 8,                    MythType.PROPHECY,   0.15),
)


def myth_weights(snapshot: SimulationSnapshot) -> List[float]:
    return _apply(MYTH_BASE, MYTH_RULES, snapshot)


def classify_myth(snapshot: SimulationSnapshot, stream: LoreStream) -> MythType:
    members = list(MythType)
    return members[weighted_index(myth_weights(snapshot), stream)]


# ══════════════════════════════════════════════════════════════════════════
# Religion archetype
# ══════════════════════════════════════════════════════════════════════════

RELIGION_BASE = {a: 0.05 for a in ReligionArchetype}
RELIGION_BASE[ReligionArchetype.GENERAL] = 0.2


class _ReligionContext(NamedTuple):
    snapshot: SimulationSnapshot
    biome:    Biome


RELIGION_RULES = (
    Rule('technology < 3 or population < 200',
         lambda c: c.snapshot.civilization.technology < 3 or c.snapshot.civilization.population < 200,
         ReligionArchetype.PRIMITIVE, 0.40),
    Rule('technology > 6 and population > 500',
         lambda c: c.snapshot.civilization.technology > 6 and c.snapshot.civilization.population > 500,
         ReligionArchetype.ORGANIZED, 0.30),
    Rule('living biome',
         lambda c: c.biome not in (Biome.OCEAN, Biome.DESERT),
         ReligionArchetype.NATURE, 0.25),
    Rule('culture > 7',
         lambda c: c.snapshot.civilization.culture > 7,
         ReligionArchetype.PHILOSOPHICAL, 0.30),
    Rule('year > 100',
         lambda c: c.snapshot.year > 100,
         ReligionArchetype.ANCIENT, 0.20),
)


def religion_weights(snapshot: SimulationSnapshot, biome: Biome = Biome.NONE) -> List[float]:
    return _apply(RELIGION_BASE, RELIGION_RULES, _ReligionContext(snapshot, biome))


def classify_religion(snapshot: SimulationSnapshot, stream: LoreStream,
                      biome: Biome = Biome.NONE) -> ReligionArchetype:
    members = list(ReligionArchetype)
    return members[weighted_index(religion_weights(snapshot, biome), stream)]


# ══════════════════════════════════════════════════════════════════════════
# Hero archetype
# ══════════════════════════════════════════════════════════════════════════

HERO_BASE = {h: 0.1 for h in HeroArchetype}

# Civilization archetype → the hero archetype it tends to raise
ARCHETYPE_HEROES = {
    CivilizationType.MILITARY:   HeroArchetype.CONQUEROR,
    CivilizationType.CULTURAL:   HeroArchetype.PHILOSOPHER,
    CivilizationType.TRADE:      HeroArchetype.BUILDER,
    CivilizationType.RELIGIOUS:  HeroArchetype.PROPHET,
    CivilizationType.TECHNOLOGY: HeroArchetype.INVENTOR,
}


def _archetype_rule(civ_type: CivilizationType) -> Rule:
    return Rule(f'{civ_type.value} civilization',
                lambda s: s.civilization.archetype is civ_type,
                ARCHETYPE_HEROES[civ_type], 0.30)


HERO_RULES = tuple(_archetype_rule(t) for t in CivilizationType) + (
    Rule('military > 6 or aggressiveness > 7',
         lambda s: s.civilization.military > 6 or s.personality.aggressiveness > 7,
         HeroArchetype.CONQUEROR, 0.25),
    Rule('culture > 6',
         lambda s: s.civilization.culture > 6,
         HeroArchetype.PHILOSOPHER, 0.20),
    Rule('wealth > 6 or stability > 7',
         lambda s: s.civilization.wealth > 6 or s.civilization.stability > 7,
         HeroArchetype.BUILDER, 0.20),
    Rule('religion > 6',
         lambda s: s.civilization.religion > 6,
         HeroArchetype.PROPHET, 0.25),
    Rule('technology > 6',
         lambda s: s.civilization.technology > 6,
         HeroArchetype.INVENTOR, 0.25),
)


def hero_weights(snapshot: SimulationSnapshot) -> List[float]:
    return _apply(HERO_BASE, HERO_RULES, snapshot)


def classify_hero(snapshot: SimulationSnapshot, stream: LoreStream) -> HeroArchetype:
    members = list(HeroArchetype)
    return members[weighted_index(hero_weights(snapshot), stream)]


# ══════════════════════════════════════════════════════════════════════════
# Civilization name style
# ══════════════════════════════════════════════════════════════════════════

NAME_STYLE_BASE = {s: 0.0 for s in NameStyle}
NAME_STYLE_BASE.update({NameStyle.BIOME: 0.45, NameStyle.GENERAL: 0.45,
                        NameStyle.COMPOUND: 0.1})

# Strong bonuses: a personality extreme should nearly always show in the name
_STYLE_BONUS = 4.0


class _StyleContext(NamedTuple):
    personality: PersonalityTraits
    civ_type:    CivilizationType


NAME_STYLE_RULES = (
    Rule('aggressiveness > 7 or hatred > 6',
         lambda c: c.personality.aggressiveness > 7 or c.personality.hatred > 6,
         NameStyle.AGGRESSIVE, _STYLE_BONUS),
    Rule('pride > 8 or ambition > 8',
         lambda c: c.personality.pride > 8 or c.personality.ambition > 8,
         NameStyle.PROUD, _STYLE_BONUS),
    Rule('religious civilization',
         lambda c: c.civ_type is CivilizationType.RELIGIOUS,
         NameStyle.MYSTICAL, _STYLE_BONUS),
    Rule('technology civilization',
         lambda c: c.civ_type is CivilizationType.TECHNOLOGY,
         NameStyle.TECHNICAL, _STYLE_BONUS),
)


def name_style_weights(personality: PersonalityTraits = None,
                       civ_type: CivilizationType = None) -> List[float]:
    ctx = _StyleContext(personality or PersonalityTraits(), civ_type)
    return _apply(NAME_STYLE_BASE, NAME_STYLE_RULES, ctx)


def classify_name_style(personality: PersonalityTraits, civ_type: CivilizationType,
                        stream: LoreStream) -> NameStyle:
    members = list(NameStyle)
    return members[weighted_index(name_style_weights(personality, civ_type), stream)]
