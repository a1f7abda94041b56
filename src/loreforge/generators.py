# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
generators.py — Public entry points: names, titles and myths.

Read-only observer: nothing here writes back into the snapshot it is given.

Every entry point follows the same pipeline

    seed(position, salt) → LoreStream → classify → draw fragments
                         → compose (byte-bounded) → [score]

and builds its own stream, so calls are independent of each other and of
the order they are made in.  Same position + salt + inputs ⇒ same output,
in this process or the next one.

Entry points
────────────
    civilization_name(position, biome, civ_type, personality, salt)
    city_name(position, biome, civ_type, salt)
    region_name(position, biome, salt)
    monument_name(position, hero_names, salt)
    hero_name(snapshot, position, archetype, achievements, salt)
    religion_name(position, biome, belief, hero_names, event_names, salt)
    contextual_religion_name(snapshot, biome, belief, salt)
    event_name(category, significance, involved_names, position, salt)
    myth(snapshot, salt)                                   → Myth

All of them accept ``event_log=`` (a caller-owned list).  When given, one
``[lore] ...`` line is appended per artifact, the same narrative-log
convention the simulation uses for its own layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from . import config
from . import pools as P
from .categories import HeroArchetype, MythType, NameStyle, ReligionArchetype
from .classifiers import (classify_hero, classify_myth, classify_name_style,
                          classify_religion)
from .composer import Shape, compose, myth_shape
from .scoring import MythScores, score_myth
from .seeding import LoreStream, stream_for
from .snapshot import (Biome, CivilizationType, EventCategory, EventType,
                       PersonalityTraits, Position, ReligionBelief,
                       SimulationSnapshot, as_position)


# ══════════════════════════════════════════════════════════════════════════
# Result types
# ══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class GeneratedArtifact:
    kind:     str    # 'civilization', 'city', 'region', 'monument', 'hero', …
    text:     str
    category: str    # branch / classifier category that produced the text
    seed:     int

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Myth:
    name:      str
    content:   str
    myth_type: MythType
    scores:    MythScores
    origin:    Position
    seed:      int

    def __str__(self) -> str:
        return self.name


# ══════════════════════════════════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════════════════════════════════

def _log(event_log: Optional[list], line: str) -> None:
    if event_log is not None:
        event_log.append(f"[lore] {line}")


def _names(values) -> list:
    """Drop None / empty / whitespace-only names, keep order."""
    return [str(v).strip() for v in (values or ()) if v and str(v).strip()]


def _pick_from(names: Sequence[str], stream: LoreStream) -> str:
    return names[stream.next_int(0, len(names))]


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:] if text else text


def _artifact(kind: str, text: str, category: str, stream: LoreStream,
              event_log: Optional[list]) -> GeneratedArtifact:
    art = GeneratedArtifact(kind=kind, text=text, category=category, seed=stream.seed)
    _log(event_log, f"{kind.upper()} NAMED: {text!r} ({category})")
    return art


# ══════════════════════════════════════════════════════════════════════════
# Civilization / city / region / monument
# ══════════════════════════════════════════════════════════════════════════

_STYLE_POOLS = {
    NameStyle.AGGRESSIVE: P.AGGRESSIVE_NAMES,
    NameStyle.PROUD:      P.PROUD_NAMES,
    NameStyle.MYSTICAL:   P.MYSTICAL_NAMES,
    NameStyle.TECHNICAL:  P.TECH_NAMES,
    NameStyle.GENERAL:    P.GENERAL_NAMES,
}


def _compound_adjective(civ_type, personality: PersonalityTraits, stream: LoreStream) -> str:
    if personality.aggressiveness > 7:
        return P.AGGRESSIVE_ADJECTIVES.draw(stream)
    if personality.pride > 8:
        return P.PROUD_ADJECTIVES.draw(stream)
    return P.TYPE_ADJECTIVES.draw(civ_type, stream)


def _compound_noun(biome, civ_type, stream: LoreStream) -> str:
    if stream.chance(0.5):
        return P.BIOME_NOUNS.draw(biome, stream)
    return P.TYPE_NOUNS.draw(civ_type, stream)


def civilization_name(position=None, biome: Biome = Biome.NONE,
                      civ_type: CivilizationType = CivilizationType.MILITARY,
                      personality: PersonalityTraits = None, salt: int = 0,
                      event_log: list = None) -> GeneratedArtifact:
    """Realm name.  Personality extremes and archetype steer the style."""
    personality = personality or PersonalityTraits()
    stream = stream_for(position, salt)
    style = classify_name_style(personality, civ_type, stream)

    if style is NameStyle.COMPOUND:
        text = compose(Shape.ADJECTIVE_NOUN,
                       adjective=_compound_adjective(civ_type, personality, stream),
                       noun=_compound_noun(biome, civ_type, stream))
    elif style is NameStyle.BIOME:
        text = compose(Shape.COMPOUND, head=P.BIOME_NAMES.draw(biome, stream))
    else:
        text = compose(Shape.COMPOUND, head=_STYLE_POOLS[style].draw(stream))
    return _artifact('civilization', text, style.value, stream, event_log)


def city_name(position=None, biome: Biome = Biome.NONE,
              civ_type: CivilizationType = CivilizationType.MILITARY,
              salt: int = 0, event_log: list = None) -> GeneratedArtifact:
    """Archetype city name most of the time, else ``<biome descriptor><suffix>``."""
    stream = stream_for(position, salt)
    if stream.chance(config.CITY_ARCHETYPE_CHANCE):
        text = compose(Shape.COMPOUND, head=P.CITY_NAMES.draw(civ_type, stream))
        category = civ_type.value if isinstance(civ_type, CivilizationType) else 'archetype'
    else:
        text = compose(Shape.COMPOUND,
                       head=P.BIOME_DESCRIPTORS.draw(biome, stream),
                       tail=P.CITY_SUFFIXES.draw(stream))
        category = 'biome'
    return _artifact('city', text, category, stream, event_log)


def region_name(position=None, biome: Biome = Biome.NONE, salt: int = 0,
                event_log: list = None) -> GeneratedArtifact:
    stream = stream_for(position, salt)
    adjective = P.LANDMARK_ADJECTIVES.draw(stream)
    if biome in P.BIOME_PLACE_TYPES.keys() and stream.chance(config.REGION_BIOME_CHANCE):
        place, category = P.BIOME_PLACE_TYPES.draw(biome, stream), 'biome'
    else:
        place, category = P.PLACE_TYPES.draw(stream), 'general'
    text = compose(Shape.THE_ADJECTIVE_NOUN, adjective=adjective, noun=place)
    return _artifact('region', text, category, stream, event_log)


def monument_name(position=None, hero_names: Sequence[str] = (), salt: int = 0,
                  event_log: list = None) -> GeneratedArtifact:
    stream = stream_for(position, salt)
    monument = P.MONUMENT_TYPES.draw(stream)
    heroes = _names(hero_names)
    if heroes and stream.chance(config.MONUMENT_HERO_CHANCE):
        text = compose(Shape.NOUN_OF_SUBJECT, noun=monument,
                       subject=_pick_from(heroes, stream))
        category = 'hero'
    else:
        text = compose(Shape.ADJECTIVE_NOUN, adjective=P.LANDMARK_ADJECTIVES.draw(stream),
                       noun=monument)
        category = 'adjective'
    return _artifact('monument', text, category, stream, event_log)


# ══════════════════════════════════════════════════════════════════════════
# Heroes
# ══════════════════════════════════════════════════════════════════════════

def hero_name(snapshot: SimulationSnapshot = None, position=None,
              archetype: HeroArchetype = None, achievements: int = 0,
              salt: int = 0, event_log: list = None) -> GeneratedArtifact:
    """``<name> <title>`` for a heroic leader.

    *archetype* skips the classifier when the caller already knows it.
    *achievements* is folded into the seed, so the same leader re-titled
    after a new deed gets a new name.
    """
    snapshot = snapshot or SimulationSnapshot()
    if position is None:
        position = snapshot.position
    try:
        achievements = int(achievements)
    except (TypeError, ValueError):
        achievements = 0
    stream = stream_for(position, salt ^ (achievements << 16))
    if not isinstance(archetype, HeroArchetype):
        archetype = classify_hero(snapshot, stream)

    given = P.HERO_NAMES.draw(archetype, stream)
    title = P.HERO_TITLES.draw(archetype, stream)
    traits = snapshot.personality
    if traits.aggressiveness > 8 and archetype is HeroArchetype.CONQUEROR:
        title = P.EXTREME_TITLES.draw(stream)
    elif traits.pride > 8:
        title = P.PRIDEFUL_TITLES.draw(stream)

    text = compose(Shape.PERSON_TITLE, name=given, title=title)
    return _artifact('hero', text, archetype.value, stream, event_log)


# ══════════════════════════════════════════════════════════════════════════
# Historical events
# ══════════════════════════════════════════════════════════════════════════

_WAR_QUALIFIERS = {
    EventCategory.MILITARY:  'Military',
    EventCategory.CONFLICT:  '',
    EventCategory.COALITION: 'Coalition',
    EventCategory.HOLY_WAR:  'Holy',
}


def _event_noun(category, stream: LoreStream) -> str:
    if category is EventCategory.DISASTER:
        return P.DISASTER_NAMES.draw(stream)
    if category is EventCategory.GOLDEN:
        return P.GOLDEN_AGE_NAMES.draw(stream)
    if category in _WAR_QUALIFIERS:
        return compose(Shape.ADJECTIVE_NOUN, adjective=_WAR_QUALIFIERS[category],
                       noun=P.WAR_NAMES.draw(stream))
    return P.EVENT_FIXED_NOUNS.get(category, P.EVENT_DEFAULT_NOUN)


def _civ_epithet(name: str) -> str:
    """'The Iron Empire of Bloodfang' → 'Bloodfang'; names without ' of ' pass through."""
    head, sep, tail = name.partition(' of ')
    return tail if sep and tail else name


def event_name(category: EventCategory = EventCategory.OTHER, significance: float = 0,
               involved_names: Sequence[str] = (), position=None, salt: int = 0,
               event_log: list = None) -> GeneratedArtifact:
    """``<tier prefix> <category noun>[ of <civilization>]``.

    Significance above 8 earns the grandest prefixes, above 5 the
    legendary ones, anything else the lesser tier.
    """
    stream = stream_for(position, salt)
    try:
        significance = float(significance)
    except (TypeError, ValueError):
        significance = 0.0
    if significance > 8:
        prefix_pool = P.EVENT_PREFIX_MAJOR
    elif significance > 5:
        prefix_pool = P.EVENT_PREFIX_NOTABLE
    else:
        prefix_pool = P.EVENT_PREFIX_MINOR
    prefix = prefix_pool.draw(stream)
    noun = _event_noun(category, stream)

    involved = _names(involved_names)
    if involved:
        noun = compose(Shape.NOUN_OF_SUBJECT, noun=noun,
                       subject=_civ_epithet(_pick_from(involved, stream)))

    text = compose(Shape.ADJECTIVE_NOUN, adjective=prefix, noun=noun)
    label = category.value if isinstance(category, EventCategory) else 'other'
    art = GeneratedArtifact(kind='event', text=text, category=label, seed=stream.seed)
    _log(event_log, f"EVENT TITLED: {text!r} ({label}, significance={significance:g})")
    return art


# ══════════════════════════════════════════════════════════════════════════
# Religions
# ══════════════════════════════════════════════════════════════════════════

def _belief_name(belief) -> str:
    return P.BELIEF_NAMES.get(belief, P.BELIEF_DEFAULT_NAME)


def _two_distinct(pool: P.LexicalPool, stream: LoreStream):
    """Two different entries from *pool* in a fixed number of draws."""
    n = len(pool)
    if n < 2:
        return pool.pick(0), pool.pick(0)
    i = stream.next_int(0, n)
    j = (i + 1 + stream.next_int(0, n - 1)) % n
    return pool.pick(i), pool.pick(j)


def religion_name(position=None, biome: Biome = Biome.NONE,
                  belief: ReligionBelief = ReligionBelief.NONE,
                  hero_names: Sequence[str] = (), event_names: Sequence[str] = (),
                  salt: int = 0, event_log: list = None) -> GeneratedArtifact:
    """Religion name from one of six branches.

    With no heroes or events known the split is prophet 30 %, phenomenon
    20 %, belief 20 %, biome 15 %, mystic cult 15 %.  Known heroes supply
    the prophet and known events open a "Church of <event>" branch, which
    narrows the other bands.
    """
    stream = stream_for(position, salt)
    heroes = _names(hero_names)
    events = _names(event_names)
    contextual = bool(heroes or events)
    roll = stream.next_float()

    if contextual:
        bands = (('prophet', 0.25, bool(heroes)), ('phenomenon', 0.40, True),
                 ('event', 0.55, bool(events)), ('belief', 0.70, True),
                 ('biome', 0.85, True))
    else:
        bands = (('prophet', 0.30, True), ('phenomenon', 0.50, True),
                 ('belief', 0.70, True), ('biome', 0.85, True))
    branch = 'cult'
    for label, upper, allowed in bands:
        if roll < upper and allowed:
            branch = label
            break

    if branch == 'prophet':
        prophet = _pick_from(heroes, stream) if heroes else P.PROPHET_NAMES.draw(stream)
        text = compose(Shape.COMPOUND, head=prophet, tail=P.PROPHET_SUFFIXES.draw(stream))
    elif branch == 'phenomenon':
        phenomenon = P.NATURAL_PHENOMENA.draw(stream)
        term = P.RELIGIOUS_TERMS.draw(stream)
        if stream.chance(0.5):
            text = compose(Shape.ORDER_OF, subject=phenomenon)
        else:
            text = compose(Shape.THE_ADJECTIVE_NOUN, adjective=term, noun=phenomenon)
    elif branch == 'event':
        event = _pick_from(events, stream)
        prefix = P.RELIGION_PREFIXES.draw(stream) + '-' if stream.chance(0.3) else ''
        text = compose(Shape.NOUN_OF_SUBJECT, noun=f"{prefix}Church", subject=event)
    elif branch == 'belief':
        text = compose(Shape.THE_ADJECTIVE_NOUN, adjective=P.RELIGIOUS_TERMS.draw(stream),
                       noun=_belief_name(belief))
    elif branch == 'biome':
        adjective = P.BIOME_RELIGIOUS_ADJECTIVES.draw(biome, stream)
        term = P.RELIGIOUS_TERMS.draw(stream)
        suffix = P.RELIGION_SUFFIXES.draw(stream)
        text = compose(Shape.PREFIXED_COMPOUND, prefix=adjective, head=term, tail=suffix)
    else:
        first, second = _two_distinct(P.RELIGIOUS_TERMS, stream)
        text = compose(Shape.NOUN_OF_SUBJECT, noun='Cult', subject=f"{first} {second}")

    return _artifact('religion', text, branch, stream, event_log)


def _primitive_religion(snap, biome, belief, stream) -> str:
    spirit = P.BIOME_SPIRITS.draw(biome, stream)
    term = P.PRIMITIVE_TERMS.draw(stream)
    action = P.PRIMITIVE_ACTIONS.draw(stream)
    if stream.chance(0.5):
        return compose(Shape.ADJECTIVE_NOUN, adjective=spirit, noun=term)
    return compose(Shape.THE_ADJECTIVE_NOUN, adjective=action, noun=term)


def _organized_religion(snap, biome, belief, stream) -> str:
    org = P.ORGANIZATION_TYPES.draw(stream)
    term = P.FORMAL_TERMS.draw(stream)
    if stream.chance(0.4):
        return compose(Shape.THE_ADJECTIVE_NOUN, adjective=term, noun=org)
    return compose(Shape.NOUN_OF_SUBJECT, noun=org, subject=f"{term} {_belief_name(belief)}")


def _nature_religion(snap, biome, belief, stream) -> str:
    element = P.BIOME_ELEMENTS.draw(biome, stream)
    term = P.NATURE_TERMS.draw(stream)
    if stream.chance(0.6):
        return compose(Shape.ADJECTIVE_NOUN, adjective=_capitalize(element), noun=term)
    return compose(Shape.NOUN_OF_SUBJECT, noun=f"The {term}", subject=element)


def _philosophical_religion(snap, biome, belief, stream) -> str:
    term = P.PHILOSOPHICAL_TERMS.draw(stream)
    school = P.SCHOOL_TYPES.draw(stream)
    if snap.civilization.technology > 8:
        return compose(Shape.NOUN_OF_SUBJECT, noun=f"The {school}", subject=term)
    return compose(Shape.NOUN_OF_SUBJECT, noun='Seekers', subject=term)


def _ancient_religion(snap, biome, belief, stream) -> str:
    prefix = P.ANCIENT_PREFIXES.draw(stream)
    term = P.ANCIENT_TERMS.draw(stream)
    adjective = P.BIOME_RELIGIOUS_ADJECTIVES.draw(biome, stream)
    if stream.chance(0.5):
        return compose(Shape.THE_ADJECTIVE_NOUN, adjective=prefix, noun=term)
    return compose(Shape.PREFIX_SUBJECT_SUFFIX, prefix=prefix, subject=adjective, suffix=term)


def _general_religion(snap, biome, belief, stream) -> str:
    phenomenon = P.NATURAL_PHENOMENA.draw(stream)
    term = P.RELIGIOUS_TERMS.draw(stream)
    return compose(Shape.THE_ADJECTIVE_NOUN, adjective=term, noun=phenomenon)


_ARCHETYPE_BUILDERS = {
    ReligionArchetype.PRIMITIVE:     _primitive_religion,
    ReligionArchetype.ORGANIZED:     _organized_religion,
    ReligionArchetype.NATURE:        _nature_religion,
    ReligionArchetype.PHILOSOPHICAL: _philosophical_religion,
    ReligionArchetype.ANCIENT:       _ancient_religion,
    ReligionArchetype.GENERAL:       _general_religion,
}


def contextual_religion_name(snapshot: SimulationSnapshot = None,
                             biome: Biome = Biome.NONE,
                             belief: ReligionBelief = ReligionBelief.NONE,
                             salt: int = 0, event_log: list = None) -> GeneratedArtifact:
    """Religion name shaped by the founding civilization's development."""
    snapshot = snapshot or SimulationSnapshot()
    stream = stream_for(snapshot.position, salt)
    archetype = classify_religion(snapshot, stream, biome)
    text = _ARCHETYPE_BUILDERS[archetype](snapshot, biome, belief, stream)
    return _artifact('religion', text, archetype.value, stream, event_log)


# ══════════════════════════════════════════════════════════════════════════
# Myths
# ══════════════════════════════════════════════════════════════════════════

def _myth_hero(stream: LoreStream) -> str:
    return compose(Shape.COMPOUND, head=P.MYTH_HERO_PREFIXES.draw(stream),
                   tail=P.MYTH_HERO_SUFFIXES.draw(stream))


def _myth_fragments(myth_type: MythType, snap: SimulationSnapshot, biome,
                    stream: LoreStream) -> dict:
    """Fill every slot of the type's narrative shape, in template order."""
    civ = snap.civilization
    frags = {'civ': civ.name}
    for slot in myth_shape(myth_type).fields:
        if slot in frags:
            continue
        if slot == 'creator':
            frags[slot] = P.CREATORS.draw(biome, stream)
        elif slot == 'purpose':
            frags[slot] = P.PURPOSES.draw(civ.archetype, stream)
        elif slot == 'monster':
            frags[slot] = P.MONSTERS.draw(biome, stream)
        elif slot == 'hero':
            frags[slot] = _myth_hero(stream)
        elif slot == 'battle' and myth_type is MythType.WAR:
            fought = snap.most_significant_event((EventType.MILITARY,))
            frags[slot] = fought.title if fought and fought.title else \
                P.myth_slot(myth_type, slot).draw(stream)
        else:
            frags[slot] = P.myth_slot(myth_type, slot).draw(stream)
    return frags


def myth(snapshot: SimulationSnapshot = None, salt: int = 0,
         biome: Biome = Biome.NONE, event_log: list = None) -> Myth:
    """Classify, title, narrate and score one myth for *snapshot*'s civilization.

    *biome* only colours the creator and monster slots of the narrative.
    """
    snapshot = snapshot or SimulationSnapshot()
    origin = as_position(snapshot.position)
    stream = stream_for(origin, salt)
    myth_type = classify_myth(snapshot, stream)

    title = P.MYTH_TITLES.draw(myth_type, stream)
    civ_name = snapshot.civilization.name
    if stream.chance(config.MYTH_TITLE_CIV_CHANCE) and civ_name:
        title = compose(Shape.NOUN_OF_SUBJECT, noun=title, subject=civ_name)
    else:
        title = compose(Shape.COMPOUND, head=title)

    content = compose(myth_shape(myth_type), max_bytes=config.MAX_TEXT_BYTES,
                      **_myth_fragments(myth_type, snapshot, biome, stream))
    scores = score_myth(myth_type, snapshot)

    result = Myth(name=title, content=content, myth_type=myth_type,
                  scores=scores, origin=origin, seed=stream.seed)
    _log(event_log,
         f"MYTH of {civ_name}: {title!r} ({myth_type.value}, "
         f"believability={scores.believability:.2f}, spread={scores.spread:.2f})")
    return result
