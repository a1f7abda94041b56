"""
test_generators.py — pytest suite for loreforge.generators
===========================================================
Covers: determinism of every entry point, branch categories for cities /
regions / monuments / religions, hero titles, event tiers, myth assembly
and scoring, UTF-8 bounds, and the [lore] narrative-log lines.
"""

import pytest

from loreforge import config
from loreforge import generators as gen
from loreforge import pools as P
from loreforge.categories import HeroArchetype, MythType, NameStyle, ReligionArchetype
from loreforge.scoring import score_myth
from loreforge.snapshot import (Biome, CivilizationAttributes, CivilizationType,
                                EventCategory, EventType, HistoricalEventRecord,
                                MemoryTag, PersonalityStage, PersonalityTraits,
                                ReligionBelief, SimulationSnapshot)

POS = (10.0, 0.0, 5.0)


def _snap(name='Aeondor', personality=None, events=(), memories=(),
          stage=PersonalityStage.DEVELOPING, **attrs):
    attrs.setdefault('position', POS)
    return SimulationSnapshot(
        civilization=CivilizationAttributes(name=name, **attrs),
        personality=personality or PersonalityTraits(),
        stage=stage, events=tuple(events), memories=tuple(memories))


def _nbytes(text: str) -> int:
    return len(text.encode('utf-8'))


def _starts_with_any(text, pool):
    return any(text.startswith(entry + ' ') for entry in pool)


_SIEGE = HistoricalEventRecord(year=40, type=EventType.MILITARY, significance=9,
                               title='The Siege of Ash')


# ─────────────────────────────────────────────────────
# Determinism
# ─────────────────────────────────────────────────────

_CALLS = {
    'civilization': lambda s: gen.civilization_name(POS, Biome.FOREST, CivilizationType.TRADE,
                                                    PersonalityTraits(), s),
    'city':         lambda s: gen.city_name(POS, Biome.TUNDRA, CivilizationType.MILITARY, s),
    'region':       lambda s: gen.region_name(POS, Biome.COAST, s),
    'monument':     lambda s: gen.monument_name(POS, ['Aldric'], s),
    'hero':         lambda s: gen.hero_name(_snap(), salt=s),
    'event':        lambda s: gen.event_name(EventCategory.GOLDEN, 7, ['Aeondor'], POS, s),
    'religion':     lambda s: gen.religion_name(POS, Biome.SWAMP, ReligionBelief.ANIMISM,
                                                ['Aldric'], ['The Long Night'], s),
    'contextual':   lambda s: gen.contextual_religion_name(_snap(), Biome.FOREST,
                                                           ReligionBelief.POLYTHEISM, s),
    'myth':         lambda s: gen.myth(_snap(), salt=s),
}


class TestDeterminism:
    @pytest.mark.parametrize("kind", list(_CALLS))
    def test_same_inputs_same_output(self, kind):
        for salt in (0, 1, 77, 123456):
            assert _CALLS[kind](salt) == _CALLS[kind](salt)

    @pytest.mark.parametrize("kind", list(_CALLS))
    def test_salts_vary_output(self, kind):
        texts = {str(_CALLS[kind](salt)) for salt in range(30)}
        assert len(texts) > 1

    def test_call_order_does_not_matter(self):
        first = gen.city_name(POS, Biome.DESERT, CivilizationType.TRADE, 5)
        for salt in range(10):
            gen.hero_name(_snap(), salt=salt)
            gen.myth(_snap(), salt=salt)
        assert gen.city_name(POS, Biome.DESERT, CivilizationType.TRADE, 5) == first

    def test_seed_is_reported(self):
        art = gen.region_name(POS, Biome.PLAINS, 3)
        again = gen.region_name(POS, Biome.PLAINS, 3)
        assert art.seed == again.seed
        assert 0 <= art.seed < 2 ** 32

    def test_snapshot_is_left_untouched(self):
        snap = _snap(events=[_SIEGE], memories=[MemoryTag.TRIUMPH])
        before = repr(snap)
        gen.myth(snap, salt=2)
        gen.hero_name(snap, salt=2)
        gen.contextual_religion_name(snap, Biome.FOREST, ReligionBelief.NONE, 2)
        assert repr(snap) == before


# ─────────────────────────────────────────────────────
# Places
# ─────────────────────────────────────────────────────

class TestCivilizationName:
    def test_category_is_a_name_style(self):
        styles = {s.value for s in NameStyle}
        for salt in range(50):
            art = gen.civilization_name(POS, Biome.FOREST, CivilizationType.CULTURAL,
                                        None, salt)
            assert art.kind == 'civilization'
            assert art.category in styles
            assert art.text

    def test_aggressive_personality_shows_in_names(self):
        fierce = PersonalityTraits(aggressiveness=9)
        arts = [gen.civilization_name(POS, Biome.MOUNTAINS, CivilizationType.MILITARY,
                                      fierce, salt) for salt in range(100)]
        aggressive = [a for a in arts if a.category == NameStyle.AGGRESSIVE.value]
        assert len(aggressive) >= 60
        for art in aggressive:
            assert art.text in P.AGGRESSIVE_NAMES

    def test_compound_names_are_two_words(self):
        found = [a for a in (gen.civilization_name(POS, Biome.OCEAN, CivilizationType.TRADE,
                                                   None, s) for s in range(300))
                 if a.category == NameStyle.COMPOUND.value]
        assert found
        for art in found:
            assert len(art.text.split(' ')) >= 2


class TestCityName:
    def test_archetype_and_biome_branches_both_occur(self):
        cats = {gen.city_name(POS, Biome.TUNDRA, CivilizationType.MILITARY, s).category
                for s in range(200)}
        assert cats == {'military', 'biome'}

    def test_archetype_branch_uses_archetype_pool(self):
        for salt in range(100):
            art = gen.city_name(POS, Biome.TUNDRA, CivilizationType.RELIGIOUS, salt)
            if art.category == 'religious':
                assert art.text in P.CITY_NAMES.get(CivilizationType.RELIGIOUS)

    def test_biome_branch_ends_with_suffix(self):
        for salt in range(100):
            art = gen.city_name(POS, Biome.DESERT, CivilizationType.TRADE, salt)
            if art.category == 'biome':
                assert any(art.text.endswith(sfx) for sfx in P.CITY_SUFFIXES)


class TestRegionName:
    def test_shape_and_categories(self):
        cats = set()
        for salt in range(200):
            art = gen.region_name(POS, Biome.SWAMP, salt)
            assert art.text.startswith('The ')
            cats.add(art.category)
        assert cats == {'biome', 'general'}

    def test_no_biome_always_general(self):
        for salt in range(50):
            assert gen.region_name(POS, Biome.NONE, salt).category == 'general'


class TestMonumentName:
    def test_without_heroes_always_adjective(self):
        for salt in range(50):
            assert gen.monument_name(POS, [], salt).category == 'adjective'

    def test_blank_hero_names_are_ignored(self):
        for salt in range(50):
            assert gen.monument_name(POS, ['', '   ', None], salt).category == 'adjective'

    def test_hero_branch_names_the_hero(self):
        arts = [gen.monument_name(POS, ['Aldric the Bold'], s) for s in range(100)]
        heroic = [a for a in arts if a.category == 'hero']
        assert heroic and len(heroic) < len(arts)
        for art in heroic:
            assert art.text.endswith(' of Aldric the Bold')


# ─────────────────────────────────────────────────────
# Heroes
# ─────────────────────────────────────────────────────

class TestHeroName:
    def test_name_and_title(self):
        art = gen.hero_name(_snap(), archetype=HeroArchetype.INVENTOR, salt=4)
        assert art.category == 'inventor'
        assert _starts_with_any(art.text, P.HERO_NAMES.get(HeroArchetype.INVENTOR))
        assert ' the ' in art.text

    def test_extreme_aggression_conqueror_title(self):
        fierce = _snap(personality=PersonalityTraits(aggressiveness=9.5))
        for salt in range(30):
            art = gen.hero_name(fierce, archetype=HeroArchetype.CONQUEROR, salt=salt)
            assert any(art.text.endswith(' ' + t) for t in P.EXTREME_TITLES)

    def test_prideful_title(self):
        vain = _snap(personality=PersonalityTraits(pride=9, aggressiveness=9))
        for salt in range(30):
            art = gen.hero_name(vain, archetype=HeroArchetype.PHILOSOPHER, salt=salt)
            assert any(art.text.endswith(' ' + t) for t in P.PRIDEFUL_TITLES)

    def test_achievements_change_the_seed(self):
        snap = _snap()
        assert (gen.hero_name(snap, salt=1, achievements=0).seed
                != gen.hero_name(snap, salt=1, achievements=3).seed)

    def test_position_defaults_to_civilization(self):
        snap = _snap()
        assert gen.hero_name(snap, salt=9) == gen.hero_name(snap, position=POS, salt=9)

    def test_classified_archetype_is_valid(self):
        values = {h.value for h in HeroArchetype}
        for salt in range(40):
            assert gen.hero_name(_snap(), salt=salt).category in values


# ─────────────────────────────────────────────────────
# Events
# ─────────────────────────────────────────────────────

class TestEventName:
    @pytest.mark.parametrize("significance,pool", [
        (9, P.EVENT_PREFIX_MAJOR), (8.5, P.EVENT_PREFIX_MAJOR),
        (8, P.EVENT_PREFIX_NOTABLE), (6, P.EVENT_PREFIX_NOTABLE),
        (5, P.EVENT_PREFIX_MINOR), (0, P.EVENT_PREFIX_MINOR),
    ])
    def test_significance_tiers(self, significance, pool):
        for salt in range(20):
            art = gen.event_name(EventCategory.DISASTER, significance, (), POS, salt)
            assert _starts_with_any(art.text, pool), art.text

    def test_non_numeric_significance_is_minor(self):
        art = gen.event_name(EventCategory.GOLDEN, 'huge', (), POS, 1)
        assert _starts_with_any(art.text, P.EVENT_PREFIX_MINOR)

    def test_involved_civilization_epithet(self):
        art = gen.event_name(EventCategory.CONFLICT, 6, ['The Iron Empire of Bloodfang'],
                             POS, 2)
        assert art.text.endswith(' of Bloodfang')

    def test_plain_involved_name_used_whole(self):
        art = gen.event_name(EventCategory.DECLINE, 3, ['Aeondor'], POS, 2)
        assert art.text.endswith('Decline of Aeondor')

    @pytest.mark.parametrize("category,qualifier", [
        (EventCategory.MILITARY, 'Military '), (EventCategory.COALITION, 'Coalition '),
        (EventCategory.HOLY_WAR, 'Holy '),
    ])
    def test_war_qualifiers(self, category, qualifier):
        art = gen.event_name(category, 9, (), POS, 3)
        assert qualifier in art.text
        assert any(art.text.endswith(qualifier + w) for w in P.WAR_NAMES)

    def test_fixed_nouns(self):
        art = gen.event_name(EventCategory.SPIRITUAL, 2, (), POS, 0)
        assert art.text.endswith(' Awakening')
        assert gen.event_name(EventCategory.OTHER, 2, (), POS, 0).text.endswith(' Event')

    def test_category_label(self):
        assert gen.event_name(EventCategory.HOLY_WAR, 1, (), POS, 0).category == 'holy_war'


# ─────────────────────────────────────────────────────
# Religions
# ─────────────────────────────────────────────────────

class TestReligionName:
    def _many(self, heroes=(), events=(), belief=ReligionBelief.NONE, n=300):
        return [gen.religion_name(POS, Biome.FOREST, belief, heroes, events, s)
                for s in range(n)]

    def test_plain_branches(self):
        cats = {a.category for a in self._many()}
        assert cats == {'prophet', 'phenomenon', 'belief', 'biome', 'cult'}

    def test_event_branch_only_with_events(self):
        arts = self._many(events=['The Long Night'])
        church = [a for a in arts if a.category == 'event']
        assert church
        for art in church:
            assert art.text.endswith('Church of The Long Night')

    def test_known_heroes_found_prophet_religions(self):
        arts = self._many(heroes=['Velra'])
        prophets = [a for a in arts if a.category == 'prophet']
        assert prophets
        for art in prophets:
            assert art.text in ('Velraism', 'Velraites')

    def test_cult_names_two_different_terms(self):
        cults = [a for a in self._many(n=600) if a.category == 'cult']
        assert cults
        for art in cults:
            assert art.text.startswith('Cult of ')
            first, second = art.text[len('Cult of '):].split(' ')
            assert first != second
            assert first in P.RELIGIOUS_TERMS and second in P.RELIGIOUS_TERMS

    def test_belief_branch_names_the_belief(self):
        arts = self._many(belief=ReligionBelief.MONOTHEISM)
        beliefs = [a for a in arts if a.category == 'belief']
        assert beliefs
        for art in beliefs:
            assert art.text.endswith(' Unity')

    def test_unknown_belief_is_a_mystery(self):
        beliefs = [a for a in self._many() if a.category == 'belief']
        for art in beliefs:
            assert art.text.endswith(' Mystery')


class TestContextualReligionName:
    def test_category_is_archetype(self):
        values = {a.value for a in ReligionArchetype}
        for salt in range(60):
            art = gen.contextual_religion_name(_snap(), Biome.PLAINS, ReligionBelief.NONE, salt)
            assert art.category in values
            assert art.text

    def test_advanced_philosophers_found_schools(self):
        snap = _snap(culture=9, technology=9)
        found = [a for a in (gen.contextual_religion_name(snap, Biome.OCEAN,
                                                          ReligionBelief.NONE, s)
                             for s in range(200))
                 if a.category == 'philosophical']
        assert found
        for art in found:
            assert art.text.startswith('The ') and ' of ' in art.text

    def test_plain_philosophers_are_seekers(self):
        snap = _snap(culture=9, technology=5)
        found = [a for a in (gen.contextual_religion_name(snap, Biome.OCEAN,
                                                          ReligionBelief.NONE, s)
                             for s in range(200))
                 if a.category == 'philosophical']
        assert found
        for art in found:
            assert art.text.startswith('Seekers of ')


# ─────────────────────────────────────────────────────
# Myths
# ─────────────────────────────────────────────────────

class TestMyth:
    def test_fields(self):
        snap = _snap()
        m = gen.myth(snap, salt=3)
        assert isinstance(m.myth_type, MythType)
        assert m.origin == snap.position
        assert m.name and m.content
        assert 'Aeondor' in m.content
        assert m.scores == score_myth(m.myth_type, snap)

    def test_title_from_type_pool(self):
        for salt in range(40):
            m = gen.myth(_snap(), salt=salt)
            head = m.name.split(' of Aeondor')[0]
            assert head in P.MYTH_TITLES.get(m.myth_type)

    def test_war_myth_remembers_the_real_battle(self):
        snap = _snap(personality=PersonalityTraits(aggressiveness=9), events=[_SIEGE])
        wars = [m for m in (gen.myth(snap, salt=s) for s in range(150))
                if m.myth_type is MythType.WAR]
        assert wars
        for m in wars:
            assert 'The Siege of Ash' in m.content

    def test_broken_betrayed_civilization_tells_curses(self):
        snap = _snap(stage=PersonalityStage.BROKEN, memories=[MemoryTag.BETRAYAL])
        types = [gen.myth(snap, salt=s).myth_type for s in range(200)]
        assert types.count(MythType.CURSE) > types.count(MythType.LOVE)

    def test_default_snapshot(self):
        m = gen.myth()
        assert m.content and m.origin == (0.0, 0.0, 0.0)


# ─────────────────────────────────────────────────────
# UTF-8 bounds
# ─────────────────────────────────────────────────────

class TestBounds:
    WIDE = '城' * 60 + '😀' * 10

    def test_myth_bounds_with_wide_civilization_name(self):
        snap = _snap(name=self.WIDE)
        for salt in range(40):
            m = gen.myth(snap, salt=salt)
            assert _nbytes(m.name) <= config.MAX_NAME_BYTES
            assert _nbytes(m.content) <= config.MAX_TEXT_BYTES

    def test_names_bounded_with_wide_inputs(self):
        for salt in range(40):
            assert _nbytes(gen.monument_name(POS, [self.WIDE], salt).text) <= config.MAX_NAME_BYTES
            assert _nbytes(gen.event_name(EventCategory.GOLDEN, 9, [self.WIDE], POS,
                                          salt).text) <= config.MAX_NAME_BYTES
            assert _nbytes(gen.religion_name(POS, Biome.COAST, ReligionBelief.NONE,
                                             [self.WIDE], [self.WIDE],
                                             salt).text) <= config.MAX_NAME_BYTES

    def test_runtime_bound_override(self, monkeypatch):
        monkeypatch.setattr(config, 'MAX_NAME_BYTES', 16)
        for salt in range(20):
            art = gen.event_name(EventCategory.GOLDEN, 9, ['Aeondor'], POS, salt)
            assert _nbytes(art.text) <= 16


# ─────────────────────────────────────────────────────
# Narrative log
# ─────────────────────────────────────────────────────

class TestEventLog:
    def test_one_line_per_artifact(self):
        log = []
        snap = _snap()
        gen.civilization_name(POS, Biome.FOREST, event_log=log)
        gen.city_name(POS, Biome.FOREST, event_log=log)
        gen.hero_name(snap, event_log=log)
        gen.event_name(EventCategory.GOLDEN, 6, ['Aeondor'], POS, event_log=log)
        gen.myth(snap, event_log=log)
        assert len(log) == 5
        assert all(line.startswith('[lore] ') for line in log)
        assert 'CITY NAMED' in log[1]
        assert 'EVENT TITLED' in log[3]
        assert log[4].startswith('[lore] MYTH of Aeondor')

    def test_no_log_by_default(self):
        art = gen.region_name(POS, Biome.PLAINS, 1)
        assert art.kind == 'region'


# ─────────────────────────────────────────────────────
# Unusable positions
# ─────────────────────────────────────────────────────

class TestUnusablePositions:
    @pytest.mark.parametrize("position,expected", [
        (('north', 0, 7), (0.0, 0.0, 7.0)),
        ((None, float('nan'), float('inf')), (0.0, 0.0, 0.0)),
        ((2,), (2.0, 0.0, 0.0)),
        (5, (0.0, 0.0, 0.0)),
        (object(), (0.0, 0.0, 0.0)),
    ])
    def test_snapshot_coerces_position(self, position, expected):
        snap = SimulationSnapshot(civilization=CivilizationAttributes(position=position))
        assert snap.position == expected

    def test_non_numeric_axis_matches_seed_behaviour(self):
        snap = _snap(position=('north', 0, 0))
        assert gen.myth(snap, salt=4) == gen.myth(_snap(position=(0, 0, 0)), salt=4)
        assert gen.city_name(('north', 0, 0), salt=4) == gen.city_name((0, 0, 0), salt=4)

    def test_non_sequence_position_is_origin(self):
        assert gen.region_name(5, Biome.FOREST, 2) == gen.region_name((0, 0, 0), Biome.FOREST, 2)

    @pytest.mark.parametrize("position", [
        (1e308, -1e308, 1e307), (1.7e308, 1.7e308, 1.7e308),
    ])
    def test_extreme_positions_still_generate(self, position):
        snap = _snap(position=position)
        m = gen.myth(snap, salt=1)
        assert m.content and m.origin == position
        assert gen.hero_name(snap, salt=1).text
        assert gen.city_name(position, Biome.COAST, salt=1).text
        assert gen.event_name(EventCategory.DISCOVERY, 9, ['Aeondor'], position, 1).text
