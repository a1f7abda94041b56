# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
pools.py — Closed, indexed string pools every generator draws fragments from.

A LexicalPool is an immutable tuple plus a fallback string:

    pool.at(i)        entry i, or the fallback when i is out of range
    pool.pick(k)      entries[k mod len]  (any int k, negative included)
    pool.draw(stream) pick() with one raw draw from the stream

A PoolTable partitions pools by a discriminant (biome, civilization
archetype, hero archetype, myth type, …) and falls back to a default pool
for any key it does not map.  Nothing here is ever mutated after import, so
the pools are safe to read from any number of threads.

Every pool registers itself in ALL_POOLS so tests can walk all of them.
The registry and the keyed tables are frozen at the bottom of the module.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from . import config
from .categories import HeroArchetype, MythType
from .snapshot import Biome, CivilizationType, EventCategory, ReligionBelief


class LexicalPool:
    __slots__ = ('name', 'entries', 'fallback')

    def __init__(self, name: str, entries: Iterable[str], fallback: str = None) -> None:
        entries = tuple(entries)
        if len(entries) > config.MAX_POOL_SIZE:
            raise ValueError(f"pool {name!r} has {len(entries)} entries "
                             f"(max {config.MAX_POOL_SIZE})")
        if fallback is None:
            fallback = entries[0] if entries else ''
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'entries', entries)
        object.__setattr__(self, 'fallback', fallback)

    def __setattr__(self, attr, value) -> None:
        raise AttributeError(f"{type(self).__name__} {self.name!r} is read-only")

    def __delattr__(self, attr) -> None:
        raise AttributeError(f"{type(self).__name__} {self.name!r} is read-only")

    def __repr__(self) -> str:
        return f"LexicalPool({self.name!r}, n={len(self.entries)})"

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __contains__(self, item) -> bool:
        return item in self.entries

    def at(self, index: int) -> str:
        """Entry at *index*; the fallback for any index outside [0, len)."""
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return self.fallback

    def pick(self, index: int) -> str:
        """``entries[index mod len]``; the fallback when the pool is empty."""
        if not self.entries:
            return self.fallback
        return self.entries[index % len(self.entries)]

    def draw(self, stream) -> str:
        return self.pick(stream.next_index())


class PoolTable:
    """Pools keyed by a discriminant, with a default for unmapped keys."""
    __slots__ = ('name', '_pools', 'default')

    def __init__(self, name: str, pools: Dict[object, LexicalPool],
                 default: LexicalPool) -> None:
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, '_pools', MappingProxyType(dict(pools)))
        object.__setattr__(self, 'default', default)

    __setattr__ = LexicalPool.__setattr__
    __delattr__ = LexicalPool.__delattr__

    def __repr__(self) -> str:
        return f"PoolTable({self.name!r}, keys={len(self._pools)})"

    def keys(self):
        return self._pools.keys()

    def get(self, key) -> LexicalPool:
        return self._pools.get(key, self.default)

    def draw(self, key, stream) -> str:
        return self.get(key).draw(stream)


_REGISTRY: List[LexicalPool] = []


def _pool(name: str, entries, fallback: str = None) -> LexicalPool:
    p = LexicalPool(name, entries, fallback)
    _REGISTRY.append(p)
    return p


def _split(text: str) -> tuple:
    """'A | B | C' → ('A', 'B', 'C').  Keeps the long tables readable."""
    return tuple(s.strip() for s in text.split('|') if s.strip())


# ══════════════════════════════════════════════════════════════════════════
# City names
# ══════════════════════════════════════════════════════════════════════════

CITY_NAMES = PoolTable('city_names', {
    CivilizationType.MILITARY: _pool('city.military', _split(
        "Ironhold | Battlespire | Warforge | Bloodstone Keep | Grimwall | "
        "Doomhammer Citadel | Skullcrusher Fortress | Rageclaw Stronghold | "
        "Ironclad Bastion | Stormbreak Castle | Shadowbane Tower | "
        "Flameheart Garrison | Frostbite Outpost | Thunderstrike Barracks | "
        "Nightfall Watchtower | Dawnbreaker Ramparts | Starfall Battlements | "
        "Voidwalker Redoubt | Soulfire Bulwark | Wraithbound Citadel")),
    CivilizationType.TECHNOLOGY: _pool('city.technology', _split(
        "Gearwright | Steamhaven | Clockwork City | Mechanopolis | Techspire | "
        "Sparkwright Works | Voltaic Grid | Magnetic Core | Copperfall | "
        "Brassgate | Cogsworth | Pistonreach | Boilerhaven | Lensmark | "
        "Dynamo Hold | Artificer's Rest | Runeforge | Crystalworks | "
        "Engineheart | Precision Row")),
    CivilizationType.RELIGIOUS: _pool('city.religious', _split(
        "Lightspire | Dawnhaven | Starwhisper Sanctum | Moonchild Temple | "
        "Sunborn Cathedral | Celestial Monastery | Divine Basilica | "
        "Sacred Shrine | Holy Sanctuary | Blessed Abbey | Radiant Chapel | "
        "Luminous Cloister | Glorious Altar | Sublime Chancel | "
        "Transcendent Nave | Exalted Choir | Candlemere | Vigil's End | "
        "Psalmgate | Reliquary Hill")),
    CivilizationType.TRADE: _pool('city.trade', _split(
        "Goldenheart | Silverport | Gemhaven | Wealthspire | Prosperity Plaza | "
        "Fortune's Gate | Merchant's Rest | Trader's Haven | Coinwater | "
        "Market Cross | Exchange Point | Bazaar Reach | Emporium Quay | "
        "Saltmarket | Caravan Rest | Spicegate | Ledgerhold | Amberport | "
        "Tollbridge | Silkmere")),
    CivilizationType.CULTURAL: _pool('city.cultural', _split(
        "Artspire | Musehaven | Lyrecourt | Inspiration Point | Inkwell | "
        "Quillmere | Songhollow | Verse Hall | Canvasreach | Gallery Row | "
        "Scrollgate | Chorushaven | Masque Hill | Theater Row | Opaline | "
        "Harpstone | Ballad Cross | Loremere | Brushwater | Sonnet's Rest")),
}, default=_pool('city.default', ('Ironhold', 'Oldwall', 'Firstlight')))

CITY_SUFFIXES = _pool('city.suffix', _split(
    "hold | spire | haven | gate | watch | crown | heart | forge | ward | keep"))


# ══════════════════════════════════════════════════════════════════════════
# Biome descriptors, names and nouns
# ══════════════════════════════════════════════════════════════════════════

BIOME_DESCRIPTORS = PoolTable('biome_descriptors', {
    Biome.FOREST: _pool('descriptor.forest', _split(
        "Verdant | Emerald | Thornwood | Wildwood | Greenwood | Shadowleaf | "
        "Ironbark | Goldenbough | Silverleaf | Moonwood")),
    Biome.MOUNTAINS: _pool('descriptor.mountains', _split(
        "Ironpeak | Stormcrown | Frostspire | Goldensummit | Shadowpeak | "
        "Crystalcrag | Thunderhead | Snowcap | Rockspire | Stonecrown")),
    Biome.DESERT: _pool('descriptor.desert', _split(
        "Sunscorch | Sandstorm | Goldendune | Mirage | Oasisborn | Dunewalker | "
        "Sunbaked | Heatwave | Scorching | Blazing")),
    Biome.OCEAN: _pool('descriptor.ocean', _split(
        "Deepwater | Stormtide | Wavebreak | Saltwind | Seafoam | Tideborn | "
        "Oceandeep | Seaspray | Wavecrest | Saltborn")),
    Biome.TUNDRA: _pool('descriptor.tundra', _split(
        "Frostborn | Icewind | Snowfall | Winterhold | Frostbite | Iceheart | "
        "Snowdrift | Blizzard | Frozen | Glacial")),
    Biome.SWAMP: _pool('descriptor.swamp', _split(
        "Mistborn | Bogwater | Marshland | Murkwater | Swampgas | Wetland | "
        "Mireborn | Fenland | Quagmire | Morass")),
    Biome.RAINFOREST: _pool('descriptor.rainforest', _split(
        "Verdant | Canopy | Jungle | Tropical | Lush | Dense | Thick | "
        "Overgrown | Wild | Untamed")),
    Biome.PLAINS: _pool('descriptor.plains', _split(
        "Windswept | Grassland | Prairie | Meadow | Steppe | Savanna | Field | "
        "Pasture | Range | Expanse")),
    Biome.COAST: _pool('descriptor.coast', _split(
        "Shoreborn | Cliffside | Baywatch | Harbourlight | Seacliff | Tidepool | "
        "Rockshore | Sandbar | Lighthouse | Beacon")),
}, default=_pool('descriptor.default', ('Ancient', 'Old', 'Elder')))

BIOME_NAMES = PoolTable('biome_names', {
    Biome.FOREST: _pool('name.forest', _split(
        "Greenwood | Oakenheart | Pinespire | Willowbend | Cedarfall | Birchwind | "
        "Elmshade | Mapleglow | Ashenvale | Thornwick | Fernhaven | Mossdeep | "
        "Roothold | Barkstone | Leafwhisper | Treefall | Deepwood | Darkwood")),
    Biome.MOUNTAINS: _pool('name.mountains', _split(
        "Ironpeak | Stonehold | Rockfall | Cliffwatch | Summitreach | Peakwind | "
        "Ridgeback | Crestone | Highspire | Skyreach | Cloudtop | Snowcap | "
        "Icefall | Frostpeak | Coldstone | Granite | Basalt | Obsidian")),
    Biome.DESERT: _pool('name.desert', _split(
        "Sunspear | Sandfall | Dunewind | Mirage | Oasis | Scorching | Blazing | "
        "Searing | Arid | Barren | Desolate | Badlands | Dryland | Dustbowl | "
        "Sandstorm | Heatwave | Sunbaked")),
    Biome.OCEAN: _pool('name.ocean', _split(
        "Deepcurrent | Wavebreak | Tidefall | Coral | Saltwind | Seaspray | "
        "Whitecap | Bluedeep | Aquamarine | Nautilus | Tempest | Maelstrom | "
        "Typhoon | Torrent | Deluge")),
    Biome.TUNDRA: _pool('name.tundra', _split(
        "Frostwind | Icefall | Snowdrift | Blizzard | Glacier | Permafrost | "
        "Iceberg | Frozen | Arctic | Polar | Boreal | Frigid | Bitter | Harsh | "
        "Unforgiving")),
    Biome.SWAMP: _pool('name.swamp', _split(
        "Mistfall | Bogwater | Marshwind | Murkdeep | Fenland | Mosswater | "
        "Darkwater | Shadowmere | Gloomhaven | Miasma | Stagnant | Fetid | "
        "Blight")),
    Biome.RAINFOREST: _pool('name.rainforest', _split(
        "Vinefall | Canopy | Undergrowth | Wildvine | Thicket | Bramble | Tangle | "
        "Overgrowth | Lush | Verdant | Emerald | Jade | Viridian | Malachite | "
        "Peridot | Eden")),
    Biome.PLAINS: _pool('name.plains', _split(
        "Grasswind | Meadow | Prairie | Steppe | Savanna | Pasture | Field | "
        "Range | Expanse | Vastland | Opensky | Freewind | Horizon | Endless | "
        "Boundless")),
    Biome.COAST: _pool('name.coast', _split(
        "Saltreach | Gullhaven | Tidemark | Shellstrand | Cliffwatch | Driftholm | "
        "Brinegate | Harbourlight | Surfwind | Pearlshore")),
}, default=_pool('name.default', ('Oldland', 'Firstreach', 'Hearthland')))

BIOME_NOUNS = PoolTable('biome_nouns', {
    Biome.FOREST: _pool('noun.forest', _split(
        "Grove | Wood | Forest | Glade | Thicket | Wildwood | Dell | Vale | "
        "Hollow | Glen | Shadowwood | Greenwood | Heartwood | Ironwood | Weald")),
    Biome.MOUNTAINS: _pool('noun.mountains', _split(
        "Peak | Summit | Ridge | Crest | Pinnacle | Heights | Cliff | Bluff | "
        "Tor | Fell | Pike | Spire | Crown | Dome | Massif")),
    Biome.DESERT: _pool('noun.desert', _split(
        "Sands | Dunes | Wastes | Expanse | Reach | Flats | Basin | Valley | "
        "Plain | Mesa | Plateau | Badlands | Wilderness | Void | Emptiness")),
    Biome.OCEAN: _pool('noun.ocean', _split(
        "Seas | Waters | Depths | Tide | Current | Wave | Bay | Gulf | Sound | "
        "Strait | Channel | Reef | Atoll | Lagoon | Harbor")),
    Biome.TUNDRA: _pool('noun.tundra', _split(
        "Frost | Ice | Snow | Tundra | Permafrost | Glacier | Icefield | "
        "Snowfield | Polar | Arctic | Boreal | Taiga | Steppes | Moors | Highlands")),
    Biome.SWAMP: _pool('noun.swamp', _split(
        "Marsh | Bog | Fen | Mire | Swamp | Wetlands | Bayou | Slough | Morass | "
        "Quagmire | Marshland | Bogland | Fenland | Mireland | Swampland")),
    Biome.RAINFOREST: _pool('noun.rainforest', _split(
        "Jungle | Rainforest | Canopy | Undergrowth | Thicket | Vine | Tangle | "
        "Overgrowth | Verdure | Foliage | Greenery | Vegetation | Flora | "
        "Wilderness | Wild")),
    Biome.PLAINS: _pool('noun.plains', _split(
        "Plains | Grasslands | Prairie | Steppe | Savanna | Meadow | Field | "
        "Pasture | Range | Expanse | Vastness | Openness | Freedom | Horizon | Sky")),
    Biome.COAST: _pool('noun.coast', _split(
        "Shore | Strand | Cliffs | Cove | Harbor | Bay | Headland | Shoals | "
        "Sands | Breakers")),
}, default=_pool('noun.default', ('Lands', 'Realm', 'Reach')))

TYPE_NOUNS = PoolTable('type_nouns', {
    CivilizationType.MILITARY: _pool('noun.military', _split(
        "Legion | Guard | Watch | Order | Brigade | Battalion | Regiment | "
        "Company | Corps | Division | Force | Army | Host | Warband | Militia")),
    CivilizationType.TECHNOLOGY: _pool('noun.technology', _split(
        "Forge | Workshop | Guild | Craft | Works | Foundry | Smithy | Atelier | "
        "Laboratory | Academy | Institute | College | School | Hall | Chamber")),
    CivilizationType.RELIGIOUS: _pool('noun.religious', _split(
        "Temple | Shrine | Sanctuary | Abbey | Monastery | Cathedral | Chapel | "
        "Basilica | Altar | Oracle | Prophet | Vision | Faith | Belief | Creed")),
    CivilizationType.TRADE: _pool('noun.trade', _split(
        "Market | Exchange | Trading | Commerce | Merchant | Guild | Company | "
        "Consortium | Syndicate | Cartel | Enterprise | Venture | Business | "
        "Trade | Deal")),
    CivilizationType.CULTURAL: _pool('noun.cultural', _split(
        "Academy | Institute | School | University | College | Library | Museum | "
        "Gallery | Theater | Opera | Arts | Culture | Learning | Knowledge | Wisdom")),
}, default=_pool('noun.general', _split(
    "Empire | Kingdom | Republic | Nation | State | Realm | Domain | Territory | "
    "Land | Country | Federation | Union | Alliance | Coalition | League")))


# ══════════════════════════════════════════════════════════════════════════
# Civilization (realm) names
# ══════════════════════════════════════════════════════════════════════════

AGGRESSIVE_NAMES = _pool('realm.aggressive', _split(
    "Bloodfang | Ironwrath | Stormbreak | Darkbane | Firebrand | Shadowclaw | "
    "Thornspike | Grimhold | Razorwind | Voidstrike | Bonecrusher | Hellforge | "
    "Doomhammer | Blackstorm | Warfang | Deathwatch | Ravenclaw | Skullbreak | "
    "Nightfall | Vengeance | Conquest | Brutalis | Savage | Predator | "
    "Destroyer | Annihilus | Carnage | Rampage | Havoc | Chaos"))

PROUD_NAMES = _pool('realm.proud', _split(
    "Goldspire | Sunthrone | Starfall | Crownhold | Majesty | Grandeur | "
    "Splendor | Radiance | Brilliance | Luminous | Sovereign | Imperial | Regal | "
    "Noble | Exalted | Supreme | Magnificent | Glorious | Triumphant | "
    "Victorious | Ascendant | Paramount | Pinnacle | Apex | Zenith | Celestial | "
    "Divine | Eternal | Infinite | Transcendent"))

MYSTICAL_NAMES = _pool('realm.mystical', _split(
    "Whisperwind | Moonhaven | Starweave | Soulforge | Spiritfall | Dreamhold | "
    "Visionspire | Oraculum | Prophecy | Sanctuary | Ethereal | Mystique | "
    "Arcanum | Enigma | Serenity | Harmony | Tranquil | Blessed | Sacred | "
    "Hallowed | Consecrated | Revered | Sanctified | Purified | Enlightened | "
    "Awakened | Illuminated | Transcended | Ascended"))

TECH_NAMES = _pool('realm.technical', _split(
    "Forgemaster | Artificer | Crafthold | Gearwork | Steamspire | Clockwork | "
    "Mechanica | Engineheart | Copperfall | Brassgear | Ironforge | Steelworks | "
    "Goldwright | Silversmith | Runeforge | Crystalwork | Gemcutter | "
    "Stonecarver | Masterwork | Precision | Innovation | Invention | Creation | "
    "Discovery | Progress | Advancement | Breakthrough | Pioneer | Frontier | "
    "Evolution"))

GENERAL_NAMES = _pool('realm.general', _split(
    "Apex | Zenith | Pinnacle | Summit | Peak | Crown | Throne | Scepter | Orb | "
    "Jewel | Diamond | Ruby | Sapphire | Emerald | Topaz | Onyx | Opal | Pearl | "
    "Amber | Crystal | Prism | Spectrum | Aurora | Nova | Stellar | Cosmic | "
    "Galactic | Phoenix | Dragon | Griffin | Titan | Colossus | Leviathan | "
    "Behemoth | Kraken | Hydra | Chimera"))


# ══════════════════════════════════════════════════════════════════════════
# Adjectives (two-word civilization names)
# ══════════════════════════════════════════════════════════════════════════

AGGRESSIVE_ADJECTIVES = _pool('adjective.aggressive', _split(
    "Brutal | Savage | Fierce | Ruthless | Merciless | Vicious | Cruel | Deadly | "
    "Lethal | Fatal | Violent | Aggressive | Hostile | Menacing | Threatening"))

PROUD_ADJECTIVES = _pool('adjective.proud', _split(
    "Golden | Royal | Noble | Grand | Majestic | Glorious | Radiant | Brilliant | "
    "Shining | Luminous | Splendid | Magnificent | Supreme | Exalted | Divine"))

TYPE_ADJECTIVES = PoolTable('type_adjectives', {
    CivilizationType.MILITARY: _pool('adjective.military', _split(
        "Iron | Steel | Bronze | Armored | Fortified | Veteran | Elite | Tactical | "
        "Strategic | Militant | Warrior | Battle | Combat | Fighting | War")),
    CivilizationType.TECHNOLOGY: _pool('adjective.technology', _split(
        "Ingenious | Masterful | Ironbound | Forged | Steamborn | Mechanical | "
        "Gearwright | Innovative | Inventive | Creative | Clockwork | Runic | "
        "Arcane | Mystical | Superior")),
    CivilizationType.RELIGIOUS: _pool('adjective.religious', _split(
        "Sacred | Holy | Divine | Blessed | Spiritual | Mystical | Ethereal | "
        "Celestial | Transcendent | Enlightened | Serene | Peaceful | Harmonious | "
        "Balanced | Pure")),
    CivilizationType.TRADE: _pool('adjective.trade', _split(
        "Rich | Wealthy | Prosperous | Affluent | Opulent | Luxurious | Profitable | "
        "Commercial | Trading | Merchant | Economic | Financial | Monetary | "
        "Valuable | Precious")),
    CivilizationType.CULTURAL: _pool('adjective.cultural', _split(
        "Wise | Ancient | Mystic | Elder | Sage | Arcane | Luminous | Starborn | "
        "Moonlit | Enlightened | Dreaming | Whispering | Eternal | Timeless | Profound")),
}, default=_pool('adjective.general', _split(
    "Ancient | Eternal | Infinite | Legendary | Mythic | Epic | Grand | Great | "
    "Mighty | Powerful | Strong | Bold | Brave | Courageous | Heroic | Noble | "
    "Proud | Free | Independent | Sovereign")))


# ══════════════════════════════════════════════════════════════════════════
# Heroes
# ══════════════════════════════════════════════════════════════════════════

HERO_NAMES = PoolTable('hero_names', {
    HeroArchetype.CONQUEROR: _pool('hero.conqueror', _split(
        "Ironclad | Bloodbane | Stormbreaker | Shadowbane | Doomhammer | "
        "Skullcrusher | Rageclaw | Flameheart | Frostbite | Thunderstrike | "
        "Nightfall | Dawnbreaker | Starfall | Voidwalker | Soulfire | "
        "Wraithbound | Grimward | Darkbane | Ironwill | Battleborn")),
    HeroArchetype.PHILOSOPHER: _pool('hero.philosopher', _split(
        "Wiseheart | Sagewind | Brightmind | Deepthought | Stargazer | "
        "Truthseeker | Mindforge | Soulwise | Dreamwalker | Visionkeeper | "
        "Loremaster | Bookwarden | Scrollkeeper | Wordsmith | Inkwell | "
        "Quillborn | Pageturner | Storyweaver | Talekeeper | Wisdomborn")),
    HeroArchetype.BUILDER: _pool('hero.builder', _split(
        "Stonewright | Ironforge | Mastercraft | Goldenhammer | Steelshaper | "
        "Rockcarver | Wallbuilder | Bridgemaker | Towerwright | Castleborn | "
        "Archwright | Pillarmaker | Cornerstone | Keystone | Capstone | "
        "Mortarmaster | Brickwright | Stoneborn | Buildmaster | Beamsetter")),
    HeroArchetype.PROPHET: _pool('hero.prophet', _split(
        "Lightbringer | Dawnseeker | Starwhisper | Moonchild | Sunborn | "
        "Celestine | Candlewake | Veilwalker | Hymnsworn | Ashcaller | "
        "Dreamspeaker | Oathkeeper | Skysinger | Emberheart | Dovewing | "
        "Glimmerveil | Psalmweaver | Graceborn | Vigilant | Halowyn")),
    HeroArchetype.INVENTOR: _pool('hero.inventor', _split(
        "Gearwright | Steamforge | Clockwork | Mechanicus | Techwright | "
        "Innovator | Pioneer | Visionary | Genius | Prodigy | Sparkwright | "
        "Voltaic | Magnetic | Cogsworth | Lenscutter | Brassmind | Coilspinner | "
        "Fusewick | Pistonheart | Tinkerton")),
}, default=_pool('hero.default', ('Aeondor', 'Lyrawyn', 'Thanethor')))

HERO_TITLES = PoolTable('hero_titles', {
    HeroArchetype.CONQUEROR: _pool('title.conqueror', _split(
        "the Worldbreaker | the Unconquered | the Ironclad | the Bloodthirsty | "
        "the Merciless | the Unstoppable | the Destroyer | the Annihilator | "
        "the Devastator | the Ruiner | the Warlord | the Conqueror | the Dominator | "
        "the Subjugator | the Overlord | the Tyrant | the Despot | the Dictator | "
        "the Autocrat | the Sovereign")),
    HeroArchetype.PHILOSOPHER: _pool('title.philosopher', _split(
        "the Wise | the Enlightened | the Sage | the Scholar | the Learned | "
        "the Thoughtful | the Contemplative | the Meditative | the Reflective | "
        "the Insightful | the Brilliant | the Genius | the Intellectual | "
        "the Academic | the Erudite | the Scholarly | the Studious | the Bookish | "
        "the Literate | the Educated")),
    HeroArchetype.BUILDER: _pool('title.builder', _split(
        "the Architect | the Engineer | the Constructor | the Creator | "
        "the Designer | the Inventor | the Innovator | the Pioneer | the Visionary | "
        "the Mastermind | the Craftsman | the Artisan | the Maker | the Builder | "
        "the Shaper | the Former | the Molder | the Sculptor | the Carver | the Wright")),
    HeroArchetype.PROPHET: _pool('title.prophet', _split(
        "the Divine | the Sacred | the Holy | the Blessed | the Chosen | "
        "the Anointed | the Consecrated | the Sanctified | the Hallowed | "
        "the Revered | the Exalted | the Sublime | the Transcendent | "
        "the Enlightened | the Ascended | the Radiant | the Luminous | "
        "the Brilliant | the Glorious | the Magnificent")),
    HeroArchetype.INVENTOR: _pool('title.inventor', _split(
        "the Ingenious | the Brilliant | the Innovative | the Creative | "
        "the Inventive | the Resourceful | the Clever | the Cunning | the Shrewd | "
        "the Astute | the Perceptive | the Insightful | the Discerning | "
        "the Observant | the Analytical | the Logical | the Rational | "
        "the Systematic | the Methodical | the Precise")),
}, default=_pool('title.default', ('the Bold', 'the Just', 'the Pure')))

EXTREME_TITLES = _pool('title.extreme', _split(
    "the Worldbreaker | the Annihilator | the Devastator | the Merciless | the Unstoppable"))

PRIDEFUL_TITLES = _pool('title.prideful', _split(
    "the Magnificent | the Glorious | the Supreme | the Exalted | the Divine"))


# ══════════════════════════════════════════════════════════════════════════
# Historical events
# ══════════════════════════════════════════════════════════════════════════

# Prefix tiers by significance: > 8, > 5, else
EVENT_PREFIX_MAJOR = _pool('event.prefix.major', _split(
    "The Great | The Eternal | The Infinite | The Immortal | The Ultimate"))
EVENT_PREFIX_NOTABLE = _pool('event.prefix.notable', _split(
    "The Legendary | The Mythical | The Epic | The Heroic | The Noble"))
EVENT_PREFIX_MINOR = _pool('event.prefix.minor', _split(
    "The Glorious | The Magnificent | The Wondrous | The Marvelous | "
    "The Spectacular | The Extraordinary | The Remarkable | The Notable | "
    "The Significant | The Historic"))

DISASTER_NAMES = _pool('event.disaster', _split(
    "Cataclysm | Apocalypse | Devastation | Calamity | Catastrophe | Ruin | "
    "Collapse | Downfall | Destruction | Annihilation"))

GOLDEN_AGE_NAMES = _pool('event.golden', _split(
    "Renaissance | Enlightenment | Awakening | Flourishing | Golden Age | "
    "Prosperity | Ascension | Pinnacle | Zenith | Apex"))

WAR_NAMES = _pool('event.war', _split(
    "War | Conflict | Campaign | Crusade | Conquest | Struggle | Battle | Strife | "
    "Clash | Confrontation | Uprising | Rebellion | Revolution | Insurrection | Revolt"))

# Fixed nouns for categories that do not draw from a pool
EVENT_FIXED_NOUNS: Mapping[EventCategory, str] = {
    EventCategory.BETRAYAL:   'Betrayal',
    EventCategory.HERO:       'Ascension',
    EventCategory.REVOLUTION: 'Revolution',
    EventCategory.CASCADE:    'Cascade',
    EventCategory.ESCALATION: 'Escalation',
    EventCategory.SPIRITUAL:  'Awakening',
    EventCategory.DECLINE:    'Decline',
    EventCategory.DISCOVERY:  'Discovery',
}
EVENT_DEFAULT_NOUN = 'Event'


# ══════════════════════════════════════════════════════════════════════════
# Regions and monuments
# ══════════════════════════════════════════════════════════════════════════

PLACE_TYPES = _pool('place.type', _split(
    "Plains | Forest | Tundra | Jungle | Desert | Mountains | Coast | Isle | "
    "Valley | Pass | Bay | Reach | Hollow | Peak | Falls | Grove | Marsh | "
    "Wastes | Wilds | Heights | Fields | Dale | Cove | Cliffs | Fjord | Lands"))

BIOME_PLACE_TYPES = PoolTable('biome_place_types', {
    Biome.FOREST:     _pool('place.forest',     _split("Forest | Grove | Hollow | Dale | Wilds")),
    Biome.MOUNTAINS:  _pool('place.mountains',  _split("Mountains | Peak | Pass | Heights | Cliffs")),
    Biome.DESERT:     _pool('place.desert',     _split("Desert | Wastes | Reach | Dunes | Flats")),
    Biome.OCEAN:      _pool('place.ocean',      _split("Isle | Bay | Deep | Shoals | Sea")),
    Biome.TUNDRA:     _pool('place.tundra',     _split("Tundra | Wastes | Fjord | Barrens | Icefields")),
    Biome.SWAMP:      _pool('place.swamp',      _split("Marsh | Fens | Mire | Bog | Hollow")),
    Biome.RAINFOREST: _pool('place.rainforest', _split("Jungle | Wilds | Falls | Canopy | Valley")),
    Biome.PLAINS:     _pool('place.plains',     _split("Plains | Fields | Steppe | Lands | Dale")),
    Biome.COAST:      _pool('place.coast',      _split("Coast | Cove | Bay | Cliffs | Strand")),
}, default=PLACE_TYPES)

LANDMARK_ADJECTIVES = _pool('landmark.adjective', _split(
    "Ancient | Lost | Sacred | Shattered | Whispering | Frozen | Emerald | Golden | "
    "Silent | Stormy | Radiant | Shadow | Eternal | Fabled | Hidden | Sunken | "
    "Celestial | Dread | Iron | Silver | Obsidian | Mysterious"))

MONUMENT_TYPES = _pool('monument.type', _split(
    "Statue | Obelisk | Spire | Temple | Shrine | Monolith | Pillar | Arch | Gate | "
    "Tower | Library | Sanctum | Crypt | Hall | Bridge | Fountain | Monument"))


# ══════════════════════════════════════════════════════════════════════════
# Religions
# ══════════════════════════════════════════════════════════════════════════

PROPHET_NAMES = _pool('religion.prophet', _split(
    "Lightbringer | Dawnseeker | Starwhisper | Moonchild | Sunborn | Celestial | "
    "Divine | Sacred | Holy | Blessed | Radiant | Luminous | Brilliant | "
    "Glorious | Magnificent | Sublime | Transcendent | Enlightened | Ascended | "
    "Exalted"))

NATURAL_PHENOMENA = _pool('religion.phenomenon', _split(
    "Eclipse | Aurora | Comet | Tempest | Volcano | Tsunami | Lightning | Thunder | "
    "Earthquake | Meteor | Blizzard | Wildfire | Flood | Drought | Avalanche | "
    "Tornado | Hurricane | Geyser | Tide | Solstice | Equinox | Nebula | "
    "Supernova | Constellation | Galaxy | Void | Prism | Crystal | Glacier | Oasis"))

RELIGIOUS_TERMS = _pool('religion.term', _split(
    "Faith | Divine | Sacred | Holy | Blessed | Eternal | Infinite | Transcendent | "
    "Enlightened | Ascended | Radiant | Luminous | Celestial | Mystical | "
    "Spiritual | Sanctified | Hallowed | Consecrated | Revered | Exalted | "
    "Sublime | Profound | Omniscient | Omnipotent | Benevolent | Merciful | "
    "Righteous | Pure | Immaculate | Pristine"))

RELIGION_SUFFIXES = _pool('religion.suffix', _split(
    "ism | ity | ology | osophy | ancy | ence | ation | hood | ship | dom | ward | "
    "path | way | light | truth | order | unity | harmony | balance"))

RELIGION_PREFIXES = _pool('religion.prefix', _split(
    "Neo | Proto | Arch | Meta | Ultra | Hyper | Omni | Pan | Uni | Multi | Trans | "
    "Inter | Super | Mega | Macro | Micro | Pseudo | Quasi | Semi | Anti"))

PROPHET_SUFFIXES = _pool('religion.prophet_suffix', ('ism', 'ites'))

BELIEF_NAMES: Mapping[ReligionBelief, str] = {
    ReligionBelief.MONOTHEISM: 'Unity',
    ReligionBelief.POLYTHEISM: 'Pantheon',
    ReligionBelief.PANTHEISM:  'Cosmos',
    ReligionBelief.ANIMISM:    'Spirits',
    ReligionBelief.ATHEISM:    'Reason',
}
BELIEF_DEFAULT_NAME = 'Mystery'

BIOME_RELIGIOUS_ADJECTIVES = PoolTable('biome_religious_adjectives', {
    Biome.FOREST:     _pool('religion.adj.forest',     ('Verdant', 'Sylvan')),
    Biome.MOUNTAINS:  _pool('religion.adj.mountains',  ('Celestial', 'Stone')),
    Biome.DESERT:     _pool('religion.adj.desert',     ('Solar', 'Mirage')),
    Biome.OCEAN:      _pool('religion.adj.ocean',      ('Tidal', 'Abyssal')),
    Biome.TUNDRA:     _pool('religion.adj.tundra',     ('Frozen', 'Aurora')),
    Biome.SWAMP:      _pool('religion.adj.swamp',      ('Mist', 'Bog')),
    Biome.RAINFOREST: _pool('religion.adj.rainforest', ('Primal', 'Canopy')),
    Biome.PLAINS:     _pool('religion.adj.plains',     ('Wind', 'Horizon')),
    Biome.COAST:      _pool('religion.adj.coast',      ('Tide', 'Shore')),
}, default=_pool('religion.adj.default', ('Ancient',)))

BIOME_SPIRITS = PoolTable('biome_spirits', {
    Biome.FOREST:     _pool('religion.spirit.forest',     ('Tree', 'Wood')),
    Biome.MOUNTAINS:  _pool('religion.spirit.mountains',  ('Stone', 'Peak')),
    Biome.DESERT:     _pool('religion.spirit.desert',     ('Sand', 'Sun')),
    Biome.OCEAN:      _pool('religion.spirit.ocean',      ('Wave', 'Deep')),
    Biome.TUNDRA:     _pool('religion.spirit.tundra',     ('Ice', 'Wind')),
    Biome.SWAMP:      _pool('religion.spirit.swamp',      ('Mist', 'Bog')),
    Biome.RAINFOREST: _pool('religion.spirit.rainforest', ('Vine', 'Canopy')),
    Biome.PLAINS:     _pool('religion.spirit.plains',     ('Grass', 'Sky')),
    Biome.COAST:      _pool('religion.spirit.coast',      ('Tide', 'Shell')),
}, default=_pool('religion.spirit.default', ('Earth',)))

BIOME_ELEMENTS = PoolTable('biome_elements', {
    Biome.FOREST:     _pool('religion.element.forest',     ('the Ancient Oak', 'the Whispering Leaves')),
    Biome.MOUNTAINS:  _pool('religion.element.mountains',  ('the High Peaks', 'the Stone Throne')),
    Biome.DESERT:     _pool('religion.element.desert',     ('the Burning Sands', 'the Endless Dunes')),
    Biome.OCEAN:      _pool('religion.element.ocean',      ('the Eternal Tide', 'the Deep Current')),
    Biome.TUNDRA:     _pool('religion.element.tundra',     ('the Frozen Wastes', 'the Northern Lights')),
    Biome.SWAMP:      _pool('religion.element.swamp',      ('the Misty Marsh', 'the Hidden Waters')),
    Biome.RAINFOREST: _pool('religion.element.rainforest', ('the Green Cathedral', 'the Living Canopy')),
    Biome.PLAINS:     _pool('religion.element.plains',     ('the Open Sky', 'the Endless Horizon')),
    Biome.COAST:      _pool('religion.element.coast',      ('the Meeting Waters', 'the Salt Wind')),
}, default=_pool('religion.element.default', ('the Sacred Earth',)))

# Archetype-specific vocabulary for contextual religion names
PRIMITIVE_TERMS     = _pool('religion.primitive.term',   _split("Spirits | Ancestors | Totems | Shamans | Elders | Tribe"))
PRIMITIVE_ACTIONS   = _pool('religion.primitive.action', _split("Calling | Dancing | Singing | Dreaming | Walking | Speaking"))
ORGANIZATION_TYPES  = _pool('religion.organized.type',   _split("Church | Temple | Order | Brotherhood | Sisterhood | Assembly | Council"))
FORMAL_TERMS        = _pool('religion.organized.term',   _split("Divine | Sacred | Holy | Blessed | Eternal | Supreme | Universal"))
NATURE_TERMS        = _pool('religion.nature.term',      _split("Grove | Circle | Path | Way | Keepers | Guardians | Children"))
PHILOSOPHICAL_TERMS = _pool('religion.philosophy.term',  _split("Wisdom | Truth | Knowledge | Understanding | Enlightenment | Harmony | Balance"))
SCHOOL_TYPES        = _pool('religion.philosophy.school', _split("School | Academy | Institute | Society | Fellowship | Circle"))
ANCIENT_PREFIXES    = _pool('religion.ancient.prefix',   _split("Old | Ancient | First | Elder | Primordial | Forgotten | Lost"))
ANCIENT_TERMS       = _pool('religion.ancient.term',     _split("Ways | Traditions | Rites | Mysteries | Secrets | Lore | Wisdom"))


# ══════════════════════════════════════════════════════════════════════════
# Myths: titles and the slot pools of each narrative template
# ══════════════════════════════════════════════════════════════════════════

MYTH_TITLES = PoolTable('myth_titles', {
    MythType.CREATION:   _pool('myth.title.creation',   ('The First Dawn', 'The Breath of Making', 'The Unbroken Song')),
    MythType.HERO:       _pool('myth.title.hero',       ("The Champion's Tale", 'The Lantern Bearer', 'The Last Stand')),
    MythType.TRAGEDY:    _pool('myth.title.tragedy',    ('The Fallen Crown', 'The Ashen Throne', 'The Empty Hearth')),
    MythType.MONSTER:    _pool('myth.title.monster',    ("The Shadow's Warning", 'The Beast Below', 'The Hungry Dark')),
    MythType.LOVE:       _pool('myth.title.love',       ('The Eternal Bond', 'The Two Rivers', 'The Promise Kept')),
    MythType.WAR:        _pool('myth.title.war',        ('The Song of Blades', 'The Red Season', 'The Iron Oath')),
    MythType.MAGIC:      _pool('myth.title.magic',      ('The Lost Arts', 'The Hidden Door', 'The Star Well')),
    MythType.PROPHECY:   _pool('myth.title.prophecy',   ('The Vision of Tomorrow', 'The Seventh Sign', 'The Waking Eye')),
    MythType.CURSE:      _pool('myth.title.curse',      ('The Price of Pride', 'The Bitter Oath', 'The Long Shadow')),
    MythType.REDEMPTION: _pool('myth.title.redemption', ('The Return to Light', 'The Mended Crown', 'The Second Dawn')),
}, default=_pool('myth.title.default', ('The Ancient Tale',)))

CREATORS = PoolTable('myth.creators', {
    Biome.FOREST:     _pool('myth.creator.forest',     ('the Great Spirit of the Earth', 'the Green Mother', 'the Oak That Dreams')),
    Biome.MOUNTAINS:  _pool('myth.creator.mountains',  ('the Stone Singer', 'the Hammer of the Deep', 'the Sleeping Giant')),
    Biome.DESERT:     _pool('myth.creator.desert',     ('the Eternal Flame', 'the Sun That Walks', 'the Keeper of Mirages')),
    Biome.OCEAN:      _pool('myth.creator.ocean',      ('the Mother of All Waters', 'the Tide Weaver', 'the Leviathan of Dawn')),
    Biome.TUNDRA:     _pool('myth.creator.tundra',     ('the Wind Walker', 'the White Wolf', 'the Frost Crown')),
    Biome.SWAMP:      _pool('myth.creator.swamp',      ('the Mist Mother', 'the Old One of the Fens', 'the Heron King')),
    Biome.RAINFOREST: _pool('myth.creator.rainforest', ('the Serpent of a Thousand Colors', 'the Rain Bringer', 'the Canopy Queen')),
    Biome.PLAINS:     _pool('myth.creator.plains',     ('the Sky Father', 'the Grass Singer', 'the Horse of the Horizon')),
    Biome.COAST:      _pool('myth.creator.coast',      ('the Shell Maiden', 'the Keeper of the Shore', 'the Salt Wind')),
}, default=_pool('myth.creator.default', _split(
    "the Great Spirit of the Earth | the Eternal Flame | the Mother of All Waters | "
    "the Wind Walker | the Stone Singer")))

PURPOSES = PoolTable('myth.purposes', {
    CivilizationType.MILITARY:   _pool('myth.purpose.military',   _split(
        "the strong might protect the weak | courage would triumph over fear | "
        "honor would guide all actions")),
    CivilizationType.RELIGIOUS:  _pool('myth.purpose.religious',  _split(
        "divine wisdom might flourish | the sacred flame would never die | "
        "souls might find their way to enlightenment")),
    CivilizationType.TRADE:      _pool('myth.purpose.trade',      _split(
        "prosperity might flow to all corners of the world | "
        "connections would bind all peoples together | abundance would replace scarcity")),
    CivilizationType.CULTURAL:   _pool('myth.purpose.cultural',   _split(
        "beauty and wisdom might flourish | knowledge would be preserved for future ages | "
        "art would capture the essence of truth")),
    CivilizationType.TECHNOLOGY: _pool('myth.purpose.technology', _split(
        "innovation would solve the great challenges | "
        "understanding would illuminate the darkness | progress would lift all beings higher")),
}, default=_pool('myth.purpose.default', ('balance would be maintained in all things',)))

MONSTERS = PoolTable('myth.monsters', {
    Biome.FOREST:     _pool('myth.monster.forest',     ('the Antlered Hunger', 'the Whisperer Between Trees', 'the Rootbound Hag')),
    Biome.MOUNTAINS:  _pool('myth.monster.mountains',  ('the Twisted One of the Deep Places', 'the Stone Wyrm', 'the Avalanche Giant')),
    Biome.DESERT:     _pool('myth.monster.desert',     ('the Sand Devourer', 'the Glass Scorpion', 'the Thirst That Walks')),
    Biome.OCEAN:      _pool('myth.monster.ocean',      ('the Drowned King', 'the Kraken of the Outer Dark', 'the Storm-Born Destroyer')),
    Biome.TUNDRA:     _pool('myth.monster.tundra',     ('the Pale Stalker', 'the Frost Wolf of Winter', 'the Hunger That Walks Like a Man')),
    Biome.SWAMP:      _pool('myth.monster.swamp',      ('the Bog Witch', 'the Lantern Drowner', 'the Whisperer in Dark Dreams')),
    Biome.RAINFOREST: _pool('myth.monster.rainforest', ('the Great Constrictor', 'the Jaguar of Shadows', 'the Vine Mother')),
    Biome.PLAINS:     _pool('myth.monster.plains',     ('the Grass Crawler', 'the Thunder Horse', 'the Shadow That Devours Light')),
    Biome.COAST:      _pool('myth.monster.coast',      ('the Siren of the Rocks', 'the Tide Serpent', 'the Wreck Eater')),
}, default=_pool('myth.monster.default', _split(
    "the Shadow That Devours Light | the Twisted One of the Deep Places | "
    "the Hunger That Walks Like a Man | the Whisperer in Dark Dreams | "
    "the Storm-Born Destroyer")))

MYTH_HERO_PREFIXES = _pool('myth.hero.prefix', _split("Aeon | Lyra | Thane | Vera | Kael | Zara"))
MYTH_HERO_SUFFIXES = _pool('myth.hero.suffix', _split("dor | wyn | thor | issa | ian | elle"))

# Free-standing slots: MYTH_SLOTS[myth_type][slot] → pool
MYTH_SLOTS: Mapping[MythType, Mapping[str, LexicalPool]] = {
    MythType.CREATION: {
        'beginning': _pool('myth.creation.beginning', _split(
            "In the time before time, when the world was but shadow and silence | "
            "From the great void came forth the first light | "
            "When the ancient powers still walked among mortals | "
            "In the age when the very stones could speak")),
        'action': _pool('myth.creation.action', _split(
            "breathed life into the barren lands | "
            "sang the world into existence with their eternal song | "
            "wove reality from the threads of pure dream | "
            "forged the earth with hammer blows that still echo")),
    },
    MythType.HERO: {
        'title': _pool('myth.hero.title', _split(
            "the Lightbringer | the Unbreakable | the Wise | the Bold | the Just | "
            "the Fierce | the Eternal | the Pure")),
        'challenge': _pool('myth.hero.challenge', _split(
            "faced the armies of darkness that threatened to consume all | "
            "stood alone against the tide of chaos and despair | "
            "ventured into the realm of shadows to retrieve the lost hope | "
            "battled the great evil that had plagued the land for generations")),
        'victory': _pool('myth.hero.victory', _split(
            "with courage that burned brighter than the sun | "
            "through wisdom that exceeded that of the ancient sages | "
            "by uniting the hearts of all who followed the path of righteousness | "
            "with strength drawn from the very soul of the people")),
    },
    MythType.TRAGEDY: {
        'warning': _pool('myth.tragedy.warning', _split(
            "Pride comes before the fall, as the ancestors learned too late | "
            "Those who forget the old ways invite calamity upon themselves | "
            "The price of hubris is paid by generations yet unborn | "
            "What is built without wisdom crumbles to dust")),
        'consequence': _pool('myth.tragedy.consequence', _split(
            "the once-mighty city became as dust in the wind | "
            "the children wept for sins they did not commit | "
            "the land itself turned away from its people | "
            "darkness fell upon the realm for seven long seasons")),
    },
    MythType.WAR: {
        'battle': _pool('myth.war.battle', _split(
            "The Battle of a Thousand Tears | The War That Shook the Heavens | "
            "The Siege of Eternal Night | The Campaign of Broken Crowns")),
        'description': _pool('myth.war.description', _split(
            "where the very earth ran red with the blood of heroes | "
            "that raged for seasons until the sun itself grew weary | "
            "in which the fate of all civilized peoples hung in the balance | "
            "where gods themselves took sides among mortal warriors")),
        'outcome': _pool('myth.war.outcome', _split(
            "Victory came at a price that still echoes through the ages | "
            "From great sacrifice came the peace that followed | "
            "The cost was terrible, but honor was preserved | "
            "Though many fell, their names live on in eternal glory")),
    },
    MythType.LOVE: {
        'bond': _pool('myth.love.bond', _split(
            "the love between star-crossed rulers of rival houses | "
            "the devotion of a humble artisan to a divine muse | "
            "the bond between a warrior and the spirit of the land | "
            "the eternal romance that transcends death itself")),
        'obstacle': _pool('myth.love.obstacle', _split(
            "Though fate and tradition stood against them | "
            "Despite the curses of jealous gods | "
            "Even as war raged around their sanctuary | "
            "Though the very elements conspired to keep them apart")),
        'triumph': _pool('myth.love.triumph', _split(
            "their love became the foundation of a new age of harmony | "
            "their union brought peace to lands torn by ancient hatred | "
            "their devotion inspired generations to follow their hearts | "
            "their story became a beacon of hope in dark times")),
    },
    MythType.MONSTER: {
        'threat': _pool('myth.monster.threat', _split(
            "devoured the crops and brought famine to the land | "
            "poisoned the wells with its very presence | "
            "stole the dreams of children and left only nightmares | "
            "cast shadows that grew longer with each passing day")),
        'resolution': _pool('myth.monster.resolution', _split(
            "Only through unity and courage was the beast finally vanquished | "
            "A price was paid in heroes' blood, but the land was cleansed | "
            "The monster retreated to the deep places, but its threat lingers | "
            "By ancient ritual and sacrifice, the evil was bound")),
    },
    MythType.MAGIC: {
        'source': _pool('myth.magic.source', _split(
            "the Well of Infinite Wisdom | the Crown of Starlight | "
            "the Song that Shapes Reality | the Key to Hidden Doors")),
        'power': _pool('myth.magic.power', _split(
            "could heal any wound and mend any broken heart | "
            "granted the ability to speak with the voices of the past | "
            "allowed its wielder to see the threads that bind all things | "
            "opened pathways to realms beyond mortal understanding")),
        'cost': _pool('myth.magic.cost', _split(
            "but demanded a terrible price in return | "
            "yet could only be used by those pure of heart | "
            "though it faded more with each use | "
            "but chose its own masters, not the reverse")),
    },
    MythType.PROPHECY: {
        'prophet': _pool('myth.prophecy.prophet', _split(
            "the Oracle of the Burning Sands | the Last Seer of the Ancient Line | "
            "the Dreamer Who Walks Between Worlds | the Voice from the Eternal Silence")),
        'prophecy': _pool('myth.prophecy.prophecy', _split(
            "foretold of a time when the old bonds would break and new alliances form | "
            "spoke of a golden age that would follow the darkest hour | "
            "warned of trials that would test the very soul of the people | "
            "revealed the path to greatness hidden in plain sight")),
        'condition': _pool('myth.prophecy.condition', _split(
            "when the three moons align and the ancient tower crumbles | "
            "if the people remain true to the wisdom of their ancestors | "
            "should the worthy prove themselves through acts of courage | "
            "when love conquers the hatred that divides the world")),
    },
    MythType.CURSE: {
        'source': _pool('myth.curse.source', _split(
            "the betrayed ally who died with vengeance in their heart | "
            "the ancient power that was disturbed without proper tribute | "
            "the innocent whose suffering went unavenged | "
            "the natural order that was violated by mortal ambition")),
        'effect': _pool('myth.curse.effect', _split(
            "that no victory would bring lasting joy | "
            "that prosperity would always carry the seeds of its own destruction | "
            "that the sins of the past would echo through the generations | "
            "that greatness would always exact a price in sorrow")),
        'remedy': _pool('myth.curse.remedy', _split(
            "Only through genuine repentance can the curse be lifted | "
            "The curse will end when balance is restored to the world | "
            "True understanding of the past may yet break these chains | "
            "Perhaps future generations will find the key to freedom")),
    },
    MythType.REDEMPTION: {
        'fall': _pool('myth.redemption.fall', _split(
            "the people had strayed from the path of wisdom | "
            "pride had blinded them to their own failings | "
            "they had forgotten the bonds that held them together | "
            "darkness had taken root in the hearts of the mighty")),
        'redeemer': _pool('myth.redemption.redeemer', _split(
            "a child born in the lowest circumstances | "
            "an outcast who remembered the old teachings | "
            "a stranger who carried light from distant lands | "
            "one who had lost everything yet kept faith")),
        'deed': _pool('myth.redemption.deed', _split(
            "reminded the people of their true nature | "
            "showed them the way back to righteousness | "
            "sacrificed themselves to break the cycle of despair | "
            "united the scattered fragments of hope")),
    },
}

_EMPTY_SLOT = LexicalPool('myth.slot.empty', ())


def myth_slot(myth_type: MythType, slot: str) -> LexicalPool:
    """Slot pool for *myth_type*; an empty pool (fallback '') if none."""
    return MYTH_SLOTS.get(myth_type, {}).get(slot, _EMPTY_SLOT)


# ══════════════════════════════════════════════════════════════════════════
# Freeze: read-only views for the rest of the process
# ══════════════════════════════════════════════════════════════════════════

EVENT_FIXED_NOUNS = MappingProxyType(dict(EVENT_FIXED_NOUNS))
BELIEF_NAMES      = MappingProxyType(dict(BELIEF_NAMES))
MYTH_SLOTS        = MappingProxyType({t: MappingProxyType(dict(slots))
                                      for t, slots in MYTH_SLOTS.items()})

ALL_POOLS: Tuple[LexicalPool, ...] = tuple(_REGISTRY)
