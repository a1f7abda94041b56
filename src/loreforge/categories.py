# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
categories.py — Closed category enumerations chosen by the classifiers.

Member order is significant: it is the index order of each classifier's
weight vector.
"""

from enum import Enum


class MythType(Enum):
    CREATION   = 'creation'     # how the world / civilization began
    HERO       = 'hero'         # great heroes
    TRAGEDY    = 'tragedy'      # cautionary tales of downfall
    MONSTER    = 'monster'      # creatures and beasts
    LOVE       = 'love'         # epic romances
    WAR        = 'war'          # legendary battles
    MAGIC      = 'magic'        # supernatural wonders
    PROPHECY   = 'prophecy'     # predictions and omens
    CURSE      = 'curse'        # divine punishment
    REDEMPTION = 'redemption'   # salvation and hope


class ReligionArchetype(Enum):
    PRIMITIVE     = 'primitive'
    ORGANIZED     = 'organized'
    NATURE        = 'nature'
    PHILOSOPHICAL = 'philosophical'
    ANCIENT       = 'ancient'
    GENERAL       = 'general'


class HeroArchetype(Enum):
    CONQUEROR   = 'conqueror'
    PHILOSOPHER = 'philosopher'
    BUILDER     = 'builder'
    PROPHET     = 'prophet'
    INVENTOR    = 'inventor'


class NameStyle(Enum):
    AGGRESSIVE = 'aggressive'
    PROUD      = 'proud'
    MYSTICAL   = 'mystical'
    TECHNICAL  = 'technical'
    BIOME      = 'biome'
    GENERAL    = 'general'
    COMPOUND   = 'compound'     # two-word "<adjective> <noun>"
