# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
config.py — Shared configuration constants for the lore generator.
"""

# ── Output bounds (UTF-8 bytes, not characters) ─────────────────────────
MAX_NAME_BYTES  = 110    # names and titles; margin under a 128-byte fixed buffer
MAX_TEXT_BYTES  = 500    # myth narrative text; margin under a 512-byte buffer
ELLIPSIS        = '...'

# ── Snapshot bounds ──────────────────────────────────────────────────────
MAX_EVENTS      = 32     # most recent historical events kept per snapshot
MAX_MEMORIES    = 16     # most recent cultural-memory tags kept per snapshot
TRAIT_MIN       = 0.0
TRAIT_MAX       = 10.0

# ── Lexical pools ────────────────────────────────────────────────────────
MAX_POOL_SIZE   = 40     # hard ceiling on entries per pool

# ── Branch chances used by the generator facade ─────────────────────────
CITY_ARCHETYPE_CHANCE  = 0.7    # archetype city name vs biome descriptor+suffix
MYTH_TITLE_CIV_CHANCE  = 0.3    # "The First Dawn" → "The First Dawn of <civ>"
MONUMENT_HERO_CHANCE   = 0.5    # "<type> of <hero>" when hero names are known
REGION_BIOME_CHANCE    = 0.5    # region uses the biome's own place type

# ── Survey / command line ────────────────────────────────────────────────
SURVEY_TRIALS   = 1000   # default salts per classifier survey
LOG_DIR         = 'logs' # directory for lore_<ts>.txt tee logs
