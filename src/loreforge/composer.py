# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
composer.py — Template shapes, fragment substitution, UTF-8 length bound.

    compose(Shape.ADJECTIVE_NOUN, adjective='Golden', noun='Reach')
        → 'Golden Reach'

Rules
─────
  • A fragment the shape names but the caller omits renders as ''.
  • Runs of whitespace collapse to one space; the result is stripped, so a
    missing prefix never leaves a leading space behind.
  • The result is bounded in UTF-8 *bytes* by truncate_utf8(), the one and
    only truncation routine in the package.

compose() never draws from a stream: the same shape and fragments always
give byte-identical output.
"""

from __future__ import annotations

import re
import string
from enum import Enum

from . import config
from .categories import MythType

_WS = re.compile(r'\s+')


class Shape(Enum):
    # ── Names ──────────────────────────────────────────────────────────────
    PREFIX_SUBJECT_SUFFIX = '{prefix} {subject} {suffix}'
    ADJECTIVE_NOUN        = '{adjective} {noun}'
    THE_ADJECTIVE_NOUN    = 'The {adjective} {noun}'
    NOUN_OF_SUBJECT       = '{noun} of {subject}'
    COMPOUND              = '{head}{tail}'
    PREFIXED_COMPOUND     = '{prefix} {head}{tail}'
    PERSON_TITLE          = '{name} {title}'
    ORDER_OF              = 'Order of the {subject}'

    # ── Myth narratives (one per MythType) ─────────────────────────────────
    CREATION_MYTH = ('{beginning}, {creator} {action} so that {purpose}. '
                     'Thus did the people of {civ} come to inherit this sacred charge.')
    HERO_MYTH = ('In the darkest hour of {civ}, there arose {hero} {title}, who '
                 '{challenge}. Through trials beyond counting they triumphed '
                 '{victory}, and their legacy became the guiding star for all '
                 'who came after.')
    TRAGEDY_MYTH = ('{warning}. The people of {civ} still tell how {consequence}, '
                    'so that no generation forgets the cost of arrogance.')
    WAR_MYTH = ('The chronicles of {civ} speak of {battle}, {description}. '
                '{outcome}, and the warriors of that day became the foundation '
                'of all the glory that followed.')
    LOVE_MYTH = ('Of all the tales of {civ}, none is held dearer than that of '
                 '{bond}. {obstacle}, {triumph}. So love prevailed, as the '
                 'singers say it always will.')
    MONSTER_MYTH = ('In the early days of {civ}, {monster} crept out of the wild '
                    'places and {threat}. {resolution}, and the tale still warns '
                    'all who would go unprepared into the unknown.')
    MAGIC_MYTH = ('The wisest of {civ} speak of {source}, which {power} {cost}. '
                  'None has found it in living memory, yet some say it waits for '
                  'one worthy of its gifts.')
    PROPHECY_MYTH = ('Long ago, {prophet} {prophecy}. The fulfillment will come '
                     '{condition}, and the children of {civ} watch for the signs '
                     'even now.')
    CURSE_MYTH = ('The elders of {civ} remember the curse laid by {source}, '
                  'decreeing {effect}. {remedy}, though the way remains hidden '
                  'in shadow.')
    REDEMPTION_MYTH = ('When {fall}, the people of {civ} believed all was lost. '
                       'But {redeemer} arose and {deed}, and from the ashes of the '
                       'old a greater people was born.')
    DEFAULT_MYTH = 'In ancient times, the people of {civ} learned wisdom through trials and tribulations.'

    @property
    def template(self) -> str:
        return self.value

    @property
    def fields(self) -> tuple:
        """Fragment names the template expects, in order of first use."""
        seen = []
        for _, name, _, _ in string.Formatter().parse(self.value):
            if name and name not in seen:
                seen.append(name)
        return tuple(seen)


MYTH_SHAPES = {
    MythType.CREATION:   Shape.CREATION_MYTH,
    MythType.HERO:       Shape.HERO_MYTH,
    MythType.TRAGEDY:    Shape.TRAGEDY_MYTH,
    MythType.WAR:        Shape.WAR_MYTH,
    MythType.LOVE:       Shape.LOVE_MYTH,
    MythType.MONSTER:    Shape.MONSTER_MYTH,
    MythType.MAGIC:      Shape.MAGIC_MYTH,
    MythType.PROPHECY:   Shape.PROPHECY_MYTH,
    MythType.CURSE:      Shape.CURSE_MYTH,
    MythType.REDEMPTION: Shape.REDEMPTION_MYTH,
}


def myth_shape(myth_type) -> Shape:
    return MYTH_SHAPES.get(myth_type, Shape.DEFAULT_MYTH)


def truncate_utf8(text, max_bytes: int = None) -> str:
    """Bound *text* to *max_bytes* of UTF-8.

    Characters are dropped from the end until the encoding fits.  If any
    were dropped and more than three characters remain, the last three are
    replaced by the ellipsis (three ASCII bytes, so the bound still holds).
    None or '' gives ''.
    """
    if not text:
        return ''
    if max_bytes is None:
        max_bytes = config.MAX_NAME_BYTES
    max_bytes = max(0, int(max_bytes))
    text = str(text)
    if len(text.encode('utf-8', 'surrogatepass')) <= max_bytes:
        return text

    used = 0
    cut = 0
    for ch in text:
        width = len(ch.encode('utf-8', 'surrogatepass'))
        if used + width > max_bytes:
            break
        used += width
        cut += 1
    out = text[:cut]
    if len(out) > 3:
        out = out[:-3] + config.ELLIPSIS
    return out


def compose(shape, max_bytes: int = None, **fragments) -> str:
    """Substitute *fragments* into *shape* and bound the result.

    *shape* is a Shape member or a raw template string.  Unknown or missing
    fragment names render as ''.
    """
    if shape is None:
        return ''
    template = shape.value if isinstance(shape, Shape) else str(shape)
    try:
        values = {}
        for _, name, _, _ in string.Formatter().parse(template):
            if name:
                v = fragments.get(name)
                values[name] = '' if v is None else str(v)
        text = template.format(**values)
    except (IndexError, KeyError, ValueError):
        # positional or malformed placeholders in a caller-supplied template
        text = template
    text = _WS.sub(' ', text).strip()
    return truncate_utf8(text, config.MAX_NAME_BYTES if max_bytes is None else max_bytes)
