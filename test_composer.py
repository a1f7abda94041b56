"""
test_composer.py — pytest suite for loreforge.composer
=======================================================
Covers: truncate_utf8 (byte bound, multi-byte worst cases, ellipsis rule),
compose() substitution / whitespace handling / idempotence, Shape fields.
"""

import pytest

from loreforge import config
from loreforge.categories import MythType
from loreforge.composer import MYTH_SHAPES, Shape, compose, myth_shape, truncate_utf8


def _nbytes(text: str) -> int:
    return len(text.encode('utf-8'))


# ─────────────────────────────────────────────────────
# truncate_utf8
# ─────────────────────────────────────────────────────

class TestTruncateUtf8:
    def test_none_and_empty(self):
        assert truncate_utf8(None) == ''
        assert truncate_utf8('') == ''

    def test_short_text_untouched(self):
        assert truncate_utf8('Ironhold', 110) == 'Ironhold'

    def test_exact_fit_untouched(self):
        text = 'x' * 110
        assert truncate_utf8(text, 110) == text

    def test_ascii_overflow_gets_ellipsis(self):
        out = truncate_utf8('abcdefghij', 6)
        assert out == 'abc...'
        assert _nbytes(out) == 6

    def test_three_or_fewer_chars_left_are_returned_as_is(self):
        assert truncate_utf8('abcdef', 3) == 'abc'
        assert truncate_utf8('abcdef', 2) == 'ab'

    def test_zero_bound(self):
        assert truncate_utf8('abc', 0) == ''

    @pytest.mark.parametrize("char,width", [
        ('é', 2), ('€', 3), ('城', 3), ('😀', 4), ('𝔄', 4),
    ])
    def test_multibyte_worst_cases_stay_in_bound(self, char, width):
        assert _nbytes(char) == width
        text = char * 200
        for bound in (110, 111, 112, 113, 50, 20):
            out = truncate_utf8(text, bound)
            assert _nbytes(out) <= bound
            assert out.endswith(config.ELLIPSIS)
            # never splits a character: every kept char is whole
            assert set(out[:-3]) <= {char}

    def test_mixed_width_text(self):
        text = 'Ægir ' + '城' * 40 + ' 😀 end'
        out = truncate_utf8(text, 110)
        assert _nbytes(out) <= 110
        assert out.startswith('Ægir ')

    def test_default_bound_is_name_bound(self):
        out = truncate_utf8('€' * 100)
        assert _nbytes(out) <= config.MAX_NAME_BYTES

    def test_euro_run_exact_result(self):
        # 36 euros fit in 108 bytes; last three become the ellipsis
        out = truncate_utf8('€' * 100, 110)
        assert out == '€' * 33 + '...'


# ─────────────────────────────────────────────────────
# compose
# ─────────────────────────────────────────────────────

class TestCompose:
    def test_adjective_noun(self):
        assert compose(Shape.ADJECTIVE_NOUN, adjective='Golden', noun='Reach') == 'Golden Reach'

    def test_prefix_subject_suffix(self):
        assert compose(Shape.PREFIX_SUBJECT_SUFFIX, prefix='Old', subject='Stone',
                       suffix='Rites') == 'Old Stone Rites'

    def test_compound_joins_without_space(self):
        assert compose(Shape.COMPOUND, head='Frost', tail='hold') == 'Frosthold'

    def test_missing_fragment_renders_empty_without_stray_spaces(self):
        assert compose(Shape.PREFIX_SUBJECT_SUFFIX, subject='Stone') == 'Stone'
        assert compose(Shape.ADJECTIVE_NOUN, adjective='', noun='War') == 'War'
        assert compose(Shape.COMPOUND) == ''

    def test_none_fragment_renders_empty(self):
        assert compose(Shape.NOUN_OF_SUBJECT, noun='Statue', subject=None) == 'Statue of'

    def test_extra_fragments_ignored(self):
        assert compose(Shape.ORDER_OF, subject='Eclipse', unused='x') == 'Order of the Eclipse'

    def test_none_shape(self):
        assert compose(None, noun='x') == ''

    def test_raw_template_string(self):
        assert compose('{a}-{b}', a='x', b='y') == 'x-y'

    def test_malformed_template_never_raises(self):
        assert compose('{0} and {', a='x') != ''

    def test_braces_in_fragments_are_literal(self):
        assert compose(Shape.ADJECTIVE_NOUN, adjective='{noun}', noun='Keep') == '{noun} Keep'

    def test_result_is_bounded(self):
        out = compose(Shape.NOUN_OF_SUBJECT, noun='Temple', subject='城' * 100)
        assert _nbytes(out) <= config.MAX_NAME_BYTES

    def test_explicit_bound(self):
        out = compose(Shape.NOUN_OF_SUBJECT, max_bytes=12, noun='Temple', subject='Aeondor')
        assert out == 'Temple of...'

    def test_text_bound_for_narratives(self):
        frags = {name: 'ü' * 80 for name in Shape.CREATION_MYTH.fields}
        out = compose(Shape.CREATION_MYTH, max_bytes=config.MAX_TEXT_BYTES, **frags)
        assert _nbytes(out) <= config.MAX_TEXT_BYTES


class TestComposeIdempotence:
    @pytest.mark.parametrize("shape", list(Shape), ids=lambda s: s.name)
    def test_same_fragments_same_bytes(self, shape):
        frags = {name: f'{name.title()}ø' for name in shape.fields}
        first = compose(shape, max_bytes=config.MAX_TEXT_BYTES, **frags)
        second = compose(shape, max_bytes=config.MAX_TEXT_BYTES, **frags)
        assert first.encode('utf-8') == second.encode('utf-8')


# ─────────────────────────────────────────────────────
# Shapes
# ─────────────────────────────────────────────────────

class TestShapes:
    def test_fields_in_order_of_first_use(self):
        assert Shape.PREFIX_SUBJECT_SUFFIX.fields == ('prefix', 'subject', 'suffix')
        assert Shape.ORDER_OF.fields == ('subject',)

    def test_every_myth_type_has_a_narrative(self):
        assert set(MYTH_SHAPES) == set(MythType)
        for myth_type in MythType:
            assert 'civ' in myth_shape(myth_type).fields

    def test_unknown_myth_type_gets_default(self):
        assert myth_shape(None) is Shape.DEFAULT_MYTH
