"""Tests for trim(), trim_lines() and shrink()."""

import re

import pytest

from stringtools import InvalidPatternError, Settings, shrink, trim, trim_lines


class TestTrim:
    """Whole-string trimming."""

    def test_default_trims_blank_characters(self):
        assert trim('  x  ') == 'x'
        assert trim("  This is  a    test\n") == 'This is  a    test'
        assert trim("\t\0x\r\n") == 'x'

    def test_positional_lead_and_rear(self):
        assert trim('--This is a test==', '-', '=') == '-This is a test='

    def test_named_lead_and_rear(self):
        assert trim('  This is a test!!', rear=r'[.?!]+', lead=r'\s+') == 'This is a test'

    def test_rear_defaults_to_lead(self):
        assert trim('--x--', '-') == '-x-'
        assert trim('--x--', '-+') == 'x'

    def test_only_rear_given_keeps_default_lead(self):
        assert trim('  Hi!!', rear=r'[.?!]+') == 'Hi'

    def test_empty_pattern_disables_side(self):
        assert trim('  x  ', '') == '  x  '
        assert trim('  x  ', lead='', rear=r'\s+') == '  x'
        assert trim('  x  ', rear='') == 'x  '

    def test_compiled_patterns(self):
        assert trim('aaxbb', re.compile('a+'), re.compile('b+')) == 'x'
        assert trim('AAxaa', re.compile('a+', re.IGNORECASE)) == 'x'

    def test_verbose_pattern_with_trailing_comment(self):
        pattern = re.compile('a+  # run of a', re.VERBOSE)
        assert trim('aaxa', pattern, '') == 'xa'
        assert trim('aaxa', pattern) == 'x'

    def test_alternation_stays_anchored(self):
        assert trim('ab-x-ab', 'a|b') == 'b-x-a'

    def test_none_and_non_strings(self):
        assert trim(None) == ''
        assert trim() == ''
        assert trim(42) == '42'
        assert trim(['', 'a', '']) == 'a'

    def test_all_blank_string(self):
        assert trim("   \n ") == ''

    @pytest.mark.parametrize("text", ['  x  ', "\n\tx y\t\n", 'x', '', ' \x00 '])
    def test_idempotent_with_default_pattern(self, text):
        assert trim(trim(text)) == trim(text)

    def test_invalid_pattern_raises(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            trim('x', '(')
        assert exc_info.value.pattern == '('
        assert isinstance(exc_info.value, ValueError)

    def test_invalid_rear_pattern_raises(self):
        with pytest.raises(InvalidPatternError, match="rear"):
            trim('x', 'x', '[')

    def test_custom_blank_class_is_default_lead(self):
        settings = Settings(blank='[-]')
        assert trim('--x--', settings=settings) == 'x'
        assert trim('  x  ', settings=settings) == '  x  '


class TestTrimLines:
    """Per-line trimming."""

    def test_tab_indented_block(self):
        text = "\tfoo  \n\t\tbar\t\n"
        assert trim_lines(text) == "foo\nbar\n"

    def test_empty_lines_survive(self):
        assert trim_lines("  a\n\n  b  ") == "a\n\nb"
        assert trim_lines("\n\n") == "\n\n"

    def test_custom_patterns_per_line(self):
        assert trim_lines("--a==\n--b==", '-', '=') == "-a=\n-b="

    def test_line_endings_preserved(self):
        assert trim_lines(" a \r\n b \r c ") == "a\r\nb\rc"

    def test_single_line_matches_trim(self):
        assert trim_lines('  x  ') == trim('  x  ')

    def test_invalid_pattern_raises(self):
        with pytest.raises(InvalidPatternError):
            trim_lines("a\nb", lead='*')


class TestShrink:

    def test_trims_and_collapses(self):
        assert shrink("  This is  a    test\n") == 'This is a test'
        assert shrink("a\t\nb") == 'a b'

    def test_none(self):
        assert shrink(None) == ''

    def test_custom_thread(self):
        settings = Settings(thread='_')
        assert shrink(' This  is a\ttest ', settings=settings) == 'This_is_a_test'

    def test_thread_is_literal(self):
        settings = Settings(thread='\\1')
        assert shrink('a b', settings=settings) == 'a\\1b'
