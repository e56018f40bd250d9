"""Tests for stringification and define()."""

import pytest

from stringtools import Ref, Settings, define, stringify


class TestDefine:
    """define() returns the value or the empty string."""

    def test_none_becomes_empty_string(self):
        assert define(None) == ''
        assert define() == ''

    def test_defined_values_pass_through(self):
        assert define(0) == 0
        assert define('x') == 'x'
        assert define('') == ''


class TestStringify:
    """Scalars, sequences, mappings and indirections."""

    @pytest.mark.parametrize("value,expected", [
        (None, ''),
        ('abc', 'abc'),
        (42, '42'),
        (1.5, '1.5'),
        (0, '0'),
        (True, 'true'),
        (False, 'false'),
    ])
    def test_scalars(self, value, expected):
        assert stringify(value) == expected

    def test_sequence_joined_with_single_space(self):
        assert stringify(['a', 'b', 3]) == 'a b 3'
        assert stringify(('x', 'y')) == 'x y'
        assert stringify([]) == ''

    def test_none_elements_are_empty(self):
        assert stringify(['a', None]) == 'a '

    def test_mapping_flattened_to_keys_and_values(self):
        assert stringify({'a': 1, 'b': 'x'}) == 'a 1 b x'

    def test_nested_sequences_are_not_flattened(self):
        assert stringify(['a', ['b', 'c']]) == "a ['b', 'c']"

    def test_ref_resolves_to_target(self):
        assert stringify(Ref('x')) == 'x'
        assert stringify(Ref(7)) == '7'

    def test_ref_chain_resolves_recursively(self):
        assert stringify(Ref(Ref(['a', 'b']))) == 'a b'
        assert stringify(Ref(Ref(Ref(None)))) == ''

    def test_cyclic_ref_is_empty(self):
        ref = Ref()
        object.__setattr__(ref, 'target', ref)
        assert stringify(ref) == ''

    def test_unknown_objects_use_str(self):
        class Thing:
            def __str__(self):
                return 'a thing'

        assert stringify(Thing()) == 'a thing'

    def test_broken_str_falls_back_to_repr(self):
        class Broken:
            def __str__(self):
                raise RuntimeError("no")

        assert stringify(Broken()).startswith('<')

    def test_list_separator_setting(self):
        settings = Settings(list_separator=',')
        assert stringify(['a', 'b'], settings=settings) == 'a,b'
        assert stringify({'k': 'v'}, settings=settings) == 'k,v'
