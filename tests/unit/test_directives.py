"""
Tests for directive catalogue.
"""

import dataclasses

import pytest

from posix_time.translator import (
    DIRECTIVES,
    lookup,
    supported_directives,
    unsupported_directives,
)


class TestLookup:
    def test_known(self):
        directive = lookup("Y")
        assert directive.replacement == "2006"
        assert directive.token == "%Y"
        assert directive.supported is True

    def test_unsupported(self):
        directive = lookup("w")
        assert directive.replacement is None
        assert directive.supported is False

    def test_unknown(self):
        assert lookup("q") is None

    def test_escape_is_self(self):
        assert lookup("%").replacement == "%"


class TestCatalogue:
    def test_unsupported_set(self):
        chars = {d.char for d in unsupported_directives()}
        assert chars == {"U", "u", "V", "W", "w", "X", "x"}

    def test_split_covers_table(self):
        total = len(supported_directives()) + len(unsupported_directives())
        assert total == len(DIRECTIVES)

    def test_b_and_h_agree(self):
        assert lookup("b").replacement == lookup("h").replacement == "Jan"

    def test_every_directive_described(self):
        assert all(d.description for d in DIRECTIVES.values())

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            DIRECTIVES["q"] = None

    def test_directive_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            lookup("Y").replacement = "06"
