"""Test NonEmptyString."""

import dataclasses

import pytest

from course_domain.core.enums import ErrorCode
from course_domain.core.errors import InvalidError
from course_domain.domain import NonEmptyString


class TestNonEmptyString:
    def test_keeps_text(self):
        assert NonEmptyString("Go for Production").value == "Go for Production"

    def test_trims_surrounding_whitespace(self):
        s = NonEmptyString("  My Product \n")
        assert s.value == "My Product"
        assert str(s) == "My Product"
        assert len(s) == 10

    @pytest.mark.parametrize("raw", ["", " ", "\t\n", "　"])
    def test_rejects_blank(self, raw):
        with pytest.raises(InvalidError, match="string cannot be empty") as excinfo:
            NonEmptyString(raw)
        assert excinfo.value.code == ErrorCode.INVALID
        assert excinfo.value.context["input_value"] == raw

    def test_rejects_non_string(self):
        with pytest.raises(InvalidError, match="must be text"):
            NonEmptyString(42)  # type: ignore[arg-type]

    def test_equality_by_content(self):
        assert NonEmptyString("abc") == NonEmptyString(" abc ")
        assert NonEmptyString("abc") != NonEmptyString("abd")
        assert hash(NonEmptyString("abc")) == hash(NonEmptyString("abc"))

    def test_not_equal_to_raw_str(self):
        assert NonEmptyString("abc") != "abc"

    def test_immutable(self):
        s = NonEmptyString("abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.value = "   "  # type: ignore[misc]
