"""Test the UUID value object."""

import uuid
from unittest.mock import patch

import pytest

from course_domain.core.enums import ErrorCode
from course_domain.core.errors import InternalError, InvalidError
from course_domain.domain import UUID


class TestGenerate:
    def test_generated_is_not_nil(self):
        assert not UUID.generate().is_nil

    def test_generated_is_v4(self):
        assert UUID.generate().value.version == 4

    def test_generated_ids_are_unique(self):
        ids = {UUID.generate() for _ in range(1000)}
        assert len(ids) == 1000

    def test_entropy_failure_is_internal(self):
        with patch(
            "course_domain.domain.identity.new_uuid",
            side_effect=OSError("no entropy"),
        ):
            with pytest.raises(InternalError, match="failed to generate UUID") as excinfo:
                UUID.generate()
        assert excinfo.value.code == ErrorCode.INTERNAL
        assert isinstance(excinfo.value.__cause__, OSError)


class TestNil:
    def test_nil_is_nil(self):
        assert UUID.nil().is_nil
        assert str(UUID.nil()) == "00000000-0000-0000-0000-000000000000"

    def test_nil_equality(self):
        assert UUID.nil() == UUID(uuid.UUID(int=0))


class TestParse:
    def test_parse_canonical(self):
        raw = "123e4567-e89b-12d3-a456-426614174000"
        parsed = UUID.parse(raw)
        assert str(parsed) == raw
        assert not parsed.is_nil

    def test_parse_uppercase(self):
        parsed = UUID.parse("123E4567-E89B-12D3-A456-426614174000")
        assert str(parsed) == "123e4567-e89b-12d3-a456-426614174000"

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "123e4567-e89b-12d3-a456"])
    def test_parse_invalid(self, raw):
        with pytest.raises(InvalidError, match="failed to parse UUID"):
            UUID.parse(raw)

    def test_parse_non_string(self):
        with pytest.raises(InvalidError):
            UUID.parse(None)  # type: ignore[arg-type]

    def test_constructor_requires_uuid(self):
        with pytest.raises(InvalidError, match="must be a uuid.UUID"):
            UUID("123e4567-e89b-12d3-a456-426614174000")  # type: ignore[arg-type]
