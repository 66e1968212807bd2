"""Unit tests for identifier generation."""

from uuid import UUID

import pytest

from croptrack.domain.shared import identifiers
from croptrack.domain.shared.exceptions import ErrorType, IdentifierGenerationError
from croptrack.domain.shared.identifiers import (
    NIL_UUID,
    SequentialIdentifierGenerator,
    ensure_identifier,
    generate_identifier,
    is_nil,
)


class TestGenerateIdentifier:
    def test_generates_random_uuids(self):
        first = generate_identifier()
        second = generate_identifier()

        assert first.version == 4
        assert first != second

    @pytest.mark.parametrize("error", [OSError("no entropy"), NotImplementedError("urandom")])
    def test_entropy_failure_raises_generation_error(self, monkeypatch, error):
        def broken_uuid4():
            raise error

        monkeypatch.setattr(identifiers, "uuid4", broken_uuid4)

        with pytest.raises(IdentifierGenerationError) as exc_info:
            generate_identifier()

        assert exc_info.value.__cause__ is error
        assert exc_info.value.error_type == ErrorType.IDENTIFIER_GENERATION

    def test_nil_uuid_rejected(self):
        with pytest.raises(IdentifierGenerationError):
            ensure_identifier(NIL_UUID)

    def test_is_nil(self):
        assert is_nil(None)
        assert is_nil(NIL_UUID)
        assert not is_nil(UUID(int=1))


class TestSequentialIdentifierGenerator:
    def test_yields_in_order(self):
        generator = SequentialIdentifierGenerator([UUID(int=1), UUID(int=2)])

        assert generator() == UUID(int=1)
        assert generator() == UUID(int=2)

    def test_exhaustion_raises_generation_error(self):
        generator = SequentialIdentifierGenerator([UUID(int=1)])
        generator()

        with pytest.raises(IdentifierGenerationError, match="exhausted"):
            generator()

    def test_nil_in_sequence_rejected(self):
        generator = SequentialIdentifierGenerator([NIL_UUID])

        with pytest.raises(IdentifierGenerationError):
            generator()
