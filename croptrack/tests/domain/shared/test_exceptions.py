"""Unit tests for the domain error taxonomy."""

from uuid import uuid4

import pytest

from croptrack.domain.shared.exceptions import (
    CropError,
    CropErrorCode,
    CropNoteNotFoundError,
    DomainError,
    ErrorType,
    IdentifierGenerationError,
    InvalidAreaError,
    InvalidContainerTypeError,
    InvalidCropTypeError,
    InvalidNoteContentError,
)


class TestCropErrors:
    @pytest.mark.parametrize(
        "error, code, error_type",
        [
            (InvalidAreaError(), CropErrorCode.INVALID_AREA, ErrorType.VALIDATION),
            (InvalidCropTypeError("x"), CropErrorCode.INVALID_CROP_TYPE, ErrorType.VALIDATION),
            (
                InvalidContainerTypeError("x"),
                CropErrorCode.INVALID_CONTAINER_TYPE,
                ErrorType.VALIDATION,
            ),
            (InvalidNoteContentError(), CropErrorCode.INVALID_NOTE_CONTENT, ErrorType.VALIDATION),
            (CropNoteNotFoundError("x"), CropErrorCode.NOTE_NOT_FOUND, ErrorType.NOT_FOUND),
        ],
    )
    def test_codes_and_types(self, error, code, error_type):
        assert isinstance(error, CropError)
        assert isinstance(error, DomainError)
        assert error.code == code
        assert error.error_type == error_type
        assert error.details["error_code"] == code.value

    def test_invalid_area_details(self):
        area_id = uuid4()

        error = InvalidAreaError(area_id)

        assert error.area_id == area_id
        assert error.details["area_id"] == str(area_id)

    def test_note_not_found_to_dict(self):
        error = CropNoteNotFoundError("abc")

        assert error.to_dict() == {
            "type": "not_found",
            "message": "Crop note not found: 'abc'",
            "details": {
                "note_id": "abc",
                "entity_type": "crop_note",
                "error_code": "crop_note_not_found",
            },
        }

    def test_identifier_generation_error_is_not_a_crop_error(self):
        error = IdentifierGenerationError("exhausted")

        assert isinstance(error, DomainError)
        assert not isinstance(error, CropError)
        assert str(error) == "Unable to generate identifier: exhausted"
