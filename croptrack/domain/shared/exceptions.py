"""
Domain Exceptions

Defines custom exceptions for domain-specific errors with discriminated error
types. These exceptions represent business rule violations and domain
constraints raised by the crop aggregate and its collaborators.
"""

from enum import Enum
from uuid import UUID


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    NOT_FOUND = "not_found"
    IDENTIFIER_GENERATION = "identifier_generation"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class IdentifierGenerationError(DomainError):
    """Raised when the unique identifier source cannot produce a value."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Unable to generate identifier: {reason}",
            ErrorType.IDENTIFIER_GENERATION,
            {"reason": reason},
        )
        self.reason = reason


# Crop-related exceptions
class CropErrorCode(str, Enum):
    """Machine-readable codes for crop aggregate failures."""

    INVALID_AREA = "crop_invalid_area"
    INVALID_CROP_TYPE = "crop_invalid_crop_type"
    INVALID_CONTAINER_TYPE = "crop_container_invalid_type"
    INVALID_NOTE_CONTENT = "crop_note_invalid_content"
    NOTE_NOT_FOUND = "crop_note_not_found"


class CropError(DomainError):
    """Base class for crop-related errors."""

    def __init__(
        self,
        code: CropErrorCode,
        message: str,
        error_type: ErrorType = ErrorType.VALIDATION,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        crop_details = details or {}
        crop_details["error_code"] = code.value
        super().__init__(message, error_type, crop_details)
        self.code = code


class InvalidAreaError(CropError):
    """Raised when a crop is placed in an area without a valid identifier."""

    def __init__(self, area_id: UUID | None = None) -> None:
        super().__init__(
            CropErrorCode.INVALID_AREA,
            "Crop area must reference an existing area",
            details={"area_id": str(area_id) if area_id is not None else None},
        )
        self.area_id = area_id


class InvalidCropTypeError(CropError):
    """Raised when a crop type is not one of the known variants."""

    def __init__(self, value: object) -> None:
        super().__init__(
            CropErrorCode.INVALID_CROP_TYPE,
            f"Invalid crop type: {value!r}",
            details={"value": repr(value)},
        )
        self.value = value


class InvalidContainerTypeError(CropError):
    """Raised when a container type is not one of the known variants."""

    def __init__(self, value: object) -> None:
        super().__init__(
            CropErrorCode.INVALID_CONTAINER_TYPE,
            f"Invalid container type: {value!r}",
            details={"value": repr(value)},
        )
        self.value = value


class InvalidNoteContentError(CropError):
    """Raised when a crop note has no content."""

    def __init__(self) -> None:
        super().__init__(
            CropErrorCode.INVALID_NOTE_CONTENT,
            "Crop note content cannot be empty",
        )


class CropNoteNotFoundError(CropError):
    """Raised when a crop note cannot be located."""

    def __init__(self, note_id: str) -> None:
        super().__init__(
            CropErrorCode.NOTE_NOT_FOUND,
            f"Crop note not found: {note_id!r}",
            ErrorType.NOT_FOUND,
            {"note_id": note_id, "entity_type": "crop_note"},
        )
        self.note_id = note_id
