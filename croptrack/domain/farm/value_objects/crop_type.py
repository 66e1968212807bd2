"""Crop type variants: the growth stage a crop batch is in."""

from typing import Literal

from ...shared.base import ValueObject
from ...shared.exceptions import InvalidCropTypeError
from .enums import CropTypeCode


class CropType(ValueObject):
    """Base for crop type variants. Only Seeding and Growing are valid."""

    code: str

    @classmethod
    def from_code(cls, code: str | CropTypeCode) -> "CropType":
        """Create the crop type variant for a wire code."""
        try:
            type_code = CropTypeCode(code)
        except ValueError:
            raise InvalidCropTypeError(code) from None

        return _CROP_TYPES[type_code]()


class Seeding(CropType):
    """Crop batch is germinating from seed."""

    code: Literal["seeding"] = CropTypeCode.SEEDING.value


class Growing(CropType):
    """Crop batch has been transplanted and is growing on."""

    code: Literal["growing"] = CropTypeCode.GROWING.value


_CROP_TYPES: dict[CropTypeCode, type[CropType]] = {
    CropTypeCode.SEEDING: Seeding,
    CropTypeCode.GROWING: Growing,
}


def validate_crop_type(crop_type: object) -> CropType:
    """
    Check that a value is one of the crop type variants.

    Raises:
        InvalidCropTypeError: If the value is not Seeding or Growing
    """
    if isinstance(crop_type, Seeding):
        return crop_type
    elif isinstance(crop_type, Growing):
        return crop_type
    raise InvalidCropTypeError(crop_type)
