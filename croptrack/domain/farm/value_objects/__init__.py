"""Value objects for the farm domain."""

from .container import (
    CropContainer,
    CropContainerType,
    Pot,
    Tray,
    validate_crop_container,
)
from .crop_type import CropType, Growing, Seeding, validate_crop_type
from .enums import ContainerTypeCode, CropTypeCode
from .references import Area, InventoryMaterial

__all__ = [
    "Area",
    "InventoryMaterial",
    "CropType",
    "CropTypeCode",
    "Seeding",
    "Growing",
    "validate_crop_type",
    "CropContainer",
    "CropContainerType",
    "ContainerTypeCode",
    "Tray",
    "Pot",
    "validate_crop_container",
]
