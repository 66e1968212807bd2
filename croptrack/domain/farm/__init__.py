"""
Farm Domain

Crop batch tracking: the Crop aggregate root, its crop type and container
variants, and the notes recorded against a batch.
"""

from .entities import (
    Crop,
    CropBatchCreated,
    CropBatchIdChanged,
    CropContainerChanged,
    CropMoved,
    CropNote,
    CropNoteAdded,
    CropNoteRemoved,
    CropTypeChanged,
)
from .factories import CropBatchBuilder
from .value_objects import (
    Area,
    ContainerTypeCode,
    CropContainer,
    CropContainerType,
    CropType,
    CropTypeCode,
    Growing,
    InventoryMaterial,
    Pot,
    Seeding,
    Tray,
    validate_crop_container,
    validate_crop_type,
)

__all__ = [
    # Aggregate
    "Crop",
    "CropNote",
    "CropBatchBuilder",
    # Value objects
    "Area",
    "InventoryMaterial",
    "CropType",
    "CropTypeCode",
    "Seeding",
    "Growing",
    "CropContainer",
    "CropContainerType",
    "ContainerTypeCode",
    "Tray",
    "Pot",
    "validate_crop_type",
    "validate_crop_container",
    # Domain events
    "CropBatchCreated",
    "CropBatchIdChanged",
    "CropContainerChanged",
    "CropMoved",
    "CropNoteAdded",
    "CropNoteRemoved",
    "CropTypeChanged",
]
