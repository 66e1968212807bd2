"""Farm domain entities."""

from .crop import (
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

__all__ = [
    # Entities
    "Crop",
    "CropNote",
    # Domain events
    "CropBatchCreated",
    "CropBatchIdChanged",
    "CropContainerChanged",
    "CropMoved",
    "CropNoteAdded",
    "CropNoteRemoved",
    "CropTypeChanged",
]
