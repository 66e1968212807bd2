"""Domain enums for crop tracking."""

from enum import Enum


class CropTypeCode(str, Enum):
    """Crop growth stage codes."""

    SEEDING = "seeding"
    GROWING = "growing"

    def __str__(self) -> str:
        return self.value


class ContainerTypeCode(str, Enum):
    """Crop container codes."""

    TRAY = "tray"
    POT = "pot"

    @property
    def has_cells(self) -> bool:
        """Check if containers of this kind are divided into cells."""
        return self == ContainerTypeCode.TRAY

    def __str__(self) -> str:
        return self.value
