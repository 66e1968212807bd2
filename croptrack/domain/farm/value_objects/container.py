"""Crop container value objects."""

from typing import Any, Literal

from pydantic import SerializeAsAny, field_validator

from ...shared.base import ValueObject
from ...shared.exceptions import InvalidContainerTypeError
from .enums import ContainerTypeCode


class CropContainerType(ValueObject):
    """Base for container variants. Only Tray and Pot are valid."""

    code: str

    @classmethod
    def from_code(cls, code: str | ContainerTypeCode, **data: Any) -> "CropContainerType":
        """
        Create the container variant for a wire code.

        Args:
            code: Container code ("tray" or "pot")
            **data: Variant data, e.g. ``cell`` for trays

        Raises:
            InvalidContainerTypeError: If the code is unknown
        """
        try:
            type_code = ContainerTypeCode(code)
        except ValueError:
            raise InvalidContainerTypeError(code) from None

        return _CONTAINER_TYPES[type_code](**data)


class Tray(CropContainerType):
    """Seed tray divided into cells."""

    code: Literal["tray"] = ContainerTypeCode.TRAY.value
    cell: int = 0


class Pot(CropContainerType):
    """Single pot."""

    code: Literal["pot"] = ContainerTypeCode.POT.value


_CONTAINER_TYPES: dict[ContainerTypeCode, type[CropContainerType]] = {
    ContainerTypeCode.TRAY: Tray,
    ContainerTypeCode.POT: Pot,
}


class CropContainer(ValueObject):
    """
    How a crop batch is contained: a count of containers of one kind.

    Quantity is not range-checked.
    """

    quantity: int = 0
    type: SerializeAsAny[CropContainerType] | None = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, v):
        """Build container variants from their serialized form."""
        if isinstance(v, dict):
            data = dict(v)
            return CropContainerType.from_code(data.pop("code", None), **data)
        return v

    @property
    def total_cells(self) -> int | None:
        """Get the number of cells across all trays, or None for cell-less containers."""
        if isinstance(self.type, Tray):
            return self.quantity * self.type.cell
        return None


def validate_crop_container(container: object) -> CropContainer:
    """
    Check that a container's type is one of the container variants.

    Raises:
        InvalidContainerTypeError: If the container type is not Tray or Pot
    """
    if not isinstance(container, CropContainer):
        raise InvalidContainerTypeError(container)

    if isinstance(container.type, Tray):
        return container
    elif isinstance(container.type, Pot):
        return container
    raise InvalidContainerTypeError(container.type)
