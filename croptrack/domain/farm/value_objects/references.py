"""References to aggregates owned by other parts of the farm system."""

from uuid import UUID

from ...shared.base import ValueObject
from ...shared.identifiers import NIL_UUID, is_nil


class Area(ValueObject):
    """An area where crops are grown, identified by the area aggregate's UID."""

    uid: UUID = NIL_UUID
    name: str = ""

    @property
    def is_identified(self) -> bool:
        """Check if the area references a real area aggregate."""
        return not is_nil(self.uid)


class InventoryMaterial(ValueObject):
    """Inventory material a crop batch is planted from. Stored as given."""

    uid: UUID | None = None
    plant_type: str = ""
    variety: str = ""
