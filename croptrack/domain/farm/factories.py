"""Builder for creating crop batches."""

from ..shared.events import DomainEventPublisher
from ..shared.identifiers import IdentifierGenerator
from .entities import Crop
from .value_objects.container import CropContainer, CropContainerType
from .value_objects.crop_type import CropType
from .value_objects.references import Area, InventoryMaterial


class CropBatchBuilder:
    """Builder for creating Crop aggregates with fluent interface.

    Every value is applied through the aggregate's own operations, so the
    built crop satisfies the same rules as one mutated step by step. With a
    publisher, the recorded events are published once the crop is built.
    """

    def __init__(
        self,
        area: Area,
        id_generator: IdentifierGenerator | None = None,
        publisher: DomainEventPublisher | None = None,
    ):
        self._area = area
        self._id_generator = id_generator
        self._publisher = publisher
        self._batch_id: str | None = None
        self._crop_type: CropType | None = None
        self._container: CropContainer | None = None
        self._inventory: InventoryMaterial | None = None
        self._moves: list[Area] = []
        self._notes: list[str] = []

    def batch(self, batch_id: str) -> "CropBatchBuilder":
        """Set external batch reference."""
        self._batch_id = batch_id
        return self

    def crop_type(self, crop_type: CropType) -> "CropBatchBuilder":
        """Set crop type."""
        self._crop_type = crop_type
        return self

    def container(
        self, container_type: CropContainerType, quantity: int
    ) -> "CropBatchBuilder":
        """Set container type and quantity."""
        self._container = CropContainer(quantity=quantity, type=container_type)
        return self

    def inventory(self, material: InventoryMaterial) -> "CropBatchBuilder":
        """Set inventory material."""
        self._inventory = material
        return self

    def move_to(self, area: Area) -> "CropBatchBuilder":
        """Place the batch in an additional area."""
        self._moves.append(area)
        return self

    def note(self, content: str) -> "CropBatchBuilder":
        """Add a note."""
        self._notes.append(content)
        return self

    def build(self) -> Crop:
        """Build the Crop aggregate."""
        crop = Crop.create_batch(self._area, id_generator=self._id_generator)

        if self._batch_id is not None:
            crop.change_batch_id(self._batch_id)
        if self._crop_type is not None:
            crop.change_crop_type(self._crop_type)
        if self._container is not None:
            crop.change_container(self._container)
        if self._inventory is not None:
            crop.assign_inventory(self._inventory)
        for area in self._moves:
            crop.move_to_area(area)
        for content in self._notes:
            crop.add_new_note(content)

        if self._publisher is not None:
            self._publisher.publish_events(crop)

        return crop
