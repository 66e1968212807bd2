"""Crop aggregate root for tracking a batch of plants grown in an area."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, PrivateAttr, computed_field, field_validator

from croptrack.core.observability import get_logger

from ...shared.base import AggregateRoot, DomainEvent, ValueObject
from ...shared.exceptions import (
    CropNoteNotFoundError,
    InvalidAreaError,
    InvalidNoteContentError,
)
from ...shared.identifiers import (
    IdentifierGenerator,
    ensure_identifier,
    generate_identifier,
)
from ..value_objects.container import CropContainer, validate_crop_container
from ..value_objects.crop_type import CropType, validate_crop_type
from ..value_objects.references import Area, InventoryMaterial

logger = get_logger(__name__)

HOURS_PER_DAY = 24


class CropBatchCreated(DomainEvent):
    """Event raised when a crop batch is started in an area."""

    area_id: UUID


class CropTypeChanged(DomainEvent):
    """Event raised when the crop type of a batch changes."""

    old_type: str | None
    new_type: str


class CropContainerChanged(DomainEvent):
    """Event raised when a batch is moved into different containers."""

    quantity: int
    container_type: str


class CropBatchIdChanged(DomainEvent):
    """Event raised when the external batch reference changes."""

    old_batch_id: str
    new_batch_id: str


class CropMoved(DomainEvent):
    """Event raised when a batch is placed in an additional area."""

    area_id: UUID


class CropNoteAdded(DomainEvent):
    """Event raised when a note is recorded against a batch."""

    note_id: UUID


class CropNoteRemoved(DomainEvent):
    """Event raised when a note is removed from a batch."""

    note_id: UUID


class CropNote(ValueObject):
    """A free-text observation recorded against a crop batch."""

    uid: UUID
    content: str
    created_date: datetime = Field(default_factory=datetime.utcnow)

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v):
        if not v:
            raise InvalidNoteContentError()
        return v


def _validate_area(area: object) -> Area:
    if not isinstance(area, Area) or not area.is_identified:
        raise InvalidAreaError(getattr(area, "uid", None))
    return area


class Crop(AggregateRoot):
    """
    Crop aggregate root representing a batch of plants.

    A batch starts in one area, may be given a crop type (seeding or growing),
    a container, and any number of notes. All mutation goes through the
    aggregate's methods, which validate before changing any state.
    """

    batch_id: str = ""
    initial_area: Area = Field(frozen=True)
    crop_type: CropType | None = None
    inventory: InventoryMaterial | None = None
    container: CropContainer | None = None

    # Collections (managed internally)
    _current_areas: list[Area] = PrivateAttr(default_factory=list)
    _notes: dict[UUID, CropNote] = PrivateAttr(default_factory=dict)
    _id_generator: IdentifierGenerator | None = PrivateAttr(default=None)

    @field_validator("initial_area")
    @classmethod
    def initial_area_identified(cls, v):
        return _validate_area(v)

    @field_validator("crop_type", mode="before")
    @classmethod
    def parse_crop_type(cls, v):
        """Build crop type variants from their serialized form."""
        if isinstance(v, dict):
            return CropType.from_code(v.get("code"))
        return v

    @field_validator("crop_type")
    @classmethod
    def crop_type_known(cls, v):
        if v is None:
            return v
        return validate_crop_type(v)

    @field_validator("container")
    @classmethod
    def container_type_known(cls, v):
        if v is None:
            return v
        return validate_crop_container(v)

    def model_post_init(self, __context: Any) -> None:
        self._current_areas = [self.initial_area]

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> "Crop":
        """
        Validate a crop, restoring the areas and notes of a dumped aggregate.

        The `current_areas` and `notes` entries written by `model_dump` are
        validated with the same rules as `move_to_area` and `add_new_note`.
        """
        crop = super().model_validate(obj, *args, **kwargs)
        if isinstance(obj, dict):
            crop._restore_collections(obj)
        return crop

    def _restore_collections(self, data: dict[str, Any]) -> None:
        areas = data.get("current_areas")
        if areas:
            self._current_areas = [
                _validate_area(Area.model_validate(area)) for area in areas
            ]

        notes = data.get("notes")
        if notes:
            restored = [CropNote.model_validate(note) for note in notes.values()]
            self._notes = {note.uid: note for note in restored}

    def __copy__(self) -> "Crop":
        copied = super().__copy__()
        copied._current_areas = list(self._current_areas)
        copied._notes = dict(self._notes)
        return copied

    @computed_field  # type: ignore[prop-decorator]
    @property
    def current_areas(self) -> list[Area]:
        """Areas the batch currently occupies, in the order it was placed."""
        return list(self._current_areas)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def notes(self) -> dict[UUID, CropNote]:
        """Notes keyed by their UID."""
        return dict(self._notes)

    @property
    def note_count(self) -> int:
        """Get number of notes."""
        return len(self._notes)

    def is_valid(self) -> bool:
        """Validate business rules."""
        return (
            self.initial_area.is_identified
            and bool(self._current_areas)
            and all(area.is_identified for area in self._current_areas)
            and all(uid == note.uid and note.content for uid, note in self._notes.items())
        )

    def get_note(self, uid: UUID) -> CropNote | None:
        """Get a note by its UID."""
        return self._notes.get(uid)

    def change_crop_type(self, crop_type: CropType) -> None:
        """
        Replace the crop type.

        Args:
            crop_type: Seeding or Growing

        Raises:
            InvalidCropTypeError: If crop_type is not a known variant
        """
        validate_crop_type(crop_type)

        old_type = self.crop_type
        self.crop_type = crop_type
        self.mark_updated()

        logger.debug(
            "crop_type_changed", crop_uid=str(self.uid), crop_type=crop_type.code
        )
        self.add_domain_event(
            CropTypeChanged(
                aggregate_id=self.uid,
                old_type=old_type.code if old_type else None,
                new_type=crop_type.code,
            )
        )

    def change_container(self, container: CropContainer) -> None:
        """
        Replace the container, including its quantity.

        Args:
            container: Container holding a Tray or Pot type

        Raises:
            InvalidContainerTypeError: If the container type is not a known variant
        """
        validate_crop_container(container)

        self.container = container
        self.mark_updated()

        logger.debug(
            "crop_container_changed",
            crop_uid=str(self.uid),
            container_type=container.type.code,
            quantity=container.quantity,
        )
        self.add_domain_event(
            CropContainerChanged(
                aggregate_id=self.uid,
                quantity=container.quantity,
                container_type=container.type.code,
            )
        )

    def change_batch_id(self, batch_id: str) -> None:
        """Set the external batch reference."""
        old_batch_id = self.batch_id
        self.batch_id = batch_id
        self.mark_updated()

        self.add_domain_event(
            CropBatchIdChanged(
                aggregate_id=self.uid,
                old_batch_id=old_batch_id,
                new_batch_id=batch_id,
            )
        )

    def assign_inventory(self, inventory: InventoryMaterial | None) -> None:
        """Record the inventory material the batch is planted from."""
        self.inventory = inventory
        self.mark_updated()

    def move_to_area(self, area: Area) -> None:
        """
        Place the batch in an additional area.

        Raises:
            InvalidAreaError: If the area has no valid identifier
        """
        _validate_area(area)

        self._current_areas.append(area)
        self.mark_updated()

        logger.debug("crop_moved", crop_uid=str(self.uid), area_uid=str(area.uid))
        self.add_domain_event(CropMoved(aggregate_id=self.uid, area_id=area.uid))

    def add_new_note(self, content: str) -> CropNote:
        """
        Record a note against the batch.

        Args:
            content: Note text, must not be empty

        Returns:
            The new note

        Raises:
            InvalidNoteContentError: If content is empty
            IdentifierGenerationError: If no note identifier can be generated
        """
        if not content:
            raise InvalidNoteContentError()

        note = CropNote(
            uid=ensure_identifier((self._id_generator or generate_identifier)()),
            content=content,
            created_date=datetime.utcnow(),
        )
        self._notes[note.uid] = note
        self.mark_updated()

        logger.debug("crop_note_added", crop_uid=str(self.uid), note_uid=str(note.uid))
        self.add_domain_event(CropNoteAdded(aggregate_id=self.uid, note_id=note.uid))
        return note

    def remove_note(self, uid: str | UUID) -> None:
        """
        Remove a note by its UID.

        Args:
            uid: Note UID, as a UUID or its string form

        Raises:
            CropNoteNotFoundError: If uid is empty, malformed or matches no note
        """
        if not uid:
            raise CropNoteNotFoundError("")

        if isinstance(uid, UUID):
            note_id = uid
        else:
            try:
                note_id = UUID(uid)
            except (AttributeError, TypeError, ValueError) as e:
                raise CropNoteNotFoundError(str(uid)) from e

        if note_id not in self._notes:
            logger.info(
                "crop_note_not_found", crop_uid=str(self.uid), note_uid=str(note_id)
            )
            raise CropNoteNotFoundError(str(uid))

        del self._notes[note_id]
        self.mark_updated()

        logger.debug("crop_note_removed", crop_uid=str(self.uid), note_uid=str(note_id))
        self.add_domain_event(CropNoteRemoved(aggregate_id=self.uid, note_id=note_id))

    def calculate_days_since_seeding(self, now: datetime | None = None) -> int:
        """
        Get the number of whole days since the batch was created.

        Args:
            now: Reference time, defaults to the current UTC time
        """
        now = now or datetime.utcnow()
        hours = int((now - self.created_date).total_seconds() / 3600)
        return int(hours / HOURS_PER_DAY)

    def get_crop_summary(self) -> dict:
        """Get crop batch information summary."""
        return {
            "uid": str(self.uid),
            "batch_id": self.batch_id,
            "initial_area": str(self.initial_area.uid),
            "current_areas": [str(area.uid) for area in self._current_areas],
            "crop_type": self.crop_type.code if self.crop_type else None,
            "container_type": self.container.type.code
            if self.container and self.container.type
            else None,
            "container_quantity": self.container.quantity if self.container else None,
            "note_count": self.note_count,
            "days_since_seeding": self.calculate_days_since_seeding(),
            "created_date": self.created_date.isoformat(),
        }

    @classmethod
    def create_batch(
        cls, area: Area, id_generator: IdentifierGenerator | None = None
    ) -> "Crop":
        """
        Factory method to start a new crop batch in an area.

        Args:
            area: Area the batch is planted in
            id_generator: Source of unique identifiers for the crop and its notes

        Returns:
            New Crop instance

        Raises:
            InvalidAreaError: If the area has no valid identifier
            IdentifierGenerationError: If no crop identifier can be generated
        """
        _validate_area(area)

        crop = cls(
            uid=ensure_identifier((id_generator or generate_identifier)()),
            initial_area=area,
            created_date=datetime.utcnow(),
        )
        crop._id_generator = id_generator

        logger.debug("crop_batch_created", crop_uid=str(crop.uid), area_uid=str(area.uid))
        crop.add_domain_event(CropBatchCreated(aggregate_id=crop.uid, area_id=area.uid))
        return crop
