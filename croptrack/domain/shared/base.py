"""Base classes for domain entities and value objects."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .identifiers import is_nil


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __eq__(self, other: Any) -> bool:
        """Value objects are equal if all their attributes are equal."""
        if not isinstance(other, self.__class__):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        """Value objects with same values have same hash."""
        return hash((self.__class__, tuple(self.__dict__.values())))


class Entity(BaseModel, ABC):
    """Base class for entities (have identity, can change over time)."""

    uid: UUID = Field(frozen=True)
    created_date: datetime = Field(default_factory=datetime.utcnow, frozen=True)
    updated_date: datetime | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    @field_validator("uid")
    @classmethod
    def uid_not_nil(cls, v):
        if is_nil(v):
            raise ValueError("Entity identifier cannot be the nil UUID")
        return v

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.uid == other.uid

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.uid)

    def mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_date = datetime.utcnow()

    @abstractmethod
    def is_valid(self) -> bool:
        """Validate business rules for this entity."""
        pass


class DomainEvent(BaseModel):
    """Base class for domain events."""

    event_id: UUID = Field(default_factory=uuid4)
    occurred_at: datetime = Field(default_factory=datetime.utcnow)
    aggregate_id: UUID
    event_version: int = 1

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class AggregateRoot(Entity, ABC):
    """Base class for aggregate roots (entities that control consistency boundaries)."""

    _domain_events: list[DomainEvent] = PrivateAttr(default_factory=list)

    def add_domain_event(self, event: DomainEvent) -> None:
        """Add a domain event to be published."""
        self._domain_events.append(event)

    def clear_domain_events(self) -> None:
        """Clear all domain events (typically after publishing)."""
        self._domain_events.clear()

    def get_domain_events(self) -> list[DomainEvent]:
        """Get all pending domain events."""
        return self._domain_events.copy()

    def __copy__(self):
        copied = super().__copy__()
        copied._domain_events = list(self._domain_events)
        return copied
