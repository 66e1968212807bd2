"""Unique identifier generation for domain entities.

Aggregates draw their identifiers from an injectable generator so callers
(and tests) can supply deterministic values. Generators raise
``IdentifierGenerationError`` when no identifier can be produced.
"""

from collections.abc import Callable, Iterable, Iterator
from uuid import UUID, uuid4

from .exceptions import IdentifierGenerationError

NIL_UUID = UUID(int=0)

IdentifierGenerator = Callable[[], UUID]


def generate_identifier() -> UUID:
    """Generate a random (version 4) UUID from the system entropy source."""
    try:
        uid = uuid4()
    except (NotImplementedError, OSError) as e:
        raise IdentifierGenerationError(str(e)) from e
    return ensure_identifier(uid)


def ensure_identifier(uid: UUID) -> UUID:
    """Reject the nil UUID as a generated identifier."""
    if uid == NIL_UUID:
        raise IdentifierGenerationError("generator produced the nil UUID")
    return uid


def is_nil(uid: UUID | None) -> bool:
    """Check whether an identifier is absent or the zero value."""
    return uid is None or uid == NIL_UUID


class SequentialIdentifierGenerator:
    """Deterministic generator yielding identifiers from a fixed sequence."""

    def __init__(self, identifiers: Iterable[UUID]):
        self._identifiers: Iterator[UUID] = iter(identifiers)

    def __call__(self) -> UUID:
        try:
            uid = next(self._identifiers)
        except StopIteration:
            raise IdentifierGenerationError("identifier sequence exhausted") from None
        return ensure_identifier(uid)
