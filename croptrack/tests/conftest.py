from uuid import UUID, uuid4

import pytest

from croptrack.domain.farm.entities.crop import Crop
from croptrack.domain.farm.value_objects.references import Area
from croptrack.domain.shared.identifiers import SequentialIdentifierGenerator


def make_uuids(count: int) -> list[UUID]:
    """Build predictable, distinct, non-nil identifiers."""
    return [UUID(int=i) for i in range(1, count + 1)]


@pytest.fixture
def area() -> Area:
    return Area(uid=uuid4(), name="Greenhouse A")


@pytest.fixture
def other_area() -> Area:
    return Area(uid=uuid4(), name="Field 2")


@pytest.fixture
def identifiers() -> list[UUID]:
    return make_uuids(20)


@pytest.fixture
def id_generator(identifiers: list[UUID]) -> SequentialIdentifierGenerator:
    return SequentialIdentifierGenerator(identifiers)


@pytest.fixture
def crop(area: Area, id_generator: SequentialIdentifierGenerator) -> Crop:
    crop = Crop.create_batch(area, id_generator=id_generator)
    crop.clear_domain_events()
    return crop
