"""Unit tests for crop container value objects."""

import pytest

from croptrack.domain.farm.value_objects.container import (
    CropContainer,
    CropContainerType,
    Pot,
    Tray,
    validate_crop_container,
)
from croptrack.domain.farm.value_objects.crop_type import Seeding
from croptrack.domain.farm.value_objects.enums import ContainerTypeCode
from croptrack.domain.shared.exceptions import InvalidContainerTypeError


class TestContainerTypes:
    """Test Tray and Pot value objects."""

    def test_tray_carries_cells(self):
        tray = Tray(cell=72)

        assert tray.code == "tray"
        assert tray.cell == 72

    def test_pot_has_no_cells(self):
        assert Pot().code == "pot"
        assert not hasattr(Pot(), "cell")

    def test_trays_compare_by_cells(self):
        assert Tray(cell=10) == Tray(cell=10)
        assert Tray(cell=10) != Tray(cell=20)
        assert Tray() != Pot()

    def test_has_cells(self):
        assert ContainerTypeCode.TRAY.has_cells
        assert not ContainerTypeCode.POT.has_cells


class TestCropContainer:
    """Test CropContainer value object."""

    def test_defaults(self):
        container = CropContainer()

        assert container.quantity == 0
        assert container.type is None

    @pytest.mark.parametrize("quantity", [-3, 0, 250])
    def test_quantity_accepted_as_is(self, quantity):
        assert CropContainer(quantity=quantity, type=Pot()).quantity == quantity

    def test_parses_serialized_tray(self):
        container = CropContainer(quantity=4, type={"code": "tray", "cell": 50})

        assert container.type == Tray(cell=50)

    def test_parses_serialized_pot(self):
        container = CropContainer.model_validate({"quantity": 9, "type": {"code": "pot"}})

        assert container == CropContainer(quantity=9, type=Pot())

    @pytest.mark.parametrize("data", [{"code": "crate"}, {"cell": 10}, {}])
    def test_rejects_serialized_unknown_type(self, data):
        with pytest.raises(InvalidContainerTypeError):
            CropContainer(quantity=1, type=data)

    def test_serialization_keeps_variant_data(self):
        container = CropContainer(quantity=2, type=Tray(cell=128))

        restored = CropContainer.model_validate(container.model_dump())

        assert restored == container

    def test_total_cells(self):
        assert CropContainer(quantity=3, type=Tray(cell=24)).total_cells == 72
        assert CropContainer(quantity=3, type=Pot()).total_cells is None

    @pytest.mark.parametrize(
        "code, data, expected",
        [
            ("tray", {"cell": 8}, Tray(cell=8)),
            (ContainerTypeCode.TRAY, {}, Tray(cell=0)),
            ("pot", {}, Pot()),
            ("pot", {"cell": 3}, Pot()),
        ],
    )
    def test_from_code(self, code, data, expected):
        assert CropContainerType.from_code(code, **data) == expected


class TestValidateCropContainer:
    """Test the container type gatekeeper."""

    @pytest.mark.parametrize("container_type", [Tray(cell=1), Pot()])
    def test_accepts_known_variants(self, container_type):
        container = CropContainer(quantity=1, type=container_type)

        assert validate_crop_container(container) is container

    @pytest.mark.parametrize(
        "container",
        [
            CropContainer(quantity=1, type=CropContainerType(code="tray")),
            CropContainer(quantity=1),
            Tray(),
            Seeding(),
            None,
        ],
        ids=["base-type", "no-type", "bare-tray", "crop-type", "none"],
    )
    def test_rejects_everything_else(self, container):
        with pytest.raises(InvalidContainerTypeError):
            validate_crop_container(container)
