"""Tests for category groups."""

import pytest

from home_devices import (
    CameraAdapter,
    CameraType,
    CategoryAdapter,
    CategoryGroup,
    Device,
    DeviceCategory,
    DeviceAdapter,
    DeviceGroup,
    LightAdapter,
    LightType,
    Logger,
    OutputSink,
    ThermostatType,
)


@pytest.fixture
def sink():
    """Create a sink that does not echo."""
    return OutputSink(echo=False)


@pytest.fixture
def lights(sink):
    """Two lights, both off."""
    return (
        Device("Porch Light", DeviceCategory.LIGHT, sink=sink),
        Device("Desk Light", DeviceCategory.LIGHT, sink=sink),
    )


class TestCategoryGroup:
    """Tests for attaching adapters and group operations."""

    def test_typed_groups_have_categories(self):
        """Test the three stock groups."""
        assert LightType().category is DeviceCategory.LIGHT
        assert ThermostatType().category is DeviceCategory.THERMOSTAT
        assert CameraType().category is DeviceCategory.CAMERA
        assert LightType().name == "light devices"

    def test_generic_group_needs_category(self):
        """Test a plain CategoryGroup must be told its category."""
        with pytest.raises(ValueError, match="needs a device category"):
            CategoryGroup()

        group = CategoryGroup(DeviceCategory.CAMERA, name="Outdoor cameras")
        assert group.name == "Outdoor cameras"

    def test_attach_keeps_order(self, lights):
        """Test adapters are kept in attachment order."""
        group = LightType()
        first, second = LightAdapter(lights[0]), LightAdapter(lights[1])

        group.attach_adapter(first)
        group.attach_adapter(second)

        assert group.adapters == (first, second)
        assert len(group) == 2

    def test_group_operation_in_order(self, lights, sink):
        """Test every adapter is invoked in attachment order."""
        group = LightType()
        for light in lights:
            group.attach_adapter(LightAdapter(light))

        group.perform_group_operation(True)

        assert all(light.is_on for light in lights)
        assert sink.lines() == ["Porch Light is turned on", "Desk Light is turned on"]

    def test_group_operation_is_unconditional(self, lights, sink):
        """Test devices already on are switched and notified again."""
        porch, desk = lights
        porch.attach(Logger(sink))
        porch.turn_on()
        group = LightType()
        group.attach_adapter(LightAdapter(porch))
        group.attach_adapter(LightAdapter(desk))
        sink.clear()

        group.perform_group_operation(True)

        assert sink.lines() == [
            "Porch Light is turned on",
            "Logger: Device 'Porch Light' state changed",
            "Desk Light is turned on",
        ]

    def test_group_off(self, lights):
        """Test a False target turns every device off."""
        group = LightType()
        for light in lights:
            light.turn_on()
            group.attach_adapter(LightAdapter(light))

        group.perform_group_operation(False)

        assert not any(light.is_on for light in lights)

    def test_detach_adapter(self, lights):
        """Test a detached adapter is no longer invoked."""
        porch, desk = lights
        group = LightType()
        porch_adapter = LightAdapter(porch)
        group.attach_adapter(porch_adapter)
        group.attach_adapter(LightAdapter(desk))

        assert group.detach_adapter(porch_adapter) is True
        assert group.detach_adapter(porch_adapter) is False
        group.perform_group_operation(True)

        assert porch.is_on is False
        assert desk.is_on is True


class TestCategoryGroupValidation:
    """Tests for attach errors."""

    def test_none_adapter_rejected(self):
        """Test None cannot be attached."""
        with pytest.raises(ValueError, match="Cannot attach None"):
            LightType().attach_adapter(None)

    def test_detach_none_rejected(self):
        """Test detaching None is an error, as with device listeners."""
        with pytest.raises(ValueError, match="Cannot detach None"):
            LightType().detach_adapter(None)

    def test_custom_adapter_category_checked(self):
        """Test any DeviceAdapter is matched on the category it reports."""

        class SirenAdapter(DeviceAdapter):
            @property
            def category(self):
                return DeviceCategory.CAMERA

            def perform_operation(self, turn_on):
                pass

        group = CameraType()
        group.attach_adapter(SirenAdapter())

        with pytest.raises(ValueError, match="holds light adapters"):
            LightType().attach_adapter(SirenAdapter())
        assert len(group) == 1

    def test_wrong_category_rejected(self, sink):
        """Test a camera adapter cannot join the light group."""
        camera = Device("Porch Camera", DeviceCategory.CAMERA, sink=sink)

        with pytest.raises(ValueError, match="holds light adapters"):
            LightType().attach_adapter(CameraAdapter(camera))

    def test_generic_adapter_of_wrong_category_rejected(self, sink):
        """Test the check uses the adapted device's category."""
        camera = Device("Porch Camera", DeviceCategory.CAMERA, sink=sink)

        with pytest.raises(ValueError):
            LightType().attach_adapter(CategoryAdapter(camera))

    def test_group_interface_is_abstract(self):
        """Test DeviceGroup cannot be instantiated."""
        with pytest.raises(TypeError):
            DeviceGroup()
