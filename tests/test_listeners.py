"""Tests for the stock listeners."""

import pytest

from home_devices import (
    DeviceCategory,
    DeviceListener,
    DeviceView,
    LabelledListener,
    Logger,
    OutputSink,
    SecurityNotifier,
    UserNotifier,
)


@pytest.fixture
def sink():
    """Create a sink that does not echo."""
    return OutputSink(echo=False)


@pytest.fixture
def view():
    """A view of a switched-on camera."""
    return DeviceView(name="Front Camera", category=DeviceCategory.CAMERA, is_on=True)


class TestStockListeners:
    """The three stock listeners only differ by label."""

    @pytest.mark.parametrize(
        "listener_cls,label",
        [
            (Logger, "Logger"),
            (SecurityNotifier, "Security Notifier"),
            (UserNotifier, "User Notifier"),
        ],
    )
    def test_record_text(self, sink, view, listener_cls, label):
        """Test each listener writes its labelled line."""
        listener = listener_cls(sink)

        listener.on_update(view)

        assert sink.lines() == [f"{label}: Device 'Front Camera' state changed"]
        assert sink.records[0].source == "listener"
        assert sink.records[0].device_name == "Front Camera"

    def test_listeners_are_device_listeners(self):
        """Test the stock listeners share one interface."""
        for listener_cls in (Logger, SecurityNotifier, UserNotifier):
            assert issubclass(listener_cls, DeviceListener)

    def test_custom_label(self, sink, view):
        """Test a labelled listener with a custom label."""
        listener = LabelledListener("Garage Panel", sink=sink)

        listener.on_update(view)

        assert sink.lines() == ["Garage Panel: Device 'Front Camera' state changed"]

    def test_default_sink_prints(self, view, capsys):
        """Test a listener without a sink prints to stdout."""
        Logger().on_update(view)

        assert capsys.readouterr().out == "Logger: Device 'Front Camera' state changed\n"


def test_listener_interface_is_abstract():
    """Test DeviceListener cannot be instantiated."""
    with pytest.raises(TypeError):
        DeviceListener()
