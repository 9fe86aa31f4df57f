"""
Device listeners.

A listener reacts to a device's state-change event. The three stock
listeners only differ in the label they prefix their record with.
"""

from abc import ABC, abstractmethod
from typing import Optional

from home_devices.core.device import DeviceView
from home_devices.core.output import OutputSink


class DeviceListener(ABC):
    """Something that wants to hear about device state changes."""

    @abstractmethod
    def on_update(self, device: DeviceView) -> None:
        """
        React to a state change.

        Args:
            device: Snapshot of the device after the change
        """
        pass


class LabelledListener(DeviceListener):
    """Listener that writes one labelled line per notification."""

    label = "Listener"

    def __init__(self, label: Optional[str] = None, sink: Optional[OutputSink] = None) -> None:
        if label is not None:
            self.label = label
        self._sink = sink if sink is not None else OutputSink()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.label!r})"

    def on_update(self, device: DeviceView) -> None:
        self._sink.emit(
            f"{self.label}: Device '{device.name}' state changed",
            source="listener",
            device_name=device.name,
        )


class Logger(LabelledListener):
    label = "Logger"

    def __init__(self, sink: Optional[OutputSink] = None) -> None:
        super().__init__(sink=sink)


class SecurityNotifier(LabelledListener):
    label = "Security Notifier"

    def __init__(self, sink: Optional[OutputSink] = None) -> None:
        super().__init__(sink=sink)


class UserNotifier(LabelledListener):
    label = "User Notifier"

    def __init__(self, sink: Optional[OutputSink] = None) -> None:
        super().__init__(sink=sink)
