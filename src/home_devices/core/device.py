"""
Device model.

A Device is a named on/off state holder that notifies its listeners,
synchronously and in attachment order, every time it is switched.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from home_devices.core.output import OutputSink

if TYPE_CHECKING:
    from home_devices.core.listeners import DeviceListener

logger = logging.getLogger(__name__)


class DeviceCategory(Enum):
    """Kinds of devices in the home."""

    LIGHT = "light"
    THERMOSTAT = "thermostat"
    CAMERA = "camera"


@dataclass(frozen=True)
class DeviceView:
    """
    Read-only snapshot of a device, handed to listeners.

    Attributes:
        name: Device name
        category: Device category
        is_on: State at the time the snapshot was taken
    """

    name: str
    category: DeviceCategory
    is_on: bool


class Device:
    """
    A switchable device.

    State only changes through turn_on() and turn_off(). Both always notify,
    even when the device is already in the requested state; callers that
    want to skip no-op transitions (see Room) check is_on first.
    """

    def __init__(
        self,
        name: str,
        category: DeviceCategory,
        sink: Optional[OutputSink] = None,
    ) -> None:
        """
        Initialize a device. Devices start switched off.

        Args:
            name: Human-readable name, fixed for the device's lifetime
            category: Device category
            sink: Where transition records go (None = a new stdout sink)
        """
        self._name = name
        self._category = category
        self._is_on = False
        self._listeners: List["DeviceListener"] = []
        self._sink = sink if sink is not None else OutputSink()

    def __repr__(self) -> str:
        return f"Device(name={self._name!r}, category={self._category.value}, is_on={self._is_on})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> DeviceCategory:
        return self._category

    @property
    def is_on(self) -> bool:
        return self._is_on

    @property
    def listeners(self) -> Tuple["DeviceListener", ...]:
        """Attached listeners in attachment order (duplicates included)."""
        return tuple(self._listeners)

    def view(self) -> DeviceView:
        """Snapshot of the current name, category and state."""
        return DeviceView(name=self._name, category=self._category, is_on=self._is_on)

    def turn_on(self) -> None:
        """Switch the device on and notify all listeners."""
        self._is_on = True
        self._sink.emit(f"{self._name} is turned on", source="device", device_name=self._name)
        self.notify()

    def turn_off(self) -> None:
        """Switch the device off and notify all listeners."""
        self._is_on = False
        self._sink.emit(f"{self._name} Device is turned off", source="device", device_name=self._name)
        self.notify()

    def attach(self, listener: "DeviceListener") -> None:
        """
        Attach a listener.

        Attaching the same listener twice is allowed; it is then notified
        twice per transition.

        Args:
            listener: The listener to attach

        Raises:
            ValueError: If listener is None
        """
        if listener is None:
            raise ValueError(f"Cannot attach None listener to device '{self._name}'")

        self._listeners.append(listener)
        logger.debug(f"Attached {type(listener).__name__} to device '{self._name}'")

    def detach(self, listener: "DeviceListener") -> bool:
        """
        Detach the first attachment of a listener.

        Args:
            listener: The listener to detach

        Returns:
            True if the listener was attached and has been removed,
            False if it was not attached (nothing changes)

        Raises:
            ValueError: If listener is None
        """
        if listener is None:
            raise ValueError(f"Cannot detach None listener from device '{self._name}'")

        for index, attached in enumerate(self._listeners):
            if attached is listener:
                del self._listeners[index]
                logger.debug(f"Detached {type(listener).__name__} from device '{self._name}'")
                return True

        return False

    def notify(self) -> None:
        """
        Run one notification round with the current state.

        Listeners added or removed by a listener during the round only take
        effect from the next round.
        """
        view = self.view()
        listeners = list(self._listeners)
        logger.debug(f"Notifying {len(listeners)} listener(s) of device '{self._name}'")

        for listener in listeners:
            listener.on_update(view)
