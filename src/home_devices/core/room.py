"""
Room: a named group of devices in one physical place.

A Room does not own its devices; the same device can sit in several rooms.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from home_devices.core.device import Device
from home_devices.core.output import OutputSink

logger = logging.getLogger(__name__)


class Room:
    """
    Devices grouped by location.

    The bulk operation only switches devices whose state differs from the
    target, so running it twice is a no-op the second time.
    """

    def __init__(self, name: str, sink: Optional[OutputSink] = None) -> None:
        """
        Initialize an empty room.

        Args:
            name: Human-readable room name
            sink: Where bulk-operation headers go (None = a new stdout sink)
        """
        self.name = name
        self._devices: List[Device] = []
        self._sink = sink if sink is not None else OutputSink()

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, devices={len(self._devices)})"

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[Device]:
        return iter(list(self._devices))

    def __contains__(self, device: object) -> bool:
        return any(d is device for d in self._devices)

    @property
    def devices(self) -> Tuple[Device, ...]:
        """Member devices in insertion order."""
        return tuple(self._devices)

    def add_device(self, device: Device) -> None:
        """
        Add a device to the room.

        Args:
            device: The device to add

        Raises:
            ValueError: If device is None
        """
        if device is None:
            raise ValueError(f"Cannot add None device to room '{self.name}'")

        self._devices.append(device)
        logger.debug(f"Added device '{device.name}' to room '{self.name}'")

    def remove_device(self, device: Device) -> bool:
        """
        Remove a device from the room.

        If the device is not in the room, this is a no-op.

        Args:
            device: The device to remove

        Returns:
            True if the device was removed, False if it was not a member

        Raises:
            ValueError: If device is None
        """
        if device is None:
            raise ValueError(f"Cannot remove None device from room '{self.name}'")

        for index, member in enumerate(self._devices):
            if member is device:
                del self._devices[index]
                logger.debug(f"Removed device '{device.name}' from room '{self.name}'")
                return True

        return False

    def perform_bulk_operation(self, turn_on: bool) -> List[Device]:
        """
        Switch every member that is not already in the target state.

        Args:
            turn_on: Target state

        Returns:
            The devices that were switched, in room order
        """
        self._sink.emit(f"Performing operation in {self.name}", source="room")
        logger.info(f"Bulk {'on' if turn_on else 'off'} in room '{self.name}'")

        switched = []
        for device in list(self._devices):
            if device.is_on == turn_on:
                continue

            if turn_on:
                device.turn_on()
            else:
                device.turn_off()
            switched.append(device)

        return switched
