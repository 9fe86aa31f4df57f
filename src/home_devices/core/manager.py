"""
HomeManager: registry of rooms.

The HomeManager owns the room list, not the devices.
"""

from typing import Dict, List, Optional
import logging

from home_devices.core.device import Device
from home_devices.core.output import OutputSink
from home_devices.core.room import Room

logger = logging.getLogger(__name__)


class HomeManager:
    """
    Keeps track of the rooms in a home.

    Responsibilities:
    - Create, look up and delete rooms by ID
    - Put devices into rooms and answer "which rooms is this device in?"
    - Run a bulk operation across every room

    Does NOT own devices or listeners; those are built by the caller.
    """

    def __init__(self, sink: Optional[OutputSink] = None) -> None:
        """
        Initialize an empty home.

        Args:
            sink: Sink handed to every room created here (None = stdout)
        """
        self._rooms: Dict[str, Room] = {}
        self._sink = sink if sink is not None else OutputSink()

    def create_room(self, id: str, name: str) -> Room:
        """
        Create a new room.

        Args:
            id: Unique identifier
            name: Human-readable name

        Returns:
            The created Room

        Raises:
            ValueError: If a room with this ID already exists
        """
        if id in self._rooms:
            raise ValueError(f"Room with id '{id}' already exists")

        room = Room(name, sink=self._sink)
        self._rooms[id] = room
        logger.info(f"Created room: {id} ({name})")

        return room

    def get_room(self, room_id: str) -> Optional[Room]:
        """
        Get a room by ID.

        Args:
            room_id: The room ID

        Returns:
            The Room or None if not found
        """
        return self._rooms.get(room_id)

    def all_rooms(self) -> List[Room]:
        """All rooms, in creation order."""
        return list(self._rooms.values())

    def delete_room(self, room_id: str) -> Room:
        """
        Delete a room. Its devices are left untouched.

        Args:
            room_id: The room ID

        Returns:
            The deleted Room

        Raises:
            ValueError: If the room doesn't exist
        """
        if room_id not in self._rooms:
            raise ValueError(f"Room '{room_id}' does not exist")

        room = self._rooms.pop(room_id)
        logger.info(f"Deleted room: {room_id} ({room.name})")

        return room

    def add_device_to_room(self, device: Device, room_id: str) -> None:
        """
        Put a device into a room.

        Args:
            device: The device
            room_id: The room ID

        Raises:
            ValueError: If the room doesn't exist or device is None
        """
        room = self.get_room(room_id)
        if not room:
            raise ValueError(f"Room '{room_id}' does not exist")

        room.add_device(device)

    def remove_device_from_room(self, device: Device, room_id: str) -> bool:
        """
        Take a device out of a room.

        Args:
            device: The device
            room_id: The room ID

        Returns:
            True if removed, False if the device was not in the room

        Raises:
            ValueError: If the room doesn't exist or device is None
        """
        room = self.get_room(room_id)
        if not room:
            raise ValueError(f"Room '{room_id}' does not exist")

        return room.remove_device(device)

    def rooms_of(self, device: Device) -> List[Room]:
        """
        Get every room a device belongs to.

        Args:
            device: The device

        Returns:
            List of Rooms, in creation order
        """
        return [room for room in self._rooms.values() if device in room]

    def perform_bulk_operation(self, turn_on: bool) -> List[Device]:
        """
        Run the room bulk operation in every room, in creation order.

        A device in several rooms is switched at most once, since later
        rooms see it already in the target state.

        Args:
            turn_on: Target state

        Returns:
            The devices that were switched
        """
        switched = []
        for room in list(self._rooms.values()):
            switched.extend(room.perform_bulk_operation(turn_on))

        return switched
