"""Category groups: bulk on/off over a list of adapters."""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from home_devices.core.device import DeviceCategory

from .adapter import DeviceAdapter

logger = logging.getLogger(__name__)


class DeviceGroup(ABC):
    """Abstract group of adapters that can be switched together."""

    @abstractmethod
    def attach_adapter(self, adapter: DeviceAdapter) -> None:
        """
        Add an adapter to the group.

        Args:
            adapter: The adapter to add
        """
        pass

    @abstractmethod
    def perform_group_operation(self, turn_on: bool) -> None:
        """
        Switch every adapter in the group.

        Args:
            turn_on: Target state
        """
        pass


class CategoryGroup(DeviceGroup):
    """
    Adapters of one device category.

    The group operation is unconditional: every adapter is invoked, even if
    its device is already in the target state.
    """

    category: Optional[DeviceCategory] = None

    def __init__(
        self,
        category: Optional[DeviceCategory] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Initialize an empty group.

        Args:
            category: Category this group holds (None = class default)
            name: Display name (None = derived from the category)

        Raises:
            ValueError: If no category is given and the class has none
        """
        if category is not None:
            self.category = category
        if self.category is None:
            raise ValueError(f"{type(self).__name__} needs a device category")

        self.name = name or f"{self.category.value} devices"
        self._adapters: List[DeviceAdapter] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, adapters={len(self._adapters)})"

    def __len__(self) -> int:
        return len(self._adapters)

    @property
    def adapters(self) -> Tuple[DeviceAdapter, ...]:
        """Attached adapters in attachment order."""
        return tuple(self._adapters)

    def attach_adapter(self, adapter: DeviceAdapter) -> None:
        """
        Add an adapter to the group.

        Args:
            adapter: The adapter to add

        Raises:
            ValueError: If adapter is None or adapts another category
        """
        if adapter is None:
            raise ValueError(f"Cannot attach None adapter to group '{self.name}'")

        if adapter.category != self.category:
            raise ValueError(
                f"Group '{self.name}' holds {self.category.value} adapters, "
                f"got {adapter.category.value}"
            )

        self._adapters.append(adapter)
        logger.debug(f"Attached {adapter!r} to group '{self.name}'")

    def detach_adapter(self, adapter: DeviceAdapter) -> bool:
        """
        Remove the first attachment of an adapter.

        Args:
            adapter: The adapter to remove

        Returns:
            True if removed, False if the adapter was not attached

        Raises:
            ValueError: If adapter is None
        """
        if adapter is None:
            raise ValueError(f"Cannot detach None adapter from group '{self.name}'")

        for index, attached in enumerate(self._adapters):
            if attached is adapter:
                del self._adapters[index]
                logger.debug(f"Detached {adapter!r} from group '{self.name}'")
                return True

        return False

    def perform_group_operation(self, turn_on: bool) -> None:
        logger.info(f"Group {'on' if turn_on else 'off'} for '{self.name}'")

        for adapter in list(self._adapters):
            adapter.perform_operation(turn_on)


class LightType(CategoryGroup):
    category = DeviceCategory.LIGHT


class ThermostatType(CategoryGroup):
    category = DeviceCategory.THERMOSTAT


class CameraType(CategoryGroup):
    category = DeviceCategory.CAMERA
