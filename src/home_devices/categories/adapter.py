"""
Device adapters for category groups.

An adapter binds one device to a uniform on/off operation so that a
category group can drive any kind of device the same way.

Unlike Room, adapters never look at the current state: every call is
forwarded to the device, and every call notifies its listeners.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from home_devices.core.device import Device, DeviceCategory

logger = logging.getLogger(__name__)


class DeviceAdapter(ABC):
    """
    Abstract on/off interface used by category groups.

    Implementations decide how a boolean target maps onto a device.
    """

    @property
    @abstractmethod
    def category(self) -> DeviceCategory:
        """Category of the adapted device."""
        pass

    @abstractmethod
    def perform_operation(self, turn_on: bool) -> None:
        """
        Switch the adapted device.

        Args:
            turn_on: True to turn on, False to turn off
        """
        pass


class CategoryAdapter(DeviceAdapter):
    """
    Adapter bound to exactly one device for its whole lifetime.

    Subclasses pin ``accepts`` to a category; the base class accepts any
    device.
    """

    accepts: Optional[DeviceCategory] = None

    def __init__(self, device: Device) -> None:
        """
        Bind the adapter to a device.

        Args:
            device: The device to drive

        Raises:
            ValueError: If device is None or of the wrong category
        """
        if device is None:
            raise ValueError(f"{type(self).__name__} needs a device")

        if self.accepts is not None and device.category != self.accepts:
            raise ValueError(
                f"{type(self).__name__} only adapts {self.accepts.value} devices, "
                f"got '{device.name}' ({device.category.value})"
            )

        self._device = device

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._device.name!r})"

    @property
    def device(self) -> Device:
        return self._device

    @property
    def category(self) -> DeviceCategory:
        return self._device.category

    def perform_operation(self, turn_on: bool) -> None:
        logger.debug(f"Forwarding {'on' if turn_on else 'off'} to device '{self._device.name}'")
        if turn_on:
            self._device.turn_on()
        else:
            self._device.turn_off()


class LightAdapter(CategoryAdapter):
    accepts = DeviceCategory.LIGHT


class ThermostatAdapter(CategoryAdapter):
    accepts = DeviceCategory.THERMOSTAT


class CameraAdapter(CategoryAdapter):
    accepts = DeviceCategory.CAMERA
