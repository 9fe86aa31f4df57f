"""
home-devices: a small smart-home device control library.

This library provides:
- Switchable devices with synchronous listener notification
- Rooms for idempotent bulk operations by location
- Category adapters and groups for unconditional bulk operations by device kind
- An ordered output sink standing in for the console
"""

from home_devices.core.output import OutputSink, Record, RecordFilter
from home_devices.core.device import Device, DeviceCategory, DeviceView
from home_devices.core.listeners import (
    DeviceListener,
    LabelledListener,
    Logger,
    SecurityNotifier,
    UserNotifier,
)
from home_devices.core.room import Room
from home_devices.core.manager import HomeManager
from home_devices.categories import (
    DeviceAdapter,
    CategoryAdapter,
    LightAdapter,
    ThermostatAdapter,
    CameraAdapter,
    DeviceGroup,
    CategoryGroup,
    LightType,
    ThermostatType,
    CameraType,
)

__version__ = "0.1.0"

__all__ = [
    "OutputSink",
    "Record",
    "RecordFilter",
    "Device",
    "DeviceCategory",
    "DeviceView",
    "DeviceListener",
    "LabelledListener",
    "Logger",
    "SecurityNotifier",
    "UserNotifier",
    "Room",
    "HomeManager",
    "DeviceAdapter",
    "CategoryAdapter",
    "LightAdapter",
    "ThermostatAdapter",
    "CameraAdapter",
    "DeviceGroup",
    "CategoryGroup",
    "LightType",
    "ThermostatType",
    "CameraType",
]
